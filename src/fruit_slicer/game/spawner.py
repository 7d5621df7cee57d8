import random

from .objects import ObjectKind, make_object


class Spawner:
    """Frame-count spawn policy: one fruit per interval, sometimes a bomb too."""

    def __init__(self, cfg, rng=None):
        self.cfg = cfg
        self.rng = rng or random.Random()

    def _random_x(self):
        return self.rng.randint(0, self.cfg.screen_width - self.cfg.object_size)

    def update(self, timer):
        """
        Advance the spawn timer by one frame.
        Returns (new_timer, spawned_objects).
        """
        timer += 1
        if timer < self.cfg.spawn_interval:
            return timer, []

        y = self.cfg.screen_height
        spawned = [make_object(self._random_x(), y, ObjectKind.FRUIT, self.cfg, self.rng)]
        if self.rng.random() < self.cfg.bomb_chance:
            spawned.append(make_object(self._random_x(), y, ObjectKind.BOMB, self.cfg, self.rng))
        return 0, spawned
