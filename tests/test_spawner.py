import random

from fruit_slicer.config import GameConfig
from fruit_slicer.game.objects import ObjectKind
from fruit_slicer.game.spawner import Spawner


def test_nothing_before_interval(cfg):
    spawner = Spawner(cfg, random.Random(0))
    timer = 0
    for _ in range(cfg.spawn_interval - 1):
        timer, spawned = spawner.update(timer)
        assert spawned == []
    assert timer == cfg.spawn_interval - 1


def test_fruit_on_interval_and_timer_resets(cfg):
    spawner = Spawner(cfg, random.Random(0))
    timer, spawned = spawner.update(cfg.spawn_interval - 1)
    assert timer == 0
    assert spawned[0].kind is ObjectKind.FRUIT
    for obj in spawned:
        assert obj.y == cfg.screen_height
        assert 0 <= obj.x <= cfg.screen_width - cfg.object_size
        assert obj.rising and not obj.sliced


def test_bomb_chance_extremes():
    always = Spawner(GameConfig(bomb_chance=1.0), random.Random(0))
    never = Spawner(GameConfig(bomb_chance=0.0), random.Random(0))
    _, a = always.update(10 ** 6)
    _, n = never.update(10 ** 6)
    assert [o.kind for o in a] == [ObjectKind.FRUIT, ObjectKind.BOMB]
    assert [o.kind for o in n] == [ObjectKind.FRUIT]


def test_bomb_rate_roughly_one_in_three(cfg):
    spawner = Spawner(cfg, random.Random(42))
    bombs = 0
    rounds = 3000
    for _ in range(rounds):
        _, spawned = spawner.update(cfg.spawn_interval)
        bombs += sum(1 for o in spawned if o.kind is ObjectKind.BOMB)
    assert 0.28 < bombs / rounds < 0.39
