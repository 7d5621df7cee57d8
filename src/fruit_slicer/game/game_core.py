import logging
import random
from dataclasses import dataclass, field, replace
from typing import List, Optional, Tuple

from ..config import GameConfig
from .collision import was_sliced
from .objects import GameObject, ObjectKind, advance, make_object
from .spawner import Spawner
from .state import Event, Phase, transition

logger = logging.getLogger(__name__)

Point = Tuple[int, int]


@dataclass
class Shake:
    intensity: int
    duration: int


@dataclass
class SessionState:
    phase: Phase = Phase.MENU
    score: int = 0
    health: int = 0
    objects: List[GameObject] = field(default_factory=list)
    spawn_timer: int = 0
    prev_pointer: Optional[Point] = None


class Game:
    def __init__(self, cfg: Optional[GameConfig] = None, rng: Optional[random.Random] = None):
        self.cfg = cfg or GameConfig()
        self.rng = rng or random.Random()
        self.spawner = Spawner(self.cfg, self.rng)

    def new_session(self, phase: Phase = Phase.PLAYING) -> SessionState:
        # timer primed so the first playing tick spawns straight away
        return SessionState(
            phase=phase,
            score=0,
            health=self.cfg.initial_health,
            objects=[],
            spawn_timer=self.cfg.spawn_interval - 1,
            prev_pointer=None,
        )

    def handle(self, session: SessionState, event: Event) -> SessionState:
        phase = transition(session.phase, event)
        if phase is session.phase:
            return session
        if phase is Phase.PLAYING:
            logger.info("new session (%s from %s)", event.name, session.phase.name)
            return self.new_session(Phase.PLAYING)
        return replace(session, phase=phase)

    def tick(self, session: SessionState, pointer_down: bool, pointer: Point) -> Tuple[SessionState, List[Shake]]:
        """
        One playing frame: spawn -> slice -> advance -> prune.
        Outside PLAYING the session is returned untouched.
        """
        if session.phase is not Phase.PLAYING:
            return session, []

        cfg = self.cfg
        timer, spawned = self.spawner.update(session.spawn_timer)
        objects = session.objects + spawned

        # a fresh press has no swipe yet
        prev = session.prev_pointer if session.prev_pointer is not None else pointer

        score = session.score
        health = session.health
        effects: List[Shake] = []
        survivors: List[GameObject] = []

        for obj in objects:
            if (pointer_down and not obj.sliced and obj.kind is not ObjectKind.FRAGMENT
                    and was_sliced(obj, prev, pointer, cfg.object_size)):
                obj.sliced = True
                if obj.kind is ObjectKind.BOMB:
                    health -= 1
                    effects.append(Shake(cfg.shake_intensity, cfg.shake_duration))
                    logger.info("bomb sliced, health %d", health)
                    continue

                score += cfg.fruit_score
                r = cfg.radius
                survivors.append(make_object(obj.x, obj.y, ObjectKind.FRAGMENT, cfg, self.rng, direction=-1))
                survivors.append(make_object(obj.x + r, obj.y, ObjectKind.FRAGMENT, cfg, self.rng, direction=1))
                logger.debug("fruit sliced at (%.0f, %.0f), score %d", obj.x, obj.y, score)
                continue

            if obj.sliced:
                continue

            advance(obj, cfg)
            if not obj.is_offscreen(cfg.screen_height):
                survivors.append(obj)

        phase = session.phase
        if health <= 0:
            phase = transition(phase, Event.HEALTH_DEPLETED)
            logger.info("game over, final score %d", score)

        next_session = SessionState(
            phase=phase,
            score=score,
            health=health,
            objects=survivors,
            spawn_timer=timer,
            prev_pointer=pointer if pointer_down else None,
        )
        return next_session, effects
