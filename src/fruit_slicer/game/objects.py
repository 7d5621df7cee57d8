# src/fruit_slicer/game/objects.py
#
# Simulated bodies and their per-frame motion.
# - Fruit / Bomb: rise at constant speed until peak_height, then fall forever
# - Fragment: straight diagonal drift downwards, never rises

import random
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Tuple

from ..config import GameConfig


class ObjectKind(Enum):
    FRUIT = auto()
    BOMB = auto()
    FRAGMENT = auto()


@dataclass
class GameObject:
    x: float
    y: float
    speed: float
    kind: ObjectKind
    peak_height: float
    rising: bool = True
    sliced: bool = False
    direction: int = 0  # fragments only: -1 left, +1 right

    def center(self, object_size: int) -> Tuple[float, float]:
        r = object_size // 4
        return self.x + r, self.y + r

    def is_offscreen(self, height: int) -> bool:
        return self.y > height


def draw_speed(rng: random.Random) -> float:
    # {3.0, 4.5, 6.0, 7.5}
    return (rng.randint(0, 3) + 2) * 1.5


def make_object(x, y, kind: ObjectKind, cfg: GameConfig, rng: Optional[random.Random] = None, direction: int = 0) -> GameObject:
    """
    Build an object with a freshly drawn speed.
    Faster objects peak higher (smaller y): peak = screen_height - speed * peak_factor.
    """
    rng = rng or random
    speed = draw_speed(rng)
    return GameObject(
        x=float(x),
        y=float(y),
        speed=speed,
        kind=kind,
        peak_height=cfg.screen_height - speed * cfg.peak_factor,
        direction=direction,
    )


def advance(obj: GameObject, cfg: GameConfig) -> None:
    if obj.kind is ObjectKind.FRAGMENT:
        obj.y += obj.speed
        obj.x += obj.direction * cfg.fragment_horizontal_rate
        return

    if obj.rising:
        obj.y -= obj.speed
        if obj.y <= obj.peak_height:
            obj.rising = False
    else:
        obj.y += obj.speed
