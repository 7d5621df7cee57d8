import random

import pytest

from fruit_slicer.config import GameConfig
from fruit_slicer.game.game_core import Game, SessionState
from fruit_slicer.game.objects import GameObject, ObjectKind
from fruit_slicer.game.state import Phase


@pytest.fixture
def cfg():
    return GameConfig()


@pytest.fixture
def game(cfg):
    return Game(cfg, random.Random(1234))


@pytest.fixture
def playing(cfg):
    """Playing session with an empty board and a spawn timer far from firing."""
    return SessionState(phase=Phase.PLAYING, score=0, health=cfg.initial_health, spawn_timer=0)


def make(kind, x, y, speed=3.0, peak=480.0, rising=True, direction=0):
    return GameObject(x=float(x), y=float(y), speed=speed, kind=kind, peak_height=peak, rising=rising, direction=direction)


@pytest.fixture
def fruit_at():
    return lambda x, y, **kw: make(ObjectKind.FRUIT, x, y, **kw)


@pytest.fixture
def bomb_at():
    return lambda x, y, **kw: make(ObjectKind.BOMB, x, y, **kw)
