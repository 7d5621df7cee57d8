# src/fruit_slicer/game/state.py

from enum import Enum, auto


class Phase(Enum):
    MENU = auto()
    PLAYING = auto()
    GAME_OVER = auto()
    TERMINATED = auto()


class Event(Enum):
    START = auto()
    EXIT = auto()
    HEALTH_DEPLETED = auto()
    RESTART = auto()
    QUIT = auto()


_TRANSITIONS = {
    (Phase.MENU, Event.START): Phase.PLAYING,
    (Phase.MENU, Event.EXIT): Phase.TERMINATED,
    (Phase.PLAYING, Event.HEALTH_DEPLETED): Phase.GAME_OVER,
    (Phase.GAME_OVER, Event.RESTART): Phase.PLAYING,
}


def transition(phase: Phase, event: Event) -> Phase:
    """Next phase for `event`; unknown pairs keep the current phase."""
    if phase is Phase.TERMINATED:
        return phase
    if event is Event.QUIT:
        return Phase.TERMINATED
    return _TRANSITIONS.get((phase, event), phase)
