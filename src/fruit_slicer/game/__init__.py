from .collision import swipe_hits_circle, was_sliced
from .game_core import Game, SessionState, Shake
from .objects import GameObject, ObjectKind, advance, make_object
from .spawner import Spawner
from .state import Event, Phase, transition
