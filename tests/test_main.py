import pytest

from fruit_slicer.config import GameConfig
from fruit_slicer.game.state import Event, Phase
from fruit_slicer.main import KEY_ESC, key_event


@pytest.mark.parametrize("phase", [Phase.MENU, Phase.PLAYING, Phase.GAME_OVER])
def test_quit_keys(phase):
    assert key_event(ord("q"), phase) is Event.QUIT
    assert key_event(KEY_ESC, phase) is Event.QUIT


def test_restart_key_only_on_game_over():
    assert key_event(ord("r"), Phase.GAME_OVER) is Event.RESTART
    assert key_event(ord("R"), Phase.GAME_OVER) is Event.RESTART
    assert key_event(ord("r"), Phase.PLAYING) is None
    assert key_event(ord("r"), Phase.MENU) is None


def test_no_key():
    # cv.waitKey(...) & 0xFF when nothing was pressed
    assert key_event(255, Phase.PLAYING) is None


@pytest.mark.parametrize("kwargs", [
    {"object_size": 0},
    {"object_size": 900},
    {"spawn_interval": 0},
    {"initial_health": 0},
    {"bomb_chance": 1.5},
    {"peak_factor": 0},
    {"screen_height": -1},
])
def test_config_rejects_impossible_values(kwargs):
    with pytest.raises(ValueError):
        GameConfig(**kwargs)


def test_config_defaults():
    cfg = GameConfig()
    assert cfg.radius == 30
    assert cfg.initial_health == 5
    assert cfg.spawn_interval == 40
