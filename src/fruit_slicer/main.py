# src/fruit_slicer/main.py
#
# OpenCV front-end for the slicing game:
#   MouseInput -> Game.tick -> render -> ScreenShake -> cv2.imshow
#
# Run from the project root:
#     python -m fruit_slicer.main
# or, once installed:
#     fruit-slicer
#
# Keys:
#   r      - restart (game over screen)
#   q/Esc  - quit

from __future__ import annotations

import logging
import random
from typing import Optional

import cv2 as cv

from .config import FRAME_DELAY_MS, WINDOW_NAME, GameConfig
from .game.game_core import Game, SessionState
from .game.state import Event, Phase
from .game.trails import PointerTrail
from .ui.effects import ScreenShake
from .ui.input import MouseInput
from .ui.menu import MenuUI, default_buttons
from .ui.render import (
    blank_frame,
    draw_game_over,
    draw_hud,
    draw_objects,
    draw_trail,
    load_background,
    resolve_background_path,
)

logger = logging.getLogger(__name__)

KEY_ESC = 27


def key_event(key: int, phase: Phase) -> Optional[Event]:
    """Map a cv.waitKey code to a phase event."""
    if key in (ord("q"), KEY_ESC):
        return Event.QUIT
    if phase is Phase.GAME_OVER and key in (ord("r"), ord("R")):
        return Event.RESTART
    return None


def window_closed(name: str) -> bool:
    return cv.getWindowProperty(name, cv.WND_PROP_VISIBLE) < 1


def run(cfg: Optional[GameConfig] = None, seed: Optional[int] = None) -> SessionState:
    cfg = cfg or GameConfig()
    rng = random.Random(seed)

    background = load_background(resolve_background_path(), cfg.screen_width, cfg.screen_height)

    cv.namedWindow(WINDOW_NAME, cv.WINDOW_AUTOSIZE)
    mouse = MouseInput()
    mouse.attach(WINDOW_NAME)

    game = Game(cfg, rng)
    menu = MenuUI(default_buttons(cfg.screen_width, cfg.screen_height))
    trail = PointerTrail()
    shake = ScreenShake(rng)
    session = SessionState(phase=Phase.MENU)

    print("Fruit Slicer started.")
    print("Keys: r restart (after game over) | q/Esc quit")

    while session.phase is not Phase.TERMINATED:
        frame = blank_frame(cfg.screen_width, cfg.screen_height, background)
        pressed = mouse.consume_press()

        if session.phase is Phase.MENU:
            choice = menu.update(mouse.pos, pressed)
            if choice == "start":
                session = game.handle(session, Event.START)
                trail.clear()
            elif choice == "exit":
                session = game.handle(session, Event.EXIT)
            menu.draw(frame, mouse.pos)

        else:
            if session.phase is Phase.PLAYING:
                if mouse.down:
                    trail.add(*mouse.pos)
                session, effects = game.tick(session, mouse.down, mouse.pos)
                for fx in effects:
                    shake.trigger(fx.intensity, fx.duration)

            draw_objects(frame, session.objects, cfg.object_size)
            draw_trail(frame, trail)
            draw_hud(frame, session.score, session.health)
            if session.phase is Phase.GAME_OVER:
                draw_game_over(frame)

            frame = shake.apply(frame)

        cv.imshow(WINDOW_NAME, frame)

        key = cv.waitKey(FRAME_DELAY_MS) & 0xFF
        event = key_event(key, session.phase)
        if event is None and window_closed(WINDOW_NAME):
            event = Event.QUIT
        if event is not None:
            session = game.handle(session, event)
            if event is Event.RESTART:
                trail.clear()
                mouse.reset()

    logger.info("terminated with score %d", session.score)
    return session


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    try:
        run()
    finally:
        cv.destroyAllWindows()


if __name__ == "__main__":
    main()
