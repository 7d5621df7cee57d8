# src/fruit_slicer/ui/render.py
#
# Render sink: turns core data (objects, score, health, phase) into pixels
# on a BGR numpy frame. No game logic lives here.

import os
from typing import Iterable, Optional

import cv2
import numpy as np

from ..config import BACKGROUND_ENV, BACKGROUND_PATH
from ..game.objects import GameObject, ObjectKind
from ..game.trails import PointerTrail

# BGR
FRUIT_COLOR = (0, 0, 255)
FRAGMENT_COLOR = (0, 165, 255)
BOMB_COLOR = (40, 40, 40)
BOMB_RIM_COLOR = (0, 0, 200)
TEXT_COLOR = (255, 255, 255)
GAME_OVER_COLOR = (0, 0, 255)
TRAIL_COLOR = (255, 255, 255)


def blank_frame(width: int, height: int, background: Optional[np.ndarray] = None) -> np.ndarray:
    if background is not None:
        return background.copy()
    return np.zeros((height, width, 3), dtype=np.uint8)


def resolve_background_path() -> Optional[str]:
    """
    FRUIT_SLICER_BACKGROUND wins and must exist.
    Otherwise the bundled assets/background.png is used if present.
    """
    override = os.environ.get(BACKGROUND_ENV)
    if override:
        if not os.path.isfile(override):
            raise FileNotFoundError(
                f"Background image not found: {override}\n"
                f"Fix {BACKGROUND_ENV} or unset it to use the default."
            )
        return override
    return BACKGROUND_PATH if os.path.isfile(BACKGROUND_PATH) else None


def load_background(path: Optional[str], width: int, height: int) -> Optional[np.ndarray]:
    if path is None:
        return None
    img = cv2.imread(path, cv2.IMREAD_COLOR)
    if img is None:
        raise RuntimeError(f"OpenCV could not decode background image: {path}")
    return cv2.resize(img, (width, height), interpolation=cv2.INTER_AREA)


def draw_objects(frame: np.ndarray, objects: Iterable[GameObject], object_size: int) -> None:
    r = object_size // 4
    for obj in objects:
        cx, cy = obj.center(object_size)
        center = (int(cx), int(cy))
        if obj.kind is ObjectKind.BOMB:
            cv2.circle(frame, center, r, BOMB_COLOR, thickness=-1, lineType=cv2.LINE_AA)
            cv2.circle(frame, center, r, BOMB_RIM_COLOR, thickness=3, lineType=cv2.LINE_AA)
        elif obj.kind is ObjectKind.FRUIT:
            cv2.circle(frame, center, r, FRUIT_COLOR, thickness=-1, lineType=cv2.LINE_AA)
        else:
            cv2.circle(frame, center, r, FRAGMENT_COLOR, thickness=-1, lineType=cv2.LINE_AA)


def draw_trail(frame: np.ndarray, trail: PointerTrail) -> None:
    pts = trail.points
    for i in range(1, len(pts)):
        cv2.line(frame, pts[i - 1], pts[i], TRAIL_COLOR, 2, cv2.LINE_AA)


def draw_hud(frame: np.ndarray, score: int, health: int) -> None:
    cv2.putText(frame, f"Score: {score}", (10, 30), cv2.FONT_HERSHEY_SIMPLEX, 0.8, TEXT_COLOR, 2, cv2.LINE_AA)
    cv2.putText(frame, f"HP: {health}", (10, 60), cv2.FONT_HERSHEY_SIMPLEX, 0.8, TEXT_COLOR, 2, cv2.LINE_AA)


def draw_game_over(frame: np.ndarray, text: str = "Game Over! Press R to Restart") -> None:
    h, w = frame.shape[:2]
    (tw, th), _ = cv2.getTextSize(text, cv2.FONT_HERSHEY_SIMPLEX, 1.0, 2)
    cv2.putText(
        frame, text,
        ((w - tw) // 2, (h + th) // 2),
        cv2.FONT_HERSHEY_SIMPLEX, 1.0, GAME_OVER_COLOR, 2, cv2.LINE_AA
    )
