# src/fruit_slicer/ui/menu.py
# Start / Exit menu: rectangular buttons + hover highlight + click to select.

from dataclasses import dataclass
from typing import List, Optional, Tuple

import cv2


@dataclass
class Button:
    key: str
    label: str
    rect: Tuple[int, int, int, int]  # x, y, w, h

    def contains(self, x: int, y: int) -> bool:
        rx, ry, rw, rh = self.rect
        return (rx <= x <= rx + rw) and (ry <= y <= ry + rh)


def default_buttons(width: int, height: int, btn_w: int = 200, btn_h: int = 56) -> List[Button]:
    """Start above and Exit below the screen centre."""
    x = width // 2 - btn_w // 2
    return [
        Button("start", "Start", (x, height // 2 - 50 - btn_h // 2, btn_w, btn_h)),
        Button("exit", "Exit", (x, height // 2 + 50 - btn_h // 2, btn_w, btn_h)),
    ]


class MenuUI:
    def __init__(self, buttons: List[Button]):
        self.buttons = buttons
        self._hover_key: Optional[str] = None

    def hovered(self, cursor_xy: Optional[Tuple[int, int]]) -> Optional[Button]:
        if cursor_xy is None:
            return None
        cx, cy = cursor_xy
        for b in self.buttons:
            if b.contains(cx, cy):
                return b
        return None

    def update(self, cursor_xy: Optional[Tuple[int, int]], pressed: bool) -> Optional[str]:
        """
        Returns button.key if the pointer was pressed over a button this frame.
        """
        hovered = self.hovered(cursor_xy)
        self._hover_key = hovered.key if hovered is not None else None

        if hovered is not None and pressed:
            return hovered.key
        return None

    def draw(self, frame, cursor_xy: Optional[Tuple[int, int]]):
        """
        Draw buttons + simple hover highlight.
        """
        for b in self.buttons:
            x, y, w, h = b.rect
            is_hover = (b.key == self._hover_key)
            # white border; fill if hovered
            if is_hover:
                cv2.rectangle(frame, (x, y), (x + w, y + h), (60, 60, 60), thickness=-1)
            cv2.rectangle(frame, (x, y), (x + w, y + h), (255, 255, 255), thickness=2)

            (tw, th), _ = cv2.getTextSize(b.label, cv2.FONT_HERSHEY_SIMPLEX, 0.9, 2)
            cv2.putText(
                frame,
                b.label,
                (x + (w - tw) // 2, y + (h + th) // 2),
                cv2.FONT_HERSHEY_SIMPLEX,
                0.9,
                (255, 255, 255),
                2,
            )

        # cursor
        if cursor_xy is not None:
            cx, cy = cursor_xy
            cv2.circle(frame, (cx, cy), 10, (255, 255, 255), thickness=2)
            cv2.circle(frame, (cx, cy), 3, (255, 255, 255), thickness=-1)
