# src/fruit_slicer/ui/input.py
#
# Single-pointer input fed by cv2.setMouseCallback.
# The callback only records state; the frame loop samples it once per tick.

from typing import Tuple

import cv2


class MouseInput:
    def __init__(self):
        self.pos: Tuple[int, int] = (0, 0)
        self.down: bool = False
        self._pressed: bool = False

    def on_mouse(self, event: int, x: int, y: int, flags: int, param=None) -> None:
        self.pos = (int(x), int(y))
        if event == cv2.EVENT_LBUTTONDOWN:
            self.down = True
            self._pressed = True
        elif event == cv2.EVENT_LBUTTONUP:
            self.down = False

    def attach(self, window_name: str) -> None:
        cv2.setMouseCallback(window_name, self.on_mouse)

    def consume_press(self) -> bool:
        """True once per button press, so a held button does not repeat clicks."""
        pressed = self._pressed
        self._pressed = False
        return pressed

    def reset(self) -> None:
        self.down = False
        self._pressed = False
