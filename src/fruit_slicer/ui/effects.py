# src/fruit_slicer/ui/effects.py
#
# Screen shake as a frame-countdown: trigger() arms it, apply() jitters
# each rendered frame until the countdown runs out. Never blocks the loop.

import random
from typing import Optional, Tuple

import numpy as np


class ScreenShake:
    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()
        self.intensity = 0
        self.frames_left = 0

    @property
    def active(self) -> bool:
        return self.frames_left > 0

    def trigger(self, intensity: int, duration: int) -> None:
        # overlapping shakes keep the stronger / longer one
        self.intensity = max(self.intensity if self.active else 0, int(intensity))
        self.frames_left = max(self.frames_left, int(duration))

    def next_offset(self) -> Tuple[int, int]:
        if not self.active:
            return 0, 0
        self.frames_left -= 1
        i = self.intensity
        return self.rng.randint(-i, i), self.rng.randint(-i, i)

    def apply(self, frame: np.ndarray) -> np.ndarray:
        """Return the frame shifted by this frame's offset (uncovered edges black)."""
        ox, oy = self.next_offset()
        if ox == 0 and oy == 0:
            return frame

        h, w = frame.shape[:2]
        out = np.zeros_like(frame)
        src_x0, dst_x0 = max(0, -ox), max(0, ox)
        src_y0, dst_y0 = max(0, -oy), max(0, oy)
        cw, ch = w - abs(ox), h - abs(oy)
        if cw <= 0 or ch <= 0:
            return out
        out[dst_y0:dst_y0 + ch, dst_x0:dst_x0 + cw] = frame[src_y0:src_y0 + ch, src_x0:src_x0 + cw]
        return out
