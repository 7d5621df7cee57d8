from ..config import TRAIL_LENGTH


class PointerTrail:
    """Recent pointer positions, oldest first. Drawing only, never hit-tested."""

    def __init__(self, max_len=TRAIL_LENGTH):
        self.max_len = max_len
        self.points = []

    def add(self, x, y):
        self.points.append((int(x), int(y)))
        if len(self.points) > self.max_len:
            self.points.pop(0)

    def clear(self):
        self.points = []

    def __len__(self):
        return len(self.points)
