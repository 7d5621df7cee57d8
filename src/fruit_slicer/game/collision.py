import math

from ..config import MIN_SWIPE_LENGTH, MIN_SWIPE_MOVEMENT_SQ


def swipe_hits_circle(p1, p2, cx, cy, r, reach):
    """
    Three-gate swipe test against a circle (cx, cy, r).

    - the infinite line through p1 -> p2 passes within r of the center
    - the swipe end point p2 is closer than `reach` to the center
    - the swipe moved more than MIN_SWIPE_MOVEMENT_SQ (squared px)
    """
    x1, y1 = p1
    x2, y2 = p2

    dx = x2 - x1
    dy = y2 - y1

    length = math.hypot(dx, dy)
    if length < MIN_SWIPE_LENGTH:
        return False

    # line: dy*x - dx*y + (dx*y1 - dy*x1) = 0
    dist = abs(dy * cx - dx * cy + dx * y1 - dy * x1) / length
    intersects = dist <= r

    close_enough = math.hypot(x2 - cx, y2 - cy) < reach

    has_movement = (dx * dx + dy * dy) > MIN_SWIPE_MOVEMENT_SQ

    return intersects and close_enough and has_movement


def was_sliced(obj, prev, curr, object_size):
    r = object_size // 4
    cx, cy = obj.center(object_size)
    return swipe_hits_circle(prev, curr, cx, cy, r, object_size)
