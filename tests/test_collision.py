import pytest

from fruit_slicer.game.collision import swipe_hits_circle, was_sliced


def test_horizontal_swipe_through_center_hits():
    assert swipe_hits_circle((150, 200), (210, 200), 200, 200, 30, 120)


def test_zero_length_swipe_rejected():
    assert not swipe_hits_circle((200, 200), (200, 200), 200, 200, 30, 120)


def test_micro_jitter_never_slices():
    assert not swipe_hits_circle((100, 100), (102, 100), 100, 100, 30, 120)
    # exactly 25 squared units is still too little
    assert not swipe_hits_circle((100, 100), (103, 104), 100, 100, 30, 120)


def test_line_through_center_but_far_endpoint_rejected():
    assert not swipe_hits_circle((0, 200), (-500, 200), 200, 200, 30, 120)


def test_line_misses_circle():
    # passes 40px above the center, radius 30
    assert not swipe_hits_circle((150, 160), (210, 160), 200, 200, 30, 120)


def test_line_at_radius_counts_as_hit():
    assert swipe_hits_circle((150, 170), (210, 170), 200, 200, 30, 120)


def test_endpoint_lagging_within_reach_still_hits():
    # swipe ends 100px short of the center, still inside the 120px reach
    assert swipe_hits_circle((0, 200), (100, 200), 200, 200, 30, 120)
    assert not swipe_hits_circle((0, 200), (80, 200), 200, 200, 30, 120)


@pytest.mark.parametrize("shift", [(0, 0), (37, -12), (-300, 450), (1000, 1000)])
def test_translation_invariance(shift):
    sx, sy = shift
    cases = [
        ((150, 200), (210, 200)),
        ((0, 200), (-500, 200)),
        ((100, 100), (102, 100)),
        ((170, 150), (230, 250)),
        ((150, 160), (210, 160)),
    ]
    for p1, p2 in cases:
        base = swipe_hits_circle(p1, p2, 200, 200, 30, 120)
        moved = swipe_hits_circle((p1[0] + sx, p1[1] + sy), (p2[0] + sx, p2[1] + sy), 200 + sx, 200 + sy, 30, 120)
        assert base == moved


def test_was_sliced_uses_offset_center(fruit_at):
    # box top-left (100, 100), size 120 -> center (130, 130), r 30
    fruit = fruit_at(100, 100)
    assert was_sliced(fruit, (80, 130), (140, 130), 120)
    # same swipe through the top-left corner misses the circle
    assert not was_sliced(fruit, (40, 95), (100, 95), 120)
