import random

import pytest

from colortransition import (
    DEFAULT_COLOR,
    TransitionPoint,
    find_bracket,
    find_bracket_linear,
    interpolate_color,
    sample,
)
from colortransition.interpolation import interpolate_channel, round_half_up_div


def points(*tuples):
    return [TransitionPoint(*t) for t in tuples]


def test_round_half_up():
    assert round_half_up_div(5, 2) == 3    # 2.5
    assert round_half_up_div(-5, 2) == -2  # -2.5
    assert round_half_up_div(7, 3) == 2    # 2.33
    assert round_half_up_div(8, 3) == 3    # 2.67
    assert round_half_up_div(-1, 2) == 0   # -0.5


def test_interpolate_channel_degenerate_span():
    assert interpolate_channel(40, 200, 10, 10, 10) == 40


def test_interpolate_channel_rounding():
    # 0 -> 255 over 0..2, midpoint 127.5 rounds up
    assert interpolate_channel(0, 255, 1, 0, 2) == 128
    # 255 -> 0 over 0..2, midpoint 127.5 rounds up
    assert interpolate_channel(255, 0, 1, 0, 2) == 128


def test_empty_is_black():
    assert sample([], 0) == DEFAULT_COLOR == (0, 0, 0)
    assert sample([], 200) == (0, 0, 0)


def test_single_point_everywhere():
    pts = points((100, 10, 20, 30))
    for x in (0, 99, 100, 101, 255):
        assert sample(pts, x) == (10, 20, 30)


def test_boundary_clamp():
    pts = points((50, 255, 0, 0), (200, 0, 0, 255))
    assert sample(pts, 0) == (255, 0, 0)
    assert sample(pts, 50) == (255, 0, 0)
    assert sample(pts, 200) == (0, 0, 255)
    assert sample(pts, 255) == (0, 0, 255)


def test_linear_exactness():
    pts = points((0, 0, 0, 0), (100, 100, 200, 50))
    assert sample(pts, 50) == (50, 100, 25)
    assert sample(pts, 25) == (25, 50, 13)  # 12.5 rounds up
    assert sample(pts, 1) == (1, 2, 1)      # 0.5 rounds up


def test_exact_control_point_hit():
    pts = points((0, 0, 0, 0), (100, 10, 20, 30), (200, 255, 255, 255))
    assert sample(pts, 100) == (10, 20, 30)


def test_descending_channel():
    pts = points((0, 200, 100, 0), (10, 100, 0, 0))
    assert sample(pts, 5) == (150, 50, 0)
    assert sample(pts, 3) == (170, 70, 0)


def test_interpolate_color_between_pair():
    p0, p1 = points((10, 0, 0, 0), (20, 100, 100, 100))
    assert interpolate_color(p0, p1, 15) == (50, 50, 50)


def test_find_bracket_selects_adjacent_pair():
    pts = points((0, 0, 0, 0), (10, 0, 0, 0), (20, 0, 0, 0), (255, 0, 0, 0))
    assert find_bracket(pts, 5) == (0, 1)
    assert find_bracket(pts, 10) == (1, 2)
    assert find_bracket(pts, 19) == (1, 2)
    assert find_bracket(pts, 254) == (2, 3)


def test_binary_and_linear_search_agree():
    rng = random.Random(1234)
    for _ in range(50):
        coords = sorted(rng.sample(range(256), rng.randint(2, 20)))
        pts = [TransitionPoint(c, rng.randrange(256), rng.randrange(256), rng.randrange(256)) for c in coords]
        for x in range(coords[0], coords[-1] + 1):
            assert find_bracket(pts, x) == find_bracket_linear(pts, x)


def test_searches_agree_outside_point_range():
    pts = points((40, 0, 0, 0), (100, 0, 0, 0), (180, 0, 0, 0))
    for x in range(256):
        assert find_bracket(pts, x) == find_bracket_linear(pts, x)
    assert find_bracket_linear(pts, 0) == (0, 1)
    assert find_bracket_linear(pts, 255) == (1, 2)
