"""
Scalar interpolation between transition control points.

All arithmetic is done on integers so the result for a given bracket is
exact and identical to the vectorized lookup table in ``lookup.py``.
Rounding is half up: 12.5 becomes 13 and -0.5 becomes 0.
"""
from __future__ import annotations
from bisect import bisect_right
from typing import Sequence, Tuple

from .point import TransitionPoint
from .types.color_types import BYTE_MAX, BYTE_MIN, DEFAULT_COLOR, RGB, Byte


def round_half_up_div(numerator: int, denominator: int) -> int:
    """Integer division rounded to nearest, ties toward +infinity (denominator > 0)."""
    return (2 * numerator + denominator) // (2 * denominator)


def interpolate_channel(c0: int, c1: int, x: int, x0: int, x1: int) -> Byte:
    """
    Linearly interpolate one channel between (x0, c0) and (x1, c1).

    Args:
        c0, c1: Channel values at the bracket ends
        x: Queried coordinate
        x0, x1: Bracket coordinates

    Returns:
        Rounded channel value clamped to 0..255
    """
    span = x1 - x0
    if span == 0:
        return c0
    value = c0 + round_half_up_div((c1 - c0) * (x - x0), span)
    return max(BYTE_MIN, min(value, BYTE_MAX))


def interpolate_color(p0: TransitionPoint, p1: TransitionPoint, x: int) -> RGB:
    x0, x1 = p0.coordinate, p1.coordinate
    return (
        interpolate_channel(p0.red, p1.red, x, x0, x1),
        interpolate_channel(p0.green, p1.green, x, x0, x1),
        interpolate_channel(p0.blue, p1.blue, x, x0, x1),
    )


def _coordinate(point: TransitionPoint) -> int:
    return point.coordinate


def find_bracket(points: Sequence[TransitionPoint], x: int) -> Tuple[int, int]:
    """
    Binary search for the bracketing pair of x.

    Args:
        points: Control points, strictly ascending by coordinate (len >= 2)
        x: Coordinate inside [points[0].coordinate, points[-1].coordinate]

    Returns:
        Indices (i, i + 1) with points[i].coordinate <= x <= points[i + 1].coordinate
    """
    i = bisect_right(points, x, key=_coordinate) - 1
    i = max(0, min(i, len(points) - 2))
    return i, i + 1


def find_bracket_linear(points: Sequence[TransitionPoint], x: int) -> Tuple[int, int]:
    """Reference linear search, same contract as find_bracket."""
    if x < points[0].coordinate:
        return 0, 1
    for i in range(len(points) - 1):
        if points[i].coordinate <= x < points[i + 1].coordinate:
            return i, i + 1
    return len(points) - 2, len(points) - 1


def sample(points: Sequence[TransitionPoint], x: int) -> RGB:
    """
    Map a grayscale coordinate to a color.

    Args:
        points: Control points sorted ascending by coordinate
        x: Grayscale value 0..255

    Returns:
        DEFAULT_COLOR for no points, the boundary color outside the points'
        range, otherwise the interpolated color of the bracketing pair
    """
    if not points:
        return DEFAULT_COLOR
    first, last = points[0], points[-1]
    if x <= first.coordinate:
        return first.color
    if x >= last.coordinate:
        return last.color
    lo, hi = find_bracket(points, x)
    return interpolate_color(points[lo], points[hi], x)
