"""
Dense grayscale-to-RGB lookup tables.

A transition's control points are sparse; recoloring whole images is done
through a 256-row table built here with numpy and indexed by gray value.
The table uses the same integer rounding as ``interpolation.sample``.
"""
from __future__ import annotations
from typing import Sequence

import numpy as np
from numpy import ndarray as NDArray

from .point import TransitionPoint
from .types.color_types import BYTE_MAX, BYTE_MIN, DEFAULT_COLOR, LEVELS


def build_lookup_table(points: Sequence[TransitionPoint]) -> NDArray:
    """
    Build the (256, 3) uint8 table of a transition.

    Args:
        points: Control points sorted ascending by coordinate

    Returns:
        Read-only array whose row g is the color of gray value g
    """
    gray = np.arange(LEVELS, dtype=np.int64)

    if not points:
        table = np.tile(np.array(DEFAULT_COLOR, dtype=np.uint8), (LEVELS, 1))
        table.setflags(write=False)
        return table

    coords = np.array([p.coordinate for p in points], dtype=np.int64)
    colors = np.array([p.color for p in points], dtype=np.int64)

    if len(points) == 1:
        values = np.tile(colors[0], (LEVELS, 1))
    else:
        # Bracket index per gray level, kept inside [0, n - 2]
        idx = np.searchsorted(coords, gray, side="right") - 1
        idx = np.clip(idx, 0, len(points) - 2)

        x0 = coords[idx][:, None]
        span = (coords[idx + 1] - coords[idx])[:, None]
        c0 = colors[idx]
        c1 = colors[idx + 1]
        offset = (gray[:, None] - x0)

        # Zero-width pairs take the lower color, divide by 1 to stay warning free
        flat = span == 0
        safe_span = np.where(flat, 1, span)
        # Round half up in integer arithmetic, numpy floors negative quotients
        values = c0 + (2 * (c1 - c0) * offset + safe_span) // (2 * safe_span)
        values = np.where(flat, c0, values)

        values[gray <= coords[0]] = colors[0]
        values[gray >= coords[-1]] = colors[-1]

    table = np.clip(values, BYTE_MIN, BYTE_MAX).astype(np.uint8)
    table.setflags(write=False)
    return table


def apply_lookup_table(table: NDArray, gray: NDArray) -> NDArray:
    """
    Recolor a grayscale array through a lookup table.

    Args:
        table: (256, 3) table from build_lookup_table
        gray: Integer array of any shape with values in 0..255

    Returns:
        uint8 array of shape gray.shape + (3,)

    Raises:
        ValueError: If gray is not an integer array or holds values outside 0..255
    """
    gray = np.asarray(gray)
    if gray.dtype.kind not in "iu":
        raise ValueError(f"gray values must be an integer array, got dtype {gray.dtype}")
    if gray.size and (gray.min() < BYTE_MIN or gray.max() > BYTE_MAX):
        raise ValueError(
            f"gray values must be in [{BYTE_MIN}, {BYTE_MAX}], "
            f"got range [{gray.min()}, {gray.max()}]"
        )
    return table[gray]
