from __future__ import annotations
from typing import Tuple
import numpy as np

Byte = int
RGB = Tuple[Byte, Byte, Byte]
PointTuple = Tuple[Byte, Byte, Byte, Byte]

BYTE_MIN = 0
BYTE_MAX = 255
LEVELS = BYTE_MAX + 1

# Color returned when a transition holds no points
DEFAULT_COLOR: RGB = (0, 0, 0)

valid_byte_types = (int, np.integer)


def is_byte(value: object) -> bool:
    """Check if value is an integer in the 0..255 range."""
    if isinstance(value, bool) or not isinstance(value, valid_byte_types):
        return False
    return BYTE_MIN <= int(value) <= BYTE_MAX


def validate_byte(value: object, name: str = "value") -> Byte:
    """
    Validate a single-byte channel or coordinate.

    Args:
        value: Value to check (int or numpy integer)
        name: Field name used in the error message

    Returns:
        The value as a plain int

    Raises:
        TypeError: If value is not an integer
        ValueError: If value is outside 0..255
    """
    if isinstance(value, bool) or not isinstance(value, valid_byte_types):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    value = int(value)
    if not BYTE_MIN <= value <= BYTE_MAX:
        raise ValueError(f"{name} must be in [{BYTE_MIN}, {BYTE_MAX}], got {value}")
    return value
