"""
Text form of a color transition.

Grammar::

    transition := point (';' point)* ';'?
    point      := coordinate ',' red ',' green ',' blue

Every field is a decimal integer in 0..255. ``points_to_string`` writes each
record followed by ``;`` and only ever emits whole records, so a bounded
string is a valid prefix of the unbounded one. ``points_from_string`` is
lenient: fragments that are not exactly four bytes are dropped.
"""
from __future__ import annotations
import os
from typing import Iterable, List, Optional, Union

from .point import TransitionPoint
from .types.color_types import is_byte
from .utils.logging import get_logger

logger = get_logger(__name__)

POINT_SEPARATOR = ";"
FIELD_SEPARATOR = ","
ENCODING = "utf-8"
MAX_FIELD_DIGITS = 3

PathLike = Union[str, "os.PathLike[str]"]


def format_point(point: TransitionPoint) -> str:
    return FIELD_SEPARATOR.join(str(v) for v in point.as_tuple()) + POINT_SEPARATOR


def points_to_string(points: Iterable[TransitionPoint], max_length: Optional[int] = None) -> str:
    """
    Serialize points in the given order.

    Args:
        points: Points to write, expected ascending by coordinate
        max_length: Upper bound on the length of the result, None for no bound

    Returns:
        The serialized text, len(text) <= max_length

    Raises:
        ValueError: If max_length is negative
    """
    if max_length is not None and max_length < 0:
        raise ValueError(f"max_length must be non-negative, got {max_length}")

    parts: List[str] = []
    length = 0
    for point in points:
        record = format_point(point)
        if max_length is not None and length + len(record) > max_length:
            break
        parts.append(record)
        length += len(record)
    return "".join(parts)


def parse_point(fragment: str) -> Optional[TransitionPoint]:
    """
    Parse one ``c,r,g,b`` record, returning None if it is malformed.

    Fields longer than three digits are malformed without converting them,
    int() refuses very long digit strings.
    """
    fields = [f.strip() for f in fragment.split(FIELD_SEPARATOR)]
    if len(fields) != 4:
        return None
    values = []
    for field in fields:
        # isdigit() alone accepts non-ASCII digits such as '²'
        if not (field.isascii() and field.isdigit()) or len(field) > MAX_FIELD_DIGITS:
            return None
        values.append(int(field))
    if not all(is_byte(v) for v in values):
        return None
    return TransitionPoint(*values)


def points_from_string(text: str) -> List[TransitionPoint]:
    """
    Parse serialized text into points, in the order they appear.

    Empty fragments are skipped, malformed ones are dropped and logged.

    Raises:
        TypeError: If text is not a str
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be a str, got {type(text).__name__}")

    points = []
    for fragment in text.split(POINT_SEPARATOR):
        if not fragment.strip():
            continue
        point = parse_point(fragment)
        if point is None:
            logger.debug("Dropping malformed transition fragment %r", fragment)
            continue
        points.append(point)
    return points


def read_transition_text(path: PathLike) -> str:
    """Read the whole transition file. Raises OSError on failure."""
    with open(path, "r", encoding=ENCODING) as f:
        return f.read()


def write_transition_text(path: PathLike, text: str) -> None:
    """Write text as the entire content of the file. Raises OSError on failure."""
    with open(path, "w", encoding=ENCODING) as f:
        f.write(text)
