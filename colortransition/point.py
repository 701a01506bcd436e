from __future__ import annotations
from typing import Any

from .types.color_types import RGB, Byte, PointTuple, validate_byte


class TransitionPoint:
    """
    A control point of a color transition: maps one grayscale coordinate
    to an RGB color.

    Instances are immutable and compare by value, so they can be shared
    between transitions and used as dict keys.
    """
    __slots__ = ('_coordinate', '_red', '_green', '_blue', '_is_frozen')  # no __dict__, frozen after init

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, coordinate: Byte, red: Byte, green: Byte, blue: Byte) -> None:
        self._coordinate = validate_byte(coordinate, "coordinate")
        self._red = validate_byte(red, "red")
        self._green = validate_byte(green, "green")
        self._blue = validate_byte(blue, "blue")

        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def coordinate(self) -> Byte:
        return self._coordinate

    @property
    def red(self) -> Byte:
        return self._red

    @property
    def green(self) -> Byte:
        return self._green

    @property
    def blue(self) -> Byte:
        return self._blue

    @property
    def color(self) -> RGB:
        return (self._red, self._green, self._blue)

    def as_tuple(self) -> PointTuple:
        return (self._coordinate, self._red, self._green, self._blue)

    def with_color(self, red: Byte, green: Byte, blue: Byte) -> TransitionPoint:
        """Return a new point at the same coordinate with another color."""
        return self.__class__(self._coordinate, red, green, blue)

    @classmethod
    def coerce(cls, point: Any) -> TransitionPoint:
        """Accept a TransitionPoint or a (coordinate, red, green, blue) sequence."""
        if isinstance(point, TransitionPoint):
            return point
        try:
            coordinate, red, green, blue = point
        except (TypeError, ValueError):
            raise TypeError(
                f"expected TransitionPoint or 4-item sequence, got {point!r}"
            ) from None
        return cls(coordinate, red, green, blue)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TransitionPoint):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def __hash__(self) -> int:
        return hash(self.as_tuple())

    def __lt__(self, other: TransitionPoint) -> bool:
        if not isinstance(other, TransitionPoint):
            return NotImplemented
        return self.as_tuple() < other.as_tuple()

    def __iter__(self):
        return iter(self.as_tuple())

    def __repr__(self) -> str:
        return (
            f"TransitionPoint(coordinate={self._coordinate}, red={self._red}, "
            f"green={self._green}, blue={self._blue})"
        )
