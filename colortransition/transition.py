from __future__ import annotations
from bisect import bisect_left
from operator import attrgetter
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from numpy import ndarray as NDArray

from .errors import TransitionDestroyedError
from .interpolation import sample
from .lookup import apply_lookup_table, build_lookup_table
from .point import TransitionPoint
from .serialization import (
    PathLike,
    points_from_string,
    points_to_string,
    read_transition_text,
    write_transition_text,
)
from .types.color_types import RGB, Byte, PointTuple, validate_byte
from .utils.logging import get_logger

logger = get_logger(__name__)

_coordinate = attrgetter("coordinate")


class ColorTransition:
    """
    Piecewise-linear mapping from grayscale values (0..255) to RGB colors.

    The transition holds a list of control points kept strictly ascending by
    coordinate, with at most one point per coordinate. Any gray value is
    colored by linear interpolation between its two bracketing points, and
    values outside the points' range take the nearest boundary color.

    Features:
    - Add, overwrite and remove control points
    - Scalar lookup (get_color) and whole-array recoloring (apply)
    - Text serialization with a length bound, and file load/save
    - Explicit lifecycle: init / destroy, or use as a context manager

    Example:
        >>> t = ColorTransition()
        >>> t.add_point(0, 0, 0, 0)
        >>> t.add_point(100, 100, 200, 50)
        >>> t.get_color(50)
        (50, 100, 25)
        >>> t.to_string()
        '0,0,0,0;100,100,200,50;'
    """

    def __init__(self) -> None:
        self._points: Optional[List[TransitionPoint]] = None
        self._table: Optional[NDArray] = None
        self.init()

    # ------------------ LIFECYCLE ------------------
    def init(self) -> bool:
        """
        (Re)initialise the transition as empty.

        Returns:
            True on success, False if storage could not be allocated, in
            which case the transition is left destroyed
        """
        self.destroy()
        try:
            self._points = self._new_storage()
        except MemoryError:
            logger.warning("Could not allocate color transition storage")
            return False
        return True

    def _new_storage(self) -> List[TransitionPoint]:
        return []

    def destroy(self) -> None:
        """Release all points. Calling it again is a no-op."""
        self._points = None
        self._table = None

    @property
    def is_destroyed(self) -> bool:
        return self._points is None

    def _storage(self) -> List[TransitionPoint]:
        if self._points is None:
            raise TransitionDestroyedError(
                "color transition has been destroyed; call init() before using it"
            )
        return self._points

    def __enter__(self) -> ColorTransition:
        self._storage()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.destroy()

    @classmethod
    def from_points(cls, points: Iterable[Union[TransitionPoint, PointTuple]]) -> ColorTransition:
        """Build a transition from TransitionPoints or (coordinate, r, g, b) tuples."""
        transition = cls()
        for point in points:
            transition._insert(TransitionPoint.coerce(point))
        return transition

    @classmethod
    def from_file(cls, path: PathLike) -> ColorTransition:
        """
        Load a transition from a file.

        Raises:
            OSError: If the file cannot be read
        """
        transition = cls()
        transition.from_string(read_transition_text(path))
        return transition

    def copy(self) -> ColorTransition:
        """Return an independent transition with the same points."""
        return self.__class__.from_points(self._storage())

    # ------------------ MUTATION ------------------
    def _insert(self, point: TransitionPoint) -> None:
        points = self._storage()
        i = bisect_left(points, point.coordinate, key=_coordinate)
        if i < len(points) and points[i].coordinate == point.coordinate:
            points[i] = point
        else:
            points.insert(i, point)
        self._table = None

    def add_point(self, coordinate: Byte, red: Byte, green: Byte, blue: Byte) -> None:
        """
        Add a control point, or overwrite the color of the point already at
        coordinate. The ascending order is preserved.

        Raises:
            TypeError, ValueError: If any argument is not an integer in 0..255
            MemoryError: If the point list cannot grow; stored points are kept
        """
        self._insert(TransitionPoint(coordinate, red, green, blue))

    def remove_point(self, coordinate: Byte) -> None:
        """Remove the point at coordinate. Does nothing if there is none."""
        coordinate = validate_byte(coordinate, "coordinate")
        points = self._storage()
        i = bisect_left(points, coordinate, key=_coordinate)
        if i < len(points) and points[i].coordinate == coordinate:
            del points[i]
            self._table = None

    # ------------------ QUERY ------------------
    def get_color(self, coordinate: Byte) -> RGB:
        """
        Return the color mapped to a grayscale value.

        An empty transition maps everything to black (0, 0, 0).
        """
        coordinate = validate_byte(coordinate, "coordinate")
        return sample(self._storage(), coordinate)

    def lookup_table(self) -> NDArray:
        """
        Return the read-only (256, 3) uint8 table of all mapped colors.

        The table is cached until the next mutation.
        """
        points = self._storage()
        if self._table is None:
            logger.debug("Building lookup table for %d points", len(points))
            self._table = build_lookup_table(points)
        return self._table

    def apply(self, gray: NDArray) -> NDArray:
        """
        Recolor a grayscale array.

        Args:
            gray: Integer array of any shape with values in 0..255

        Returns:
            uint8 array of shape gray.shape + (3,)
        """
        return apply_lookup_table(self.lookup_table(), gray)

    @property
    def points(self) -> Tuple[TransitionPoint, ...]:
        """Snapshot of the control points, ascending by coordinate."""
        return tuple(self._storage())

    def __len__(self) -> int:
        return len(self._storage())

    def __iter__(self) -> Iterator[TransitionPoint]:
        return iter(tuple(self._storage()))

    def __contains__(self, coordinate: object) -> bool:
        return any(p.coordinate == coordinate for p in self._storage())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorTransition):
            return NotImplemented
        return self._points == other._points

    def __repr__(self) -> str:
        if self.is_destroyed:
            return f"{self.__class__.__name__}(<destroyed>)"
        return f"{self.__class__.__name__}({self.to_string()!r})"

    # ------------------ SERIALIZATION ------------------
    def to_string(self, max_length: Optional[int] = None) -> str:
        """
        Serialize the transition as ``c,r,g,b;c,r,g,b;...``.

        Args:
            max_length: Upper bound on the result length. Only whole points
                that fit are written. None writes every point.
        """
        return points_to_string(self._storage(), max_length)

    def from_string(self, text: str) -> None:
        """
        Replace all points with the ones parsed from text.

        Malformed fragments are dropped, later duplicates of a coordinate
        overwrite earlier ones and the result is sorted regardless of the
        input order.
        """
        self._storage()
        parsed = points_from_string(text)
        self.init()
        for point in parsed:
            self._insert(point)

    def load_from_file(self, path: PathLike) -> bool:
        """
        Initialise the transition from a file. Works on destroyed transitions.

        Returns:
            True on success. On failure the transition is left empty and
            False is returned.
        """
        if not self.init():
            return False
        try:
            text = read_transition_text(path)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not load color transition from %s: %s", path, e)
            return False
        self.from_string(text)
        return True

    def save_to_file(self, path: PathLike) -> bool:
        """
        Write every point of the transition to a file.

        Returns:
            True on success, False if the file could not be written
        """
        text = self.to_string()
        try:
            write_transition_text(path, text)
        except OSError as e:
            logger.warning("Could not save color transition to %s: %s", path, e)
            return False
        return True
