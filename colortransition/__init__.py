"""
colortransition - Grayscale to RGB Color Transitions
====================================================

Recolor grayscale data (height maps, intensity maps, procedural noise) with
a piecewise-linear color gradient defined by a handful of control points.

Key Features
------------
- Sorted control points on the 0..255 grayscale axis, one per coordinate
- Exact integer interpolation with clamping outside the points' range
- Vectorized recoloring of whole numpy arrays through a cached lookup table
- Compact text form (``c,r,g,b;...``) with a length bound, and file load/save

Quick Start
-----------
>>> from colortransition import ColorTransition
>>>
>>> terrain = ColorTransition()
>>> terrain.add_point(0, 0, 0, 128)        # deep water
>>> terrain.add_point(128, 240, 220, 130)  # sand
>>> terrain.add_point(255, 255, 255, 255)  # snow
>>> terrain.get_color(64)
(120, 110, 129)
>>> terrain.save_to_file("terrain.txt")
True

Modules
-------
- transition: the ColorTransition class
- point: immutable TransitionPoint control points
- interpolation: scalar bracket search and interpolation
- lookup: dense numpy lookup tables
- serialization: text codec and file helpers
"""

from .errors import TransitionDestroyedError
from .interpolation import find_bracket, find_bracket_linear, interpolate_color, sample
from .lookup import apply_lookup_table, build_lookup_table
from .point import TransitionPoint
from .serialization import points_from_string, points_to_string
from .transition import ColorTransition
from .types.color_types import BYTE_MAX, BYTE_MIN, DEFAULT_COLOR, LEVELS
from .utils.logging import configure_logging, get_logger

__version__ = "1.0.0"

__all__ = [
    # Core
    "ColorTransition",
    "TransitionPoint",
    "TransitionDestroyedError",

    # Interpolation
    "sample", "interpolate_color",
    "find_bracket", "find_bracket_linear",

    # Lookup tables
    "build_lookup_table", "apply_lookup_table",

    # Serialization
    "points_to_string", "points_from_string",

    # Constants
    "BYTE_MIN", "BYTE_MAX", "LEVELS", "DEFAULT_COLOR",

    # Logging
    "configure_logging", "get_logger",

    # Version
    "__version__",
]
