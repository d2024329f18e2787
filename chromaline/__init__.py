"""Chromaline: color palettes interpolated through the HSL cylinder."""

from .conversions import (
    point_to_hsl,
    hsl_to_point,
    np_point_to_hsl,
    np_hsl_to_point,
)
from .easing import (
    Easing,
    EASING_FUNCTIONS,
    DEFAULT_EASING,
    get_easing,
    linear_position,
    exponential_position,
    quadratic_position,
    sinusoidal_position,
    circular_position,
    arc_position,
)
from .interpolation import interpolate, np_interpolate
from .random_pair import random_hsl_pair
from .point import ColorPoint
from .palette import Palette, PaletteConfig
from .types import Cartesian, ColorCoord
from .errors import (
    ChromalineError,
    InvalidPointSpecError,
    AnchorNotFoundError,
    DegenerateSegmentError,
    UnknownEasingError,
)

__all__ = [
    # conversions
    "point_to_hsl",
    "hsl_to_point",
    "np_point_to_hsl",
    "np_hsl_to_point",
    # easing
    "Easing",
    "EASING_FUNCTIONS",
    "DEFAULT_EASING",
    "get_easing",
    "linear_position",
    "exponential_position",
    "quadratic_position",
    "sinusoidal_position",
    "circular_position",
    "arc_position",
    # interpolation and generation
    "interpolate",
    "np_interpolate",
    "random_hsl_pair",
    # points and palettes
    "ColorPoint",
    "Cartesian",
    "ColorCoord",
    "Palette",
    "PaletteConfig",
    # errors
    "ChromalineError",
    "InvalidPointSpecError",
    "AnchorNotFoundError",
    "DegenerateSegmentError",
    "UnknownEasingError",
]
