"""
Chromaline Coordinate Conversions
=================================

Scalar and vectorized (numpy) conversions between Cartesian points inside the
color cylinder and ``(hue, saturation, lightness)`` triples.

Conversion Functions
-------------------

point_to_hsl(x, y, z)
    Scalar Cartesian to HSL conversion
np_point_to_hsl(x, y, z)
    Vectorized Cartesian to HSL conversion
hsl_to_point(h, s, l)
    Scalar HSL to Cartesian conversion
np_hsl_to_point(h, s, l)
    Vectorized HSL to Cartesian conversion

Examples
--------
>>> from chromaline.conversions import point_to_hsl, hsl_to_point
>>> point_to_hsl(1.0, 0.5, 0.3)
(90.0, 0.3, 1.0)
>>> x, y, z = hsl_to_point(90.0, 0.3, 1.0)
"""
from .cylinder import (
    CENTER_X,
    CENTER_Y,
    normalize_hue,
    point_to_hsl,
    hsl_to_point,
    np_point_to_hsl,
    np_hsl_to_point,
)

__all__ = [
    "CENTER_X",
    "CENTER_Y",
    "normalize_hue",
    "point_to_hsl",
    "hsl_to_point",
    "np_point_to_hsl",
    "np_hsl_to_point",
]
