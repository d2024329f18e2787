from __future__ import annotations
from typing import Callable, NamedTuple, Tuple, Union

Vector2 = Tuple[float, float]
Vector3 = Tuple[float, float, float]
HSLTuple = Tuple[float, float, float]  # (hue in degrees, saturation, lightness)

RandomSource = Callable[[], float]


class Cartesian(NamedTuple):
    """A point given by its position inside the color cylinder."""
    x: float
    y: float
    z: float


class ColorCoord(NamedTuple):
    """A point given by its (hue, saturation, lightness) color."""
    h: float
    s: float
    l: float


PointSpec = Union[Cartesian, ColorCoord]
