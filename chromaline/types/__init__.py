from .vector_types import (
    Vector2,
    Vector3,
    HSLTuple,
    RandomSource,
    Cartesian,
    ColorCoord,
    PointSpec,
)

__all__ = [
    "Vector2",
    "Vector3",
    "HSLTuple",
    "RandomSource",
    "Cartesian",
    "ColorCoord",
    "PointSpec",
]
