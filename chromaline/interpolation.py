"""
Segment interpolation inside the color cylinder.

Points are interpolated linearly in Cartesian space; the eased progress only
changes how the samples are spaced along the straight line between the two
endpoints. Hue wrap-around therefore needs no special handling.
"""
from __future__ import annotations
from typing import List, Sequence

import numpy as np
from boundednumbers import BoundType, bound_type_to_np_function

from .easing import Easing, EasingLike, get_easing, resolve_easing
from .errors import DegenerateSegmentError
from .types.vector_types import Vector3


def validate_point_count(count: int, name: str = "count") -> int:
    """Check that a point count is an integer of at least 2."""
    if isinstance(count, bool) or not isinstance(count, (int, np.integer)):
        raise TypeError(f"{name} must be an integer, got {type(count).__name__}")
    if count < 2:
        raise DegenerateSegmentError(f"A segment needs at least 2 points, got {name}={count}")
    return int(count)


def _apply_bound(arr: np.ndarray, bound_type: BoundType) -> np.ndarray:
    """Bound eased coefficients to [0, 1] unless bounding is disabled."""
    if bound_type is BoundType.IGNORE:
        return arr
    fn = bound_type_to_np_function[bound_type]
    return fn(arr, 0.0, 1.0)


def eased_coefficients(
    count: int,
    easing: EasingLike = Easing.LINEAR,
    reverse: bool = False,
    bound_type: BoundType = BoundType.CLAMP,
) -> np.ndarray:
    """
    Eased interpolation coefficients for ``count`` evenly spaced samples.

    Registered easings are evaluated on the whole array at once; custom
    callables are called once per sample with a plain float.

    Raises:
        TypeError: If ``count`` is not an integer
        DegenerateSegmentError: If ``count < 2``
    """
    count = validate_point_count(count)
    resolved = resolve_easing(easing)
    ease = get_easing(resolved)

    t = np.arange(count, dtype=np.float64) / (count - 1)
    if isinstance(resolved, Easing):
        u = np.asarray(ease(t, reverse), dtype=np.float64)
    else:
        u = np.array([ease(float(ti), reverse) for ti in t], dtype=np.float64)
    return _apply_bound(u, bound_type)


def np_interpolate(
    p1: Sequence[float],
    p2: Sequence[float],
    count: int,
    easing: EasingLike = Easing.LINEAR,
    reverse: bool = False,
    bound_type: BoundType = BoundType.CLAMP,
) -> np.ndarray:
    """
    Vectorized: sample ``count`` points on the line from ``p1`` to ``p2``.

    Returns:
        array of shape (count, 3)
    """
    u = eased_coefficients(count, easing, reverse, bound_type)[:, None]
    start = np.asarray(p1, dtype=np.float64)
    end = np.asarray(p2, dtype=np.float64)

    points = (1 - u) * start + u * end
    # Anchors are passed through exactly, whatever the easing does at 0 and 1
    # (reverse circular easing starts at 1).
    points[0] = start
    points[-1] = end
    return points


def interpolate(
    p1: Sequence[float],
    p2: Sequence[float],
    count: int,
    easing: EasingLike = Easing.LINEAR,
    reverse: bool = False,
    bound_type: BoundType = BoundType.CLAMP,
) -> List[Vector3]:
    """
    Sample ``count`` points on the line from ``p1`` to ``p2``.

    Args:
        p1: Start point (x, y, z)
        p2: End point (x, y, z)
        count: Number of points, endpoints included. Must be >= 2.
        easing: Easing used to space the samples
        reverse: Use the reverse (ease-out) form of the easing
        bound_type: How eased coefficients are kept inside [0, 1]

    Returns:
        List of (x, y, z) tuples. The first equals ``p1`` and the last equals
        ``p2`` exactly.
    """
    points = np_interpolate(p1, p2, count, easing, reverse, bound_type)
    return [tuple(p) for p in points.tolist()]
