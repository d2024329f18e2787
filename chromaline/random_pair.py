"""Random anchor color generation."""
from __future__ import annotations
from typing import Optional, Sequence, Tuple

import numpy as np

from .types.vector_types import HSLTuple, RandomSource


def default_random_source() -> RandomSource:
    """A fresh uniform [0, 1) source backed by numpy's default generator."""
    return np.random.default_rng().random


def random_hsl_pair(
    min_hue_diff: float = 90,
    min_sat_diff: float = 0,
    min_light_diff: float = 0.25,
    previous_color: Optional[Sequence[float]] = None,
    random: Optional[RandomSource] = None,
) -> Tuple[HSLTuple, HSLTuple]:
    """
    Generate two colors whose hues are at least ``min_hue_diff`` degrees apart.

    Args:
        min_hue_diff: Minimum angular hue distance between the two colors
        min_sat_diff: Floor of the second color's saturation
        min_light_diff: Shrinks the range of the second color's lightness
        previous_color: Reuse this color as the first of the pair
        random: Callable returning uniform floats in [0, 1)

    Returns:
        ((h1, s1, l1), (h2, s2, l2))

    Note:
        The second lightness starts at ``min_sat_diff``, not at
        ``min_light_diff``. Generated palettes depend on this, keep it.
    """
    rand = random if random is not None else default_random_source()

    if previous_color is not None:
        h1, s1, l1 = (float(v) for v in previous_color)
    else:
        h1 = rand() * 360
        s1 = rand()
        l1 = rand()

    h2 = (360 + (h1 + min_hue_diff + rand() * (360 - min_hue_diff * 2))) % 360
    s2 = min_sat_diff + rand() * (1 - min_sat_diff)
    l2 = min_sat_diff + rand() * (1 - min_light_diff)

    return (h1, s1, l1), (h2, s2, l2)
