"""
Easing (position) functions.

Every easing maps a normalized progress ``t`` in ``[0, 1]`` to an eased
progress in ``[0, 1]`` with ``f(0) == 0`` and ``f(1) == 1`` in forward mode.
``reverse=True`` selects the ease-out complement of the curve, which is not
always a plain reflection (see ``arc_position``).

The functions accept Python floats or numpy arrays.
"""
from __future__ import annotations
from enum import Enum
from typing import Callable, Dict, Union

import numpy as np
from numpy import ndarray as NDArray

from .errors import UnknownEasingError

EasingInput = Union[float, NDArray]
EasingFunction = Callable[..., EasingInput]


def linear_position(t: EasingInput, reverse: bool = False) -> EasingInput:
    return t


def exponential_position(t: EasingInput, reverse: bool = False) -> EasingInput:
    if reverse:
        return 1 - (1 - t) ** 2
    return t ** 2


def quadratic_position(t: EasingInput, reverse: bool = False) -> EasingInput:
    if reverse:
        return 1 - (1 - t) ** 3
    return t ** 3


def sinusoidal_position(t: EasingInput, reverse: bool = False) -> EasingInput:
    if reverse:
        return 1 - np.sin((1 - t) * np.pi / 2)
    return np.sin(t * np.pi / 2)


def circular_position(t: EasingInput, reverse: bool = False) -> EasingInput:
    if reverse:
        return 1 - np.sqrt(1 - (1 - t) ** 2)
    return 1 - np.sqrt(1 - t ** 2)


def arc_position(t: EasingInput, reverse: bool = False) -> EasingInput:
    """Steep finish going forward; the reverse curve is a quarter circle."""
    if reverse:
        return np.sqrt(1 - (1 - t) ** 2)
    return 1 - np.sqrt(1 - t)


class Easing(str, Enum):
    LINEAR = "linear"
    EXPONENTIAL = "exponential"
    QUADRATIC = "quadratic"
    SINUSOIDAL = "sinusoidal"
    CIRCULAR = "circular"
    ARC = "arc"

    def __call__(self, t: EasingInput, reverse: bool = False) -> EasingInput:
        return EASING_FUNCTIONS[self](t, reverse)


EASING_FUNCTIONS: Dict[Easing, EasingFunction] = {
    Easing.LINEAR: linear_position,
    Easing.EXPONENTIAL: exponential_position,
    Easing.QUADRATIC: quadratic_position,
    Easing.SINUSOIDAL: sinusoidal_position,
    Easing.CIRCULAR: circular_position,
    Easing.ARC: arc_position,
}

DEFAULT_EASING = Easing.SINUSOIDAL

EasingLike = Union[Easing, str, EasingFunction]


def _convert_name_to_easing(name: str) -> Easing:
    """Accept ``"arc"``, ``"ARC"`` and the camel-cased ``"arcPosition"``."""
    key = name.strip().lower()
    if key.endswith("position"):
        key = key[: -len("position")]
    try:
        return Easing(key)
    except ValueError:
        valid = ", ".join(e.value for e in Easing)
        raise UnknownEasingError(f"Invalid easing: {name!r} (expected one of {valid})") from None


def resolve_easing(easing: EasingLike) -> Union[Easing, EasingFunction]:
    """
    Normalize an easing selection without looking up its function.

    Enum members and names become ``Easing`` members; other callables are
    passed through as custom easings.
    """
    if isinstance(easing, Easing):
        return easing
    if isinstance(easing, str):
        return _convert_name_to_easing(easing)
    if callable(easing):
        return easing
    raise UnknownEasingError(f"Invalid easing: {easing!r}")


def get_easing(easing: EasingLike) -> EasingFunction:
    """
    Look up the function for an easing selection.

    Args:
        easing: An ``Easing`` member, its name, or a custom callable
            taking ``(t, reverse)``

    Returns:
        The easing function

    Raises:
        UnknownEasingError: If the name is not registered
    """
    resolved = resolve_easing(easing)
    if isinstance(resolved, Easing):
        return EASING_FUNCTIONS[resolved]
    return resolved
