from __future__ import annotations
from typing import Any, Optional, Sequence, Union
import warnings

from .conversions import hsl_to_point, point_to_hsl
from .errors import InvalidPointSpecError
from .types.vector_types import Cartesian, ColorCoord, HSLTuple, Vector3

PointLike = Union["ColorPoint", Cartesian, ColorCoord, Sequence[float]]


def _format_css_number(value: float) -> str:
    """Print integral floats without a trailing ``.0``."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _as_triple(values: Sequence[Any], name: str) -> Vector3:
    if isinstance(values, (str, bytes)):
        raise InvalidPointSpecError(f"{name} must be 3 numbers, got {values!r}")
    try:
        a, b, c = values
    except (TypeError, ValueError):
        raise InvalidPointSpecError(f"{name} must have exactly 3 components, got {values!r}") from None
    try:
        return float(a), float(b), float(c)
    except (TypeError, ValueError):
        raise InvalidPointSpecError(f"{name} must be 3 numbers, got {values!r}") from None


class ColorPoint:
    """
    An immutable point of the color cylinder.

    A point is created from *either* its Cartesian position ``(x, y, z)`` or
    its ``(hue, saturation, lightness)`` color; the other representation is
    derived. Points compare by identity so they can be used as anchor
    references.

    With ``strict=False`` the historical truthiness rules apply: the point is
    rejected only when ``x``, ``y`` and ``color`` are all truthy, and zero
    coordinates count as missing.
    """
    __slots__ = ('_position', '_color', '_is_frozen')

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(
        self,
        x: Optional[float] = None,
        y: Optional[float] = None,
        z: Optional[float] = None,
        color: Optional[Sequence[float]] = None,
        *,
        strict: bool = True,
    ) -> None:
        if strict:
            use_position = self._resolve_strict(x, y, z, color)
        else:
            use_position = self._resolve_legacy(x, y, z, color)

        if use_position:
            position = (float(x), float(y), float(z))
            hsl = point_to_hsl(*position)
        else:
            hsl = _as_triple(color, "color")
            position = hsl_to_point(*hsl)

        self._position = position
        self._color = hsl

        super().__setattr__('_is_frozen', True)

    @staticmethod
    def _resolve_strict(x, y, z, color) -> bool:
        coords = (x, y, z)
        has_position = all(c is not None for c in coords)
        has_color = color is not None

        if has_position and has_color:
            raise InvalidPointSpecError("Point must be initialized with either x,y,z or hsl")
        if has_position:
            return True
        if any(c is not None for c in coords):
            raise InvalidPointSpecError("x, y and z must be given together")
        if has_color:
            return False
        raise InvalidPointSpecError("Point needs either x,y,z or hsl")

    @staticmethod
    def _resolve_legacy(x, y, z, color) -> bool:
        # Arrays have no truth value; an empty sequence counts as missing.
        has_color = color is not None and (not hasattr(color, "__len__") or len(color) > 0)
        if x and y and has_color:
            raise InvalidPointSpecError("Point must be initialized with either x,y,z or hsl")
        if x and y and z:
            return True
        if has_color:
            if any(c is not None for c in (x, y, z)):
                warnings.warn(
                    f"Ignoring x,y,z ({x!r}, {y!r}, {z!r}) in favour of color {tuple(color)!r}",
                    UserWarning,
                    stacklevel=3,
                )
            return False
        raise InvalidPointSpecError("Point needs either x,y,z or hsl")

    # ------------------ ALTERNATE CONSTRUCTORS ------------------
    @classmethod
    def from_xyz(cls, x: float, y: float, z: float) -> ColorPoint:
        return cls(x, y, z)

    @classmethod
    def from_hsl(cls, h: float, s: float, l: float) -> ColorPoint:
        return cls(color=(h, s, l))

    @classmethod
    def coerce(cls, value: PointLike) -> ColorPoint:
        """
        Build a point from a spec.

        ``Cartesian`` and ``ColorCoord`` select the representation explicitly.
        A bare 3-sequence is read as an HSL color. Points are returned as-is.
        """
        if isinstance(value, ColorPoint):
            return value
        if isinstance(value, Cartesian):
            return cls.from_xyz(*value)
        if isinstance(value, ColorCoord):
            return cls.from_hsl(*value)
        return cls(color=_as_triple(value, "color"))

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def x(self) -> float:
        return self._position[0]

    @property
    def y(self) -> float:
        return self._position[1]

    @property
    def z(self) -> float:
        return self._position[2]

    @property
    def position(self) -> Vector3:
        return self._position

    @property
    def color(self) -> HSLTuple:
        return self._color

    @property
    def hue(self) -> float:
        return self._color[0]

    @property
    def saturation(self) -> float:
        return self._color[1]

    @property
    def lightness(self) -> float:
        return self._color[2]

    @property
    def hsl_css(self) -> str:
        """CSS text, e.g. ``hsl(120, 50%, 75%)``. Values are not clamped."""
        h, s, l = self._color
        return (
            f"hsl({_format_css_number(h)}, "
            f"{_format_css_number(s * 100)}%, "
            f"{_format_css_number(l * 100)}%)"
        )

    def distance_to(self, point: Sequence[float]) -> float:
        """Euclidean distance between the Cartesian positions."""
        a = point[0] - self._position[0]
        b = point[1] - self._position[1]
        c = point[2] - self._position[2]
        return (a * a + b * b + c * c) ** 0.5

    def __repr__(self) -> str:
        return f"ColorPoint(position={self._position!r}, color={self._color!r})"


def make_point(
    spec: Optional[PointLike] = None,
    *,
    x: Optional[float] = None,
    y: Optional[float] = None,
    z: Optional[float] = None,
    color: Optional[Sequence[float]] = None,
    strict: bool = True,
) -> ColorPoint:
    """Build a point from either a positional spec or keyword coordinates."""
    if spec is not None:
        if any(v is not None for v in (x, y, z, color)):
            raise InvalidPointSpecError("Pass either a point spec or keyword coordinates, not both")
        return ColorPoint.coerce(spec)
    return ColorPoint(x, y, z, color, strict=strict)
