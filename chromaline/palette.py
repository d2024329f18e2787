"""
Palettes built from anchor colors.

A :class:`Palette` owns an ordered list of anchor points. Consecutive anchors
are joined by interpolated segments and the segments are joined into one
continuous color sequence, the anchor shared by two segments appearing once.

Example
-------
>>> from chromaline import Palette, Easing
>>> palette = Palette([(20, 0.8, 0.3), (200, 0.4, 0.9)], num_points=4, easing=Easing.ARC)
>>> len(palette.colors)
4
>>> _ = palette.add_anchor_point(color=(300, 0.6, 0.5))
>>> len(palette.colors)
7
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple, Union
import warnings

import numpy as np

from .easing import DEFAULT_EASING, Easing, EasingFunction, EasingLike, resolve_easing
from .errors import AnchorNotFoundError
from .interpolation import np_interpolate, validate_point_count
from .point import ColorPoint, PointLike, make_point
from .random_pair import random_hsl_pair
from .types.vector_types import HSLTuple, RandomSource

AnchorTarget = Union[int, ColorPoint]
Segment = Tuple[ColorPoint, ...]


@dataclass(frozen=True)
class PaletteConfig:
    """
    Everything needed to build a :class:`Palette`.

    Attributes:
        anchor_colors: Initial anchors. ``None`` generates a random pair.
        num_points: Points per segment, shared anchors included (>= 2)
        easing: Easing used to space the points of every segment
        min_hue_diff: Minimum hue distance of a generated pair, in degrees
        min_sat_diff: Saturation floor of the second generated color
        min_light_diff: Lightness range reduction of the second generated color
        strict_point_spec: Reject ambiguous keyword point specs outright
            instead of applying the historical truthiness rules
    """
    anchor_colors: Optional[Sequence[PointLike]] = None
    num_points: int = 5
    easing: EasingLike = DEFAULT_EASING
    min_hue_diff: float = 90
    min_sat_diff: float = 0
    min_light_diff: float = 0.25
    strict_point_spec: bool = True

    def validate(self) -> None:
        """Raise if ``num_points`` or ``easing`` cannot build a palette."""
        validate_point_count(self.num_points, "num_points")
        resolve_easing(self.easing)


class Palette:
    """
    A mutable palette of interpolated colors.

    Segment ``i`` joins anchors ``i`` and ``i + 1``; odd segments use the
    reverse form of the easing so consecutive segments mirror each other
    around their shared anchor. Segments are rebuilt from scratch whenever the
    anchors, the point count or the easing change, and a failed change leaves
    the palette untouched.
    """

    def __init__(
        self,
        anchor_colors: Optional[Sequence[PointLike]] = None,
        num_points: int = 5,
        easing: EasingLike = DEFAULT_EASING,
        *,
        min_hue_diff: float = 90,
        min_sat_diff: float = 0,
        min_light_diff: float = 0.25,
        strict_point_spec: bool = True,
        random: Optional[RandomSource] = None,
    ) -> None:
        num_points = validate_point_count(num_points, "num_points")
        easing = resolve_easing(easing)

        if anchor_colors is None:
            anchor_colors = random_hsl_pair(
                min_hue_diff, min_sat_diff, min_light_diff, random=random
            )
        anchors = [ColorPoint.coerce(c) for c in anchor_colors]
        if not anchors:
            raise ValueError("Palette must contain at least one anchor")

        self._strict_point_spec = strict_point_spec
        self._anchors: List[ColorPoint] = []
        self._segments: List[Segment] = []
        self._num_points = num_points
        self._easing = easing
        self._commit(anchors, num_points, easing)

    @classmethod
    def from_config(cls, config: Optional[PaletteConfig] = None, random: Optional[RandomSource] = None) -> Palette:
        if config is None:
            config = PaletteConfig()
        config.validate()
        return cls(
            config.anchor_colors,
            config.num_points,
            config.easing,
            min_hue_diff=config.min_hue_diff,
            min_sat_diff=config.min_sat_diff,
            min_light_diff=config.min_light_diff,
            strict_point_spec=config.strict_point_spec,
            random=random,
        )

    # ------------------ REBUILD ------------------
    @staticmethod
    def _build_segments(
        anchors: Sequence[ColorPoint],
        num_points: int,
        easing: Union[Easing, EasingFunction],
    ) -> List[Segment]:
        segments: List[Segment] = []
        for i in range(len(anchors) - 1):
            points = np_interpolate(
                anchors[i].position,
                anchors[i + 1].position,
                num_points,
                easing,
                reverse=i % 2 != 0,
            )
            segments.append(tuple(ColorPoint.from_xyz(*p) for p in points.tolist()))
        return segments

    def _commit(
        self,
        anchors: List[ColorPoint],
        num_points: Optional[int] = None,
        easing: Optional[Union[Easing, EasingFunction]] = None,
    ) -> None:
        if num_points is None:
            num_points = self._num_points
        if easing is None:
            easing = self._easing

        segments = self._build_segments(anchors, num_points, easing)
        if not segments:
            warnings.warn(
                "Palette has a single anchor; no segments can be interpolated",
                UserWarning,
                stacklevel=3,
            )

        self._anchors = anchors
        self._segments = segments
        self._num_points = num_points
        self._easing = easing

    # ------------------ MUTATORS ------------------
    def add_anchor_point(
        self,
        spec: Optional[PointLike] = None,
        *,
        x: Optional[float] = None,
        y: Optional[float] = None,
        z: Optional[float] = None,
        color: Optional[Sequence[float]] = None,
    ) -> ColorPoint:
        """Append an anchor after the last one and rebuild the palette."""
        point = make_point(spec, x=x, y=y, z=z, color=color, strict=self._strict_point_spec)
        self._commit(self._anchors + [point])
        return point

    def replace_anchor(
        self,
        target: AnchorTarget,
        spec: Optional[PointLike] = None,
        *,
        x: Optional[float] = None,
        y: Optional[float] = None,
        z: Optional[float] = None,
        color: Optional[Sequence[float]] = None,
    ) -> ColorPoint:
        """
        Replace an anchor, addressed by index or by the anchor point itself.

        Raises:
            AnchorNotFoundError: If the index is out of range or the point is
                not an anchor of this palette
        """
        index = self._index_of(target)
        point = make_point(spec, x=x, y=y, z=z, color=color, strict=self._strict_point_spec)

        anchors = list(self._anchors)
        anchors[index] = point
        self._commit(anchors)
        return point

    def set_num_points(self, num_points: int) -> None:
        self._commit(self._anchors, num_points=validate_point_count(num_points, "num_points"))

    def set_easing(self, easing: EasingLike) -> None:
        self._commit(self._anchors, easing=resolve_easing(easing))

    def _index_of(self, target: AnchorTarget) -> int:
        if isinstance(target, ColorPoint):
            for i, anchor in enumerate(self._anchors):
                if anchor is target:
                    return i
            raise AnchorNotFoundError(f"{target!r} is not an anchor of this palette")
        if isinstance(target, bool) or not isinstance(target, (int, np.integer)):
            raise TypeError(f"Anchor target must be an index or a ColorPoint, got {type(target).__name__}")
        if not 0 <= target < len(self._anchors):
            raise AnchorNotFoundError(
                f"Anchor index {target} out of range for {len(self._anchors)} anchors"
            )
        return int(target)

    # ------------------ QUERIES ------------------
    def get_closest_anchor(
        self,
        point: Union[ColorPoint, Sequence[float]],
        max_distance: float = 1.0,
    ) -> Optional[ColorPoint]:
        """
        Return the anchor nearest to ``point`` in Cartesian space.

        Ties go to the earlier anchor. Returns ``None`` when even the nearest
        anchor is farther than ``max_distance``.
        """
        query = point.position if isinstance(point, ColorPoint) else point
        query = np.asarray(query, dtype=np.float64)

        distances = np.linalg.norm(self.anchor_positions - query, axis=-1)
        index = int(np.argmin(distances))
        if distances[index] > max_distance:
            return None
        return self._anchors[index]

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def anchor_points(self) -> Tuple[ColorPoint, ...]:
        return tuple(self._anchors)

    @property
    def anchor_positions(self) -> np.ndarray:
        return np.array([a.position for a in self._anchors], dtype=np.float64)

    @property
    def num_points(self) -> int:
        return self._num_points

    @property
    def easing(self) -> Union[Easing, EasingFunction]:
        return self._easing

    @property
    def segments(self) -> Tuple[Segment, ...]:
        return tuple(self._segments)

    @property
    def flattened_points(self) -> List[ColorPoint]:
        """
        All segment points in order, each shared anchor listed once.

        A single-anchor palette flattens to that anchor.
        """
        if not self._segments:
            return list(self._anchors[:1])
        flat = list(self._segments[0])
        for segment in self._segments[1:]:
            flat.extend(segment[1:])
        return flat

    @property
    def colors(self) -> List[HSLTuple]:
        return [p.color for p in self.flattened_points]

    @property
    def colors_css(self) -> List[str]:
        return [p.hsl_css for p in self.flattened_points]

    @property
    def positions(self) -> np.ndarray:
        """Cartesian positions of the flattened points, shape (n, 3)."""
        return np.array([p.position for p in self.flattened_points], dtype=np.float64)

    def __len__(self) -> int:
        return len(self.flattened_points)

    def __iter__(self) -> Iterator[ColorPoint]:
        return iter(self.flattened_points)

    def __repr__(self) -> str:
        easing = self._easing.value if isinstance(self._easing, Easing) else getattr(self._easing, '__name__', 'custom')
        return (
            f"Palette(anchors={len(self._anchors)}, num_points={self._num_points}, "
            f"easing={easing!r})"
        )
