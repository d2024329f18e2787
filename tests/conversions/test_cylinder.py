import math
import numpy as np
import pytest

from chromaline.conversions import (
    point_to_hsl,
    hsl_to_point,
    np_point_to_hsl,
    np_hsl_to_point,
    normalize_hue,
)


def test_point_on_positive_x_axis():
    assert point_to_hsl(1.0, 0.5, 0.3) == (90.0, 0.3, 1.0)

def test_center_point_has_zero_lightness():
    assert point_to_hsl(0.5, 0.5, 0.7) == (90.0, 0.7, 0.0)

def test_quadrants():
    h, s, l = point_to_hsl(0.5, 1.0, 0.2)
    assert h == pytest.approx(180.0)
    assert l == pytest.approx(1.0)

    h, _, _ = point_to_hsl(0.0, 0.5, 0.2)
    assert h == pytest.approx(270.0)

def test_lower_left_quadrant_wraps_negative_hue():
    # atan2 gives -135 degrees, rotated to -45 before wrapping
    h, s, l = point_to_hsl(0.0, 0.0, 0.0)
    assert h == pytest.approx(315.0, abs=1e-9)
    assert l == pytest.approx(math.sqrt(0.5) / 0.5)

def test_normalize_hue():
    assert normalize_hue(0.0) == 90.0
    assert normalize_hue(-135.0) == 315.0
    assert normalize_hue(270.0) == 0.0
    assert 0 <= normalize_hue(-90.0 - 1e-15) < 360

def test_hue_always_in_range_and_deterministic():
    rng = np.random.default_rng(1234)
    for x, y, z in rng.uniform(-1.0, 2.0, size=(1000, 3)):
        hsl = point_to_hsl(x, y, z)
        assert 0.0 <= hsl[0] < 360.0
        assert hsl == point_to_hsl(x, y, z)

def test_hsl_to_point_zero_lightness_is_center():
    assert hsl_to_point(123.0, 0.4, 0.0) == (0.5, 0.5, 0.4)

def test_hsl_to_point_subtracts_ninety_radians():
    x, y, z = hsl_to_point(0.0, 0.4, 1.0)
    assert x == 0.5 + 0.5 * math.cos(-90)
    assert y == 0.5 + 0.5 * math.sin(-90)
    assert z == 0.4

def test_round_trip_keeps_saturation_and_lightness_only():
    h, s, l = 200.0, 0.35, 0.6
    h_out, s_out, l_out = point_to_hsl(*hsl_to_point(h, s, l))

    assert s_out == s
    assert l_out == pytest.approx(l)
    # The angle conventions differ, so the hue does not survive
    assert h_out != pytest.approx(h)

def test_np_point_to_hsl_matches_scalar():
    rng = np.random.default_rng(7)
    points = rng.uniform(0.0, 1.0, size=(50, 3))
    result = np_point_to_hsl(points[..., 0], points[..., 1], points[..., 2])
    expected = np.array([point_to_hsl(*p) for p in points])

    assert result.shape == (50, 3)
    assert np.allclose(result, expected, atol=1e-9)
    assert np.all((result[..., 0] >= 0) & (result[..., 0] < 360))

def test_np_hsl_to_point_matches_scalar():
    rng = np.random.default_rng(11)
    colors = np.column_stack([
        rng.uniform(0, 360, 50),
        rng.uniform(0, 1, 50),
        rng.uniform(0, 1, 50),
    ])
    result = np_hsl_to_point(colors[..., 0], colors[..., 1], colors[..., 2])
    expected = np.array([hsl_to_point(*c) for c in colors])

    assert np.allclose(result, expected, atol=1e-12)

def test_np_conversions_broadcast_scalars():
    result = np_hsl_to_point(np.array([0.0, 90.0, 180.0]), 0.5, 0.0)
    assert result.shape == (3, 3)
    assert np.allclose(result, [[0.5, 0.5, 0.5]] * 3)
