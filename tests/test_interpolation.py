import math
import numpy as np
import pytest
from boundednumbers import BoundType

from chromaline.easing import Easing
from chromaline.errors import DegenerateSegmentError
from chromaline.interpolation import interpolate, np_interpolate, eased_coefficients


P1 = (0.1, 0.8, 0.3)
P2 = (0.9, 0.25, 0.7)


@pytest.mark.parametrize("easing", list(Easing))
@pytest.mark.parametrize("reverse", [False, True])
def test_endpoints_are_exact(easing, reverse):
    points = interpolate(P1, P2, 6, easing, reverse)

    assert len(points) == 6
    assert points[0] == P1
    assert points[-1] == P2

def test_linear_midpoint():
    points = interpolate((0.0, 0.0, 0.0), (1.0, 1.0, 1.0), 3)
    assert points == [(0.0, 0.0, 0.0), (0.5, 0.5, 0.5), (1.0, 1.0, 1.0)]

def test_reverse_flag_changes_spacing():
    forward = interpolate((0.0, 0.0, 0.0), (1.0, 0.0, 0.0), 3, Easing.EXPONENTIAL)
    backward = interpolate((0.0, 0.0, 0.0), (1.0, 0.0, 0.0), 3, Easing.EXPONENTIAL, reverse=True)

    assert forward[1][0] == 0.25
    assert backward[1][0] == 0.75

def test_easing_by_name():
    points = interpolate((0.0, 0.0, 0.0), (1.0, 0.0, 0.0), 3, "quadratic")
    assert points[1][0] == 0.125

def test_interpolates_each_axis_independently():
    points = interpolate((0.0, 1.0, 0.5), (1.0, 0.0, 0.5), 5)
    for x, y, z in points:
        assert x + y == pytest.approx(1.0)
        assert z == 0.5

@pytest.mark.parametrize("count", [1, 0, -3])
def test_degenerate_count(count):
    with pytest.raises(DegenerateSegmentError, match="at least 2 points"):
        interpolate(P1, P2, count)

def test_np_interpolate_shape():
    points = np_interpolate(P1, P2, 5, Easing.SINUSOIDAL)
    assert isinstance(points, np.ndarray)
    assert points.shape == (5, 3)
    assert np.array_equal(points[0], P1)
    assert np.array_equal(points[-1], P2)

def test_coefficients_are_bounded():
    overshoot = lambda t, reverse=False: t * 2

    clamped = eased_coefficients(5, overshoot)
    free = eased_coefficients(5, overshoot, bound_type=BoundType.IGNORE)

    assert np.allclose(clamped, [0.0, 0.5, 1.0, 1.0, 1.0])
    assert np.allclose(free, [0.0, 0.5, 1.0, 1.5, 2.0])

def test_ignore_bound_extrapolates_interior_points():
    overshoot = lambda t, reverse=False: t * 2
    points = interpolate((0.0, 0.0, 0.0), (1.0, 1.0, 1.0), 5, overshoot, bound_type=BoundType.IGNORE)
    assert points[3] == pytest.approx((1.5, 1.5, 1.5))
    assert points[-1] == (1.0, 1.0, 1.0)

def test_scalar_only_custom_easings():
    smooth = lambda t, reverse=False: math.sin(t * math.pi / 2)
    stepped = lambda t, reverse=False: t * t if t < 0.5 else t

    points = interpolate((0.0, 0.0, 0.0), (1.0, 1.0, 1.0), 5, smooth)
    assert points[2][0] == pytest.approx(math.sin(math.pi / 4))

    points = interpolate((0.0, 0.0, 0.0), (1.0, 0.0, 0.0), 5, stepped)
    assert [p[0] for p in points] == pytest.approx([0.0, 0.0625, 0.5, 0.75, 1.0])

def test_custom_easing_receives_reverse_flag():
    seen = []
    def record(t, reverse=False):
        seen.append(reverse)
        return t
    interpolate((0.0, 0.0, 0.0), (1.0, 0.0, 0.0), 3, record, reverse=True)
    assert seen == [True, True, True]

@pytest.mark.parametrize("count", [2.5, 3.0, "4", True])
def test_count_must_be_an_integer(count):
    with pytest.raises(TypeError, match="count must be an integer"):
        interpolate(P1, P2, count)

def test_numpy_integer_count():
    assert len(interpolate(P1, P2, np.int64(4))) == 4
