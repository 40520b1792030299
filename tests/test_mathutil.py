import math

import pytest

from aprildetect.mathutil import (
    distance_2d,
    fast_atan2,
    format_point,
    mod2pi,
    mod2pi_ref,
    square,
)


def test_square_known_value_and_sign_invariance():
    assert square(3.0) == 9.0
    assert square(-2.5) == square(2.5)


def test_distance_is_symmetric_and_zero_on_same_point():
    a, b = (1.0, 2.0), (4.0, 6.0)
    assert distance_2d(a, b) == pytest.approx(5.0)
    assert distance_2d(a, b) == distance_2d(b, a)
    assert distance_2d(a, a) == 0.0


@pytest.mark.parametrize("angle", [-3.0, -1.0, 0.0, 0.5, 2.0, 3.1])
def test_mod2pi_identity_inside_range(angle):
    assert mod2pi(angle) == pytest.approx(angle)


@pytest.mark.parametrize("angle", [-20.0, -7.0, 4.0, 10.0, 100.0])
def test_mod2pi_range_and_periodicity(angle):
    wrapped = mod2pi(angle)
    assert -math.pi <= wrapped <= math.pi
    assert mod2pi(angle + 2 * math.pi) == pytest.approx(wrapped, abs=1e-9)
    assert math.sin(wrapped) == pytest.approx(math.sin(angle), abs=1e-9)


@pytest.mark.parametrize("ref,v", [(0.0, 6.0), (3.0, -3.0), (-2.0, 10.0)])
def test_mod2pi_ref_stays_near_reference(ref, v):
    out = mod2pi_ref(ref, v)
    assert abs(out - ref) <= math.pi + 1e-9
    assert math.cos(out) == pytest.approx(math.cos(v), abs=1e-9)


@pytest.mark.parametrize(
    "y,x", [(0.0, 1.0), (1.0, 1.0), (1.0, -1.0), (-1.0, -1.0), (-2.0, 0.5), (0.3, -4.0)]
)
def test_fast_atan2_close_to_atan2(y, x):
    assert abs(fast_atan2(y, x) - math.atan2(y, x)) < 0.08


def test_format_point():
    assert format_point((1.5, 2.0)) == "1.5,2"