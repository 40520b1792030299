"""Small geometric helpers shared by the detector."""

from __future__ import annotations

import math
from typing import Tuple

Point = Tuple[float, float]

_TWO_PI = 2.0 * math.pi


def square(x: float) -> float:
    """Return ``x`` squared."""
    return x * x


def distance_2d(p0: Point, p1: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(p0[0] - p1[0], p0[1] - p1[1])


def mod2pi(vin: float) -> float:
    """Wrap an angle into the interval [-pi, pi]."""
    absv = abs(vin)
    q = absv / _TWO_PI + 0.5
    r = absv - int(q) * _TWO_PI
    return -r if vin < 0 else r


def mod2pi_ref(ref: float, v: float) -> float:
    """Return ``v`` wrapped so that it differs from ``ref`` by at most pi."""
    return ref + mod2pi(v - ref)


def fast_atan2(y: float, x: float) -> float:
    """Cheap arctangent approximation, accurate to roughly four degrees."""
    coeff_1 = math.pi / 4
    coeff_2 = 3 * coeff_1
    abs_y = abs(y) + 1e-10  # avoids 0/0
    if x >= 0:
        r = (x - abs_y) / (x + abs_y)
        angle = coeff_1 - coeff_1 * r
    else:
        r = (x + abs_y) / (abs_y - x)
        angle = coeff_2 - coeff_1 * r
    return -angle if y < 0 else angle


def format_point(pt: Point) -> str:
    """Render a point as ``x,y`` using compact float formatting."""
    return f"{pt[0]:g},{pt[1]:g}"