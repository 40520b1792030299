"""Infinite 2-D lines and line segments, including weighted least-squares fits."""

from __future__ import annotations

import math
from typing import Iterable, Optional, Sequence, Tuple

from .mathutil import square
from .xyweight import XYWeight

Point = Tuple[float, float]


class GLine2D:
    """A line through point ``p`` with direction ``(dx, dy)``.

    The direction is normalised to unit length on first use of
    line coordinates, and ``p`` is moved to the point nearest the origin
    on first use of :meth:`point_of_coordinate`.
    """

    def __init__(self, dx: float = 0.0, dy: float = 0.0, p: Point = (0.0, 0.0)) -> None:
        self._dx = float(dx)
        self._dy = float(dy)
        self._p = (float(p[0]), float(p[1]))
        self._slope_normalized = False
        self._p_normalized = False

    @classmethod
    def from_slope(cls, slope: float, b: float) -> "GLine2D":
        """Line ``y = slope * x + b``."""
        return cls(1.0, slope, (0.0, b))

    @classmethod
    def from_points(cls, p1: Point, p2: Point) -> "GLine2D":
        """Line through two points."""
        return cls(p2[0] - p1[0], p2[1] - p1[1], p1)

    @property
    def dx(self) -> float:
        return self._dx

    @property
    def dy(self) -> float:
        return self._dy

    @property
    def p(self) -> Point:
        return self._p

    def __repr__(self) -> str:
        return f"GLine2D(dx={self._dx!r}, dy={self._dy!r}, p={self._p!r})"

    def _normalize_slope(self) -> None:
        if self._slope_normalized:
            return
        mag = math.hypot(self._dx, self._dy)
        if mag == 0:
            raise ValueError("line has no direction")
        self._dx /= mag
        self._dy /= mag
        self._slope_normalized = True

    def _normalize_p(self) -> None:
        if self._p_normalized:
            return
        self._normalize_slope()
        dot = -self._dy * self._p[0] + self._dx * self._p[1]
        self._p = (-self._dy * dot, self._dx * dot)
        self._p_normalized = True

    def line_coordinate(self, pt: Point) -> float:
        """Position of ``pt`` projected onto the line's unit direction."""
        self._normalize_slope()
        return pt[0] * self._dx + pt[1] * self._dy

    def point_of_coordinate(self, coord: float) -> Point:
        """The point on the line whose line coordinate is ``coord``."""
        self._normalize_p()
        return (self._p[0] + coord * self._dx, self._p[1] + coord * self._dy)

    def intersection_with(self, line: "GLine2D") -> Optional[Point]:
        """Intersection with another line, or ``None`` if they are parallel."""
        m00 = self._dx
        m01 = -line.dx
        m10 = self._dy
        m11 = -line.dy
        det = m00 * m11 - m01 * m10
        if abs(det) < 1e-10:
            return None
        i00 = m11 / det
        i01 = -m01 / det
        b00 = line.p[0] - self._p[0]
        b10 = line.p[1] - self._p[1]
        t = i00 * b00 + i01 * b10
        return (self._dx * t + self._p[0], self._dy * t + self._p[1])

    @staticmethod
    def lsq_fit(xyweights: Iterable[XYWeight]) -> "GLine2D":
        """Fit a line to weighted points by weighted least squares."""
        m_x = m_y = m_xx = m_yy = m_xy = n = 0.0
        for w in xyweights:
            m_y += w.y * w.weight
            m_x += w.x * w.weight
            m_yy += w.y * w.y * w.weight
            m_xx += w.x * w.x * w.weight
            m_xy += w.x * w.y * w.weight
            n += w.weight
        if n == 0:
            raise ValueError("cannot fit a line to points of zero total weight")
        ex = m_x / n
        ey = m_y / n
        cxx = m_xx / n - square(ex)
        cyy = m_yy / n - square(ey)
        cxy = m_xy / n - ex * ey
        phi = 0.5 * math.atan2(-2 * cxy, cyy - cxx)
        return GLine2D(-math.sin(phi), math.cos(phi), (ex, ey))


class GLineSegment2D:
    """A line segment from ``p0`` to ``p1``."""

    def __init__(self, p0: Point, p1: Point) -> None:
        self.line = GLine2D.from_points(p0, p1)
        self.p0 = (float(p0[0]), float(p0[1]))
        self.p1 = (float(p1[0]), float(p1[1]))
        self.weight = 0

    def __repr__(self) -> str:
        return f"GLineSegment2D(p0={self.p0!r}, p1={self.p1!r})"

    @staticmethod
    def lsq_fit(xyweights: Sequence[XYWeight]) -> "GLineSegment2D":
        """Fit a line to the points and span it over their projected extent."""
        line = GLine2D.lsq_fit(xyweights)
        coords = [line.line_coordinate((w.x, w.y)) for w in xyweights]
        return GLineSegment2D(
            line.point_of_coordinate(min(coords)),
            line.point_of_coordinate(max(coords)),
        )