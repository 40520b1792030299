"""Candidate tags: four segments that close into a loop."""

from __future__ import annotations

import math
from typing import List, Optional, Sequence, Tuple

from .glines import GLine2D
from .homography import Homography33
from .mathutil import distance_2d, mod2pi
from .segment import Segment

Point = Tuple[float, float]

MINIMUM_EDGE_LENGTH = 6
"""Smallest tag size in pixels, measured along edges and diagonals."""

MAX_QUAD_ASPECT_RATIO = 32.0
"""Quads whose longest side exceeds this multiple of the shortest are dropped."""

_TAG_CORNERS = ((-1.0, -1.0), (1.0, -1.0), (1.0, 1.0), (-1.0, 1.0))


class Quad:
    """Four corner points, in order around the loop, that might form a tag.

    ``homography`` maps tag space, spanning (-1, -1) to (1, 1), onto the
    corners; :meth:`interpolate` uses bilinear interpolation instead.
    """

    def __init__(self, points: Sequence[Point], optical_center: Point) -> None:
        if len(points) != 4:
            raise ValueError("a quad needs exactly four points")
        self.quad_points: List[Point] = [(float(x), float(y)) for x, y in points]
        self.segments: List[Segment] = []
        self.observed_perimeter = 0.0
        self.homography = Homography33(optical_center)
        self.homography.set_correspondences(_TAG_CORNERS, self.quad_points)

        (x0, y0), (x1, y1), (x2, y2), (x3, y3) = self.quad_points
        self._p0 = (x0, y0)
        self._p3 = (x3, y3)
        self._p01 = (x1 - x0, y1 - y0)
        self._p32 = (x2 - x3, y2 - y3)

    def __repr__(self) -> str:
        return f"Quad({self.quad_points!r})"

    def interpolate(self, x: float, y: float) -> Point:
        """Pixel position of tag-space point ``(x, y)`` in [-1, 1] x [-1, 1]."""
        fx = (x + 1.0) / 2.0
        fy = (y + 1.0) / 2.0
        r1x = self._p0[0] + self._p01[0] * fx
        r1y = self._p0[1] + self._p01[1] * fx
        r2x = self._p3[0] + self._p32[0] * fx
        r2y = self._p3[1] + self._p32[1] * fx
        return (r1x + (r2x - r1x) * fy, r1y + (r2y - r1y) * fy)

    def interpolate01(self, x: float, y: float) -> Point:
        """Like :meth:`interpolate`, with coordinates in [0, 1]."""
        return self.interpolate(2 * x - 1, 2 * y - 1)


def _segment_line(seg: Segment) -> GLine2D:
    return GLine2D.from_points((seg.x0, seg.y0), (seg.x1, seg.y1))


def _heading(a: Point, b: Point) -> float:
    return math.atan2(b[1] - a[1], b[0] - a[0])


def _quad_from_loop(path: Sequence[Segment], optical_center: Point) -> Optional[Quad]:
    corners: List[Point] = []
    perimeter = 0.0
    for seg, nxt in zip(path[:4], path[1:5]):
        corner = _segment_line(seg).intersection_with(_segment_line(nxt))
        if corner is None:
            return None
        corners.append(corner)
        perimeter += seg.length

    # reject hourglasses and loops that wind the wrong way
    headings = [_heading(corners[i], corners[(i + 1) % 4]) for i in range(4)]
    turning = sum(mod2pi(headings[(i + 1) % 4] - headings[i]) for i in range(4))
    if turning < -7 or turning > -5:
        return None

    sides = [distance_2d(corners[i], corners[(i + 1) % 4]) for i in range(4)]
    diagonals = [distance_2d(corners[0], corners[2]), distance_2d(corners[1], corners[3])]
    if min(sides + diagonals) < MINIMUM_EDGE_LENGTH:
        return None
    if max(sides) > min(sides) * MAX_QUAD_ASPECT_RATIO:
        return None

    quad = Quad(corners, optical_center)
    quad.segments = list(path[:4])
    quad.observed_perimeter = perimeter
    return quad


def search_quads(start: Segment, optical_center: Point) -> List[Quad]:
    """Find quads formed by loops of four segments beginning at ``start``.

    Only loops in which ``start`` has the largest theta are followed, so each
    loop is found from a single starting segment.
    """
    quads: List[Quad] = []
    path: List[Segment] = [start]

    def _search(parent: Segment, depth: int) -> None:
        if depth == 4:
            if path[4] is path[0]:
                quad = _quad_from_loop(path, optical_center)
                if quad is not None:
                    quads.append(quad)
            return
        for child in parent.children:
            if child.theta > start.theta:
                continue
            path.append(child)
            _search(child, depth + 1)
            path.pop()

    _search(start, 0)
    return quads