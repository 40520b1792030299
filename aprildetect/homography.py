"""Planar homography from four point correspondences."""

from __future__ import annotations

import math
from typing import Sequence, Tuple

import numpy as np

Point = Tuple[float, float]


def _normalizer(pts: np.ndarray) -> np.ndarray:
    centroid = pts.mean(axis=0)
    mean_dist = np.sqrt(((pts - centroid) ** 2).sum(axis=1)).mean()
    if mean_dist == 0:
        raise ValueError("correspondence points coincide")
    s = math.sqrt(2.0) / mean_dist
    return np.array(
        [[s, 0.0, -s * centroid[0]], [0.0, s, -s * centroid[1]], [0.0, 0.0, 1.0]]
    )


def _solve_dlt(src: np.ndarray, dst: np.ndarray) -> np.ndarray:
    t_src = _normalizer(src)
    t_dst = _normalizer(dst)
    ones = np.ones((len(src), 1))
    src_h = np.hstack([src, ones]) @ t_src.T
    dst_h = np.hstack([dst, ones]) @ t_dst.T
    rows = []
    for (x, y, _), (u, v, _) in zip(src_h, dst_h):
        rows.append([-x, -y, -1.0, 0.0, 0.0, 0.0, u * x, u * y, u])
        rows.append([0.0, 0.0, 0.0, -x, -y, -1.0, v * x, v * y, v])
    _, sing, vt = np.linalg.svd(np.array(rows))
    if sing[-1] <= 1e-9 * sing[0]:
        raise ValueError("correspondences are degenerate")
    h = np.linalg.inv(t_dst) @ vt[-1].reshape(3, 3) @ t_src
    if abs(h[2, 2]) < 1e-12 or abs(np.linalg.det(h)) < 1e-12 * abs(h[2, 2]) ** 3:
        raise ValueError("correspondences are degenerate")
    return h / h[2, 2]


class Homography33:
    """3x3 homography mapping world points onto image points.

    Image points are taken relative to ``cxy``, the optical centre, so the
    matrix ``h`` does not include that offset; :meth:`project` adds it back.
    """

    def __init__(self, optical_center: Point) -> None:
        self.cxy: Point = (float(optical_center[0]), float(optical_center[1]))
        self._h = np.zeros((3, 3))
        self._valid = False
        self._src: list = []
        self._dst: list = []

    def set_correspondences(self, src_pts: Sequence[Point], dst_pts: Sequence[Point]) -> None:
        """Set world points ``src_pts`` and the image points they map to."""
        self._valid = False
        self._src = [(float(x), float(y)) for x, y in src_pts]
        self._dst = [(float(x), float(y)) for x, y in dst_pts]

    @property
    def h(self) -> np.ndarray:
        """The homography matrix, normalised so that ``h[2, 2] == 1``."""
        self.compute()
        return self._h

    def compute(self) -> None:
        """Solve for the homography from the first four correspondences."""
        if self._valid:
            return
        if len(self._src) < 4 or len(self._dst) < 4:
            raise ValueError("four correspondences are required")
        src = np.array(self._src[:4])
        dst = np.array(self._dst[:4]) - np.array(self.cxy)
        self._h = _solve_dlt(src, dst)
        self._valid = True

    def project(self, worldx: float, worldy: float) -> Point:
        """Image coordinates of the world point ``(worldx, worldy)``."""
        h = self.h
        ix = float(h[0, 0] * worldx + h[0, 1] * worldy + h[0, 2])
        iy = float(h[1, 0] * worldx + h[1, 1] * worldy + h[1, 2])
        z = float(h[2, 0] * worldx + h[2, 1] * worldy + h[2, 2])
        return (ix / z + self.cxy[0], iy / z + self.cxy[1])