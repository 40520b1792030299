"""A decoded tag found in an image, with pose recovery and drawing."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Tuple

import numpy as np
from PIL import Image, ImageColor, ImageDraw

from .homography import Homography33
from .mathutil import distance_2d

Point = Tuple[float, float]


def _skew(w: np.ndarray) -> np.ndarray:
    return np.array([[0.0, -w[2], w[1]], [w[2], 0.0, -w[0]], [-w[1], w[0], 0.0]])


def _rotation_exp(w: np.ndarray) -> np.ndarray:
    theta = float(np.linalg.norm(w))
    if theta < 1e-12:
        return np.eye(3) + _skew(w)
    k = _skew(w / theta)
    return np.eye(3) + math.sin(theta) * k + (1 - math.cos(theta)) * (k @ k)


def _orthonormalize(r: np.ndarray) -> np.ndarray:
    u, _, vt = np.linalg.svd(r)
    rot = u @ vt
    if np.linalg.det(rot) < 0:
        u[:, 2] *= -1
        rot = u @ vt
    return rot


@dataclass
class TagDetection:
    """A tag detection and the geometry recovered for it.

    ``p`` holds the four corners in pixel coordinates, counter-clockwise
    and always starting from the same corner of the tag.  ``homography``
    maps tag coordinates in [-1, 1] x [-1, 1] to pixel coordinates relative
    to ``hxy``.
    """

    id: int = 0
    good: bool = False
    obs_code: int = 0
    code: int = 0
    hamming_distance: int = 0
    rotation: int = 0
    p: List[Point] = field(default_factory=lambda: [(0.0, 0.0)] * 4)
    cxy: Point = (0.0, 0.0)
    observed_perimeter: float = 0.0
    homography: np.ndarray = field(default_factory=lambda: np.zeros((3, 3)))
    hxy: Point = (0.0, 0.0)

    def interpolate(self, x: float, y: float) -> Point:
        """Pixel position of tag-space point ``(x, y)``; (0, 0) if it projects to infinity."""
        h = self.homography
        z = float(h[2, 0] * x + h[2, 1] * y + h[2, 2])
        if z == 0:
            return (0.0, 0.0)
        nx = float(h[0, 0] * x + h[0, 1] * y + h[0, 2]) / z + self.hxy[0]
        ny = float(h[1, 0] * x + h[1, 1] * y + h[1, 2]) / z + self.hxy[1]
        return (nx, ny)

    def xy_orientation(self) -> float:
        """Orientation in the image plane, taken along the tag's bottom edge."""
        p0 = self.interpolate(-1, -1)
        p1 = self.interpolate(1, -1)
        orient = math.atan2(p1[1] - p0[1], p1[0] - p0[0])
        return 0.0 if math.isnan(orient) else orient

    def overlaps_too_much(self, other: "TagDetection") -> bool:
        """True when the centres lie closer than the tags' mean half-edge length."""
        edges = [
            distance_2d(pts[i], pts[(i + 1) % 4])
            for pts in (self.p, other.p)
            for i in range(4)
        ]
        radius = sum(edges) / 16.0
        return distance_2d(self.cxy, other.cxy) < radius

    def relative_transform(
        self, tag_size: float, fx: float, fy: float, px: float, py: float
    ) -> np.ndarray:
        """4x4 pose of the tag in the camera frame (z forward, x right, y down).

        ``tag_size`` is the side of the black square in metres; ``fx``, ``fy``
        are focal lengths and ``(px, py)`` the principal point, in pixels.
        """
        s = tag_size / 2.0
        obj = np.array([[-s, -s], [s, -s], [s, s], [-s, s]])
        img = np.array([(float(x), float(y)) for x, y in self.p[:4]])
        normalized = np.column_stack([(img[:, 0] - px) / fx, (img[:, 1] - py) / fy])

        hom = Homography33((0.0, 0.0))
        hom.set_correspondences([tuple(o) for o in obj], [tuple(n) for n in normalized])
        h = hom.h
        scale = 2.0 / (np.linalg.norm(h[:, 0]) + np.linalg.norm(h[:, 1]))
        r1 = h[:, 0] * scale
        r2 = h[:, 1] * scale
        t = h[:, 2] * scale
        if t[2] < 0:
            r1, r2, t = -r1, -r2, -t
        rot = _orthonormalize(np.column_stack([r1, r2, np.cross(r1, r2)]))

        rot, t = self._refine_pose(rot, t, obj, img, fx, fy, px, py)

        transform = np.eye(4)
        transform[:3, :3] = rot
        transform[:3, 3] = t
        return transform

    @staticmethod
    def _refine_pose(rot, t, obj, img, fx, fy, px, py):
        obj3 = np.column_stack([obj, np.zeros(len(obj))])

        def residual(r, tr):
            cam = obj3 @ r.T + tr
            u = fx * cam[:, 0] / cam[:, 2] + px
            v = fy * cam[:, 1] / cam[:, 2] + py
            return np.column_stack([u, v]).ravel() - img.ravel()

        def apply(r, tr, delta):
            return _rotation_exp(delta[:3]) @ r, tr + delta[3:]

        res = residual(rot, t)
        cost = float(res @ res)
        mu = 1e-3
        eps = 1e-7
        for _ in range(50):
            if cost < 1e-20:
                break
            jac = np.empty((res.size, 6))
            for k in range(6):
                step = np.zeros(6)
                step[k] = eps
                jac[:, k] = (residual(*apply(rot, t, step)) - res) / eps
            jtj = jac.T @ jac
            jtr = jac.T @ res
            improved = False
            for _ in range(10):
                lhs = jtj + mu * np.diag(np.diag(jtj) + 1e-12)
                try:
                    delta = -np.linalg.solve(lhs, jtr)
                except np.linalg.LinAlgError:
                    mu *= 10
                    continue
                new_rot, new_t = apply(rot, t, delta)
                new_res = residual(new_rot, new_t)
                new_cost = float(new_res @ new_res)
                if new_cost < cost:
                    rot, t, res = _orthonormalize(new_rot), new_t, new_res
                    converged = cost - new_cost < 1e-14 * max(cost, 1.0)
                    cost = new_cost
                    mu = max(mu / 10, 1e-12)
                    improved = True
                    break
                mu *= 10
            if not improved or converged:
                break
        return rot, t

    def relative_translation_rotation(
        self, tag_size: float, fx: float, fy: float, px: float, py: float
    ) -> Tuple[np.ndarray, np.ndarray]:
        """Translation vector and rotation matrix of the tag relative to the camera."""
        transform = self.relative_transform(tag_size, fx, fy, px, py)
        return transform[:3, 3].copy(), transform[:3, :3].copy()

    def draw(self, image: Image.Image) -> None:
        """Draw the outline, centre and id of this detection onto ``image`` in place."""
        draw = ImageDraw.Draw(image)

        def colour(rgb: str):
            return ImageColor.getcolor(rgb, image.mode)

        outline = ("#0000ff", "#00ff00", "#ff0000", "#ff00ff")
        for i, hue in enumerate(outline):
            a = self.p[i]
            b = self.p[(i + 1) % 4]
            draw.line([(a[0], a[1]), (b[0], b[1])], fill=colour(hue), width=1)

        cx, cy = self.cxy
        red = colour("#ff0000")
        draw.ellipse([cx - 8, cy - 8, cx + 8, cy + 8], outline=red, width=2)
        draw.text((cx + 10, cy + 10), f"#{self.id}", fill=red)