"""Full tag detection pipeline: gradients, clustering, segments, quads, decoding."""

from __future__ import annotations

import math
from typing import Dict, List, Optional, Tuple

import numpy as np
from PIL import Image

from .edge import MAX_EDGE_COST, MIN_MAG, WEIGHT_SCALE, Edge, merge_edges
from .floatimage import FloatImage
from .gaussian import make_gaussian_filter
from .glines import GLine2D, GLineSegment2D
from .graymodel import GrayModel
from .gridder import Gridder
from .mathutil import distance_2d, mod2pi
from .quad import Quad, search_quads
from .segment import MINIMUM_LINE_LENGTH, MINIMUM_SEGMENT_SIZE, Segment
from .tagdetection import TagDetection
from .tagfamily import TagCodes, TagFamily
from .unionfind import UnionFind
from .xyweight import XYWeight

SIGMA = 0.0
"""Blur applied to the image used for sampling bits (0 disables it)."""

SEG_SIGMA = 0.8
"""Blur applied to the image used for finding the tag outline."""

_GRID_CELL = 10
_TWO_PI = 2.0 * math.pi

# right, down, down-right, down-left
_NEIGHBOURS = ((1, 0), (0, 1), (1, 1), (-1, 1))


def _as_gray(image) -> np.ndarray:
    if isinstance(image, Image.Image):
        image = image.convert("L")
    arr = np.asarray(image, dtype=float)
    if arr.ndim != 2:
        raise ValueError("expected a single-channel (grayscale) image")
    return arr


def _smoothed(image: FloatImage, sigma: float) -> FloatImage:
    result = image.copy()
    if sigma > 0:
        size = int(max(3.0, 3 * sigma)) | 1
        kernel = make_gaussian_filter(sigma, size)
        result.filter_factored_centered(kernel, kernel)
    return result


def _gradients(data: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    theta = np.zeros_like(data)
    mag = np.zeros_like(data)
    ix = data[1:-1, 2:] - data[1:-1, :-2]
    iy = data[2:, 1:-1] - data[:-2, 1:-1]
    mag[1:-1, 1:-1] = ix * ix + iy * iy
    theta[1:-1, 1:-1] = np.arctan2(iy, ix)
    return theta, mag


def _mod2pi_array(v: np.ndarray) -> np.ndarray:
    absv = np.abs(v)
    r = absv - np.floor(absv / _TWO_PI + 0.5) * _TWO_PI
    return np.where(v < 0, -r, r)


def _sorted_edges(theta: np.ndarray, mag: np.ndarray, active: np.ndarray) -> List[Edge]:
    """All edges between active pixels and their neighbours, stably sorted by cost."""
    height, width = theta.shape
    ys, xs = np.mgrid[0 : height - 1, 0 : width - 1]
    t0 = theta[:-1, :-1]
    act = active[:-1, :-1]
    pix_a, pix_b, costs, orders = [], [], [], []
    for direction, (dx, dy) in enumerate(_NEIGHBOURS):
        nx = xs + dx
        ny = ys + dy
        valid = act & (nx >= 0)
        nxc = np.clip(nx, 0, width - 1)
        t1 = theta[ny, nxc]
        m1 = mag[ny, nxc]
        err = np.abs(_mod2pi_array(t1 - t0))
        ok = valid & (m1 >= MIN_MAG) & (err <= MAX_EDGE_COST)
        a = ys * width + xs
        pix_a.append(a[ok])
        pix_b.append((ny * width + nx)[ok])
        costs.append((err[ok] / MAX_EDGE_COST * WEIGHT_SCALE).astype(int))
        orders.append(a[ok] * 4 + direction)
    a_all = np.concatenate(pix_a)
    b_all = np.concatenate(pix_b)
    c_all = np.concatenate(costs)
    o_all = np.concatenate(orders)
    order = np.lexsort((o_all, c_all))
    return [
        Edge(a, b, c)
        for a, b, c in zip(
            a_all[order].tolist(), b_all[order].tolist(), c_all[order].tolist()
        )
    ]


def _cluster_pixels(theta: np.ndarray, mag: np.ndarray, uf: UnionFind) -> np.ndarray:
    """Merge pixels of similar gradient into clusters; return the mask of active pixels."""
    active = np.zeros(theta.shape, dtype=bool)
    active[:-1, :-1] = mag[:-1, :-1] >= MIN_MAG
    tmin = np.where(active, theta, 0.0).ravel().tolist()
    tmax = list(tmin)
    mmin = np.where(active, mag, 0.0).ravel().tolist()
    mmax = list(mmin)
    merge_edges(_sorted_edges(theta, mag, active), uf, tmin, tmax, mmin, mmax)
    return active


def _collect_clusters(
    mag: np.ndarray, uf: UnionFind, active: np.ndarray
) -> Dict[int, List[XYWeight]]:
    width = mag.shape[1]
    clusters: Dict[int, List[XYWeight]] = {}
    for y, x in np.argwhere(active).tolist():
        idx = y * width + x
        if uf.get_set_size(idx) < MINIMUM_SEGMENT_SIZE:
            continue
        clusters.setdefault(uf.get_representative(idx), []).append(
            XYWeight(float(x), float(y), float(mag[y, x]))
        )
    return clusters


def _segment_from_cluster(
    points: List[XYWeight], theta: np.ndarray, mag: np.ndarray
) -> Optional[Segment]:
    gseg = GLineSegment2D.lsq_fit(points)
    length = distance_2d(gseg.p0, gseg.p1)
    if length < MINIMUM_LINE_LENGTH:
        return None

    seg = Segment()
    dx = gseg.p1[0] - gseg.p0[0]
    dy = gseg.p1[1] - gseg.p0[1]
    seg.theta = math.atan2(dy, dx)
    seg.length = length

    # every gradient votes on which side is dark, so that p0 -> p1 keeps dark on the left
    flip = noflip = 0.0
    for pt in points:
        px, py = int(pt.x), int(pt.y)
        err = mod2pi(float(theta[py, px]) - seg.theta)
        if err < 0:
            noflip += float(mag[py, px])
        else:
            flip += float(mag[py, px])
    if flip > noflip:
        seg.theta += math.pi

    dot = dx * math.cos(seg.theta) + dy * math.sin(seg.theta)
    start, end = (gseg.p1, gseg.p0) if dot > 0 else (gseg.p0, gseg.p1)
    seg.x0, seg.y0 = start
    seg.x1, seg.y1 = end
    return seg


def _link_segments(segments: List[Segment], width: int, height: int) -> None:
    """Record, for each segment, the segments that begin where it ends."""
    gridder: Gridder[Segment] = Gridder(0, 0, width, height, _GRID_CELL)
    for seg in segments:
        gridder.add(seg.x0, seg.y0, seg)

    for parent in segments:
        parent_line = GLine2D.from_points((parent.x0, parent.y0), (parent.x1, parent.y1))
        for child in gridder.find(parent.x1, parent.y1, 0.5 * parent.length):
            if mod2pi(child.theta - parent.theta) > 0:
                continue
            child_line = GLine2D.from_points((child.x0, child.y0), (child.x1, child.y1))
            p = parent_line.intersection_with(child_line)
            if p is None:
                continue
            parent_dist = distance_2d(p, (parent.x1, parent.y1))
            child_dist = distance_2d(p, (child.x0, child.y0))
            if max(parent_dist, child_dist) > parent.length:
                continue
            parent.children.append(child)


def _remove_duplicates(detections: List[TagDetection]) -> List[TagDetection]:
    """Keep the best of overlapping detections that share an id."""
    kept: List[TagDetection] = []
    for det in detections:
        new_feature = True
        for idx, other in enumerate(kept):
            if det.id != other.id or not det.overlaps_too_much(other):
                continue
            new_feature = False
            if det.hamming_distance > other.hamming_distance:
                continue
            if (
                det.hamming_distance < other.hamming_distance
                or det.observed_perimeter > other.observed_perimeter
            ):
                kept[idx] = det
        if new_feature:
            kept.append(det)
    return kept


class TagDetector:
    """Finds tags of one family in grayscale images."""

    def __init__(self, tag_codes: TagCodes) -> None:
        self.tag_family = TagFamily(tag_codes)

    def extract_tags(self, image) -> List[TagDetection]:
        """Detect tags in ``image``, a 2-D array of 0..255 values or a PIL image."""
        gray = _as_gray(image)
        height, width = gray.shape
        if width < 3 or height < 3:
            return []

        fim_orig = FloatImage(width, height, (gray / 255.0).ravel())
        optical_center = (float(width // 2), float(height // 2))

        fim = _smoothed(fim_orig, SIGMA)
        if SEG_SIGMA > 0 and SEG_SIGMA == SIGMA:
            fim_seg = fim
        else:
            fim_seg = _smoothed(fim_orig, SEG_SIGMA)

        theta, mag = _gradients(fim_seg.data)
        uf = UnionFind(width * height)
        active = _cluster_pixels(theta, mag, uf)

        clusters = _collect_clusters(mag, uf, active)
        segments = [
            seg
            for seg in (
                _segment_from_cluster(clusters[rep], theta, mag) for rep in sorted(clusters)
            )
            if seg is not None
        ]
        _link_segments(segments, width, height)

        quads = [q for seg in segments for q in search_quads(seg, optical_center)]
        detections = [
            det
            for det in (self._decode_quad(q, fim, width, height) for q in quads)
            if det is not None
        ]
        return _remove_duplicates(detections)

    def _decode_quad(
        self, quad: Quad, fim: FloatImage, width: int, height: int
    ) -> Optional[TagDetection]:
        family = self.tag_family
        dd = 2 * family.black_border + family.dimension

        black_model = GrayModel()
        white_model = GrayModel()
        for iy in range(-1, dd + 1):
            y = (iy + 0.5) / dd
            for ix in range(-1, dd + 1):
                x = (ix + 0.5) / dd
                px, py = quad.interpolate01(x, y)
                irx = int(px + 0.5)
                iry = int(py + 0.5)
                if not (0 <= irx < width and 0 <= iry < height):
                    continue
                v = fim.get(irx, iry)
                if iy in (-1, dd) or ix in (-1, dd):
                    white_model.add_observation(x, y, v)
                elif iy in (0, dd - 1) or ix in (0, dd - 1):
                    black_model.add_observation(x, y, v)

        bad = False
        tag_code = 0
        for iy in range(family.dimension - 1, -1, -1):
            y = (family.black_border + iy + 0.5) / dd
            for ix in range(family.dimension):
                x = (family.black_border + ix + 0.5) / dd
                px, py = quad.interpolate01(x, y)
                irx = int(px + 0.5)
                iry = int(py + 0.5)
                if not (0 <= irx < width and 0 <= iry < height):
                    bad = True
                    continue
                threshold = (black_model.interpolate(x, y) + white_model.interpolate(x, y)) * 0.5
                tag_code = (tag_code << 1) | (1 if fim.get(irx, iry) > threshold else 0)
        if bad:
            return None

        decoding = family.decode(tag_code)
        try:
            base = quad.homography.h
        except ValueError:
            return None

        angle = decoding.rotation * math.pi / 2
        c, s = math.cos(angle), math.sin(angle)
        rot = np.array([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]])

        det = TagDetection(
            id=decoding.id,
            good=decoding.good,
            obs_code=decoding.obs_code,
            code=decoding.code,
            hamming_distance=decoding.hamming_distance,
            rotation=decoding.rotation,
            homography=base @ rot,
            hxy=quad.homography.cxy,
        )

        # order the corners so that they start from the tag's bottom-left corner
        bottom_left = det.interpolate(-1, -1)
        best_rot = min(
            range(4), key=lambda i: distance_2d(bottom_left, quad.quad_points[i])
        )
        det.p = [quad.quad_points[(i + best_rot) % 4] for i in range(4)]

        if not det.good:
            return None
        det.cxy = quad.interpolate01(0.5, 0.5)
        det.observed_perimeter = quad.observed_perimeter
        return det