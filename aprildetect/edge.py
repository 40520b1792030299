"""Edges between neighbouring pixels and the greedy clustering that merges them."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, List, MutableSequence

from .floatimage import FloatImage
from .mathutil import mod2pi, mod2pi_ref
from .unionfind import UnionFind

MIN_MAG = 0.004
"""Minimum gradient magnitude for a pixel to take part in an edge."""

MAX_EDGE_COST = 30.0 * math.pi / 180.0
"""Largest orientation difference (30 degrees) that still forms an edge."""

WEIGHT_SCALE = 100
"""Scale that turns a normalised orientation error into an integer cost."""

THETA_THRESH = 100.0
"""Orientation threshold used when merging clusters."""

MAG_THRESH = 1200.0
"""Magnitude threshold used when merging clusters."""


@dataclass(frozen=True)
class Edge:
    """An edge between pixels ``pixel_idx_a`` and ``pixel_idx_b``.

    Edges order by ``cost`` alone; lower cost is better.
    """

    pixel_idx_a: int
    pixel_idx_b: int
    cost: int

    def __lt__(self, other: "Edge") -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.cost < other.cost


def edge_cost(theta0: float, theta1: float, mag1: float) -> int:
    """Cost of an edge between two pixels, or -1 if there is no edge.

    The cost grows with the difference in gradient orientation.
    """
    if mag1 < MIN_MAG:
        return -1
    theta_err = abs(mod2pi(theta1 - theta0))
    if theta_err > MAX_EDGE_COST:
        return -1
    return int(theta_err / MAX_EDGE_COST * WEIGHT_SCALE)


_NEIGHBOURS = ((1, 0), (0, 1), (1, 1), (-1, 1))


def calc_edges(theta0: float, x: int, y: int, theta: FloatImage, mag: FloatImage) -> List[Edge]:
    """Edges from pixel ``(x, y)`` to its right, lower and two diagonal neighbours.

    The caller must make sure that ``x + 1`` and ``y + 1`` lie inside the images.
    """
    width = theta.width
    this_pixel = y * width + x
    edges = []
    for dx, dy in _NEIGHBOURS:
        nx, ny = x + dx, y + dy
        if nx < 0:
            continue
        cost = edge_cost(theta0, theta.get(nx, ny), mag.get(nx, ny))
        if cost >= 0:
            edges.append(Edge(this_pixel, ny * width + nx, cost))
    return edges


def merge_edges(
    edges: Iterable[Edge],
    uf: UnionFind,
    tmin: MutableSequence[float],
    tmax: MutableSequence[float],
    mmin: MutableSequence[float],
    mmax: MutableSequence[float],
) -> None:
    """Merge clusters along ``edges`` in the given order.

    Two clusters are joined when the union of their orientation and magnitude
    spans stays within the thresholds.  The per-cluster bounds in ``tmin``,
    ``tmax``, ``mmin`` and ``mmax`` are indexed by cluster root and are
    updated in place.
    """
    two_pi = 2.0 * math.pi
    for edge in edges:
        ida = uf.get_representative(edge.pixel_idx_a)
        idb = uf.get_representative(edge.pixel_idx_b)
        if ida == idb:
            continue

        size_ab = uf.get_set_size(ida) + uf.get_set_size(idb)

        tmina, tmaxa = tmin[ida], tmax[ida]
        tminb, tmaxb = tmin[idb], tmax[idb]
        costa = tmaxa - tmina
        costb = tmaxb - tminb

        # shift b by a multiple of 2pi so that its span lines up with a's
        mid_b = (tminb + tmaxb) / 2
        bshift = mod2pi_ref((tmina + tmaxa) / 2, mid_b) - mid_b

        tminab = min(tmina, tminb + bshift)
        tmaxab = max(tmaxa, tmaxb + bshift)
        if tmaxab - tminab > two_pi:
            tmaxab = tminab + two_pi

        mminab = min(mmin[ida], mmin[idb])
        mmaxab = max(mmax[ida], mmax[idb])

        costab = tmaxab - tminab
        theta_ok = costab <= min(costa, costb) + THETA_THRESH / size_ab
        mag_ok = (mmaxab - mminab) <= min(
            mmax[ida] - mmin[ida], mmax[idb] - mmin[idb]
        ) + MAG_THRESH / size_ab
        if theta_ok and mag_ok:
            idab = uf.connect_nodes(ida, idb)
            tmin[idab] = tminab
            tmax[idab] = tmaxab
            mmin[idab] = mminab
            mmax[idab] = mmaxab