"""Line segments fitted to clusters of pixels with similar gradients."""

from __future__ import annotations

import itertools
import math
from typing import List

MINIMUM_SEGMENT_SIZE = 4
"""Minimum pixels in a cluster before a line is fitted to it."""

MINIMUM_LINE_LENGTH = 4.0
"""Minimum segment length in pixels."""


class Segment:
    """A directed segment from ``(x0, y0)`` to ``(x1, y1)``.

    ``theta`` is the gradient direction (towards white) and ``children``
    holds segments that may follow this one around a quad.
    """

    _ids = itertools.count(1)

    def __init__(self) -> None:
        self.x0 = 0.0
        self.y0 = 0.0
        self.x1 = 0.0
        self.y1 = 0.0
        self.theta = 0.0
        self.length = 0.0
        self.segment_id = next(Segment._ids)
        self.children: List["Segment"] = []

    def segment_length(self) -> float:
        """Euclidean distance between the two endpoints."""
        return math.hypot(self.x1 - self.x0, self.y1 - self.y0)

    def __str__(self) -> str:
        return f"({self.x0:g},{self.y0:g}), ({self.x1:g},{self.y1:g})"

    def __repr__(self) -> str:
        return f"Segment(id={self.segment_id}, {self})"