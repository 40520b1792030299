"""Weighted 2-D sample points."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class XYWeight:
    """A point ``(x, y)`` carrying a ``weight``."""

    x: float
    y: float
    weight: float