"""Grayscale images held as arrays of floats."""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

import numpy as np

from .gaussian import convolve_symmetric_centered


class FloatImage:
    """A ``width`` x ``height`` image of float intensities.

    The pixels live in ``data``, a numpy array indexed ``[y, x]``.
    """

    def __init__(self, width: int = 0, height: int = 0, pixels: Optional[Sequence[float]] = None) -> None:
        if width < 0 or height < 0:
            raise ValueError("image dimensions must not be negative")
        if pixels is None:
            self.data = np.zeros((height, width), dtype=float)
        else:
            arr = np.array(pixels, dtype=float)
            if arr.size != width * height:
                raise ValueError(
                    f"expected {width * height} pixels, got {arr.size}"
                )
            self.data = arr.reshape((height, width))

    @property
    def width(self) -> int:
        return self.data.shape[1]

    @property
    def height(self) -> int:
        return self.data.shape[0]

    def __len__(self) -> int:
        return self.data.size

    def get(self, x: int, y: int) -> float:
        return float(self.data[y, x])

    def set(self, x: int, y: int, v: float) -> None:
        self.data[y, x] = v

    def copy(self) -> "FloatImage":
        """Return an independent copy of this image."""
        clone = FloatImage()
        clone.data = self.data.copy()
        return clone

    def decimate_avg(self) -> None:
        """Halve both dimensions by keeping every second pixel."""
        new_h, new_w = self.height // 2, self.width // 2
        self.data = self.data[0 : 2 * new_h : 2, 0 : 2 * new_w : 2].copy()

    def normalize(self) -> None:
        """Rescale all values linearly into [0, 1]."""
        lo, hi = self.min_max()
        span = hi - lo
        if span == 0:
            raise ValueError("cannot normalise an image with constant intensity")
        self.data = (self.data - lo) / span

    def filter_factored_centered(self, fhoriz: Sequence[float], fvert: Sequence[float]) -> None:
        """Apply a separable filter: ``fhoriz`` along rows, then ``fvert`` along columns."""
        if self.data.size == 0:
            return
        rows = convolve_symmetric_centered(self.data, fhoriz)
        self.data = convolve_symmetric_centered(rows.T, fvert).T.copy()

    def min_max(self) -> Tuple[float, float]:
        """Return the smallest and largest pixel values."""
        if self.data.size == 0:
            raise ValueError("image has no pixels")
        return float(self.data.min()), float(self.data.max())