"""Gaussian filter construction and symmetric centred convolution."""

from __future__ import annotations

import math
import warnings
from typing import List, Sequence

import numpy as np


def make_gaussian_filter(sigma: float, n: int) -> List[float]:
    """Return a normalised Gaussian kernel of length ``n`` (which should be odd).

    A ``sigma`` of zero yields a unit impulse at the centre.
    """
    if n <= 0:
        raise ValueError("filter length must be positive")
    if sigma == 0:
        f = [0.0] * n
        f[n // 2] = 1.0
        return f
    inv_variance = 1.0 / (2 * sigma * sigma)
    f = [math.exp(-(i - n // 2) ** 2 * inv_variance) for i in range(n)]
    total = sum(f)
    return [v / total for v in f]


def convolve_symmetric_centered(a, f: Sequence[float]) -> np.ndarray:
    """Convolve ``a`` with ``f`` along its last axis, with no net shift.

    Samples that fall outside the input are replaced by the first element
    near the start and by the last element near the end.  The result has the
    same shape as ``a``.
    """
    arr = np.asarray(a, dtype=float)
    filt = np.asarray(f, dtype=float)
    if filt.ndim != 1 or filt.size == 0:
        raise ValueError("filter must be a non-empty 1-D sequence")
    if arr.ndim == 0:
        raise ValueError("input must have at least one dimension")
    fs = filt.size
    if fs % 2 == 0:
        warnings.warn("filter is not odd length", UserWarning, stacklevel=2)
    n = arr.shape[-1]
    if n == 0:
        return arr.copy()
    half = fs // 2
    centre = np.arange(n)[:, None] + half
    src = centre - np.arange(fs)[None, :]
    fallback = np.where(centre >= n, n - 1, 0)
    idx = np.where((src >= 0) & (src < n), src, fallback)
    return (arr[..., idx] * filt).sum(axis=-1)