"""Spatially varying grayscale model used to threshold tag bits."""

from __future__ import annotations

import math
import warnings

import numpy as np

_MIN_OBSERVATIONS = 6
_DET_THRESHOLD = 1e-12


class GrayModel:
    """Least-squares fit of ``c1*x + c2*y + c3*x*y + c4`` to gray values.

    With fewer than six observations, or when the normal equations are
    singular, the model falls back to the mean of the observed values.
    """

    def __init__(self) -> None:
        self._ata = np.zeros((4, 4))
        self._atb = np.zeros(4)
        self._coeffs = np.zeros(4)
        self._nobs = 0
        self._dirty = False

    @property
    def num_observations(self) -> int:
        return self._nobs

    def add_observation(self, x: float, y: float, gray: float) -> None:
        """Record that the pixel at ``(x, y)`` has value ``gray``."""
        row = np.array([x, y, x * y, 1.0])
        self._ata += np.outer(row, row)
        self._atb += row * gray
        self._nobs += 1
        self._dirty = True

    def interpolate(self, x: float, y: float) -> float:
        """Predicted gray value at ``(x, y)``; NaN when nothing was observed."""
        if self._dirty:
            self._compute()
        c = self._coeffs
        return float(c[0] * x + c[1] * y + c[2] * x * y + c[3])

    def _compute(self) -> None:
        self._dirty = False
        if self._nobs >= _MIN_OBSERVATIONS:
            if abs(np.linalg.det(self._ata)) > _DET_THRESHOLD:
                self._coeffs = np.linalg.inv(self._ata) @ self._atb
                return
            warnings.warn(
                "gray model matrix is singular; using a constant model",
                RuntimeWarning,
                stacklevel=3,
            )
        self._coeffs = np.zeros(4)
        self._coeffs[3] = self._atb[3] / self._nobs if self._nobs else math.nan