"""Tag code families: rotation, Hamming distance and decoding."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Tuple

_NO_MATCH_HAMMING = 2**31 - 1


@dataclass(frozen=True)
class TagCodes:
    """The code words of a family with their bit count and minimum distance."""

    bits: int
    min_hamming_distance: int
    codes: Tuple[int, ...]

    def __len__(self) -> int:
        return len(self.codes)


@dataclass(frozen=True)
class Decoding:
    """Result of matching an observed code against a family."""

    id: int
    hamming_distance: int
    rotation: int
    good: bool
    obs_code: int
    code: int


def pop_count(w: int) -> int:
    """Number of set bits in a non-negative integer."""
    if w < 0:
        raise ValueError("pop_count needs a non-negative value")
    return w.bit_count()


def hamming_distance(a: int, b: int) -> int:
    """Number of bits in which ``a`` and ``b`` differ."""
    return pop_count(a ^ b)


def rotate90(w: int, d: int) -> int:
    """Rotate the bits of ``w``, laid out as a ``d`` x ``d`` grid, by 90 degrees."""
    wr = 0
    for r in range(d - 1, -1, -1):
        for c in range(d):
            wr = (wr << 1) | ((w >> (r + d * c)) & 1)
    return wr


class TagFamily:
    """A family of square tag codes that can decode observed bit patterns."""

    def __init__(self, tag_codes: TagCodes) -> None:
        self.black_border = 1
        self.bits = tag_codes.bits
        self.dimension = math.isqrt(self.bits)
        if self.dimension * self.dimension != self.bits:
            raise ValueError(f"bits={self.bits} is not a square number")
        self.minimum_hamming_distance = tag_codes.min_hamming_distance
        self.error_recovery_bits = 1
        self.codes: List[int] = list(tag_codes.codes)

    def set_error_recovery_fraction(self, v: float) -> None:
        """Accept errors up to fraction ``v`` of the correctable bit count."""
        self.error_recovery_bits = int(((self.minimum_hamming_distance - 1) // 2) * v)

    def _rotations(self, w: int) -> List[int]:
        rotations = [w]
        for _ in range(3):
            rotations.append(rotate90(rotations[-1], self.dimension))
        return rotations

    def decode(self, r_code: int) -> Decoding:
        """Match ``r_code`` against every code in all four rotations."""
        best_id = -1
        best_hamming = _NO_MATCH_HAMMING
        best_rotation = 0
        best_code = 0
        r_codes = self._rotations(r_code)
        for code_id, code in enumerate(self.codes):
            for rot, rotated in enumerate(r_codes):
                dist = hamming_distance(rotated, code)
                if dist < best_hamming:
                    best_hamming = dist
                    best_rotation = rot
                    best_id = code_id
                    best_code = code
        return Decoding(
            id=best_id,
            hamming_distance=best_hamming,
            rotation=best_rotation,
            good=best_hamming <= self.error_recovery_bits,
            obs_code=r_code,
            code=best_code,
        )

    def hamming_histogram(self) -> List[int]:
        """Count code pairs by their rotation-aware Hamming distance.

        Entry ``d`` of the returned list of length ``bits + 1`` holds the
        number of pairs whose smallest distance over all rotations is ``d``.
        """
        hist = [0] * (self.bits + 1)
        for i, code in enumerate(self.codes):
            rotations = self._rotations(code)
            for other in self.codes[i + 1 :]:
                hist[min(hamming_distance(r, other) for r in rotations)] += 1
        return hist