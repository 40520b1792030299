"""Uniform grid for fast lookup of objects near a point."""

from __future__ import annotations

from typing import Generic, Iterator, List, TypeVar

T = TypeVar("T")


class Gridder(Generic[T]):
    """Buckets objects by position into square cells of ``pixels_per_cell``."""

    def __init__(self, x0: float, y0: float, x1: float, y1: float, pixels_per_cell: float) -> None:
        if pixels_per_cell <= 0:
            raise ValueError("pixels_per_cell must be positive")
        self.x0 = x0
        self.y0 = y0
        self.pixels_per_cell = pixels_per_cell
        self.width = int((x1 - x0) / pixels_per_cell + 1)
        self.height = int((y1 - y0) / pixels_per_cell + 1)
        if self.width <= 0 or self.height <= 0:
            raise ValueError("grid extent must not be negative")
        self.x1 = x0 + pixels_per_cell * self.width
        self.y1 = y0 + pixels_per_cell * self.height
        self._cells: List[List[List[T]]] = [
            [[] for _ in range(self.width)] for _ in range(self.height)
        ]

    def _clamped(self, value: float, origin: float, limit: int) -> int:
        index = int((value - origin) / self.pixels_per_cell)
        return min(limit - 1, max(0, index))

    def add(self, x: float, y: float, obj: T) -> None:
        """Store ``obj`` at ``(x, y)``; positions outside the grid are ignored."""
        ix = int((x - self.x0) / self.pixels_per_cell)
        iy = int((y - self.y0) / self.pixels_per_cell)
        if 0 <= ix < self.width and 0 <= iy < self.height:
            self._cells[iy][ix].append(obj)

    def find(self, x: float, y: float, search_range: float) -> Iterator[T]:
        """Yield objects in the cells covering ``search_range`` around ``(x, y)``.

        Cells are visited row by row; within a cell the most recently added
        object comes first.
        """
        ix0 = self._clamped(x - search_range, self.x0, self.width)
        ix1 = self._clamped(x + search_range, self.x0, self.width)
        iy0 = self._clamped(y - search_range, self.y0, self.height)
        iy1 = self._clamped(y + search_range, self.y0, self.height)
        for row in self._cells[iy0 : iy1 + 1]:
            for cell in row[ix0 : ix1 + 1]:
                yield from reversed(cell)