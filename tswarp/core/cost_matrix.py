"""
Row-major 2D view over a flat float64 buffer.

Every read and write goes through ``_offset``, which rejects indices outside
``[0, rows) x [0, cols)`` instead of wrapping around like numpy negative
indexing or running past the end of the buffer.
"""

from __future__ import annotations

from typing import Optional, Tuple

import numpy as np
from numpy.typing import NDArray


class CostMatrix:
    """Bounds-checked ``rows x cols`` matrix stored in a flat owned buffer."""

    __slots__ = ("rows", "cols", "_data")

    def __init__(self, rows: int, cols: int, buffer: Optional[NDArray[np.float64]] = None):
        if rows < 1 or cols < 1:
            raise ValueError(f"CostMatrix dimensions must be >= 1, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        size = rows * cols
        if buffer is None:
            self._data = np.empty(size, dtype=np.float64)
        else:
            if buffer.ndim != 1 or buffer.dtype != np.float64:
                raise ValueError("buffer must be a flat float64 array")
            if buffer.shape[0] < size:
                raise ValueError(f"buffer holds {buffer.shape[0]} cells, need {size}")
            self._data = buffer[:size]

    @classmethod
    def square(cls, n: int, buffer: Optional[NDArray[np.float64]] = None) -> CostMatrix:
        return cls(n, n, buffer)

    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows, self.cols

    def _offset(self, i: int, j: int) -> int:
        if not (0 <= i < self.rows and 0 <= j < self.cols):
            raise IndexError(f"Cell ({i}, {j}) outside {self.rows}x{self.cols} matrix")
        return i * self.cols + j

    def __getitem__(self, idx: Tuple[int, int]) -> float:
        i, j = idx
        return float(self._data[self._offset(i, j)])

    def __setitem__(self, idx: Tuple[int, int], value: float) -> None:
        i, j = idx
        self._data[self._offset(i, j)] = value

    def fill(self, value: float) -> None:
        self._data.fill(value)

    def to_array(self) -> NDArray[np.float64]:
        """Copy of the contents as a ``(rows, cols)`` array."""
        return self._data.reshape(self.rows, self.cols).copy()

    def __repr__(self) -> str:
        return f"CostMatrix({self.rows}x{self.cols})"
