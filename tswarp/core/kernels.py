"""
DTW recurrence kernels.

The rolling-row kernel is compiled with numba and releases the GIL so pairs
can run on a thread pool. The full-matrix fill stays in Python because it
writes through the bounds-checked ``CostMatrix``. Both evaluate the same
expressions in the same order, so they return identical floats.
"""

import numpy as np
from numba import njit

from .cost_matrix import CostMatrix


def _min3(x: float, y: float, z: float) -> float:
    """Smallest of three values, first strict winner on ties."""
    if x < y:
        return x if x < z else z
    return y if y < z else z


def _square_dist(x: float, y: float) -> float:
    dif = x - y
    return dif * dif


min3 = njit(cache=True, nogil=True)(_min3)
square_dist = njit(cache=True, nogil=True)(_square_dist)


@njit(cache=True, nogil=True)
def rolling_row_cost(x: np.ndarray, y: np.ndarray,
                     prev: np.ndarray, curr: np.ndarray) -> float:
    """
    Accumulated DTW cost of ``x`` against ``y`` keeping only two rows.

    ``prev`` and ``curr`` are scratch buffers of at least ``len(y)`` cells.
    They are overwritten before being read.
    """
    n = x.shape[0]
    m = y.shape[0]

    curr[0] = square_dist(x[0], y[0])
    for j in range(1, m):
        curr[j] = curr[j - 1] + square_dist(x[0], y[j])

    for i in range(1, n):
        prev, curr = curr, prev
        curr[0] = prev[0] + square_dist(x[i], y[0])
        for j in range(1, m):
            d11 = prev[j - 1]
            d01 = curr[j - 1]
            d10 = prev[j]
            curr[j] = min3(d11, d01, d10) + square_dist(x[i], y[j])

    return curr[m - 1]


def full_matrix_fill(x: np.ndarray, y: np.ndarray, m: CostMatrix) -> float:
    """Fill ``m`` with accumulated DTW costs and return the corner cell."""
    n_rows, n_cols = m.shape
    if n_rows != x.shape[0] or n_cols != y.shape[0]:
        raise ValueError(f"CostMatrix is {n_rows}x{n_cols}, series are "
                         f"{x.shape[0]} and {y.shape[0]} long")

    xs = x.tolist()
    ys = y.tolist()

    m[0, 0] = _square_dist(xs[0], ys[0])
    # First row runs along y, first column along x
    for j in range(1, n_cols):
        m[0, j] = m[0, j - 1] + _square_dist(xs[0], ys[j])
    for i in range(1, n_rows):
        m[i, 0] = m[i - 1, 0] + _square_dist(xs[i], ys[0])

    for i in range(1, n_rows):
        for j in range(1, n_cols):
            d11 = m[i - 1, j - 1]
            d01 = m[i, j - 1]
            d10 = m[i - 1, j]
            m[i, j] = _min3(d11, d01, d10) + _square_dist(xs[i], ys[j])

    return m[n_rows - 1, n_cols - 1]
