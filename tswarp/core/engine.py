"""
Dynamic Time Warping alignment engine.

The engine computes the minimum accumulated squared-error cost of a monotone,
contiguous warping path from ``(0, 0)`` to ``(n-1, n-1)`` between two series
of the same length ``n``. The search is unconstrained (no warping window) and
only the cost is tracked, not the path itself.

Two interchangeable memory strategies are available:

- ``Strategy.FULL_MATRIX`` fills an ``n x n`` bounds-checked cost matrix.
  O(n^2) memory; useful to inspect the whole matrix.
- ``Strategy.ROLLING_ROW`` keeps the previous and current rows only.
  O(n) memory, numba-compiled; the default.

Both return the same value for the same inputs.

Examples
--------
>>> engine = DTWEngine()
>>> engine.align([0.0, 1.0], [0.0, 2.0])
1.0
"""

from __future__ import annotations

import logging
import math
from enum import Enum
from typing import Union

import numpy as np
from numpy.typing import ArrayLike, NDArray

from ..errors import EmptySeriesError, LengthMismatchError
from ..series import LabeledSeries
from .cost_matrix import CostMatrix
from .kernels import full_matrix_fill, rolling_row_cost

logger = logging.getLogger(__name__)

SeriesLike = Union[LabeledSeries, ArrayLike]


class Strategy(str, Enum):
    """Memory layout used to evaluate the DTW recurrence."""
    FULL_MATRIX = "full_matrix"
    ROLLING_ROW = "rolling_row"


class Metric(str, Enum):
    """How the accumulated cost is reported.

    ``SQUARED`` returns the raw sum of squared differences along the optimal
    path. ``ROOTED`` takes its square root once at the end.
    """
    SQUARED = "squared"
    ROOTED = "rooted"


def _coerce_enum(enum_cls, value):
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).lower())
    except ValueError:
        choices = [m.value for m in enum_cls]
        raise ValueError(f"Unknown {enum_cls.__name__.lower()}: {value!r}. "
                         f"Available: {choices}") from None


def _as_samples(s: SeriesLike) -> NDArray[np.float64]:
    if isinstance(s, LabeledSeries):
        return s.samples
    arr = np.ascontiguousarray(s, dtype=np.float64)
    if arr.ndim != 1:
        raise ValueError(f"Series must be 1D, got shape {arr.shape}")
    return arr


class DTWEngine:
    """
    Pairwise DTW cost with a selectable memory strategy.

    Parameters
    ----------
    strategy : Strategy or str, default="rolling_row"
        ``"rolling_row"`` or ``"full_matrix"``.
    metric : Metric or str, default="squared"
        ``"squared"`` keeps the accumulated squared error as is,
        ``"rooted"`` returns its square root.

    Notes
    -----
    An engine holds no buffers between calls, so one instance can be shared
    by several threads.
    """

    def __init__(self, strategy: Union[Strategy, str] = Strategy.ROLLING_ROW,
                 metric: Union[Metric, str] = Metric.SQUARED):
        self.strategy = _coerce_enum(Strategy, strategy)
        self.metric = _coerce_enum(Metric, metric)

    def _check(self, a: SeriesLike, b: SeriesLike):
        x = _as_samples(a)
        y = _as_samples(b)
        if x.shape[0] != y.shape[0]:
            raise LengthMismatchError(x.shape[0], y.shape[0])
        if x.shape[0] == 0:
            raise EmptySeriesError("Cannot align empty series")
        return x, y

    def align(self, a: SeriesLike, b: SeriesLike) -> float:
        """
        Alignment cost between two equal-length series.

        Raises
        ------
        LengthMismatchError
            If the series differ in length.
        EmptySeriesError
            If both series are empty.
        """
        x, y = self._check(a, b)
        n = x.shape[0]

        if self.strategy is Strategy.FULL_MATRIX:
            cost = full_matrix_fill(x, y, CostMatrix.square(n))
        else:
            prev = np.empty(n, dtype=np.float64)
            curr = np.empty(n, dtype=np.float64)
            cost = float(rolling_row_cost(x, y, prev, curr))

        if self.metric is Metric.ROOTED:
            return math.sqrt(cost)
        return cost

    __call__ = align

    def cost_matrix(self, a: SeriesLike, b: SeriesLike) -> NDArray[np.float64]:
        """Full ``n x n`` accumulated cost matrix, whatever the strategy.

        Values are the raw squared-error accumulation; ``metric`` only applies
        to the scalar returned by :meth:`align`.
        """
        x, y = self._check(a, b)
        m = CostMatrix.square(x.shape[0])
        full_matrix_fill(x, y, m)
        return m.to_array()

    def __repr__(self) -> str:
        return f"DTWEngine(strategy={self.strategy.value!r}, metric={self.metric.value!r})"


def dtw_cost(a: SeriesLike, b: SeriesLike,
             strategy: Union[Strategy, str] = Strategy.ROLLING_ROW,
             metric: Union[Metric, str] = Metric.SQUARED) -> float:
    """Shortcut for ``DTWEngine(strategy, metric).align(a, b)``."""
    return DTWEngine(strategy, metric).align(a, b)
