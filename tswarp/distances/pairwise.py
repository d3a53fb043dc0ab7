"""
Pairwise DTW costs over a dataset.

``total_cost`` is the headline operation: it visits every unordered pair of
series, self-pairs included, in a fixed order and sums the alignment costs.
The matrix helpers return the same per-pair costs laid out as a square
matrix, or a band of its rows for sharded batch jobs.
"""

import logging
from typing import Iterable, Iterator, List, Optional, Tuple

import numpy as np
from numpy.typing import NDArray
from joblib import Parallel, delayed
from tqdm.auto import tqdm

from ..core.engine import DTWEngine
from ..errors import PairLengthMismatchError
from ..series import Dataset, LabeledSeries

logger = logging.getLogger(__name__)


def pair_count(n_series: int) -> int:
    """Number of pairs visited by ``total_cost``: n(n+1)/2."""
    return n_series * (n_series + 1) // 2


def iter_pairs(n_series: int, include_self: bool = True) -> Iterator[Tuple[int, int]]:
    """Yield ``(i, j)`` with ``i <= j`` (``i < j`` without self-pairs), row by row."""
    offset = 0 if include_self else 1
    for i in range(n_series):
        for j in range(i + offset, n_series):
            yield i, j


def _as_dataset(dataset) -> Dataset:
    if isinstance(dataset, Dataset):
        return dataset
    items = list(dataset)
    if all(isinstance(s, LabeledSeries) for s in items):
        return Dataset(items)
    return Dataset.from_arrays(items)


def check_pair_lengths(dataset: Dataset) -> None:
    """
    Fail on the first pair, in aggregation order, whose lengths differ.

    With ``i`` ascending and ``j`` running from ``i``, the first mismatch
    always involves series 0.
    """
    lengths = dataset.lengths
    if not lengths:
        return
    first = lengths[0]
    for j, length in enumerate(lengths):
        if length != first:
            raise PairLengthMismatchError(0, j, first, length)


def _align_pairs(dataset: Dataset, engine: DTWEngine, pairs: List[Tuple[int, int]],
                 n_jobs: int, backend: str, progress: bool) -> List[float]:
    """Costs for ``pairs``, returned in the same order."""
    if n_jobs == 0:
        raise ValueError("n_jobs must be non-zero")

    if progress:
        pair_iter: Iterable[Tuple[int, int]] = tqdm(pairs, desc="DTW pairs", unit="pair")
    else:
        pair_iter = pairs

    if n_jobs == 1:
        return [engine.align(dataset[i], dataset[j]) for i, j in pair_iter]

    # Each task allocates its own cost buffers inside align
    return Parallel(n_jobs=n_jobs, backend=backend)(
        delayed(engine.align)(dataset[i], dataset[j]) for i, j in pair_iter
    )


def total_cost(dataset, engine: Optional[DTWEngine] = None, n_jobs: int = 1,
               backend: str = "threading", progress: bool = False) -> float:
    """
    Sum of DTW costs over all pairs ``(i, j)`` with ``i <= j``.

    Parameters
    ----------
    dataset : Dataset or iterable of LabeledSeries / arrays
        Series to compare. All must share one length.
    engine : DTWEngine, optional
        Engine to use; defaults to the rolling-row, squared-cost engine.
    n_jobs : int, default=1
        Number of joblib workers (-1 = all cores). The sum is always taken
        in pair order, so the result does not depend on ``n_jobs``.
    backend : str, default="threading"
        joblib backend used when ``n_jobs != 1``.
    progress : bool, default=False
        Show a tqdm progress bar over pairs.

    Returns
    -------
    float
        Total accumulated cost. Self-pairs contribute 0.

    Raises
    ------
    PairLengthMismatchError
        If any two series differ in length. Nothing is computed.

    Examples
    --------
    >>> total_cost([[0.0, 1.0], [0.0, 2.0]])
    1.0
    """
    dataset = _as_dataset(dataset)
    engine = engine or DTWEngine()
    check_pair_lengths(dataset)

    n_series = len(dataset)
    pairs = list(iter_pairs(n_series))
    logger.info(f"Aligning {len(pairs)} pairs from {n_series} series with {engine}")

    costs = _align_pairs(dataset, engine, pairs, n_jobs, backend, progress)

    total = 0.0
    for cost in costs:
        total += cost

    logger.info(f"Total cost: {total}")
    return total


def pairwise_cost_matrix(dataset, engine: Optional[DTWEngine] = None, n_jobs: int = 1,
                         backend: str = "threading") -> NDArray[np.float64]:
    """
    Symmetric ``(n_series, n_series)`` matrix of DTW costs.

    The diagonal is zero; each off-diagonal pair is aligned once.
    """
    dataset = _as_dataset(dataset)
    engine = engine or DTWEngine()
    check_pair_lengths(dataset)

    n_series = len(dataset)
    pairs = list(iter_pairs(n_series, include_self=False))
    logger.info(f"Computing {n_series}x{n_series} cost matrix with {engine}")

    costs = _align_pairs(dataset, engine, pairs, n_jobs, backend, progress=False)

    D = np.zeros((n_series, n_series))
    for (i, j), d in zip(pairs, costs):
        D[i, j] = d
        D[j, i] = d
    return D


def pairwise_cost_rows(dataset, start_idx: int, end_idx: int,
                       engine: Optional[DTWEngine] = None) -> NDArray[np.float64]:
    """
    Rows ``start_idx:end_idx`` of the pairwise cost matrix.

    Lets a large matrix be computed in independent bands, e.g. one per
    cluster node, and stacked afterwards.

    Examples
    --------
    >>> D_part = pairwise_cost_rows(dataset, 0, 100)  # doctest: +SKIP
    >>> np.save('costs_0_100.npy', D_part)  # doctest: +SKIP
    """
    dataset = _as_dataset(dataset)
    engine = engine or DTWEngine()
    n_series = len(dataset)

    if start_idx < 0 or end_idx > n_series or start_idx >= end_idx:
        raise ValueError(f"Invalid indices: start={start_idx}, end={end_idx}, n={n_series}")

    check_pair_lengths(dataset)

    D_part = np.zeros((end_idx - start_idx, n_series))
    for i in range(start_idx, end_idx):
        for j in range(n_series):
            if i != j:
                D_part[i - start_idx, j] = engine.align(dataset[i], dataset[j])

    logger.info(f"Computed partial cost matrix: rows {start_idx}:{end_idx}")
    return D_part
