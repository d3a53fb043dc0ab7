"""
Labeled time series and the datasets that hold them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Tuple, Union, overload

import numpy as np
from numpy.typing import ArrayLike, NDArray

from .errors import EmptySeriesError


@dataclass(frozen=True, eq=False)
class LabeledSeries:
    """An immutable, non-empty 1-D float64 series with a class label."""
    label: str
    samples: NDArray[np.float64]

    def __post_init__(self):
        samples = np.array(self.samples, dtype=np.float64)
        if samples.ndim != 1:
            raise ValueError(f"samples must be 1D, got shape {samples.shape}")
        if samples.size == 0:
            raise EmptySeriesError(f"Series {self.label!r} has no samples")
        samples.setflags(write=False)
        object.__setattr__(self, "samples", samples)

    def __len__(self) -> int:
        return self.samples.shape[0]

    def __array__(self, dtype=None, copy=None):
        if dtype is None:
            return self.samples
        return self.samples.astype(dtype)

    def __eq__(self, other) -> bool:
        if not isinstance(other, LabeledSeries):
            return NotImplemented
        return self.label == other.label and np.array_equal(self.samples, other.samples)

    def __hash__(self) -> int:
        return hash((self.label, self.samples.tobytes()))

    def __repr__(self) -> str:
        return f"LabeledSeries(label={self.label!r}, length={len(self)})"


class Dataset:
    """Ordered, read-only collection of labeled series.

    Lengths are not required to match; pairwise operations check them.
    """

    def __init__(self, series: Iterable[LabeledSeries] = ()):
        self._series: Tuple[LabeledSeries, ...] = tuple(series)
        for s in self._series:
            if not isinstance(s, LabeledSeries):
                raise TypeError(f"Dataset entries must be LabeledSeries, got {type(s).__name__}")

    @classmethod
    def from_arrays(cls, arrays: Iterable[ArrayLike],
                    labels: Iterable[str] = None) -> Dataset:
        """Build a dataset from bare arrays, labelling them by position if needed."""
        arrays = list(arrays)
        if labels is None:
            labels = [str(i) for i in range(len(arrays))]
        labels = list(labels)
        if len(labels) != len(arrays):
            raise ValueError(f"Got {len(labels)} labels for {len(arrays)} series")
        return cls(LabeledSeries(lbl, arr) for lbl, arr in zip(labels, arrays))

    def __len__(self) -> int:
        return len(self._series)

    def __iter__(self) -> Iterator[LabeledSeries]:
        return iter(self._series)

    @overload
    def __getitem__(self, idx: int) -> LabeledSeries: ...
    @overload
    def __getitem__(self, idx: slice) -> Dataset: ...

    def __getitem__(self, idx: Union[int, slice]):
        if isinstance(idx, slice):
            return Dataset(self._series[idx])
        return self._series[idx]

    @property
    def labels(self) -> List[str]:
        return [s.label for s in self._series]

    @property
    def lengths(self) -> List[int]:
        return [len(s) for s in self._series]

    def is_uniform(self) -> bool:
        """True when every series has the same number of samples."""
        return len(set(self.lengths)) <= 1

    def __repr__(self) -> str:
        return f"Dataset(n_series={len(self)})"
