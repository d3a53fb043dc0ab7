"""
tswarp: pairwise Dynamic Time Warping costs for labeled time series.

Loads labeled series from delimited files, aligns every pair with an
unconstrained DTW recurrence and sums the accumulated squared-error costs.
"""

from .series import LabeledSeries, Dataset
from .core import CostMatrix, DTWEngine, Metric, Strategy, dtw_cost
from .distances import total_cost, pairwise_cost_matrix, pairwise_cost_rows
from .io import read_series_csv
from .timing import Stopwatch, measure
from .config import RunConfig
from .errors import (
    TswarpError,
    SeriesLoadError,
    SeriesParseError,
    EmptySeriesError,
    LengthMismatchError,
    PairLengthMismatchError,
    ConfigError,
)

__version__ = "0.1.0"

__all__ = [
    'LabeledSeries',
    'Dataset',
    'CostMatrix',
    'DTWEngine',
    'Metric',
    'Strategy',
    'dtw_cost',
    'total_cost',
    'pairwise_cost_matrix',
    'pairwise_cost_rows',
    'read_series_csv',
    'Stopwatch',
    'measure',
    'RunConfig',
    'TswarpError',
    'SeriesLoadError',
    'SeriesParseError',
    'EmptySeriesError',
    'LengthMismatchError',
    'PairLengthMismatchError',
    'ConfigError',
]
