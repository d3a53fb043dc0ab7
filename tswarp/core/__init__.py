"""
DTW alignment engine: strategies, kernels and the bounds-checked cost matrix.
"""

from .cost_matrix import CostMatrix
from .engine import DTWEngine, Metric, Strategy, dtw_cost

__all__ = [
    "CostMatrix",
    "DTWEngine",
    "Metric",
    "Strategy",
    "dtw_cost",
]
