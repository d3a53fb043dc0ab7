"""
Pairwise DTW costs over datasets of labeled series.
"""

from .pairwise import (
    total_cost,
    pairwise_cost_matrix,
    pairwise_cost_rows,
    iter_pairs,
    pair_count,
    check_pair_lengths,
)

__all__ = [
    "total_cost",
    "pairwise_cost_matrix",
    "pairwise_cost_rows",
    "iter_pairs",
    "pair_count",
    "check_pair_lengths",
]
