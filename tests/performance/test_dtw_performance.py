"""
Performance regression tests for the DTW engine.

Benchmarks the compiled rolling-row strategy on a realistic dataset and
fails if it degrades badly.
"""

import numpy as np
import time
import logging

from tswarp.core.engine import DTWEngine, Strategy
from tswarp.distances.pairwise import pair_count, total_cost

logger = logging.getLogger(__name__)


class TestDTWPerformance:
    """Test DTW throughput on datasets of a realistic size."""

    def test_rolling_row_total_benchmark(self):
        """
        Benchmark total cost over 50 series of 256 points (1275 pairs).

        Baseline: well under a second once numba has compiled the kernel.
        """
        rng = np.random.default_rng(42)
        X = rng.normal(size=(50, 256))
        engine = DTWEngine(Strategy.ROLLING_ROW)

        # Warmup (triggers compilation)
        engine.align(X[0], X[1])

        start = time.perf_counter()
        total = total_cost(X, engine)
        elapsed = time.perf_counter() - start

        assert total > 0

        max_time = 10.0  # seconds
        assert elapsed < max_time, \
            f"Total cost over 50x256 took {elapsed:.2f}s, expected < {max_time}s"

        n_cells = pair_count(50) * 256 * 256
        logger.info(f"\nDTW rolling-row benchmark: time={elapsed:.2f}s, "
                    f"throughput={n_cells/elapsed/1e6:.1f}M cells/s")

    def test_rolling_row_faster_than_full_matrix(self):
        """The compiled O(n) strategy beats the bounds-checked Python matrix."""
        rng = np.random.default_rng(0)
        a, b = rng.normal(size=(2, 200))
        rolling = DTWEngine(Strategy.ROLLING_ROW)
        full = DTWEngine(Strategy.FULL_MATRIX)
        rolling.align(a, b)

        start = time.perf_counter()
        rolling.align(a, b)
        t_rolling = time.perf_counter() - start

        start = time.perf_counter()
        full.align(a, b)
        t_full = time.perf_counter() - start

        assert t_rolling < t_full
