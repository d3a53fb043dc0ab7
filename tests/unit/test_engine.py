"""Unit tests for the DTW alignment engine."""
import math

import numpy as np
import pytest

from tswarp.core.engine import DTWEngine, Metric, Strategy, dtw_cost
from tswarp.errors import EmptySeriesError, LengthMismatchError
from tswarp.series import LabeledSeries

STRATEGIES = [Strategy.FULL_MATRIX, Strategy.ROLLING_ROW]


@pytest.fixture(params=STRATEGIES, ids=lambda s: s.value)
def engine(request):
    return DTWEngine(strategy=request.param)


class TestKnownValues:
    """Hand-computed alignment costs."""

    def test_two_point_example(self, engine, pair_01_02):
        """Boundary row [0, 4], column [0, 1], corner min(0, 1, 4) + 1."""
        a, b = pair_01_02
        assert engine.align(a, b) == 1.0

    def test_three_point_example(self, engine):
        """[1,2,3] vs [2,3,4] warps to a cost of 2."""
        assert engine.align([1.0, 2.0, 3.0], [2.0, 3.0, 4.0]) == 2.0

    def test_single_sample(self, engine):
        assert engine.align([3.0], [5.0]) == 4.0

    def test_shifted_step_is_cheaper_than_lockstep(self, engine):
        """Warping absorbs a one-step shift that lockstep comparison cannot."""
        x = np.array([0.0, 0.0, 1.0, 1.0, 0.0])
        y = np.array([0.0, 1.0, 1.0, 0.0, 0.0])
        lockstep = float(np.sum((x - y) ** 2))
        assert engine.align(x, y) < lockstep
        assert engine.align(x, y) == 0.0

    def test_no_square_root_by_default(self, engine):
        """Cost is the accumulated squared error, not a Euclidean distance."""
        assert engine.align([0.0, 0.0], [3.0, 3.0]) == 18.0


class TestProperties:
    """Properties every alignment must satisfy."""

    def test_zero_self_alignment(self, engine, sample_time_series):
        assert engine.align(sample_time_series, sample_time_series) == 0.0

    def test_symmetry(self, engine):
        rng = np.random.default_rng(0)
        for _ in range(5):
            a, b = rng.normal(size=(2, 25))
            assert engine.align(a, b) == pytest.approx(engine.align(b, a), rel=1e-12)

    def test_non_negative(self, engine):
        rng = np.random.default_rng(1)
        for _ in range(5):
            a, b = rng.normal(scale=10.0, size=(2, 20))
            assert engine.align(a, b) >= 0.0

    def test_bounded_by_lockstep_cost(self, engine):
        """The diagonal is one admissible path, so DTW never exceeds it."""
        rng = np.random.default_rng(2)
        a, b = rng.normal(size=(2, 40))
        assert engine.align(a, b) <= float(np.sum((a - b) ** 2)) + 1e-12


class TestStrategyEquivalence:
    """Full-matrix and rolling-row strategies agree."""

    @pytest.mark.parametrize("n", [1, 2, 3, 10, 64])
    def test_random_series(self, n):
        rng = np.random.default_rng(n)
        full = DTWEngine(Strategy.FULL_MATRIX)
        rolling = DTWEngine(Strategy.ROLLING_ROW)
        for _ in range(3):
            a, b = rng.normal(size=(2, n))
            assert full.align(a, b) == pytest.approx(rolling.align(a, b), rel=1e-9)

    def test_ties_between_predecessors(self):
        """Constant series make all predecessors equal; both strategies agree."""
        a = np.ones(8)
        b = np.full(8, 2.0)
        full = DTWEngine(Strategy.FULL_MATRIX).align(a, b)
        rolling = DTWEngine(Strategy.ROLLING_ROW).align(a, b)
        assert full == rolling == 8.0

    def test_corner_of_cost_matrix_matches_align(self):
        rng = np.random.default_rng(3)
        a, b = rng.normal(size=(2, 12))
        engine = DTWEngine()
        assert engine.cost_matrix(a, b)[-1, -1] == pytest.approx(engine.align(a, b), rel=1e-9)


class TestCostMatrixDiagnostics:
    """The full accumulated matrix exposed for inspection."""

    def test_two_point_matrix(self, pair_01_02):
        a, b = pair_01_02
        D = DTWEngine(Strategy.FULL_MATRIX).cost_matrix(a, b)
        np.testing.assert_array_equal(D, [[0.0, 4.0], [1.0, 1.0]])

    def test_three_point_matrix(self):
        D = DTWEngine().cost_matrix([1.0, 2.0, 3.0], [2.0, 3.0, 4.0])
        np.testing.assert_array_equal(D, [[1, 5, 14], [1, 2, 6], [2, 1, 2]])

    def test_matrix_ignores_metric(self):
        engine = DTWEngine(metric=Metric.ROOTED)
        D = engine.cost_matrix([0.0, 1.0], [0.0, 2.0])
        assert D[-1, -1] == 1.0


class TestMetric:
    """Squared versus rooted reporting."""

    def test_rooted_is_sqrt_of_squared(self, engine):
        squared = engine.align([1.0, 2.0, 3.0], [2.0, 3.0, 4.0])
        rooted = DTWEngine(engine.strategy, Metric.ROOTED).align([1.0, 2.0, 3.0], [2.0, 3.0, 4.0])
        assert rooted == pytest.approx(math.sqrt(squared))

    def test_string_options(self):
        engine = DTWEngine("full_matrix", "rooted")
        assert engine.strategy is Strategy.FULL_MATRIX
        assert engine.metric is Metric.ROOTED
        assert engine.align([0.0, 0.0], [3.0, 3.0]) == pytest.approx(math.sqrt(18.0))

    def test_unknown_strategy(self):
        with pytest.raises(ValueError, match="Unknown strategy"):
            DTWEngine(strategy="banded")

    def test_unknown_metric(self):
        with pytest.raises(ValueError, match="Unknown metric"):
            DTWEngine(metric="manhattan")


class TestInputValidation:
    """Malformed inputs fail with typed errors."""

    def test_length_mismatch(self, engine):
        with pytest.raises(LengthMismatchError) as excinfo:
            engine.align([1.0, 2.0, 3.0], [1.0, 2.0])
        assert excinfo.value.len_a == 3
        assert excinfo.value.len_b == 2

    def test_length_mismatch_is_value_error(self, engine):
        with pytest.raises(ValueError):
            engine.align(LabeledSeries("x", [1.0]), LabeledSeries("y", [1.0, 2.0]))

    def test_empty_series(self, engine):
        with pytest.raises(EmptySeriesError):
            engine.align([], [])

    def test_two_dimensional_input(self, engine):
        with pytest.raises(ValueError, match="1D"):
            engine.align(np.ones((2, 2)), np.ones((2, 2)))


class TestConvenience:
    """Module-level helpers."""

    def test_dtw_cost(self):
        assert dtw_cost([0.0, 1.0], [0.0, 2.0]) == 1.0
        assert dtw_cost([0.0, 1.0], [0.0, 2.0], strategy="full_matrix") == 1.0

    def test_engine_is_callable(self, pair_01_02):
        a, b = pair_01_02
        assert DTWEngine()(a, b) == 1.0

    def test_repr(self):
        assert repr(DTWEngine()) == "DTWEngine(strategy='rolling_row', metric='squared')"
