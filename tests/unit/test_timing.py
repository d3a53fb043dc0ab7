"""Unit tests for timing helpers with a fake clock."""
import pytest

from tswarp.timing import Stopwatch, format_elapsed, measure


def fake_clock(*ticks):
    it = iter(ticks)
    return lambda: next(it)


class TestStopwatch:

    def test_elapsed(self):
        with Stopwatch(clock=fake_clock(10.0, 12.25)) as sw:
            pass
        assert sw.elapsed == 2.25

    def test_elapsed_recorded_on_error(self):
        sw = Stopwatch(clock=fake_clock(0.0, 1.0))
        with pytest.raises(RuntimeError):
            with sw:
                raise RuntimeError("boom")
        assert sw.elapsed == 1.0


class TestMeasure:

    def test_returns_result_and_elapsed(self):
        result, elapsed = measure(lambda a, b=0: a + b, 2, b=3, clock=fake_clock(5.0, 5.5))
        assert result == 5
        assert elapsed == 0.5


class TestFormatElapsed:

    @pytest.mark.parametrize("seconds, unit, expected", [
        (1.2345, "ms", "1234 ms"),
        (0.0004, "ms", "0 ms"),
        (1.5, "s", "1.500 s"),
    ])
    def test_units(self, seconds, unit, expected):
        assert format_elapsed(seconds, unit) == expected

    def test_unknown_unit(self):
        with pytest.raises(ValueError):
            format_elapsed(1.0, "h")
