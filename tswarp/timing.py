"""
Wall-clock measurement kept outside the computation.

The clock is injectable so callers (and tests) can substitute a fake one.
"""

import time
from typing import Any, Callable, Optional, Tuple

Clock = Callable[[], float]


class Stopwatch:
    """Context manager recording elapsed seconds between enter and exit.

    >>> ticks = iter([1.0, 3.5])
    >>> with Stopwatch(clock=lambda: next(ticks)) as sw:
    ...     pass
    >>> sw.elapsed
    2.5
    """

    def __init__(self, clock: Clock = time.perf_counter):
        self.clock = clock
        self._start: Optional[float] = None
        self.elapsed: Optional[float] = None

    def __enter__(self) -> "Stopwatch":
        self._start = self.clock()
        self.elapsed = None
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.elapsed = self.clock() - self._start


def measure(func: Callable[..., Any], *args, clock: Clock = time.perf_counter,
            **kwargs) -> Tuple[Any, float]:
    """Call ``func`` and return ``(result, elapsed_seconds)``."""
    with Stopwatch(clock) as sw:
        result = func(*args, **kwargs)
    return result, sw.elapsed


def format_elapsed(seconds: float, unit: str = "ms") -> str:
    """Render a duration as ``"<n> ms"`` (whole milliseconds) or ``"<x> s"``."""
    if unit == "ms":
        return f"{int(seconds * 1000)} ms"
    if unit == "s":
        return f"{seconds:.3f} s"
    raise ValueError(f"unit must be 'ms' or 's', got {unit!r}")
