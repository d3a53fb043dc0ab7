"""
Error types raised by tswarp.

Loading problems, malformed rows and mismatched series lengths each get their
own class so callers can tell them apart from ordinary ``ValueError``s.
"""

from typing import Optional


class TswarpError(Exception):
    """Base class for all tswarp errors."""


class SeriesLoadError(TswarpError, OSError):
    """Input file is missing or cannot be read."""


class SeriesParseError(TswarpError, ValueError):
    """A row of the input file could not be turned into a series."""

    def __init__(self, message: str, path: Optional[str] = None,
                 line: Optional[int] = None, field: Optional[str] = None):
        self.path = path
        self.line = line
        self.field = field
        location = ""
        if path is not None:
            location = f"{path}"
        if line is not None:
            location = f"{location}:{line}" if location else f"line {line}"
        super().__init__(f"{location}: {message}" if location else message)


class EmptySeriesError(TswarpError, ValueError):
    """A series has no samples."""


class LengthMismatchError(TswarpError, ValueError):
    """Two series being aligned do not have the same number of samples."""

    def __init__(self, len_a: int, len_b: int, message: Optional[str] = None):
        self.len_a = len_a
        self.len_b = len_b
        super().__init__(message or f"Series lengths differ: {len_a} != {len_b}")


class PairLengthMismatchError(LengthMismatchError):
    """Length mismatch between dataset entries ``i`` and ``j``."""

    def __init__(self, i: int, j: int, len_a: int, len_b: int):
        self.i = i
        self.j = j
        super().__init__(
            len_a, len_b,
            f"Series {i} and {j} have different lengths: {len_a} != {len_b}",
        )


class ConfigError(TswarpError, ValueError):
    """Configuration file is missing, unreadable or invalid."""
