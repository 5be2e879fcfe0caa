"""Exceptions raised by time-series operations."""
from __future__ import annotations

__all__: list[str] = [
    "SeriesError",
    "OutOfRangeError",
    "DivisionByZeroError",
    "LengthMismatchError",
]


class SeriesError(Exception):
    """Base class for every error raised by a TimeSeries."""


class OutOfRangeError(SeriesError, IndexError):
    """Raised when slice bounds fall outside the series."""

    def __init__(self, start: int, end: int, length: int):
        self.start = start
        self.end = end
        self.length = length
        super().__init__(
            f"slice [{start}, {end}) is out of range for series of length {length}"
        )


class DivisionByZeroError(SeriesError, ZeroDivisionError):
    """Raised when a zero divisor is met at ``index``."""

    def __init__(self, index: int):
        self.index = index
        super().__init__(f"division by zero at index {index}")


class LengthMismatchError(SeriesError, ValueError):
    def __init__(self, left: int, right: int):
        self.left = left
        self.right = right
        super().__init__(f"series lengths differ: {left} != {right}")
