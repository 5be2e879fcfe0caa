"""Series analysis helpers working on plain lists of numbers."""
from __future__ import annotations

from typing import Any, Sequence

from tsanalyzer.core.series import TimeSeries
from tsanalyzer.services.transforms import get_transform

__all__: list[str] = [
    "series_variation",
    "series_slice",
    "series_map",
]


def series_variation(values: Sequence[float], periods: int = 1) -> dict[str, list[float]]:
    """
    Compute diff and pct_change for a sequence of numbers.
    Raises DivisionByZeroError if a prior value used as divisor is zero.
    """
    series = TimeSeries(float(v) for v in values)
    return {
        "diff": series.diff(periods).to_list(),
        "pct_change": series.pct_change(periods).to_list(),
    }


def series_slice(values: Sequence[float], start: int, end: int) -> dict[str, Any]:
    """
    Extract ``[start, end)`` from a sequence of numbers.
    Raises OutOfRangeError for invalid bounds.
    """
    part = TimeSeries(values).slice(start, end)
    return {
        "values": part.to_list(),
        "length": len(part),
    }


def series_map(values: Sequence[float], transform: str, argument: Any = None) -> dict[str, list[Any]]:
    """Apply the named transform to every value."""
    func = get_transform(transform, argument)
    return {"values": TimeSeries(values).map(func).to_list()}
