"""Variation statistics between consecutive elements of a series."""
from __future__ import annotations

import logging
from typing import Any

from tsanalyzer.core.errors import DivisionByZeroError

__all__: list[str] = [
    "Variation",
]

logger = logging.getLogger(__name__)


def _check_periods(periods: Any) -> int:
    if isinstance(periods, bool) or not isinstance(periods, int):
        raise ValueError(f"'periods' must be an integer, got {periods!r}")
    if periods < 0:
        raise ValueError(f"'periods' must not be negative, got {periods}")
    return periods


class Variation:
    """
    Mixin adding ``diff`` and ``pct_change`` to an iterable series type.

    The host class must be iterable and constructible from an iterable of
    its elements. Elements must support subtraction (and division for
    ``pct_change``).
    """

    def diff(self, periods: int = 1):
        """
        Differences ``x[i] - x[i - periods]`` for every ``i >= periods``.
        A series not longer than ``periods`` yields an empty series.
        """
        periods = _check_periods(periods)
        values = list(self)  # type: ignore[call-overload]
        result = [values[i] - values[i - periods] for i in range(periods, len(values))]
        logger.debug("diff(periods=%d) over %d values -> %d", periods, len(values), len(result))
        return type(self)(result)  # type: ignore[call-arg]

    def pct_change(self, periods: int = 1):
        """
        Relative change ``(x[i] - x[i - periods]) / x[i - periods]`` as floats.

        Raises DivisionByZeroError when a prior value is zero; the error
        carries the index of that zero value.
        """
        periods = _check_periods(periods)
        values = list(self)  # type: ignore[call-overload]
        result: list[float] = []
        for i in range(periods, len(values)):
            base = values[i - periods]
            if base == 0:
                raise DivisionByZeroError(i - periods)
            result.append(float((values[i] - base) / base))
        logger.debug("pct_change(periods=%d) over %d values -> %d", periods, len(values), len(result))
        return type(self)(result)  # type: ignore[call-arg]
