"""Ordered, growable container for time-indexed data points."""
from __future__ import annotations

import copy
import json
import operator
from typing import Any, Callable, Generic, Iterable, Iterator, TypeVar, overload

from tsanalyzer.core.errors import DivisionByZeroError, LengthMismatchError, OutOfRangeError
from tsanalyzer.core.variation import Variation

__all__: list[str] = [
    "TimeSeries",
]

T = TypeVar("T")
U = TypeVar("U")


def _render(value: Any) -> str:
    # Strings are double-quoted so that "[1]" and [1] render differently
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    return repr(value)


class TimeSeries(Variation, Generic[T]):
    """
    Insertion-ordered sequence of data points, zero-indexed.

    The series owns its backing list: ``slice``, ``map``, ``filter`` and
    ``reverse`` always return new, independent series.
    """

    def __init__(self, values: Iterable[T] | None = None):
        self._values: list[T] = list(values) if values is not None else []

    # -------------------------------------------------------------------------
    # Tail mutation
    # -------------------------------------------------------------------------
    def push(self, value: T) -> None:
        self._values.append(value)

    def pop(self) -> T | None:
        """Remove and return the last element, or None if the series is empty."""
        if not self._values:
            return None
        return self._values.pop()

    def clear(self) -> None:
        self._values.clear()

    def append(self, other: TimeSeries[T]) -> None:
        """Append copies of every element of ``other``."""
        self._values.extend(copy.copy(v) for v in other)

    def extend(self, values: Iterable[T]) -> None:
        self._values.extend(values)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------
    def len(self) -> int:
        return len(self._values)

    def is_empty(self) -> bool:
        return not self._values

    def first(self) -> T | None:
        return self._values[0] if self._values else None

    def last(self) -> T | None:
        return self._values[-1] if self._values else None

    def get(self, index: int) -> T | None:
        """Element at ``index``, or None when the index is outside ``[0, len)``."""
        if 0 <= index < len(self._values):
            return self._values[index]
        return None

    def to_list(self) -> list[T]:
        return list(self._values)

    # -------------------------------------------------------------------------
    # Derived series
    # -------------------------------------------------------------------------
    def slice(self, start: int, end: int) -> TimeSeries[T]:
        """
        Copy of the elements in ``[start, end)``.

        Raises OutOfRangeError if ``start > end``, ``start < 0`` or
        ``end > len()``. ``start == end`` gives an empty series.
        """
        length = len(self._values)
        if start < 0 or start > end or end > length:
            raise OutOfRangeError(start, end, length)
        return TimeSeries(copy.copy(v) for v in self._values[start:end])

    def map(self, func: Callable[[T], U]) -> TimeSeries[U]:
        """
        Apply ``func`` to every element, in order.

        The result has the same length as this series; ``func`` may return
        a different type than it receives.
        """
        return TimeSeries(func(v) for v in self._values)

    def filter(self, predicate: Callable[[T], bool]) -> TimeSeries[T]:
        return TimeSeries(v for v in self._values if predicate(v))

    def reverse(self) -> TimeSeries[T]:
        return TimeSeries(reversed(self._values))

    # -------------------------------------------------------------------------
    # Python protocols
    # -------------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self._values)

    def __bool__(self) -> bool:
        return bool(self._values)

    def __iter__(self) -> Iterator[T]:
        return iter(self._values)

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> TimeSeries[T]: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return TimeSeries(self._values[index])
        return self._values[index]

    def __setitem__(self, index: int, value: T) -> None:
        self._values[index] = value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TimeSeries):
            return self._values == other._values
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "[" + ", ".join(_render(v) for v in self._values) + "]"

    def __repr__(self) -> str:
        return f"TimeSeries({self})"

    # -------------------------------------------------------------------------
    # Element-wise arithmetic
    # -------------------------------------------------------------------------
    def _combine(self, other: Any, op: Callable[[Any, Any], Any], reflected: bool = False) -> TimeSeries:
        if isinstance(other, TimeSeries):
            if len(other) != len(self):
                raise LengthMismatchError(len(self), len(other))
            pairs = zip(self._values, other._values)
        else:
            pairs = ((v, other) for v in self._values)

        result = []
        for i, (left, right) in enumerate(pairs):
            if reflected:
                left, right = right, left
            try:
                result.append(op(left, right))
            except ZeroDivisionError as exc:
                raise DivisionByZeroError(i) from exc
        return TimeSeries(result)

    def __add__(self, other: Any) -> TimeSeries:
        return self._combine(other, operator.add)

    def __radd__(self, other: Any) -> TimeSeries:
        return self._combine(other, operator.add, reflected=True)

    def __sub__(self, other: Any) -> TimeSeries:
        return self._combine(other, operator.sub)

    def __rsub__(self, other: Any) -> TimeSeries:
        return self._combine(other, operator.sub, reflected=True)

    def __mul__(self, other: Any) -> TimeSeries:
        return self._combine(other, operator.mul)

    def __rmul__(self, other: Any) -> TimeSeries:
        return self._combine(other, operator.mul, reflected=True)

    def __truediv__(self, other: Any) -> TimeSeries:
        return self._combine(other, operator.truediv)

    def __rtruediv__(self, other: Any) -> TimeSeries:
        return self._combine(other, operator.truediv, reflected=True)
