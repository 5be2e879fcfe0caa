# tsanalyzer/services/transforms.py
"""Named element transforms that can be applied through ``TimeSeries.map``."""
from __future__ import annotations

from typing import Any, Callable

__all__: list[str] = [
    "TRANSFORMS",
    "get_transform",
]


def _format_number(value: float) -> str:
    # 1.0 -> "1", 1.5 -> "1.5"
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def _scale(argument: Any) -> Callable[[float], float]:
    factor = float(argument if argument is not None else 1)
    return lambda x: x * factor


def _shift(argument: Any) -> Callable[[float], float]:
    offset = float(argument if argument is not None else 0)
    return lambda x: x + offset


def _abs(argument: Any) -> Callable[[float], float]:
    return abs


def _label(argument: Any) -> Callable[[float], str]:
    prefix = "" if argument is None else str(argument)
    return lambda x: prefix + _format_number(x)


# name -> factory(argument) -> element transform
TRANSFORMS: dict[str, Callable[[Any], Callable[[float], Any]]] = {
    "scale": _scale,
    "shift": _shift,
    "abs": _abs,
    "label": _label,
}


def get_transform(name: str, argument: Any = None) -> Callable[[float], Any]:
    """
    Build the element transform registered as ``name``.
    Raises ValueError for unknown names or unusable arguments.
    """
    try:
        factory = TRANSFORMS[name]
    except KeyError:
        raise ValueError(
            f"unknown transform {name!r}; expected one of {sorted(TRANSFORMS)}"
        ) from None
    try:
        return factory(argument)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"invalid argument for transform {name!r}: {argument!r}") from exc
