"""Internal helpers for skink.

Argument checks shared by the cursor constructors.
These are not part of the public API."""

from __future__ import annotations

import numbers
import typing
from collections.abc import Iterable


def has_iter(value: typing.Any) -> bool:
    """Whether value supports iteration (collections.abc.Iterable)."""
    return isinstance(value, Iterable)


def as_integer(value: typing.Any, *, name: str) -> int:
    """
    Coerce a numeric argument to int.

    Non-numbers raise TypeError. Numbers without an integral value
    (2.5, complex, inf, nan) raise ValueError. Integral 3.0, Decimal("3")
    and Fraction(6, 2) pass.
    """
    if isinstance(value, numbers.Integral):
        return int(value)
    if not isinstance(value, numbers.Number):
        raise TypeError(f"{name} must be an integer, not {type(value).__name__}")
    try:
        as_int = int(value)
    except (TypeError, ValueError, OverflowError):
        raise ValueError(f"{name} is not an integer: {value!r}") from None
    if value == as_int:
        return as_int
    raise ValueError(f"{name} is not an integer: {value!r}")


__all__ = ("as_integer", "has_iter")
