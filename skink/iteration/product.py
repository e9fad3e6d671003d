"""
Product combinator
==================

Cartesian product as an odometer: every input becomes a digit wheel, the
last wheel turns on every step and carries into the one before it.
"""

from __future__ import annotations

import math
import typing
from collections.abc import Iterable
from dataclasses import dataclass

from kungfu import Ok

from .._types import STOP, Step
from ..cursor import EMPTY, Cursor, as_cursors
from ..operators import positive_mod


@dataclass(slots=True)
class DigitWheel:
    """
    A materialized input with a position and the carry of its last advance.

    carry: -1 wrapped below the start, 0 no wrap, +1 wrapped past the end.
    """

    values: tuple[typing.Any, ...]
    position: int = 0
    carry: int = 0

    def __post_init__(self) -> None:
        if not self.values:
            raise ValueError("DigitWheel needs at least 1 value")

    def __len__(self) -> int:
        return len(self.values)


def wheel_value(wheel: DigitWheel) -> typing.Any:
    return wheel.values[wheel.position]


def reset_carry(wheel: DigitWheel) -> None:
    wheel.carry = 0


def advance_wheel(wheel: DigitWheel, n: int = 1) -> int:
    """Turn the wheel by ``n`` positions (either direction), return the carry."""
    raw = wheel.position + n
    if raw < 0:
        carry = -1
    elif raw >= len(wheel.values):
        carry = 1
    else:
        carry = 0
    wheel.position = positive_mod(raw, len(wheel.values))
    wheel.carry = carry
    return carry


class ProductCursor(Cursor[tuple[typing.Any, ...]]):
    __slots__ = ("_wheels", "_total", "_emitted")

    def __init__(self, wheels: list[DigitWheel]) -> None:
        super().__init__()
        self._wheels = wheels
        # Fixed up front so termination never depends on wheel state.
        self._total = math.prod(len(w) for w in wheels)
        self._emitted = 0

    @property
    def total(self) -> int:
        """Number of tuples this cursor yields in all."""
        return self._total

    def advance(self) -> Step[tuple[typing.Any, ...]]:
        if self._emitted >= self._total:
            return STOP

        current = tuple(wheel_value(w) for w in self._wheels)
        self._emitted += 1

        for wheel in reversed(self._wheels):
            reset_carry(wheel)
            if not advance_wheel(wheel):
                break
        return Ok(current)


def product(*iterables: Iterable[typing.Any]) -> Cursor[tuple[typing.Any, ...]]:
    """
    Yield every combination of one item from each iterable.

    Order matches ``itertools.product()``: the first input varies slowest,
    the last input fastest.

    IMPORTANT: inputs are fully materialized when product() is called.

    Example:
        for x, y in product(range(width), range(height)):
            draw_tile(x, y)
    """
    if not iterables:
        return EMPTY

    cursors = as_cursors(iterables)
    materialized = [tuple(c) for c in cursors]
    if not all(materialized):
        return EMPTY
    return ProductCursor([DigitWheel(values) for values in materialized])


__all__ = (
    "DigitWheel",
    "ProductCursor",
    "advance_wheel",
    "product",
    "reset_carry",
    "wheel_value",
)
