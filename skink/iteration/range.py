"""Range combinator

Modelled on Python's built-in ``range()``, returning a lazy cursor."""

from __future__ import annotations

import typing
from dataclasses import dataclass

from kungfu import Ok

from .._errors import InvalidArgumentError
from .._helpers import as_integer
from .._types import STOP, Step
from ..cursor import Cursor


@dataclass(frozen=True, slots=True)
class RangeBounds:
    """Validated begin/end/step triple."""

    begin: int
    end: int
    step: int = 1

    def __post_init__(self) -> None:
        if self.step == 0:
            raise ValueError("RangeBounds.step must not be zero")

    def contains_next(self, current: int) -> bool:
        """Sign-aware "not yet past end" test."""
        if self.step > 0:
            return current < self.end
        return current > self.end


class RangeCursor(Cursor[int]):
    __slots__ = ("_bounds", "_current")

    def __init__(self, bounds: RangeBounds) -> None:
        super().__init__()
        self._bounds = bounds
        self._current = bounds.begin

    @property
    def bounds(self) -> RangeBounds:
        return self._bounds

    def advance(self) -> Step[int]:
        current = self._current
        if not self._bounds.contains_next(current):
            return STOP
        self._current = current + self._bounds.step
        return Ok(current)


def range(*args: typing.Any) -> RangeCursor:
    """
    Iterate from ``begin`` to ``end`` by ``step``.

    | Arguments           | Example           | Yields            |
    |---------------------|-------------------|-------------------|
    | ``end``             | ``range(10)``     | 0, 1, ..., 9      |
    | ``begin, end``      | ``range(5, 10)``  | 5, 6, ..., 9      |
    | ``begin, end, step``| ``range(0, 10, 2)``| 0, 2, 4, 6, 8    |

    Negative values are allowed everywhere; a negative step counts down.

    Raises:
        InvalidArgumentError: fewer than 1 or more than 3 arguments.
        TypeError: an argument is not a number.
        ValueError: an argument is not integral, or step is zero.
    """
    if not 1 <= len(args) <= 3:
        raise InvalidArgumentError(
            args, reason=f"count must be 1 to 3, got {len(args)}"
        )

    ints = [as_integer(v, name=f"range() argument {i}") for i, v in enumerate(args)]
    match ints:
        case [end]:
            bounds = RangeBounds(0, end)
        case [begin, end]:
            bounds = RangeBounds(begin, end)
        case [begin, end, step]:
            bounds = RangeBounds(begin, end, step)
        case _:  # pragma: no cover
            raise AssertionError(ints)
    return RangeCursor(bounds)


__all__ = ("RangeCursor", "RangeBounds", "range")
