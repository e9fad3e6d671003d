"""Take combinator

Bounds any cursor, infinite ones from cycle() included."""

from __future__ import annotations

import typing
from collections.abc import Iterable

from .._helpers import as_integer
from .._types import STOP, Step
from ..cursor import Cursor, as_cursor


class TakeCursor[T](Cursor[T]):
    __slots__ = ("_source", "_remaining")

    def __init__(self, source: Cursor[T], n: int) -> None:
        super().__init__()
        self._source = source
        self._remaining = n

    def advance(self) -> Step[T]:
        # Never pull the source past the limit.
        if self._remaining <= 0:
            return STOP
        self._remaining -= 1
        return self._source.pull()


def take[T](iterable: Iterable[T], *, n: typing.Any) -> Cursor[T]:
    """
    Yield at most ``n`` values.

    Example:
        list(take(cycle([1, 2]), n=5))  # [1, 2, 1, 2, 1]
    """
    count = as_integer(n, name="take(): n")
    if count < 0:
        raise ValueError(f"take(): n must be >= 0, got {n}")
    return TakeCursor(as_cursor(iterable, index=0), count)


__all__ = ("TakeCursor", "take")
