"""Side effects combinators

Effects execute for observation only (printing, counting, debugging)
and don't change the values flowing through the cursor."""

from __future__ import annotations

from collections.abc import Iterable

from kungfu import Ok

from .._types import Effect, Step
from ..cursor import Cursor, as_cursor


class TapCursor[T](Cursor[T]):
    __slots__ = ("_source", "_effect")

    def __init__(self, source: Cursor[T], effect: Effect[T]) -> None:
        super().__init__()
        self._source = source
        self._effect = effect

    def advance(self) -> Step[T]:
        step = self._source.pull()
        if isinstance(step, Ok):
            self._effect(step.unwrap())
        return step


def tap[T](iterable: Iterable[T], *, effect: Effect[T]) -> Cursor[T]:
    """
    Call ``effect(value)`` as each value is pulled. Values pass unchanged.

    Example:
        seen = []
        cursor = tap(range(3), effect=seen.append)
    """
    return TapCursor(as_cursor(iterable, index=0), effect)


__all__ = ("TapCursor", "tap")
