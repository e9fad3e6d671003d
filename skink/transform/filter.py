"""Filter combinator

Skips values failing a predicate."""

from __future__ import annotations

from collections.abc import Iterable

from kungfu import Error, Ok

from .._types import STOP, Predicate, Step
from ..cursor import Cursor, as_cursor


class FilterCursor[T](Cursor[T]):
    __slots__ = ("_source", "_predicate")

    def __init__(self, source: Cursor[T], predicate: Predicate[T]) -> None:
        super().__init__()
        self._source = source
        self._predicate = predicate

    def advance(self) -> Step[T]:
        while True:
            match self._source.pull():
                case Ok(value) if self._predicate(value):
                    return Ok(value)
                case Ok(_):
                    continue
                case Error(_):
                    return STOP


def filter_with[T](iterable: Iterable[T], *, predicate: Predicate[T]) -> Cursor[T]:
    """Yield only values for which ``predicate(value)`` is true."""
    return FilterCursor(as_cursor(iterable, index=0), predicate)


__all__ = ("FilterCursor", "filter_with")
