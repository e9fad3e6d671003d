"""Map combinator"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from kungfu import Error, Ok

from .._types import STOP, Step
from ..cursor import Cursor, as_cursor


class MapCursor[T, R](Cursor[R]):
    __slots__ = ("_source", "_fn")

    def __init__(self, source: Cursor[T], fn: Callable[[T], R]) -> None:
        super().__init__()
        self._source = source
        self._fn = fn

    def advance(self) -> Step[R]:
        match self._source.pull():
            case Ok(value):
                return Ok(self._fn(value))
            case Error(_):
                return STOP


def map_with[T, R](iterable: Iterable[T], *, fn: Callable[[T], R]) -> Cursor[R]:
    """Yield ``fn(value)`` for every value, lazily."""
    return MapCursor(as_cursor(iterable, index=0), fn)


__all__ = ("MapCursor", "map_with")
