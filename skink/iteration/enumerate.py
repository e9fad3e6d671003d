"""Enumerate combinator"""

from __future__ import annotations

from collections.abc import Iterable

from kungfu import Error, Ok

from .._helpers import as_integer
from .._types import STOP, Step
from ..cursor import Cursor, as_cursor


class EnumerateCursor[T](Cursor[tuple[int, T]]):
    __slots__ = ("_source", "_index")

    def __init__(self, source: Cursor[T], *, start: int) -> None:
        super().__init__()
        self._source = source
        self._index = start

    def advance(self) -> Step[tuple[int, T]]:
        match self._source.pull():
            case Ok(value):
                index = self._index
                self._index += 1
                return Ok((index, value))
            case Error(_):
                return STOP


def enumerate[T](iterable: Iterable[T], start: int = 0) -> Cursor[tuple[int, T]]:
    """
    Yield ``(index, item)`` pairs, like the built-in ``enumerate()``.

    Accepts any iterable, generators included.
    """
    source = as_cursor(iterable, index=0)
    return EnumerateCursor(source, start=as_integer(start, name="enumerate(): start"))


__all__ = ("EnumerateCursor", "enumerate")
