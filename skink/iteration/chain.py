"""Chain combinator

Concatenation of several iterables, like ``itertools.chain()``."""

from __future__ import annotations

from collections.abc import Iterable

from kungfu import Ok

from .._types import STOP, Step
from ..cursor import EMPTY, Cursor, as_cursors


class ChainCursor[T](Cursor[T]):
    """Drains each cursor in turn."""

    __slots__ = ("_cursors", "_position")

    def __init__(self, cursors: list[Cursor[T]]) -> None:
        super().__init__()
        self._cursors = cursors
        self._position = 0

    def advance(self) -> Step[T]:
        while self._position < len(self._cursors):
            step = self._cursors[self._position].pull()
            if isinstance(step, Ok):
                return step
            self._position += 1
        return STOP


def chain[T](*iterables: Iterable[T]) -> Cursor[T]:
    """
    Combine one or more iterables into one cursor.

    Example:
        list(chain([1], [2, 3]))  # [1, 2, 3]
    """
    if not iterables:
        return EMPTY
    return ChainCursor(as_cursors(iterables))


__all__ = ("ChainCursor", "chain")
