"""Cycle combinator

Endless replay of an iterable, like ``itertools.cycle()``."""

from __future__ import annotations

from collections.abc import Iterable

from kungfu import Ok

from .._types import STOP, Step
from ..cursor import Cursor, as_cursor


class ReplayCursor[T](Cursor[T]):
    """
    Yields the source once while buffering it, then replays the buffer.

    ``passes`` counts total passes including the first; None means forever.
    An empty source exhausts immediately regardless of ``passes``.
    """

    __slots__ = ("_source", "_buffer", "_passes_left", "_replay_index")

    def __init__(self, source: Cursor[T], *, passes: int | None) -> None:
        super().__init__()
        self._source: Cursor[T] | None = source
        self._buffer: list[T] = []
        self._passes_left = None if passes is None else passes - 1
        self._replay_index = 0

    def advance(self) -> Step[T]:
        if self._source is not None:
            step = self._source.pull()
            if isinstance(step, Ok):
                self._buffer.append(step.unwrap())
                return step
            # First pass done; the source is no longer needed.
            self._source = None

        if not self._buffer:
            return STOP

        if self._replay_index == len(self._buffer):
            self._replay_index = 0
            if self._passes_left is not None:
                self._passes_left -= 1
        if self._passes_left is not None and self._passes_left <= 0:
            return STOP

        value = self._buffer[self._replay_index]
        self._replay_index += 1
        return Ok(value)


def cycle[T](iterable: Iterable[T]) -> Cursor[T]:
    """
    Repeat ``iterable``'s values forever.

    The cursor never exhausts unless the source is empty; bound it with
    ``take()`` or ``next()`` calls.

    Example:
        seasons = cycle(["Winter", "Spring", "Summer", "Autumn"])
        next(seasons)  # "Winter"
    """
    return ReplayCursor(as_cursor(iterable), passes=None)


__all__ = ("ReplayCursor", "cycle")
