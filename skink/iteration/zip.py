"""
Zip combinators
===============

Lockstep advance of several cursors. ``zip`` stops at the shortest input,
``zip_strict`` raises when inputs turn out to have different lengths.
Both share ``LockstepCursor``; only the mismatch handler differs.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable

from kungfu import Error, Ok

from .._errors import MismatchedLengthsError
from .._types import STOP, Step
from ..cursor import EMPTY, Cursor, as_cursors

# (round index, exhausted input indices) -> Step to report instead
type OnMismatch = Callable[[int, tuple[int, ...]], Step[typing.Never]]


class LockstepCursor(Cursor[tuple[typing.Any, ...]]):
    """
    One pull per input per round.

    Round outcome by completion set:
    - empty           -> yield the tuple
    - every input     -> exhausted, inputs ended together
    - proper subset   -> ``on_mismatch(round, exhausted)``
    """

    __slots__ = ("_cursors", "_completed", "_round", "_on_mismatch")

    def __init__(self, cursors: list[Cursor[typing.Any]], *, on_mismatch: OnMismatch) -> None:
        super().__init__()
        self._cursors = cursors
        self._completed: set[int] = set()
        self._round = 0
        self._on_mismatch = on_mismatch

    @property
    def round(self) -> int:
        """Number of tuples yielded so far."""
        return self._round

    def advance(self) -> Step[tuple[typing.Any, ...]]:
        values: list[typing.Any] = []
        for i, cursor in enumerate(self._cursors):
            match cursor.pull():
                case Ok(value):
                    values.append(value)
                case Error(_):
                    self._completed.add(i)

        if not self._completed:
            self._round += 1
            return Ok(tuple(values))
        if len(self._completed) == len(self._cursors):
            return STOP

        # Latch first so the cursor stays exhausted if on_mismatch raises.
        self.close()
        return self._on_mismatch(self._round, tuple(sorted(self._completed)))


def _stop_silently(round: int, exhausted: tuple[int, ...]) -> Step[typing.Never]:
    _ = (round, exhausted)
    return STOP


def _raise_mismatch(round: int, exhausted: tuple[int, ...]) -> Step[typing.Never]:
    raise MismatchedLengthsError(round, exhausted)


def zip(*iterables: Iterable[typing.Any]) -> Cursor[tuple[typing.Any, ...]]:
    """
    Yield tuples holding one item from each iterable.

    Like Python's ``zip()`` without ``strict``: stops as soon as the
    shortest input runs out. For strict behaviour see ``zip_strict()``.

    Example:
        list(zip("abc", "de"))  # [("a", "d"), ("b", "e")]
    """
    if not iterables:
        return EMPTY
    return LockstepCursor(as_cursors(iterables), on_mismatch=_stop_silently)


def zip_strict(*iterables: Iterable[typing.Any]) -> Cursor[tuple[typing.Any, ...]]:
    """
    Like ``zip()`` but raises MismatchedLengthsError on unequal lengths.

    The error is raised lazily, by the pull that finds some inputs
    exhausted while others still produce values.
    """
    if not iterables:
        return EMPTY
    return LockstepCursor(as_cursors(iterables), on_mismatch=_raise_mismatch)


__all__ = ("LockstepCursor", "OnMismatch", "zip", "zip_strict")
