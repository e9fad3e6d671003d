"""
Pull cursor
===========

Every skink constructor returns a Cursor: a small state machine whose
``advance()`` produces one Step per call.

- ``Ok(value)``         - next element present
- ``Error(EXHAUSTED)``  - nothing left

``pull()`` latches exhaustion: once a cursor reports EXHAUSTED it keeps
reporting it and the state machine is never consulted again. Cursors are
single-consumer; pulling one cursor from several places at once is
undefined behaviour.
"""

from __future__ import annotations

import typing

from kungfu import Error, Ok

from .._types import STOP, Step


class Cursor[T]:
    """
    Single-pass pull cursor.

    Subclasses implement ``advance()``. Callers use ``pull()`` or the
    iterator protocol (``for``, ``list()``, ``next()``).
    """

    __slots__ = ("_exhausted",)

    def __init__(self) -> None:
        self._exhausted = False

    @property
    def exhausted(self) -> bool:
        """True once a pull has reported exhaustion."""
        return self._exhausted

    def advance(self) -> Step[T]:
        """Produce the next Step. Called only while not exhausted."""
        raise NotImplementedError

    def pull(self) -> Step[T]:
        if self._exhausted:
            return STOP
        step = self.advance()
        if isinstance(step, Error):
            self._exhausted = True
        return step

    def close(self) -> None:
        """Mark exhausted without pulling further."""
        self._exhausted = True

    def __iter__(self) -> typing.Self:
        return self

    def __next__(self) -> T:
        match self.pull():
            case Ok(value):
                return value
            case _:
                raise StopIteration

    def __repr__(self) -> str:
        state = "exhausted" if self._exhausted else "live"
        return f"<{type(self).__name__} {state}>"


@typing.final
class EmptyCursor(Cursor[typing.Never]):
    """Cursor that never yields. Use the shared EMPTY instance."""

    __slots__ = ()

    def __init__(self) -> None:
        super().__init__()
        self._exhausted = True

    def advance(self) -> Step[typing.Never]:
        return STOP


# Canonical already-exhausted cursor, safe to share since it holds no state.
EMPTY: typing.Final[Cursor[typing.Never]] = EmptyCursor()

__all__ = ("EMPTY", "Cursor", "EmptyCursor")
