"""Pull tracing

WriterCursor records every pull of the wrapped cursor in a Log, the way
the rest of the library reports what happened without a global logger."""

from __future__ import annotations

import typing
from collections.abc import Iterable

from kungfu import Error, Ok

from .._errors import MismatchedLengthsError
from .._types import Step
from ..cursor import Cursor, as_cursor
from .log import Log, PullEvent
from .result import WriterResult


class WriterCursor[T](Cursor[T]):
    __slots__ = ("_source", "_events")

    def __init__(self, source: Cursor[T]) -> None:
        super().__init__()
        self._source = source
        self._events: list[PullEvent] = []

    @property
    def log(self) -> Log[PullEvent]:
        """Snapshot of the trace so far."""
        return Log.from_entries(self._events)

    def advance(self) -> Step[T]:
        step = self._source.pull()
        index = len(self._events)
        match step:
            case Ok(value):
                self._events.append(PullEvent(index, value))
            case Error(_):
                self._events.append(PullEvent(index, exhausted=True))
        return step


def logged[T](iterable: Iterable[T]) -> WriterCursor[T]:
    """
    Wrap a cursor so each pull is recorded.

    Example:
        cursor = logged(zip([1, 2], "ab"))
        list(cursor)
        len(cursor.log)          # 3, the last one exhausted
        cursor.log[0].value      # (1, "a")
    """
    if isinstance(iterable, WriterCursor):
        return typing.cast(WriterCursor[T], iterable)
    return WriterCursor(as_cursor(iterable, index=0))


def collect_writer[T](
    iterable: Iterable[T],
) -> WriterResult[list[T], MismatchedLengthsError]:
    """
    Drain ``iterable`` and return its values together with the pull trace.

    A MismatchedLengthsError raised while draining becomes the Error side;
    the log still holds every pull up to the failure.
    """
    cursor = logged(iterable)
    values: list[T] = []
    try:
        for value in cursor:
            values.append(value)
    except MismatchedLengthsError as exc:
        return WriterResult(Error(exc), cursor.log)
    return WriterResult(Ok(values), cursor.log)


__all__ = ("PullEvent", "WriterCursor", "collect_writer", "logged")
