"""Adapting arbitrary iterables into cursors."""

from __future__ import annotations

import typing
from collections.abc import Iterable, Iterator, Sequence, Sized

from kungfu import Ok

from .._errors import InvalidArgumentError
from .._helpers import has_iter
from .._types import STOP, Step
from .base import EMPTY, Cursor


class IterCursor[T](Cursor[T]):
    """Cursor over a plain Python iterator."""

    __slots__ = ("_source",)

    def __init__(self, source: Iterator[T]) -> None:
        super().__init__()
        self._source = source

    def advance(self) -> Step[T]:
        try:
            value = next(self._source)
        except StopIteration:
            return STOP
        return Ok(value)


def as_cursor[T](value: Iterable[T], *, index: int | None = None) -> Cursor[T]:
    """
    Wrap any iterable into a Cursor.

    - Cursors pass through untouched.
    - Sized inputs of length 0 become the shared EMPTY cursor.
    - Anything else iterable is wrapped in an IterCursor.

    Raises InvalidArgumentError (naming ``index`` when given) for values
    that are not iterable.
    """
    if isinstance(value, Cursor):
        return typing.cast(Cursor[T], value)
    if not has_iter(value):
        raise InvalidArgumentError(value, index=index)
    if isinstance(value, Sized) and len(value) == 0:
        return EMPTY
    return IterCursor(iter(value))


def as_cursors(values: Sequence[typing.Any]) -> list[Cursor[typing.Any]]:
    """Adapt every positional argument, naming the first bad index."""
    return [as_cursor(value, index=i) for i, value in enumerate(values)]


__all__ = ("IterCursor", "as_cursor", "as_cursors")
