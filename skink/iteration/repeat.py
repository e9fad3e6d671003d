"""Repeat combinator

Fixed-count replay of an iterable."""

from __future__ import annotations

import typing
from collections.abc import Iterable

from .._helpers import as_integer
from ..cursor import Cursor, as_cursor
from .cycle import ReplayCursor


def repeat[T](iterable: Iterable[T], n: typing.Any) -> Cursor[T]:
    """
    Yield every item of ``iterable`` exactly ``n`` times in order.

    The first pass is buffered while it is yielded, so one-shot iterators
    (generators) repeat correctly.

    Example:
        list(repeat([1, 2, 3], 2))  # [1, 2, 3, 1, 2, 3]

    Raises:
        InvalidArgumentError: iterable is not iterable.
        TypeError: n is not a number.
        ValueError: n is not an integer > 0.
    """
    source = as_cursor(iterable, index=0)
    times = as_integer(n, name="repeat(): n")
    if times <= 0:
        raise ValueError(f"repeat(): n must be > 0, got {n}")
    return ReplayCursor(source, passes=times)


__all__ = ("repeat",)
