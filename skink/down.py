"""
Draining cursors into plain values.

Функции для вычитывания курсора целиком или по одному шагу.
"""

from __future__ import annotations

from collections.abc import Iterable

from kungfu import Error, Ok, Result

from ._errors import MismatchedLengthsError
from ._types import Step
from .cursor import as_cursor


def to_list[T](iterable: Iterable[T]) -> list[T]:
    """
    Drain into a list. Errors raised while pulling propagate.

    **When to use:** Finite cursors whose failure you want as an exception.

    Example:
        to_list(product([0, 1], "ab"))
        # [(0, "a"), (0, "b"), (1, "a"), (1, "b")]
    """
    return list(as_cursor(iterable, index=0))


def to_result[T](iterable: Iterable[T]) -> Result[list[T], MismatchedLengthsError]:
    """
    Drain into ``Ok(list)``; a length mismatch becomes ``Error(err)``.

    **When to use:** Draining ``zip_strict()`` output when unequal inputs are
    an expected outcome rather than a bug.

    Example:
        match to_result(zip_strict(names, scores)):
            case Ok(rows):
                ...
            case Error(err):
                print(f"mismatch at round {err.round}")

    NOTE: Only MismatchedLengthsError is converted. Anything else a source
          raises still propagates.
    """
    cursor = as_cursor(iterable, index=0)
    values: list[T] = []
    try:
        for value in cursor:
            values.append(value)
    except MismatchedLengthsError as exc:
        return Error(exc)
    return Ok(values)


def first[T](iterable: Iterable[T]) -> Step[T]:
    """
    Pull once: ``Ok(value)`` or ``Error(EXHAUSTED)``.

    **When to use:** Peeking at a cursor without catching StopIteration.
    """
    return as_cursor(iterable, index=0).pull()


def or_else[T](iterable: Iterable[T], default: list[T]) -> list[T]:
    """
    Drained list, or ``default`` when draining hits a length mismatch.
    """
    match to_result(iterable):
        case Ok(values):
            return values
        case Error(_):
            return default


__all__ = (
    "first",
    "or_else",
    "to_list",
    "to_result",
)
