"""
Keyed access
============

Functional helpers for keyed containers (lists, deques, dicts), usable
where a method can't be passed directly.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Hashable, MutableMapping

from ._types import Predicate


def pop(array: typing.Any) -> typing.Any:
    """Remove and return the last item, or None when empty."""
    if not hasattr(array, "pop"):
        raise TypeError(f"Expected a list-like object, got {array!r}")
    if not array:
        return None
    return array.pop()


def shift(array: typing.Any) -> typing.Any:
    """Remove and return the first item, or None when empty."""
    if not hasattr(array, "pop"):
        raise TypeError(f"Expected a list-like object, got {array!r}")
    if not array:
        return None
    if hasattr(array, "popleft"):
        return array.popleft()
    return array.pop(0)


def remove_when[T](
    array: typing.Any,
    predicate: Predicate[T],
    remove: Callable[[typing.Any], T | None],
    at: int,
) -> T | None:
    """Call ``remove(array)`` if ``predicate(array[at])`` holds."""
    if array and predicate(array[at]):
        return remove(array)
    return None


def pop_if[T](array: typing.Any, predicate: Predicate[T]) -> T | None:
    """Pop the last item if ``predicate(last)`` is true."""
    return remove_when(array, predicate, pop, -1)


def shift_if[T](array: typing.Any, predicate: Predicate[T]) -> T | None:
    """Shift the first item if ``predicate(first)`` is true."""
    return remove_when(array, predicate, shift, 0)


def delete_if[K, V](
    mapping: MutableMapping[K, V],
    predicate: Predicate[MutableMapping[K, V]],
    key: K,
) -> bool:
    """
    Delete ``key`` from ``mapping`` when ``predicate(mapping)`` is true.

    Returns whether an entry was removed. A missing key is not an error.
    """
    if not isinstance(key, Hashable):
        raise TypeError(f"key must be hashable, not {type(key).__name__}")
    if predicate(mapping) and key in mapping:
        del mapping[key]
        return True
    return False


__all__ = (
    "delete_if",
    "pop",
    "pop_if",
    "remove_when",
    "shift",
    "shift_if",
)
