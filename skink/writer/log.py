"""
Pull trace
==========

PullEvent records one pull; Log is the monoidal trace built from them.
"""

from __future__ import annotations

import typing
from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PullEvent:
    """One pull: its position, the value (if any) and whether it exhausted."""

    index: int
    value: typing.Any = None
    exhausted: bool = False


class Log[A](list[A]):
    """
    Trace of entries, combined monoidally.

    ``combine`` and ``tell`` return new logs and leave both operands alone;
    they are for joining finished traces. Writers that record a stream
    append to a private list and wrap it with ``Log.from_entries`` when read.
    """

    @staticmethod
    def of[T](*items: T) -> Log[T]:
        return Log[T](items)

    @staticmethod
    def from_entries[T](entries: Iterable[T]) -> Log[T]:
        """Snapshot ``entries`` (copied once) as a Log."""
        return Log[T](entries)

    def combine(self, other: Log[A], /) -> Log[A]:
        result: Log[A] = Log(self)
        result.extend(other)
        return result

    def tell(self, item: A, /) -> Log[A]:
        result: Log[A] = Log(self)
        result.append(item)
        return result

    def values(self) -> list[typing.Any]:
        """Values of the pulls that produced one, in pull order."""
        return [e.value for e in self if isinstance(e, PullEvent) and not e.exhausted]

    @property
    def exhausted(self) -> bool:
        """Whether the last recorded pull reported exhaustion."""
        return bool(self) and isinstance(self[-1], PullEvent) and self[-1].exhausted


__all__ = ("Log", "PullEvent")
