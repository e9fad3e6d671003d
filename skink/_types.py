"""
Core type definitions for skink.

Step - результат одного pull: Ok(value) или Error(EXHAUSTED).
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from kungfu import Error, Result

# ============================================================================
# Exhaustion sentinel
# ============================================================================


@typing.final
class Exhausted:
    """Marker carried by the error side of a Step once a cursor runs dry."""

    __slots__ = ()
    _instance: typing.ClassVar[Exhausted | None] = None

    def __new__(cls) -> Exhausted:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "EXHAUSTED"


EXHAUSTED: typing.Final = Exhausted()

# ============================================================================
# Type aliases
# ============================================================================

# Step = one pull from a cursor: Ok(value) or Error(EXHAUSTED)
type Step[T] = Result[T, Exhausted]

# Predicate = function that tests a value
type Predicate[T] = Callable[[T], bool]

# Effect = observation-only callback
type Effect[T] = Callable[[T], None]

# NOTE: shared instance, Error(EXHAUSTED) carries no per-cursor state.
STOP: typing.Final[Step[typing.Never]] = Error(EXHAUSTED)

__all__ = (
    "EXHAUSTED",
    "Effect",
    "Exhausted",
    "Predicate",
    "STOP",
    "Step",
)
