"""
WriterResult - drained values plus the pull trace
=================================================
"""

from __future__ import annotations

from dataclasses import dataclass

from kungfu import Result

from .log import Log, PullEvent


@dataclass(frozen=True, slots=True)
class WriterResult[T, E]:
    """
    Outcome of draining a logged cursor.

    - result: Ok(values) or Error(reason)
    - log:    every pull made up to the end or the failure
    """

    result: Result[T, E]
    log: Log[PullEvent]

    @property
    def pulls(self) -> int:
        """Number of pulls made while draining, the final exhausted one included."""
        return len(self.log)

    def __repr__(self) -> str:
        return f"WriterResult({self.result!r}, pulls={self.pulls})"


__all__ = ("WriterResult",)
