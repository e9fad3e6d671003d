"""
Writer
======

Pull tracing built on a monoidal Log:
- Log           - accumulated entries
- WriterResult  - Result[T, E] plus the log
- WriterCursor  - cursor that records each pull as a PullEvent
"""

from .cursor import WriterCursor, collect_writer, logged
from .log import Log, PullEvent
from .result import WriterResult

__all__ = (
    "Log",
    "PullEvent",
    "WriterCursor",
    "WriterResult",
    "collect_writer",
    "logged",
)
