from .adapt import IterCursor, as_cursor, as_cursors
from .base import EMPTY, Cursor, EmptyCursor

__all__ = (
    "EMPTY",
    "Cursor",
    "EmptyCursor",
    "IterCursor",
    "as_cursor",
    "as_cursors",
)
