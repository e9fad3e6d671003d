from .effects import TapCursor, tap
from .filter import FilterCursor, filter_with
from .map import MapCursor, map_with
from .slice import TakeCursor, take

__all__ = (
    # Cursors
    "FilterCursor",
    "MapCursor",
    "TakeCursor",
    "TapCursor",
    # Constructors
    "filter_with",
    "map_with",
    "take",
    "tap",
)
