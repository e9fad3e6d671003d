from .chain import ChainCursor, chain
from .cycle import ReplayCursor, cycle
from .enumerate import EnumerateCursor, enumerate
from .product import DigitWheel, ProductCursor, product
from .range import RangeCursor, RangeBounds, range
from .repeat import repeat
from .zip import LockstepCursor, zip, zip_strict

__all__ = (
    # Cursors
    "ChainCursor",
    "EnumerateCursor",
    "LockstepCursor",
    "ProductCursor",
    "RangeCursor",
    "ReplayCursor",
    # Data
    "DigitWheel",
    "RangeBounds",
    # Constructors
    "chain",
    "cycle",
    "enumerate",
    "product",
    "range",
    "repeat",
    "zip",
    "zip_strict",
)
