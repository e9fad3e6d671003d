"""
skink - lazy iteration helpers modelled on Python's builtins and itertools.

Every constructor validates its arguments immediately and returns a Cursor:
a single-pass, pull-based state machine that also speaks the iterator
protocol.

Architecture:
- cursor     - Cursor base, the shared EMPTY cursor, as_cursor() adaptation
- iteration  - range, enumerate, chain, cycle, repeat, zip, zip_strict, product
- transform  - map_with, filter_with, tap, take
- down       - draining cursors into lists / Results
- writer     - pull tracing via a monoidal Log
- ast        - fluent flow() builder
- operators, keyed - small functional helpers
"""

# Core types
from ._types import EXHAUSTED, Effect, Exhausted, Predicate, Step

# Internal helpers
from . import _helpers

# Cursor
from .cursor import EMPTY, Cursor, EmptyCursor, IterCursor, as_cursor
from ._helpers import has_iter

# Iteration
from .iteration import (
    DigitWheel,
    RangeBounds,
    chain,
    cycle,
    enumerate,
    product,
    range,
    repeat,
    zip,
    zip_strict,
)

# Transform
from .transform import filter_with, map_with, take, tap

# Draining
from . import down
from .down import first, or_else, to_list, to_result

# Writer
from . import writer
from .writer import Log, PullEvent, WriterCursor, WriterResult, collect_writer, logged

# AST builder (Flow API)
from .ast import Expr, Flow, flow

# Helpers
from . import keyed, operators
from .operators import positive_mod

# Errors
from ._errors import InvalidArgumentError, MismatchedLengthsError

__all__ = (
    # Types
    "EXHAUSTED",
    "Effect",
    "Exhausted",
    "Predicate",
    "Step",
    # Internal helpers
    "_helpers",
    # Cursor
    "EMPTY",
    "Cursor",
    "EmptyCursor",
    "IterCursor",
    "as_cursor",
    "has_iter",
    # Iteration
    "DigitWheel",
    "RangeBounds",
    "chain",
    "cycle",
    "enumerate",
    "product",
    "range",
    "repeat",
    "zip",
    "zip_strict",
    # Transform
    "filter_with",
    "map_with",
    "take",
    "tap",
    # Draining
    "down",
    "first",
    "or_else",
    "to_list",
    "to_result",
    # Writer
    "writer",
    "Log",
    "PullEvent",
    "WriterCursor",
    "WriterResult",
    "collect_writer",
    "logged",
    # AST
    "Expr",
    "Flow",
    "flow",
    # Helpers
    "keyed",
    "operators",
    "positive_mod",
    # Errors
    "InvalidArgumentError",
    "MismatchedLengthsError",
)
