"""
AST for fluent cursor chaining.

Architecture:
- Expr[T]  - immutable node that lowers into a fresh Cursor[T]
- Flow[T]  - fluent builder wrapping an Expr; every method returns a new Flow

Nothing is pulled while a flow is being built. ``compile()`` lowers the whole
tree; compiling twice gives two independent cursors as long as the sources
are re-iterable (lists, tuples, ranges). Cursors and generators used as
sources are single-pass, so only the first compiled cursor sees their values.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from ._types import Effect, Predicate
from .cursor import Cursor, as_cursor


# ============================================================================
# Nodes
# ============================================================================


class Expr[T]:
    """
    AST node that can be lowered into a Cursor.
    """

    def lower(self) -> Cursor[T]:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class Base[T](Expr[T]):
    source: Iterable[T]

    def lower(self) -> Cursor[T]:
        return as_cursor(self.source, index=0)


@dataclass(frozen=True, slots=True)
class Map[T, R](Expr[R]):
    inner: Expr[T]
    fn: Callable[[T], R]

    def lower(self) -> Cursor[R]:
        from .transform.map import map_with
        return map_with(self.inner.lower(), fn=self.fn)


@dataclass(frozen=True, slots=True)
class Filter[T](Expr[T]):
    inner: Expr[T]
    predicate: Predicate[T]

    def lower(self) -> Cursor[T]:
        from .transform.filter import filter_with
        return filter_with(self.inner.lower(), predicate=self.predicate)


@dataclass(frozen=True, slots=True)
class Tap[T](Expr[T]):
    inner: Expr[T]
    effect: Effect[T]

    def lower(self) -> Cursor[T]:
        from .transform.effects import tap
        return tap(self.inner.lower(), effect=self.effect)


@dataclass(frozen=True, slots=True)
class Take[T](Expr[T]):
    inner: Expr[T]
    n: int

    def lower(self) -> Cursor[T]:
        from .transform.slice import take
        return take(self.inner.lower(), n=self.n)


@dataclass(frozen=True, slots=True)
class Enumerate[T](Expr[tuple[int, T]]):
    inner: Expr[T]
    start: int

    def lower(self) -> Cursor[tuple[int, T]]:
        from .iteration.enumerate import enumerate
        return enumerate(self.inner.lower(), start=self.start)


@dataclass(frozen=True, slots=True)
class Chain[T](Expr[T]):
    inner: Expr[T]
    others: tuple[Iterable[T], ...]

    def lower(self) -> Cursor[T]:
        from .iteration.chain import chain
        return chain(self.inner.lower(), *self.others)


@dataclass(frozen=True, slots=True)
class Zip[T](Expr[tuple[typing.Any, ...]]):
    inner: Expr[T]
    others: tuple[Iterable[typing.Any], ...]
    strict: bool = False

    def lower(self) -> Cursor[tuple[typing.Any, ...]]:
        from .iteration.zip import zip, zip_strict
        build = zip_strict if self.strict else zip
        return build(self.inner.lower(), *self.others)


@dataclass(frozen=True, slots=True)
class Product[T](Expr[tuple[typing.Any, ...]]):
    inner: Expr[T]
    others: tuple[Iterable[typing.Any], ...]

    def lower(self) -> Cursor[tuple[typing.Any, ...]]:
        from .iteration.product import product
        return product(self.inner.lower(), *self.others)


@dataclass(frozen=True, slots=True)
class Cycle[T](Expr[T]):
    inner: Expr[T]

    def lower(self) -> Cursor[T]:
        from .iteration.cycle import cycle
        return cycle(self.inner.lower())


@dataclass(frozen=True, slots=True)
class Repeat[T](Expr[T]):
    inner: Expr[T]
    n: int

    def lower(self) -> Cursor[T]:
        from .iteration.repeat import repeat
        return repeat(self.inner.lower(), self.n)


@dataclass(frozen=True, slots=True)
class Logged[T](Expr[T]):
    inner: Expr[T]

    def lower(self) -> Cursor[T]:
        from .writer.cursor import logged
        return logged(self.inner.lower())


# ============================================================================
# Fluent builder
# ============================================================================


@dataclass(frozen=True, slots=True)
class Flow[T]:
    """
    Fluent builder for chaining cursor combinators.

    Example:
        evens = flow(range(10)).filter(lambda x: x % 2 == 0).map(str).collect()
        # ["0", "2", "4", "6", "8"]
    """

    expr: Expr[T]

    def map[R](self, fn: Callable[[T], R]) -> Flow[R]:
        return Flow(Map(self.expr, fn=fn))

    def filter(self, predicate: Predicate[T]) -> Flow[T]:
        return Flow(Filter(self.expr, predicate=predicate))

    def tap(self, effect: Effect[T]) -> Flow[T]:
        return Flow(Tap(self.expr, effect=effect))

    def take(self, n: int) -> Flow[T]:
        return Flow(Take(self.expr, n=n))

    def enumerate(self, *, start: int = 0) -> Flow[tuple[int, T]]:
        return Flow(Enumerate(self.expr, start=start))

    def chain(self, *others: Iterable[T]) -> Flow[T]:
        return Flow(Chain(self.expr, others=others))

    def zip(self, *others: Iterable[typing.Any]) -> Flow[tuple[typing.Any, ...]]:
        return Flow(Zip(self.expr, others=others))

    def zip_strict(self, *others: Iterable[typing.Any]) -> Flow[tuple[typing.Any, ...]]:
        return Flow(Zip(self.expr, others=others, strict=True))

    def product(self, *others: Iterable[typing.Any]) -> Flow[tuple[typing.Any, ...]]:
        return Flow(Product(self.expr, others=others))

    def cycle(self) -> Flow[T]:
        return Flow(Cycle(self.expr))

    def repeat(self, n: int) -> Flow[T]:
        return Flow(Repeat(self.expr, n=n))

    def logged(self) -> Flow[T]:
        return Flow(Logged(self.expr))

    def compile(self) -> Cursor[T]:
        return self.expr.lower()

    def collect(self) -> list[T]:
        from .down import to_list
        return to_list(self.compile())


def flow[T](source: Iterable[T]) -> Flow[T]:
    """Start a flow from any iterable. Validation happens at compile()."""
    return Flow(Base(source))


__all__ = (
    "Base",
    "Chain",
    "Cycle",
    "Enumerate",
    "Expr",
    "Filter",
    "Flow",
    "Logged",
    "Map",
    "Product",
    "Repeat",
    "Take",
    "Tap",
    "Zip",
    "flow",
)
