from __future__ import annotations

import typing


class InvalidArgumentError(TypeError):
    """Argument can't be adapted into a cursor, or arity is out of range."""

    value: typing.Any
    index: int | None
    reason: str

    def __init__(
        self,
        value: typing.Any,
        *,
        index: int | None = None,
        reason: str = "is not iterable",
    ) -> None:
        self.value = value
        self.index = index
        self.reason = reason
        where = "argument" if index is None else f"argument {index}"
        super().__init__(f"{where} {reason}: {value!r}")


class MismatchedLengthsError(ValueError):
    """zip_strict() found some inputs exhausted while others still had values."""

    round: int
    exhausted: tuple[int, ...]

    def __init__(self, round: int, exhausted: tuple[int, ...]) -> None:
        self.round = round
        self.exhausted = exhausted
        super().__init__(
            f"inputs stopped early at round {round}: exhausted {list(exhausted)}"
        )


__all__ = ("InvalidArgumentError", "MismatchedLengthsError")
