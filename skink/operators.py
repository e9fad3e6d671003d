"""
Operators akin to Python's ``operator`` module, as plain functions.

Handy as arguments to ``map_with()`` and friends.
"""

from __future__ import annotations

import typing

type Number = int | float


def add(a: typing.Any, b: typing.Any) -> typing.Any:
    """``a + b``"""
    return a + b


def subtract(a: typing.Any, b: typing.Any) -> typing.Any:
    """``a - b``"""
    return a - b


def multiply(a: typing.Any, b: typing.Any) -> typing.Any:
    """``a * b``"""
    return a * b


def divide(a: Number, b: Number) -> float:
    """``a / b`` (true division)."""
    return a / b


def mod(a: Number, b: Number) -> Number:
    """
    Remainder of ``a / b`` truncated toward zero.

    The sign follows the dividend (``mod(-3, 5) == -3``), unlike Python's
    ``%``. For a result always in ``[0, |b|)`` use ``positive_mod()``.
    """
    if b == 0:
        raise ZeroDivisionError("mod(): division by zero")
    remainder = abs(a) % abs(b)
    return -remainder if a < 0 else remainder


def positive_mod(a: Number, b: Number) -> Number:
    """
    Modulo wrapped into ``[0, |b|)``.

    Example:
        positive_mod(-4, 2)   # 0
        positive_mod(-3, 5)   # 2
        positive_mod(7, -5)   # 2
    """
    result = a % b
    # Python's % takes the sign of b; pull negative divisors back up.
    if result < 0:
        result += abs(b)
    return result


__all__ = (
    "add",
    "divide",
    "mod",
    "multiply",
    "positive_mod",
    "subtract",
)
