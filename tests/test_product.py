"""Tests for product() and its digit wheels."""

import itertools
import math

import pytest

from skink import EMPTY, DigitWheel, InvalidArgumentError, product, range as srange
from skink.iteration.product import ProductCursor, advance_wheel, reset_carry, wheel_value


class TestProduct:
    def test_two_bits(self):
        assert list(product([0, 1], [0, 1])) == [(0, 0), (0, 1), (1, 0), (1, 1)]

    def test_no_inputs(self):
        assert product() is EMPTY
        assert list(product()) == []

    def test_single_input(self):
        assert list(product([1, 2, 3])) == [(1,), (2,), (3,)]

    def test_any_empty_input(self):
        assert list(product([1, 2], [], [3])) == []
        assert list(product([1], (x for x in ()))) == []

    def test_matches_itertools(self):
        inputs = ["ab", [1, 2, 3], (None, True)]

        assert list(product(*inputs)) == list(itertools.product(*inputs))

    def test_last_input_varies_fastest(self):
        rows = list(product("xy", "123"))

        assert [r[1] for r in rows[:3]] == ["1", "2", "3"]
        assert {r[0] for r in rows[:3]} == {"x"}

    def test_count_and_distinct(self):
        inputs = [range(2), range(3), range(4)]
        rows = list(product(*inputs))

        assert len(rows) == math.prod(len(i) for i in inputs)
        assert len(set(rows)) == len(rows)

    def test_accepts_cursors(self):
        rows = list(product(srange(2), srange(10, 12)))

        assert rows == [(0, 10), (0, 11), (1, 10), (1, 11)]

    def test_total(self):
        cursor = product("abc", [1, 2])

        assert isinstance(cursor, ProductCursor)
        assert cursor.total == 6

    def test_deterministic(self):
        assert list(product("ab", "cd")) == list(product("ab", "cd"))

    def test_bad_argument_names_index(self):
        with pytest.raises(InvalidArgumentError) as info:
            product([1], [2], None)

        assert info.value.index == 2


class TestDigitWheel:
    def test_empty_values_rejected(self):
        with pytest.raises(ValueError):
            DigitWheel(())

    def test_advance_without_wrap(self):
        wheel = DigitWheel(("a", "b", "c"))

        assert advance_wheel(wheel) == 0
        assert wheel.position == 1
        assert wheel_value(wheel) == "b"

    def test_overflow_carry(self):
        wheel = DigitWheel(("a", "b"), position=1)

        assert advance_wheel(wheel) == 1
        assert wheel.position == 0
        assert wheel.carry == 1

    def test_underflow_carry(self):
        wheel = DigitWheel(("a", "b", "c"))

        assert advance_wheel(wheel, -1) == -1
        assert wheel.position == 2
        assert wheel_value(wheel) == "c"

    def test_reset_carry(self):
        wheel = DigitWheel((1,))
        advance_wheel(wheel)
        reset_carry(wheel)

        assert wheel.carry == 0
