"""Tests for range()."""

from decimal import Decimal
from fractions import Fraction

import pytest

from skink import InvalidArgumentError, RangeBounds, range as srange
from skink.iteration.range import RangeCursor


class TestRange:
    def test_end_only(self):
        assert list(srange(5)) == [0, 1, 2, 3, 4]

    def test_begin_end(self):
        assert list(srange(5, 10)) == [5, 6, 7, 8, 9]

    def test_step(self):
        assert list(srange(0, 10, 2)) == [0, 2, 4, 6, 8]

    def test_negative_step(self):
        assert list(srange(0, -5, -1)) == [0, -1, -2, -3, -4]

    def test_counts_down_toward_minus_one(self):
        assert list(srange(3, -1, -1)) == [3, 2, 1, 0]

    def test_empty_when_already_past_end(self):
        assert list(srange(5, 5)) == []
        assert list(srange(10, 5)) == []
        assert list(srange(0, 5, -1)) == []

    def test_matches_builtin(self):
        for args in [(7,), (-3, 4), (1, 20, 3), (20, 1, -3), (0, -10, -4)]:
            assert list(srange(*args)) == list(range(*args))

    def test_integral_float_accepted(self):
        assert list(srange(3.0)) == [0, 1, 2]

    def test_integral_decimal_and_fraction_accepted(self):
        assert list(srange(Decimal("3"))) == [0, 1, 2]
        assert list(srange(Fraction(6, 2))) == [0, 1, 2]

    def test_returns_range_cursor(self):
        cursor = srange(2, 8, 3)

        assert isinstance(cursor, RangeCursor)
        assert cursor.bounds == RangeBounds(2, 8, 3)


class TestRangeValidation:
    @pytest.mark.parametrize("args", [(), (1, 2, 3, 4)])
    def test_arity(self, args):
        with pytest.raises(InvalidArgumentError):
            srange(*args)

    @pytest.mark.parametrize("x, y", [(0, 10), (5, -5), (0, 0)])
    def test_zero_step_is_value_error(self, x, y):
        with pytest.raises(ValueError):
            srange(x, y, 0)

    def test_non_numeric_is_type_error(self):
        with pytest.raises(TypeError):
            srange("5")
        with pytest.raises(TypeError):
            srange(0, None)

    def test_non_integral_decimal_is_value_error(self):
        with pytest.raises(ValueError):
            srange(Decimal("2.5"))
        with pytest.raises(ValueError):
            srange(Decimal("NaN"))

    def test_infinite_is_value_error(self):
        with pytest.raises(ValueError):
            srange(float("inf"))

    def test_non_integer_is_value_error(self):
        with pytest.raises(ValueError):
            srange(2.5)
        with pytest.raises(ValueError):
            srange(0, 10, 0.5)

    def test_validation_is_eager(self):
        # Fails at the call, before anything is pulled.
        with pytest.raises(ValueError):
            srange(1, 2, 0)

    def test_range_spec_rejects_zero_step(self):
        with pytest.raises(ValueError):
            RangeBounds(0, 1, 0)
