"""Tests for cycle() and repeat()."""

import pytest

from skink import InvalidArgumentError, cycle, repeat, take


class TestCycle:
    def test_empty_terminates(self):
        assert list(cycle([])) == []

    def test_empty_generator_terminates(self):
        assert list(cycle(x for x in ())) == []

    def test_replays_forever(self):
        cursor = cycle([1, 2])

        assert [next(cursor) for _ in range(5)] == [1, 2, 1, 2, 1]

    def test_generator_source_is_buffered(self):
        cursor = cycle(x for x in "ab")

        assert list(take(cursor, n=7)) == ["a", "b", "a", "b", "a", "b", "a"]

    def test_first_pass_is_lazy(self):
        pulled = []

        def source():
            for x in (1, 2, 3):
                pulled.append(x)
                yield x

        cursor = cycle(source())
        next(cursor)
        assert pulled == [1]

    def test_not_iterable(self):
        with pytest.raises(InvalidArgumentError):
            cycle(3)


class TestRepeat:
    def test_twice(self):
        assert list(repeat([1, 2, 3], 2)) == [1, 2, 3, 1, 2, 3]

    def test_once(self):
        assert list(repeat("ab", 1)) == ["a", "b"]

    def test_generator_source(self):
        assert list(repeat((x for x in (1, 2)), 3)) == [1, 2, 1, 2, 1, 2]

    def test_total_length(self):
        assert len(list(repeat(range(4), 5))) == 20

    def test_empty_source(self):
        assert list(repeat([], 3)) == []

    @pytest.mark.parametrize("n", [0, -1])
    def test_non_positive_count(self, n):
        with pytest.raises(ValueError):
            repeat([1], n)

    def test_non_integer_count(self):
        with pytest.raises(ValueError):
            repeat([1], 1.5)

    def test_non_numeric_count(self):
        with pytest.raises(TypeError):
            repeat([1], "2")

    def test_not_iterable(self):
        with pytest.raises(InvalidArgumentError):
            repeat(None, 2)
