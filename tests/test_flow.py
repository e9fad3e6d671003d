"""Tests for the fluent flow() builder."""

import pytest

from skink import InvalidArgumentError, Flow, MismatchedLengthsError, flow


class TestFlow:
    def test_filter_map(self):
        result = flow(range(10)).filter(lambda x: x % 2 == 0).map(str).collect()

        assert result == ["0", "2", "4", "6", "8"]

    def test_builders_are_immutable(self):
        base = flow([1, 2, 3])
        doubled = base.map(lambda x: x * 2)

        assert isinstance(doubled, Flow)
        assert base.collect() == [1, 2, 3]
        assert doubled.collect() == [2, 4, 6]

    def test_compile_twice_with_reiterable_source(self):
        built = flow("ab").enumerate(start=1)

        assert list(built.compile()) == [(1, "a"), (2, "b")]
        assert list(built.compile()) == [(1, "a"), (2, "b")]

    def test_cycle_take(self):
        assert flow([1, 2]).cycle().take(5).collect() == [1, 2, 1, 2, 1]

    def test_repeat_chain(self):
        assert flow([0]).repeat(2).chain([1]).collect() == [0, 0, 1]

    def test_zip_and_product(self):
        assert flow("ab").zip([1, 2, 3]).collect() == [("a", 1), ("b", 2)]
        assert flow([0, 1]).product([0, 1]).collect() == [(0, 0), (0, 1), (1, 0), (1, 1)]

    def test_zip_strict(self):
        with pytest.raises(MismatchedLengthsError):
            flow([1, 2]).zip_strict([1]).collect()

    def test_tap_and_logged(self):
        seen = []
        cursor = flow([3, 4]).tap(seen.append).logged().compile()
        list(cursor)

        assert seen == [3, 4]
        assert len(cursor.log) == 3

    def test_nothing_pulled_until_compile(self):
        seen = []
        built = flow([1]).tap(seen.append)

        assert seen == []
        built.collect()
        assert seen == [1]

    def test_bad_source_fails_at_compile(self):
        built = flow(5)

        with pytest.raises(InvalidArgumentError):
            built.compile()
