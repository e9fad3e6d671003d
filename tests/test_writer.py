"""Tests for pull tracing."""

from kungfu import Error, Ok

from skink import Log, MismatchedLengthsError, PullEvent, collect_writer, logged, zip_strict


class TestLog:
    def test_combine_is_pure(self):
        a = Log.of(1, 2)
        b = Log.of(3)
        combined = a.combine(b)

        assert list(combined) == [1, 2, 3]
        assert list(a) == [1, 2]

    def test_identity(self):
        x = Log.of("a")

        assert Log().combine(x) == x
        assert x.combine(Log()) == x

    def test_tell(self):
        assert list(Log.of(1).tell(2)) == [1, 2]


class TestLogged:
    def test_records_pulls(self):
        cursor = logged([10, 20])
        assert list(cursor) == [10, 20]

        assert list(cursor.log) == [
            PullEvent(0, 10),
            PullEvent(1, 20),
            PullEvent(2, exhausted=True),
        ]

    def test_exhaustion_recorded_once(self):
        cursor = logged([])
        list(cursor)
        list(cursor)

        assert len(cursor.log) == 1

    def test_log_is_snapshot(self):
        cursor = logged("ab")
        before = cursor.log
        next(cursor)

        assert len(before) == 0
        assert len(cursor.log) == 1

    def test_logged_is_idempotent(self):
        cursor = logged([1])

        assert logged(cursor) is cursor


class TestCollectWriter:
    def test_ok(self):
        wr = collect_writer([1, 2])

        match wr.result:
            case Ok(values):
                assert values == [1, 2]
            case Error(err):
                raise AssertionError(err)
        assert len(wr.log) == 3

    def test_mismatch(self):
        wr = collect_writer(zip_strict([1, 2], [1]))

        match wr.result:
            case Error(err):
                assert isinstance(err, MismatchedLengthsError)
            case Ok(values):
                raise AssertionError(values)
        assert list(wr.log) == [PullEvent(0, (1, 1))]


class TestLongTraces:
    def test_drains_long_cursor(self):
        cursor = logged(range(200_000))
        for _ in cursor:
            pass

        log = cursor.log
        assert len(log) == 200_001
        assert log[-1] == PullEvent(200_000, exhausted=True)
        assert log.exhausted

    def test_collect_writer_long_cursor(self):
        wr = collect_writer(range(100_000))

        assert wr.pulls == 100_001
        assert wr.log.values() == list(range(100_000))


class TestLogQueries:
    def test_values_skip_exhaustion(self):
        cursor = logged("ab")
        list(cursor)

        assert cursor.log.values() == ["a", "b"]

    def test_not_exhausted_mid_stream(self):
        cursor = logged([1, 2])
        next(cursor)

        assert not cursor.log.exhausted
        assert not Log().exhausted
