#
# tests/unit/test_counts.py
#
"""Tests for aggregation, counts combination, and exit codes."""

import itertools
from datetime import timedelta

import pytest

from treerun.counts import Counts, aggregate, combine, exit_code, format_elapsed
from treerun.outcome import Errored, Failed, Ignored, Passed, RunRecord


@pytest.fixture
def records(minutes) -> list[RunRecord]:
    return [
        RunRecord(name="", outcome=Passed(), elapsed=minutes(2)),
        RunRecord(name="", outcome=Errored(ValueError()), elapsed=minutes(3)),
        RunRecord(name="", outcome=Failed(""), elapsed=minutes(4)),
        RunRecord(name="", outcome=Passed(), elapsed=minutes(5)),
        RunRecord(name="", outcome=Failed(""), elapsed=minutes(6)),
        RunRecord(name="", outcome=Passed(), elapsed=minutes(7)),
    ]


class TestAggregate:
    def test_sums_outcomes_and_time(self, records, minutes) -> None:
        assert aggregate(records) == Counts(passed=3, ignored=0, failed=2, errored=1, elapsed=minutes(27))

    def test_total_matches_record_count(self, records) -> None:
        records = [*records, RunRecord(name="i", outcome=Ignored("later"))]
        assert aggregate(records).total == len(records)

    def test_empty_is_identity(self) -> None:
        assert aggregate([]) == Counts()

    def test_independent_of_order(self, records) -> None:
        expected = aggregate(records)
        for permutation in itertools.islice(itertools.permutations(records), 50):
            assert aggregate(permutation) == expected

    def test_partition_then_combine(self, records) -> None:
        expected = aggregate(records)
        for split in range(len(records) + 1):
            assert aggregate(records[:split]) + aggregate(records[split:]) == expected
        evens, odds = records[::2], records[1::2]
        assert combine(aggregate(odds), aggregate(evens)) == expected


class TestCounts:
    c1 = Counts(passed=1, ignored=5, failed=2, errored=3, elapsed=timedelta(seconds=20))
    c2 = Counts(passed=2, ignored=6, failed=3, errored=4, elapsed=timedelta(seconds=25))

    def test_combine(self) -> None:
        assert self.c1 + self.c2 == Counts(
            passed=3, ignored=11, failed=5, errored=7, elapsed=timedelta(seconds=45)
        )

    def test_combine_is_commutative_and_has_identity(self) -> None:
        assert combine(self.c1, self.c2) == combine(self.c2, self.c1)
        assert self.c1 + Counts() == self.c1
        assert Counts() + self.c1 == self.c1

    def test_combine_is_associative(self) -> None:
        c3 = Counts(passed=7, elapsed=timedelta(milliseconds=3))
        assert (self.c1 + self.c2) + c3 == self.c1 + (self.c2 + c3)

    def test_add_rejects_other_types(self) -> None:
        with pytest.raises(TypeError):
            self.c1 + 1  # type: ignore[operator]

    def test_summary_text(self) -> None:
        assert str(self.c1) == "6 tests run: 1 passed, 5 ignored, 2 failed, 3 errored (00:00:20)\n"


class TestExitCode:
    @pytest.mark.parametrize(
        ("failed", "errored", "expected"),
        [(0, 0, 0), (2, 0, 1), (0, 1, 2), (2, 1, 3)],
    )
    def test_bitmask(self, failed: int, errored: int, expected: int) -> None:
        counts = Counts(passed=4, ignored=1, failed=failed, errored=errored)
        assert exit_code(counts) == expected
        assert counts.exit_code == expected


class TestFormatElapsed:
    @pytest.mark.parametrize(
        ("elapsed", "text"),
        [
            (timedelta(0), "00:00:00"),
            (timedelta(seconds=20), "00:00:20"),
            (timedelta(minutes=27), "00:27:00"),
            (timedelta(hours=3, seconds=5), "03:00:05"),
            (timedelta(days=1, hours=2), "1.02:00:00"),
            (timedelta(milliseconds=12), "00:00:00.012000"),
        ],
    )
    def test_format(self, elapsed: timedelta, text: str) -> None:
        assert format_elapsed(elapsed) == text
