#
# tests/unit/test_outcome.py
#
"""Tests for outcome rendering."""

from datetime import timedelta

from treerun.outcome import Errored, Failed, Ignored, OutcomeKind, Passed, RunRecord


def test_outcome_text() -> None:
    assert str(Passed()) == "Passed"
    assert str(Ignored("later")) == "Ignored: later"
    assert str(Failed("expected 4")) == "Failed: expected 4"
    assert str(Errored(KeyError("k"))) == "Exception: KeyError('k')"


def test_outcome_kinds() -> None:
    assert [o.kind for o in (Passed(), Ignored(), Failed(), Errored(ValueError()))] == [
        OutcomeKind.PASSED,
        OutcomeKind.IGNORED,
        OutcomeKind.FAILED,
        OutcomeKind.ERRORED,
    ]


def test_run_record_defaults_to_zero_elapsed() -> None:
    record = RunRecord(name="a", outcome=Passed())
    assert record.elapsed == timedelta(0)
