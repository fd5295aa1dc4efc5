#
# src/treerun/counts.py
#
"""
Aggregation of run records into summary counts, and exit code derivation.
"""

from collections import Counter
from collections.abc import Iterable
from datetime import timedelta

from attrs import define, field

from treerun.outcome import OutcomeKind, RunRecord

EXIT_FAILED = 1
EXIT_ERRORED = 2


def format_elapsed(elapsed: timedelta) -> str:
    """Renders a duration as ``[d.]hh:mm:ss[.ffffff]``."""
    sign = "-" if elapsed < timedelta(0) else ""
    elapsed = abs(elapsed)
    hours, remainder = divmod(elapsed.seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    text = f"{hours:02d}:{minutes:02d}:{seconds:02d}"
    if elapsed.days:
        text = f"{elapsed.days}.{text}"
    if elapsed.microseconds:
        text += f".{elapsed.microseconds:06d}"
    return sign + text


@define(frozen=True, slots=True)
class Counts:
    """
    Tally of outcomes plus total elapsed time.

    Counts form a commutative monoid under `combine` (also ``+``) with
    ``Counts()`` as identity, so partial results from separate shards can be
    merged without re-running tests.
    """

    passed: int = field(default=0)
    ignored: int = field(default=0)
    failed: int = field(default=0)
    errored: int = field(default=0)
    elapsed: timedelta = field(factory=timedelta)

    @property
    def total(self) -> int:
        """Number of records these counts were built from."""
        return self.passed + self.ignored + self.failed + self.errored

    @property
    def run(self) -> int:
        """Number of tests that actually ran, excluding ignored ones."""
        return self.passed + self.failed + self.errored

    def combine(self, other: "Counts") -> "Counts":
        return Counts(
            passed=self.passed + other.passed,
            ignored=self.ignored + other.ignored,
            failed=self.failed + other.failed,
            errored=self.errored + other.errored,
            elapsed=self.elapsed + other.elapsed,
        )

    def __add__(self, other: object) -> "Counts":
        if not isinstance(other, Counts):
            return NotImplemented
        return self.combine(other)

    @property
    def exit_code(self) -> int:
        return exit_code(self)

    def __str__(self) -> str:
        return (
            f"{self.run} tests run: {self.passed} passed, {self.ignored} ignored, "
            f"{self.failed} failed, {self.errored} errored ({format_elapsed(self.elapsed)})\n"
        )


def combine(first: Counts, second: Counts) -> Counts:
    return first.combine(second)


def aggregate(records: Iterable[RunRecord]) -> Counts:
    """Counts records per outcome kind and sums their elapsed time."""
    kinds: Counter[OutcomeKind] = Counter()
    elapsed = timedelta(0)
    for record in records:
        kinds[record.outcome.kind] += 1
        elapsed += record.elapsed
    return Counts(
        passed=kinds[OutcomeKind.PASSED],
        ignored=kinds[OutcomeKind.IGNORED],
        failed=kinds[OutcomeKind.FAILED],
        errored=kinds[OutcomeKind.ERRORED],
        elapsed=elapsed,
    )


def exit_code(counts: Counts) -> int:
    """Bit 0 is set when anything failed, bit 1 when anything errored."""
    code = 0
    if counts.failed > 0:
        code |= EXIT_FAILED
    if counts.errored > 0:
        code |= EXIT_ERRORED
    return code

# 🔼⚙️
