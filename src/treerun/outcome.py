#
# src/treerun/outcome.py
#
"""
Outcome variants and the per-test run record.
"""

from datetime import timedelta
from enum import Enum
from typing import TypeAlias

from attrs import define, field


class OutcomeKind(Enum):
    """The four ways a test can end."""

    PASSED = "passed"
    IGNORED = "ignored"
    FAILED = "failed"
    ERRORED = "errored"


@define(frozen=True, slots=True)
class Passed:
    kind = OutcomeKind.PASSED

    def __str__(self) -> str:
        return "Passed"


@define(frozen=True, slots=True)
class Ignored:
    reason: str = field(default="")
    kind = OutcomeKind.IGNORED

    def __str__(self) -> str:
        return f"Ignored: {self.reason}"


@define(frozen=True, slots=True)
class Failed:
    message: str = field(default="")
    kind = OutcomeKind.FAILED

    def __str__(self) -> str:
        return f"Failed: {self.message}"


@define(frozen=True, slots=True)
class Errored:
    """
    An unexpected exception. The original exception object is kept so callers
    can inspect its type, attributes, and traceback.
    """

    cause: BaseException
    kind = OutcomeKind.ERRORED

    @property
    def message(self) -> str:
        return str(self.cause)

    def __str__(self) -> str:
        return f"Exception: {self.cause!r}"


Outcome: TypeAlias = Passed | Ignored | Failed | Errored


@define(frozen=True, slots=True)
class RunRecord:
    """Name, outcome, and wall-clock duration of one evaluated test."""

    name: str
    outcome: Outcome
    elapsed: timedelta = field(factory=timedelta)

# 🔼⚙️
