import io
import logging
from datetime import timedelta

import pytest
from rich.console import Console

from treerun.hooks import Hooks


class HookRecorder:
    """Records every hook invocation as a tuple."""

    def __init__(self):
        self.calls: list[tuple] = []

    def hooks(self) -> Hooks:
        return Hooks(
            before_run=lambda name: self.calls.append(("before_run", name)),
            on_passed=lambda name, elapsed: self.calls.append(("passed", name, elapsed)),
            on_ignored=lambda name, reason: self.calls.append(("ignored", name, reason)),
            on_failed=lambda name, message, elapsed: self.calls.append(("failed", name, message, elapsed)),
            on_exception=lambda name, cause, elapsed: self.calls.append(("exception", name, cause, elapsed)),
        )

    def outcome_calls(self) -> list[tuple]:
        return [c for c in self.calls if c[0] != "before_run"]


@pytest.fixture
def recorder() -> HookRecorder:
    return HookRecorder()


@pytest.fixture
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def console(output: io.StringIO) -> Console:
    """A rich console writing plain text into the ``output`` buffer."""
    return Console(file=output, width=200, highlight=False, color_system=None)


@pytest.fixture
def minutes():
    return lambda n: timedelta(minutes=n)


@pytest.fixture(autouse=True)
def _reset_root_handlers():
    """CLI invocations install handlers bound to short-lived streams."""
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        handler.close()
        root.removeHandler(handler)
