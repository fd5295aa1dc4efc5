#
# src/treerun/hooks.py
#
"""
Observer hooks invoked while tests are evaluated, and the console reporter.
"""

from collections.abc import Callable
from contextlib import AbstractContextManager
from datetime import timedelta
from typing import Any

from attrs import define, field
from rich.console import Console

from treerun.counts import format_elapsed


def _ignore(*args: Any) -> None:
    return None


@define(frozen=True, slots=True)
class Hooks:
    """
    The five callbacks fired during evaluation.

    ``before_run`` fires before timing starts; exactly one of the four outcome
    hooks fires after the body has finished.
    """

    before_run: Callable[[str], None] = field(default=_ignore)
    on_passed: Callable[[str, timedelta], None] = field(default=_ignore)
    on_ignored: Callable[[str, str], None] = field(default=_ignore)
    on_failed: Callable[[str, str, timedelta], None] = field(default=_ignore)
    on_exception: Callable[[str, BaseException, timedelta], None] = field(default=_ignore)

    def synchronized(self, lock: AbstractContextManager[Any]) -> "Hooks":
        """Returns hooks whose invocations are serialised through ``lock``."""

        def guard(fn: Callable[..., None]) -> Callable[..., None]:
            def guarded(*args: Any) -> None:
                with lock:
                    fn(*args)

            return guarded

        return Hooks(
            before_run=guard(self.before_run),
            on_passed=guard(self.on_passed),
            on_ignored=guard(self.on_ignored),
            on_failed=guard(self.on_failed),
            on_exception=guard(self.on_exception),
        )


NO_HOOKS = Hooks()


class ConsoleReporter:
    """Prints one line per finished test to a rich console."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console(highlight=False)

    def _print(self, text: str) -> None:
        self.console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)

    def passed(self, name: str, elapsed: timedelta) -> None:
        self._print(f"{name}: Passed ({format_elapsed(elapsed)})")

    def ignored(self, name: str, reason: str) -> None:
        self._print(f"{name}: Ignored: {reason}")

    def failed(self, name: str, message: str, elapsed: timedelta) -> None:
        self._print(f"{name}: Failed: {message} ({format_elapsed(elapsed)})")

    def exception(self, name: str, cause: BaseException, elapsed: timedelta) -> None:
        self._print(f"{name}: Exception: {type(cause).__name__}: {cause} ({format_elapsed(elapsed)})")

    def hooks(self) -> Hooks:
        return Hooks(
            on_passed=self.passed,
            on_ignored=self.ignored,
            on_failed=self.failed,
            on_exception=self.exception,
        )


def console_hooks(console: Console | None = None) -> Hooks:
    """Default print-oriented hooks."""
    return ConsoleReporter(console).hooks()

# 🔼⚙️
