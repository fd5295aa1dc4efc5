#
# src/treerun/runner.py
#
"""
Composes flattening, evaluation, and aggregation into a single run that
prints a summary and yields a process exit code.
"""

import structlog
from rich.console import Console

from treerun.classify import OutcomeClassifier
from treerun.counts import aggregate
from treerun.evaluator import evaluate
from treerun.hooks import Hooks, console_hooks
from treerun.strategies import ExecutionStrategy, ParallelStrategy, SequentialStrategy
from treerun.tree import Test

log = structlog.get_logger("engine.runner")


def run_eval(
    tree: Test,
    strategy: ExecutionStrategy,
    hooks: Hooks | None = None,
    classifier: OutcomeClassifier | None = None,
    console: Console | None = None,
) -> int:
    """
    Runs ``tree``, prints the summary line, and returns the exit code.

    Test outcomes never raise; they are reported through the summary and the
    exit code. When ``hooks`` is omitted, per-test lines go to ``console``.
    """
    console = console or Console(highlight=False)
    if hooks is None:
        hooks = console_hooks(console)

    records = evaluate(tree, hooks, strategy, classifier)
    counts = aggregate(records)
    console.print(str(counts), end="", markup=False, highlight=False, emoji=False, soft_wrap=True)

    log.info(
        "Test run complete",
        passed=counts.passed,
        ignored=counts.ignored,
        failed=counts.failed,
        errored=counts.errored,
        exit_code=counts.exit_code,
    )
    return counts.exit_code


def run(tree: Test, console: Console | None = None) -> int:
    """Runs ``tree`` sequentially with console reporting."""
    return run_eval(tree, SequentialStrategy(), console=console)


def run_parallel(tree: Test, console: Console | None = None, max_workers: int | None = None) -> int:
    """Runs ``tree`` on a worker pool with synchronised console reporting."""
    return run_eval(tree, ParallelStrategy(max_workers=max_workers), console=console)

# 🔼⚙️
