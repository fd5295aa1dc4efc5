#
# src/treerun/evaluator.py
#
"""
Evaluates test bodies and turns their termination into run records.
"""

import time
from datetime import timedelta
from typing import TYPE_CHECKING

import structlog

from treerun.classify import DEFAULT_CLASSIFIER, OutcomeClassifier
from treerun.exceptions import ClassificationError
from treerun.hooks import Hooks
from treerun.outcome import Errored, Failed, Ignored, Outcome, Passed, RunRecord
from treerun.tree import Test, TestBody, flatten

if TYPE_CHECKING:
    from treerun.strategies import ExecutionStrategy

log = structlog.get_logger("engine.evaluator")


def _classify(name: str, signal: BaseException, classifier: OutcomeClassifier) -> Outcome:
    try:
        outcome = classifier.classify(signal)
    except Exception as e:
        log.error("Outcome classifier raised", test=name, error=str(e))
        raise ClassificationError(name, signal, e) from e
    if not isinstance(outcome, Passed | Ignored | Failed | Errored):
        raise ClassificationError(name, signal, TypeError(f"classifier returned {outcome!r}"))
    return outcome


def evaluate_one(
    name: str,
    body: TestBody,
    hooks: Hooks,
    classifier: OutcomeClassifier = DEFAULT_CLASSIFIER,
) -> RunRecord:
    """
    Runs one test body and reports it through exactly one outcome hook.

    Any exception raised by the body is contained and classified; only
    ``KeyboardInterrupt`` and engine defects propagate. The elapsed time covers
    the body alone.
    """
    hooks.before_run(name)
    signal: BaseException | None = None
    start = time.perf_counter()
    try:
        body()
    except KeyboardInterrupt:
        raise
    except BaseException as e:
        signal = e
    elapsed = timedelta(seconds=time.perf_counter() - start)

    outcome: Outcome = Passed() if signal is None else _classify(name, signal, classifier)
    log.debug("Test finished", test=name, outcome=outcome.kind.value, elapsed=elapsed.total_seconds())

    match outcome:
        case Passed():
            hooks.on_passed(name, elapsed)
        case Ignored(reason=reason):
            hooks.on_ignored(name, reason)
        case Failed(message=message):
            hooks.on_failed(name, message, elapsed)
        case Errored(cause=cause):
            hooks.on_exception(name, cause, elapsed)

    return RunRecord(name=name, outcome=outcome, elapsed=elapsed)


def evaluate(
    tree: Test,
    hooks: Hooks,
    strategy: "ExecutionStrategy",
    classifier: OutcomeClassifier | None = None,
) -> list[RunRecord]:
    """Flattens ``tree`` and evaluates every case with ``strategy``."""
    tests = flatten(tree)
    log.info("Evaluating test tree", tests=len(tests), strategy=type(strategy).__name__)
    return strategy.execute(tests, hooks, classifier or DEFAULT_CLASSIFIER)

# 🔼⚙️
