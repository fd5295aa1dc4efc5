#
# src/treerun/strategies.py
#
"""
Execution strategies: how a flattened suite is mapped onto the evaluator.
"""

import os
import threading
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Protocol, runtime_checkable

import structlog

from treerun.classify import OutcomeClassifier
from treerun.evaluator import evaluate_one
from treerun.exceptions import ConfigurationError
from treerun.hooks import Hooks
from treerun.outcome import RunRecord
from treerun.tree import FlatTest

log = structlog.get_logger("engine.strategies")


@runtime_checkable
class ExecutionStrategy(Protocol):
    """Evaluates every flattened test exactly once."""

    def execute(
        self,
        tests: Sequence[FlatTest],
        hooks: Hooks,
        classifier: OutcomeClassifier,
    ) -> list[RunRecord]:
        ...


class SequentialStrategy:
    """Runs tests one after another in tree order; records keep that order."""

    def execute(
        self,
        tests: Sequence[FlatTest],
        hooks: Hooks,
        classifier: OutcomeClassifier,
    ) -> list[RunRecord]:
        return [evaluate_one(name, body, hooks, classifier) for name, body in tests]


class ParallelStrategy:
    """
    Fork-join execution on a thread pool.

    Records come back in completion order. Hooks are serialised through a lock
    owned by this strategy so that reporters sharing an output sink never
    interleave.
    """

    def __init__(self, max_workers: int | None = None):
        if max_workers is not None and max_workers <= 0:
            raise ConfigurationError(f"max_workers must be positive, got {max_workers}")
        self.max_workers = max_workers or os.cpu_count() or 1
        self._lock = threading.RLock()

    def execute(
        self,
        tests: Sequence[FlatTest],
        hooks: Hooks,
        classifier: OutcomeClassifier,
    ) -> list[RunRecord]:
        guarded = hooks.synchronized(self._lock)
        records: list[RunRecord] = []
        log.debug("Starting worker pool", workers=self.max_workers, tests=len(tests))
        with ThreadPoolExecutor(max_workers=self.max_workers, thread_name_prefix="treerun") as pool:
            futures = [pool.submit(evaluate_one, name, body, guarded, classifier) for name, body in tests]
            for future in as_completed(futures):
                records.append(future.result())
        return records


STRATEGY_MAP = {
    "sequential": SequentialStrategy,
    "parallel": ParallelStrategy,
}


def get_strategy(name: str, max_workers: int | None = None) -> ExecutionStrategy:
    """
    Factory function to get an execution strategy by name.
    """
    key = name.lower()
    if key not in STRATEGY_MAP:
        log.error("Unsupported execution strategy specified", strategy=name)
        raise ConfigurationError(
            f"Unsupported execution strategy: '{name}'. "
            f"Available strategies: {list(STRATEGY_MAP.keys())}"
        )
    if key == "parallel":
        return ParallelStrategy(max_workers=max_workers)
    return SequentialStrategy()

# 🔼⚙️
