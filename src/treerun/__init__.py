#
# src/treerun/__init__.py
#
"""
treerun: build hierarchical test trees and run them sequentially or in parallel.
"""

from importlib.metadata import PackageNotFoundError, version

from treerun.classify import (
    DEFAULT_FAILURE_SIGNALS,
    DEFAULT_IGNORE_SIGNALS,
    OutcomeClassifier,
    SignalClassifier,
)
from treerun.counts import Counts, aggregate, combine, exit_code, format_elapsed
from treerun.evaluator import evaluate, evaluate_one
from treerun.exceptions import (
    ClassificationError,
    ConfigurationError,
    DiscoveryError,
    EngineError,
    IgnoreTest,
    TreerunError,
    skip,
)
from treerun.hooks import NO_HOOKS, ConsoleReporter, Hooks, console_hooks
from treerun.outcome import Errored, Failed, Ignored, Outcome, OutcomeKind, Passed, RunRecord
from treerun.runner import run, run_eval, run_parallel
from treerun.strategies import ExecutionStrategy, ParallelStrategy, SequentialStrategy, get_strategy
from treerun.tree import Case, Labeled, Test, TestList, case, flatten, labeled, test_list, testcase, testlist

try:
    __version__ = version("treerun")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

__all__ = [
    "__version__",
    "DEFAULT_FAILURE_SIGNALS",
    "DEFAULT_IGNORE_SIGNALS",
    "NO_HOOKS",
    "Case",
    "ClassificationError",
    "ConfigurationError",
    "ConsoleReporter",
    "Counts",
    "DiscoveryError",
    "EngineError",
    "Errored",
    "ExecutionStrategy",
    "Failed",
    "Hooks",
    "IgnoreTest",
    "Ignored",
    "Labeled",
    "Outcome",
    "OutcomeClassifier",
    "OutcomeKind",
    "ParallelStrategy",
    "Passed",
    "RunRecord",
    "SequentialStrategy",
    "SignalClassifier",
    "Test",
    "TestList",
    "TreerunError",
    "aggregate",
    "case",
    "combine",
    "console_hooks",
    "evaluate",
    "evaluate_one",
    "exit_code",
    "flatten",
    "format_elapsed",
    "get_strategy",
    "labeled",
    "run",
    "run_eval",
    "run_parallel",
    "skip",
    "test_list",
    "testcase",
    "testlist",
]

# 🔼⚙️
