#
# src/treerun/classify.py
#
"""
Outcome classification policy.

The engine never hardcodes an assertion library. Instead a classifier maps
the exception that ended a test body to an outcome. The default
`SignalClassifier` matches the exception type against two configurable sets
of signal identifiers.
"""

import importlib
from collections.abc import Iterable
from functools import lru_cache
from typing import Protocol, TypeAlias, runtime_checkable

import structlog
from attrs import define, field

from treerun.outcome import Errored, Failed, Ignored, Outcome

log = structlog.get_logger("engine.classify")

SignalId: TypeAlias = type[BaseException] | str

DEFAULT_IGNORE_SIGNALS: tuple[str, ...] = (
    "treerun.exceptions.IgnoreTest",
    "unittest.case.SkipTest",
    "_pytest.outcomes.Skipped",
)
DEFAULT_FAILURE_SIGNALS: tuple[str, ...] = (
    "builtins.AssertionError",
    "_pytest.outcomes.Failed",
)


def qualified_name(cls: type) -> str:
    """Dotted ``module.QualName`` identifier of a class."""
    return f"{cls.__module__}.{cls.__qualname__}"


@lru_cache(maxsize=None)
def resolve_signal(name: str) -> type[BaseException] | None:
    """
    Imports the exception class named by a dotted identifier.

    Returns None when no importable module prefix leads to an exception class,
    in which case the identifier is only compared by name.
    """
    parts = name.split(".")
    for split in range(len(parts) - 1, 0, -1):
        try:
            target = importlib.import_module(".".join(parts[:split]))
        except ImportError:
            continue
        for attr in parts[split:]:
            target = getattr(target, attr, None)
        if isinstance(target, type) and issubclass(target, BaseException):
            return target
        return None
    return None


def _normalize(signals: Iterable[SignalId]) -> tuple[str, ...]:
    names = []
    for signal in signals:
        if isinstance(signal, str):
            names.append(signal)
        elif isinstance(signal, type) and issubclass(signal, BaseException):
            names.append(qualified_name(signal))
        else:
            raise TypeError(f"Signal identifiers must be exception classes or dotted names, got {signal!r}")
    return tuple(names)


@runtime_checkable
class OutcomeClassifier(Protocol):
    """Maps the exception raised by a test body to an outcome."""

    def classify(self, signal: BaseException) -> Outcome:
        ...


@define(frozen=True, slots=True)
class SignalClassifier:
    """
    Classifies by exception type.

    A signal matches a set when it is an instance of a class named in that
    set, so subclasses of a listed exception match too. Identifiers whose
    module cannot be imported match any class in the signal's MRO with the
    same qualified name. Classes that override ``__module__``, such as
    pytest's outcome exceptions, are found through their import path.

    The ignore set is consulted before the failure set; anything else is an
    unexpected error.
    """

    ignore_signals: tuple[str, ...] = field(default=DEFAULT_IGNORE_SIGNALS, converter=_normalize)
    failure_signals: tuple[str, ...] = field(default=DEFAULT_FAILURE_SIGNALS, converter=_normalize)

    @staticmethod
    def _matches(signal: BaseException, names: tuple[str, ...]) -> bool:
        for name in names:
            cls = resolve_signal(name)
            if cls is not None and isinstance(signal, cls):
                return True
        mro_names = {qualified_name(cls) for cls in type(signal).__mro__}
        return any(name in mro_names for name in names)

    def classify(self, signal: BaseException) -> Outcome:
        if self._matches(signal, self.ignore_signals):
            return Ignored(str(signal))
        if self._matches(signal, self.failure_signals):
            return Failed(str(signal))
        log.debug("Unrecognised signal type", signal_type=qualified_name(type(signal)))
        return Errored(signal)


DEFAULT_CLASSIFIER = SignalClassifier()

# 🔼⚙️
