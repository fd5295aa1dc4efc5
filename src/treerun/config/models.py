#
# config/models.py
#
"""
Attrs-based data models for treerun configuration structure.
"""

import logging
from typing import Any

from attrs import define, field

from treerun.classify import DEFAULT_FAILURE_SIGNALS, DEFAULT_IGNORE_SIGNALS, SignalClassifier
from treerun.strategies import STRATEGY_MAP, ExecutionStrategy, get_strategy


# --- Validators ---
def _validate_log_level(inst: Any, attr: Any, value: str) -> None:
    """Validator for standard logging level names."""
    valid = logging.getLevelNamesMapping().keys()
    if value.upper() not in valid:
        raise ValueError(f"Invalid log_level '{value}'. Must be one of {list(valid)}.")


def _validate_strategy(inst: Any, attr: Any, value: str) -> None:
    if value.lower() not in STRATEGY_MAP:
        raise ValueError(f"Invalid strategy '{value}'. Must be one of {list(STRATEGY_MAP)}.")


def _validate_optional_positive_int(inst: Any, attr: Any, value: int | None) -> None:
    """Validator ensures integer is positive when set."""
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValueError(f"Field '{attr.name}' must be positive integer, got {value}")


def _validate_signal_names(inst: Any, attr: Any, value: tuple[str, ...]) -> None:
    for name in value:
        if not isinstance(name, str) or "." not in name:
            raise ValueError(f"Field '{attr.name}' entries must be dotted class names, got {name!r}")


@define(frozen=True, slots=True)
class RunnerConfig:
    """How a test tree is executed and classified."""

    strategy: str = field(default="sequential", validator=_validate_strategy)
    max_workers: int | None = field(default=None, validator=_validate_optional_positive_int)
    ignore_signals: tuple[str, ...] = field(
        default=DEFAULT_IGNORE_SIGNALS, converter=tuple, validator=_validate_signal_names
    )
    failure_signals: tuple[str, ...] = field(
        default=DEFAULT_FAILURE_SIGNALS, converter=tuple, validator=_validate_signal_names
    )

    def build_classifier(self) -> SignalClassifier:
        return SignalClassifier(ignore_signals=self.ignore_signals, failure_signals=self.failure_signals)

    def build_strategy(self) -> ExecutionStrategy:
        return get_strategy(self.strategy, max_workers=self.max_workers)


@define(frozen=True, slots=True)
class GlobalConfig:
    """Global default settings for treerun."""

    log_level: str = field(default="WARNING", validator=_validate_log_level)

    @property
    def numeric_log_level(self) -> int:
        return logging.getLevelNamesMapping()[self.log_level.upper()]


@define(frozen=True, slots=True)
class TreerunConfig:
    """Root configuration object for treerun."""

    runner: RunnerConfig = field(factory=RunnerConfig)
    global_config: GlobalConfig = field(factory=GlobalConfig, metadata={"toml_name": "global"})

# 🔼⚙️
