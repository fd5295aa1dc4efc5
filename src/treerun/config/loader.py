#
# config/loader.py
#
"""
Loads treerun configuration from a TOML file and the environment.
"""

import os
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import attrs
import structlog

from treerun.config.models import GlobalConfig, RunnerConfig, TreerunConfig
from treerun.exceptions import ConfigurationError

log = structlog.get_logger("config.loader")

ENV_PREFIX = "TREERUN_"


def _section(data: Mapping[str, Any], name: str) -> dict[str, Any]:
    section = data.get(name, {})
    if not isinstance(section, Mapping):
        raise ConfigurationError(f"Section '[{name}]' must be a table, got {type(section).__name__}")
    return dict(section)


def _build(cls: type, values: dict[str, Any], section: str) -> Any:
    known = {a.name for a in attrs.fields(cls)}
    unknown = sorted(set(values) - known)
    if unknown:
        raise ConfigurationError(f"Unknown key(s) in '[{section}]': {', '.join(unknown)}")
    try:
        return cls(**values)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid value in '[{section}]': {e}") from e


def _env_overrides(environ: Mapping[str, str]) -> tuple[dict[str, Any], dict[str, Any]]:
    runner: dict[str, Any] = {}
    global_: dict[str, Any] = {}
    if strategy := environ.get(f"{ENV_PREFIX}STRATEGY"):
        runner["strategy"] = strategy
    if workers := environ.get(f"{ENV_PREFIX}MAX_WORKERS"):
        try:
            runner["max_workers"] = int(workers)
        except ValueError as e:
            raise ConfigurationError(f"{ENV_PREFIX}MAX_WORKERS must be an integer, got '{workers}'") from e
    if level := environ.get(f"{ENV_PREFIX}LOG_LEVEL"):
        global_["log_level"] = level
    return runner, global_


def load_config(
    config_path: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> TreerunConfig:
    """
    Loads configuration with precedence: environment > file > defaults.

    Args:
        config_path: Optional TOML file with ``[global]`` and ``[runner]`` tables.
        environ: Environment mapping; defaults to ``os.environ``.

    Raises:
        ConfigurationError: If the file is missing, unreadable, or invalid.
    """
    environ = os.environ if environ is None else environ
    data: dict[str, Any] = {}

    if config_path is not None:
        config_path = Path(config_path)
        log.debug("Loading configuration file", path=str(config_path))
        try:
            with config_path.open("rb") as f:
                data = tomllib.load(f)
        except FileNotFoundError as e:
            raise ConfigurationError(f"Configuration file not found: '{config_path}'") from e
        except tomllib.TOMLDecodeError as e:
            raise ConfigurationError(f"Invalid TOML in '{config_path}': {e}") from e
        except OSError as e:
            raise ConfigurationError(f"Cannot read configuration file '{config_path}': {e}") from e

    unknown = sorted(set(data) - {"global", "runner"})
    if unknown:
        raise ConfigurationError(f"Unknown section(s): {', '.join(unknown)}")

    runner_values = _section(data, "runner")
    global_values = _section(data, "global")
    runner_env, global_env = _env_overrides(environ)
    runner_values.update(runner_env)
    global_values.update(global_env)

    config = TreerunConfig(
        runner=_build(RunnerConfig, runner_values, "runner"),
        global_config=_build(GlobalConfig, global_values, "global"),
    )
    log.debug("Configuration loaded", strategy=config.runner.strategy, max_workers=config.runner.max_workers)
    return config

# 🔼⚙️
