#
# tests/unit/test_config.py
#
"""Tests for configuration models and loading."""

from pathlib import Path

import pytest

from treerun.classify import DEFAULT_IGNORE_SIGNALS
from treerun.config import GlobalConfig, RunnerConfig, TreerunConfig, load_config
from treerun.exceptions import ConfigurationError
from treerun.outcome import Failed, Ignored
from treerun.strategies import ParallelStrategy, SequentialStrategy


class CustomFailure(Exception):
    pass


def write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "treerun.toml"
    path.write_text(text)
    return path


class TestModels:
    def test_defaults(self) -> None:
        config = TreerunConfig()
        assert config.runner.strategy == "sequential"
        assert config.runner.max_workers is None
        assert config.runner.ignore_signals == DEFAULT_IGNORE_SIGNALS
        assert config.global_config.log_level == "WARNING"

    @pytest.mark.parametrize("kwargs", [{"strategy": "random"}, {"max_workers": 0}, {"max_workers": True}])
    def test_invalid_runner_values(self, kwargs) -> None:
        with pytest.raises(ValueError):
            RunnerConfig(**kwargs)

    def test_invalid_signal_name(self) -> None:
        with pytest.raises(ValueError):
            RunnerConfig(failure_signals=["AssertionError"])

    def test_invalid_log_level(self) -> None:
        with pytest.raises(ValueError):
            GlobalConfig(log_level="LOUD")

    def test_numeric_log_level(self) -> None:
        assert GlobalConfig(log_level="debug").numeric_log_level == 10

    def test_builds_engine_objects(self) -> None:
        runner = RunnerConfig(
            strategy="parallel",
            max_workers=2,
            ignore_signals=[f"{__name__}.CustomFailure"],
            failure_signals=[],
        )
        strategy = runner.build_strategy()
        assert isinstance(strategy, ParallelStrategy)
        assert strategy.max_workers == 2
        assert runner.build_classifier().classify(CustomFailure("x")) == Ignored("x")


class TestLoader:
    def test_no_file_uses_defaults(self) -> None:
        assert load_config(None, environ={}) == TreerunConfig()

    def test_reads_file(self, tmp_path: Path) -> None:
        path = write(
            tmp_path,
            f"""
            [global]
            log_level = "INFO"

            [runner]
            strategy = "parallel"
            max_workers = 3
            failure_signals = ["{__name__}.CustomFailure"]
            """,
        )
        config = load_config(path, environ={})
        assert config.global_config.log_level == "INFO"
        assert config.runner.strategy == "parallel"
        assert config.runner.max_workers == 3
        assert config.runner.build_classifier().classify(CustomFailure("c")) == Failed("c")

    def test_environment_overrides_file(self, tmp_path: Path) -> None:
        path = write(tmp_path, '[runner]\nstrategy = "parallel"\n')
        config = load_config(
            path,
            environ={"TREERUN_STRATEGY": "sequential", "TREERUN_MAX_WORKERS": "5", "TREERUN_LOG_LEVEL": "ERROR"},
        )
        assert isinstance(config.runner.build_strategy(), SequentialStrategy)
        assert config.runner.max_workers == 5
        assert config.global_config.log_level == "ERROR"

    @pytest.mark.parametrize(
        "text",
        [
            '[runner\nstrategy = "x"',
            '[runner]\nstrategy = "random"\n',
            '[runner]\nunknown_key = 1\n',
            '[extra]\nvalue = 1\n',
            'runner = 5\n',
        ],
    )
    def test_invalid_files(self, tmp_path: Path, text: str) -> None:
        with pytest.raises(ConfigurationError):
            load_config(write(tmp_path, text), environ={})

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError, match="not found"):
            load_config(tmp_path / "missing.toml", environ={})

    def test_bad_worker_env(self) -> None:
        with pytest.raises(ConfigurationError, match="MAX_WORKERS"):
            load_config(None, environ={"TREERUN_MAX_WORKERS": "many"})
