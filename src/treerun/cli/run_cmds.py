# src/treerun/cli/run_cmds.py

from pathlib import Path

import attrs
import click
import structlog
from rich.console import Console

from treerun.cli.config_cmds import config_path_option
from treerun.cli.utils import apply_config_log_level, logging_options, setup_logging_from_context
from treerun.config import load_config
from treerun.discovery import load_target
from treerun.exceptions import ConfigurationError, DiscoveryError, EngineError
from treerun.runner import run_eval
from treerun.telemetry import StructLogger
from treerun.tree import flatten

log: StructLogger = structlog.get_logger("cli.run")

# Exit code used when the engine itself cannot run, outside the 0-3 outcome range.
EXIT_USAGE = 4


def _load_tree(ctx: click.Context, target: str):
    try:
        return load_target(target)
    except DiscoveryError as e:
        log.error("Test discovery failed", target=target, error=str(e))
        click.echo(f"Error: {e}", err=True)
        ctx.exit(EXIT_USAGE)


@click.command(name="run")
@click.argument("target")
@click.option(
    "--parallel/--sequential",
    "parallel",
    default=None,
    help="Run tests on a worker pool instead of one after another.",
)
@click.option(
    "-w",
    "--workers",
    type=click.IntRange(min=1),
    default=None,
    help="Maximum number of parallel workers (default: CPU count).",
)
@config_path_option
@logging_options
@click.pass_context
def run_cli(
    ctx: click.Context,
    target: str,
    parallel: bool | None,
    workers: int | None,
    config_path: Path | None,
    **kwargs,
):
    """Run the tests in TARGET (a dotted module name or a .py file)."""
    setup_logging_from_context(
        ctx,
        local_log_level=kwargs.get("log_level"),
        local_log_file=kwargs.get("log_file"),
        local_json_logs=kwargs.get("json_logs"),
    )

    try:
        config = load_config(config_path)
    except ConfigurationError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(EXIT_USAGE)
    apply_config_log_level(
        ctx,
        config,
        local_log_level=kwargs.get("log_level"),
        local_log_file=kwargs.get("log_file"),
        local_json_logs=kwargs.get("json_logs"),
    )

    runner_config = config.runner
    if parallel is not None:
        runner_config = attrs.evolve(runner_config, strategy="parallel" if parallel else "sequential")
    if workers is not None:
        runner_config = attrs.evolve(runner_config, max_workers=workers)
    log.info(
        "Executing 'run' command",
        target=target,
        strategy=runner_config.strategy,
        workers=runner_config.max_workers,
    )

    tree = _load_tree(ctx, target)
    console = Console(highlight=False)
    try:
        code = run_eval(
            tree,
            runner_config.build_strategy(),
            classifier=runner_config.build_classifier(),
            console=console,
        )
    except EngineError as e:
        log.critical("Engine failure during test run", error=str(e), exc_info=True)
        click.echo(f"Error: {e}", err=True)
        ctx.exit(EXIT_USAGE)
    ctx.exit(code)


@click.command(name="list")
@click.argument("target")
@logging_options
@click.pass_context
def list_cli(ctx: click.Context, target: str, **kwargs):
    """List the qualified names of the tests in TARGET."""
    setup_logging_from_context(
        ctx,
        local_log_level=kwargs.get("log_level"),
        local_log_file=kwargs.get("log_file"),
        local_json_logs=kwargs.get("json_logs"),
    )
    tree = _load_tree(ctx, target)
    for name, _ in flatten(tree):
        click.echo(name)

# 🔼⚙️
