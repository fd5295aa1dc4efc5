# src/treerun/cli/main.py

"""
The ``treerun`` command.

Subcommands share the logging options declared on the group; each of them
may override the level again once its configuration file has been read.
"""

import click
import structlog

from treerun import __version__
from treerun.cli.config_cmds import config_cli
from treerun.cli.run_cmds import list_cli, run_cli
from treerun.cli.utils import logging_options, setup_logging_from_context
from treerun.telemetry import StructLogger

log: StructLogger = structlog.get_logger("cli.main")

COMMANDS = (run_cli, list_cli, config_cli)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, "-V", "--version", prog_name="treerun")
@logging_options
@click.pass_context
def cli(ctx: click.Context, log_level: str | None, log_file: str | None, json_logs: bool | None):
    """
    Run hierarchical test trees from modules or files.

    Exit codes: 0 when nothing failed, bit 0 set for failures, bit 1 set for
    unexpected errors, 4 when the tests could not be loaded or run at all.
    """
    ctx.ensure_object(dict).update(
        LOG_LEVEL=log_level,
        LOG_FILE=log_file,
        JSON_LOGS=bool(json_logs),
    )
    setup_logging_from_context(ctx)
    log.debug("treerun starting", version=__version__, command=ctx.invoked_subcommand)


for _command in COMMANDS:
    cli.add_command(_command)


def main() -> None:
    """Console-script entry point."""
    cli(prog_name="treerun")


if __name__ == "__main__":
    main()

# 🖥️⚙️
