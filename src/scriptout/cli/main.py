# topmark:header:start
#
#   project      : ScriptOutput
#   file         : main.py
#   file_relpath : src/scriptout/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 ScriptOutput contributors
#
# topmark:header:end

"""ScriptOutput command line entry point.

Key ideas:
- Group-level options (verbosity, color) are resolved once and stored in
  ``ctx.obj`` together with the console and the detected environment.
- Subcommands share the destination options and error translation from
  `scriptout.cli.cmd_common`.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click

from scriptout.cli.commands.line import line_command
from scriptout.cli.commands.listing import list_command
from scriptout.cli.commands.table import table_command
from scriptout.cli.commands.version import version_command
from scriptout.cli.console import ClickConsole
from scriptout.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from scriptout.config.environment import Environment
from scriptout.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from scriptout.cli.console import ConsoleLike

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (logging, color, console, environment) on the context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    # Explicit flags win over SCRIPTOUT_LOG_LEVEL; warnings are shown by default
    level = resolve_verbosity(verbose, quiet)
    if level is None:
        level = resolve_env_log_level() or logging.WARNING
    ctx.obj["log_level"] = level
    setup_logging(level=level)

    if no_color:
        effective_color_mode = ColorMode.NEVER
    else:
        effective_color_mode = ColorMode(color_mode) if color_mode else ColorMode.AUTO
    enable_color = resolve_color_mode(cli_mode=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color
    ctx.obj["console"] = ClickConsole(enable_color=enable_color)

    # Relative --file paths resolve against the directory the user runs from
    ctx.obj.setdefault("environment", Environment.detect(base_dir=Path.cwd()))


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="ScriptOutput CLI: render tables, lists and lines as plaintext or HTML.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the ScriptOutput CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'scriptout table DATA.json' to render a table.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(table_command)

cli.add_command(list_command)

cli.add_command(line_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
