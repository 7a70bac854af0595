# topmark:header:start
#
#   project      : ScriptOutput
#   file         : version.py
#   file_relpath : src/scriptout/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 ScriptOutput contributors
#
# topmark:header:end

"""ScriptOutput `version` command."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from scriptout.constants import SCRIPTOUT_VERSION

if TYPE_CHECKING:
    from scriptout.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of ScriptOutput.",
)
def version_command() -> None:
    """Print the installed ScriptOutput version."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    console.print(console.styled(SCRIPTOUT_VERSION, bold=True))
