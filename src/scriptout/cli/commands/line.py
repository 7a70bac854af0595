# topmark:header:start
#
#   project      : ScriptOutput
#   file         : line.py
#   file_relpath : src/scriptout/cli/commands/line.py
#   license      : MIT
#   copyright    : (c) 2025 ScriptOutput contributors
#
# topmark:header:end

"""ScriptOutput `line` command.

Prints each argument as a line; without arguments, each line read from stdin.
"""

from __future__ import annotations

import click

from scriptout.cli.cmd_common import TargetCliOptions, open_output
from scriptout.cli.options import common_target_options


@click.command(
    name="line",
    help="Print each TEXT argument (or each stdin line) as an output line.",
)
@click.argument("text", nargs=-1)
@common_target_options
@click.pass_context
def line_command(
    ctx: click.Context,
    text: tuple[str, ...],
    **target_options: object,
) -> None:
    """Print text lines through the configured destinations."""
    lines: list[str] = list(text)
    if not lines:
        stdin = click.get_text_stream("stdin")
        lines = [raw.rstrip("\r\n") for raw in stdin]
    with open_output(ctx, TargetCliOptions(**target_options)) as output:  # type: ignore[arg-type]
        for entry in lines:
            output.line(entry)
