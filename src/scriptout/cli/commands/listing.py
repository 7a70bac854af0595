# topmark:header:start
#
#   project      : ScriptOutput
#   file         : listing.py
#   file_relpath : src/scriptout/cli/commands/listing.py
#   license      : MIT
#   copyright    : (c) 2025 ScriptOutput contributors
#
# topmark:header:end

"""ScriptOutput `list` command.

Renders a JSON document as an indented outline.
"""

from __future__ import annotations

from typing import IO

import click

from scriptout.cli.cmd_common import TargetCliOptions, load_json_document, open_output
from scriptout.cli.options import common_target_options
from scriptout.constants import DEFAULT_LIST_DEPTH


@click.command(
    name="list",
    help="Render a JSON document (file or '-' for stdin) as a nested list.",
)
@click.argument("data", type=click.File("r", encoding="utf-8"), default="-")
@click.option(
    "--depth",
    type=click.IntRange(min=0),
    default=DEFAULT_LIST_DEPTH,
    show_default=True,
    help="Maximum nesting depth to expand (0 shows only the top level).",
)
@common_target_options
@click.pass_context
def list_command(
    ctx: click.Context,
    data: IO[str],
    depth: int,
    **target_options: object,
) -> None:
    """Render a JSON document as a nested list."""
    document = load_json_document(data)
    with open_output(ctx, TargetCliOptions(**target_options)) as output:  # type: ignore[arg-type]
        output.list(document, depth)
