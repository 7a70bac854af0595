# topmark:header:start
#
#   project      : ScriptOutput
#   file         : table.py
#   file_relpath : src/scriptout/cli/commands/table.py
#   license      : MIT
#   copyright    : (c) 2025 ScriptOutput contributors
#
# topmark:header:end

"""ScriptOutput `table` command.

Renders a JSON document as a table. The document is either an object (member
names become row labels) or an array (indexes become row labels); each row is
an object of column values or a scalar.
"""

from __future__ import annotations

from typing import IO

import click

from scriptout.cli.cli_types import EnumChoiceParam, HeaderMode
from scriptout.cli.cmd_common import TargetCliOptions, load_json_document, open_output
from scriptout.cli.options import common_target_options


@click.command(
    name="table",
    help="Render a JSON document (file or '-' for stdin) as a table.",
)
@click.argument("data", type=click.File("r", encoding="utf-8"), default="-")
@click.option(
    "--headers",
    "headers",
    type=EnumChoiceParam(HeaderMode),
    default=HeaderMode.NONE.value,
    show_default=True,
    help=f"Headers to print ({', '.join(m.value for m in HeaderMode)}).",
)
@common_target_options
@click.pass_context
def table_command(
    ctx: click.Context,
    data: IO[str],
    headers: HeaderMode,
    **target_options: object,
) -> None:
    """Render a JSON document as a table.

    Args:
        ctx (click.Context): Current Click context.
        data (IO[str]): The JSON input stream.
        headers (HeaderMode): Which table headers to print.
        **target_options (object): Destination options (see `common_target_options`).
    """
    document = load_json_document(data)
    with open_output(ctx, TargetCliOptions(**target_options)) as output:  # type: ignore[arg-type]
        output.table(document, headers.flag)
