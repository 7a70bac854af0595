# topmark:header:start
#
#   project      : ScriptOutput
#   file         : cmd_common.py
#   file_relpath : src/scriptout/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 ScriptOutput contributors
#
# topmark:header:end

"""Common command utilities for Click-based commands.

Plumbing shared by the rendering commands: building the `ScriptOutput` from the
destination options, reading the JSON input document, and translating library
errors into CLI errors with their exit codes.
"""

from __future__ import annotations

import json
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import IO, TYPE_CHECKING, Any

import click

from scriptout.cli.errors import ScriptOutputInputError, to_cli_error
from scriptout.config.environment import Environment
from scriptout.config.io import load_target_configs
from scriptout.config.logging import get_logger
from scriptout.errors import ScriptOutputError
from scriptout.output import ScriptOutput

if TYPE_CHECKING:
    from collections.abc import Iterator

    from scriptout.config.model import TargetOptions

logger = get_logger(__name__)


@dataclass(frozen=True)
class TargetCliOptions:
    """Destination options collected from the command line."""

    output_format: str | None = None
    output_file: str | None = None
    title: str | None = None
    wrap: int | None = None
    config_path: str | None = None
    heading: str | None = None

    def target_options(self) -> list[TargetOptions]:
        """Return the destination options for `ScriptOutput`.

        A ``--config`` file replaces the single-target options; an empty
        ``[[targets]]`` list falls back to one default destination.

        Raises:
            OutputConfigError: If the configuration file is unreadable or malformed.
        """
        if self.config_path is not None:
            return list(load_target_configs(Path(self.config_path)))
        options: dict[str, Any] = {
            "format": self.output_format,
            "file": self.output_file,
            "title": self.title,
            "wrap": False if self.wrap == 0 else self.wrap,
        }
        return [{k: v for k, v in options.items() if v is not None}]


def get_environment(ctx: click.Context) -> Environment:
    """Return the environment detected at startup (detecting it if missing)."""
    ctx.ensure_object(dict)
    env = ctx.obj.get("environment")
    if env is None:
        env = Environment.detect(base_dir=Path.cwd())
        ctx.obj["environment"] = env
    return env


@contextmanager
def open_output(ctx: click.Context, options: TargetCliOptions) -> Iterator[ScriptOutput]:
    """Open a `ScriptOutput` for the command and close it on exit.

    Library and I/O errors raised while opening or rendering are translated
    into CLI errors (and thus exit codes).

    Yields:
        ScriptOutput: The dispatcher, with the optional heading already printed.
    """
    try:
        output = ScriptOutput(options.target_options(), environment=get_environment(ctx))
    except (ScriptOutputError, OSError) as e:
        raise to_cli_error(e) from e

    try:
        with output:
            if options.heading:
                output.header(options.heading)
            yield output
    except (ScriptOutputError, OSError) as e:
        logger.debug("Rendering failed: %s", e)
        raise to_cli_error(e) from e


def load_json_document(stream: IO[str]) -> Any:
    """Parse the JSON input document.

    Raises:
        ScriptOutputInputError: If the input is not valid JSON.
    """
    name = getattr(stream, "name", "<input>")
    try:
        return json.load(stream)
    except json.JSONDecodeError as e:
        raise ScriptOutputInputError(f"Invalid JSON in {name}: {e}") from e
