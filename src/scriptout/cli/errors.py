# topmark:header:start
#
#   project      : ScriptOutput
#   file         : errors.py
#   file_relpath : src/scriptout/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 ScriptOutput contributors
#
# topmark:header:end

"""Exceptions for the ScriptOutput CLI.

Usage:
    Commands translate library errors (`scriptout.errors`) into these Click
    exceptions so that each failure class maps onto its own exit code.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no
    console is present in the Click context, they fall back to Click's default
    styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from scriptout.cli.exit_codes import ExitCode
from scriptout.errors import LayoutError, OutputConfigError, ScriptOutputError


class ScriptOutputCliError(click.ClickException):
    """Base class for all ScriptOutput CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorized later by `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class ScriptOutputUsageError(ScriptOutputCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class ScriptOutputInputError(ScriptOutputCliError):
    """Error for input documents that cannot be parsed."""

    exit_code = ExitCode.INPUT_ERROR


class ScriptOutputLayoutError(ScriptOutputCliError):
    """Error for tables that do not fit the wrap width."""

    exit_code = ExitCode.LAYOUT_ERROR


class ScriptOutputIOError(ScriptOutputCliError):
    """Error for I/O failures while reading input or writing output."""

    exit_code = ExitCode.IO_ERROR


class ScriptOutputConfigError(ScriptOutputCliError):
    """Error for destination configuration problems."""

    exit_code = ExitCode.CONFIG_ERROR


class ScriptOutputUnexpectedError(ScriptOutputCliError):
    """Error for unhandled/unknown errors (last resort)."""

    exit_code = ExitCode.UNEXPECTED_ERROR


def to_cli_error(exc: ScriptOutputError | OSError) -> ScriptOutputCliError:
    """Translate a library or I/O error into the matching CLI error."""
    if isinstance(exc, OutputConfigError):
        return ScriptOutputConfigError(str(exc))
    if isinstance(exc, LayoutError):
        return ScriptOutputLayoutError(str(exc))
    if isinstance(exc, OSError):
        return ScriptOutputIOError(str(exc))
    return ScriptOutputUnexpectedError(str(exc))
