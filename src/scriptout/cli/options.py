# topmark:header:start
#
#   project      : ScriptOutput
#   file         : options.py
#   file_relpath : src/scriptout/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 ScriptOutput contributors
#
# topmark:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, color, output targets)
and their resolution logic, so commands and the group can stay thin.
"""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from typing import Callable, ParamSpec, TypeVar

import click

from scriptout.cli.errors import ScriptOutputUsageError
from scriptout.config.logging import TRACE_LEVEL, get_logger
from scriptout.core.formats import OutputFormat

P = ParamSpec("P")
R = TypeVar("R")

logger = get_logger(__name__)


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int | None:
    """Resolve the logging level from the ``-v``/``-q`` counts.

    Args:
        verbose_count: Number of times ``-v`` was passed.
        quiet_count: Number of times ``-q`` was passed.

    Returns:
        The logging level, or None when neither flag was given.

    Raises:
        ScriptOutputUsageError: If both flags are used together.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise ScriptOutputUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:  # -vvv
        return TRACE_LEVEL
    if verbose_count == 2:  # -vv
        return logging.DEBUG
    if verbose_count == 1:  # -v
        return logging.INFO
    if quiet_count >= 1:  # -q
        return logging.ERROR
    return None


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-v/--verbose`` and ``-q/--quiet`` (counted, mutually exclusive)."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase log verbosity (repeat up to three times).",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only log errors.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Honors ``--color``/``--no-color``, then ``FORCE_COLOR`` and ``NO_COLOR``, and
    defaults to color when stdout is a TTY.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        stdout_isatty = sys.stdout.isatty()
    return bool(stdout_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` and ``--no-color``."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_target_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the output destination options shared by the rendering commands.

    Adds ``--format``, ``--file``, ``--title``, ``--wrap``, ``--config`` and
    ``--header``.
    """
    f = click.option(
        "--format",
        "-f",
        "output_format",
        default=None,
        metavar="NAME",
        help=(
            "Output format: "
            f"{', '.join(m.value for m in OutputFormat)} or a registered custom format "
            "(default: plaintext)."
        ),
    )(f)
    f = click.option(
        "--file",
        "-o",
        "output_file",
        default=None,
        type=click.Path(dir_okay=False, writable=True),
        help="Write to this file (truncated) instead of stdout.",
    )(f)
    f = click.option("--title", default=None, help="Title printed before the output.")(f)
    f = click.option(
        "--wrap",
        "wrap",
        type=click.IntRange(min=0),
        default=None,
        help="Wrap plaintext output at this width (minimum 16; 0 disables wrapping).",
    )(f)
    f = click.option(
        "--config",
        "config_path",
        default=None,
        type=click.Path(exists=True, dir_okay=False, readable=True),
        help="TOML file with [[targets]] tables; replaces the single-target options.",
    )(f)
    f = click.option(
        "--header",
        "heading",
        default=None,
        help="Heading printed before the content.",
    )(f)
    return f
