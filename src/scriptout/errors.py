# topmark:header:start
#
#   project      : ScriptOutput
#   file         : errors.py
#   file_relpath : src/scriptout/errors.py
#   license      : MIT
#   copyright    : (c) 2025 ScriptOutput contributors
#
# topmark:header:end

"""Exceptions raised by the ScriptOutput library.

Usage:
    Configuration problems surface when a `ScriptOutput` (or a single target) is
    constructed; layout problems surface from the `table()` call that triggered
    them. Output written before a layout error is not rolled back.

    Everything else (missing cells, `None` values, non-uniform rows, nesting past
    the depth limit) is substituted or defaulted and never raises.
"""

from __future__ import annotations


class ScriptOutputError(Exception):
    """Base class for all ScriptOutput errors."""


class OutputConfigError(ScriptOutputError):
    """Invalid destination configuration (unknown format, unusable file path)."""


class LayoutError(ScriptOutputError):
    """A table cannot be laid out within the configured wrap width."""
