# topmark:header:start
#
#   project      : ScriptOutput
#   file         : __init__.py
#   file_relpath : src/scriptout/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 ScriptOutput contributors
#
# topmark:header:end

"""ScriptOutput CLI commands."""

from __future__ import annotations
