# topmark:header:start
#
#   project      : ScriptOutput
#   file         : __init__.py
#   file_relpath : src/scriptout/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 ScriptOutput contributors
#
# topmark:header:end

"""Core, UI-agnostic layout helpers for ScriptOutput.

Public modules:
    - scriptout.core.stringify
    - scriptout.core.table
    - scriptout.core.wrap
"""

from __future__ import annotations
