# topmark:header:start
#
#   project      : ScriptOutput
#   file         : __init__.py
#   file_relpath : src/scriptout/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 ScriptOutput contributors
#
# topmark:header:end

"""Configuration for ScriptOutput destinations.

Public modules:
    - scriptout.config.environment
    - scriptout.config.io
    - scriptout.config.logging
    - scriptout.config.model
"""

from __future__ import annotations
