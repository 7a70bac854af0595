# topmark:header:start
#
#   project      : ScriptOutput
#   file         : __init__.py
#   file_relpath : src/scriptout/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 ScriptOutput contributors
#
# topmark:header:end

"""Output targets for ScriptOutput.

Each target renders the shared contract for one destination.

Public modules:
    - scriptout.rendering.base
    - scriptout.rendering.html
    - scriptout.rendering.registry
    - scriptout.rendering.text
    - scriptout.rendering.timestamp
"""

from __future__ import annotations
