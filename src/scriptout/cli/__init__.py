# topmark:header:start
#
#   project      : ScriptOutput
#   file         : __init__.py
#   file_relpath : src/scriptout/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 ScriptOutput contributors
#
# topmark:header:end

"""Click-based command line interface for ScriptOutput.

Entry point: ``scriptout`` -> [`scriptout.cli.main.cli`][scriptout.cli.main.cli].
"""

from __future__ import annotations
