# topmark:header:start
#
#   project      : ScriptOutput
#   file         : __init__.py
#   file_relpath : src/scriptout/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 ScriptOutput contributors
#
# topmark:header:end

"""ScriptOutput package.

ScriptOutput renders headers, lines, nested lists and tables for standalone
scripts. Every call fans out to one or more destinations (stdout or a file),
each rendering plaintext (optionally wrapped) or HTML.

Typical usage:
    ```python
    from scriptout import ScriptOutput, TableHeader

    with ScriptOutput([{"title": "Nightly import"}, {"format": "html", "file": "report.htm"}]) as out:
        out.header("summary")
        out.table(rows, TableHeader.BOTH)
    ```
"""

from __future__ import annotations

from scriptout.core.table import TableHeader
from scriptout.errors import LayoutError, OutputConfigError, ScriptOutputError
from scriptout.output import ScriptOutput

__all__ = [
    "LayoutError",
    "OutputConfigError",
    "ScriptOutput",
    "ScriptOutputError",
    "TableHeader",
]
