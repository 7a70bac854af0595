# topmark:header:start
#
#   project      : ScriptOutput
#   file         : formats.py
#   file_relpath : src/scriptout/core/formats.py
#   license      : MIT
#   copyright    : (c) 2025 ScriptOutput contributors
#
# topmark:header:end

"""Built-in output format names.

Custom formats are plain strings registered in the format registry
([`scriptout.rendering.registry`][scriptout.rendering.registry]); this enum only
names the formats every installation provides.
"""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Built-in destination formats.

    Attributes:
        PLAINTEXT: Plain text, optionally wrapped to a fixed width.
        HTML: A minimal self-contained HTML document.
        TIMESTAMP: Plain text with every line prefixed by an ISO-8601 time stamp.
    """

    PLAINTEXT = "plaintext"
    HTML = "html"
    TIMESTAMP = "timestamp"


#: Integer codes accepted for backward compatibility with numeric configurations.
LEGACY_FORMAT_CODES: dict[int, OutputFormat] = {
    1: OutputFormat.PLAINTEXT,
    2: OutputFormat.HTML,
}
