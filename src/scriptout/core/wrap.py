# topmark:header:start
#
#   project      : ScriptOutput
#   file         : wrap.py
#   file_relpath : src/scriptout/core/wrap.py
#   license      : MIT
#   copyright    : (c) 2025 ScriptOutput contributors
#
# topmark:header:end

"""Prose line wrapping with a hanging indent.

`textwrap` cannot be used directly because every continuation line carries a
hanging indent that counts against the width, and breaks must happen at
whitespace when a break point exists inside the window. Each chunk is matched
with a regular expression:

    - up to ``width - 1`` characters followed by whitespace (which is consumed),
      a line break, or the end of the text; otherwise
    - a hard break after ``width`` characters.

The loop is capped at [`WRAP_LOOP_CAP`][scriptout.constants.WRAP_LOOP_CAP]
iterations; anything left past the cap is emitted verbatim.
"""

from __future__ import annotations

import re
from functools import lru_cache

from scriptout.config.logging import get_logger
from scriptout.constants import HANGING_INDENT, WRAP_LOOP_CAP

logger = get_logger(__name__)


@lru_cache(maxsize=32)
def _chunk_pattern(width: int) -> re.Pattern[str]:
    soft = width - 1
    return re.compile(
        rf"(?:.{{1,{soft}}}(?:(?<=[^\S\r\n])[^\S\r\n]?|(?=\r?\n)|$|[^\S\r\n])|.{{1,{width}}})(?:\r?\n)?"
    )


def wrap_lines(text: str, width: int, *, indent: str = HANGING_INDENT) -> list[str]:
    """Split ``text`` into lines no wider than ``width``.

    Args:
        text (str): Text to wrap; embedded line breaks are honoured.
        width (int): Maximum line width (including the hanging indent).
        indent (str): Prefix for every line after the first.

    Returns:
        list[str]: The wrapped lines, without line terminators.
    """
    if len(text) <= width and "\n" not in text:
        return [text]

    # The indent is never a break candidate: continuation lines are matched
    # against the narrower window and prefixed afterwards.
    first_pattern = _chunk_pattern(width)
    rest_pattern = _chunk_pattern(max(width - len(indent), 2))
    lines: list[str] = []
    remaining = text
    iteration = 0
    while remaining:
        prefix = indent if iteration > 0 else ""
        if iteration >= WRAP_LOOP_CAP:
            logger.debug("Wrap loop cap (%d) reached; flushing remaining text", WRAP_LOOP_CAP)
            lines.append(prefix + remaining)
            break
        pattern = rest_pattern if iteration > 0 else first_pattern
        iteration += 1

        match = pattern.match(remaining)
        if match is None:
            lines.append(prefix + remaining)
            break
        chunk = match.group(0)
        lines.append(prefix + chunk.rstrip())
        remaining = remaining[len(chunk) :].lstrip()

    return lines


def wrap_text(text: str, width: int) -> str:
    """Return ``text`` wrapped to ``width``, each line terminated by a newline."""
    return "".join(f"{line}\n" for line in wrap_lines(text, width))
