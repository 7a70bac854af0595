# topmark:header:start
#
#   project      : ScriptOutput
#   file         : text.py
#   file_relpath : src/scriptout/rendering/text.py
#   license      : MIT
#   copyright    : (c) 2025 ScriptOutput contributors
#
# topmark:header:end

"""Plaintext output target.

Output shape:

    ==========================
    = Nightly import summary =
    ==========================

    ===SUMMARY===
    rows read: 1200
    town: [
        loot: stumps
    ]

With wrapping enabled, the title box spans the wrap width, headings and titles
are truncated with an ellipsis, long lines are wrapped with a hanging indent
and tables are fitted to the width.
"""

from __future__ import annotations

from typing import Any

from scriptout.constants import ELLIPSIS, LIST_INDENT
from scriptout.core.stringify import data_to_string, is_expandable, iter_items
from scriptout.core.table import TableHeader, format_column_label, render_text_table
from scriptout.core.wrap import wrap_text
from scriptout.rendering.base import OutputTarget

_BOX_CHAR = "="
_HEADER_MARK = "==="


class TextTarget(OutputTarget):
    """Plaintext renderer, optionally wrapping to ``config.wrap`` columns."""

    @property
    def wrap_width(self) -> int | None:
        """Wrap width, or None when wrapping is disabled."""
        return self.config.wrap

    def title_box(self) -> str:
        """Return the bordered title box (empty when no title is configured)."""
        title = self.config.title
        if not title:
            return ""
        width = self.wrap_width
        if width is not None:
            # Truncate instead of wrapping
            if len(title) > width - 4:
                title = title[: width - 7] + ELLIPSIS
            border = _BOX_CHAR * width
            body = format_column_label(title, width - 4, truncate=False)
        else:
            border = _BOX_CHAR * (len(title) + 4)
            body = title
        return f"{border}\n= {body} =\n{border}\n\n"

    def print_header(self) -> None:
        if self._first_line:
            self.write_output(self.title_box())
            self._first_line = False

    def header(self, text: object) -> None:
        first = self._first_line
        self.print_header()

        heading = data_to_string(text)
        width = self.wrap_width
        if width is not None and len(heading) > width - 9:
            heading = heading[: width - 9].upper() + ELLIPSIS
        else:
            heading = heading.upper()
        output = f"{_HEADER_MARK}{heading}{_HEADER_MARK}\n"
        # Paragraph break before, unless this is the first output
        if not first:
            output = "\n" + output
        self.write_output(output)

    def begin_section(self) -> None:
        return

    def end_section(self) -> None:
        self.write_output("\n")

    def line(self, value: object) -> None:
        self.print_header()

        text = data_to_string(value)
        width = self.wrap_width
        if width is not None and len(text) > width:
            self.write_output(wrap_text(text, width))
        else:
            self.write_output(text + "\n")

    def traverse_list(self, data: Any, depth: int, max_depth: int) -> str:
        indent = LIST_INDENT * depth
        parts: list[str] = []
        for key, value in iter_items(data):
            if is_expandable(value) and depth < max_depth:
                text = "[\n" + self.traverse_list(value, depth + 1, max_depth) + indent + "]"
            else:
                text = data_to_string(value)
            parts.append(f"{indent}{data_to_string(key)}: {text}\n")
        return "".join(parts)

    def table(self, data: object, header: TableHeader = TableHeader.NONE) -> None:
        self.print_header()
        self.write_output(render_text_table(data, header, wrap_width=self.wrap_width))
