# topmark:header:start
#
#   project      : ScriptOutput
#   file         : html.py
#   file_relpath : src/scriptout/rendering/html.py
#   license      : MIT
#   copyright    : (c) 2025 ScriptOutput contributors
#
# topmark:header:end

"""HTML output target.

Emits a minimal document: ``<html>``, an optional ``<head><title>``, then the
``<body>`` content. Sections are ``<p>`` blocks, lines are
``<span>...</span><br>``, lists are nested ``<ul><li>`` and tables are
``<table><tr><th>/<td>``. Text content is HTML-escaped. Wrapping does not apply.

The closing ``</body></html>`` is written by ``close()``, after any still-open
sections, and only when the document was started.
"""

from __future__ import annotations

from html import escape
from typing import TYPE_CHECKING, Any

from scriptout.core.stringify import data_to_string, is_expandable, iter_items
from scriptout.core.table import TableHeader, normalize_table
from scriptout.rendering.base import OutputTarget

if TYPE_CHECKING:
    from typing import TextIO

    from scriptout.config.model import TargetConfig


def _text(value: object) -> str:
    return escape(data_to_string(value), quote=False)


class HtmlTarget(OutputTarget):
    """HTML renderer tracking its open section depth."""

    def __init__(self, config: TargetConfig, *, stream: TextIO | None = None) -> None:
        super().__init__(config, stream=stream)
        self.section_depth: int = 0

    def close(self) -> None:
        if self.closed:
            return
        try:
            while self.section_depth > 0:
                self.end_section()
            if not self._first_line:
                self.write_output("</body>\n</html>\n")
        finally:
            super().close()

    def print_header(self) -> None:
        if self._first_line:
            head = ""
            if self.config.title:
                head = f"<head>\n\t<title>{escape(self.config.title, quote=False)}</title>\n</head>\n"
            self.write_output(f"<html>\n{head}<body>\n")
            self._first_line = False

    def header(self, text: object) -> None:
        self.print_header()
        self.write_output(f"<h3>{_text(text)}</h3>\n")

    def begin_section(self) -> None:
        self.print_header()
        self.section_depth += 1
        self.write_output("<p>\n")

    def end_section(self) -> None:
        if self.section_depth > 0:
            self.section_depth -= 1
            self.write_output("</p>\n")

    def line(self, value: object) -> None:
        self.print_header()
        self.write_output(f"<span>{_text(value)}</span><br>\n")

    def traverse_list(self, data: Any, depth: int, max_depth: int) -> str:
        items: list[str] = []
        for key, value in iter_items(data):
            if is_expandable(value) and depth < max_depth:
                text = self.traverse_list(value, depth + 1, max_depth)
            else:
                text = _text(value)
            items.append(f"<li><b>{_text(key)}</b>: {text}</li>\n")
        return "<ul>\n" + "".join(items) + "</ul>\n"

    def table(self, data: object, header: TableHeader = TableHeader.NONE) -> None:
        self.print_header()

        table = normalize_table(data)
        if not table:
            return
        show_rows = bool(header & TableHeader.ROWS)

        rows: list[str] = []
        if header & TableHeader.COLS:
            cells = "<th></th>" if show_rows else ""
            cells += "".join(f"<th>{escape(label, quote=False)}</th>" for label in table.column_labels)
            rows.append(f"\t<tr>{cells}</tr>\n")
        for row in table.rows:
            cells = f"<th>{escape(row.label, quote=False)}</th>" if show_rows else ""
            for column in table.columns:
                text = row.cell_text(column)
                cells += f"<td>{escape(text, quote=False)}</td>" if text is not None else "<td></td>"
            rows.append(f"\t<tr>{cells}</tr>\n")

        self.write_output("<table>\n" + "".join(rows) + "</table>\n")
