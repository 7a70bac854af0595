# topmark:header:start
#
#   project      : ScriptOutput
#   file         : table.py
#   file_relpath : src/scriptout/core/table.py
#   license      : MIT
#   copyright    : (c) 2025 ScriptOutput contributors
#
# topmark:header:end

"""Table normalisation and text layout.

This module is UI-agnostic: it turns arbitrary row data into a
[`TableData`][scriptout.core.table.TableData] and computes per-column widths
either naturally (maximum content width) or fitted to a wrap width.

Layout rules:
    - Columns are the union of all row keys in first-seen order.
    - A row that is not an expandable composite becomes ``{"value": row}``.
    - Missing cells (absent, ``None`` or ``""``) measure as width 0 and render
      as blank fill.
    - In wrap mode, every data line spans ``wrap - 1`` characters and the
      column-header line (which carries one trailing space) spans exactly
      ``wrap``. Rounding drift is absorbed by the last column.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntFlag
from typing import TYPE_CHECKING, Any

from scriptout.config.logging import get_logger
from scriptout.constants import ELLIPSIS, SINGLE_COLUMN_NAME, TABLE_CELL_DELIM
from scriptout.core.stringify import data_to_string, has_value, is_expandable, iter_items
from scriptout.errors import LayoutError

if TYPE_CHECKING:
    from collections.abc import Hashable, Mapping

    from scriptout.config.logging import ScriptOutputLogger

logger: ScriptOutputLogger = get_logger(__name__)


class TableHeader(IntFlag):
    """Bitmask selecting which table headers are printed.

    Attributes:
        NONE: No headers.
        COLS: A top row with the column names.
        ROWS: A leading column with the row labels.
        BOTH: Both column and row headers.
    """

    NONE = 0
    COLS = 1
    ROWS = 2
    BOTH = COLS | ROWS


@dataclass(frozen=True)
class TableRow:
    """One normalised table row.

    Attributes:
        label: Row label (the row's key or index in the input).
        cells: Column key to raw cell value.
    """

    label: str
    cells: Mapping[Hashable, Any]

    def cell_text(self, column: Hashable) -> str | None:
        """Return the display text of a cell, or None when the cell is missing."""
        if column not in self.cells:
            return None
        value = self.cells[column]
        if not has_value(value):
            return None
        return data_to_string(value)


@dataclass(frozen=True)
class TableData:
    """Normalised table: ordered rows plus the discovered column keys."""

    rows: tuple[TableRow, ...]
    columns: tuple[Hashable, ...]

    @property
    def column_labels(self) -> tuple[str, ...]:
        """Display labels of the columns, in column order."""
        return tuple(data_to_string(c) for c in self.columns)

    def __bool__(self) -> bool:
        return bool(self.rows)


@dataclass(frozen=True)
class ColumnLayout:
    """Computed column widths.

    Attributes:
        widths: Width of each data column, in column order.
        row_header_width: Width of the row-header column (0 when not shown).
    """

    widths: tuple[int, ...]
    row_header_width: int = 0


def _normalize_row(row: object) -> dict[Hashable, Any]:
    if is_expandable(row):
        return dict(iter_items(row))
    return {SINGLE_COLUMN_NAME: row}


def normalize_table(data: object) -> TableData:
    """Normalise table input into rows and columns.

    Args:
        data (object): A mapping (keys become row labels) or a sequence (indexes
            become row labels) of rows. Each row is a mapping, a sequence or a
            scalar.

    Returns:
        TableData: The normalised table; empty when ``data`` has no rows.
    """
    rows: list[TableRow] = []
    columns: dict[Hashable, None] = {}
    for key, row in iter_items(data):
        cells = _normalize_row(row)
        for column in cells:
            columns.setdefault(column, None)
        rows.append(TableRow(label=data_to_string(key), cells=cells))
    return TableData(rows=tuple(rows), columns=tuple(columns))


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def delimiter_overhead(column_count: int, *, row_headers: bool) -> int:
    """Return the fixed width taken by cell delimiters on a wrapped line.

    One delimiter per cell boundary, minus the trailing one, plus one character
    reserved for the trailing space of the column-header line.
    """
    cells = column_count + (1 if row_headers else 0)
    return len(TABLE_CELL_DELIM) * cells - len(TABLE_CELL_DELIM) + 1


def measure_natural(table: TableData, header: TableHeader) -> ColumnLayout:
    """Compute the natural layout: each column as wide as its widest content.

    Args:
        table (TableData): The normalised table.
        header (TableHeader): Which headers are shown.

    Returns:
        ColumnLayout: Widths equal to the maximum measured lengths.
    """
    widths: dict[Hashable, int] = {c: 0 for c in table.columns}
    if header & TableHeader.COLS:
        for column, label in zip(table.columns, table.column_labels):
            widths[column] = len(label)
    for row in table.rows:
        for column in row.cells:
            widths[column] = max(widths[column], len(row.cell_text(column) or ""))

    row_header_width = 0
    if header & TableHeader.ROWS:
        row_header_width = max(len(row.label) for row in table.rows)

    return ColumnLayout(
        widths=tuple(widths[c] for c in table.columns),
        row_header_width=row_header_width,
    )


def fit_wrapped(table: TableData, header: TableHeader, wrap_width: int) -> ColumnLayout:
    """Fit column widths proportionally into ``wrap_width``.

    Columns are sized by their *average* content length (the column label, when
    shown, is added to the total but not to the row count); the row header is
    sized by its *maximum* label length. All widths are scaled by the same ratio
    and rounded half-up; the rounding drift is added to (or subtracted from) the
    last column.

    Args:
        table (TableData): The normalised table.
        header (TableHeader): Which headers are shown.
        wrap_width (int): Total line width to fit.

    Returns:
        ColumnLayout: The fitted widths.

    Raises:
        LayoutError: If the delimiters alone do not fit in ``wrap_width``.
    """
    show_rows = bool(header & TableHeader.ROWS)
    overhead = delimiter_overhead(len(table.columns), row_headers=show_rows)
    if overhead >= wrap_width:
        raise LayoutError("Too many columns to fit wrap width.")

    totals: dict[Hashable, int] = {c: 0 for c in table.columns}
    counts: dict[Hashable, int] = {c: 0 for c in table.columns}
    if header & TableHeader.COLS:
        for column, label in zip(table.columns, table.column_labels):
            totals[column] += len(label)
    for row in table.rows:
        for column in row.cells:
            totals[column] += len(row.cell_text(column) or "")
            counts[column] += 1

    averages = [totals[c] / counts[c] for c in table.columns]
    row_header = float(max(len(row.label) for row in table.rows)) if show_rows else 0.0

    natural_width = sum(averages) + row_header
    if natural_width <= 0:
        # Nothing measurable: share the width evenly
        averages = [1.0] * len(averages)
        row_header = 1.0 if show_rows else 0.0
        natural_width = sum(averages) + row_header

    ratio = (wrap_width - overhead) / natural_width
    widths = [_round_half_up(avg * ratio) for avg in averages]
    row_header_width = _round_half_up(row_header * ratio) if show_rows else 0

    diff = wrap_width - (overhead + sum(widths) + row_header_width)
    widths[-1] += diff
    logger.trace(
        "Fitted %d columns to %d chars (ratio %.3f, drift %+d)",
        len(widths),
        wrap_width,
        ratio,
        diff,
    )

    if widths[-1] < 0:
        # Take the deficit from the widest remaining slots
        deficit = -widths[-1]
        widths[-1] = 0
        slots = widths + ([row_header_width] if show_rows else [])
        while deficit > 0:
            widest = max(range(len(slots)), key=slots.__getitem__)
            slots[widest] -= 1
            deficit -= 1
        widths = slots[: len(widths)]
        if show_rows:
            row_header_width = slots[-1]

    return ColumnLayout(widths=tuple(widths), row_header_width=row_header_width)


def format_cell(text: str | None, width: int, *, truncate: bool) -> str:
    """Pad (or, when ``truncate`` is set, shorten) a cell to exactly ``width``."""
    if text is None:
        return " " * width
    if truncate and len(text) > width:
        if width < len(ELLIPSIS):
            return text[:width]
        return text[: width - len(ELLIPSIS)] + ELLIPSIS
    return text.ljust(width)


def format_row_label(label: str, width: int, *, truncate: bool) -> str:
    """Left-align a row label, cutting it to ``width`` when ``truncate`` is set."""
    if truncate and len(label) > width:
        return label[:width]
    return label.ljust(width)


def format_column_label(label: str, width: int, *, truncate: bool) -> str:
    """Centre a column label; odd padding puts the extra space on the right."""
    if truncate and len(label) > width:
        return label[:width]
    extra = max(width - len(label), 0)
    left = extra // 2
    return " " * left + label + " " * (extra - left)


def layout_table_lines(
    table: TableData,
    layout: ColumnLayout,
    header: TableHeader,
    *,
    truncate: bool,
) -> list[str]:
    """Lay out a table as text lines (without line terminators).

    When column headers are shown, the result starts with the header line and a
    dash rule of the same length, and ends with an empty line.

    Args:
        table (TableData): The normalised table.
        layout (ColumnLayout): Column widths to apply.
        header (TableHeader): Which headers are shown.
        truncate (bool): Whether overflowing content is cut (wrap mode).

    Returns:
        list[str]: The rendered lines.
    """
    show_rows = bool(header & TableHeader.ROWS)
    lines: list[str] = []

    if header & TableHeader.COLS:
        parts: list[str] = []
        if show_rows:
            parts.append(" " * layout.row_header_width)
        for label, width in zip(table.column_labels, layout.widths):
            parts.append(format_column_label(label, width, truncate=truncate))
        head = TABLE_CELL_DELIM.join(parts) + " "
        lines.append(head)
        lines.append("-" * len(head))

    for row in table.rows:
        parts = []
        if show_rows:
            parts.append(format_row_label(row.label, layout.row_header_width, truncate=truncate))
        for column, width in zip(table.columns, layout.widths):
            parts.append(format_cell(row.cell_text(column), width, truncate=truncate))
        lines.append(TABLE_CELL_DELIM.join(parts))

    if header & TableHeader.COLS:
        lines.append("")
    return lines


def render_text_table(
    data: object,
    header: TableHeader = TableHeader.NONE,
    *,
    wrap_width: int | None = None,
) -> str:
    """Render table data as plaintext.

    Args:
        data (object): Table rows (see [`normalize_table`][scriptout.core.table.normalize_table]).
        header (TableHeader): Which headers are shown.
        wrap_width (int | None): Fit the table into this width; ``None`` for the
            natural layout.

    Returns:
        str: The rendered table, each line terminated by a newline; empty when
            there are no rows.

    Raises:
        LayoutError: If the table cannot fit into ``wrap_width``.
    """
    table = normalize_table(data)
    if not table:
        return ""
    header = TableHeader(header)
    if wrap_width is None:
        layout = measure_natural(table, header)
    else:
        layout = fit_wrapped(table, header, wrap_width)
    lines = layout_table_lines(table, layout, header, truncate=wrap_width is not None)
    return "".join(f"{line}\n" for line in lines)
