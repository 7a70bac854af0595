# topmark:header:start
#
#   project      : ScriptOutput
#   file         : test_html_target.py
#   file_relpath : tests/rendering/test_html_target.py
#   license      : MIT
#   copyright    : (c) 2025 ScriptOutput contributors
#
# topmark:header:end

"""Tests for the HTML output target."""

from __future__ import annotations

import io
from typing import TYPE_CHECKING, Any

import pytest

from scriptout.config.model import TargetConfig
from scriptout.core.table import TableHeader
from scriptout.rendering.html import HtmlTarget

if TYPE_CHECKING:
    from pathlib import Path


def make_target(stream: io.StringIO, **options: Any) -> HtmlTarget:
    return HtmlTarget(TargetConfig(format="html", **options), stream=stream)


def test_document_with_title_and_escaped_line(stream: io.StringIO) -> None:
    target = make_target(stream, title="Q&A")
    target.line("a<b")
    target.close()
    assert stream.getvalue() == (
        "<html>\n<head>\n\t<title>Q&amp;A</title>\n</head>\n<body>\n"
        "<span>a&lt;b</span><br>\n"
        "</body>\n</html>\n"
    )


def test_document_without_title(stream: io.StringIO) -> None:
    target = make_target(stream)
    target.header("A & B")
    target.close()
    assert stream.getvalue() == "<html>\n<body>\n<h3>A &amp; B</h3>\n</body>\n</html>\n"


def test_close_without_output_writes_nothing(stream: io.StringIO) -> None:
    target = make_target(stream, title="unused")
    target.close()
    target.close()
    assert stream.getvalue() == ""


def test_close_ends_open_sections(stream: io.StringIO) -> None:
    target = make_target(stream)
    target.begin_section()
    target.begin_section()
    target.line("x")
    target.close()
    assert stream.getvalue() == (
        "<html>\n<body>\n<p>\n<p>\n<span>x</span><br>\n</p>\n</p>\n</body>\n</html>\n"
    )


def test_unmatched_end_section_is_ignored(stream: io.StringIO) -> None:
    target = make_target(stream)
    target.end_section()
    target.begin_section()
    target.end_section()
    target.end_section()
    assert target.section_depth == 0
    assert stream.getvalue() == "<html>\n<body>\n<p>\n</p>\n"


def test_lines_are_never_wrapped(stream: io.StringIO) -> None:
    target = make_target(stream, wrap=16)
    target.line("word " * 10)
    assert stream.getvalue().endswith(f"<span>{'word ' * 10}</span><br>\n")


def test_nested_list(stream: io.StringIO, game_state: dict[str, Any]) -> None:
    make_target(stream).list(game_state)
    assert stream.getvalue() == (
        "<html>\n<body>\n"
        "<ul>\n"
        "<li><b>town</b>: <ul>\n<li><b>loot</b>: stumps</li>\n</ul>\n</li>\n"
        "<li><b>monsters</b>: Array[0]</li>\n"
        "<li><b>death</b>: false</li>\n"
        "<li><b>gold</b>: 12</li>\n"
        "</ul>\n"
    )


def test_list_depth_zero(stream: io.StringIO) -> None:
    make_target(stream).list({"town": {"loot": "<stumps>"}}, 0)
    assert stream.getvalue().endswith("<ul>\n<li><b>town</b>: Object[1]</li>\n</ul>\n")


def test_table_with_both_headers(stream: io.StringIO, frog_table: list[dict[str, Any]]) -> None:
    make_target(stream).table(frog_table, TableHeader.BOTH)
    assert stream.getvalue() == (
        "<html>\n<body>\n"
        "<table>\n"
        "\t<tr><th></th><th>n</th><th>type</th></tr>\n"
        "\t<tr><th>0</th><td>2</td><td>frog</td></tr>\n"
        "\t<tr><th>1</th><td></td><td>blank</td></tr>\n"
        "</table>\n"
    )


def test_table_without_headers(stream: io.StringIO, frog_table: list[dict[str, Any]]) -> None:
    make_target(stream).table(frog_table)
    assert stream.getvalue().endswith(
        "<table>\n"
        "\t<tr><td>2</td><td>frog</td></tr>\n"
        "\t<tr><td></td><td>blank</td></tr>\n"
        "</table>\n"
    )


def test_empty_table_only_starts_document(stream: io.StringIO) -> None:
    make_target(stream).table([], TableHeader.BOTH)
    assert stream.getvalue() == "<html>\n<body>\n"


def test_close_releases_file_when_closing_markup_fails(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    target = HtmlTarget(TargetConfig(format="html", file=tmp_path / "out.htm"))
    target.begin_section()

    def fail(text: str) -> None:
        raise OSError("disk full")

    monkeypatch.setattr(target, "write_output", fail)
    with pytest.raises(OSError, match="disk full"):
        target.close()
    assert target.closed
    assert target.out.closed
