# topmark:header:start
#
#   project      : ScriptOutput
#   file         : test_text_target.py
#   file_relpath : tests/rendering/test_text_target.py
#   license      : MIT
#   copyright    : (c) 2025 ScriptOutput contributors
#
# topmark:header:end

"""Tests for the plaintext output target."""

from __future__ import annotations

import io
from typing import TYPE_CHECKING, Any

import pytest

from scriptout.config.model import TargetConfig
from scriptout.core.table import TableHeader
from scriptout.errors import OutputConfigError, ScriptOutputError
from scriptout.rendering.text import TextTarget

if TYPE_CHECKING:
    from pathlib import Path


def make_target(stream: io.StringIO, **options: Any) -> TextTarget:
    return TextTarget(TargetConfig(format="plaintext", **options), stream=stream)


# --- title box ------------------------------------------------------------------


def test_title_box_without_wrap(stream: io.StringIO) -> None:
    target = make_target(stream, title="Report")
    assert target.title_box() == "==========\n= Report =\n==========\n\n"


def test_title_box_spans_wrap_width(stream: io.StringIO) -> None:
    target = make_target(stream, title="Report", wrap=20)
    assert target.title_box() == (
        "====================\n=      Report      =\n====================\n\n"
    )


def test_long_title_is_truncated_in_wrap_mode(stream: io.StringIO) -> None:
    target = make_target(stream, title="A very long report title", wrap=20)
    box = target.title_box().split("\n")
    assert box[1] == "= A very long r... ="
    assert all(len(line) == 20 for line in box[:3])


def test_no_title_no_box(stream: io.StringIO) -> None:
    assert make_target(stream).title_box() == ""


def test_title_is_printed_once_before_first_output(stream: io.StringIO) -> None:
    target = make_target(stream, title="Report")
    target.line("a")
    target.line("b")
    assert stream.getvalue() == "==========\n= Report =\n==========\n\na\nb\n"


# --- headers and sections -------------------------------------------------------


def test_first_header_has_no_leading_blank_line(stream: io.StringIO) -> None:
    target = make_target(stream)
    target.header("summary")
    target.header("next")
    assert stream.getvalue() == "===SUMMARY===\n\n===NEXT===\n"


def test_header_directly_after_title_box(stream: io.StringIO) -> None:
    target = make_target(stream, title="Report")
    target.header("summary")
    assert stream.getvalue().endswith("==========\n\n===SUMMARY===\n")


def test_header_is_truncated_in_wrap_mode(stream: io.StringIO) -> None:
    target = make_target(stream, wrap=20)
    target.header("abcdefghijklmnop")
    assert stream.getvalue() == "===ABCDEFGHIJK...===\n"


def test_end_section_writes_blank_line(stream: io.StringIO) -> None:
    target = make_target(stream)
    target.begin_section()
    target.line("x")
    target.end_section()
    assert stream.getvalue() == "x\n\n"


# --- lines ----------------------------------------------------------------------


def test_line_stringifies_values(stream: io.StringIO) -> None:
    target = make_target(stream)
    target.line(True)
    target.line(None)
    target.line([1, 2])
    assert stream.getvalue() == "true\nnull\nArray[2]\n"


def test_long_line_is_wrapped(stream: io.StringIO) -> None:
    target = make_target(stream, wrap=16)
    target.line("aaaa bbbb cccc dddd eeee")
    target.line("x" * 16)
    assert stream.getvalue() == "aaaa bbbb cccc\n    dddd eeee\n" + "x" * 16 + "\n"


def test_line_is_not_wrapped_without_wrap(stream: io.StringIO) -> None:
    target = make_target(stream)
    target.line("word " * 40)
    assert stream.getvalue() == "word " * 40 + "\n"


# --- lists ----------------------------------------------------------------------


def test_list_depth_zero_shows_placeholders(
    stream: io.StringIO, game_state: dict[str, Any]
) -> None:
    make_target(stream).list(game_state, 0)
    assert stream.getvalue() == "town: Object[1]\nmonsters: Array[0]\ndeath: false\ngold: 12\n"


def test_list_expands_nested_levels(stream: io.StringIO, game_state: dict[str, Any]) -> None:
    make_target(stream).list(game_state)
    assert stream.getvalue() == (
        "town: [\n    loot: stumps\n]\nmonsters: Array[0]\ndeath: false\ngold: 12\n"
    )


def test_list_stops_at_depth(stream: io.StringIO) -> None:
    make_target(stream).list({"a": {"b": {"c": 1}}}, 1)
    assert stream.getvalue() == "a: [\n    b: Object[1]\n]\n"


def test_list_of_sequence_uses_indexes(stream: io.StringIO) -> None:
    make_target(stream).list(["x", ["y"]])
    assert stream.getvalue() == "0: x\n1: [\n    0: y\n]\n"


@pytest.mark.parametrize("data", ["scalar", 3, None, {}, []])
def test_list_of_non_expandable_prints_nothing(stream: io.StringIO, data: Any) -> None:
    make_target(stream).list(data)
    assert stream.getvalue() == ""


# --- tables ---------------------------------------------------------------------


def test_table_uses_natural_layout(stream: io.StringIO, frog_table: list[dict[str, Any]]) -> None:
    make_target(stream).table(frog_table, TableHeader.BOTH)
    assert stream.getvalue() == (
        "  | n | type  \n--------------\n0 | 2 | frog \n1 |   | blank\n\n"
    )


def test_table_is_fitted_when_wrapping(
    stream: io.StringIO, frog_table: list[dict[str, Any]]
) -> None:
    make_target(stream, wrap=20).table(frog_table, TableHeader.COLS)
    lines = stream.getvalue().split("\n")
    assert len(lines[0]) == 20
    assert [len(line) for line in lines[2:4]] == [19, 19]


# --- lifecycle ------------------------------------------------------------------


def test_writes_after_close_raise(stream: io.StringIO) -> None:
    target = make_target(stream)
    target.close()
    target.close()
    assert target.closed
    with pytest.raises(ScriptOutputError, match="is closed"):
        target.line("late")


def test_file_destination(tmp_path: Path) -> None:
    path = tmp_path / "out.txt"
    path.write_text("stale\n", encoding="utf-8")
    with TextTarget(TargetConfig(format="plaintext", file=path)) as target:
        target.line("fresh")
    assert path.read_text(encoding="utf-8") == "fresh\n"


def test_unopenable_file_raises(tmp_path: Path) -> None:
    path = tmp_path / "missing" / "out.txt"
    with pytest.raises(OutputConfigError, match="File error with output options"):
        TextTarget(TargetConfig(format="plaintext", file=path))


def test_default_destination_is_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    target = TextTarget(TargetConfig(format="plaintext"))
    target.line("hello")
    target.close()
    assert capsys.readouterr().out == "hello\n"
