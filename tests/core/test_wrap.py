# topmark:header:start
#
#   project      : ScriptOutput
#   file         : test_wrap.py
#   file_relpath : tests/core/test_wrap.py
#   license      : MIT
#   copyright    : (c) 2025 ScriptOutput contributors
#
# topmark:header:end

"""Unit tests for prose wrapping with a hanging indent."""

from __future__ import annotations

import pytest

from scriptout.core import wrap as wrap_module
from scriptout.core.wrap import wrap_lines, wrap_text


def test_short_text_is_returned_unchanged() -> None:
    assert wrap_lines("fits", 16) == ["fits"]
    assert wrap_lines("x" * 16, 16) == ["x" * 16]


def test_breaks_at_whitespace_with_hanging_indent() -> None:
    assert wrap_lines("aaaa bbbb cccc dddd eeee", 16) == ["aaaa bbbb cccc", "    dddd eeee"]


def test_embedded_newlines_are_honoured() -> None:
    assert wrap_lines("ab\ncd", 16) == ["ab", "    cd"]
    assert wrap_lines("ab\r\ncd", 16) == ["ab", "    cd"]


def test_long_word_is_hard_broken() -> None:
    lines = wrap_lines("short " + "y" * 30, 16)
    assert lines == ["short", "    " + "y" * 12, "    " + "y" * 12, "    " + "y" * 6]


def test_unbreakable_token_terminates_within_width() -> None:
    token = "x" * 500
    lines = wrap_lines(token, 20)
    assert len(lines) == 31
    assert all(len(line) <= 20 for line in lines)
    assert "".join(line.strip() for line in lines) == token
    assert all(line.startswith("    ") for line in lines[1:])


def test_continuation_lines_are_never_indent_only() -> None:
    lines = wrap_lines("word " * 40, 16)
    assert all(line.strip() for line in lines)
    assert all(len(line) <= 16 for line in lines)


def test_loop_cap_flushes_remaining_text(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(wrap_module, "WRAP_LOOP_CAP", 2)
    lines = wrap_lines("x" * 100, 20)
    assert lines == ["x" * 20, "    " + "x" * 16, "    " + "x" * 64]


def test_wrap_text_terminates_every_line() -> None:
    assert wrap_text("aaaa bbbb cccc dddd eeee", 16) == "aaaa bbbb cccc\n    dddd eeee\n"
    assert wrap_text("fits", 16) == "fits\n"
