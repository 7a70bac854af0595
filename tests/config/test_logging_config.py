# topmark:header:start
#
#   project      : ScriptOutput
#   file         : test_logging_config.py
#   file_relpath : tests/config/test_logging_config.py
#   license      : MIT
#   copyright    : (c) 2025 ScriptOutput contributors
#
# topmark:header:end

"""Tests for the logging configuration helpers."""

from __future__ import annotations

import logging

import pytest

from scriptout.config.logging import (
    TRACE_LEVEL,
    ScriptOutputLogger,
    get_logger,
    resolve_env_log_level,
    setup_logging,
)


@pytest.mark.parametrize(
    "value, expected",
    [("TRACE", TRACE_LEVEL), ("debug", logging.DEBUG), (" info ", logging.INFO), ("15", 15)],
)
def test_env_log_level(monkeypatch: pytest.MonkeyPatch, value: str, expected: int) -> None:
    monkeypatch.setenv("SCRIPTOUT_LOG_LEVEL", value)
    assert resolve_env_log_level() == expected


def test_env_log_level_unset_or_unknown(monkeypatch: pytest.MonkeyPatch) -> None:
    assert resolve_env_log_level() is None
    monkeypatch.setenv("SCRIPTOUT_LOG_LEVEL", "chatty")
    assert resolve_env_log_level() is None


def test_loggers_support_trace() -> None:
    logger = get_logger("scriptout.tests.trace")
    assert isinstance(logger, ScriptOutputLogger)
    assert hasattr(logger, "trace")


def test_setup_logging_replaces_handlers() -> None:
    setup_logging(level=logging.WARNING)
    setup_logging(level=TRACE_LEVEL)
    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert root.level == TRACE_LEVEL
