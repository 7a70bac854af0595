# topmark:header:start
#
#   project      : ScriptOutput
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 ScriptOutput contributors
#
# topmark:header:end

"""Pytest configuration for the ScriptOutput test suite.

Sets up verbose logging for the run and provides shared fixtures: a fixed
command-line [`Environment`][scriptout.config.environment.Environment] rooted in
``tmp_path``, an in-memory stream, and the sample documents used across suites.

Notes:
    Targets resolve ``sys.stdout`` at write time, so tests may use either an
    explicit ``stream`` or pytest's ``capsys``.
"""

from __future__ import annotations

import io
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from scriptout.config import logging
from scriptout.config.environment import Environment

if TYPE_CHECKING:
    from pathlib import Path

F = TypeVar("F", bound=Callable[..., object])


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.hookimpl`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.hookimpl`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    return cast("Callable[[F], F]", pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_scriptout_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to drop ``SCRIPTOUT_LOG_LEVEL``.
    """
    monkeypatch.delenv("SCRIPTOUT_LOG_LEVEL", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for the whole run.

    Args:
        config (pytest.Config): The pytest configuration object (unused).
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def cli_env(tmp_path: Path) -> Environment:
    """A command-line environment whose base directory is ``tmp_path``."""
    return Environment(is_cli=True, base_dir=tmp_path)


@pytest.fixture
def web_env(tmp_path: Path) -> Environment:
    """A web-gateway environment whose base directory is ``tmp_path``."""
    return Environment(is_cli=False, base_dir=tmp_path)


@pytest.fixture
def stream() -> io.StringIO:
    """An in-memory text stream receiving target output."""
    return io.StringIO()


@pytest.fixture
def frog_table() -> list[dict[str, Any]]:
    """Two rows; the second one lacks the ``n`` column."""
    return [{"n": 2, "type": "frog"}, {"type": "blank"}]


@pytest.fixture
def game_state() -> dict[str, Any]:
    """A nested document mixing mappings, sequences and scalars."""
    return {
        "town": {"loot": "stumps"},
        "monsters": [],
        "death": False,
        "gold": 12,
    }
