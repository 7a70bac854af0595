# topmark:header:start
#
#   project      : ScriptOutput
#   file         : test_cli_version.py
#   file_relpath : tests/cli/test_cli_version.py
#   license      : MIT
#   copyright    : (c) 2025 ScriptOutput contributors
#
# topmark:header:end

"""CLI tests: `version`, help and the bare group invocation."""

from __future__ import annotations

import pytest

from scriptout.constants import SCRIPTOUT_VERSION
from tests.cli.conftest import assert_SUCCESS, run_cli

pytestmark: pytest.MarkDecorator = pytest.mark.cli


def test_version_outputs_version() -> None:
    result = run_cli(["--no-color", "version"])
    assert_SUCCESS(result)
    assert result.output.strip() == SCRIPTOUT_VERSION


def test_bare_invocation_prints_hint_and_help() -> None:
    result = run_cli([])
    assert_SUCCESS(result)
    assert "Hint: use 'scriptout table DATA.json'" in result.output
    assert "Commands:" in result.output


@pytest.mark.parametrize("command", ["table", "list", "line"])
def test_rendering_commands_share_target_options(command: str) -> None:
    result = run_cli([command, "--help"])
    assert_SUCCESS(result)
    for option in ("--format", "--file", "--title", "--wrap", "--config", "--header"):
        assert option in result.output
