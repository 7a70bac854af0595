# topmark:header:start
#
#   project      : ScriptOutput
#   file         : io.py
#   file_relpath : src/scriptout/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 ScriptOutput contributors
#
# topmark:header:end

"""Load destination configurations from TOML.

Two layouts are recognized:

- a standalone file with an array of tables::

    [[targets]]
    title = "Nightly import"
    wrap = 100

    [[targets]]
    format = "html"
    file = "report.htm"

- a ``pyproject.toml`` with the same array nested under ``[tool.scriptout]``.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from scriptout.config.logging import get_logger
from scriptout.config.model import TargetConfig
from scriptout.errors import OutputConfigError

if TYPE_CHECKING:
    from pathlib import Path

logger = get_logger(__name__)

TARGETS_KEY = "targets"
PYPROJECT_SECTION = ("tool", "scriptout")


def load_toml_dict(path: Path) -> dict[str, Any]:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        dict[str, Any]: The parsed TOML content.

    Raises:
        OutputConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        raise OutputConfigError(f"Cannot read configuration {path}: {e}") from e
    except TomlkitParseError as e:
        raise OutputConfigError(f"Invalid TOML in {path}: {e}") from e
    data: Any = doc.unwrap()
    return data if isinstance(data, dict) else {}


def extract_target_tables(data: dict[str, Any]) -> list[dict[str, Any]]:
    """Return the raw ``targets`` tables of a parsed document.

    The top-level ``targets`` array wins over ``[tool.scriptout].targets``.

    Raises:
        OutputConfigError: If ``targets`` is not an array of tables.
    """
    section: Any = data
    if TARGETS_KEY not in data:
        for key in PYPROJECT_SECTION:
            section = section.get(key, {}) if isinstance(section, dict) else {}
    raw: Any = section.get(TARGETS_KEY, []) if isinstance(section, dict) else []

    if not isinstance(raw, list) or not all(isinstance(t, dict) for t in raw):
        raise OutputConfigError(f"'{TARGETS_KEY}' must be an array of tables")
    return raw


def load_target_configs(path: Path) -> list[TargetConfig]:
    """Load destination configurations from a TOML file.

    Args:
        path (Path): A ``scriptout.toml``-style file or a ``pyproject.toml``.

    Returns:
        list[TargetConfig]: One config per ``[[targets]]`` table (may be empty).

    Raises:
        OutputConfigError: If the file is unreadable or malformed.
    """
    tables = extract_target_tables(load_toml_dict(path))
    logger.debug("Loaded %d target table(s) from %s", len(tables), path)
    return [TargetConfig.from_options(table) for table in tables]
