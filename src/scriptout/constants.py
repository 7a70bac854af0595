# topmark:header:start
#
#   project      : ScriptOutput
#   file         : constants.py
#   file_relpath : src/scriptout/constants.py
#   license      : MIT
#   copyright    : (c) 2025 ScriptOutput contributors
#
# topmark:header:end

"""ScriptOutput Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from typing import Final

try:
    SCRIPTOUT_VERSION: str = get_version("scriptout")
except PackageNotFoundError:  # pragma: no cover - running from a source checkout
    SCRIPTOUT_VERSION = "0.0.0"

# Wrapping
DEFAULT_WRAP_LENGTH: Final[int] = 80
MIN_WRAP_LENGTH: Final[int] = 16
HANGING_INDENT: Final[str] = "    "
WRAP_LOOP_CAP: Final[int] = 999

# Tables
TABLE_CELL_DELIM: Final[str] = " | "
ELLIPSIS: Final[str] = "..."
SINGLE_COLUMN_NAME: Final[str] = "value"

# Lists
DEFAULT_LIST_DEPTH: Final[int] = 999
LIST_INDENT: Final[str] = "    "

# Dispatcher
MAX_OUTPUT_TARGETS: Final[int] = 9

LOG_LEVEL_ENV_VAR: Final[str] = "SCRIPTOUT_LOG_LEVEL"
