# topmark:header:start
#
#   project      : ScriptOutput
#   file         : exit_codes.py
#   file_relpath : src/scriptout/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 ScriptOutput contributors
#
# topmark:header:end

"""Exit codes for the ScriptOutput CLI.

Values follow the BSD `sysexits` convention where practical, so that calling
scripts can tell a bad invocation from bad input data or an unusable
destination.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the ScriptOutput CLI.

    Attributes:
        SUCCESS: Successful execution.
        FAILURE: Generic failure.
        USAGE_ERROR: Invalid flags/arguments. Mirrors BSD ``EX_USAGE (64)``.
        INPUT_ERROR: The input document could not be parsed. Mirrors BSD
            ``EX_DATAERR (65)``.
        LAYOUT_ERROR: A table does not fit the wrap width. Mirrors BSD
            ``EX_SOFTWARE (70)``.
        IO_ERROR: Reading input or writing output failed. Mirrors BSD
            ``EX_IOERR (74)``.
        CONFIG_ERROR: Invalid destination configuration (unknown format,
            unusable file, malformed TOML). Mirrors BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last resort).
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    INPUT_ERROR = 65  # EX_DATAERR
    LAYOUT_ERROR = 70  # EX_SOFTWARE
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
