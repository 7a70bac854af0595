# topmark:header:start
#
#   project      : ScriptOutput
#   file         : model.py
#   file_relpath : src/scriptout/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 ScriptOutput contributors
#
# topmark:header:end

"""Per-destination configuration.

A [`TargetConfig`][scriptout.config.model.TargetConfig] is frozen: each
destination owns one, and changing a setting (see
[`TargetConfig.with_wrap`][scriptout.config.model.TargetConfig.with_wrap])
produces a new instance instead of mutating a shared one.

Recognized option keys (all optional):

    - ``format``: ``"plaintext"`` (alias ``"text"``), ``"html"``, a custom
      registered format name, an `OutputFormat`, or the legacy codes ``1``/``2``.
      When absent, the environment decides.
    - ``file``: output path; relative paths are resolved against the
      environment's base directory. When absent, output goes to stdout.
    - ``title``: title printed before the first output.
    - ``wrap``: a width (minimum 16), ``True`` (80 columns) or ``False``.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any, Final

from scriptout.config.logging import get_logger
from scriptout.constants import DEFAULT_WRAP_LENGTH, MIN_WRAP_LENGTH
from scriptout.core.formats import LEGACY_FORMAT_CODES, OutputFormat
from scriptout.errors import OutputConfigError

if TYPE_CHECKING:
    from scriptout.config.environment import Environment

logger = get_logger(__name__)

OPTION_KEYS: Final[frozenset[str]] = frozenset({"format", "file", "title", "wrap"})

_WRAP_OFF_WORDS: Final[frozenset[str]] = frozenset({"false", "no", "off", "none"})


def _clamp_width(value: float) -> int:
    if not math.isfinite(value):
        raise OutputConfigError(f"Invalid wrap width {value}")
    return max(MIN_WRAP_LENGTH, int(value))


def parse_wrap(value: object) -> int | None:
    """Translate a ``wrap`` option into a width, or None when wrapping is off.

    Args:
        value (object): ``None``/``False`` (off), ``True`` (default width), a number
            or a numeric string (clamped to the minimum width), or any other
            string (default width; ``"false"``, ``"no"``, ``"off"`` turn it off).

    Returns:
        int | None: The wrap width, or None.

    Raises:
        OutputConfigError: If the width is infinite or NaN.
    """
    if value is None or value is False:
        return None
    if value is True:
        return DEFAULT_WRAP_LENGTH
    if isinstance(value, (int, float)):
        return _clamp_width(value)
    if isinstance(value, str):
        text = value.strip()
        if text.lower() in _WRAP_OFF_WORDS:
            return None
        try:
            number = float(text)
        except ValueError:
            return DEFAULT_WRAP_LENGTH
        return _clamp_width(number)
    return DEFAULT_WRAP_LENGTH


def parse_format(value: object) -> str | None:
    """Normalize a ``format`` option to a lowercase format name, or None.

    Raises:
        OutputConfigError: If ``value`` is neither a string, an `OutputFormat` nor
            a legacy integer code.
    """
    if value is None or value == "":
        return None
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, int) and not isinstance(value, bool):
        legacy = LEGACY_FORMAT_CODES.get(value)
        if legacy is None:
            raise OutputConfigError(f"Invalid output format {value}")
        return legacy.value
    if isinstance(value, str):
        return value.strip().lower()
    raise OutputConfigError(f"Invalid output format {value!r}")


def _optional_text(value: object) -> str | None:
    if value is None or value == "":
        return None
    return str(value)


@dataclass(frozen=True)
class TargetConfig:
    """Immutable settings of one output destination.

    Attributes:
        format: Lowercase format name, or None to let the environment decide.
        file: Output file path, or None for stdout.
        title: Optional title printed before the first output.
        wrap: Wrap width, or None when wrapping is disabled.
    """

    format: str | None = None
    file: Path | None = None
    title: str | None = None
    wrap: int | None = None

    def __post_init__(self) -> None:
        if self.wrap is not None and self.wrap < MIN_WRAP_LENGTH:
            raise OutputConfigError(
                f"Wrap width {self.wrap} is below the minimum of {MIN_WRAP_LENGTH}"
            )

    @property
    def wrap_enabled(self) -> bool:
        """Whether line wrapping is enabled."""
        return self.wrap is not None

    @classmethod
    def from_options(cls, options: Mapping[str, Any] | None = None) -> TargetConfig:
        """Build a config from an options mapping.

        Unknown keys are ignored.

        Args:
            options (Mapping[str, Any] | None): The destination options.

        Returns:
            TargetConfig: The parsed configuration.

        Raises:
            OutputConfigError: If the format value has an invalid type.
        """
        options = options or {}
        unknown = sorted(set(options) - OPTION_KEYS)
        if unknown:
            logger.debug("Ignoring unknown output option(s): %s", ", ".join(unknown))

        file_value = _optional_text(options.get("file"))
        return cls(
            format=parse_format(options.get("format")),
            file=Path(file_value) if file_value is not None else None,
            title=_optional_text(options.get("title")),
            wrap=parse_wrap(options.get("wrap")),
        )

    def with_wrap(self, value: object) -> TargetConfig:
        """Return a copy with wrapping changed.

        A number turns wrapping on at that width (minimum 16), ``False`` turns it
        off and any other value turns it on, keeping the current width when there
        is one.

        Raises:
            OutputConfigError: If the width is infinite or NaN.
        """
        if value is False:
            return replace(self, wrap=None)
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return replace(self, wrap=_clamp_width(value))
        return replace(self, wrap=self.wrap or DEFAULT_WRAP_LENGTH)

    def resolve(self, environment: Environment) -> TargetConfig:
        """Return a copy with environment-dependent defaults filled in.

        The format defaults to plaintext on a command line and HTML otherwise;
        a relative file path is made absolute against the environment's base
        directory.
        """
        fmt = self.format
        if fmt is None:
            fmt = (OutputFormat.PLAINTEXT if environment.is_cli else OutputFormat.HTML).value
        file = environment.resolve_path(self.file) if self.file is not None else None
        return replace(self, format=fmt, file=file)


TargetOptions = Mapping[str, Any] | TargetConfig


def coerce_target_configs(
    options: TargetOptions | Sequence[TargetOptions] | None,
) -> list[TargetConfig]:
    """Normalize the accepted option shapes into a list of configs.

    ``None`` or an empty sequence yields a single default destination; a single
    mapping or `TargetConfig` yields one destination; a sequence yields one per
    entry.

    Raises:
        OutputConfigError: If an entry is neither a mapping nor a `TargetConfig`.
    """
    if options is None:
        return [TargetConfig()]
    if isinstance(options, (Mapping, TargetConfig)):
        entries: Sequence[Any] = [options]
    elif isinstance(options, Sequence) and not isinstance(options, str):
        entries = options or [{}]
    else:
        raise OutputConfigError(f"Invalid output options: {options!r}")

    configs: list[TargetConfig] = []
    for entry in entries:
        if isinstance(entry, TargetConfig):
            configs.append(entry)
        elif isinstance(entry, Mapping):
            configs.append(TargetConfig.from_options(entry))
        else:
            raise OutputConfigError(f"Invalid output options: {entry!r}")
    return configs
