# topmark:header:start
#
#   project      : ScriptOutput
#   file         : environment.py
#   file_relpath : src/scriptout/config/environment.py
#   license      : MIT
#   copyright    : (c) 2025 ScriptOutput contributors
#
# topmark:header:end

"""Runtime environment detection.

The environment decides two defaults: the output format when a destination
names none (plaintext on a command line, HTML behind a web gateway), and the
directory relative file paths are resolved against.

Detection happens once, at the process entry point, and the resulting
[`Environment`][scriptout.config.environment.Environment] value is passed to
configuration resolution. Nothing here is cached in module state.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from scriptout.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

logger = get_logger(__name__)

# CGI/1.1 meta-variables (RFC 3875) set by a web gateway for every request
_GATEWAY_ENV_VARS: tuple[str, ...] = ("GATEWAY_INTERFACE", "REQUEST_METHOD", "REMOTE_ADDR")


@dataclass(frozen=True)
class Environment:
    """Immutable description of the running environment.

    Attributes:
        is_cli: True when running from a command line rather than a web gateway.
        base_dir: Directory used to resolve relative output file paths.
    """

    is_cli: bool = True
    base_dir: Path = field(default_factory=Path.cwd)

    @classmethod
    def detect(
        cls,
        *,
        environ: Mapping[str, str] | None = None,
        argv: Sequence[str] | None = None,
        base_dir: Path | None = None,
    ) -> Environment:
        """Detect the current environment.

        Args:
            environ (Mapping[str, str] | None): Environment variables; defaults to
                ``os.environ``.
            argv (Sequence[str] | None): Process arguments; defaults to ``sys.argv``.
            base_dir (Path | None): Explicit base directory. When omitted, the
                directory of the running script (``argv[0]``) is used, falling back
                to the current working directory.

        Returns:
            Environment: The detected environment.
        """
        env = os.environ if environ is None else environ
        args = sys.argv if argv is None else argv

        is_cli = not any(env.get(name) for name in _GATEWAY_ENV_VARS)

        script = args[0] if args else ""
        if base_dir is not None:
            base_dir = base_dir.resolve()
        elif script and script not in ("-", "-c"):
            base_dir = Path(script).resolve().parent
        else:
            base_dir = Path.cwd()

        logger.debug("Detected environment: is_cli=%s base_dir=%s", is_cli, base_dir)
        return cls(is_cli=is_cli, base_dir=base_dir)

    def resolve_path(self, path: str | Path) -> Path:
        """Return ``path`` made absolute relative to ``base_dir``."""
        p = Path(path).expanduser()
        if p.is_absolute():
            return p
        return self.base_dir / p
