# topmark:header:start
#
#   project      : ScriptOutput
#   file         : base.py
#   file_relpath : src/scriptout/rendering/base.py
#   license      : MIT
#   copyright    : (c) 2025 ScriptOutput contributors
#
# topmark:header:end

"""Base class for output targets.

An [`OutputTarget`][scriptout.rendering.base.OutputTarget] renders the shared
contract (``header``, ``line``, ``begin_section``, ``end_section``, ``list``,
``table``) for exactly one destination. It owns:

- the destination: a file opened (truncate-and-write, UTF-8) at construction,
  or a text stream (stdout by default);
- the configuration, an immutable [`TargetConfig`][scriptout.config.model.TargetConfig];
- the "first line" flag, cleared once the title (if any) has been printed.

Nothing is shared between targets. Targets are context managers; ``close()``
is idempotent and releases the file handle on every exit path.
"""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, TextIO

from scriptout.config.logging import get_logger
from scriptout.constants import DEFAULT_LIST_DEPTH
from scriptout.core.stringify import is_expandable
from scriptout.core.table import TableHeader
from scriptout.errors import OutputConfigError, ScriptOutputError

if TYPE_CHECKING:
    from types import TracebackType

    from scriptout.config.model import TargetConfig

logger = get_logger(__name__)


class OutputTarget(ABC):
    """Renderer bound to a single destination.

    Args:
        config (TargetConfig): Resolved destination settings. When ``config.file``
            is set the file is opened immediately.
        stream (TextIO | None): Stream used when no file is configured. Defaults to
            the *current* ``sys.stdout`` at write time.

    Raises:
        OutputConfigError: If the configured file cannot be opened.
    """

    def __init__(self, config: TargetConfig, *, stream: TextIO | None = None) -> None:
        self.config: TargetConfig = config
        self._stream: TextIO | None = stream
        self._file: TextIO | None = None
        self._first_line: bool = True
        self._closed: bool = False

        if config.file is not None:
            try:
                self._file = config.file.open("w", encoding="utf-8")
            except OSError as e:
                raise OutputConfigError(f"File error with output options: {config.file}: {e}") from e
            logger.debug("%s writing to %s", type(self).__name__, config.file)

    def __repr__(self) -> str:
        dest = str(self.config.file) if self.config.file is not None else "<stdout>"
        return f"{type(self).__name__}(format={self.config.format!r}, destination={dest!r})"

    # --- destination --------------------------------------------------------

    @property
    def closed(self) -> bool:
        """Whether ``close()`` has been called."""
        return self._closed

    @property
    def out(self) -> TextIO:
        """The stream receiving output."""
        if self._file is not None:
            return self._file
        return self._stream if self._stream is not None else sys.stdout

    def write_output(self, text: str) -> None:
        """Write ``text`` to the destination and flush it.

        Raises:
            ScriptOutputError: If the target has been closed.
        """
        if self._closed:
            raise ScriptOutputError(f"{self!r} is closed")
        if not text:
            return
        out = self.out
        out.write(text)
        out.flush()

    def close(self) -> None:
        """Finish the output and release the file handle (idempotent)."""
        if self._closed:
            return
        self._closed = True
        if self._file is not None:
            self._file.close()
            logger.debug("Closed %s", self.config.file)

    def __enter__(self) -> OutputTarget:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    # --- shared contract ----------------------------------------------------

    @abstractmethod
    def print_header(self) -> None:
        """Emit the document preamble / title before the first output."""

    @abstractmethod
    def header(self, text: object) -> None:
        """Emit a heading."""

    @abstractmethod
    def begin_section(self) -> None:
        """Start a section."""

    @abstractmethod
    def end_section(self) -> None:
        """End a section."""

    @abstractmethod
    def line(self, value: object) -> None:
        """Emit one line of text."""

    @abstractmethod
    def table(self, data: object, header: TableHeader = TableHeader.NONE) -> None:
        """Emit a table."""

    @abstractmethod
    def traverse_list(self, data: Any, depth: int, max_depth: int) -> str:
        """Render one level of a nested structure (recursively)."""

    def list(self, data: object, depth: int = DEFAULT_LIST_DEPTH) -> None:
        """Emit a nested structure as an outline, expanding up to ``depth`` levels.

        Scalars and empty composites produce no output (the title, if pending,
        is still printed).
        """
        self.print_header()
        if not is_expandable(data):
            return
        self.write_output(self.traverse_list(data, 0, depth))
