# topmark:header:start
#
#   project      : ScriptOutput
#   file         : output.py
#   file_relpath : src/scriptout/output.py
#   license      : MIT
#   copyright    : (c) 2025 ScriptOutput contributors
#
# topmark:header:end

"""Multi-destination output dispatcher.

[`ScriptOutput`][scriptout.output.ScriptOutput] builds one
[`OutputTarget`][scriptout.rendering.base.OutputTarget] per configured
destination and forwards every call to all of them, in order. Calls are
synchronous: each returns once every target has written its output.

Example:
    ```python
    from scriptout import ScriptOutput, TableHeader

    with ScriptOutput([{"title": "Import"}, {"wrap": 100, "file": "import.log"}]) as out:
        out.begin_section("rows")
        out.table(rows, TableHeader.COLS)
        out.end_section()
        out.line("done")
    ```
"""

from __future__ import annotations

import weakref
from contextlib import ExitStack
from typing import TYPE_CHECKING, Any, TextIO

from scriptout.config.environment import Environment
from scriptout.config.logging import get_logger
from scriptout.config.model import coerce_target_configs
from scriptout.constants import DEFAULT_LIST_DEPTH, MAX_OUTPUT_TARGETS
from scriptout.core.table import TableHeader
from scriptout.rendering.registry import get_default_registry
from scriptout.rendering.text import TextTarget

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import TracebackType

    from scriptout.config.model import TargetOptions
    from scriptout.rendering.base import OutputTarget
    from scriptout.rendering.registry import FormatRegistry

logger = get_logger(__name__)


def _close_targets(targets: tuple[OutputTarget, ...]) -> None:
    with ExitStack() as stack:
        # Every target is closed even if one of them fails
        for target in reversed(targets):
            stack.callback(target.close)


class ScriptOutput:
    """Fan output calls out to one or more destinations.

    Args:
        options (TargetOptions | Sequence[TargetOptions] | None): Destination
            options: ``None`` for a single default destination, one mapping (or
            `TargetConfig`), or a sequence of them. At most nine destinations are
            created; extra entries are ignored.
        environment (Environment | None): Detected runtime environment, used for
            the default format and relative file paths. Detected when omitted.
        registry (FormatRegistry | None): Format registry; defaults to the
            process-wide registry with the built-in formats.
        stream (TextIO | None): Stream for destinations without a file; defaults
            to stdout.

    Raises:
        OutputConfigError: If a format is unknown or a file cannot be opened.
            Destinations created before the failure are closed again, without
            having written anything.

    Use it as a context manager or call ``close()`` when done: closing writes the
    end of HTML documents and releases files. An instance that is garbage
    collected, or still open at interpreter exit, is closed then.
    """

    def __init__(
        self,
        options: TargetOptions | Sequence[TargetOptions] | None = None,
        *,
        environment: Environment | None = None,
        registry: FormatRegistry | None = None,
        stream: TextIO | None = None,
    ) -> None:
        self.environment: Environment = environment or Environment.detect()
        registry = registry or get_default_registry()

        configs = coerce_target_configs(options)
        if len(configs) > MAX_OUTPUT_TARGETS:
            logger.warning(
                "%d output targets requested; only the first %d are used",
                len(configs),
                MAX_OUTPUT_TARGETS,
            )
            configs = configs[:MAX_OUTPUT_TARGETS]

        targets: list[OutputTarget] = []
        with ExitStack() as stack:
            for config in configs:
                target = registry.create(config.resolve(self.environment), stream=stream)
                stack.callback(target.close)
                targets.append(target)
                logger.debug("Created %r", target)
            # All targets built: keep them open
            stack.pop_all()
        self._targets: tuple[OutputTarget, ...] = tuple(targets)
        self._finalizer = weakref.finalize(self, _close_targets, self._targets)

    @property
    def targets(self) -> tuple[OutputTarget, ...]:
        """The configured targets, in order."""
        return self._targets

    def __enter__(self) -> ScriptOutput:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Finish the output of every target and release their files."""
        self._finalizer()

    def set_wrap(self, value: Any) -> None:
        """Change wrapping on every plaintext target.

        Args:
            value (Any): A width turns wrapping on at that width (minimum 16);
                ``False`` turns it off; ``True`` turns it on.
        """
        for target in self._targets:
            if isinstance(target, TextTarget):
                target.config = target.config.with_wrap(value)

    def header(self, text: object) -> None:
        """Emit a heading on every target."""
        for target in self._targets:
            target.header(text)

    def begin_section(self, header: object = None) -> None:
        """Start a section, optionally preceded by a heading."""
        for target in self._targets:
            if header is not None and header != "":
                target.header(header)
            target.begin_section()

    def end_section(self) -> None:
        """End the current section on every target."""
        for target in self._targets:
            target.end_section()

    def line(self, value: object) -> None:
        """Emit a line on every target; plaintext targets wrap it if enabled."""
        for target in self._targets:
            target.line(value)

    def list(self, data: object, depth: int = DEFAULT_LIST_DEPTH) -> None:
        """Emit a nested mapping/sequence as an outline, up to ``depth`` levels deep.

        A depth of 0 shows only the root level; nested composites appear as their
        size placeholder (e.g. ``Object[3]``).
        """
        for target in self._targets:
            target.list(data, depth)

    def table(self, data: object, header: TableHeader | int = TableHeader.NONE) -> None:
        """Emit a table on every target.

        Args:
            data (object): Rows: a mapping (keys are row labels) or a sequence.
                Each row is a mapping of column name to value, or a scalar
                (shown in a ``value`` column).
            header (TableHeader | int): Which headers to print.

        Raises:
            LayoutError: If a wrapped plaintext target cannot fit the columns.
                Targets earlier in the list have already written the table.
        """
        header = TableHeader(header)
        for target in self._targets:
            target.table(data, header)
