# topmark:header:start
#
#   project      : ScriptOutput
#   file         : registry.py
#   file_relpath : src/scriptout/rendering/registry.py
#   license      : MIT
#   copyright    : (c) 2025 ScriptOutput contributors
#
# topmark:header:end

"""Output format registry.

Maps a format name to a factory building an
[`OutputTarget`][scriptout.rendering.base.OutputTarget]. Names are matched
exactly after lowercasing; there is no dynamic class lookup.

Typical usage:
    ```python
    from scriptout.rendering.registry import get_default_registry, register_format
    from scriptout.rendering.text import TextTarget

    @register_format("shout")
    class ShoutTarget(TextTarget):
        def line(self, value: object) -> None:
            super().line(str(value).upper())
    ```

Warning:
    The default registry is process-global. In tests, unregister temporary
    formats in a ``finally`` block (or use a private `FormatRegistry`).
"""

from __future__ import annotations

from threading import RLock
from typing import TYPE_CHECKING, Callable, Protocol, TypeVar

from scriptout.config.logging import get_logger
from scriptout.core.formats import OutputFormat
from scriptout.errors import OutputConfigError
from scriptout.rendering.html import HtmlTarget
from scriptout.rendering.text import TextTarget
from scriptout.rendering.timestamp import TimestampTextTarget

if TYPE_CHECKING:
    from typing import TextIO

    from scriptout.config.model import TargetConfig
    from scriptout.rendering.base import OutputTarget

logger = get_logger(__name__)


class TargetFactory(Protocol):
    """Callable building an output target for a resolved configuration."""

    def __call__(self, config: TargetConfig, *, stream: TextIO | None = None) -> OutputTarget:
        """Build the target."""
        ...


_F = TypeVar("_F", bound=Callable[..., "OutputTarget"])


def _normalize(name: str) -> str:
    return name.strip().lower()


class FormatRegistry:
    """Registry of output format factories."""

    def __init__(self) -> None:
        self._lock = RLock()
        self._factories: dict[str, TargetFactory] = {}

    def register(
        self,
        name: str,
        factory: TargetFactory,
        *,
        aliases: tuple[str, ...] = (),
        replace: bool = False,
    ) -> None:
        """Register ``factory`` under ``name`` (and optional aliases).

        Args:
            name (str): Format name.
            factory (TargetFactory): Target class or factory function.
            aliases (tuple[str, ...]): Additional names for the same factory.
            replace (bool): Allow overwriting an existing registration.

        Raises:
            ValueError: If a name is empty or already registered and ``replace``
                is False.
        """
        with self._lock:
            for key in (name, *aliases):
                norm = _normalize(key)
                if not norm:
                    raise ValueError("Format name must not be empty")
                if norm in self._factories and not replace:
                    raise ValueError(f"Output format '{norm}' is already registered")
                self._factories[norm] = factory
                logger.debug("Registered output format %s -> %r", norm, factory)

    def unregister(self, name: str) -> bool:
        """Remove a format name. Returns True if it was registered."""
        with self._lock:
            return self._factories.pop(_normalize(name), None) is not None

    def get(self, name: str) -> TargetFactory | None:
        """Return the factory registered under ``name``, or None."""
        with self._lock:
            return self._factories.get(_normalize(name))

    def names(self) -> tuple[str, ...]:
        """Return all registered format names (sorted)."""
        with self._lock:
            return tuple(sorted(self._factories))

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.get(name) is not None

    def create(self, config: TargetConfig, *, stream: TextIO | None = None) -> OutputTarget:
        """Build the target for a resolved configuration.

        Args:
            config (TargetConfig): Configuration with ``format`` set.
            stream (TextIO | None): Stream for targets without a file.

        Returns:
            OutputTarget: The new target (its file, if any, is open).

        Raises:
            OutputConfigError: If the format is missing or not registered, or the
                file cannot be opened.
        """
        if config.format is None:
            raise OutputConfigError("Output format is not resolved")
        factory = self.get(config.format)
        if factory is None:
            raise OutputConfigError(f"Invalid output format {config.format}")
        return factory(config, stream=stream)


def register_builtin_formats(registry: FormatRegistry) -> FormatRegistry:
    """Register the built-in formats on ``registry`` and return it."""
    registry.register(OutputFormat.PLAINTEXT.value, TextTarget, aliases=("text",))
    registry.register(OutputFormat.HTML.value, HtmlTarget)
    registry.register(OutputFormat.TIMESTAMP.value, TimestampTextTarget)
    return registry


_default_registry: FormatRegistry | None = None
_default_lock = RLock()


def get_default_registry() -> FormatRegistry:
    """Return the process-wide registry, populated with the built-in formats."""
    global _default_registry
    with _default_lock:
        if _default_registry is None:
            _default_registry = register_builtin_formats(FormatRegistry())
        return _default_registry


def register_format(name: str, *aliases: str) -> Callable[[_F], _F]:
    """Class/function decorator registering a factory on the default registry.

    Args:
        name (str): Format name.
        *aliases (str): Additional names.

    Returns:
        Callable[[_F], _F]: The decorator; it returns the factory unchanged.
    """

    def decorator(factory: _F) -> _F:
        get_default_registry().register(name, factory, aliases=aliases)
        return factory

    return decorator
