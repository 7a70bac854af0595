# topmark:header:start
#
#   project      : ScriptOutput
#   file         : stringify.py
#   file_relpath : src/scriptout/core/stringify.py
#   license      : MIT
#   copyright    : (c) 2025 ScriptOutput contributors
#
# topmark:header:end

"""Uniform value-to-text conversion shared by every renderer.

Measuring and printing must go through the same conversion, otherwise column
widths are computed for a different string than the one that ends up in the
output. All renderers therefore call [`data_to_string`][scriptout.core.stringify.data_to_string]
and never `str()` directly.

Conversion rules:
    - ``str``: unchanged.
    - ``bool``: ``"true"`` / ``"false"``.
    - ``int`` / ``float``: their literal form.
    - ``None``: ``"null"``.
    - mappings: ``Object[n]`` (size placeholder).
    - other sequences and sets: ``Array[n]`` (size placeholder).
    - anything else: ``ClassName()``.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence, Set
from dataclasses import fields, is_dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterator


def _is_text(value: object) -> bool:
    return isinstance(value, (str, bytes, bytearray))


def data_to_string(value: object) -> str:
    """Return the display text for ``value``.

    Args:
        value (object): Any scalar or composite value.

    Returns:
        str: The display text; composites are reduced to a size placeholder.
    """
    if isinstance(value, str):
        return value
    # bool is a subclass of int: test it first
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    if value is None:
        return "null"
    if isinstance(value, Mapping):
        return f"Object[{len(value)}]"
    if (isinstance(value, Sequence) and not _is_text(value)) or isinstance(value, Set):
        return f"Array[{len(value)}]"
    return f"{type(value).__name__}()"


def iter_items(value: object) -> Iterator[tuple[Any, Any]]:
    """Iterate ``(key, child)`` pairs of a composite value.

    Mappings yield their items, sequences yield ``(index, item)`` and dataclass
    instances yield ``(field_name, field_value)``. Scalars yield nothing.

    Args:
        value (object): The value to iterate.

    Yields:
        tuple[Any, Any]: Key and child value.
    """
    if isinstance(value, Mapping):
        yield from value.items()
    elif isinstance(value, Sequence) and not _is_text(value):
        yield from enumerate(value)
    elif is_dataclass(value) and not isinstance(value, type):
        for f in fields(value):
            yield f.name, getattr(value, f.name)


def is_composite(value: object) -> bool:
    """Return True if ``value`` can be expanded into child items."""
    if isinstance(value, (Mapping, Sequence)):
        return not _is_text(value)
    return is_dataclass(value) and not isinstance(value, type)


def is_expandable(value: object) -> bool:
    """Return True if ``value`` is composite and has at least one child."""
    if not is_composite(value):
        return False
    if isinstance(value, (Mapping, Sequence)):
        return len(value) > 0
    return any(True for _ in iter_items(value))


def has_value(value: object) -> bool:
    """Return True unless ``value`` is ``None`` or the empty string.

    Table cells failing this check are rendered as blank fill.
    """
    return value is not None and value != ""
