# topmark:header:start
#
#   project      : ScriptOutput
#   file         : timestamp.py
#   file_relpath : src/scriptout/rendering/timestamp.py
#   license      : MIT
#   copyright    : (c) 2025 ScriptOutput contributors
#
# topmark:header:end

"""Time-stamped plaintext output (``format = "timestamp"``).

Identical to the plaintext target except that every ``line()`` is prefixed with
the local time in ISO-8601 form, e.g. ``[2025-03-01T14:05:09+01:00] done``.
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable, ClassVar

from scriptout.core.stringify import data_to_string
from scriptout.rendering.text import TextTarget


def local_now() -> datetime:
    """Return the current local time, timezone-aware, to the second."""
    return datetime.now().astimezone().replace(microsecond=0)


class TimestampTextTarget(TextTarget):
    """Plaintext renderer prefixing each line with a time stamp."""

    clock: ClassVar[Callable[[], datetime]] = staticmethod(local_now)

    def line(self, value: object) -> None:
        stamp = type(self).clock().isoformat()
        super().line(f"[{stamp}] {data_to_string(value)}")
