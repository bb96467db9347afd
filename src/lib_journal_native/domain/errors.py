"""Error taxonomy for journal delivery.

Every error is scoped to a single log event: callers may catch it, report it,
and keep logging. Each class also derives from the closest builtin so generic
``except ValueError`` / ``except OSError`` handlers keep working.
"""

from __future__ import annotations


class JournalError(Exception):
    """Base class for all journal delivery failures."""


class EncodingError(JournalError, ValueError):
    """A value could not be rendered into protocol bytes."""


class JournalConnectionError(JournalError, ConnectionError):
    """The journal socket could not be created or connected."""


class JournalWriteError(JournalError, OSError):
    """Writing a datagram to a connected journal socket failed."""


__all__ = [
    "EncodingError",
    "JournalConnectionError",
    "JournalError",
    "JournalWriteError",
]
