"""Send structured log entries to systemd-journald over its native socket.

Typical use attaches :class:`JournalHandler` to a stdlib logger::

    import logging
    from lib_journal_native import JournalHandler

    logging.getLogger().addHandler(JournalHandler())

The pieces underneath (:func:`encode_field`, :func:`assemble`,
:class:`JournalSocket`) are public for callers with their own dispatch layer.
"""

from __future__ import annotations

from .adapters import DEFAULT_FORMAT, DEFAULT_SOCKET_PATH, JournalHandler, JournalSocket
from .application.use_cases import create_emit_event
from .domain import (
    RESERVED_FIELDS,
    EncodingError,
    JournalConnectionError,
    JournalError,
    JournalField,
    JournalWriteError,
    LogEvent,
    LogLevel,
    assemble,
    collect_fields,
    encode_field,
)

__all__ = [
    "DEFAULT_FORMAT",
    "DEFAULT_SOCKET_PATH",
    "EncodingError",
    "JournalConnectionError",
    "JournalError",
    "JournalField",
    "JournalHandler",
    "JournalSocket",
    "JournalWriteError",
    "LogEvent",
    "LogLevel",
    "RESERVED_FIELDS",
    "assemble",
    "collect_fields",
    "create_emit_event",
    "encode_field",
]
