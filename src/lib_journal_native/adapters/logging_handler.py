"""Stdlib logging handler writing records to the journal.

Purpose
-------
Let applications attach journal delivery to :mod:`logging` without any native
extension: records are formatted, turned into :class:`LogEvent` values,
encoded, and written as raw protocol datagrams.

Contents
--------
* :data:`DEFAULT_FORMAT` - message template used when no formatter is set.
* :class:`JournalHandler` - the :class:`logging.Handler` subclass.

System Role
-----------
Dispatch layer: level gating, filtering and formatting stay with
:mod:`logging`; delivery goes through
:func:`lib_journal_native.application.use_cases.create_emit_event`.

Message Text
------------
:data:`DEFAULT_FORMAT` renders only the level name and the message. The
caller's ``extra=`` attributes and the exception location travel as
separate journal fields instead of being repeated in ``MESSAGE``; set a
custom formatter to include them in the text as well.
"""

from __future__ import annotations

import logging

from lib_journal_native.application.ports import TransportPort
from lib_journal_native.application.use_cases import create_emit_event, create_shutdown
from lib_journal_native.domain import LogEvent

from .journal_socket import DEFAULT_SOCKET_PATH, JournalSocket

DEFAULT_FORMAT = "%(levelname)s: %(message)s"

_PACKAGE_LOGGER = __name__.split(".")[0]


class JournalHandler(logging.Handler):
    """Send log records to systemd-journald over its native socket.

    Exceptions attached to a record (``logger.exception(...)``) add
    ``CODE_FILE``/``CODE_LINE`` pointing at the raising frame; attributes
    passed through ``extra=`` become uppercase journal fields.

    Examples
    --------
    >>> sent = []
    >>> class MemoryTransport:
    ...     def ensure_connected(self): pass
    ...     def send(self, payload): sent.append(payload)
    ...     def is_connected(self): return True
    ...     def shutdown(self): pass
    >>> handler = JournalHandler(transport=MemoryTransport())
    >>> record = logging.LogRecord("MyLogger", logging.INFO, __file__, 1, "Hello", (), None)
    >>> handler.emit(record)
    >>> sent[0]
    b'MESSAGE=INFO: Hello\\nPRIORITY=6\\nSYSLOG_IDENTIFIER=MyLogger\\n'
    """

    def __init__(
        self,
        path: str = DEFAULT_SOCKET_PATH,
        level: int | str = logging.NOTSET,
        *,
        transport: TransportPort | None = None,
    ) -> None:
        """Create the handler; the socket is opened on the first record."""
        super().__init__(level)
        self._transport = transport if transport is not None else JournalSocket(path)
        self._emit = create_emit_event(transport=self._transport)
        self._shutdown = create_shutdown(transport=self._transport)
        self._default_formatter = logging.Formatter(DEFAULT_FORMAT)

    @property
    def transport(self) -> TransportPort:
        return self._transport

    def is_connected(self) -> bool:
        return self._transport.is_connected()

    def format(self, record: logging.LogRecord) -> str:
        formatter = self.formatter or self._default_formatter
        return formatter.format(record)

    def emit(self, record: logging.LogRecord) -> None:
        """Deliver ``record``; failures go to :meth:`logging.Handler.handleError`."""
        if record.name == _PACKAGE_LOGGER or record.name.startswith(_PACKAGE_LOGGER + "."):
            return
        try:
            event = LogEvent.from_record(record, message=self.format(record))
            self._emit(event)
        except Exception:
            self.handleError(record)

    def close(self) -> None:
        self.acquire()
        try:
            self._shutdown()
        finally:
            self.release()
        super().close()


__all__ = ["DEFAULT_FORMAT", "JournalHandler"]
