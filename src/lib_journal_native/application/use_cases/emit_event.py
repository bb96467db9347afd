"""Use case delivering a single log event to the journal.

Purpose
-------
Tie the message assembler to a transport: build the payload fully in memory,
then connect lazily and write one datagram.

Contents
--------
* :func:`create_emit_event` factory returning the runtime callable.

System Role
-----------
Application-layer orchestrator invoked by
:class:`lib_journal_native.adapters.logging_handler.JournalHandler` and the CLI.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from lib_journal_native.application.ports import TransportPort
from lib_journal_native.domain import JournalError, LogEvent, assemble

logger = logging.getLogger(__name__)

EmitCallable = Callable[[LogEvent], int]


def create_emit_event(*, transport: TransportPort) -> EmitCallable:
    """Build the delivery callable bound to ``transport``.

    Parameters
    ----------
    transport:
        Adapter implementing :class:`TransportPort`.

    Returns
    -------
    Callable[[LogEvent], int]
        Function delivering one event and returning the payload size in bytes.
        Journal errors propagate unchanged; nothing is retried.

    Examples
    --------
    >>> class MemoryTransport:
    ...     def __init__(self):
    ...         self.connected = False
    ...         self.sent = []
    ...     def ensure_connected(self):
    ...         self.connected = True
    ...     def send(self, payload):
    ...         self.sent.append(payload)
    ...     def is_connected(self):
    ...         return self.connected
    ...     def shutdown(self):
    ...         self.connected = False
    >>> from lib_journal_native.domain import LogLevel
    >>> transport = MemoryTransport()
    >>> emit = create_emit_event(transport=transport)
    >>> emit(LogEvent("Hello", LogLevel.INFO, "MyLogger"))
    52
    >>> transport.sent[0]
    b'MESSAGE=Hello\\nPRIORITY=6\\nSYSLOG_IDENTIFIER=MyLogger\\n'
    """

    def emit(event: LogEvent) -> int:
        """Assemble ``event`` and write it as one datagram."""
        payload = assemble(event)
        try:
            transport.ensure_connected()
            transport.send(payload)
        except JournalError as exc:
            logger.debug("journal delivery failed for %s: %s", event.channel, exc)
            raise
        return len(payload)

    return emit


__all__ = ["EmitCallable", "create_emit_event"]
