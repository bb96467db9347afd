"""Datagram transport to the systemd journal socket.

Purpose
-------
Own one ``AF_UNIX``/``SOCK_DGRAM`` socket connected to the journal's native
endpoint and write one datagram per log event.

Contents
--------
* :data:`DEFAULT_SOCKET_PATH` - journald's native protocol socket.
* :class:`JournalSocket` - concrete :class:`TransportPort` implementation.

System Role
-----------
Outermost I/O edge. Connection happens lazily through
:meth:`JournalSocket.ensure_connected`; :meth:`JournalSocket.send` never
reconnects on its own.

Thread Safety
-------------
No internal locking. Callers writing from several threads must serialise
access themselves; :class:`logging.Handler` already does so via its lock.
"""

from __future__ import annotations

import logging
import socket
from typing import Callable

from lib_journal_native.application.ports.transport import TransportPort
from lib_journal_native.domain.errors import JournalConnectionError, JournalWriteError

logger = logging.getLogger(__name__)

DEFAULT_SOCKET_PATH = "/run/systemd/journal/socket"

SocketFactory = Callable[[int, int], socket.socket]


class JournalSocket(TransportPort):
    """Connectionless local socket bound to a single journal endpoint.

    Examples
    --------
    >>> transport = JournalSocket("/nonexistent/journal.sock")
    >>> transport.is_connected()
    False
    >>> transport.shutdown()
    >>> transport.is_connected()
    False
    """

    def __init__(self, path: str = DEFAULT_SOCKET_PATH, *, socket_factory: SocketFactory | None = None) -> None:
        """Remember the endpoint; no socket is created until first use."""
        self._path = path
        self._socket_factory = socket_factory or socket.socket
        self._socket: socket.socket | None = None
        self._connected = False

    @property
    def path(self) -> str:
        """Filesystem path of the journal endpoint."""
        return self._path

    def is_connected(self) -> bool:
        return self._socket is not None and self._connected

    def ensure_connected(self) -> None:
        """Create and connect the socket unless already connected.

        Raises
        ------
        JournalConnectionError
            If the socket cannot be created or the endpoint refuses the
            connection. The instance stays disconnected.
        """
        if self.is_connected():
            return
        try:
            sock = self._socket_factory(socket.AF_UNIX, socket.SOCK_DGRAM)
        except OSError as exc:
            raise JournalConnectionError(f"failed to create journal socket: {exc}") from exc
        try:
            sock.connect(self._path)
        except OSError as exc:
            sock.close()
            raise JournalConnectionError(f"failed to connect to journal socket {self._path}: {exc}") from exc
        self._socket = sock
        self._connected = True
        logger.debug("connected to journal socket %s", self._path)

    def send(self, payload: bytes) -> None:
        """Write ``payload`` as one datagram.

        Raises
        ------
        JournalConnectionError
            If :meth:`ensure_connected` has not succeeded since construction
            or the last :meth:`shutdown`.
        JournalWriteError
            If the operating system rejects the datagram. The connection is
            left as it is.
        """
        if self._socket is None or not self._connected:
            raise JournalConnectionError("journal socket is not connected")
        try:
            self._socket.send(payload)
        except OSError as exc:
            raise JournalWriteError(f"failed to write to journal socket {self._path}: {exc}") from exc

    def shutdown(self) -> None:
        """Close the socket if open and return to the disconnected state."""
        sock, self._socket = self._socket, None
        self._connected = False
        if sock is not None:
            sock.close()
            logger.debug("closed journal socket %s", self._path)

    def __enter__(self) -> "JournalSocket":
        return self

    def __exit__(self, *_exc_info: object) -> None:
        self.shutdown()


__all__ = ["DEFAULT_SOCKET_PATH", "JournalSocket", "SocketFactory"]
