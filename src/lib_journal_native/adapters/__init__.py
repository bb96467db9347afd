"""Adapters connecting the application layer to sockets, logging and consoles."""

from __future__ import annotations

from .console import PayloadConsoleAdapter
from .journal_socket import DEFAULT_SOCKET_PATH, JournalSocket
from .logging_handler import DEFAULT_FORMAT, JournalHandler

__all__ = [
    "DEFAULT_FORMAT",
    "DEFAULT_SOCKET_PATH",
    "JournalHandler",
    "JournalSocket",
    "PayloadConsoleAdapter",
]
