"""Port describing the datagram transport to the journal."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class TransportPort(Protocol):
    """Deliver whole payloads as single datagrams to one local endpoint."""

    def ensure_connected(self) -> None:
        """Open and connect the endpoint unless already connected."""

    def send(self, payload: bytes) -> None:
        """Write ``payload`` as one datagram; requires a connection."""

    def is_connected(self) -> bool:
        """Return ``True`` while a connected handle is held."""

    def shutdown(self) -> None:
        """Release the handle; safe to call repeatedly."""


__all__ = ["TransportPort"]
