"""Protocols the application layer depends on."""

from __future__ import annotations

from .transport import TransportPort

__all__ = ["TransportPort"]
