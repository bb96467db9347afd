"""Shutdown orchestration for journal delivery."""

from __future__ import annotations

from typing import Callable

from lib_journal_native.application.ports import TransportPort


def create_shutdown(*, transport: TransportPort | None) -> Callable[[], None]:
    """Return a callable releasing ``transport``."""

    def shutdown() -> None:
        """Close the transport handle if one is configured."""
        if transport is not None:
            transport.shutdown()

    return shutdown


__all__ = ["create_shutdown"]
