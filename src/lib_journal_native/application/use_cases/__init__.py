"""Use cases orchestrating domain logic and ports."""

from __future__ import annotations

from .emit_event import EmitCallable, create_emit_event
from .shutdown import create_shutdown

__all__ = ["EmitCallable", "create_emit_event", "create_shutdown"]
