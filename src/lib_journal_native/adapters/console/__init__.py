"""Console adapters."""

from __future__ import annotations

from .rich_payload import PayloadConsoleAdapter, split_field

__all__ = ["PayloadConsoleAdapter", "split_field"]
