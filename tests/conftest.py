from __future__ import annotations

from typing import Any, Callable

import pytest

from lib_journal_native.domain.events import LogEvent
from lib_journal_native.domain.levels import LogLevel


@pytest.fixture
def event_factory() -> Callable[..., LogEvent]:
    """Return a builder producing events with overridable defaults."""

    def _factory(**overrides: Any) -> LogEvent:
        data: dict[str, Any] = {
            "message": "Hello",
            "level": LogLevel.INFO,
            "channel": "MyLogger",
            "context": {},
            "extra": {},
        }
        data.update(overrides)
        return LogEvent(**data)

    return _factory


@pytest.fixture
def raised_error() -> ValueError:
    """Return an exception that has actually been raised (carries a traceback)."""
    try:
        raise ValueError("boom")
    except ValueError as exc:
        return exc
