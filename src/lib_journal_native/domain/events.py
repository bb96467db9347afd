"""Domain event describing one log entry bound for the journal.

Purpose
-------
Provide the immutable value the assembler consumes: the already formatted
message, its severity, the originating channel and two metadata bags.

Contents
--------
* :class:`LogEvent` dataclass with helper constructors.
* ``_RECORD_ATTRIBUTES`` - attribute names every :class:`logging.LogRecord` has.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Mapping

from .levels import LogLevel

_RECORD_ATTRIBUTES = frozenset(logging.LogRecord("", 0, "", 0, "", (), None).__dict__) | {"message", "asctime"}


@dataclass(slots=True, frozen=True)
class LogEvent:
    """Immutable log event handed to the assembler.

    Attributes
    ----------
    message:
        Fully formatted, human readable text.
    level:
        :class:`LogLevel` severity of the event.
    channel:
        Logger or process identifier, sent as ``SYSLOG_IDENTIFIER``.
    context:
        Caller metadata; entries precede ``extra`` entries.
    extra:
        Metadata added by the dispatch layer.
    """

    message: str
    level: LogLevel
    channel: str
    context: Mapping[Any, Any] = field(default_factory=dict)
    extra: Mapping[Any, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "context", dict(self.context))
        object.__setattr__(self, "extra", dict(self.extra))

    @classmethod
    def from_record(cls, record: logging.LogRecord, *, message: str | None = None) -> "LogEvent":
        """Build an event from a stdlib :class:`logging.LogRecord`.

        ``context`` receives the attributes the caller attached through
        ``extra=``; ``extra`` receives the logged exception, if any.

        Examples
        --------
        >>> record = logging.LogRecord("app", logging.WARNING, __file__, 1, "hi %s", ("there",), None)
        >>> record.request_id = "r-1"
        >>> event = LogEvent.from_record(record)
        >>> event.message, event.level, event.channel, event.context
        ('hi there', <LogLevel.WARNING: 30>, 'app', {'request_id': 'r-1'})
        """
        context = {key: value for key, value in record.__dict__.items() if key not in _RECORD_ATTRIBUTES}
        extra: dict[str, Any] = {}
        if record.exc_info and record.exc_info[1] is not None:
            extra["exception"] = record.exc_info[1]
        return cls(
            message=record.getMessage() if message is None else message,
            level=LogLevel.from_python_level(record.levelno),
            channel=record.name,
            context=context,
            extra=extra,
        )

    def replace(self, **changes: Any) -> "LogEvent":
        """Return a copied event with ``changes`` applied."""

        return replace(self, **changes)


__all__ = ["LogEvent"]
