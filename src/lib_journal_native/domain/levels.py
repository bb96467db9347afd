"""Log level abstraction mapping application severities onto syslog priorities.

Purpose
-------
Offer a domain-specific representation of the eight conventional application
severities and the exact correspondence to the syslog priority scale used by
the journal's ``PRIORITY`` field.

Contents
--------
* :class:`LogLevel` enum with conversion helpers.
* ``_SYSLOG_TABLE`` constant mapping levels to syslog priorities.

System Role
-----------
Used by the message assembler to derive ``PRIORITY`` and by the logging
handler to translate stdlib ``levelno`` values.
"""

from __future__ import annotations

import logging
from enum import Enum

class LogLevel(Enum):
    """Enumerated logging levels, lowest severity first.

    Values line up with :mod:`logging` where the stdlib defines the level;
    ``NOTICE``, ``ALERT`` and ``EMERGENCY`` sit in the gaps above.
    """

    DEBUG = 10
    INFO = 20
    NOTICE = 25
    WARNING = 30
    ERROR = 40
    CRITICAL = 50
    ALERT = 60
    EMERGENCY = 70

    @property
    def severity(self) -> str:
        """Return the lowercase severity name."""

        return self.name.lower()

    @property
    def ordinal(self) -> int:
        """Return the position on the 0..7 application scale (0 = debug)."""

        return _ORDER.index(self)

    @property
    def syslog_priority(self) -> int:
        """Return the syslog priority (0 = emergency .. 7 = debug)."""

        return _SYSLOG_TABLE[self]

    def to_python_level(self) -> int:
        """Return the :mod:`logging` level number for this level."""

        return self.value

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        normalized = name.strip().upper()
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown log level: {name!r}") from exc

    @classmethod
    def from_numeric(cls, level: int) -> "LogLevel":
        """Return the :class:`LogLevel` whose value is exactly ``level``."""
        try:
            return cls(level)
        except ValueError as exc:
            raise ValueError(f"Unsupported log level numeric: {level}") from exc

    @classmethod
    def from_ordinal(cls, ordinal: int) -> "LogLevel":
        """Return the level at ``ordinal`` on the 0..7 scale."""
        if not 0 <= ordinal < len(_ORDER):
            raise ValueError(f"Log level ordinal out of range: {ordinal}")
        return _ORDER[ordinal]

    @classmethod
    def from_python_level(cls, level: int) -> "LogLevel":
        """Translate any stdlib ``levelno`` into the closest level at or below it.

        Custom levels between the named ones are floored, values under
        ``DEBUG`` become ``DEBUG`` and values above ``EMERGENCY`` stay
        ``EMERGENCY``.

        Examples
        --------
        >>> LogLevel.from_python_level(logging.WARNING) is LogLevel.WARNING
        True
        >>> LogLevel.from_python_level(5) is LogLevel.DEBUG
        True
        >>> LogLevel.from_python_level(45) is LogLevel.ERROR
        True
        """
        resolved = cls.DEBUG
        for candidate in _ORDER:
            if candidate.value <= level:
                resolved = candidate
        return resolved


_ORDER: tuple[LogLevel, ...] = tuple(LogLevel)

_SYSLOG_TABLE = {
    LogLevel.DEBUG: 7,
    LogLevel.INFO: 6,
    LogLevel.NOTICE: 5,
    LogLevel.WARNING: 4,
    LogLevel.ERROR: 3,
    LogLevel.CRITICAL: 2,
    LogLevel.ALERT: 1,
    LogLevel.EMERGENCY: 0,
}
#: RFC 5424 numeric priorities per level.


__all__ = ["LogLevel"]
