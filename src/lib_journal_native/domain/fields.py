"""Field names with protocol-defined meaning.

Purpose
-------
Keep the reserved-name set in one place so the assembler and the metadata
collector agree on which names caller metadata may never supply.

Contents
--------
* :class:`JournalField` - the reserved names as an enum.
* :data:`RESERVED_FIELDS` - frozen set of the reserved names.
* :func:`is_reserved` - membership check.
* :func:`is_valid_name` - journal field name syntax check.
"""

from __future__ import annotations

import re
from enum import Enum


class JournalField(str, Enum):
    """Field names owned by this package rather than by caller metadata."""

    MESSAGE = "MESSAGE"
    PRIORITY = "PRIORITY"
    SYSLOG_IDENTIFIER = "SYSLOG_IDENTIFIER"
    CODE_FILE = "CODE_FILE"
    CODE_LINE = "CODE_LINE"


RESERVED_FIELDS: frozenset[str] = frozenset(field.value for field in JournalField)

_NAME_PATTERN = re.compile(r"[A-Z][A-Z0-9_]{0,63}")
#: Uppercase ASCII letter first, then letters, digits or underscores; 64 bytes at most.


def is_reserved(name: str) -> bool:
    """Return ``True`` when ``name`` (already uppercased) is reserved.

    Examples
    --------
    >>> is_reserved("MESSAGE")
    True
    >>> is_reserved("REQUEST_ID")
    False
    """
    return name in RESERVED_FIELDS


def is_valid_name(name: str) -> bool:
    """Return ``True`` when ``name`` is a field name journald accepts from clients.

    Names starting with ``_`` are trusted fields set by journald itself.

    Examples
    --------
    >>> is_valid_name("REQUEST_ID"), is_valid_name("_PID"), is_valid_name("A=B")
    (True, False, False)
    """
    return _NAME_PATTERN.fullmatch(name) is not None


__all__ = ["JournalField", "RESERVED_FIELDS", "is_reserved", "is_valid_name"]
