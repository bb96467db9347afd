"""Domain values and pure encoding logic for journal entries."""

from __future__ import annotations

from .encoding import encode_field, render_value
from .errors import EncodingError, JournalConnectionError, JournalError, JournalWriteError
from .events import LogEvent
from .fields import RESERVED_FIELDS, JournalField, is_reserved, is_valid_name
from .levels import LogLevel
from .metadata import collect_fields, exception_location, is_renderable, merge_metadata
from .payload import assemble, assemble_fields

__all__ = [
    "EncodingError",
    "JournalConnectionError",
    "JournalError",
    "JournalField",
    "JournalWriteError",
    "LogEvent",
    "LogLevel",
    "RESERVED_FIELDS",
    "assemble",
    "assemble_fields",
    "collect_fields",
    "encode_field",
    "exception_location",
    "is_renderable",
    "is_reserved",
    "is_valid_name",
    "merge_metadata",
    "render_value",
]
