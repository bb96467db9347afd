"""Message assembler producing one journal datagram.

The mandatory triplet always comes first and in this order: ``MESSAGE``,
``PRIORITY``, ``SYSLOG_IDENTIFIER``. Collected metadata fields follow. Fields
are joined by a line feed and the payload ends with one.
"""

from __future__ import annotations

from .encoding import encode_field
from .events import LogEvent
from .fields import JournalField
from .metadata import collect_fields


def assemble_fields(event: LogEvent) -> list[bytes]:
    """Return the encoded fields of ``event`` in wire order.

    Raises
    ------
    EncodingError
        If one of the mandatory fields cannot be encoded.
    """
    fields = [
        encode_field(JournalField.MESSAGE.value, event.message),
        encode_field(JournalField.PRIORITY.value, event.level.syslog_priority),
        encode_field(JournalField.SYSLOG_IDENTIFIER.value, event.channel),
    ]
    fields.extend(collect_fields(event.context, event.extra))
    return fields


def assemble(event: LogEvent) -> bytes:
    """Return the complete datagram payload for ``event``.

    Examples
    --------
    >>> from lib_journal_native.domain.levels import LogLevel
    >>> assemble(LogEvent("Hello", LogLevel.INFO, "MyLogger"))
    b'MESSAGE=Hello\\nPRIORITY=6\\nSYSLOG_IDENTIFIER=MyLogger\\n'
    """
    return b"\n".join(assemble_fields(event)) + b"\n"


__all__ = ["assemble", "assemble_fields"]
