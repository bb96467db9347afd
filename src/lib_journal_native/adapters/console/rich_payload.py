"""Rich-powered preview of assembled journal fields.

Purpose
-------
Show operators exactly which fields an event turns into, including which
values need the length-framed encoding, without touching the socket.

Contents
--------
* :data:`_STYLE_MAP` - default level-to-style mapping.
* :func:`split_field` - recover name, framing and value of one encoded field.
* :class:`PayloadConsoleAdapter` - renders an event as a Rich table.
"""

from __future__ import annotations

import struct
from typing import Mapping

from rich.console import Console
from rich.table import Table
from rich.text import Text

from lib_journal_native.domain import LogEvent, LogLevel, assemble_fields

_STYLE_MAP: Mapping[LogLevel, str] = {
    LogLevel.DEBUG: "dim",
    LogLevel.INFO: "cyan",
    LogLevel.NOTICE: "green",
    LogLevel.WARNING: "yellow",
    LogLevel.ERROR: "red",
    LogLevel.CRITICAL: "bold red",
    LogLevel.ALERT: "bold white on red",
    LogLevel.EMERGENCY: "bold white on red3",
}

#: Default Rich styles keyed by :class:`LogLevel` severity.


def split_field(field: bytes) -> tuple[str, bool, bytes]:
    """Return ``(name, framed, value)`` for one encoded field.

    Examples
    --------
    >>> split_field(b"PRIORITY=6")
    ('PRIORITY', False, b'6')
    >>> split_field(b"MESSAGE\\n" + (3).to_bytes(8, "little") + b"a\\nb")
    ('MESSAGE', True, b'a\\nb')
    """
    name, sep, rest = field.partition(b"=")
    if sep and b"\n" not in name:
        return name.decode("ascii"), False, rest
    name, _, rest = field.partition(b"\n")
    (length,) = struct.unpack_from("<Q", rest)
    return name.decode("ascii"), True, rest[8 : 8 + length]


class PayloadConsoleAdapter:
    """Render the fields of a log event with Rich."""

    def __init__(self, *, console: Console | None = None, no_color: bool = False) -> None:
        self._console = console if console is not None else Console(no_color=no_color)
        self._no_color = no_color

    def render(self, event: LogEvent) -> Table:
        """Return a table listing every field ``event`` would send.

        Examples
        --------
        >>> table = PayloadConsoleAdapter().render(LogEvent("Hello", LogLevel.INFO, "app"))
        >>> table.row_count
        3
        """
        style = "" if self._no_color else _STYLE_MAP.get(event.level, "")
        table = Table(title=Text(f"{event.channel} ({event.level.severity})", style=style))
        table.add_column("Field", style="bold")
        table.add_column("Encoding")
        table.add_column("Bytes", justify="right")
        table.add_column("Value", overflow="fold")
        for field in assemble_fields(event):
            name, framed, value = split_field(field)
            table.add_row(
                Text(name),
                "framed" if framed else "plain",
                str(len(value)),
                Text(value.decode("utf-8", errors="replace")),
            )
        return table

    def emit(self, event: LogEvent) -> None:
        """Print the field table for ``event``."""
        self._console.print(self.render(event))


__all__ = ["PayloadConsoleAdapter", "split_field"]
