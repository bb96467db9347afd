"""Static package metadata surfaced by the CLI banner."""

from __future__ import annotations

from typing import Callable

name = "lib_journal_native"
title = "Structured logging to systemd-journald over the native socket protocol"
version = "0.1.0"
shell_command = "lib_journal_native"


def print_info(writer: Callable[[str], None] = print) -> None:
    """Write the metadata banner through ``writer``.

    Examples
    --------
    >>> print_info(writer=lambda text: print(text, end=""))  # doctest: +ELLIPSIS
    Info for lib_journal_native:
    ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:\n", "\n"]
    lines.extend(f"    {label.ljust(pad)} = {value}\n" for label, value in fields)
    writer("".join(lines))


__all__ = ["print_info"]
