"""Field encoder for the journal native protocol.

Purpose
-------
Turn one ``(name, value)`` pair into the bytes of a single journal field.

Contents
--------
* :func:`encode_field` - plain ``NAME=VALUE`` or length-framed encoding.
* :func:`render_value` - scalar/text coercion shared with the collector.

System Role
-----------
Leaf of the domain layer; no state and no I/O. See
https://systemd.io/JOURNAL_NATIVE_PROTOCOL for the framing rules.
"""

from __future__ import annotations

import struct
from typing import Any

from .errors import EncodingError
from .fields import is_valid_name

_LENGTH = struct.Struct("<Q")
#: Unsigned 64-bit little-endian length prefix of framed values.


def render_value(value: Any) -> bytes:
    """Return the raw bytes of ``value`` as they will appear on the wire.

    Text is encoded as UTF-8, bytes pass through unchanged, anything else goes
    through ``str()``; booleans therefore read ``True``/``False``.

    Raises
    ------
    EncodingError
        If ``value`` is ``None``, its ``__str__`` fails, or its text cannot be
        encoded as UTF-8.

    Examples
    --------
    >>> render_value(42)
    b'42'
    >>> render_value(b"raw")
    b'raw'
    """
    if value is None:
        raise EncodingError("None cannot be encoded as a journal value")
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    try:
        text = value if isinstance(value, str) else str(value)
    except Exception as exc:
        raise EncodingError(f"could not render {type(value).__name__} as text") from exc
    try:
        return text.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise EncodingError(f"value is not valid UTF-8 text: {exc.reason}") from exc


def encode_field(name: str, value: Any) -> bytes:
    """Encode one journal field.

    Values without a line feed use the plain ``NAME=VALUE`` form. Values with
    one or more line feeds use the framed form: ``NAME``, a line feed, the
    value length as 8 little-endian bytes, then the value bytes.

    Examples
    --------
    >>> encode_field("MESSAGE", "Hello")
    b'MESSAGE=Hello'
    >>> encode_field("MESSAGE", "a\\nb")
    b'MESSAGE\\n\\x03\\x00\\x00\\x00\\x00\\x00\\x00\\x00a\\nb'
    """
    if not is_valid_name(name):
        raise EncodingError(f"invalid journal field name: {name!r}")
    raw = render_value(value)
    key = name.encode("ascii")
    if b"\n" not in raw:
        return key + b"=" + raw
    return key + b"\n" + _LENGTH.pack(len(raw)) + raw


__all__ = ["encode_field", "render_value"]
