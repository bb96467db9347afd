"""Metadata collector deriving additional journal fields.

Purpose
-------
Convert the caller's ``context`` and ``extra`` bags into the ordered list of
encoded fields that follow the mandatory triplet.

Contents
--------
* :func:`merge_metadata` - ordered merge of the two bags.
* :func:`exception_location` - source file/line of a raised exception.
* :func:`is_renderable` - closed check for values that have a text form.
* :func:`collect_fields` - the collector itself.

System Role
-----------
Pure domain logic used by :func:`lib_journal_native.domain.payload.assemble`.
Values that cannot be represented are dropped; the collector never raises
for caller metadata.
"""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
from enum import Enum
from typing import Any

from .encoding import encode_field
from .errors import EncodingError
from .fields import JournalField, is_reserved, is_valid_name

_SCALARS = (str, bytes, bytearray, memoryview, int, float, Decimal, Enum)
_CONTAINERS = (Mapping, list, tuple, set, frozenset)


def merge_metadata(context: Mapping[Any, Any], extra: Mapping[Any, Any]) -> dict[Any, Any]:
    """Merge ``extra`` into ``context`` keeping insertion order.

    Keys only present in one bag keep their position; colliding keys keep the
    position from ``context``. On collision two lists are concatenated, two
    mappings are merged recursively, and any other pair resolves to the
    ``extra`` value.

    Examples
    --------
    >>> merge_metadata({"tags": ["a"], "user": "x"}, {"tags": ["b"], "user": "y"})
    {'tags': ['a', 'b'], 'user': 'y'}
    """
    merged: dict[Any, Any] = dict(context)
    for key, value in extra.items():
        if key not in merged:
            merged[key] = value
            continue
        current = merged[key]
        if isinstance(current, list) and isinstance(value, list):
            merged[key] = [*current, *value]
        elif isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = merge_metadata(current, value)
        else:
            merged[key] = value
    return merged


def exception_location(error: BaseException) -> tuple[str, int] | None:
    """Return ``(file, line)`` where ``error`` was raised, if it was raised."""
    tb = error.__traceback__
    if tb is None:
        return None
    while tb.tb_next is not None:
        tb = tb.tb_next
    return tb.tb_frame.f_code.co_filename, tb.tb_lineno


def is_renderable(value: Any) -> bool:
    """Return ``True`` when ``value`` has a meaningful text or byte form.

    Scalars qualify, as do objects whose class overrides ``__str__``.
    ``None``, containers and plain objects do not.

    Examples
    --------
    >>> is_renderable(3.5), is_renderable("x"), is_renderable(None)
    (True, True, False)
    >>> is_renderable(["a"]), is_renderable(object())
    (False, False)
    """
    if value is None:
        return False
    if isinstance(value, _SCALARS):
        return True
    if isinstance(value, _CONTAINERS):
        return False
    return type(value).__str__ is not object.__str__


def collect_fields(context: Mapping[Any, Any], extra: Mapping[Any, Any]) -> list[bytes]:
    """Return the encoded additional fields for one event.

    The first exception found in merge order contributes ``CODE_FILE`` and
    ``CODE_LINE``; later exceptions are ignored. Other entries need a
    string key that, once uppercased, is a valid journal field name and not
    reserved, plus a renderable value. Entries whose value fails to encode
    are skipped.

    Examples
    --------
    >>> collect_fields({"request_id": "r-1"}, {"message": "spoof", "tags": ["x"]})
    [b'REQUEST_ID=r-1']
    """
    fields: list[bytes] = []
    collected_exception = False

    for key, value in merge_metadata(context, extra).items():
        if isinstance(value, BaseException):
            if collected_exception:
                continue
            collected_exception = True
            location = exception_location(value)
            if location is not None:
                path, line = location
                try:
                    code_file = encode_field(JournalField.CODE_FILE.value, path)
                except EncodingError:
                    continue
                fields.append(code_file)
                fields.append(encode_field(JournalField.CODE_LINE.value, line))
            continue

        if not isinstance(key, str) or not key:
            continue
        name = key.upper()
        if not is_valid_name(name) or is_reserved(name):
            continue
        if not is_renderable(value):
            continue
        try:
            fields.append(encode_field(name, value))
        except EncodingError:
            continue

    return fields


__all__ = ["collect_fields", "exception_location", "is_renderable", "merge_metadata"]
