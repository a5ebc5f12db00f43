"""
memrepo.repository.fields

Field access on records.

Responsibilities:
- Read a single named field from a mapping, sequence or plain object record.
- Walk dot-notation paths ("a.b.c") through nested records.
"""

from __future__ import annotations

from collections.abc import Hashable, Mapping, Sequence
from typing import Any, Final


class _Missing:
    """
    Marker for "no value at this field"; distinct from a stored None.
    """

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Final = _Missing()

_SCALARS = (str, bytes, bytearray, int, float, complex)


def _as_index(name: Any) -> int | None:
    if isinstance(name, bool):
        return None
    if isinstance(name, int):
        return name
    if isinstance(name, str) and name.isdigit():
        return int(name)
    return None


def get_field(record: Any, name: Any) -> Any:
    if record is None or record is MISSING or isinstance(record, _SCALARS):
        return MISSING

    if isinstance(record, Mapping):
        if isinstance(name, Hashable) and name in record:
            return record[name]
        # Path segments are strings; integer-keyed mappings are still reachable.
        index = _as_index(name)
        if index is not None and index in record:
            return record[index]
        return MISSING

    if isinstance(record, Sequence):
        index = _as_index(name)
        if index is None or index < 0 or index >= len(record):
            return MISSING
        return record[index]

    if isinstance(name, str) and name and not name.startswith("_"):
        return getattr(record, name, MISSING)
    return MISSING


def resolve_path(record: Any, path: Any) -> Any:
    """
    Resolve `path` against `record`, one dot-separated segment at a time.

    A broken intermediate step yields MISSING rather than raising.
    """

    segments = path.split(".") if isinstance(path, str) else [path]
    value = record
    for segment in segments:
        value = get_field(value, segment)
        if value is MISSING:
            break
    return value
