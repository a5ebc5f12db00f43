"""
memrepo.repository.formatting

Conversion between datasets, (key, record) entries and output shapes.

Responsibilities:
- Enumerate the owned entries of a mapping or sequence dataset.
- Convert query results to the requested output shape.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator, Mapping, Sequence
from typing import Any

from memrepo.errors import DatasetTypeError, OutputShapeError
from memrepo.observability.logging import get_logger
from memrepo.repository.options import OutputShape

log = get_logger(__name__)

Entry = tuple[Hashable, Any]


def is_dataset(data: Any) -> bool:
    if isinstance(data, Mapping):
        return True
    return isinstance(data, Sequence) and not isinstance(data, (str, bytes, bytearray))


def iter_entries(data: Any) -> Iterator[Entry]:
    # Mapping keys or sequence indices, paired with their records.
    if isinstance(data, Mapping):
        return iter(data.items())
    if is_dataset(data):
        return iter(enumerate(data))
    raise DatasetTypeError(data)


def to_mapping(entries: Iterable[Entry]) -> dict[Hashable, Any]:
    return dict(entries)


def to_sequence(entries: Iterable[Entry]) -> list[Any]:
    return [record for _, record in entries]


def format_output(
    entries: Iterable[Entry], shape: OutputShape | str, *, strict: bool = False
) -> dict[Hashable, Any] | list[Any] | None:
    """
    Shape `entries` as a dict (source keys preserved) or a list (values only).

    An unknown shape is a caller configuration error: logged and answered with None,
    or raised as OutputShapeError when `strict` is set.
    """

    resolved = OutputShape.parse(shape)
    if resolved is OutputShape.mapping:
        return to_mapping(entries)
    if resolved is OutputShape.sequence:
        return to_sequence(entries)

    if strict:
        raise OutputShapeError(shape)
    log.warning("repository.invalid_output_shape", shape=str(shape))
    return None
