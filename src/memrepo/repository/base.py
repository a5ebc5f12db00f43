"""
memrepo.repository.base

Read-only repository over an in-memory dataset.

Responsibilities:
- Key lookup and single-record search by field.
- Bulk fetches by strict/loose equality and LIKE (regular expression) matching.
- Sorting by a (possibly nested) field.
- Resolving the per-call context and output shape.
"""

from __future__ import annotations

import re
from collections.abc import Hashable, Iterable, Mapping
from functools import cmp_to_key
from typing import Any

from memrepo.observability.logging import get_logger
from memrepo.repository.fields import get_field, resolve_path
from memrepo.repository.formatting import Entry, format_output, iter_entries
from memrepo.repository.matching import (
    compare_values,
    compile_like_pattern,
    like_matches,
    loose_equals,
    strict_equals,
)
from memrepo.repository.options import DIRECTION_ORDERING, QuerySettings, resolve_query_settings
from memrepo.settings import Settings, get_settings

log = get_logger(__name__)

SettingsArg = QuerySettings | Mapping[str, Any] | None


class Repository:
    """
    Wraps a mapping (key -> record) or a sequence of records.

    The repository never writes to the dataset. Subclasses typically add
    domain-named finders on top of the generic operations below.
    """

    def __init__(self, data: Any, *, settings: Settings | None = None) -> None:
        # Fail fast on datasets that cannot be enumerated.
        iter_entries(data)
        self._data = data
        self._settings = settings or get_settings()

    @property
    def data(self) -> Any:
        return self._data

    def find_by_id(self, key: Any) -> Any:
        # Always the instance's own dataset; a context override does not apply here.
        data = self._data
        if isinstance(data, Mapping):
            if isinstance(key, Hashable) and key in data:
                return data[key]
            return None
        if isinstance(key, int) and not isinstance(key, bool) and 0 <= key < len(data):
            return data[key]
        return None

    def find_by_field_strict(self, prop: Any, value: Any, settings: SettingsArg = None) -> Any:
        query = resolve_query_settings(settings)
        for _, record in iter_entries(self._context(query)):
            if strict_equals(get_field(record, prop), value):
                return record
        return None

    def fetch_all(self, settings: SettingsArg = None):
        query = resolve_query_settings(settings)
        entries = list(iter_entries(self._context(query)))
        return self._output("fetch_all", entries, query)

    def fetch_by_field_strict(self, prop: Any, value: Any, settings: SettingsArg = None):
        """
        All records whose `prop` loosely equals `value` ("1" matches 1).
        """

        query = resolve_query_settings(settings)
        matches = [
            (key, record)
            for key, record in iter_entries(self._context(query))
            if loose_equals(get_field(record, prop), value)
        ]
        return self._output("fetch_by_field_strict", matches, query)

    def fetch_by_field_with_like(
        self, prop: Any, pattern: str | re.Pattern[str], settings: SettingsArg = None
    ):
        query = resolve_query_settings(settings)
        regex = compile_like_pattern(pattern)
        matches = [
            (key, record)
            for key, record in iter_entries(self._context(query))
            if like_matches(get_field(record, prop), regex)
        ]
        return self._output("fetch_by_field_with_like", matches, query)

    def fetch_by_many_fields_with_like(
        self,
        props: Iterable[Any],
        pattern: str | re.Pattern[str],
        settings: SettingsArg = None,
    ):
        """
        Records where any of `props` matches `pattern`; each record is returned once.
        """

        query = resolve_query_settings(settings)
        regex = compile_like_pattern(pattern)
        fields = [props] if isinstance(props, str) else list(props)

        matches: list[Entry] = []
        for key, record in iter_entries(self._context(query)):
            if record is None:
                continue
            if any(like_matches(get_field(record, prop), regex) for prop in fields):
                matches.append((key, record))
        return self._output("fetch_by_many_fields_with_like", matches, query)

    def filter(self, path: str, settings: SettingsArg = None):
        """
        All records sorted by the value at dot-notation `path`.

        The sort is stable. Records whose path does not resolve, or resolves to None,
        go last in both directions. Numbers sort before strings.
        """

        query = resolve_query_settings(settings)
        ordering = DIRECTION_ORDERING[query.sort.direction]

        decorated = [
            (resolve_path(record, path), key, record)
            for key, record in iter_entries(self._context(query))
        ]
        decorated.sort(key=cmp_to_key(lambda a, b: compare_values(a[0], b[0], ordering)))
        return self._output("filter", [(key, record) for _, key, record in decorated], query)

    def _context(self, query: QuerySettings) -> Any:
        # An override replaces the dataset for this call; it is never merged with it.
        return self._data if query.context is None else query.context

    def _output(self, operation: str, entries: list[Entry], query: QuerySettings):
        log.debug(
            "repository.query",
            operation=operation,
            matched=len(entries),
            output_shape=str(query.output_shape),
            context_override=query.context is not None,
        )
        return format_output(
            entries, query.output_shape, strict=self._settings.strict_output_shape
        )


# --- Module Notes -----------------------------------------------------------
# Operations are single-pass scans over data already in memory; there is no index
# or cache, so results always reflect the dataset as it is at call time.
