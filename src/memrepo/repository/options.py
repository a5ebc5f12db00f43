"""
memrepo.repository.options

Per-call query settings.

Responsibilities:
- Define the output shapes and sort directions a query understands.
- Merge caller-supplied settings over fixed defaults (including nested `sort`).
"""

from __future__ import annotations

import enum
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class OutputShape(enum.StrEnum):
    mapping = "mapping"
    sequence = "sequence"

    @classmethod
    def parse(cls, value: Any) -> OutputShape | None:
        # `dict` / `list` are accepted as type markers for the two shapes.
        if value is dict:
            return cls.mapping
        if value is list:
            return cls.sequence
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


class SortDirection(enum.StrEnum):
    asc = "asc"
    desc = "desc"

    @classmethod
    def parse(cls, value: Any) -> SortDirection:
        # Anything that is not a known direction sorts ascending.
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        return cls.asc


# Comparator results for (left < right, left > right).
DIRECTION_ORDERING: dict[SortDirection, tuple[int, int]] = {
    SortDirection.asc: (-1, 1),
    SortDirection.desc: (1, -1),
}


class SortSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    direction: SortDirection = SortDirection.asc

    @field_validator("direction", mode="before")
    @classmethod
    def _parse_direction(cls, value: Any) -> SortDirection:
        return SortDirection.parse(value)


class QuerySettings(BaseModel):
    """
    Options for a single repository call.

    - `output_shape` (alias `format`): "mapping" (default) or "sequence". Unknown values
      are kept as-is so the formatter can report them.
    - `context`: a dataset queried instead of the repository's own one, for this call only.
    - `sort.direction`: "asc" (default) or "desc".
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="ignore",
    )

    output_shape: OutputShape | str = Field(default=OutputShape.mapping, alias="format")
    # Typed as Any so pydantic keeps the caller's object instead of copying it.
    context: Any = None
    sort: SortSettings = Field(default_factory=SortSettings)

    @field_validator("output_shape", mode="before")
    @classmethod
    def _normalize_shape(cls, value: Any) -> OutputShape | str:
        shape = OutputShape.parse(value)
        if shape is not None:
            return shape
        return value if isinstance(value, str) else repr(value)

    @field_validator("sort", mode="before")
    @classmethod
    def _default_sort(cls, value: Any) -> Any:
        return SortSettings() if value is None else value


DEFAULT_QUERY_SETTINGS = QuerySettings()


def resolve_query_settings(settings: QuerySettings | Mapping[str, Any] | None) -> QuerySettings:
    if settings is None:
        return DEFAULT_QUERY_SETTINGS
    if isinstance(settings, QuerySettings):
        return settings
    if isinstance(settings, Mapping):
        return QuerySettings.model_validate(dict(settings))
    raise TypeError(
        f"settings must be QuerySettings, a mapping or None, got {type(settings).__name__}"
    )


# --- Module Notes -----------------------------------------------------------
# Validation fills nested defaults field by field, so `{"sort": {}}` still sorts ascending.
