"""
memrepo.repository

Repository package.

Responsibilities:
- Group the in-memory repository and the helpers it is built from.
"""

from memrepo.repository.base import Repository
from memrepo.repository.options import (
    DIRECTION_ORDERING,
    OutputShape,
    QuerySettings,
    SortDirection,
    SortSettings,
    resolve_query_settings,
)

__all__ = [
    "DIRECTION_ORDERING",
    "OutputShape",
    "QuerySettings",
    "Repository",
    "SortDirection",
    "SortSettings",
    "resolve_query_settings",
]
