"""
memrepo

Top-level package for the in-memory dataset repository.

Responsibilities:
- Expose package version metadata.
- Re-export the public query surface (`Repository`, `QuerySettings` and friends).
"""

from memrepo.errors import DatasetTypeError, OutputShapeError, PatternError, RepositoryError
from memrepo.repository import (
    OutputShape,
    QuerySettings,
    Repository,
    SortDirection,
    SortSettings,
)

__all__ = [
    "DatasetTypeError",
    "OutputShape",
    "OutputShapeError",
    "PatternError",
    "QuerySettings",
    "Repository",
    "RepositoryError",
    "SortDirection",
    "SortSettings",
    "__version__",
]

__version__ = "0.1.0"


# --- Module Notes -----------------------------------------------------------
# Importing the package must not configure logging; callers own that decision.
