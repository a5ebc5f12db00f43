"""
memrepo.errors

Domain-specific exceptions raised by the repository.

Responsibilities:
- Give callers one base class (`RepositoryError`) to catch.
- Keep the builtin exception type each error replaces as a second base, so
  `except TypeError` / `except ValueError` keep working.
"""

from __future__ import annotations

from typing import Any


class RepositoryError(Exception):
    """
    Base class for every error raised by memrepo.
    """


class DatasetTypeError(RepositoryError, TypeError):
    """
    Raised when a dataset or context override is neither a mapping nor a sequence.
    """

    def __init__(self, data: Any) -> None:
        super().__init__(
            f"dataset must be a mapping or a sequence, got {type(data).__name__}"
        )
        self.data_type = type(data)


class PatternError(RepositoryError, ValueError):
    """
    Raised when a LIKE pattern is not a valid regular expression.
    """

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"invalid LIKE pattern {pattern!r}: {reason}")
        self.pattern = pattern
        self.reason = reason


class OutputShapeError(RepositoryError, ValueError):
    """
    Raised in strict mode when a query asks for an output shape that does not exist.
    """

    def __init__(self, shape: Any) -> None:
        super().__init__(f"unrecognized output shape {shape!r}; expected 'mapping' or 'sequence'")
        self.shape = shape


# --- Module Notes -----------------------------------------------------------
# "Not found" is deliberately absent here: lookups that match nothing return None.
