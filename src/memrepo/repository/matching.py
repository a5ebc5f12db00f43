"""
memrepo.repository.matching

Comparison primitives used by the query operations.

Responsibilities:
- Strict equality (no type coercion) and loose equality (numeric-string coercion).
- LIKE matching: case-insensitive, multiline regular expressions.
- The sort comparator used by `Repository.filter`.
"""

from __future__ import annotations

import math
import re
from typing import Any

from memrepo.errors import PatternError
from memrepo.repository.fields import MISSING

LIKE_FLAGS = re.IGNORECASE | re.MULTILINE

_DECIMAL = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)
_RADIX = re.compile(r"0([xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)", re.ASCII)
_INFINITY = re.compile(r"[+-]?Infinity")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _to_number(text: str) -> float:
    # Only plain decimals, exponents, 0x/0o/0b literals and Infinity count as numbers.
    text = text.strip()
    if not text:
        return 0.0
    if _DECIMAL.fullmatch(text):
        return float(text)
    if _RADIX.fullmatch(text):
        return float(int(text, 0))
    if _INFINITY.fullmatch(text):
        return -math.inf if text.startswith("-") else math.inf
    return math.nan


def strict_equals(left: Any, right: Any) -> bool:
    if left is MISSING or right is MISSING:
        return left is right
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left is right
    return left == right


def loose_equals(left: Any, right: Any) -> bool:
    """
    Equality with coercion: "1" equals 1, True equals 1, None equals a missing field.
    """

    if left is MISSING:
        left = None
    if right is MISSING:
        right = None
    if left is None or right is None:
        return left is None and right is None

    if isinstance(left, bool):
        left = int(left)
    if isinstance(right, bool):
        right = int(right)

    if _is_number(left) and isinstance(right, str):
        return left == _to_number(right)
    if isinstance(left, str) and _is_number(right):
        return _to_number(left) == right
    return left == right


def compile_like_pattern(pattern: str | re.Pattern[str]) -> re.Pattern[str]:
    if isinstance(pattern, re.Pattern):
        return re.compile(pattern.pattern, pattern.flags | LIKE_FLAGS)
    try:
        return re.compile(str(pattern), LIKE_FLAGS)
    except re.error as exc:
        raise PatternError(str(pattern), str(exc)) from exc


def string_form(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join("" if item is None else string_form(item) for item in value)
    return str(value)


def like_matches(value: Any, regex: re.Pattern[str]) -> bool:
    if value is MISSING or value is None:
        return False
    return regex.search(string_form(value)) is not None


def sort_group(value: Any) -> tuple[int, str] | None:
    """
    Kind of a value for sorting: numbers, then strings, then other types by name.

    None means "no sortable value" (MISSING, None, NaN).
    """

    if value is MISSING or value is None:
        return None
    if isinstance(value, float) and math.isnan(value):
        return None
    if isinstance(value, (int, float)):
        return (0, "")
    if isinstance(value, str):
        return (1, "")
    return (2, f"{type(value).__module__}.{type(value).__qualname__}")


def compare_values(left: Any, right: Any, ordering: tuple[int, int]) -> int:
    """
    Three-way compare for sorting.

    `ordering` holds the results for (left < right, left > right). Values without a
    sortable value go last in either direction. Values of different kinds are ordered
    by kind; values of the same kind compare natively.
    """

    left_group, right_group = sort_group(left), sort_group(right)
    if left_group is None or right_group is None:
        if left_group is right_group:
            return 0
        return 1 if left_group is None else -1

    if left_group != right_group:
        return ordering[0] if left_group < right_group else ordering[1]

    try:
        if left < right:
            return ordering[0]
        if left > right:
            return ordering[1]
    except TypeError:
        return 0
    return 0


# --- Module Notes -----------------------------------------------------------
# All helpers are pure; the repository composes them and owns the iteration.
