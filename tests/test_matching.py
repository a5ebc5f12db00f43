"""
tests.test_matching

Field resolution and comparison primitives.
"""

from __future__ import annotations

import math

import pytest

from memrepo.repository.fields import MISSING, get_field, resolve_path
from memrepo.repository.matching import (
    compare_values,
    compile_like_pattern,
    like_matches,
    loose_equals,
    strict_equals,
    sort_group,
    string_form,
)


def test_get_field_sources() -> None:
    assert get_field({"a": 1}, "a") == 1
    assert get_field({0: "zero"}, "0") == "zero"
    assert get_field(["x", "y"], "1") == "y"
    assert get_field(["x"], 5) is MISSING
    assert get_field(["x", "y"], -1) is MISSING
    assert get_field(None, "a") is MISSING
    assert get_field("text", "upper") is MISSING
    assert get_field(object(), "_private") is MISSING


def test_resolve_path_stops_on_broken_step() -> None:
    record = {"a": {"b": {"c": 7}}, "n": None}
    assert resolve_path(record, "a.b.c") == 7
    assert resolve_path(record, "a.x.c") is MISSING
    assert resolve_path(record, "n.c") is MISSING


def test_missing_is_falsy_singleton() -> None:
    assert not MISSING
    assert type(MISSING)() is MISSING


@pytest.mark.parametrize(
    ("left", "right", "expected"),
    [
        (1, 1.0, True),
        (1, True, False),
        ("1", 1, False),
        (None, None, True),
        (MISSING, None, False),
    ],
)
def test_strict_equals(left, right, expected) -> None:
    assert strict_equals(left, right) is expected


@pytest.mark.parametrize(
    ("left", "right", "expected"),
    [
        ("1", 1, True),
        (2, " 2 ", True),
        ("", 0, True),
        (True, 1, True),
        (True, "1", True),
        (MISSING, None, True),
        (None, 0, False),
        ("abc", 0, False),
        ("a", "A", False),
        ("1_0", 10, False),
        ("0x1A", 26, True),
        ("1e2", 100, True),
        (".5", 0.5, True),
        ("inf", math.inf, False),
        ("Infinity", math.inf, True),
        ("nan", math.nan, False),
    ],
)
def test_loose_equals(left, right, expected) -> None:
    assert loose_equals(left, right) is expected


def test_like_matching_string_forms() -> None:
    regex = compile_like_pattern("^TRUE$")
    assert like_matches(True, regex)
    assert not like_matches(None, regex)
    assert not like_matches(MISSING, regex)
    assert string_form(2.0) == "2"
    assert string_form([1, None, "a"]) == "1,,a"


def test_compare_values_directions() -> None:
    asc, desc = (-1, 1), (1, -1)
    assert compare_values(1, 2, asc) == -1
    assert compare_values(1, 2, desc) == 1
    assert compare_values(2, 2, desc) == 0
    assert compare_values(MISSING, 1, asc) == 1
    assert compare_values(1, MISSING, desc) == -1
    assert compare_values("a", 1, asc) == 1
    assert compare_values("a", 1, desc) == -1
    assert compare_values(None, "a", asc) == 1
    assert compare_values(None, "a", desc) == 1
    assert compare_values(None, MISSING, asc) == 0
    assert compare_values(math.nan, 1, asc) == 1
    assert compare_values({"k": 1}, {"k": 2}, asc) == 0


def test_sort_group_orders_kinds() -> None:
    assert sort_group(MISSING) is None
    assert sort_group(None) is None
    assert sort_group(math.nan) is None
    assert sort_group(True) == sort_group(2.5) < sort_group("x") < sort_group((1,))
