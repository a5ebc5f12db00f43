"""
tests.conftest

Shared fixtures for repository tests.
"""

from __future__ import annotations

from typing import Any

import pytest
import structlog

from memrepo import Repository
from memrepo.settings import Settings


@pytest.fixture
def settings() -> Settings:
    return Settings(env="test")


@pytest.fixture
def people() -> dict[int, dict[str, Any]]:
    return {
        1: {"name": "John", "city": "Paris", "age": 34, "address": {"zip": "75001"}},
        2: {"name": "Anna", "city": "Berlin", "age": "28", "address": {"zip": "10115"}},
        3: {"name": "Parker", "city": "Paris", "age": 41, "address": {"zip": "75002"}},
        4: {"name": "Mike", "city": None, "age": 28},
    }


@pytest.fixture
def repo(people: dict[int, dict[str, Any]], settings: Settings) -> Repository:
    return Repository(people, settings=settings)


@pytest.fixture
def reset_structlog():
    yield
    structlog.reset_defaults()
