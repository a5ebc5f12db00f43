"""
tests.test_settings_logging

Environment-driven settings and structlog configuration.
"""

from __future__ import annotations

import structlog

from memrepo.observability.logging import configure_from_settings, configure_logging
from memrepo.settings import Settings


def test_settings_read_env(monkeypatch) -> None:
    monkeypatch.setenv("MEMREPO_STRICT_OUTPUT_SHAPE", "true")
    monkeypatch.setenv("MEMREPO_LOG_LEVEL", "debug")
    settings = Settings()
    assert settings.strict_output_shape is True
    assert settings.log_level == "debug"


def test_settings_defaults(monkeypatch) -> None:
    monkeypatch.delenv("MEMREPO_STRICT_OUTPUT_SHAPE", raising=False)
    settings = Settings()
    assert settings.strict_output_shape is False
    assert settings.service_name == "memrepo"


def test_configure_logging_json(reset_structlog) -> None:
    configure_logging(service_name="svc", level="INFO")
    processors = structlog.get_config()["processors"]
    assert isinstance(processors[-1], structlog.processors.JSONRenderer)


def test_configure_from_settings_console(reset_structlog) -> None:
    configure_from_settings(Settings(env="test", log_json=False))
    processors = structlog.get_config()["processors"]
    assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
