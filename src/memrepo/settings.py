"""
memrepo.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide env-driven settings for logging and repository behaviour.
- Offer a cached settings instance shared by repositories that are not given one.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Process-wide knobs. Per-call query options live in `QuerySettings`, not here.
    """

    model_config = SettingsConfigDict(env_prefix="MEMREPO_", case_sensitive=False)

    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "memrepo"
    log_level: str = "INFO"
    log_json: bool = True

    # False: an unknown output shape logs a warning and the query returns None.
    # True: the query raises OutputShapeError instead.
    strict_output_shape: bool = False


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Tests construct `Settings(...)` directly instead of mutating the cached instance.
