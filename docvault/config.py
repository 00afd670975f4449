"""Runtime settings for the document repository."""
from __future__ import annotations

from typing import Any, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from docvault.cache.lru import CACHE_SIZE


class Settings(BaseSettings):
    cache_size: int = Field(
        CACHE_SIZE, gt=0, description="Maximum resident cache entries before eviction begins"
    )
    id_strategy: Literal["uuid", "sequential"] = "uuid"
    id_prefix: str = "doc-"
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="DOCVAULT_", env_file=".env", extra="ignore")


def load_settings(**overrides: Any) -> Settings:
    # The historical option name ``cacheSize`` is accepted as an alias.
    if "cacheSize" in overrides:
        overrides["cache_size"] = overrides.pop("cacheSize")
    return Settings(**overrides)
