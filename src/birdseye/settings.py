"""
birdseye.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide env-driven settings for the service and the registry geometry.
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Env-driven configuration, e.g. `BIRDSEYE_ITEMS_PER_ROW=40`.

    List values (`BIRDSEYE_STAT_BUCKETS`) are read as JSON arrays.
    """

    model_config = SettingsConfigDict(env_prefix="BIRDSEYE_", case_sensitive=False)

    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "birdseye"
    log_level: str = "INFO"
    # Level for registry mutation traces; unset follows log_level.
    fleet_log_level: str | None = None

    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # Grid geometry (pixels, except items_per_row)
    items_per_row: int = Field(default=25, ge=1)
    cell_dimension: int = Field(default=20, ge=0)
    cell_margin: int = Field(default=5, ge=0)
    padding: int = Field(default=5, ge=0)

    # Tags that get live membership statistics. Fixed for the registry's lifetime.
    stat_buckets: list[str] = Field(
        default_factory=lambda: ["macon_short_uptime", "no_identity"]
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Registry defaults in `birdseye.fleet.registry` match these values so the core can be
# used standalone without loading settings.
