"""
Application settings.

Values come from the environment (prefix ``BIRDHUB_``) or a local ``.env`` file::

    BIRDHUB_DATA_PATH=site/data.json
    BIRDHUB_LIFELIST_URL=https://example.com/my-lifelist.csv
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for the importer and CLI."""

    model_config = SettingsConfigDict(
        env_prefix="BIRDHUB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "birdhub"
    app_env: str = "development"
    debug: bool = False

    data_path: Path = Field(default=Path("data.json"), description="Export artifact location")
    lifelist_url: str | None = Field(
        default=None,
        description="Unauthenticated URL serving the life list CSV",
    )
    detect_columns: bool = Field(
        default=False,
        description="Locate columns by header name instead of fixed positions",
    )


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()
