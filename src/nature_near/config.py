"""Application settings.

Values come from ``NATURE_NEAR_*`` environment variables or a ``.env`` file
in the working directory::

    NATURE_NEAR_EBIRD_API_KEY=...
    NATURE_NEAR_NPS_API_KEY=...
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration."""

    model_config = SettingsConfigDict(
        env_prefix="NATURE_NEAR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Nature Near Me"
    app_env: str = "dev"
    debug: bool = False

    # Provider keys
    ebird_api_key: str = Field(default="", description="eBird API token")
    nps_api_key: str = Field(default="DEMO_KEY", description="NPS developer API key")

    user_agent: str = "nature-near/0.1 (https://github.com/richmalloy/nature-events)"
    http_timeout: float = 30.0

    # Durable storage (recent searches, community feed) and built site
    storage_dir: Path = Path("data")
    site_dir: Path = Path("site")

    map_zoom: int = 10
    geocode_cooldown_seconds: float = 1.0
    serve_port: int = 8000


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings (cached)."""
    return Settings()
