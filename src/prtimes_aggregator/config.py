"""Aggregator configuration loading."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from . import __version__
from .constants import (
    DEFAULT_TIMEZONE,
    LIKE_COUNT_PATH,
    MAX_CONCURRENT_LOOKUPS,
    MAX_CONCURRENT_PAGES,
    PRTIMES_BASE_URL,
    REQUEST_TIMEOUT_SECONDS,
    SEARCH_PATH,
)

# Load .env file
load_dotenv()


class AggregatorSettings(BaseSettings):
    """Runtime settings, overridable with PRTIMES_* environment variables."""

    model_config = SettingsConfigDict(env_prefix="PRTIMES_", extra="ignore")

    base_url: str = PRTIMES_BASE_URL
    search_path: str = SEARCH_PATH
    like_count_path: str = LIKE_COUNT_PATH
    request_timeout_seconds: float = Field(default=REQUEST_TIMEOUT_SECONDS, gt=0)
    max_concurrent_pages: int = Field(default=MAX_CONCURRENT_PAGES, ge=1)
    max_concurrent_lookups: int = Field(default=MAX_CONCURRENT_LOOKUPS, ge=1)
    timezone: str = DEFAULT_TIMEZONE
    user_agent: str = f"prtimes-aggregator/{__version__}"
    log_dir: Path = Path("logs")

    @property
    def search_url(self) -> str:
        return self.base_url.rstrip("/") + self.search_path

    def like_count_url(self, release_id: str) -> str:
        return self.base_url.rstrip("/") + self.like_count_path.format(release_id=release_id)

    def post_url(self, release_path: str) -> str:
        """Absolute post URL for a release path from search results."""
        return self.base_url.rstrip("/") + release_path


@lru_cache(maxsize=1)
def get_settings() -> AggregatorSettings:
    """Get the process-wide settings instance."""
    return AggregatorSettings()
