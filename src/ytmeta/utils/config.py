"""Environment-driven configuration.

Settings are read from ``YTMETA_*`` environment variables, e.g.
``YTMETA_LOG_LEVEL=DEBUG`` or ``YTMETA_WATCH_PAGE_FALLBACK=false``.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ytmeta.utils.logging import LOG_FORMATS, configure_logging

_VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Runtime settings for ytmeta."""

    log_level: str = "WARNING"
    log_format: str = "console"
    watch_page_fallback: bool = True
    """Retry through the full watch page when a video is not playable in embeds."""

    model_config = SettingsConfigDict(env_prefix="YTMETA_")

    @field_validator("log_level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        v_upper = v.upper()
        if v_upper not in _VALID_LEVELS:
            raise ValueError(f"log_level must be one of {list(_VALID_LEVELS)}")
        return v_upper

    @field_validator("log_format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        v_lower = v.lower()
        if v_lower not in LOG_FORMATS:
            raise ValueError(f"log_format must be one of {list(LOG_FORMATS)}")
        return v_lower


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings, read once from the environment."""
    return Settings()


def configure_logging_from_settings(settings: Settings | None = None) -> None:
    settings = settings or get_settings()
    configure_logging(settings.log_level, settings.log_format)
