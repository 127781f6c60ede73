"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    app_timezone: str = Field(
        default="Asia/Kolkata",
        description="IANA timezone (or UTC±HH:MM offset) that defines calendar days",
    )
    admin_api_key: str | None = Field(
        default=None,
        description="Shared key expected in the X-Admin-Key header for admin endpoints",
    )
    scheduler_enabled: bool = Field(
        default=True,
        description="Start the background notification scheduler with the API",
    )
    daily_notification_hour: int = Field(
        default=9,
        ge=0,
        le=23,
        description="Hour of day for the inactivity notification pass",
    )
    daily_notification_minute: int = Field(
        default=0,
        ge=0,
        le=59,
        description="Minute of the hour for the inactivity notification pass",
    )
    reminder_interval_minutes: int = Field(
        default=5,
        gt=0,
        description="Minutes between two reminder processing passes",
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear cached settings and everything derived from them.

    The resolved application timezone is cached separately and must be
    dropped too, or a reloaded ``APP_TIMEZONE`` would be ignored.
    """

    from app.utils.datetime import get_app_timezone

    get_settings.cache_clear()
    get_app_timezone.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
