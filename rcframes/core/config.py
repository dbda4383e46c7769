"""Application configuration loaded from environment variables."""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.revenuecat.com/v2/"


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Every field is optional; unset ``default_*`` values fall back to the
    built-in defaults of the frame builders.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_name: str = "rcframes"
    debug: bool = False

    # RevenueCat API
    revenuecat_base_url: str = DEFAULT_BASE_URL
    revenuecat_endpoint_path: str | None = None
    upstream_timeout_seconds: float = 10.0

    # Frame defaults
    default_metric: str | None = None
    default_scope: str | None = None
    default_label: str | None = None
    default_suffix: str | None = None
    default_icon: str | None = None
    default_precision: str | None = None

    # Legacy chart scope
    enable_chart_scope: bool = False
    default_period: str | None = None
    default_granularity: str | None = None
    default_start: str | None = None
    default_end: str | None = None
    default_app_id: str | None = None

    # Privacy policy document served at /privacy
    privacy_policy_path: Path | None = None


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
