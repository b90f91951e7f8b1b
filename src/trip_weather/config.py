"""
Application settings.

Values come from environment variables (prefix ``TRIP_WEATHER_``) or a
``.env`` file. The OpenWeatherMap key is also accepted under its conventional
name ``OPENWEATHER_API_KEY``.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for the forecast engine and CLI."""

    model_config = SettingsConfigDict(
        env_prefix="TRIP_WEATHER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    app_name: str = "trip-weather"
    app_env: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    openweather_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("TRIP_WEATHER_OPENWEATHER_API_KEY", "OPENWEATHER_API_KEY"),
    )
    base_url: str = "https://api.openweathermap.org/data/2.5"
    geocoding_url: str = "https://api.openweathermap.org/geo/1.0/direct"

    weather_timeout: float = Field(default=10.0, gt=0)
    geocoding_timeout: float = Field(default=5.0, gt=0)

    timezone: str = "UTC"
    max_days: int = Field(default=7, ge=1)
    allow_partial: bool = False

    # Default location for the CLI (Colombo)
    lat: float = Field(default=6.9271, ge=-90, le=90)
    lon: float = Field(default=79.8612, ge=-180, le=180)


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, loaded once."""
    return Settings()
