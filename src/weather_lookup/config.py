"""
Application settings.

Values come from ``WEATHER_LOOKUP_*`` environment variables or a ``.env``
file in the working directory.  An empty ``openweather_api_key`` selects the
synthetic demo provider instead of the live API.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from weather_lookup.schemas import Units


class Settings(BaseSettings):
    """Runtime configuration."""

    model_config = SettingsConfigDict(
        env_prefix="WEATHER_LOOKUP_",
        env_file=".env",
        extra="ignore",
    )

    app_name: str = "weather-lookup"
    app_env: str = "development"
    debug: bool = False

    openweather_api_key: str = ""
    openweather_base_url: str = "https://api.openweathermap.org/data/2.5"
    http_timeout: float = Field(default=30, gt=0, description="Seconds per request")

    units: Units = Units.METRIC
    forecast_days: int = Field(default=5, ge=1)

    # Default location: New York
    default_city: str = "New York"
    lat: float = Field(default=40.7128, ge=-90, le=90)
    lon: float = Field(default=-74.006, ge=-180, le=180)

    @property
    def uses_demo_data(self) -> bool:
        """True when no API key is configured."""
        return not self.openweather_api_key.strip()


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, loaded once."""
    return Settings()
