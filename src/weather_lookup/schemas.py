"""
Domain models for weather lookup.

Pydantic models for data from weather providers and internal processing.
These define the canonical schema - datasources normalize API responses to these.
"""

from __future__ import annotations

from datetime import date  # noqa: TC003 - pydantic resolves annotations at runtime
from enum import StrEnum

from pydantic import BaseModel, Field

# =============================================================================
# Units
# =============================================================================


class Units(StrEnum):
    """Unit systems understood by the OpenWeatherMap ``units`` parameter."""

    METRIC = "metric"
    IMPERIAL = "imperial"
    STANDARD = "standard"

    @property
    def temperature_symbol(self) -> str:
        """Suffix used when displaying a temperature."""
        return {"metric": "°C", "imperial": "°F", "standard": "K"}[self.value]

    @property
    def speed_symbol(self) -> str:
        """Suffix used when displaying a wind speed."""
        return "mph" if self is Units.IMPERIAL else "m/s"


# =============================================================================
# Forecast samples
# =============================================================================


class WeatherSample(BaseModel):
    """One 3-hourly forecast reading."""

    model_config = {"frozen": True}

    timestamp_seconds: int = Field(..., description="Unix epoch seconds of the reading")
    temperature: float
    condition_text: str = Field(..., description="Short description, e.g. 'light rain'")
    condition_code: str = Field(..., description="Condition/icon class, e.g. '10d'")
    is_midday_reading: bool = False


class ForecastSeries(BaseModel):
    """Forecast samples for one location, in chronological order."""

    samples: list[WeatherSample] = Field(default_factory=list)
    utc_offset_seconds: int = 0
    location_name: str = ""
    country: str = ""


class DailySummary(BaseModel):
    """The representative reading for one calendar day."""

    calendar_date: date
    day_label: str = Field(..., description="Short weekday name, e.g. 'Mon'")
    date_label: str = Field(..., description="Short month/day, e.g. 'Jan 5'")
    temperature: int
    condition_text: str
    condition_code: str


# =============================================================================
# Current conditions
# =============================================================================


class CurrentConditions(BaseModel):
    """Current weather at a location."""

    location_name: str
    country: str = ""
    timestamp_seconds: int
    temperature: float
    feels_like: float
    humidity: int = Field(..., ge=0, le=100, description="Relative humidity (%)")
    pressure: int = Field(..., description="Sea-level pressure (hPa)")
    wind_speed: float
    condition_text: str
    condition_code: str
    utc_offset_seconds: int = 0

    @property
    def display_location(self) -> str:
        """``"London, GB"`` or just ``"London"`` when the country is unknown."""
        if self.country:
            return f"{self.location_name}, {self.country}"
        return self.location_name


class WeatherReport(BaseModel):
    """Everything a single lookup produces, ready for rendering."""

    current: CurrentConditions
    daily: list[DailySummary] = Field(default_factory=list)
    units: Units = Units.METRIC
    source: str
