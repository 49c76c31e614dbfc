"""
Lookup orchestration.

``WeatherController`` takes a location query, fetches current conditions
and then the forecast from its provider, reduces the forecast to daily
summaries and hands back a ``WeatherReport``.  It holds no state between
lookups; everything it needs is passed in at construction.
"""

from __future__ import annotations

import logging
from datetime import timedelta, timezone
from typing import TYPE_CHECKING

from weather_lookup.analysis.forecast_reducer import DEFAULT_MAX_DAYS, reduce_forecast
from weather_lookup.datasources import get_provider
from weather_lookup.errors import InvalidQueryError
from weather_lookup.schemas import WeatherReport

if TYPE_CHECKING:
    from weather_lookup.config import Settings
    from weather_lookup.datasources.base import WeatherProvider
    from weather_lookup.schemas import CurrentConditions, ForecastSeries

logger = logging.getLogger(__name__)

EMPTY_CITY = "Please enter a city name"


class WeatherController:
    """Runs one lookup at a time against a provider."""

    def __init__(self, provider: WeatherProvider, *, max_days: int = DEFAULT_MAX_DAYS) -> None:
        self.provider = provider
        self.max_days = max_days

    @classmethod
    def from_settings(cls, settings: Settings) -> WeatherController:
        """Controller using the provider the settings select."""
        return cls(get_provider(settings), max_days=settings.forecast_days)

    def lookup_city(self, city: str) -> WeatherReport:
        """Current conditions and daily forecast for a city name."""
        city = city.strip()
        if not city:
            raise InvalidQueryError(EMPTY_CITY)

        logger.info("Looking up weather for %r via %s", city, self.provider.source)
        current = self.provider.current_by_city(city)
        forecast = self.provider.forecast_by_city(city)
        return self._build_report(current, forecast)

    def lookup_coords(self, lat: float, lon: float) -> WeatherReport:
        """Current conditions and daily forecast for a coordinate pair."""
        if not -90 <= lat <= 90:
            raise InvalidQueryError(f"Latitude must be between -90 and 90, got {lat}")
        if not -180 <= lon <= 180:
            raise InvalidQueryError(f"Longitude must be between -180 and 180, got {lon}")

        logger.info("Looking up weather for (%s, %s) via %s", lat, lon, self.provider.source)
        current = self.provider.current_by_coords(lat, lon)
        forecast = self.provider.forecast_by_coords(lat, lon)
        return self._build_report(current, forecast)

    def _build_report(self, current: CurrentConditions, forecast: ForecastSeries) -> WeatherReport:
        # Days follow the location's own calendar, not the machine's
        tz = timezone(timedelta(seconds=forecast.utc_offset_seconds))
        daily = reduce_forecast(forecast.samples, max_days=self.max_days, tz=tz)
        logger.debug("Reduced %d samples to %d days", len(forecast.samples), len(daily))
        return WeatherReport(
            current=current,
            daily=daily,
            units=self.provider.units,
            source=self.provider.source,
        )
