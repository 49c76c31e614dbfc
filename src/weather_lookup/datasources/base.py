"""Interface every weather provider implements."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from weather_lookup.schemas import CurrentConditions, ForecastSeries, Units


class WeatherProvider(Protocol):
    """Source of current conditions and forecast samples for a location."""

    source: str
    units: Units

    def current_by_city(self, city: str) -> CurrentConditions: ...

    def forecast_by_city(self, city: str) -> ForecastSeries: ...

    def current_by_coords(self, lat: float, lon: float) -> CurrentConditions: ...

    def forecast_by_coords(self, lat: float, lon: float) -> ForecastSeries: ...
