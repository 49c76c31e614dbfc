"""OpenWeatherMap data source.

Fetches current conditions and the 5-day / 3-hour forecast (API key required).

Public API:
  - provider: OpenWeatherProvider (lookup by city or coordinates)
  - current: fetch_current (raw ``/weather`` payload)
  - forecast: fetch_forecast (raw ``/forecast`` payload)
  - parse: parse_current, parse_forecast (payload -> domain models)
  - client: API URL, query helpers
"""

from weather_lookup.datasources.openweather.client import (
    OPENWEATHER_API,
    city_query,
    coords_query,
)
from weather_lookup.datasources.openweather.current import fetch_current
from weather_lookup.datasources.openweather.forecast import fetch_forecast
from weather_lookup.datasources.openweather.parse import parse_current, parse_forecast
from weather_lookup.datasources.openweather.provider import OpenWeatherProvider

__all__ = [
    "OPENWEATHER_API",
    "OpenWeatherProvider",
    "city_query",
    "coords_query",
    "fetch_current",
    "fetch_forecast",
    "parse_current",
    "parse_forecast",
]
