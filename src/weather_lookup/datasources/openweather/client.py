"""OpenWeatherMap API client constants and query helpers.

API docs:
  - Current weather: https://openweathermap.org/current
  - 5 day / 3 hour forecast: https://openweathermap.org/forecast5
"""

from __future__ import annotations

from typing import Any

OPENWEATHER_API = "https://api.openweathermap.org/data/2.5"

CURRENT_ENDPOINT = "weather"
FORECAST_ENDPOINT = "forecast"

# Forecast entries carry a ``dt_txt`` label; the one ending in this is preferred
# as the day's representative reading.
MIDDAY_LABEL = "12:00:00"


def city_query(city: str) -> dict[str, Any]:
    """Query parameters selecting a location by name (``"London"``, ``"Paris,FR"``)."""
    return {"q": city}


def coords_query(lat: float, lon: float) -> dict[str, Any]:
    """Query parameters selecting a location by coordinates."""
    return {"lat": lat, "lon": lon}


def endpoint_url(base_url: str, endpoint: str) -> str:
    """Join the API base and an endpoint name."""
    return f"{base_url.rstrip('/')}/{endpoint}"
