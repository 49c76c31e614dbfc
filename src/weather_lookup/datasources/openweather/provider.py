"""OpenWeatherMap-backed weather provider.

Maps HTTP failures to user-facing lookup errors. Any non-2xx answer to the
current-weather request means the location was not found, any non-2xx
answer to the forecast request means the forecast is unavailable.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import requests

from weather_lookup.datasources.openweather.client import (
    OPENWEATHER_API,
    city_query,
    coords_query,
)
from weather_lookup.datasources.openweather.current import fetch_current
from weather_lookup.datasources.openweather.forecast import fetch_forecast
from weather_lookup.datasources.openweather.parse import (
    MALFORMED_RESPONSE,
    parse_current,
    parse_forecast,
)
from weather_lookup.errors import (
    ForecastUnavailableError,
    LocationNotFoundError,
    WeatherServiceError,
)
from weather_lookup.schemas import Units

if TYPE_CHECKING:
    from weather_lookup.schemas import CurrentConditions, ForecastSeries

logger = logging.getLogger(__name__)

CITY_NOT_FOUND = "City not found"
CITY_FORECAST_UNAVAILABLE = "Forecast data not available"
COORDS_NOT_FOUND = "Weather data not available for your location"
COORDS_FORECAST_UNAVAILABLE = "Forecast data not available for your location"
INVALID_API_KEY = "Weather service rejected the configured API key"


class OpenWeatherProvider:
    """Live data from api.openweathermap.org."""

    source = "openweathermap.org"

    def __init__(
        self,
        api_key: str,
        *,
        units: Units = Units.METRIC,
        base_url: str = OPENWEATHER_API,
        http: requests.Session | None = None,
    ) -> None:
        self.api_key = api_key
        self.units = units
        self.base_url = base_url
        self.http = http

    def current_by_city(self, city: str) -> CurrentConditions:
        return self._current(city_query(city), CITY_NOT_FOUND)

    def forecast_by_city(self, city: str) -> ForecastSeries:
        return self._forecast(city_query(city), CITY_FORECAST_UNAVAILABLE)

    def current_by_coords(self, lat: float, lon: float) -> CurrentConditions:
        return self._current(coords_query(lat, lon), COORDS_NOT_FOUND)

    def forecast_by_coords(self, lat: float, lon: float) -> ForecastSeries:
        return self._forecast(coords_query(lat, lon), COORDS_FORECAST_UNAVAILABLE)

    # -------------------------------------------------------------------------

    def _current(self, query: dict[str, Any], not_found: str) -> CurrentConditions:
        try:
            payload = fetch_current(
                query,
                api_key=self.api_key,
                units=self.units,
                base_url=self.base_url,
                http=self.http,
            )
        except requests.HTTPError as exc:
            raise self._http_error(exc, LocationNotFoundError(not_found)) from exc
        except requests.JSONDecodeError as exc:
            logger.warning("Current weather response was not JSON: %s", exc)
            raise WeatherServiceError(MALFORMED_RESPONSE) from exc
        except requests.RequestException as exc:
            logger.warning("Current weather request failed: %s", exc)
            raise WeatherServiceError(f"Could not reach weather service: {exc}") from exc
        return parse_current(payload)

    def _forecast(self, query: dict[str, Any], unavailable: str) -> ForecastSeries:
        try:
            payload = fetch_forecast(
                query,
                api_key=self.api_key,
                units=self.units,
                base_url=self.base_url,
                http=self.http,
            )
        except requests.HTTPError as exc:
            raise self._http_error(exc, ForecastUnavailableError(unavailable)) from exc
        except requests.JSONDecodeError as exc:
            logger.warning("Forecast response was not JSON: %s", exc)
            raise WeatherServiceError(MALFORMED_RESPONSE) from exc
        except requests.RequestException as exc:
            logger.warning("Forecast request failed: %s", exc)
            raise WeatherServiceError(f"Could not reach weather service: {exc}") from exc
        return parse_forecast(payload)

    @staticmethod
    def _http_error(exc: requests.HTTPError, default: Exception) -> Exception:
        status = exc.response.status_code if exc.response is not None else None
        logger.warning("Weather service answered HTTP %s: %s", status, exc)
        if status == 401:
            return WeatherServiceError(INVALID_API_KEY)
        return default
