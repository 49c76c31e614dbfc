"""5-day / 3-hour forecast from the OpenWeatherMap ``/forecast`` endpoint."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from weather_lookup.datasources.openweather.client import (
    FORECAST_ENDPOINT,
    OPENWEATHER_API,
    endpoint_url,
)
from weather_lookup.services.http import session

if TYPE_CHECKING:
    import requests

logger = logging.getLogger(__name__)


def fetch_forecast(
    query: dict[str, Any],
    *,
    api_key: str,
    units: str = "metric",
    base_url: str = OPENWEATHER_API,
    http: requests.Session | None = None,
) -> dict[str, Any]:
    """
    Fetch the 3-hourly forecast for a location (40 entries, 5 days).

    Args:
        query: Location selector from ``city_query`` or ``coords_query``.
        api_key: OpenWeatherMap ``appid``.
        units: ``metric``, ``imperial`` or ``standard``.
        base_url: API root.
        http: Session to use (defaults to the shared retrying session).

    Returns:
        Raw API response dict with ``list`` (entries) and ``city`` keys.

    Raises:
        requests.HTTPError: On a non-2xx response.
    """
    params: dict[str, Any] = {**query, "units": str(units), "appid": api_key}
    url = endpoint_url(base_url, FORECAST_ENDPOINT)
    logger.debug("GET %s %s", url, query)

    resp = (http or session).get(url, params=params)
    resp.raise_for_status()
    result: dict[str, Any] = resp.json()
    return result
