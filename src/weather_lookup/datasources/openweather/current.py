"""Current conditions from the OpenWeatherMap ``/weather`` endpoint."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from weather_lookup.datasources.openweather.client import (
    CURRENT_ENDPOINT,
    OPENWEATHER_API,
    endpoint_url,
)
from weather_lookup.services.http import session

if TYPE_CHECKING:
    import requests

logger = logging.getLogger(__name__)


def fetch_current(
    query: dict[str, Any],
    *,
    api_key: str,
    units: str = "metric",
    base_url: str = OPENWEATHER_API,
    http: requests.Session | None = None,
) -> dict[str, Any]:
    """
    Fetch current weather for a location.

    Args:
        query: Location selector from ``city_query`` or ``coords_query``.
        api_key: OpenWeatherMap ``appid``.
        units: ``metric``, ``imperial`` or ``standard``.
        base_url: API root, overridable for testing or proxies.
        http: Session to use (defaults to the shared retrying session).

    Returns:
        Raw API response dict (``name``, ``sys``, ``main``, ``weather``, ...).

    Raises:
        requests.HTTPError: On a non-2xx response.
    """
    params: dict[str, Any] = {**query, "units": str(units), "appid": api_key}
    url = endpoint_url(base_url, CURRENT_ENDPOINT)
    logger.debug("GET %s %s", url, query)

    resp = (http or session).get(url, params=params)
    resp.raise_for_status()
    result: dict[str, Any] = resp.json()
    return result
