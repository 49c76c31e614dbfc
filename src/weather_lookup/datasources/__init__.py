"""Weather data providers.

Each subdirectory is one provider with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants (live providers)
    └── {feature}.py      # Fetch/generate functions and the provider class

Every provider satisfies ``base.WeatherProvider``: a ``source`` name, the
``units`` it reports in, and ``current_by_*`` / ``forecast_by_*`` lookups
returning ``CurrentConditions`` and ``ForecastSeries``.

Adding a new provider
---------------------
1. Create ``datasources/{name}/`` with files above.
   See ``demo/`` for a minimal example, ``openweather/`` for a live one.

2. Raise ``weather_lookup.errors`` exceptions for failures the user
   should see; never return partial data.

3. Select it in ``get_provider()`` below.

4. Add tests in ``tests/test_{name}.py``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from weather_lookup.datasources.demo import DemoProvider
from weather_lookup.datasources.openweather import OpenWeatherProvider
from weather_lookup.services.http import create_session

if TYPE_CHECKING:
    from weather_lookup.config import Settings
    from weather_lookup.datasources.base import WeatherProvider

logger = logging.getLogger(__name__)

__all__ = ["DemoProvider", "OpenWeatherProvider", "get_provider"]


def get_provider(settings: Settings) -> WeatherProvider:
    """Live provider when an API key is configured, demo data otherwise."""
    if settings.uses_demo_data:
        logger.warning("No OpenWeatherMap API key configured; using demo data")
        return DemoProvider(units=settings.units)
    return OpenWeatherProvider(
        settings.openweather_api_key.strip(),
        units=settings.units,
        base_url=settings.openweather_base_url,
        http=create_session(timeout=settings.http_timeout),
    )
