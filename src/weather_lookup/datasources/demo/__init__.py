"""Synthetic demo data source.

Stands in for the live API when no key is configured, producing the same
models (``CurrentConditions``, ``ForecastSeries``) as the OpenWeatherMap
provider.

Public API:
  - generator: DemoProvider, generate_current, generate_forecast
"""

from weather_lookup.datasources.demo.generator import (
    DemoProvider,
    generate_current,
    generate_forecast,
)

__all__ = ["DemoProvider", "generate_current", "generate_forecast"]
