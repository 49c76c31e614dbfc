"""Weather Lookup - current conditions and a 5-day forecast for any city.

Architecture::

    datasources/   Weather providers (OpenWeatherMap, synthetic demo data)
    analysis/      Pure data reduction (3-hourly forecast -> daily summaries)
    renderers/     Pure data -> text / HTML (current card, forecast cards)
    controller.py  Wires a provider to the reducer, one report per lookup
    services/      Shared utilities (HTTP client with retry)

Data flow: provider (current + forecast) -> analysis -> renderers

Extension points:
  - New weather provider:  datasources/__init__.py
  - New output format:     renderers/__init__.py
"""

__version__ = "0.1.0"

from weather_lookup.analysis.forecast_reducer import reduce_forecast
from weather_lookup.config import Settings
from weather_lookup.schemas import DailySummary, WeatherSample

__all__ = ["DailySummary", "Settings", "WeatherSample", "__version__", "reduce_forecast"]
