"""Pure data reduction between datasources and renderers.

No I/O here: functions take domain models and return domain models.

Public API:
  - forecast_reducer: reduce_forecast (3-hourly samples -> daily summaries)
"""

from weather_lookup.analysis.forecast_reducer import reduce_forecast

__all__ = ["reduce_forecast"]
