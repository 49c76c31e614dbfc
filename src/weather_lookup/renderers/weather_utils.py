"""Weather formatting helpers for renderers.

Pure conversion functions with no external dependencies.
"""

from __future__ import annotations

from weather_lookup.analysis.forecast_reducer import round_half_up
from weather_lookup.schemas import Units


def format_temperature(value: float, units: Units = Units.METRIC) -> str:
    """Whole-degree temperature with unit suffix, e.g. ``15°C``."""
    return f"{round_half_up(value)}{units.temperature_symbol}"


def format_wind_speed(value: float, units: Units = Units.METRIC) -> str:
    """Wind speed as reported, e.g. ``3.6 m/s``."""
    return f"{value:g} {units.speed_symbol}"


def format_pressure(hpa: int) -> str:
    """Pressure in hectopascals, e.g. ``1012 hPa``."""
    return f"{hpa} hPa"


def format_humidity(percent: int) -> str:
    """Relative humidity, e.g. ``81%``."""
    return f"{percent}%"
