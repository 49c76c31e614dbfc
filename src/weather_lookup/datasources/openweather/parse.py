"""Normalize OpenWeatherMap payloads into domain models."""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from weather_lookup.datasources.openweather.client import MIDDAY_LABEL
from weather_lookup.errors import WeatherServiceError
from weather_lookup.schemas import CurrentConditions, ForecastSeries, WeatherSample

MALFORMED_RESPONSE = "Unexpected response from weather service"


def parse_current(payload: dict[str, Any]) -> CurrentConditions:
    """Build ``CurrentConditions`` from a ``/weather`` response."""
    try:
        main = payload["main"]
        condition = payload["weather"][0]
        return CurrentConditions(
            location_name=payload["name"],
            country=(payload.get("sys") or {}).get("country") or "",
            timestamp_seconds=payload["dt"],
            temperature=main["temp"],
            feels_like=main["feels_like"],
            humidity=main["humidity"],
            pressure=main["pressure"],
            wind_speed=(payload.get("wind") or {}).get("speed") or 0.0,
            condition_text=condition["description"],
            condition_code=condition["icon"],
            utc_offset_seconds=payload.get("timezone") or 0,
        )
    except (AttributeError, KeyError, IndexError, TypeError, ValidationError) as exc:
        raise WeatherServiceError(MALFORMED_RESPONSE) from exc


def parse_sample(entry: dict[str, Any]) -> WeatherSample:
    """Build a ``WeatherSample`` from one ``/forecast`` list entry."""
    condition = entry["weather"][0]
    return WeatherSample(
        timestamp_seconds=entry["dt"],
        temperature=entry["main"]["temp"],
        condition_text=condition["description"],
        condition_code=condition["icon"],
        is_midday_reading=str(entry.get("dt_txt") or "").endswith(MIDDAY_LABEL),
    )


def parse_forecast(payload: dict[str, Any]) -> ForecastSeries:
    """Build a ``ForecastSeries`` from a ``/forecast`` response."""
    try:
        city = payload.get("city") or {}
        return ForecastSeries(
            samples=[parse_sample(entry) for entry in payload["list"]],
            utc_offset_seconds=city.get("timezone") or 0,
            location_name=city.get("name") or "",
            country=city.get("country") or "",
        )
    except (AttributeError, KeyError, IndexError, TypeError, ValidationError) as exc:
        raise WeatherServiceError(MALFORMED_RESPONSE) from exc
