"""Shared fixtures."""

from __future__ import annotations

from collections.abc import Iterator
from datetime import date

import pytest

from weather_lookup.config import get_settings
from weather_lookup.schemas import CurrentConditions, DailySummary, Units, WeatherReport


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate tests from the developer's environment and the settings cache."""
    monkeypatch.delenv("WEATHER_LOOKUP_OPENWEATHER_API_KEY", raising=False)
    monkeypatch.delenv("WEATHER_LOOKUP_DEBUG", raising=False)
    monkeypatch.delenv("WEATHER_LOOKUP_UNITS", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def report() -> WeatherReport:
    """London, Monday January 5 2026 at noon UTC, two forecast days."""
    return WeatherReport(
        current=CurrentConditions(
            location_name="London",
            country="GB",
            timestamp_seconds=1767614400,
            temperature=7.4,
            feels_like=4.5,
            humidity=81,
            pressure=1012,
            wind_speed=4.1,
            condition_text="light rain",
            condition_code="10d",
        ),
        daily=[
            DailySummary(
                calendar_date=date(2026, 1, 5),
                day_label="Mon",
                date_label="Jan 5",
                temperature=8,
                condition_text="light rain",
                condition_code="10d",
            ),
            DailySummary(
                calendar_date=date(2026, 1, 6),
                day_label="Tue",
                date_label="Jan 6",
                temperature=-2,
                condition_text="snow",
                condition_code="13d",
            ),
        ],
        units=Units.METRIC,
        source="openweathermap.org",
    )
