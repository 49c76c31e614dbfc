"""Synthetic weather for running without an API key.

Output is deterministic for a given location name and reference time: the
name seeds base temperature, humidity, pressure and wind, and the forecast
follows a simple diurnal curve peaking mid-afternoon UTC.  Samples are laid
out like the live forecast (40 readings, 3 hours apart) so everything
downstream behaves the same.
"""

from __future__ import annotations

import math
import zlib
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

from weather_lookup.schemas import CurrentConditions, ForecastSeries, Units, WeatherSample

if TYPE_CHECKING:
    from collections.abc import Callable

SAMPLE_COUNT = 40
SAMPLE_INTERVAL = timedelta(hours=3)

# (description, icon code without the day/night suffix)
CONDITIONS: list[tuple[str, str]] = [
    ("clear sky", "01"),
    ("few clouds", "02"),
    ("scattered clouds", "03"),
    ("broken clouds", "04"),
    ("light rain", "10"),
    ("overcast clouds", "04"),
]


def location_seed(name: str) -> int:
    """Stable, case-insensitive seed for a location name."""
    return zlib.crc32(name.strip().lower().encode("utf-8"))


def convert_celsius(celsius: float, units: Units) -> float:
    """Convert a Celsius temperature to the requested unit system."""
    if units is Units.IMPERIAL:
        return celsius * 9 / 5 + 32
    if units is Units.STANDARD:
        return celsius + 273.15
    return celsius


def convert_speed(mps: float, units: Units) -> float:
    """Convert a wind speed in m/s to the requested unit system."""
    if units is Units.IMPERIAL:
        return mps * 2.23694
    return mps


def diurnal_celsius(seed: int, moment: datetime) -> float:
    """Temperature at ``moment``: base from the seed, +/-6 degrees peaking at 15:00 UTC."""
    base = 5 + seed % 20
    hour = moment.hour + moment.minute / 60
    return base + 6 * math.sin(2 * math.pi * (hour - 9) / 24)


def condition_at(seed: int, moment: datetime, day_index: int) -> tuple[str, str]:
    """Description and icon code, changing once per day."""
    text, code = CONDITIONS[(seed + day_index) % len(CONDITIONS)]
    suffix = "d" if 6 <= moment.hour < 18 else "n"
    return text, f"{code}{suffix}"


def first_slot_after(now: datetime) -> datetime:
    """Next 3-hour UTC boundary strictly after ``now``."""
    slot = now.astimezone(UTC).replace(minute=0, second=0, microsecond=0)
    return slot + timedelta(hours=3 - slot.hour % 3)


def generate_current(name: str, now: datetime, units: Units) -> CurrentConditions:
    """Current conditions for ``name`` at ``now``."""
    seed = location_seed(name)
    celsius = diurnal_celsius(seed, now.astimezone(UTC))
    text, code = condition_at(seed, now.astimezone(UTC), 0)
    return CurrentConditions(
        location_name=name,
        timestamp_seconds=int(now.timestamp()),
        temperature=round(convert_celsius(celsius, units), 2),
        feels_like=round(convert_celsius(celsius - 1.5, units), 2),
        humidity=40 + seed % 40,
        pressure=1000 + seed % 30,
        wind_speed=round(convert_speed(1 + (seed % 80) / 10, units), 1),
        condition_text=text,
        condition_code=code,
    )


def generate_forecast(name: str, now: datetime, units: Units) -> ForecastSeries:
    """Forty 3-hourly samples for ``name`` starting at the next slot after ``now``."""
    seed = location_seed(name)
    start = first_slot_after(now)
    first_day = start.date()

    samples = []
    for i in range(SAMPLE_COUNT):
        moment = start + i * SAMPLE_INTERVAL
        text, code = condition_at(seed, moment, (moment.date() - first_day).days)
        samples.append(
            WeatherSample(
                timestamp_seconds=int(moment.timestamp()),
                temperature=round(convert_celsius(diurnal_celsius(seed, moment), units), 2),
                condition_text=text,
                condition_code=code,
                is_midday_reading=moment.hour == 12,
            )
        )
    return ForecastSeries(samples=samples, location_name=name)


def coords_label(lat: float, lon: float) -> str:
    """Display name for a coordinate lookup, e.g. ``"40.71, -74.01"``."""
    return f"{lat:.2f}, {lon:.2f}"


class DemoProvider:
    """Generated data, used when no OpenWeatherMap API key is configured."""

    source = "demo"

    def __init__(
        self,
        *,
        units: Units = Units.METRIC,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.units = units
        self._clock = clock or (lambda: datetime.now(UTC))

    def current_by_city(self, city: str) -> CurrentConditions:
        return generate_current(city.strip().title(), self._clock(), self.units)

    def forecast_by_city(self, city: str) -> ForecastSeries:
        return generate_forecast(city.strip().title(), self._clock(), self.units)

    def current_by_coords(self, lat: float, lon: float) -> CurrentConditions:
        return generate_current(coords_label(lat, lon), self._clock(), self.units)

    def forecast_by_coords(self, lat: float, lon: float) -> ForecastSeries:
        return generate_forecast(coords_label(lat, lon), self._clock(), self.units)
