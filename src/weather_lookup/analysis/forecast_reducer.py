"""Collapse a 3-hourly forecast into one representative reading per day.

Each calendar day is represented by its midday reading when there is one,
otherwise by the first reading seen for that day (typically a partial first
or last day).  Days are emitted in order of first appearance and capped at
``max_days``.

Days are grouped by calendar date in ``tz``, not by weekday name, so two
readings a week apart never collapse into one entry.
"""

from __future__ import annotations

import math
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from weather_lookup.schemas import DailySummary

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import date, tzinfo

    from weather_lookup.schemas import WeatherSample

DEFAULT_MAX_DAYS = 5


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward +infinity (2.5 -> 3, -2.5 -> -2)."""
    return math.floor(value + 0.5)


def day_label(moment: datetime) -> str:
    """Short weekday name, e.g. ``Mon``."""
    return moment.strftime("%a")


def date_label(moment: datetime) -> str:
    """Short month/day, e.g. ``Jan 5``."""
    return f"{moment.strftime('%b')} {moment.day}"


def summarize_sample(sample: WeatherSample, tz: tzinfo = UTC) -> DailySummary:
    """Turn one sample into the daily entry it represents."""
    moment = datetime.fromtimestamp(sample.timestamp_seconds, tz)
    return DailySummary(
        calendar_date=moment.date(),
        day_label=day_label(moment),
        date_label=date_label(moment),
        temperature=round_half_up(sample.temperature),
        condition_text=sample.condition_text,
        condition_code=sample.condition_code,
    )


def reduce_forecast(
    samples: Iterable[WeatherSample],
    *,
    max_days: int = DEFAULT_MAX_DAYS,
    tz: tzinfo = UTC,
) -> list[DailySummary]:
    """
    Reduce chronological forecast samples to at most ``max_days`` daily summaries.

    Args:
        samples: Readings in chronological order (may be empty).
        max_days: Number of days to keep, counted in order of first appearance.
        tz: Timezone whose calendar decides which day a reading belongs to.

    Returns:
        One ``DailySummary`` per day, in order of first appearance.
    """
    # dicts keep insertion order, so replacing a value keeps the day's slot
    chosen: dict[date, WeatherSample] = {}
    for sample in samples:
        day = datetime.fromtimestamp(sample.timestamp_seconds, tz).date()
        if day not in chosen or sample.is_midday_reading:
            chosen[day] = sample

    return [summarize_sample(s, tz) for s in list(chosen.values())[:max_days]]
