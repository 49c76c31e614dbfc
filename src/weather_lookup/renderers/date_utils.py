"""Shared date-formatting helpers for renderers."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone


def format_long_date(timestamp_seconds: int, utc_offset_seconds: int = 0) -> str:
    """Full local date for an epoch timestamp, e.g. ``Monday, January 5, 2026``."""
    tz = timezone(timedelta(seconds=utc_offset_seconds))
    moment = datetime.fromtimestamp(timestamp_seconds, tz)
    return f"{moment.strftime('%A, %B')} {moment.day}, {moment.year}"
