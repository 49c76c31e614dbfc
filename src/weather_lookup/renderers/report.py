"""Current-conditions card and daily forecast cards.

Text output for the terminal, HTML fragment for embedding in a page.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from weather_lookup.renderers import render_template
from weather_lookup.renderers.date_utils import format_long_date
from weather_lookup.renderers.weather_utils import (
    format_humidity,
    format_pressure,
    format_temperature,
    format_wind_speed,
)

if TYPE_CHECKING:
    from weather_lookup.schemas import WeatherReport


def _current_view(report: WeatherReport) -> dict[str, Any]:
    """Display strings for the current-conditions card."""
    current = report.current
    return {
        "location": current.display_location,
        "date": format_long_date(current.timestamp_seconds, current.utc_offset_seconds),
        "temperature": format_temperature(current.temperature, report.units),
        "description": current.condition_text,
        "condition_code": current.condition_code,
        "feels_like": format_temperature(current.feels_like, report.units),
        "humidity": format_humidity(current.humidity),
        "wind_speed": format_wind_speed(current.wind_speed, report.units),
        "pressure": format_pressure(current.pressure),
    }


def _forecast_view(report: WeatherReport) -> list[dict[str, Any]]:
    """Display strings for each forecast card."""
    return [
        {
            "day": day.day_label,
            "date": day.date_label,
            "temperature": format_temperature(day.temperature, report.units),
            "description": day.condition_text,
            "condition_code": day.condition_code,
        }
        for day in report.daily
    ]


def build_report_text(report: WeatherReport) -> str:
    """Plain-text report for the terminal."""
    current = _current_view(report)
    lines = [
        current["location"],
        current["date"],
        f"{current['temperature']}  {current['description']}",
        (
            f"Feels like {current['feels_like']} | Humidity {current['humidity']} | "
            f"Wind {current['wind_speed']} | Pressure {current['pressure']}"
        ),
    ]

    days = _forecast_view(report)
    if days:
        lines.append("")
        lines.append(f"{len(days)}-day forecast")
        for day in days:
            label = f"{day['day']} {day['date']}"
            lines.append(f"  {label:<11} {day['temperature']:>6}  {day['description']}")

    if report.source == "demo":
        lines.append("")
        lines.append("(demo data - set WEATHER_LOOKUP_OPENWEATHER_API_KEY for live weather)")

    return "\n".join(lines)


def build_report_html(report: WeatherReport) -> str:
    """HTML fragment with the current-conditions card and forecast cards."""
    return render_template(
        "weather.html.j2",
        current=_current_view(report),
        forecast=_forecast_view(report),
        source=report.source,
    )
