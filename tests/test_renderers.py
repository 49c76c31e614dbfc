"""
Tests for text and HTML renderers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from weather_lookup.renderers.date_utils import format_long_date
from weather_lookup.renderers.report import build_report_html, build_report_text
from weather_lookup.renderers.weather_utils import (
    format_humidity,
    format_pressure,
    format_temperature,
    format_wind_speed,
)
from weather_lookup.schemas import Units

if TYPE_CHECKING:
    from weather_lookup.schemas import WeatherReport

# Monday January 5 2026, 12:00 UTC
NOON = 1767614400


class TestWeatherUtils:
    """Test value formatting."""

    def test_format_temperature(self) -> None:
        assert format_temperature(7.4) == "7°C"
        assert format_temperature(59.5, Units.IMPERIAL) == "60°F"
        assert format_temperature(280.6, Units.STANDARD) == "281K"
        assert format_temperature(-0.4) == "0°C"

    def test_format_wind_speed(self) -> None:
        assert format_wind_speed(4.1) == "4.1 m/s"
        assert format_wind_speed(10.0, Units.IMPERIAL) == "10 mph"

    def test_format_pressure_and_humidity(self) -> None:
        assert format_pressure(1012) == "1012 hPa"
        assert format_humidity(81) == "81%"


class TestFormatLongDate:
    """Test the full date line."""

    def test_utc(self) -> None:
        assert format_long_date(NOON) == "Monday, January 5, 2026"

    def test_offset_moves_the_date(self) -> None:
        assert format_long_date(NOON, utc_offset_seconds=13 * 3600) == "Tuesday, January 6, 2026"


class TestBuildReportText:
    """Test terminal output."""

    def test_current_block(self, report: WeatherReport) -> None:
        text = build_report_text(report)
        lines = text.splitlines()

        assert lines[0] == "London, GB"
        assert lines[1] == "Monday, January 5, 2026"
        assert lines[2] == "7°C  light rain"
        assert "Feels like 5°C" in lines[3]
        assert "Humidity 81%" in lines[3]
        assert "Wind 4.1 m/s" in lines[3]
        assert "Pressure 1012 hPa" in lines[3]

    def test_forecast_block(self, report: WeatherReport) -> None:
        text = build_report_text(report)

        assert "2-day forecast" in text
        assert "Mon Jan 5" in text
        assert "Tue Jan 6" in text
        assert "-2°C  snow" in text

    def test_no_forecast_block_without_days(self, report: WeatherReport) -> None:
        empty = report.model_copy(update={"daily": []})
        assert "forecast" not in build_report_text(empty)

    def test_demo_notice(self, report: WeatherReport) -> None:
        assert "demo data" not in build_report_text(report)
        demo = report.model_copy(update={"source": "demo"})
        assert "demo data" in build_report_text(demo)

    def test_imperial_units(self, report: WeatherReport) -> None:
        imperial = report.model_copy(update={"units": Units.IMPERIAL})
        text = build_report_text(imperial)
        assert "7°F" in text
        assert "4.1 mph" in text


class TestBuildReportHtml:
    """Test the HTML fragment."""

    def test_current_card(self, report: WeatherReport) -> None:
        html = build_report_html(report)

        assert '<h2 class="location">London, GB</h2>' in html
        assert "Monday, January 5, 2026" in html
        assert '<p class="temperature">7°C</p>' in html
        assert '<dd class="humidity">81%</dd>' in html
        assert 'data-condition="10d"' in html

    def test_forecast_cards(self, report: WeatherReport) -> None:
        html = build_report_html(report)

        assert html.count('class="forecast-item"') == 2
        assert '<div class="forecast-day">Tue</div>' in html
        assert '<div class="forecast-temp">-2°C</div>' in html
        assert "2-Day Forecast" in html

    def test_no_forecast_section_without_days(self, report: WeatherReport) -> None:
        empty = report.model_copy(update={"daily": []})
        assert "forecast-container" not in build_report_html(empty)

    def test_escapes_provider_text(self, report: WeatherReport) -> None:
        current = report.current.model_copy(update={"location_name": "<script>x</script>"})
        html = build_report_html(report.model_copy(update={"current": current}))

        assert "<script>" not in html
        assert "&lt;script&gt;" in html

    def test_is_fragment(self, report: WeatherReport) -> None:
        html = build_report_html(report)
        assert "<html" not in html
        assert "<body" not in html
