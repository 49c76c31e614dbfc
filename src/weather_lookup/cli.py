"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from weather_lookup import __version__
from weather_lookup.config import get_settings
from weather_lookup.controller import WeatherController
from weather_lookup.errors import WeatherLookupError
from weather_lookup.renderers.report import build_report_html, build_report_text
from weather_lookup.schemas import Units

if TYPE_CHECKING:
    from weather_lookup.config import Settings
    from weather_lookup.schemas import WeatherReport

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="weather-lookup",
        description="Current weather and a 5-day forecast for a city or coordinates",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    # Options shared by the lookup commands
    lookup = argparse.ArgumentParser(add_help=False)
    lookup.add_argument(
        "--units",
        choices=[u.value for u in Units],
        default=None,
        help="Unit system (default: units from settings)",
    )
    lookup.add_argument(
        "--html",
        type=Path,
        default=None,
        metavar="PATH",
        help="Also write the report as an HTML fragment to PATH",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # 'city' command - lookup by name
    city_parser = subparsers.add_parser("city", parents=[lookup], help="Weather for a city")
    city_parser.add_argument(
        "name",
        nargs="*",
        help="City name, e.g. 'London' or 'Paris,FR' (default: default_city from settings)",
    )

    # 'coords' command - lookup by latitude/longitude
    coords_parser = subparsers.add_parser(
        "coords", parents=[lookup], help="Weather for a latitude/longitude"
    )
    coords_parser.add_argument("lat", type=float, nargs="?", default=None, help="Latitude")
    coords_parser.add_argument("lon", type=float, nargs="?", default=None, help="Longitude")

    # 'info' command
    subparsers.add_parser("info", help="Show application info")

    return parser


def configure_logging(debug: bool) -> None:
    """Send log records to stderr; DEBUG when requested, warnings otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def _lookup_settings(args: argparse.Namespace) -> Settings:
    """Settings with command-line overrides applied."""
    settings = get_settings()
    if getattr(args, "units", None):
        settings = settings.model_copy(update={"units": Units(args.units)})
    return settings


def _emit(report: WeatherReport, html_path: Path | None) -> int:
    """Print the report and optionally write the HTML fragment."""
    print(build_report_text(report))
    if html_path is not None:
        try:
            html_path.parent.mkdir(parents=True, exist_ok=True)
            html_path.write_text(build_report_html(report), encoding="utf-8")
        except OSError as exc:
            print(f"Error: could not write {html_path}: {exc.strerror or exc}", file=sys.stderr)
            return 1
        print(f"\nHTML written to {html_path}")
    return 0


def cmd_city(args: argparse.Namespace) -> int:
    """Handle the 'city' command."""
    settings = _lookup_settings(args)
    city = " ".join(args.name) if args.name else settings.default_city

    controller = WeatherController.from_settings(settings)
    try:
        report = controller.lookup_city(city)
    except WeatherLookupError as exc:
        print(f"Error: {exc.message}", file=sys.stderr)
        return 1
    return _emit(report, args.html)


def cmd_coords(args: argparse.Namespace) -> int:
    """Handle the 'coords' command."""
    settings = _lookup_settings(args)
    if (args.lat is None) != (args.lon is None):
        print("Error: give both latitude and longitude, or neither", file=sys.stderr)
        return 1
    lat = settings.lat if args.lat is None else args.lat
    lon = settings.lon if args.lon is None else args.lon

    controller = WeatherController.from_settings(settings)
    try:
        report = controller.lookup_coords(lat, lon)
    except WeatherLookupError as exc:
        print(f"Error: {exc.message}", file=sys.stderr)
        return 1
    return _emit(report, args.html)


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"Provider: {'demo' if settings.uses_demo_data else 'openweathermap.org'}")
    print(f"Units: {settings.units}")
    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return 0

    configure_logging(getattr(args, "debug", False) or get_settings().debug)

    commands = {
        "city": cmd_city,
        "coords": cmd_coords,
        "info": cmd_info,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
