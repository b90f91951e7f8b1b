"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date, timedelta

from trip_weather import __version__
from trip_weather.config import get_settings
from trip_weather.flows.forecast import forecast_flow, trip_flow
from trip_weather.renderers.text import render_forecast_text, render_trip_text
from trip_weather.services.weather import WeatherService


def configure_logging(debug: bool = False) -> None:
    """Configure root logging from settings (``--debug`` forces DEBUG)."""
    level = "DEBUG" if debug else get_settings().log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="trip-weather",
        description="Daily weather summaries and travel advisories for trip planning",
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

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("info", help="Show application info")

    # 'forecast' command - daily summaries for a point
    forecast_parser = subparsers.add_parser("forecast", help="Daily forecast for a location")
    forecast_parser.add_argument("--lat", type=float, default=None, help="Latitude")
    forecast_parser.add_argument("--lon", type=float, default=None, help="Longitude")
    forecast_parser.add_argument(
        "--start", type=date.fromisoformat, default=None, help="First day (YYYY-MM-DD)"
    )
    forecast_parser.add_argument(
        "--end", type=date.fromisoformat, default=None, help="Last day (YYYY-MM-DD)"
    )
    _add_output_flags(forecast_parser)

    # 'geocode' command - place name to coordinates
    geocode_parser = subparsers.add_parser("geocode", help="Look up coordinates for a place")
    geocode_parser.add_argument("location", help="Place name, e.g. 'Kandy, Sri Lanka'")

    # 'trip' command - weather for several destinations
    trip_parser = subparsers.add_parser("trip", help="Weather for every trip destination")
    trip_parser.add_argument("destinations", nargs="+", help="Destination names")
    trip_parser.add_argument("--source", default=None, help="Trip origin")
    trip_parser.add_argument("--start", type=date.fromisoformat, default=None)
    trip_parser.add_argument("--end", type=date.fromisoformat, default=None)
    trip_parser.add_argument("--duration", type=int, default=None, help="Trip length in days")
    _add_output_flags(trip_parser)

    return parser


def _add_output_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--json", action="store_true", help="Print JSON instead of text")
    parser.add_argument(
        "--fahrenheit", action="store_true", help="Show temperatures in Fahrenheit"
    )


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Timezone: {settings.timezone}")
    print(f"API key configured: {'yes' if settings.openweather_api_key else 'no'}")
    return 0


def cmd_forecast(args: argparse.Namespace) -> int:
    """Handle the 'forecast' command."""
    settings = get_settings()
    lat = args.lat if args.lat is not None else settings.lat
    lon = args.lon if args.lon is not None else settings.lon
    start = args.start or WeatherService.from_settings(settings).today()
    end = args.end or start + timedelta(days=settings.max_days - 1)

    if end < start:
        print(f"Error: end date {end} is before start date {start}", file=sys.stderr)
        return 1

    days = forecast_flow(lat, lon, start, end)
    if args.json:
        print(json.dumps([d.to_json_dict() for d in days], indent=2))
    else:
        print(render_forecast_text(days, fahrenheit=args.fahrenheit))
    return 0


def cmd_geocode(args: argparse.Namespace) -> int:
    """Handle the 'geocode' command."""
    coordinates = WeatherService.from_settings().get_coordinates(args.location)
    if coordinates is None:
        print(f"No coordinates found for {args.location!r}", file=sys.stderr)
        return 1
    print(f"{args.location}: {coordinates.lat}, {coordinates.lng}")
    return 0


def cmd_trip(args: argparse.Namespace) -> int:
    """Handle the 'trip' command."""
    locations = trip_flow(args.destinations, args.source, args.start, args.end, args.duration)
    if args.json:
        print(json.dumps([loc.model_dump(mode="json", by_alias=True) for loc in locations], indent=2))
    else:
        print(render_trip_text(locations, fahrenheit=args.fahrenheit))
    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return 0

    configure_logging(getattr(args, "debug", False))

    commands = {
        "info": cmd_info,
        "forecast": cmd_forecast,
        "geocode": cmd_geocode,
        "trip": cmd_trip,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
