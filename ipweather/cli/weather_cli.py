#!/usr/bin/env python3
"""
weather_cli.py: Weather for wherever you are.

Finds the caller's location from their public IP (or from --city /
--post_code) and prints current conditions, a forecast, astronomy data or
severe-weather alerts.

Usage:
    ipweather current [--units imperial] [-v]
    ipweather forecast 3 [--city London]
    ipweather astronomy [--post_code "SW1A 1AA"]
    ipweather alert 2
"""

import argparse
import sys
from typing import Callable, List, Optional

from ipweather.api.weather_client import (
    get_alerts,
    get_current_astronomy,
    get_current_weather,
    get_forecast,
)
from ipweather.cli.render import (
    render_alerts,
    render_astronomy,
    render_forecast,
    render_location,
    render_weather,
)
from ipweather.cli.validate import validate_days
from ipweather.config import Settings, load_settings
from ipweather.core.location_service import locate
from ipweather.errors import WeatherError
from ipweather.models.location import Location
from ipweather.models.weather import Units
from ipweather.utils.log_util import app_logger, set_log_level

logger = app_logger(__name__)


def _locate(args, settings: Settings) -> Location:
    location = locate(settings, city=args.city, post_code=args.post_code)
    if args.verbose:
        print(render_location(location))
    return location


def _units(args, settings: Settings) -> Units:
    return Units.parse(args.units or settings.units)


def handle_current(args, settings: Settings) -> None:
    """Print current conditions."""
    units = _units(args, settings)
    location = _locate(args, settings)
    weather = get_current_weather(location, units, settings)
    print("Current weather")
    print(render_weather(weather, units))


def handle_forecast(args, settings: Settings) -> None:
    """Print current conditions and a daily forecast."""
    days = validate_days(args.days)
    units = _units(args, settings)
    location = _locate(args, settings)
    forecast = get_forecast(location, units, days, settings)
    print(f"Weather forecast ({days} day{'s' if days > 1 else ''})")
    print(render_forecast(forecast, units))


def handle_astronomy(args, settings: Settings) -> None:
    """Print today's sun and moon data."""
    location = _locate(args, settings)
    astronomy = get_current_astronomy(location, settings)
    print("Current astronomy")
    print(render_astronomy(astronomy))


def handle_alert(args, settings: Settings) -> None:
    """Print severe-weather alerts."""
    days = validate_days(args.days)
    location = _locate(args, settings)
    alerts = get_alerts(location, days, settings)
    print("Weather alerts")
    print(render_alerts(alerts))


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "-v", "--verbose", action="store_true", help="Show debug logging and the resolved location"
    )
    where = common.add_mutually_exclusive_group()
    where.add_argument("-c", "--city", type=str, help="Look up a city instead of using your IP")
    where.add_argument(
        "-p", "--post_code", type=str, help="Look up a postal code instead of using your IP"
    )
    common.add_argument(
        "-u",
        "--units",
        choices=[u.value for u in Units],
        default=None,
        help="Unit system (default: WEATHER_UNITS or metric)",
    )

    parser = argparse.ArgumentParser(prog="ipweather", description="Weather!")
    subparsers = parser.add_subparsers(dest="command", metavar="command")
    subparsers.required = True

    current = subparsers.add_parser("current", parents=[common], help="Get the current weather.")
    current.set_defaults(handler=handle_current)

    forecast = subparsers.add_parser("forecast", parents=[common], help="Get the weather forecast.")
    forecast.add_argument("days", type=int, help="Number of days (1-5)")
    forecast.set_defaults(handler=handle_forecast)

    astronomy = subparsers.add_parser("astronomy", parents=[common], help="Get the current astronomy.")
    astronomy.set_defaults(handler=handle_astronomy)

    alert = subparsers.add_parser("alert", parents=[common], help="Get weather alerts.")
    alert.add_argument("days", type=int, help="Number of days (1-5)")
    alert.set_defaults(handler=handle_alert)

    return parser


def main(argv: Optional[List[str]] = None, settings: Optional[Settings] = None) -> int:
    """
    Parse arguments, run one command and return the process exit code.

    :param argv: Arguments without the program name; defaults to sys.argv[1:].
    :param settings: Pre-built settings; defaults to the environment.
    :return: 0 on success, 1 on any reported error, 2 on a usage error.
    """
    try:
        args = build_parser().parse_args(argv)
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 2
    if args.verbose:
        set_log_level("DEBUG")

    handler: Callable[..., None] = args.handler
    try:
        settings = settings or load_settings()
        handler(args, settings)
    except WeatherError as e:
        logger.debug(f"{args.command} failed: {e!r}")
        print(f"❌ Error: {e.message}", file=sys.stderr)
        return 1
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
