"""
weather_client.py: Weather provider lookups for a Location.

Every lookup follows the same steps: check the location has coordinates
(before any request), build the query, issue one GET with the API key, and
map the JSON into a domain record.

Functions:
- get_current_weather(location, units, settings)
- get_forecast(location, units, days, settings)
- get_forecast_weather(location, units, days, settings)
- get_current_astronomy(location, settings, today=None)
- get_alerts(location, days, settings)
- search_locations(text, settings)

Requires:
- Settings.weather_api, Settings.weather_key
"""

from datetime import date
from typing import Any, Callable, Dict, List, Optional, TypeVar

from ipweather.api.http_client import get_json
from ipweather.config import Settings
from ipweather.errors import ResponseError
from ipweather.models.alert import Alerts
from ipweather.models.astronomy import Astronomy
from ipweather.models.location import Location
from ipweather.models.weather import Forecast, Units, Weather
from ipweather.utils.date_util import format_query_date, local_today
from ipweather.utils.log_util import app_logger

logger = app_logger(__name__)

T = TypeVar("T")

MAPPING_ERRORS = (KeyError, TypeError, ValueError, AttributeError)


def _request(endpoint: str, params: Dict[str, Any], settings: Settings) -> Any:
    """GET `{WEATHER_API}/{endpoint}` with the API key and reject error envelopes."""
    base = settings.require("weather_api")
    key = settings.require("weather_key")
    logger.debug(f"Weather request: {endpoint} {params}")

    body = get_json(f"{base}/{endpoint}", params={"key": key, **params}, timeout=settings.timeout)

    if isinstance(body, dict) and isinstance(body.get("error"), dict):
        error = body["error"]
        message = error.get("message", "Unknown provider error")
        logger.error(f"Provider error {error.get('code')}: {message}")
        raise ResponseError(f"Weather provider error {error.get('code')}: {message}")
    return body


def _map(body: Any, mapper: Callable[[Any], T], what: str) -> T:
    try:
        return mapper(body)
    except MAPPING_ERRORS as e:
        logger.error(f"Could not map {what} response: {e!r}")
        raise ResponseError(f"Unexpected {what} response format: {e!r}") from e


def get_current_weather(location: Location, units: Units, settings: Settings) -> Weather:
    """
    Fetch current conditions.

    :param location: Location with coordinates.
    :param units: Unit system for every measurement.
    :param settings: Endpoint configuration.
    :return: Weather record.
    :raises NoLocationError: If the location has no coordinates (no request is made).
    :raises FetchError: On transport failure.
    :raises ResponseError: On an unexpected payload.
    """
    query = location.query()
    body = _request("current.json", {"q": query}, settings)
    return _map(body, lambda b: Weather.from_response(b, units), "current weather")


def get_forecast(location: Location, units: Units, days: int, settings: Settings) -> Forecast:
    """
    Fetch current conditions plus `days` daily summaries.

    :param location: Location with coordinates.
    :param units: Unit system for every measurement.
    :param days: Number of forecast days (already validated by the caller).
    :param settings: Endpoint configuration.
    :return: Forecast record.
    """
    query = location.query()
    body = _request("forecast.json", {"q": query, "days": days}, settings)
    return _map(body, lambda b: Forecast.from_response(b, units), "forecast")


def get_forecast_weather(location: Location, units: Units, days: int, settings: Settings) -> Weather:
    """Forecast lookup reduced to its current-conditions record."""
    return get_forecast(location, units, days, settings).current


def get_current_astronomy(
    location: Location, settings: Settings, today: Optional[date] = None
) -> Astronomy:
    """
    Fetch sun and moon data for today.

    :param location: Location with coordinates.
    :param settings: Endpoint configuration.
    :param today: Date to query; defaults to today at the location.
    :return: Astronomy record.
    """
    query = location.query()
    day = today or local_today(location.timezone)
    body = _request("astronomy.json", {"q": query, "dt": format_query_date(day)}, settings)
    return _map(body, Astronomy.from_response, "astronomy")


def get_alerts(location: Location, days: int, settings: Settings) -> Alerts:
    """
    Fetch severe-weather alerts covering the next `days` days.

    :param location: Location with coordinates.
    :param days: Number of days (already validated by the caller).
    :param settings: Endpoint configuration.
    :return: Alerts, possibly empty.
    """
    query = location.query()
    body = _request(
        "forecast.json", {"q": query, "days": days, "alerts": "yes"}, settings
    )
    return _map(body, Alerts.from_response, "alerts")


def search_locations(text: str, settings: Settings) -> List[Location]:
    """
    Look up places matching a city name or postal code.

    :param text: Free-text place name or postal code.
    :param settings: Endpoint configuration.
    :return: Matching locations, best match first; empty when nothing matches.
    """
    body = _request("search.json", {"q": text}, settings)

    def to_locations(results: Any) -> List[Location]:
        if not isinstance(results, list):
            raise TypeError("search response must be a list")
        return [Location.from_search_result(r) for r in results]

    return _map(body, to_locations, "location search")
