"""
location_service.py: Turns the caller's IP, a city name or a postal code
into a Location.

Functions:
- resolve: Geolocate an IP address.
- from_place: First place-search match for a city name.
- from_post_code: First place-search match for a postal code.
- locate: Pick one of the above from command-line options.
"""

from typing import Optional

from ipweather.api.ip_client import STATUS_FAIL, get_ip_location, get_public_ip
from ipweather.api.weather_client import search_locations
from ipweather.config import Settings
from ipweather.errors import (
    BadIpError,
    FetchError,
    InvalidArgumentError,
    ResponseError,
    UnknownLocationError,
)
from ipweather.models.location import Location
from ipweather.utils.log_util import app_logger

logger = app_logger(__name__)


def resolve(ip: str, settings: Settings) -> Location:
    """
    Geolocate an IP address.

    :param ip: IPv4/IPv6 address as text.
    :param settings: Settings with `ip_location_api`.
    :return: Location of the IP.
    :raises BadIpError: If the lookup fails or its payload cannot be read.
    :raises UnknownLocationError: If the service reports status "fail".
    """
    try:
        body = get_ip_location(ip, settings)
    except (FetchError, ResponseError) as e:
        raise BadIpError(ip, e.message) from e

    if body.get("status") == STATUS_FAIL:
        reason = body.get("message") or "lookup failed"
        logger.warning(f"Geolocation failed for {ip}: {reason}")
        raise UnknownLocationError(ip, reason)

    try:
        location = Location.from_geolocation(body)
    except (KeyError, TypeError, ValueError) as e:
        raise BadIpError(ip, f"unexpected geolocation payload: {e!r}") from e

    logger.info(f"Resolved {ip} to {location.describe()}")
    return location


def _first_match(text: str, kind: str, settings: Settings) -> Location:
    text = (text or "").strip()
    if not text:
        raise InvalidArgumentError(text, f"{kind} must not be empty.")

    matches = search_locations(text, settings)
    if not matches:
        raise UnknownLocationError(text, f"no {kind} matches")

    if len(matches) > 1:
        logger.info(f"{len(matches)} matches for {text!r}, using {matches[0].describe()}")
    return matches[0]


def from_place(name: str, settings: Settings) -> Location:
    """Location of the best place-search match for a city name."""
    return _first_match(name, "city", settings)


def from_post_code(code: str, settings: Settings) -> Location:
    """Location of the best place-search match for a postal code."""
    return _first_match(code, "post code", settings)


def locate(
    settings: Settings, city: Optional[str] = None, post_code: Optional[str] = None
) -> Location:
    """
    Resolve the Location for one command.

    A city wins over a post code; with neither, the caller's public IP is
    geolocated.
    """
    if city is not None:
        return from_place(city, settings)
    if post_code is not None:
        return from_post_code(post_code, settings)

    ip = get_public_ip(settings)
    return resolve(ip, settings)
