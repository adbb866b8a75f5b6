"""
ip_client.py: Public IP discovery and raw IP geolocation lookups.

Functions:
- get_public_ip(settings)
- get_ip_location(ip, settings)

Requires:
- Settings.public_ip_api, Settings.ip_location_api
"""

from typing import Any, Dict

from ipweather.api.http_client import get_json
from ipweather.config import Settings
from ipweather.errors import FetchError, ResponseError
from ipweather.utils.log_util import app_logger

logger = app_logger(__name__)

STATUS_FAIL = "fail"


def get_public_ip(settings: Settings) -> str:
    """
    Discover the caller's public IP address.

    :param settings: Settings with `public_ip_api`.
    :return: IPv4 or IPv6 address as text.
    :raises FetchError: If the endpoint is unreachable or the body has no IP.
    """
    url = settings.require("public_ip_api")
    try:
        body = get_json(url, timeout=settings.timeout)
    except ResponseError as e:
        raise FetchError(e.message) from e

    ip = body.get("ip") if isinstance(body, dict) else None
    if not ip or not isinstance(ip, str):
        logger.error(f"Public IP response without an ip field: {body!r}")
        raise FetchError(f"No IP address in response from {url}")

    logger.debug(f"Public IP: {ip}")
    return ip.strip()


def get_ip_location(ip: str, settings: Settings) -> Dict[str, Any]:
    """
    Fetch the raw geolocation record for an IP.

    The body is returned as-is, including a `status` of "fail" for IPs the
    service cannot place; interpreting it is up to the caller.

    :param ip: Address to look up.
    :param settings: Settings with `ip_location_api`.
    :return: Decoded JSON object.
    :raises FetchError: On transport failure.
    :raises ResponseError: If the body is not a JSON object.
    """
    base = settings.require("ip_location_api")
    body = get_json(f"{base}/{ip}", timeout=settings.timeout)
    if not isinstance(body, dict):
        raise ResponseError(f"Geolocation response for {ip} is not an object")
    return body
