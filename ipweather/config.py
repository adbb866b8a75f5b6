# config.py
"""
Configuration for the ipweather command-line tool.

Settings are read once at startup from the process environment (a local
`.env` file is loaded first when present) and handed to every client
explicitly, so clients never look at the environment themselves.

Environment variables:
- PUBLIC_IP_API: Endpoint returning the caller's public IP as `{"ip": ...}`.
- IP_LOCATION_API: Base URL of the geolocation service (`{base}/{ip}`).
- WEATHER_API: Base URL of the weather provider.
- WEATHER_KEY: API key sent with every weather request.
- WEATHER_UNITS: Optional default unit system, `metric` or `imperial`.
- HTTP_TIMEOUT: Optional per-request timeout in seconds.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from ipweather.errors import ConfigError

DEFAULT_TIMEOUT = 10.0
DEFAULT_UNITS = "metric"

ENV_VARS = {
    "public_ip_api": "PUBLIC_IP_API",
    "ip_location_api": "IP_LOCATION_API",
    "weather_api": "WEATHER_API",
    "weather_key": "WEATHER_KEY",
}


@dataclass(frozen=True)
class Settings:
    """Endpoints, credentials and request options for one invocation."""

    public_ip_api: Optional[str] = None
    ip_location_api: Optional[str] = None
    weather_api: Optional[str] = None
    weather_key: Optional[str] = None
    units: str = DEFAULT_UNITS
    timeout: float = DEFAULT_TIMEOUT

    def require(self, field: str) -> str:
        """
        Return a configured value or fail naming its environment variable.

        :param field: Attribute name, e.g. "weather_api".
        :return: The non-empty configured value.
        :raises ConfigError: If the value is missing or blank.
        """
        value = getattr(self, field)
        if not value:
            raise ConfigError(ENV_VARS.get(field, field.upper()))
        return value


def _clean_url(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value.rstrip("/") or None


def _parse_timeout(value: Optional[str]) -> float:
    if not value:
        return DEFAULT_TIMEOUT
    try:
        timeout = float(value)
    except ValueError:
        return DEFAULT_TIMEOUT
    return timeout if timeout > 0 else DEFAULT_TIMEOUT


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from an environment mapping.

    :param environ: Mapping to read from; defaults to os.environ after
        loading a `.env` file from the working directory.
    :return: Settings with base URLs stripped of trailing slashes.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    key = environ.get("WEATHER_KEY")
    return Settings(
        public_ip_api=_clean_url(environ.get("PUBLIC_IP_API")),
        ip_location_api=_clean_url(environ.get("IP_LOCATION_API")),
        weather_api=_clean_url(environ.get("WEATHER_API")),
        weather_key=key.strip() if key else None,
        units=(environ.get("WEATHER_UNITS") or DEFAULT_UNITS).strip().lower(),
        timeout=_parse_timeout(environ.get("HTTP_TIMEOUT")),
    )
