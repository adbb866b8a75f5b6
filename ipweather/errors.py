"""
errors.py: Error taxonomy for the weather lookup tool.

Every client raises one of these instead of aborting; only the CLI entry
point turns them into a user-facing message and an exit code.

Classes:
- WeatherError: Catch-all base for anything the tool reports.
- FetchError: Upstream endpoint could not be reached.
- ResponseError: Upstream answered with something we cannot map.
- BadIpError: Geolocation lookup for an IP failed.
- InvalidArgumentError: Command-line value out of range.
- UnknownLocationError: Provider could not place an IP or a place name.
- NoLocationError: Location has no coordinates to query with.
- ConfigError: Required environment variable is missing.
"""

from typing import Optional


class WeatherError(Exception):
    """Base error carrying a human-readable message."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class FetchError(WeatherError):
    pass


class ResponseError(WeatherError):
    pass


class BadIpError(WeatherError):
    def __init__(self, ip: str, message: str):
        super().__init__(f"Could not locate IP {ip}: {message}")
        self.ip = ip
        self.reason = message


class InvalidArgumentError(WeatherError):
    def __init__(self, arg: str, message: str):
        super().__init__(f"Invalid argument '{arg}': {message}")
        self.arg = arg
        self.reason = message


class UnknownLocationError(WeatherError):
    def __init__(self, location: str, message: Optional[str] = None):
        detail = f": {message}" if message else ""
        super().__init__(f"Unknown location '{location}'{detail}")
        self.location = location
        self.reason = message


class NoLocationError(WeatherError):
    def __init__(self, message: str = "Location has no coordinates to query"):
        super().__init__(message)


class ConfigError(WeatherError):
    def __init__(self, name: str):
        super().__init__(f"Missing required environment variable: {name}")
        self.name = name
