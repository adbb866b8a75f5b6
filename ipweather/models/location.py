"""
Location model shared by every weather lookup.

A Location is produced once per invocation, either from a geolocation
lookup of the caller's IP or from a place search, and is never mutated.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ipweather.errors import NoLocationError


def _optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _optional_float(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    return float(value)


@dataclass(frozen=True)
class Location:
    """Approximate geographic position of the caller or of a searched place."""

    country: str
    region: Optional[str] = None
    city: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    timezone: Optional[str] = None

    def __post_init__(self):
        if (self.latitude is None) != (self.longitude is None):
            raise ValueError("latitude and longitude must both be set or both be absent")

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    def query(self) -> str:
        """
        Coordinate query string understood by the weather provider.

        :return: "lat,lon"
        :raises NoLocationError: If the location carries no coordinates.
        """
        if not self.has_coordinates:
            raise NoLocationError()
        return f"{self.latitude},{self.longitude}"

    @classmethod
    def from_geolocation(cls, payload: Dict[str, Any]) -> "Location":
        """
        Build a Location from a geolocation payload
        (`{status, country, countryCode, region, regionName, city, zip, lat, lon, ...}`).

        Raises KeyError, TypeError or ValueError when the payload is malformed.
        """
        return cls(
            country=str(payload["country"]),
            region=_optional_text(payload.get("region")),
            city=_optional_text(payload.get("city")),
            latitude=_optional_float(payload.get("lat")),
            longitude=_optional_float(payload.get("lon")),
            timezone=_optional_text(payload.get("timezone")),
        )

    @classmethod
    def from_search_result(cls, payload: Dict[str, Any]) -> "Location":
        """Build a Location from one entry of the provider's place search."""
        return cls(
            country=str(payload["country"]),
            region=_optional_text(payload.get("region")),
            city=_optional_text(payload.get("name")),
            latitude=_optional_float(payload["lat"]),
            longitude=_optional_float(payload["lon"]),
            timezone=_optional_text(payload.get("tz_id")),
        )

    def describe(self) -> str:
        """Human-readable "City, Region, Country" label."""
        parts = [p for p in (self.city, self.region, self.country) if p]
        return ", ".join(parts)
