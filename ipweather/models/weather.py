"""
Weather data models and type definitions.

This module provides type-safe data structures for current conditions and
forecasts, plus the mapping from the provider's payload. The provider sends
every measured quantity twice (metric and imperial); the unit system picked
at construction decides which family fills the record.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from ipweather.errors import InvalidArgumentError
from ipweather.models.astronomy import Astronomy, flag_to_bool


class Units(Enum):
    METRIC = "metric"
    IMPERIAL = "imperial"

    @classmethod
    def parse(cls, value: str) -> "Units":
        """Parse "metric"/"imperial" (any case) into a Units member."""
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise InvalidArgumentError(
                str(value), "Units should be 'metric' or 'imperial'."
            ) from None


# Upstream suffix for each measured quantity, per unit system.
CURRENT_FIELDS: Dict[Units, Dict[str, str]] = {
    Units.METRIC: {
        "temperature": "temp_c",
        "feels_like": "feelslike_c",
        "heat_index": "heatindex_c",
        "wind_speed": "wind_kph",
        "wind_gust_speed": "gust_kph",
        "wind_chill": "windchill_c",
        "pressure": "pressure_mb",
        "precipitation": "precip_mm",
        "visibility": "vis_km",
        "dew_point": "dewpoint_c",
    },
    Units.IMPERIAL: {
        "temperature": "temp_f",
        "feels_like": "feelslike_f",
        "heat_index": "heatindex_f",
        "wind_speed": "wind_mph",
        "wind_gust_speed": "gust_mph",
        "wind_chill": "windchill_f",
        "pressure": "pressure_in",
        "precipitation": "precip_in",
        "visibility": "vis_miles",
        "dew_point": "dewpoint_f",
    },
}

FORECAST_DAY_FIELDS: Dict[Units, Dict[str, str]] = {
    Units.METRIC: {
        "max_temperature": "maxtemp_c",
        "min_temperature": "mintemp_c",
        "avg_temperature": "avgtemp_c",
        "max_wind_speed": "maxwind_kph",
        "total_precipitation": "totalprecip_mm",
    },
    Units.IMPERIAL: {
        "max_temperature": "maxtemp_f",
        "min_temperature": "mintemp_f",
        "avg_temperature": "avgtemp_f",
        "max_wind_speed": "maxwind_mph",
        "total_precipitation": "totalprecip_in",
    },
}


def _unit_values(source: Dict[str, Any], mapping: Dict[str, str]) -> Dict[str, float]:
    return {name: float(source[key]) for name, key in mapping.items()}


@dataclass(frozen=True)
class Condition:
    """Short textual description of the sky, with the provider's icon."""

    text: str
    icon_reference: str
    code: int

    @classmethod
    def from_response(cls, payload: Dict[str, Any]) -> "Condition":
        return cls(
            text=str(payload["text"]),
            icon_reference=str(payload["icon"]),
            code=int(payload["code"]),
        )


@dataclass(frozen=True)
class Weather:
    """Current weather conditions in a single unit system."""

    is_day: bool
    temperature: float
    feels_like: float
    heat_index: float
    condition: Condition
    wind_speed: float
    wind_degree: int
    wind_direction: str
    wind_gust_speed: float
    wind_chill: float
    pressure: float
    precipitation: float
    humidity: int
    cloud_percent: int
    uv_index: float
    visibility: float
    dew_point: float

    @classmethod
    def from_response(cls, payload: Dict[str, Any], units: Units) -> "Weather":
        """
        Map a current/forecast payload (`{"location": ..., "current": ...}`).

        :param payload: Decoded JSON body.
        :param units: Unit system whose field family fills every measurement.
        :return: Weather record.
        :raises KeyError, TypeError, ValueError: On a malformed payload.
        """
        current = payload["current"]
        return cls(
            is_day=flag_to_bool(current["is_day"]),
            condition=Condition.from_response(current["condition"]),
            wind_degree=int(current["wind_degree"]),
            wind_direction=str(current["wind_dir"]),
            humidity=int(current["humidity"]),
            cloud_percent=int(current["cloud"]),
            uv_index=float(current["uv"]),
            **_unit_values(current, CURRENT_FIELDS[units]),
        )


@dataclass(frozen=True)
class ForecastDay:
    """Daily summary for one forecast date."""

    date: str
    max_temperature: float
    min_temperature: float
    avg_temperature: float
    max_wind_speed: float
    total_precipitation: float
    avg_humidity: int
    chance_of_rain: int
    chance_of_snow: int
    uv_index: float
    condition: Condition
    astronomy: Optional[Astronomy] = None

    @classmethod
    def from_response(cls, payload: Dict[str, Any], units: Units) -> "ForecastDay":
        day = payload["day"]
        astro = payload.get("astro")
        return cls(
            date=str(payload["date"]),
            avg_humidity=int(round(float(day.get("avghumidity", 0)))),
            chance_of_rain=int(day.get("daily_chance_of_rain", 0)),
            chance_of_snow=int(day.get("daily_chance_of_snow", 0)),
            uv_index=float(day.get("uv", 0)),
            condition=Condition.from_response(day["condition"]),
            astronomy=Astronomy.from_astro(astro) if astro else None,
            **_unit_values(day, FORECAST_DAY_FIELDS[units]),
        )


@dataclass(frozen=True)
class Forecast:
    """Current conditions plus one summary per forecast day."""

    current: Weather
    days: Tuple[ForecastDay, ...] = ()

    @classmethod
    def from_response(cls, payload: Dict[str, Any], units: Units) -> "Forecast":
        forecast_days = (payload.get("forecast") or {}).get("forecastday") or []
        return cls(
            current=Weather.from_response(payload, units),
            days=tuple(ForecastDay.from_response(d, units) for d in forecast_days),
        )
