"""
Weather utility functions for formatting.

This module provides reusable weather-related formatting helpers used by the
command-line renderer.
"""

from typing import Dict

from ipweather.models.weather import Units

UNIT_LABELS: Dict[Units, Dict[str, str]] = {
    Units.METRIC: {
        "temperature": "°C",
        "speed": "km/h",
        "pressure": "mb",
        "precipitation": "mm",
        "distance": "km",
    },
    Units.IMPERIAL: {
        "temperature": "°F",
        "speed": "mph",
        "pressure": "inHg",
        "precipitation": "in",
        "distance": "mi",
    },
}


def unit_labels(units: Units) -> Dict[str, str]:
    """
    Return display suffixes for a unit system.

    :param units: Unit system the record was built with
    :return: Dict keyed by quantity (temperature, speed, pressure, ...)
    """
    return UNIT_LABELS[units]


def format_wind_direction(degrees: float) -> str:
    """
    Convert wind direction in degrees to cardinal direction.

    :param degrees: Wind direction in degrees (0-360)
    :return: Cardinal direction string (N, NE, E, SE, S, SW, W, NW)
    """
    degrees = degrees % 360
    if 337.5 <= degrees or degrees < 22.5:
        return "N"
    elif 22.5 <= degrees < 67.5:
        return "NE"
    elif 67.5 <= degrees < 112.5:
        return "E"
    elif 112.5 <= degrees < 157.5:
        return "SE"
    elif 157.5 <= degrees < 202.5:
        return "S"
    elif 202.5 <= degrees < 247.5:
        return "SW"
    elif 247.5 <= degrees < 292.5:
        return "W"
    else:
        return "NW"


def classify_uv_level(uv_index: float) -> str:
    """
    Classify UV index into human-readable levels.

    :param uv_index: UV index value
    :return: UV level string (Low, Moderate, High, Very High, Extreme)
    """
    if uv_index >= 11:
        return "Extreme"
    elif uv_index >= 8:
        return "Very High"
    elif uv_index >= 6:
        return "High"
    elif uv_index >= 3:
        return "Moderate"
    else:
        return "Low"


def format_number(value: float) -> str:
    """Drop a trailing `.0` so whole readings print as integers."""
    if float(value).is_integer():
        return str(int(value))
    return str(round(value, 2))
