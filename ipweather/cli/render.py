"""
render.py: Plain-text rendering of domain records for the terminal.

Records do not remember their unit system, so renderers that print
measurements take the Units used to build them.
"""

from typing import List

from ipweather.models.alert import Alert, Alerts
from ipweather.models.astronomy import Astronomy
from ipweather.models.location import Location
from ipweather.models.weather import Forecast, ForecastDay, Units, Weather
from ipweather.utils.date_util import format_timestamp
from ipweather.utils.weather_utils import (
    classify_uv_level,
    format_number,
    format_wind_direction,
    unit_labels,
)


def _yes_no(flag: bool) -> str:
    return "yes" if flag else "no"


def render_location(location: Location) -> str:
    text = f"📍 {location.describe() or 'Unknown location'}"
    if location.has_coordinates:
        text += f" ({location.latitude}, {location.longitude})"
    return text


def render_weather(weather: Weather, units: Units) -> str:
    """Multi-line summary of current conditions."""
    u = unit_labels(units)
    direction = weather.wind_direction or format_wind_direction(weather.wind_degree)
    lines = [
        f"{weather.condition.text} ({'day' if weather.is_day else 'night'})",
        f"Temperature: {format_number(weather.temperature)}{u['temperature']}"
        f" (feels like {format_number(weather.feels_like)}{u['temperature']})",
        f"Heat index: {format_number(weather.heat_index)}{u['temperature']}",
        f"Wind chill: {format_number(weather.wind_chill)}{u['temperature']}",
        f"Dew point: {format_number(weather.dew_point)}{u['temperature']}",
        f"Wind: {format_number(weather.wind_speed)} {u['speed']} {direction}"
        f" ({weather.wind_degree}°), gusts {format_number(weather.wind_gust_speed)} {u['speed']}",
        f"Pressure: {format_number(weather.pressure)} {u['pressure']}",
        f"Precipitation: {format_number(weather.precipitation)} {u['precipitation']}",
        f"Humidity: {weather.humidity}%",
        f"Cloud cover: {weather.cloud_percent}%",
        f"Visibility: {format_number(weather.visibility)} {u['distance']}",
        f"UV index: {format_number(weather.uv_index)} ({classify_uv_level(weather.uv_index)})",
    ]
    return "\n".join(lines)


def render_forecast_day(day: ForecastDay, units: Units) -> str:
    u = unit_labels(units)
    line = (
        f"{day.date}: {day.condition.text}, "
        f"{format_number(day.min_temperature)}{u['temperature']} to "
        f"{format_number(day.max_temperature)}{u['temperature']}, "
        f"rain {day.chance_of_rain}%, "
        f"precip {format_number(day.total_precipitation)} {u['precipitation']}, "
        f"wind up to {format_number(day.max_wind_speed)} {u['speed']}"
    )
    if day.astronomy:
        line += f", sunrise {day.astronomy.sunrise}, sunset {day.astronomy.sunset}"
    return line


def render_forecast(forecast: Forecast, units: Units) -> str:
    parts = [render_weather(forecast.current, units)]
    if forecast.days:
        parts.append("")
        parts.extend(render_forecast_day(day, units) for day in forecast.days)
    return "\n".join(parts)


def render_astronomy(astronomy: Astronomy) -> str:
    return "\n".join(
        [
            f"Sunrise: {astronomy.sunrise}",
            f"Sunset: {astronomy.sunset}",
            f"Moonrise: {astronomy.moonrise}",
            f"Moonset: {astronomy.moonset}",
            f"Moon phase: {astronomy.moon_phase}"
            f" ({astronomy.moon_illumination_percent}% illuminated)",
            f"Sun up: {_yes_no(astronomy.is_sun_up)}",
            f"Moon up: {_yes_no(astronomy.is_moon_up)}",
        ]
    )


def render_alert(alert: Alert) -> str:
    fields = [
        ("Headline", alert.headline),
        ("Type", alert.message_type),
        ("Event", alert.event),
        ("Severity", alert.severity),
        ("Urgency", alert.urgency),
        ("Certainty", alert.certainty),
        ("Category", alert.category),
        ("Areas", alert.areas),
        ("Effective", format_timestamp(alert.effective_time)),
        ("Expires", format_timestamp(alert.expires_time)),
        ("Description", alert.description),
        ("Instruction", alert.instruction),
        ("Note", alert.note),
    ]
    return "\n".join(f"{label}: {value}" for label, value in fields if value)


def render_alerts(alerts: Alerts) -> str:
    if not len(alerts):
        return "✅ No weather alerts in effect."
    blocks: List[str] = [f"🚨 {len(alerts)} weather alert(s):"]
    blocks.extend(render_alert(alert) for alert in alerts)
    return "\n\n".join(blocks)
