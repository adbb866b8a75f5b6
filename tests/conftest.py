"""
Shared fixtures: sample provider payloads, settings and locations.
"""

import copy
import unittest.mock as mock

import pytest

from ipweather.config import Settings
from ipweather.models.location import Location

CURRENT_PAYLOAD = {
    "location": {
        "name": "London",
        "region": "City of London, Greater London",
        "country": "United Kingdom",
        "lat": 51.5171,
        "lon": -0.1062,
        "tz_id": "Europe/London",
        "localtime": "2024-12-28 00:51",
    },
    "current": {
        "temp_c": 5.1,
        "temp_f": 41.2,
        "is_day": 0,
        "condition": {
            "text": "Fog",
            "icon": "//cdn.weatherapi.com/weather/64x64/night/248.png",
            "code": 1135,
        },
        "wind_mph": 2.2,
        "wind_kph": 3.6,
        "wind_degree": 206,
        "wind_dir": "SSW",
        "pressure_mb": 1030,
        "pressure_in": 30.42,
        "precip_mm": 0,
        "precip_in": 0,
        "humidity": 100,
        "cloud": 100,
        "feelslike_c": 4.8,
        "feelslike_f": 40.7,
        "windchill_c": 5.1,
        "windchill_f": 41.2,
        "heatindex_c": 5.1,
        "heatindex_f": 41.2,
        "dewpoint_c": 4.4,
        "dewpoint_f": 39.9,
        "vis_km": 0.4,
        "vis_miles": 0,
        "uv": 0,
        "gust_mph": 2.5,
        "gust_kph": 4.1,
    },
}

FORECAST_DAYS = [
    {
        "date": "2024-12-28",
        "day": {
            "maxtemp_c": 7.2, "maxtemp_f": 45.0,
            "mintemp_c": 3.1, "mintemp_f": 37.6,
            "avgtemp_c": 5.0, "avgtemp_f": 41.0,
            "maxwind_mph": 6.5, "maxwind_kph": 10.4,
            "totalprecip_mm": 1.2, "totalprecip_in": 0.05,
            "avghumidity": 91,
            "daily_chance_of_rain": 40,
            "daily_chance_of_snow": 0,
            "uv": 0.2,
            "condition": {"text": "Overcast", "icon": "//cdn/122.png", "code": 1009},
        },
        "astro": {
            "sunrise": "08:06 AM",
            "sunset": "03:58 PM",
            "moonrise": "06:11 AM",
            "moonset": "01:58 PM",
            "moon_phase": "Waning Crescent",
            "moon_illumination": 9,
            "is_moon_up": 0,
            "is_sun_up": 1,
        },
    },
    {
        "date": "2024-12-29",
        "day": {
            "maxtemp_c": 8.0, "maxtemp_f": 46.4,
            "mintemp_c": 4.0, "mintemp_f": 39.2,
            "avgtemp_c": 6.0, "avgtemp_f": 42.8,
            "maxwind_mph": 8.1, "maxwind_kph": 13.0,
            "totalprecip_mm": 0.0, "totalprecip_in": 0.0,
            "avghumidity": 85,
            "daily_chance_of_rain": 0,
            "daily_chance_of_snow": 0,
            "uv": 1.0,
            "condition": {"text": "Cloudy", "icon": "//cdn/119.png", "code": 1006},
        },
    },
]

ASTRONOMY_PAYLOAD = {
    "location": {"name": "London", "country": "United Kingdom", "tz_id": "Europe/London"},
    "astronomy": {
        "astro": {
            "sunrise": "08:06 AM",
            "sunset": "03:58 PM",
            "moonrise": "06:11 AM",
            "moonset": "01:58 PM",
            "moon_phase": "Waning Crescent",
            "moon_illumination": 9,
            "is_moon_up": 0,
            "is_sun_up": 0,
        }
    },
}

ALERT_ENTRY = {
    "headline": "Severe Weather Alert",
    "msgtype": "Alert",
    "severity": "Severe",
    "urgency": "Immediate",
    "areas": "London",
    "category": "Met",
    "certainty": "Likely",
    "event": "Heavy Rain",
    "note": "Stay indoors",
    "effective": "2024-12-28T10:00:00Z",
    "expires": "2024-12-28T18:00:00Z",
    "desc": "Heavy rain expected in the area.",
    "instruction": "Stay indoors and avoid travel.",
}

GEOLOCATION_PAYLOAD = {
    "query": "8.8.8.8",
    "status": "success",
    "country": "United States",
    "countryCode": "US",
    "region": "VA",
    "regionName": "Virginia",
    "city": "Ashburn",
    "zip": "20149",
    "lat": 39.03,
    "lon": -77.5,
    "timezone": "America/New_York",
    "isp": "Google LLC",
    "org": "Google Public DNS",
    "as": "AS15169 Google LLC",
}


def make_response(body=None, status_code=200, json_error=None):
    """Stand-in for requests.Response with a canned JSON body."""
    resp = mock.Mock()
    resp.status_code = status_code
    if json_error is not None:
        resp.json.side_effect = json_error
    else:
        resp.json.return_value = body
    return resp


@pytest.fixture
def current_payload():
    return copy.deepcopy(CURRENT_PAYLOAD)


@pytest.fixture
def forecast_payload():
    payload = copy.deepcopy(CURRENT_PAYLOAD)
    payload["forecast"] = {"forecastday": copy.deepcopy(FORECAST_DAYS)}
    payload["alerts"] = {"alert": []}
    return payload


@pytest.fixture
def astronomy_payload():
    return copy.deepcopy(ASTRONOMY_PAYLOAD)


@pytest.fixture
def alert_entry():
    return dict(ALERT_ENTRY)


@pytest.fixture
def geolocation_payload():
    return dict(GEOLOCATION_PAYLOAD)


@pytest.fixture
def settings():
    return Settings(
        public_ip_api="https://ip.example.com",
        ip_location_api="https://geo.example.com/json",
        weather_api="https://weather.example.com/v1",
        weather_key="test_key",
        units="metric",
        timeout=5.0,
    )


@pytest.fixture
def london():
    return Location(
        country="United Kingdom",
        region="City of London, Greater London",
        city="London",
        latitude=51.5171,
        longitude=-0.1062,
        timezone="Europe/London",
    )


@pytest.fixture
def nowhere():
    return Location(
        country="United Kingdom",
        region="City of London, Greater London",
        city="London",
    )


@pytest.fixture
def response_factory():
    return make_response
