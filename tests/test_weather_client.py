"""
Unit tests for the weather provider client.

HTTP is mocked at requests.get so every test can count network calls.
"""

import unittest.mock as mock
from datetime import date

import pytest
import requests

from ipweather.api.weather_client import (
    get_alerts,
    get_current_astronomy,
    get_current_weather,
    get_forecast,
    get_forecast_weather,
    search_locations,
)
from ipweather.config import Settings
from ipweather.errors import ConfigError, FetchError, NoLocationError, ResponseError
from ipweather.models.weather import Units

GET = "ipweather.api.http_client.requests.get"
BASE = "https://weather.example.com/v1"


class TestCurrentWeather:
    @mock.patch(GET)
    def test_metric(self, mock_get, london, settings, current_payload, response_factory):
        mock_get.return_value = response_factory(current_payload)

        weather = get_current_weather(london, Units.METRIC, settings)

        assert weather.temperature == 5.1
        assert weather.feels_like == 4.8
        assert weather.condition.text == "Fog"
        mock_get.assert_called_once_with(
            f"{BASE}/current.json",
            params={"key": "test_key", "q": "51.5171,-0.1062"},
            timeout=5.0,
        )

    @mock.patch(GET)
    def test_imperial(self, mock_get, london, settings, current_payload, response_factory):
        mock_get.return_value = response_factory(current_payload)

        weather = get_current_weather(london, Units.IMPERIAL, settings)

        assert weather.temperature == 41.2
        assert weather.feels_like == 40.7

    @mock.patch(GET)
    def test_no_location_makes_no_request(self, mock_get, nowhere, settings):
        with pytest.raises(NoLocationError):
            get_current_weather(nowhere, Units.METRIC, settings)
        mock_get.assert_not_called()

    @mock.patch(GET)
    def test_connection_error_is_fetch_error(self, mock_get, london, settings):
        mock_get.side_effect = requests.exceptions.ConnectionError("connection refused")

        with pytest.raises(FetchError) as exc:
            get_current_weather(london, Units.METRIC, settings)
        assert "connection refused" in exc.value.message

    @mock.patch(GET)
    def test_timeout_is_fetch_error(self, mock_get, london, settings):
        mock_get.side_effect = requests.exceptions.Timeout()

        with pytest.raises(FetchError):
            get_current_weather(london, Units.METRIC, settings)

    @mock.patch(GET)
    def test_wrong_shape_is_response_error(self, mock_get, london, settings, response_factory):
        mock_get.return_value = response_factory({"location": {}})

        with pytest.raises(ResponseError):
            get_current_weather(london, Units.METRIC, settings)

    @mock.patch(GET)
    def test_non_json_is_response_error(self, mock_get, london, settings, response_factory):
        mock_get.return_value = response_factory(
            status_code=502, json_error=ValueError("Expecting value")
        )

        with pytest.raises(ResponseError):
            get_current_weather(london, Units.METRIC, settings)

    @mock.patch(GET)
    def test_provider_error_envelope(self, mock_get, london, settings, response_factory):
        mock_get.return_value = response_factory(
            {"error": {"code": 2006, "message": "API key is invalid."}}, status_code=401
        )

        with pytest.raises(ResponseError) as exc:
            get_current_weather(london, Units.METRIC, settings)
        assert "API key is invalid." in exc.value.message

    @mock.patch(GET)
    def test_missing_key_is_config_error(self, mock_get, london):
        settings = Settings(weather_api=BASE)

        with pytest.raises(ConfigError) as exc:
            get_current_weather(london, Units.METRIC, settings)
        assert exc.value.name == "WEATHER_KEY"
        mock_get.assert_not_called()


class TestForecast:
    @mock.patch(GET)
    def test_forecast_request(self, mock_get, london, settings, forecast_payload, response_factory):
        mock_get.return_value = response_factory(forecast_payload)

        forecast = get_forecast(london, Units.METRIC, 2, settings)

        assert forecast.current.temperature == 5.1
        assert len(forecast.days) == 2
        mock_get.assert_called_once_with(
            f"{BASE}/forecast.json",
            params={"key": "test_key", "q": "51.5171,-0.1062", "days": 2},
            timeout=5.0,
        )

    @mock.patch(GET)
    def test_forecast_weather_returns_current(
        self, mock_get, london, settings, forecast_payload, response_factory
    ):
        mock_get.return_value = response_factory(forecast_payload)

        weather = get_forecast_weather(london, Units.IMPERIAL, 3, settings)

        assert weather.temperature == 41.2
        assert mock_get.call_count == 1

    @mock.patch(GET)
    def test_no_location(self, mock_get, nowhere, settings):
        with pytest.raises(NoLocationError):
            get_forecast(nowhere, Units.METRIC, 3, settings)
        mock_get.assert_not_called()

    @mock.patch(GET)
    def test_fetch_error(self, mock_get, london, settings):
        mock_get.side_effect = requests.exceptions.ConnectionError("down")

        with pytest.raises(FetchError):
            get_forecast_weather(london, Units.METRIC, 3, settings)


class TestAstronomy:
    @mock.patch(GET)
    def test_astronomy(self, mock_get, london, settings, astronomy_payload, response_factory):
        mock_get.return_value = response_factory(astronomy_payload)

        astronomy = get_current_astronomy(london, settings, today=date(2024, 12, 28))

        assert astronomy.sunrise == "08:06 AM"
        assert astronomy.moon_illumination_percent == 9
        assert astronomy.is_moon_up is False
        assert astronomy.is_sun_up is False
        mock_get.assert_called_once_with(
            f"{BASE}/astronomy.json",
            params={"key": "test_key", "q": "51.5171,-0.1062", "dt": "2024-12-28"},
            timeout=5.0,
        )

    @mock.patch("ipweather.api.weather_client.local_today")
    @mock.patch(GET)
    def test_default_date_uses_location_timezone(
        self, mock_get, mock_today, london, settings, astronomy_payload, response_factory
    ):
        mock_get.return_value = response_factory(astronomy_payload)
        mock_today.return_value = date(2025, 1, 2)

        get_current_astronomy(london, settings)

        mock_today.assert_called_once_with("Europe/London")
        assert mock_get.call_args.kwargs["params"]["dt"] == "2025-01-02"

    @mock.patch(GET)
    def test_no_location(self, mock_get, nowhere, settings):
        with pytest.raises(NoLocationError):
            get_current_astronomy(nowhere, settings)
        mock_get.assert_not_called()

    @mock.patch(GET)
    def test_wrong_shape_is_response_error(self, mock_get, london, settings, response_factory):
        mock_get.return_value = response_factory({"astronomy": {"astro": {"sunrise": "x"}}})

        with pytest.raises(ResponseError):
            get_current_astronomy(london, settings, today=date(2024, 12, 28))


class TestAlerts:
    @mock.patch(GET)
    def test_alerts(self, mock_get, london, settings, alert_entry, response_factory):
        mock_get.return_value = response_factory({"alerts": {"alert": [alert_entry]}})

        alerts = get_alerts(london, 3, settings)

        assert len(alerts) == 1
        assert alerts[0].headline == "Severe Weather Alert"
        mock_get.assert_called_once_with(
            f"{BASE}/forecast.json",
            params={"key": "test_key", "q": "51.5171,-0.1062", "days": 3, "alerts": "yes"},
            timeout=5.0,
        )

    @mock.patch(GET)
    def test_empty_alerts(self, mock_get, london, settings, response_factory):
        mock_get.return_value = response_factory({"alerts": {"alert": []}})

        alerts = get_alerts(london, 3, settings)

        assert len(alerts) == 0

    @mock.patch(GET)
    def test_no_location(self, mock_get, nowhere, settings):
        with pytest.raises(NoLocationError):
            get_alerts(nowhere, 3, settings)
        mock_get.assert_not_called()

    @mock.patch(GET)
    def test_fetch_error(self, mock_get, london, settings):
        mock_get.side_effect = requests.exceptions.ConnectionError("unreachable")

        with pytest.raises(FetchError):
            get_alerts(london, 3, settings)


class TestSearchLocations:
    @mock.patch(GET)
    def test_matches(self, mock_get, settings, response_factory):
        mock_get.return_value = response_factory(
            [
                {
                    "id": 2801268,
                    "name": "London",
                    "region": "City of London, Greater London",
                    "country": "United Kingdom",
                    "lat": 51.52,
                    "lon": -0.11,
                    "url": "london-city-of-london-greater-london-united-kingdom",
                },
                {
                    "id": 315398,
                    "name": "London",
                    "region": "Ontario",
                    "country": "Canada",
                    "lat": 42.98,
                    "lon": -81.25,
                    "url": "london-ontario-canada",
                },
            ]
        )

        locations = search_locations("London", settings)

        assert [l.country for l in locations] == ["United Kingdom", "Canada"]
        assert locations[0].city == "London"
        assert locations[0].query() == "51.52,-0.11"
        mock_get.assert_called_once_with(
            f"{BASE}/search.json", params={"key": "test_key", "q": "London"}, timeout=5.0
        )

    @mock.patch(GET)
    def test_no_matches(self, mock_get, settings, response_factory):
        mock_get.return_value = response_factory([])
        assert search_locations("Atlantis", settings) == []

    @mock.patch(GET)
    def test_object_instead_of_list(self, mock_get, settings, response_factory):
        mock_get.return_value = response_factory({"unexpected": True})

        with pytest.raises(ResponseError):
            search_locations("London", settings)
