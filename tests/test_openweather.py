"""Tests for the OpenWeatherMap datasource: requests and payload normalization."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC
from typing import Any
from unittest.mock import Mock, patch

import pytest
import requests

from trip_weather.datasources.openweather import (
    BASE_URL,
    GEOCODING_URL,
    fetch_current_weather,
    fetch_forecast,
    fetch_geocoding,
    parse_coordinates,
    parse_current_sample,
    parse_forecast_samples,
)
from trip_weather.datasources.openweather.forecast import parse_forecast_sample
from trip_weather.datasources.openweather.models import as_number, weather_fields
from trip_weather.schemas import Coordinates

PayloadFactory = Callable[..., dict[str, Any]]


def _response(payload: object) -> Mock:
    resp = Mock()
    resp.json.return_value = payload
    resp.raise_for_status = Mock()
    return resp


class TestFetchCurrentWeather:
    """Request shape for the current weather endpoint."""

    @patch("trip_weather.datasources.openweather.current.session.get")
    def test_request_params(self, mock_get: Mock) -> None:
        mock_get.return_value = _response({"main": {"temp": 25}})

        result = fetch_current_weather(6.93, 79.86, "secret")

        assert result == {"main": {"temp": 25}}
        url = mock_get.call_args.args[0]
        kwargs = mock_get.call_args.kwargs
        assert url == f"{BASE_URL}/weather"
        assert kwargs["params"] == {
            "lat": 6.93,
            "lon": 79.86,
            "units": "metric",
            "appid": "secret",
        }
        assert kwargs["timeout"] == 10

    @patch("trip_weather.datasources.openweather.current.session.get")
    def test_http_error_propagates(self, mock_get: Mock) -> None:
        resp = _response({})
        resp.raise_for_status.side_effect = requests.HTTPError("401 Unauthorized")
        mock_get.return_value = resp

        with pytest.raises(requests.HTTPError):
            fetch_current_weather(0, 0, "bad-key")


class TestFetchForecast:
    @patch("trip_weather.datasources.openweather.forecast.session.get")
    def test_request_params(self, mock_get: Mock) -> None:
        mock_get.return_value = _response({"list": []})

        fetch_forecast(1.5, 2.5, "secret", base_url="http://local/api", timeout=3)

        assert mock_get.call_args.args[0] == "http://local/api/forecast"
        assert mock_get.call_args.kwargs["params"]["units"] == "metric"
        assert mock_get.call_args.kwargs["timeout"] == 3


class TestFetchGeocoding:
    @patch("trip_weather.datasources.openweather.geocoding.session.get")
    def test_request_params(self, mock_get: Mock) -> None:
        mock_get.return_value = _response([])

        fetch_geocoding("Kandy", "secret")

        assert mock_get.call_args.args[0] == GEOCODING_URL
        assert mock_get.call_args.kwargs["params"] == {
            "q": "Kandy",
            "limit": 1,
            "appid": "secret",
        }
        assert mock_get.call_args.kwargs["timeout"] == 5


class TestParseCurrentSample:
    """Defaults are applied when fields are missing."""

    def test_full_payload(self, current_payload: PayloadFactory) -> None:
        sample = parse_current_sample(current_payload(temp=31.4, humidity=80, wind=2.5))
        assert sample.temp_c == 31.4
        assert sample.humidity_pct == 80
        assert sample.wind_speed_ms == 2.5
        assert sample.conditions == "Clear"
        assert sample.description == "clear sky"
        assert sample.icon == "01d"
        assert sample.uv_index is None

    def test_empty_payload_uses_defaults(self) -> None:
        sample = parse_current_sample({})
        assert sample.temp_c == 0
        assert sample.humidity_pct == 0
        assert sample.wind_speed_ms == 0
        assert sample.conditions == "Unknown"
        assert sample.description == "Weather data unavailable"
        assert sample.icon == "01d"

    def test_empty_weather_list(self, current_payload: PayloadFactory) -> None:
        payload = current_payload()
        payload["weather"] = []
        sample = parse_current_sample(payload)
        assert sample.conditions == "Unknown"

    def test_uvi_used_when_present(self, current_payload: PayloadFactory) -> None:
        sample = parse_current_sample(current_payload(uvi=7.2))
        assert sample.uv_index == 7.2

    def test_out_of_range_values_clamped(self, current_payload: PayloadFactory) -> None:
        sample = parse_current_sample(current_payload(humidity=140, wind=-3))
        assert sample.humidity_pct == 100
        assert sample.wind_speed_ms == 0

    def test_non_finite_temperature(self, current_payload: PayloadFactory) -> None:
        assert parse_current_sample(current_payload(temp=float("nan"))).temp_c == 0
        assert parse_current_sample(current_payload(temp="1e999")).temp_c == 0

    def test_non_dict_payload(self) -> None:
        sample = parse_current_sample(None)  # type: ignore[arg-type]
        assert sample.conditions == "Unknown"


class TestParseForecastSamples:
    def test_preserves_order(self, forecast_entry: PayloadFactory) -> None:
        payload = {"list": [forecast_entry(300), forecast_entry(100), forecast_entry(200)]}
        samples = parse_forecast_samples(payload)
        assert [s.timestamp for s in samples] == [300, 100, 200]

    def test_missing_list_is_empty(self) -> None:
        assert parse_forecast_samples({}) == []
        assert parse_forecast_samples({"list": None}) == []

    def test_entries_without_dt_dropped(self, forecast_entry: PayloadFactory) -> None:
        no_dt = forecast_entry(0)
        del no_dt["dt"]
        payload = {"list": [no_dt, "garbage", forecast_entry(100)]}
        samples = parse_forecast_samples(payload)
        assert [s.timestamp for s in samples] == [100]

    @pytest.mark.parametrize("dt", [10**20, -(10**20), float("inf"), float("nan"), "soon"])
    def test_unrepresentable_dt_dropped(self, forecast_entry: PayloadFactory, dt: object) -> None:
        """Timestamps a datetime cannot hold are skipped like missing ones."""
        assert parse_forecast_sample(forecast_entry(dt)) is None
        payload = {"list": [forecast_entry(dt), forecast_entry(100)]}
        assert [s.timestamp for s in parse_forecast_samples(payload)] == [100]

    def test_non_finite_fields_default(self, forecast_entry: PayloadFactory) -> None:
        sample = parse_forecast_sample(
            forecast_entry(100, temp=float("nan"), wind=float("inf"), pop=float("nan"))
        )
        assert sample is not None
        assert sample.temp_c == 0
        assert sample.wind_speed_ms == 0
        assert sample.precipitation_probability == 0

    def test_pop_defaults_and_clamps(self, forecast_entry: PayloadFactory) -> None:
        entry = forecast_entry(100)
        del entry["pop"]
        sample = parse_forecast_sample(entry)
        assert sample is not None
        assert sample.precipitation_probability == 0

        sample = parse_forecast_sample(forecast_entry(100, pop=1.7))
        assert sample is not None
        assert sample.precipitation_probability == 1

    def test_precipitation_pct(self, forecast_entry: PayloadFactory) -> None:
        sample = parse_forecast_sample(forecast_entry(100, pop=0.35))
        assert sample is not None
        assert sample.precipitation_pct == pytest.approx(35)

    def test_local_datetime(self, forecast_entry: PayloadFactory) -> None:
        sample = parse_forecast_sample(forecast_entry(0))
        assert sample is not None
        assert sample.local_datetime(UTC).year == 1970


class TestParseCoordinates:
    def test_empty_list(self) -> None:
        assert parse_coordinates([]) is None

    def test_first_match(self) -> None:
        payload = [
            {"name": "Kandy", "lat": 7.2906, "lon": 80.6337, "country": "LK"},
            {"name": "Kandy", "lat": 1.0, "lon": 1.0},
        ]
        assert parse_coordinates(payload) == Coordinates(lat=7.2906, lng=80.6337)

    def test_unusable_payloads(self) -> None:
        assert parse_coordinates(None) is None
        assert parse_coordinates({"lat": 1}) is None
        assert parse_coordinates([{"name": "nowhere"}]) is None
        assert parse_coordinates([{"lat": 200, "lon": 0}]) is None


class TestFieldHelpers:
    def test_as_number(self) -> None:
        assert as_number("12.5") == 12.5
        assert as_number(None) == 0
        assert as_number(True) == 0
        assert as_number("n/a", default=20) == 20

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), "-inf", "1e999", 10**400])
    def test_as_number_non_finite(self, value: object) -> None:
        """Values that are not finite floats fall back to the default."""
        assert as_number(value) == 0
        assert as_number(value, default=20) == 20

    def test_weather_fields_non_list(self) -> None:
        assert weather_fields({"weather": {"main": "Rain"}}) == (
            "Unknown",
            "Weather data unavailable",
            "01d",
        )
