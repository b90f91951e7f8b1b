"""
Tests for the forecast flows.
"""

from __future__ import annotations

from datetime import date
from unittest.mock import Mock, patch

from trip_weather.flows import forecast
from trip_weather.schemas import Coordinates, DailyWeatherSummary, LocationForecast, Temperature

DAY = DailyWeatherSummary(
    date=date(2026, 10, 20),
    temperature=Temperature(min=20, max=28),
    conditions="Clear",
    description="clear sky",
    icon="01d",
)


class TestFetchDailyWeather:
    """Task wiring to the forecast engine."""

    @patch("trip_weather.flows.forecast.WeatherService.from_settings")
    def test_delegates_to_service(self, mock_from_settings: Mock) -> None:
        service = mock_from_settings.return_value
        service.get_weather_forecast.return_value = [DAY]

        result = forecast.fetch_daily_weather.fn(6.9, 79.8, date(2026, 10, 20), date(2026, 10, 21))

        assert result == [DAY]
        service.get_weather_forecast.assert_called_once_with(
            6.9, 79.8, date(2026, 10, 20), date(2026, 10, 21)
        )


class TestFetchTrip:
    @patch("trip_weather.flows.forecast.fetch_trip_weather")
    @patch("trip_weather.flows.forecast.WeatherService.from_settings")
    def test_passes_trip_options(self, mock_from_settings: Mock, mock_fetch: Mock) -> None:
        mock_fetch.return_value = []

        forecast.fetch_trip.fn(["Kandy"], "Colombo", date(2026, 10, 20), None, 3)

        mock_fetch.assert_called_once_with(
            mock_from_settings.return_value,
            ["Kandy"],
            source="Colombo",
            start_date=date(2026, 10, 20),
            end_date=None,
            duration_days=3,
        )


class TestForecastFlow:
    @patch("trip_weather.flows.forecast.fetch_daily_weather")
    def test_returns_days(self, mock_task: Mock) -> None:
        mock_task.return_value = [DAY]

        result = forecast.forecast_flow.fn(6.9, 79.8, date(2026, 10, 20), date(2026, 10, 21))

        assert result == [DAY]
        mock_task.assert_called_once_with(6.9, 79.8, date(2026, 10, 20), date(2026, 10, 21))


class TestTripFlow:
    @patch("trip_weather.flows.forecast.fetch_trip")
    def test_returns_locations(self, mock_task: Mock) -> None:
        loc = LocationForecast(
            location="Kandy",
            coordinates=Coordinates(lat=7.29, lng=80.63),
            start_date=date(2026, 10, 20),
            end_date=date(2026, 10, 26),
        )
        mock_task.return_value = [loc]

        result = forecast.trip_flow.fn(["Kandy"])

        assert result == [loc]
        mock_task.assert_called_once_with(["Kandy"], None, None, None, None)
