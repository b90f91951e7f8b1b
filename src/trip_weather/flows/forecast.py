"""
Prefect flows around the forecast engine.

Run locally:
    python -m trip_weather.flows.forecast

Run with Prefect dashboard:
    prefect server start &
    python -m trip_weather.flows.forecast

Upstream calls are single attempt, so tasks are not retried.
"""

from __future__ import annotations

from datetime import date, timedelta

from prefect import flow, task

from trip_weather.config import get_settings
from trip_weather.schemas import DailyWeatherSummary, LocationForecast
from trip_weather.services.trip import fetch_trip_weather
from trip_weather.services.weather import WeatherService


@task(name="fetch-daily-weather")
def fetch_daily_weather(
    lat: float,
    lon: float,
    start_date: date,
    end_date: date,
) -> list[DailyWeatherSummary]:
    """Daily summaries for one point from OpenWeatherMap."""
    service = WeatherService.from_settings()
    return service.get_weather_forecast(lat, lon, start_date, end_date)


@task(name="fetch-trip-weather")
def fetch_trip(
    destinations: list[str],
    source: str | None = None,
    start_date: date | None = None,
    end_date: date | None = None,
    duration_days: int | None = None,
) -> list[LocationForecast]:
    """Geocode and forecast every trip destination."""
    service = WeatherService.from_settings()
    return fetch_trip_weather(
        service,
        destinations,
        source=source,
        start_date=start_date,
        end_date=end_date,
        duration_days=duration_days,
    )


@flow(name="daily-forecast", log_prints=True)
def forecast_flow(
    lat: float,
    lon: float,
    start_date: date,
    end_date: date,
) -> list[DailyWeatherSummary]:
    """
    Daily weather summaries for a point and date range.

    Returns an empty list when the API key is missing or upstream calls fail.
    """
    print(f"Fetching weather for ({lat}, {lon}) from {start_date} to {end_date}...")
    days = fetch_daily_weather(lat, lon, start_date, end_date)
    print(f"Got {len(days)} day(s) of weather")
    return days


@flow(name="trip-weather", log_prints=True)
def trip_flow(
    destinations: list[str],
    source: str | None = None,
    start_date: date | None = None,
    end_date: date | None = None,
    duration_days: int | None = None,
) -> list[LocationForecast]:
    """Weather for every destination of a trip."""
    print(f"Fetching trip weather for {len(destinations)} destination(s)...")
    locations = fetch_trip(destinations, source, start_date, end_date, duration_days)
    print(f"Got weather for {len(locations)} location(s)")
    return locations


if __name__ == "__main__":
    settings = get_settings()
    today = WeatherService.from_settings(settings).today()
    result = forecast_flow(settings.lat, settings.lon, today, today + timedelta(days=6))
    print(f"Flow complete: {len(result)} day(s)")
