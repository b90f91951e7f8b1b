"""
Forecast engine: current conditions + 3-hour forecast -> daily summaries.

``WeatherService`` issues the current and forecast requests concurrently,
turns each into a ``FetchResult``, summarizes whatever succeeded and returns
the requested window of ``DailyWeatherSummary`` records.

Failures never reach the caller. A missing API key disables the service
(empty forecast, no coordinates) and any upstream error is logged and
degrades to an empty result, or a partial one when ``allow_partial`` is set.

Example::

    from trip_weather.services.weather import WeatherService

    service = WeatherService.from_settings()
    days = service.get_weather_forecast(6.93, 79.86, "2026-10-19", "2026-10-23")
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import UTC, date, datetime, tzinfo
from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo

import requests

from trip_weather.analysis.daily import (
    group_by_local_date,
    summarize_current_day,
    summarize_forecast_days,
)
from trip_weather.analysis.window import MAX_FORECAST_DAYS, select_window
from trip_weather.config import Settings, get_settings
from trip_weather.datasources.openweather import (
    BASE_URL,
    GEOCODING_TIMEOUT,
    GEOCODING_URL,
    WEATHER_TIMEOUT,
    fetch_current_weather,
    fetch_forecast,
    fetch_geocoding,
    parse_coordinates,
    parse_current_sample,
    parse_forecast_samples,
)
from trip_weather.schemas import FetchResult

if TYPE_CHECKING:
    from collections.abc import Callable

    from trip_weather.schemas import Coordinates, DailyWeatherSummary

logger = logging.getLogger(__name__)

# Errors that count as an upstream failure. JSON decoding errors are ValueErrors.
UPSTREAM_ERRORS = (requests.RequestException, ValueError)


def _utc_now() -> datetime:
    return datetime.now(UTC)


def as_date(value: date | str) -> date:
    """Accept a ``date`` or an ISO ``YYYY-MM-DD`` string."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(value)


class WeatherService:
    """Daily weather summaries for a point and date range."""

    def __init__(
        self,
        api_key: str | None,
        *,
        base_url: str = BASE_URL,
        geocoding_url: str = GEOCODING_URL,
        weather_timeout: float = WEATHER_TIMEOUT,
        geocoding_timeout: float = GEOCODING_TIMEOUT,
        timezone: str | tzinfo = "UTC",
        max_days: int = MAX_FORECAST_DAYS,
        allow_partial: bool = False,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self.api_key = api_key or None
        self.base_url = base_url.rstrip("/")
        self.geocoding_url = geocoding_url
        self.weather_timeout = weather_timeout
        self.geocoding_timeout = geocoding_timeout
        self.tz = ZoneInfo(timezone) if isinstance(timezone, str) else timezone
        self.max_days = max_days
        self.allow_partial = allow_partial
        self.clock = clock

        if not self.api_key:
            logger.warning("OpenWeatherMap API key not configured - weather features are disabled")

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> WeatherService:
        """Build a service from application settings."""
        settings = settings or get_settings()
        return cls(
            settings.openweather_api_key,
            base_url=settings.base_url,
            geocoding_url=settings.geocoding_url,
            weather_timeout=settings.weather_timeout,
            geocoding_timeout=settings.geocoding_timeout,
            timezone=settings.timezone,
            max_days=settings.max_days,
            allow_partial=settings.allow_partial,
        )

    @property
    def enabled(self) -> bool:
        return self.api_key is not None

    def today(self) -> date:
        """Current calendar date in the service timezone."""
        return self.clock().astimezone(self.tz).date()

    # ------------------------------------------------------------------
    # Upstream calls
    # ------------------------------------------------------------------

    def fetch_current(self, lat: float, lon: float) -> FetchResult:
        """Current conditions as a ``CurrentSample``, or the failure reason."""
        if self.api_key is None:
            return FetchResult.failed("current", "API key not configured")
        try:
            payload = fetch_current_weather(
                lat, lon, self.api_key, base_url=self.base_url, timeout=self.weather_timeout
            )
        except UPSTREAM_ERRORS as exc:
            logger.error("Current weather request failed for (%s, %s): %s", lat, lon, exc)
            return FetchResult.failed("current", str(exc))
        return FetchResult.ok("current", parse_current_sample(payload))

    def fetch_forecast(self, lat: float, lon: float) -> FetchResult:
        """3-hour forecast as a list of ``ForecastSample``, or the failure reason."""
        if self.api_key is None:
            return FetchResult.failed("forecast", "API key not configured")
        try:
            payload = fetch_forecast(
                lat, lon, self.api_key, base_url=self.base_url, timeout=self.weather_timeout
            )
        except UPSTREAM_ERRORS as exc:
            logger.error("Forecast request failed for (%s, %s): %s", lat, lon, exc)
            return FetchResult.failed("forecast", str(exc))
        samples = parse_forecast_samples(payload)
        logger.debug("Forecast for (%s, %s): %d samples", lat, lon, len(samples))
        return FetchResult.ok("forecast", samples)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def get_weather_forecast(
        self,
        latitude: float,
        longitude: float,
        start_date: date | str,
        end_date: date | str,
    ) -> list[DailyWeatherSummary]:
        """
        Daily summaries for ``[start_date, end_date]``, at most ``max_days`` long.

        Today comes from the live current-conditions reading; later days are
        aggregated from the 3-hour forecast.

        Returns:
            Summaries sorted by date. Empty when the service is disabled, the
            dates are invalid, or any upstream call failed (every call, when
            ``allow_partial`` is set).
        """
        if not self.enabled:
            logger.warning("Weather API key not configured, returning empty forecast")
            return []

        try:
            start, end = as_date(start_date), as_date(end_date)
        except (TypeError, ValueError) as exc:
            logger.error("Invalid forecast date range %r..%r: %s", start_date, end_date, exc)
            return []

        with ThreadPoolExecutor(max_workers=2, thread_name_prefix="weather") as pool:
            current_future = pool.submit(self.fetch_current, latitude, longitude)
            forecast_future = pool.submit(self.fetch_forecast, latitude, longitude)
            current = current_future.result()
            forecast = forecast_future.result()

        if not self.allow_partial and not (current.success and forecast.success):
            logger.error("Discarding weather results: %s", current.error or forecast.error)
            return []

        today = self.today()
        summaries: list[DailyWeatherSummary] = []
        if current.success:
            summaries.append(summarize_current_day(today, current.data))
        if forecast.success:
            buckets = group_by_local_date(forecast.data, self.tz, today)
            summaries.extend(summarize_forecast_days(buckets, self.tz))

        return select_window(summaries, start, end, self.max_days)

    def get_coordinates(self, location: str) -> Coordinates | None:
        """Geocode a place name; None when disabled, unmatched or on failure."""
        if self.api_key is None:
            logger.warning("Weather API key not configured, skipping geocoding for %r", location)
            return None

        try:
            payload = fetch_geocoding(
                location, self.api_key, url=self.geocoding_url, timeout=self.geocoding_timeout
            )
        except UPSTREAM_ERRORS as exc:
            logger.error("Geocoding request failed for %r: %s", location, exc)
            return None

        coordinates = parse_coordinates(payload)
        if coordinates is None:
            logger.info("No geocoding match for %r", location)
        return coordinates
