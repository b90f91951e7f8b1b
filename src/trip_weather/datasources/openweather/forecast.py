"""5-day / 3-hour forecast from the OpenWeatherMap forecast API."""

from __future__ import annotations

import logging
from datetime import MAXYEAR, MINYEAR, UTC, datetime
from typing import Any

from trip_weather.datasources.openweather.client import (
    BASE_URL,
    FORECAST_PATH,
    UNITS,
    WEATHER_TIMEOUT,
)
from trip_weather.datasources.openweather.models import (
    ForecastSample,
    as_number,
    clamp,
    section,
    weather_fields,
)
from trip_weather.services.http import session

logger = logging.getLogger(__name__)


def fetch_forecast(
    lat: float,
    lon: float,
    api_key: str,
    *,
    base_url: str = BASE_URL,
    timeout: float = WEATHER_TIMEOUT,
) -> dict[str, Any]:
    """
    Fetch the 5-day / 3-hour forecast for a point.

    Returns:
        Raw API response dict with a ``list`` of 3-hour entries.

    Raises:
        requests.RequestException: On network errors, timeouts or non-2xx status.
    """
    params: dict[str, str | float] = {
        "lat": lat,
        "lon": lon,
        "units": UNITS,
        "appid": api_key,
    }
    resp = session.get(f"{base_url}{FORECAST_PATH}", params=params, timeout=timeout)
    resp.raise_for_status()
    result: dict[str, Any] = resp.json()
    return result


def _usable_timestamp(dt: Any) -> int | None:
    """Epoch seconds that any timezone can represent, else None."""
    if dt is None or isinstance(dt, bool):
        return None
    try:
        timestamp = int(dt)
        when = datetime.fromtimestamp(timestamp, UTC)
    except (TypeError, ValueError, OverflowError, OSError):
        return None
    # a year of headroom so local-time conversion cannot overflow
    if not MINYEAR < when.year < MAXYEAR:
        return None
    return timestamp


def parse_forecast_sample(entry: dict[str, Any]) -> ForecastSample | None:
    """Convert one forecast entry; entries without a usable ``dt`` are dropped."""
    timestamp = _usable_timestamp(entry.get("dt"))
    if timestamp is None:
        return None

    conditions, description, icon = weather_fields(entry)
    main = section(entry, "main")
    wind = section(entry, "wind")
    return ForecastSample(
        timestamp=timestamp,
        temp_c=as_number(main.get("temp")),
        humidity_pct=clamp(as_number(main.get("humidity")), 0, 100),
        wind_speed_ms=max(0.0, as_number(wind.get("speed"))),
        precipitation_probability=clamp(as_number(entry.get("pop")), 0, 1),
        conditions=conditions,
        description=description,
        icon=icon,
    )


def parse_forecast_samples(payload: dict[str, Any]) -> list[ForecastSample]:
    """Convert a forecast payload into samples, preserving upstream order."""
    entries = payload.get("list") if isinstance(payload, dict) else None
    if not isinstance(entries, list):
        return []

    samples = []
    for entry in entries:
        sample = parse_forecast_sample(entry) if isinstance(entry, dict) else None
        if sample is None:
            logger.debug("Skipping forecast entry without usable timestamp: %r", entry)
            continue
        samples.append(sample)
    return samples
