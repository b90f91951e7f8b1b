"""Current conditions from the OpenWeatherMap current weather API."""

from __future__ import annotations

from typing import Any

from trip_weather.datasources.openweather.client import (
    BASE_URL,
    CURRENT_PATH,
    UNITS,
    WEATHER_TIMEOUT,
)
from trip_weather.datasources.openweather.models import (
    CurrentSample,
    as_number,
    clamp,
    section,
    weather_fields,
)
from trip_weather.services.http import session


def fetch_current_weather(
    lat: float,
    lon: float,
    api_key: str,
    *,
    base_url: str = BASE_URL,
    timeout: float = WEATHER_TIMEOUT,
) -> dict[str, Any]:
    """
    Fetch the current conditions for a point.

    Args:
        lat: Latitude.
        lon: Longitude.
        api_key: OpenWeatherMap API key.
        base_url: API root (``.../data/2.5``).
        timeout: Request timeout in seconds.

    Returns:
        Raw API response dict (``weather``, ``main``, ``wind`` ...).

    Raises:
        requests.RequestException: On network errors, timeouts or non-2xx status.
    """
    params: dict[str, str | float] = {
        "lat": lat,
        "lon": lon,
        "units": UNITS,
        "appid": api_key,
    }
    resp = session.get(f"{base_url}{CURRENT_PATH}", params=params, timeout=timeout)
    resp.raise_for_status()
    result: dict[str, Any] = resp.json()
    return result


def parse_current_sample(payload: dict[str, Any]) -> CurrentSample:
    """Convert a current weather payload into a fully-defaulted sample."""
    if not isinstance(payload, dict):
        payload = {}
    conditions, description, icon = weather_fields(payload)
    main = section(payload, "main")
    wind = section(payload, "wind")

    uvi = payload.get("uvi")
    return CurrentSample(
        conditions=conditions,
        description=description,
        icon=icon,
        temp_c=as_number(main.get("temp")),
        humidity_pct=clamp(as_number(main.get("humidity")), 0, 100),
        wind_speed_ms=max(0.0, as_number(wind.get("speed"))),
        uv_index=None if uvi is None else max(0.0, as_number(uvi)),
    )
