"""Place name -> coordinates via the OpenWeatherMap direct geocoding API."""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from trip_weather.datasources.openweather.client import GEOCODING_TIMEOUT, GEOCODING_URL
from trip_weather.schemas import Coordinates
from trip_weather.services.http import session


def fetch_geocoding(
    location: str,
    api_key: str,
    *,
    url: str = GEOCODING_URL,
    timeout: float = GEOCODING_TIMEOUT,
) -> list[dict[str, Any]]:
    """
    Look up a place name.

    Returns:
        Raw API response: a list of ``{name, lat, lon, country, ...}`` matches.

    Raises:
        requests.RequestException: On network errors, timeouts or non-2xx status.
    """
    params: dict[str, str | int] = {"q": location, "limit": 1, "appid": api_key}
    resp = session.get(url, params=params, timeout=timeout)
    resp.raise_for_status()
    result: list[dict[str, Any]] = resp.json()
    return result


def parse_coordinates(payload: Any) -> Coordinates | None:
    """First match as ``Coordinates``; None for an empty or unusable response."""
    if not isinstance(payload, list) or not payload:
        return None
    first = payload[0]
    if not isinstance(first, dict):
        return None
    try:
        return Coordinates(lat=float(first["lat"]), lng=float(first["lon"]))
    except (KeyError, TypeError, ValueError, ValidationError):
        return None
