"""Weather sample models.

Raw OpenWeatherMap payloads are converted into these records at the
ingestion boundary (see ``current.py`` and ``forecast.py``). Every field is
filled, so analysis code never needs to guard against missing keys.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime, tzinfo
from typing import Any

from trip_weather.datasources.openweather.client import (
    DEFAULT_CONDITIONS,
    DEFAULT_DESCRIPTION,
    DEFAULT_ICON,
)


@dataclass(frozen=True)
class CurrentSample:
    """A single "current conditions" reading."""

    conditions: str
    description: str
    icon: str
    temp_c: float
    humidity_pct: float
    wind_speed_ms: float
    uv_index: float | None = None


@dataclass(frozen=True)
class ForecastSample:
    """One 3-hour forecast interval."""

    timestamp: int  # epoch seconds
    temp_c: float
    humidity_pct: float
    wind_speed_ms: float
    precipitation_probability: float  # 0-1
    conditions: str
    description: str
    icon: str

    def local_datetime(self, tz: tzinfo) -> datetime:
        """Timestamp as an aware datetime in ``tz``."""
        return datetime.fromtimestamp(self.timestamp, tz)

    @property
    def precipitation_pct(self) -> float:
        """Probability of precipitation as a percentage (0-100)."""
        return self.precipitation_probability * 100


# ---------------------------------------------------------------------------
# Payload field helpers
# ---------------------------------------------------------------------------


def as_number(value: Any, default: float = 0.0) -> float:
    """Coerce a payload value to a finite float, falling back to ``default``."""
    if value is None or isinstance(value, bool):
        return default
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return default
    # NaN and +/-inf ("1e999") would break rounding downstream
    return number if math.isfinite(number) else default


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def weather_fields(entry: dict[str, Any]) -> tuple[str, str, str]:
    """Extract ``(conditions, description, icon)`` from ``entry["weather"][0]``."""
    weather_list = entry.get("weather")
    weather: dict[str, Any] = {}
    if isinstance(weather_list, list) and weather_list and isinstance(weather_list[0], dict):
        weather = weather_list[0]
    return (
        str(weather.get("main") or DEFAULT_CONDITIONS),
        str(weather.get("description") or DEFAULT_DESCRIPTION),
        str(weather.get("icon") or DEFAULT_ICON),
    )


def section(entry: dict[str, Any], key: str) -> dict[str, Any]:
    """Return a nested object from a payload, or an empty dict."""
    value = entry.get(key)
    return value if isinstance(value, dict) else {}
