"""
Domain models for trip weather.

Pydantic models returned to callers. Datasources normalize raw API payloads
into internal samples; analysis turns those samples into these records.
JSON output uses camelCase aliases (``precipitationPct``, ``uvIndex``, ...).
"""

from __future__ import annotations

from datetime import date
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

MAX_RECOMMENDATIONS = 3
MAX_TRIP_RECOMMENDATIONS = 5


# =============================================================================
# Daily summaries
# =============================================================================


class Temperature(BaseModel):
    """Daily temperature range, rounded to whole degrees."""

    model_config = ConfigDict(frozen=True)

    min: int
    max: int
    unit: Literal["C", "F"] = "C"

    @model_validator(mode="after")
    def _check_range(self) -> Temperature:
        if self.min > self.max:
            raise ValueError(f"temperature min {self.min} exceeds max {self.max}")
        return self


class DailyWeatherSummary(BaseModel):
    """One calendar day of weather, with travel advisories."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    date: date
    temperature: Temperature
    conditions: str
    description: str
    precipitation_pct: int = Field(default=0, ge=0, le=100, alias="precipitationPct")
    humidity_pct: int = Field(default=0, ge=0, le=100, alias="humidityPct")
    wind_speed_ms: int = Field(default=0, ge=0, alias="windSpeedMS")
    uv_index: int = Field(default=0, ge=0, alias="uvIndex")
    icon: str
    recommendations: tuple[str, ...] = Field(default=(), max_length=MAX_RECOMMENDATIONS)

    def to_json_dict(self) -> dict[str, Any]:
        """Serialize with camelCase keys and ISO dates."""
        return self.model_dump(mode="json", by_alias=True)


# =============================================================================
# Geographic
# =============================================================================


class Coordinates(BaseModel):
    """A geocoded point."""

    model_config = ConfigDict(frozen=True)

    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)


# =============================================================================
# Upstream call results
# =============================================================================


class FetchResult(BaseModel):
    """Outcome of a single upstream call: either data or an error message."""

    success: bool
    source: str
    data: Any = None
    error: str | None = None

    @classmethod
    def ok(cls, source: str, data: Any) -> FetchResult:
        return cls(success=True, source=source, data=data)

    @classmethod
    def failed(cls, source: str, error: str) -> FetchResult:
        return cls(success=False, source=source, error=error)


# =============================================================================
# Trips
# =============================================================================


class TripWeatherSummary(BaseModel):
    """Aggregate of all forecast days for one trip location."""

    min_temp: int
    max_temp: int
    avg_min: int
    avg_max: int
    conditions: str
    avg_precipitation: int = Field(..., ge=0, le=100)
    recommendations: list[str] = Field(default_factory=list, max_length=MAX_TRIP_RECOMMENDATIONS)
    icon: str | None = None
    unit: Literal["C", "F"] = "C"


class LocationForecast(BaseModel):
    """Forecast days and trip summary for one destination."""

    location: str
    coordinates: Coordinates
    start_date: date
    end_date: date
    days: list[DailyWeatherSummary] = Field(default_factory=list)
    summary: TripWeatherSummary | None = None
