"""Trip-level helpers: destination names, date ranges and per-location rollups.

Pure functions used by ``services/trip.py``. No I/O here.
"""

from __future__ import annotations

import re
import statistics
from datetime import date, timedelta
from typing import TYPE_CHECKING

from trip_weather.analysis.daily import round_half_up
from trip_weather.schemas import MAX_TRIP_RECOMMENDATIONS, TripWeatherSummary

if TYPE_CHECKING:
    from collections.abc import Sequence

    from trip_weather.schemas import DailyWeatherSummary

DEFAULT_TRIP_DAYS = 7

# Street addresses, e.g. "12 Galle Road," or "5 Main St "
_STREET_RE = re.compile(
    r"\d+\s+[A-Za-z\s]+(?:Road|Rd|Street|St|Avenue|Ave|Mawatha|Lane|Drive|Dr)[,\s]*",
    re.IGNORECASE,
)
_POSTCODE_RE = re.compile(r"\d{5,}")
_TO_RE = re.compile(r"\s+to\s+", re.IGNORECASE)
_AIRPORT_CODE_RE = re.compile(r"\b[A-Z]{3}\b")
_NOISE_RE = re.compile(
    r"\b(Station|Fort|Center|Central|Market|area|Near|City|downtown|old town)\b",
    re.IGNORECASE,
)
_SPACES_RE = re.compile(r"\s+")


def extract_city_name(location: str | None) -> str | None:
    """
    Reduce a free-form place description to something geocodable.

    Strips street addresses, postcodes, airport codes and landmark words
    ("Station", "Fort", ...). For comma-separated values the second-to-last
    part is used, since it is usually the city ahead of the country.

    Returns:
        The cleaned name, or None if fewer than three characters remain.

    Example:
        >>> extract_city_name("Fort Railway Station, Colombo, Sri Lanka")
        'Colombo'
    """
    if not location or not isinstance(location, str):
        return None

    clean = _STREET_RE.sub("", location)
    clean = _POSTCODE_RE.sub("", clean)
    clean = _TO_RE.sub(" ", clean)
    clean = _AIRPORT_CODE_RE.sub("", clean)
    clean = _NOISE_RE.sub("", clean)
    clean = _SPACES_RE.sub(" ", clean.strip())

    if "," in clean:
        parts = [p.strip() for p in clean.split(",") if p.strip()]
        if not parts:
            return None
        clean = parts[-2] if len(parts) > 1 else parts[-1]

    if len(clean) < 3:
        return None
    return clean


def resolve_date_range(
    today: date,
    start_date: date | None = None,
    end_date: date | None = None,
    duration_days: int | None = None,
) -> tuple[date, date]:
    """Trip dates from explicit bounds, a start plus duration, or the next week."""
    if start_date and end_date:
        return start_date, end_date
    if start_date and duration_days:
        return start_date, start_date + timedelta(days=duration_days)
    return today, today + timedelta(days=DEFAULT_TRIP_DAYS - 1)


def most_common_condition(days: Sequence[DailyWeatherSummary]) -> str:
    """Most frequent lower-cased condition; ties go to the later-seen condition."""
    counts: dict[str, int] = {}
    for day in days:
        key = (day.conditions or "Unknown").lower()
        counts[key] = counts.get(key, 0) + 1

    best = ""
    for condition, count in counts.items():
        if not best or count >= counts[best]:
            best = condition
    return best


def summarize_trip(days: Sequence[DailyWeatherSummary]) -> TripWeatherSummary | None:
    """Roll a location's daily summaries up into one trip summary."""
    if not days:
        return None

    mins = [d.temperature.min for d in days]
    maxs = [d.temperature.max for d in days]

    recommendations: list[str] = []
    for day in days:
        for rec in day.recommendations:
            text = rec.strip()
            if text and text not in recommendations:
                recommendations.append(text)

    return TripWeatherSummary(
        min_temp=min(mins),
        max_temp=max(maxs),
        avg_min=round_half_up(statistics.fmean(mins)),
        avg_max=round_half_up(statistics.fmean(maxs)),
        conditions=most_common_condition(days),
        avg_precipitation=round_half_up(statistics.fmean(d.precipitation_pct for d in days)),
        recommendations=recommendations[:MAX_TRIP_RECOMMENDATIONS],
        icon=days[0].icon,
    )
