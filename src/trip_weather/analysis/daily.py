"""Reduce weather samples to one summary per calendar day.

Forecast samples are bucketed by local calendar date and each bucket is
reduced to a ``DailyWeatherSummary``. The current-conditions reading maps
straight to a summary for today; forecast buckets never cover today, so the
live reading is not overwritten by forecast averages.
"""

from __future__ import annotations

import math
import statistics
from datetime import date, tzinfo
from typing import TYPE_CHECKING

from trip_weather.analysis.recommendations import generate_recommendations
from trip_weather.datasources.openweather.client import (
    DEFAULT_CONDITIONS,
    DEFAULT_DESCRIPTION,
    DEFAULT_ICON,
)
from trip_weather.schemas import DailyWeatherSummary, Temperature

if TYPE_CHECKING:
    from collections.abc import Iterable

    from trip_weather.datasources.openweather.models import CurrentSample, ForecastSample

# Local hours (inclusive) that count as "midday" for the representative sample
MIDDAY_HOURS = range(11, 14)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (2.5 -> 3, -2.5 -> -2)."""
    return math.floor(value + 0.5)


def group_by_local_date(
    samples: Iterable[ForecastSample],
    tz: tzinfo,
    today: date,
) -> dict[str, list[ForecastSample]]:
    """Bucket samples by ISO local date, skipping ``today``.

    Buckets keep upstream sample order; keys appear in first-seen order.
    """
    today_key = today.isoformat()
    buckets: dict[str, list[ForecastSample]] = {}
    for sample in samples:
        key = sample.local_datetime(tz).date().isoformat()
        if key == today_key:
            continue
        buckets.setdefault(key, []).append(sample)
    return buckets


def representative_sample(bucket: list[ForecastSample], tz: tzinfo) -> ForecastSample:
    """First sample at local hour 11-13, else the first sample of the bucket."""
    for sample in bucket:
        if sample.local_datetime(tz).hour in MIDDAY_HOURS:
            return sample
    return bucket[0]


def empty_summary(day: date) -> DailyWeatherSummary:
    """Well-formed placeholder for a day without samples."""
    return DailyWeatherSummary(
        date=day,
        temperature=Temperature(min=0, max=0),
        conditions=DEFAULT_CONDITIONS,
        description=DEFAULT_DESCRIPTION,
        icon=DEFAULT_ICON,
    )


def summarize_forecast_day(
    day: date,
    bucket: list[ForecastSample],
    tz: tzinfo,
) -> DailyWeatherSummary:
    """
    Aggregate one day of 3-hour forecast samples.

    Temperatures give the day's min/max; humidity, wind and chance of
    precipitation are averaged. Conditions, description, icon and the
    advisories come from the midday sample.
    """
    if not bucket:
        return empty_summary(day)

    temps = [s.temp_c for s in bucket]
    midday = representative_sample(bucket, tz)

    recommendations = generate_recommendations(
        midday.temp_c,
        midday.precipitation_pct,
        0,
        midday.conditions,
    )

    return DailyWeatherSummary(
        date=day,
        temperature=Temperature(min=round_half_up(min(temps)), max=round_half_up(max(temps))),
        conditions=midday.conditions,
        description=midday.description,
        precipitation_pct=round_half_up(
            statistics.fmean(s.precipitation_probability for s in bucket) * 100
        ),
        humidity_pct=round_half_up(statistics.fmean(s.humidity_pct for s in bucket)),
        wind_speed_ms=round_half_up(statistics.fmean(s.wind_speed_ms for s in bucket)),
        uv_index=0,  # not provided by the forecast API
        icon=midday.icon,
        recommendations=tuple(recommendations),
    )


def summarize_forecast_days(
    buckets: dict[str, list[ForecastSample]],
    tz: tzinfo,
) -> list[DailyWeatherSummary]:
    """Summarize every bucket produced by ``group_by_local_date``."""
    return [
        summarize_forecast_day(date.fromisoformat(key), bucket, tz)
        for key, bucket in buckets.items()
    ]


def summarize_current_day(day: date, sample: CurrentSample) -> DailyWeatherSummary:
    """
    Map the current reading to today's summary.

    A point reading, so min and max are the same value. There is no chance
    of precipitation for current conditions; UV is used only when supplied.
    """
    temp = round_half_up(sample.temp_c)
    uv_index = round_half_up(sample.uv_index) if sample.uv_index is not None else 0

    return DailyWeatherSummary(
        date=day,
        temperature=Temperature(min=temp, max=temp),
        conditions=sample.conditions,
        description=sample.description,
        precipitation_pct=0,
        humidity_pct=round_half_up(sample.humidity_pct),
        wind_speed_ms=round_half_up(sample.wind_speed_ms),
        uv_index=uv_index,
        icon=sample.icon,
        recommendations=tuple(
            generate_recommendations(sample.temp_c, 0, uv_index, sample.conditions)
        ),
    )
