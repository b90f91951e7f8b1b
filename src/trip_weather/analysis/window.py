"""Select the days a caller asked for."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import date

    from trip_weather.schemas import DailyWeatherSummary

MAX_FORECAST_DAYS = 7


def select_window(
    summaries: Iterable[DailyWeatherSummary],
    start_date: date,
    end_date: date,
    max_days: int = MAX_FORECAST_DAYS,
) -> list[DailyWeatherSummary]:
    """Filter to ``[start_date, end_date]``, sort by date, keep the first ``max_days``.

    Filtering happens before sorting and sorting before truncation, so the
    earliest requested days are the ones kept.
    """
    in_range = [s for s in summaries if start_date <= s.date <= end_date]
    in_range.sort(key=lambda s: s.date)
    return in_range[:max_days]
