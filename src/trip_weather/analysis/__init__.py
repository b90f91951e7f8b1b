"""Pure weather logic: grouping, summaries, advisories and date windows.

Dependency rule: analysis/ imports datasource *models* and ``schemas`` only.
It never fetches data and never reads configuration.

Modules:
  - recommendations: (temp, precipitation, UV, conditions) -> advisory strings
  - daily: forecast samples -> per-day buckets -> DailyWeatherSummary
  - window: filter/sort/truncate summaries to the requested dates
  - trip: destination names, trip date ranges, per-location rollups

Adding an analysis module
-------------------------
1. Create ``analysis/{name}.py`` with pure functions over samples or
   summaries, returning pydantic models or plain data.
2. Call it from a service (see ``services/weather.py``).
3. Re-export below and add tests in ``tests/test_{name}.py``.
"""

from trip_weather.analysis.daily import (
    group_by_local_date,
    summarize_current_day,
    summarize_forecast_day,
    summarize_forecast_days,
)
from trip_weather.analysis.recommendations import generate_recommendations
from trip_weather.analysis.trip import extract_city_name, resolve_date_range, summarize_trip
from trip_weather.analysis.window import select_window

__all__ = [
    "extract_city_name",
    "generate_recommendations",
    "group_by_local_date",
    "resolve_date_range",
    "select_window",
    "summarize_current_day",
    "summarize_forecast_day",
    "summarize_forecast_days",
    "summarize_trip",
]
