"""Plain-text forecast renderers for the CLI."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from trip_weather.renderers import render_template
from trip_weather.renderers.weather_utils import format_temperature, icon_to_emoji, uv_level

if TYPE_CHECKING:
    from collections.abc import Sequence

    from trip_weather.schemas import DailyWeatherSummary, LocationForecast


def _day_row(day: DailyWeatherSummary, fahrenheit: bool) -> dict[str, Any]:
    return {
        "date": day.date.isoformat(),
        "emoji": icon_to_emoji(day.icon),
        "conditions": day.conditions,
        "description": day.description,
        "low": format_temperature(day.temperature.min, fahrenheit),
        "high": format_temperature(day.temperature.max, fahrenheit),
        "precipitation_pct": day.precipitation_pct,
        "humidity_pct": day.humidity_pct,
        "wind_speed_ms": day.wind_speed_ms,
        "uv_index": day.uv_index,
        "uv_level": uv_level(day.uv_index),
        "recommendations": list(day.recommendations),
    }


def render_forecast_text(days: Sequence[DailyWeatherSummary], fahrenheit: bool = False) -> str:
    """One block per day: conditions, temperatures, metrics and advisories."""
    rows = [_day_row(day, fahrenheit) for day in days]
    return render_template("forecast.txt.j2", days=rows).rstrip()


def render_trip_text(locations: Sequence[LocationForecast], fahrenheit: bool = False) -> str:
    """Per-location trip summary followed by its daily forecast."""
    rows = []
    for loc in locations:
        summary = None
        if loc.summary is not None:
            summary = {
                "emoji": icon_to_emoji(loc.summary.icon),
                "conditions": loc.summary.conditions,
                "low": format_temperature(loc.summary.min_temp, fahrenheit),
                "high": format_temperature(loc.summary.max_temp, fahrenheit),
                "avg_precipitation": loc.summary.avg_precipitation,
                "recommendations": loc.summary.recommendations,
            }
        rows.append(
            {
                "location": loc.location,
                "lat": round(loc.coordinates.lat, 4),
                "lng": round(loc.coordinates.lng, 4),
                "start_date": loc.start_date.isoformat(),
                "end_date": loc.end_date.isoformat(),
                "summary": summary,
                "days_text": render_forecast_text(loc.days, fahrenheit) if loc.days else "",
            }
        )
    return render_template("trip.txt.j2", locations=rows).rstrip()
