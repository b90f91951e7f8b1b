"""
Weather for a multi-destination trip.

Each destination is cleaned to a city name, geocoded, and forecast over the
trip dates; the days are rolled up into a per-location trip summary.
Destinations that cannot be geocoded are skipped.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING

from trip_weather.analysis.trip import extract_city_name, resolve_date_range, summarize_trip
from trip_weather.schemas import LocationForecast

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import date

    from trip_weather.services.weather import WeatherService

logger = logging.getLogger(__name__)

MAX_LOCATION_WORKERS = 4


def collect_locations(destinations: Iterable[str], source: str | None = None) -> list[str]:
    """Unique cleaned city names: destinations first, then the trip origin."""
    locations: list[str] = []
    for place in [*destinations, source]:
        city = extract_city_name(place)
        if city and city not in locations:
            locations.append(city)
    return locations


def _forecast_location(
    service: WeatherService,
    location: str,
    start: date,
    end: date,
) -> LocationForecast | None:
    coordinates = service.get_coordinates(location)
    if coordinates is None:
        logger.warning("Could not get coordinates for %s", location)
        return None

    days = service.get_weather_forecast(coordinates.lat, coordinates.lng, start, end)
    return LocationForecast(
        location=location,
        coordinates=coordinates,
        start_date=start,
        end_date=end,
        days=days,
        summary=summarize_trip(days),
    )


def fetch_trip_weather(
    service: WeatherService,
    destinations: Iterable[str],
    *,
    source: str | None = None,
    start_date: date | None = None,
    end_date: date | None = None,
    duration_days: int | None = None,
) -> list[LocationForecast]:
    """
    Forecast every destination of a trip.

    Args:
        service: Configured forecast engine.
        destinations: Free-form destination names ("Kandy", "Galle Fort, Galle").
        source: Trip origin, forecast too when it is a different city.
        start_date: First trip day. Defaults to today.
        end_date: Last trip day. Defaults to ``start_date + duration_days``
            or a week from today.
        duration_days: Trip length, used when ``end_date`` is missing.

    Returns:
        One ``LocationForecast`` per geocoded destination, in input order.
    """
    locations = collect_locations(destinations, source)
    if not locations:
        logger.warning("No valid locations found for trip weather")
        return []

    start, end = resolve_date_range(service.today(), start_date, end_date, duration_days)
    logger.info("Fetching weather for %d location(s): %s", len(locations), ", ".join(locations))

    workers = min(MAX_LOCATION_WORKERS, len(locations))
    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="trip") as pool:
        results = list(
            pool.map(lambda loc: _forecast_location(service, loc, start, end), locations)
        )

    return [r for r in results if r is not None]
