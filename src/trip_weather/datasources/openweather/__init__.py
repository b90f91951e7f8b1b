"""OpenWeatherMap data source.

Fetches current conditions, the 5-day / 3-hour forecast and geocoding
matches. Fetch functions return raw payloads and raise on transport errors;
``parse_*`` functions are the ingestion boundary that turns payloads into
fully-defaulted samples.

Public API:
  - current: fetch_current_weather, parse_current_sample
  - forecast: fetch_forecast, parse_forecast_samples
  - geocoding: fetch_geocoding, parse_coordinates
  - models: CurrentSample, ForecastSample
"""

from trip_weather.datasources.openweather.client import (
    BASE_URL,
    GEOCODING_TIMEOUT,
    GEOCODING_URL,
    WEATHER_TIMEOUT,
)
from trip_weather.datasources.openweather.current import (
    fetch_current_weather,
    parse_current_sample,
)
from trip_weather.datasources.openweather.forecast import (
    fetch_forecast,
    parse_forecast_samples,
)
from trip_weather.datasources.openweather.geocoding import fetch_geocoding, parse_coordinates
from trip_weather.datasources.openweather.models import CurrentSample, ForecastSample

__all__ = [
    "BASE_URL",
    "GEOCODING_TIMEOUT",
    "GEOCODING_URL",
    "WEATHER_TIMEOUT",
    "CurrentSample",
    "ForecastSample",
    "fetch_current_weather",
    "fetch_forecast",
    "fetch_geocoding",
    "parse_coordinates",
    "parse_current_sample",
    "parse_forecast_samples",
]
