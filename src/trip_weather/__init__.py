"""Trip Weather - daily weather summaries and travel advisories for trip planning.

Architecture::

    datasources/   External APIs (OpenWeatherMap current, forecast, geocoding)
    analysis/      Pure logic (daily grouping, summaries, recommendations, window)
    services/      Shared HTTP client, the forecast engine, multi-location trips
    renderers/     Pure data -> text (forecast tables, icons, UV labels)
    flows/         Prefect orchestration around the engine

Data flow: datasources -> analysis (summaries) -> services (merge + window) -> renderers

Extension points -- see each package's docstring:
  - New data source:   datasources/__init__.py
  - New analysis:      analysis/__init__.py
"""

__version__ = "0.1.0"

from trip_weather.config import Settings
from trip_weather.schemas import DailyWeatherSummary

__all__ = ["DailyWeatherSummary", "Settings", "__version__"]
