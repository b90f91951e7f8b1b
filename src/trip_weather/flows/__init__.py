"""
Prefect flows for weather requests.

Flows:
- daily-forecast: Daily summaries for one point and date range
- trip-weather: Geocode + forecast every destination of a trip

Usage (local):
    python -m trip_weather.flows.forecast

Usage (Prefect):
    prefect server start  # Optional, for dashboard
    prefect deployment run 'daily-forecast/default'
"""
