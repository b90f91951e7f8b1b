"""
Services built on top of the datasources.

- http.py    - Shared requests session (single attempt, default timeout)
- weather.py - WeatherService: current + forecast -> daily summaries
- trip.py    - Multi-destination trip weather (geocode + forecast per city)
"""
