"""OpenWeatherMap API constants and shared configuration.

API docs:
  - Current weather: https://openweathermap.org/current
  - 5 day / 3 hour forecast: https://openweathermap.org/forecast5
  - Geocoding: https://openweathermap.org/api/geocoding-api
"""

BASE_URL = "https://api.openweathermap.org/data/2.5"
GEOCODING_URL = "https://api.openweathermap.org/geo/1.0/direct"

CURRENT_PATH = "/weather"
FORECAST_PATH = "/forecast"

# Per-call timeouts in seconds
WEATHER_TIMEOUT = 10
GEOCODING_TIMEOUT = 5

UNITS = "metric"

# Defaults for fields missing from a payload
DEFAULT_CONDITIONS = "Unknown"
DEFAULT_DESCRIPTION = "Weather data unavailable"
DEFAULT_ICON = "01d"
