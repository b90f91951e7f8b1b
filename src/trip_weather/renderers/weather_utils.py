"""Weather utility functions for renderers.

Pure conversion functions with no external dependencies.
"""

from __future__ import annotations

# OpenWeatherMap icon codes (https://openweathermap.org/weather-conditions)
ICON_EMOJI: dict[str, str] = {
    "01d": "☀️",  # clear sky
    "01n": "\U0001f319",
    "02d": "⛅",  # few clouds
    "02n": "☁️",
    "03d": "☁️",  # scattered clouds
    "03n": "☁️",
    "04d": "☁️",  # broken clouds
    "04n": "☁️",
    "09d": "\U0001f327️",  # shower rain
    "09n": "\U0001f327️",
    "10d": "\U0001f326️",  # rain
    "10n": "\U0001f327️",
    "11d": "⛈️",  # thunderstorm
    "11n": "⛈️",
    "13d": "❄️",  # snow
    "13n": "❄️",
    "50d": "\U0001f32b️",  # mist
    "50n": "\U0001f32b️",
}

DEFAULT_EMOJI = "\U0001f324️"

# (upper bound inclusive, label)
UV_LEVELS: list[tuple[float, str]] = [
    (2, "Low"),
    (5, "Moderate"),
    (7, "High"),
    (10, "Very High"),
]


def c_to_f(celsius: float) -> float:
    """Convert Celsius to Fahrenheit."""
    return celsius * 9 / 5 + 32


def icon_to_emoji(icon: str | None) -> str:
    """Convert an OpenWeatherMap icon code to an emoji."""
    return ICON_EMOJI.get(icon or "", DEFAULT_EMOJI)


def uv_level(uv_index: float) -> str:
    """Human-readable UV exposure level."""
    for upper, label in UV_LEVELS:
        if uv_index <= upper:
            return label
    return "Extreme"


def format_temperature(celsius: float, fahrenheit: bool = False) -> str:
    """Format a Celsius value for display, e.g. ``"21°C"`` or ``"70°F"``."""
    if fahrenheit:
        return f"{round(c_to_f(celsius))}°F"
    return f"{round(celsius)}°C"
