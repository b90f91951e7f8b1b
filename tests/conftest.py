"""Shared fixtures: settings isolation and OpenWeatherMap payload builders."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

import pytest

from trip_weather.config import get_settings

PayloadFactory = Callable[..., dict[str, Any]]


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep real API keys and cached settings out of every test."""
    monkeypatch.delenv("OPENWEATHER_API_KEY", raising=False)
    monkeypatch.delenv("TRIP_WEATHER_OPENWEATHER_API_KEY", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def forecast_entry() -> PayloadFactory:
    """Build one raw ``/forecast`` list entry."""

    def _entry(
        dt: int,
        temp: float = 20.0,
        humidity: float = 60,
        wind: float = 3.0,
        pop: float = 0.0,
        main: str = "Clouds",
        description: str = "scattered clouds",
        icon: str = "03d",
    ) -> dict[str, Any]:
        return {
            "dt": dt,
            "main": {"temp": temp, "humidity": humidity},
            "weather": [{"main": main, "description": description, "icon": icon}],
            "wind": {"speed": wind},
            "pop": pop,
        }

    return _entry


@pytest.fixture
def current_payload() -> PayloadFactory:
    """Build a raw ``/weather`` response."""

    def _payload(
        temp: float = 24.0,
        humidity: float = 70,
        wind: float = 4.2,
        main: str = "Clear",
        description: str = "clear sky",
        icon: str = "01d",
        **extra: Any,
    ) -> dict[str, Any]:
        return {
            "weather": [{"main": main, "description": description, "icon": icon}],
            "main": {"temp": temp, "humidity": humidity},
            "wind": {"speed": wind},
            **extra,
        }

    return _payload
