"""Travel advisories derived from a day's weather.

Advisories are generated in a fixed order (temperature, precipitation, UV,
conditions) and the list is cut to three entries afterwards. Later
categories are dropped once the cap is reached; they are not re-ranked.
"""

from __future__ import annotations

from trip_weather.schemas import MAX_RECOMMENDATIONS

CONDITION_ADVICE: dict[str, str] = {
    "clear": "Excellent weather for outdoor photography",
    "clouds": "Good weather for most activities",
    "rain": "Rain expected - plan indoor activities",
    "snow": "Snow conditions - check road and transport status",
    "thunderstorm": "Thunderstorms possible - stay indoors during storms",
}


def temperature_advice(temp_c: float) -> list[str]:
    """Advice for the temperature band; bands are mutually exclusive."""
    if temp_c >= 30:
        return [
            "Stay hydrated and wear light clothing",
            "Plan indoor activities during peak heat",
        ]
    if temp_c >= 25:
        return ["Perfect weather for outdoor activities"]
    if temp_c >= 15:
        return ["Comfortable weather for sightseeing"]
    if temp_c >= 5:
        return ["Cool weather - bring a light jacket"]
    return ["Cold weather - dress warmly"]


def precipitation_advice(precipitation_pct: float) -> list[str]:
    if precipitation_pct > 70:
        return [
            "High chance of rain - pack an umbrella",
            "Consider indoor alternatives for outdoor activities",
        ]
    if precipitation_pct > 40:
        return ["Possible rain - check weather before outdoor plans"]
    return []


def uv_advice(uv_index: float) -> list[str]:
    if uv_index >= 8:
        return ["Very high UV - use sunscreen and wear protective clothing"]
    if uv_index >= 6:
        return ["High UV - apply sunscreen regularly"]
    if uv_index >= 3:
        return ["Moderate UV - sunscreen recommended for extended outdoor time"]
    return []


def condition_advice(conditions: str) -> list[str]:
    advice = CONDITION_ADVICE.get(conditions.strip().lower())
    return [advice] if advice else []


def generate_recommendations(
    temp_c: float,
    precipitation_pct: float,
    uv_index: float,
    conditions: str,
) -> list[str]:
    """
    Build the ordered, capped advisory list for one day.

    Args:
        temp_c: Representative temperature in Celsius.
        precipitation_pct: Chance of precipitation (0-100).
        uv_index: UV index (0 when unknown).
        conditions: Upstream condition group, e.g. ``"Clear"`` or ``"Rain"``.

    Returns:
        At most three advisory strings.
    """
    recommendations = [
        *temperature_advice(temp_c),
        *precipitation_advice(precipitation_pct),
        *uv_advice(uv_index),
        *condition_advice(conditions),
    ]
    return recommendations[:MAX_RECOMMENDATIONS]
