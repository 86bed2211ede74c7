"""Normalization of OpenWeatherMap One Call payloads.

The condition code table belongs to this provider: OpenWeatherMap numeric
codes are not shared with other providers.

See https://openweathermap.org/weather-conditions
"""
import logging
import math
from bisect import bisect_left
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from weather_service.constants import UNKNOWN_VALUE
from weather_service.domain.entities.weather import NormalizedWeather, WeatherAlert
from weather_service.domain.services.numeric_parsing import parse_leading_float, parse_leading_int

CONDITION_DESCRIPTIONS: Dict[int, str] = {
    # Thunderstorm
    200: "Thunderstorm with Light Rain",
    201: "Thunderstorm with Rain",
    202: "Thunderstorm with Heavy Rain",
    210: "Light Thunderstorm",
    211: "Thunderstorm",
    212: "Heavy Thunderstorm",
    221: "Ragged Thunderstorm",
    230: "Thunderstorm with Light Drizzle",
    231: "Thunderstorm with Drizzle",
    232: "Thunderstorm with Heavy Drizzle",
    # Drizzle
    300: "Light Intensity Drizzle",
    301: "Drizzle",
    302: "Heavy Intensity Drizzle",
    310: "Light Intensity Drizzle Rain",
    311: "Drizzle Rain",
    312: "Heavy Intensity Drizzle Rain",
    313: "Shower Rain and Drizzle",
    314: "Heavy Shower Rain and Drizzle",
    321: "Shower Drizzle",
    # Rain
    500: "Light Rain",
    501: "Moderate Rain",
    502: "Heavy Intensity Rain",
    503: "Very Heavy Rain",
    504: "Extreme Rain",
    511: "Freezing Rain",
    520: "Light Intensity Shower Rain",
    521: "Shower Rain",
    522: "Heavy Intensity Shower Rain",
    531: "Ragged Shower Rain",
    # Snow
    600: "Light Snow",
    601: "Snow",
    602: "Heavy Snow",
    611: "Sleet",
    612: "Light Shower Sleet",
    613: "Shower Sleet",
    615: "Light Rain and Snow",
    616: "Rain and Snow",
    620: "Light Shower Snow",
    621: "Shower Snow",
    622: "Heavy Shower Snow",
    # Atmosphere
    701: "Mist",
    711: "Smoke",
    721: "Haze",
    731: "Sand, Dust Whirls",
    741: "Fog",
    751: "Sand",
    761: "Dust",
    762: "Volcanic Ash",
    771: "Squalls",
    781: "Tornado",
    # Clear / clouds
    800: "Clear Sky",
    801: "Few Clouds",
    802: "Scattered Clouds",
    803: "Broken Clouds",
    804: "Overcast Clouds",
}

# Inclusive upper bounds in Fahrenheit; anything above the last bound is the last label.
TEMPERATURE_UPPER_BOUNDS_F: Tuple[float, ...] = (-4, 14, 32, 50, 59, 68, 77, 86, 95)
TEMPERATURE_DESCRIPTIONS: Tuple[str, ...] = (
    "Extremely Cold",
    "Very Cold",
    "Cold",
    "Chilly",
    "Cool",
    "Mild",
    "Warm",
    "Hot",
    "Very Hot",
    "Extremely Hot",
)


def _coerce_condition_code(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if isinstance(value, str):
        return parse_leading_int(value)
    return None


def _coerce_temperature(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        temperature = float(value)
    elif isinstance(value, str):
        temperature = parse_leading_float(value)
    else:
        return None
    if temperature is None or math.isnan(temperature):
        return None
    return temperature


def _coerce_event(alert: Any) -> str:
    event = alert.get("event") if isinstance(alert, dict) else None
    if event is None:
        return UNKNOWN_VALUE
    return event if isinstance(event, str) else str(event)


@dataclass(frozen=True)
class OpenWeatherSnapshot:
    """The subset of a One Call payload the service consumes.

    Every field is optional; absence is represented by None (or an empty
    tuple for alerts) instead of an error.
    """
    condition_code: Optional[int] = None
    feels_like: Optional[float] = None
    alert_events: Tuple[str, ...] = ()

    @classmethod
    def from_payload(cls, payload: Any) -> "OpenWeatherSnapshot":
        if not isinstance(payload, dict):
            return cls()

        current = payload.get("current")
        if not isinstance(current, dict):
            current = {}

        weather_list = current.get("weather")
        weather_info = weather_list[0] if isinstance(weather_list, list) and weather_list else {}
        raw_code = weather_info.get("id") if isinstance(weather_info, dict) else None

        alerts = payload.get("alerts")
        alert_events: Tuple[str, ...] = ()
        if isinstance(alerts, list) and alerts:
            alert_events = tuple(_coerce_event(alert) for alert in alerts)

        return cls(
            condition_code=_coerce_condition_code(raw_code),
            feels_like=_coerce_temperature(current.get("feels_like")),
            alert_events=alert_events,
        )


def describe_condition(code: Optional[int]) -> str:
    """Look up the human-readable description of an OpenWeatherMap condition code."""
    if code is None:
        return UNKNOWN_VALUE
    return CONDITION_DESCRIPTIONS.get(code, UNKNOWN_VALUE)


def describe_temperature(feels_like_f: Optional[float]) -> str:
    """Bucket a "feels like" temperature (Fahrenheit) into a descriptive label.

    Bucket bounds are inclusive on the upper end, so a boundary value such
    as 32 belongs to the colder bucket ("Cold", not "Chilly").
    """
    if feels_like_f is None or math.isnan(feels_like_f):
        return UNKNOWN_VALUE
    return TEMPERATURE_DESCRIPTIONS[bisect_left(TEMPERATURE_UPPER_BOUNDS_F, feels_like_f)]


class OpenWeatherMapper:
    """Maps raw One Call payloads into NormalizedWeather. Never raises."""

    def __init__(self, logger: logging.Logger):
        self.logger = logger

    def normalize(self, raw_payload: Any) -> NormalizedWeather:
        snapshot = OpenWeatherSnapshot.from_payload(raw_payload)

        if snapshot.condition_code is None:
            self.logger.warning("OpenWeather payload had no usable condition code")
        if snapshot.feels_like is None:
            self.logger.warning("OpenWeather payload had no usable feels_like temperature")

        return NormalizedWeather(
            current_condition=describe_condition(snapshot.condition_code),
            temperature_description=describe_temperature(snapshot.feels_like),
            active_alerts=tuple(WeatherAlert(event=event) for event in snapshot.alert_events),
        )
