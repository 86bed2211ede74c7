"""Provider interfaces for weather data (SOLID-friendly).

The endpoint depends only on these protocols, so another provider can be
added by implementing them without touching the route or the validator.
"""
from typing import Any, Protocol

from weather_service.domain.entities.weather import NormalizedWeather
from weather_service.domain.value_objects.coordinates import Coordinates


class WeatherService(Protocol):
    name: str

    async def fetch(self, coordinates: Coordinates) -> NormalizedWeather:
        """Return normalized weather for the coordinates or raise FetchError."""


class WeatherMapper(Protocol):
    def normalize(self, raw_payload: Any) -> NormalizedWeather:
        """Map a raw provider payload to NormalizedWeather. Must never raise."""
