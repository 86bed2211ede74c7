"""OpenWeatherMap One Call 3.0 client.

See https://openweathermap.org/api/one-call-3
"""
from typing import Any, Dict, Optional

import httpx

from weather_service.application.ports.fetchers import WeatherMapper
from weather_service.core.context import AppContext
from weather_service.domain.entities.weather import NormalizedWeather
from weather_service.domain.errors import ProviderUnavailable
from weather_service.domain.value_objects.coordinates import Coordinates
from weather_service.infrastructure.external_apis.openweather_mapper import OpenWeatherMapper

EXCLUDED_SECTIONS = "minutely,hourly,daily"
UNITS = "imperial"  # Fahrenheit, matches the temperature buckets


def _describe_error(exc: Exception) -> str:
    # Exception messages may embed the request URL, which carries the API key
    if isinstance(exc, httpx.HTTPStatusError):
        return f"HTTP {exc.response.status_code}"
    return type(exc).__name__


class OpenWeatherMapClient:
    """Fetches current conditions and alerts and normalizes them.

    One request per call, no retries and no timeout override: failures
    surface immediately as ProviderUnavailable.
    """

    name = "openweathermap"

    def __init__(
        self,
        context: AppContext,
        http_client: httpx.AsyncClient,
        mapper: Optional[WeatherMapper] = None,
    ):
        self.logger = context.child_logger("openweathermap")
        self.api_key = context.settings.OPENWEATHER_API_KEY
        self.base_url = context.settings.OPENWEATHER_BASE_URL
        self.http_client = http_client
        self.mapper = mapper or OpenWeatherMapper(logger=context.child_logger("mapper"))

        self.logger.info("OpenWeatherMapClient initialized with base URL %s", self.base_url)

    def _build_params(self, coordinates: Coordinates) -> Dict[str, Any]:
        return {
            "lat": coordinates.latitude,
            "lon": coordinates.longitude,
            "exclude": EXCLUDED_SECTIONS,
            "units": UNITS,
            "appid": self.api_key,
        }

    async def fetch(self, coordinates: Coordinates) -> NormalizedWeather:
        """Fetch and normalize weather for the given coordinates.

        Args:
            coordinates: Validated coordinates

        Returns:
            Normalized weather summary

        Raises:
            ProviderUnavailable: transport failure, non-2xx status or a body
                that is not JSON
        """
        try:
            response = await self.http_client.get(self.base_url, params=self._build_params(coordinates))
            response.raise_for_status()
            payload = response.json()
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as exc:
            self.logger.error(
                "Error fetching weather data from OpenWeather API: %s (lat=%s, lon=%s)",
                _describe_error(exc),
                coordinates.latitude,
                coordinates.longitude,
            )
            raise ProviderUnavailable(self.name, cause=exc) from exc

        return self.mapper.normalize(payload)
