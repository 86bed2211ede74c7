"""Pydantic schemas for API responses."""
from typing import List

from pydantic import BaseModel

from weather_service.domain.entities.weather import NormalizedWeather


class AlertSchema(BaseModel):
    """Active weather alert schema."""
    event: str


class WeatherResponseSchema(BaseModel):
    """Normalized weather schema."""
    current_condition: str
    temperature_description: str
    active_alerts: List[AlertSchema] = []

    @classmethod
    def from_weather(cls, weather: NormalizedWeather) -> "WeatherResponseSchema":
        return cls(
            current_condition=weather.current_condition,
            temperature_description=weather.temperature_description,
            active_alerts=[AlertSchema(event=alert.event) for alert in weather.active_alerts],
        )


class VersionResponseSchema(BaseModel):
    """Service metadata schema."""
    service: str
    version: str
    description: str


class ErrorResponseSchema(BaseModel):
    """Error body returned with every 4xx/5xx response."""
    error: str
