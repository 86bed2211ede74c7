"""Normalized weather entities returned to API clients."""
from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class WeatherAlert:
    """A single active weather alert. Only the event name is carried."""
    event: str


@dataclass(frozen=True)
class NormalizedWeather:
    """Provider-independent weather summary, produced fresh per request."""
    current_condition: str
    temperature_description: str
    active_alerts: Tuple[WeatherAlert, ...] = field(default_factory=tuple)
