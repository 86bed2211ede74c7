"""Dependency injection for FastAPI routes.
Routes depend on the WeatherService protocol, not on a concrete provider."""
from fastapi import Request

from weather_service.application.ports.fetchers import WeatherService
from weather_service.core.context import AppContext


def get_context(request: Request) -> AppContext:
    """Get the application context built by create_app."""
    return request.app.state.context


def get_weather_service(request: Request) -> WeatherService:
    """Get the weather provider wired into the application."""
    return request.app.state.weather_service
