"""
Pytest configuration and shared fixtures for service tests.

This module provides test fixtures for:
- Settings built without touching the real environment
- FastAPI test client with a fake weather provider
- Mock OpenWeatherMap payloads and transports
"""

import logging
import os
from typing import Any, Callable, Dict, Generator, List, Optional

import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from weather_service.config import Settings
from weather_service.core.context import AppContext
from weather_service.core.dependencies import get_weather_service
from weather_service.core.logging import LOGGER_NAME
from weather_service.domain.entities.weather import NormalizedWeather, WeatherAlert
from weather_service.domain.value_objects.coordinates import Coordinates
from weather_service.infrastructure.external_apis.openweathermap_client import OpenWeatherMapClient
from weather_service.main import create_app

TEST_GATE_KEY = "test_gate_key"
TEST_OPENWEATHER_KEY = "test_openweather_key"
TEST_BASE_URL = "https://api.test.local/data/3.0/onecall"


# ==============================================================================
# FAKE PROVIDER
# ==============================================================================

class FakeWeatherService:
    """In-memory WeatherService recording every call."""

    name = "fake"

    def __init__(self, result: Optional[NormalizedWeather] = None, error: Optional[Exception] = None):
        self.result = result or NormalizedWeather(
            current_condition="Clear Sky",
            temperature_description="Warm",
            active_alerts=(),
        )
        self.error = error
        self.calls: List[Coordinates] = []

    async def fetch(self, coordinates: Coordinates) -> NormalizedWeather:
        self.calls.append(coordinates)
        if self.error is not None:
            raise self.error
        return self.result


# ==============================================================================
# SETTINGS FIXTURES
# ==============================================================================

def build_settings(**overrides: Any) -> Settings:
    values: Dict[str, Any] = {
        "PORT": 8080,
        "OPENWEATHER_API_KEY": TEST_OPENWEATHER_KEY,
        "OPENWEATHER_BASE_URL": TEST_BASE_URL,
        "WEATHER_SERVICE_API_KEY": TEST_GATE_KEY,
        "APP_ENV": "production",
        "LOG_LEVEL": "INFO",
        "LOG_DIR": None,
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def settings() -> Settings:
    """Production-mode settings with the gate enabled."""
    return build_settings()


@pytest.fixture
def dev_settings() -> Settings:
    """Development-mode settings; the gate is bypassed."""
    return build_settings(APP_ENV="development")


@pytest.fixture
def app_context(settings) -> AppContext:
    return AppContext(settings=settings, logger=logging.getLogger(LOGGER_NAME))


# ==============================================================================
# APPLICATION FIXTURES
# ==============================================================================

@pytest.fixture
def fake_weather_service() -> FakeWeatherService:
    return FakeWeatherService()


@pytest.fixture
def app(settings, fake_weather_service) -> Generator[FastAPI, None, None]:
    """Application with the provider replaced by the fake."""
    application = create_app(settings)
    application.dependency_overrides[get_weather_service] = lambda: fake_weather_service
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app) -> Generator[TestClient, None, None]:
    """Create a FastAPI test client."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def api_headers() -> Dict[str, str]:
    """Headers with the gate key for authenticated requests."""
    return {"x-api-key": TEST_GATE_KEY}


@pytest.fixture
def invalid_api_headers() -> Dict[str, str]:
    """Headers with a wrong gate key for testing auth failures."""
    return {"x-api-key": "invalid_key_12345"}


# ==============================================================================
# MOCK EXTERNAL API FIXTURES
# ==============================================================================

@pytest.fixture
def mock_onecall_payload() -> Dict[str, Any]:
    """Mock OpenWeatherMap One Call 3.0 response (imperial units)."""
    return {
        "lat": 40.7128,
        "lon": -74.006,
        "timezone": "America/New_York",
        "current": {
            "dt": 1640000000,
            "temp": 77.4,
            "feels_like": 75,
            "humidity": 65,
            "weather": [
                {
                    "id": 800,
                    "main": "Clear",
                    "description": "clear sky",
                    "icon": "01d",
                }
            ],
        },
        "alerts": [],
    }


@pytest.fixture
def make_openweather_client(app_context) -> Callable[..., OpenWeatherMapClient]:
    """Factory for an OpenWeatherMapClient backed by an httpx.MockTransport."""

    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> OpenWeatherMapClient:
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return OpenWeatherMapClient(app_context, http_client)

    return factory


# ==============================================================================
# UTILITY FIXTURES
# ==============================================================================

@pytest.fixture(autouse=True)
def reset_environment():
    """Reset environment variables after each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture(autouse=True)
def reset_service_logger():
    """Undo handler changes made by configure_logging."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
