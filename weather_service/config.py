"""Application configuration using Pydantic Settings.

Values come from environment variables (a .env file is loaded into the
environment at process start by ``main.run``). ``PORT`` and
``OPENWEATHER_API_KEY`` have no defaults: the process refuses to start
without them.
"""
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from weather_service.constants import ENV_DEVELOPMENT, ENV_PRODUCTION

DEFAULT_OPENWEATHER_BASE_URL = "https://api.openweathermap.org/data/3.0/onecall"


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        case_sensitive=True,
        # Allow unrelated variables in the environment
        extra="ignore",
    )

    # ===== Server =====
    PORT: int = Field(ge=1, le=65535)
    HOST: str = "0.0.0.0"
    APP_ENV: str = ENV_PRODUCTION

    # ===== Weather Provider =====
    OPENWEATHER_API_KEY: str = Field(min_length=1)
    OPENWEATHER_BASE_URL: str = DEFAULT_OPENWEATHER_BASE_URL

    # ===== Inbound API Key Gate =====
    WEATHER_SERVICE_API_KEY: Optional[str] = None

    # ===== Logging =====
    LOG_LEVEL: str = "INFO"
    LOG_DIR: Optional[str] = None

    @field_validator("OPENWEATHER_API_KEY")
    @classmethod
    def validate_api_key(cls, value: str) -> str:
        text = value.strip()
        if not text:
            raise ValueError("OPENWEATHER_API_KEY must not be blank")
        return text

    @field_validator("APP_ENV")
    @classmethod
    def validate_app_env(cls, value: str) -> str:
        return value.strip().lower()

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @field_validator("WEATHER_SERVICE_API_KEY", "LOG_DIR")
    @classmethod
    def blank_to_none(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return value.strip() or None

    @property
    def is_development(self) -> bool:
        """Development mode bypasses the inbound API key gate."""
        return self.APP_ENV == ENV_DEVELOPMENT
