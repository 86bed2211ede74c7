"""Application factory and process entry point."""
import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional

import httpx
import uvicorn
from dotenv import load_dotenv
from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from weather_service.api.dependencies import verify_api_key
from weather_service.api.v1.routes.info import router as info_router
from weather_service.api.v1.routes.weather import router as weather_router
from weather_service.application.ports.fetchers import WeatherService
from weather_service.config import Settings
from weather_service.constants import ERRORS, SERVICE_DESCRIPTION, SERVICE_NAME, SERVICE_VERSION
from weather_service.core.context import AppContext
from weather_service.core.logging import LOGGER_NAME, configure_logging
from weather_service.domain.errors import AuthError
from weather_service.infrastructure.external_apis.openweathermap_client import OpenWeatherMapClient


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events."""
    context: AppContext = app.state.context
    context.logger.info("Starting up %s %s...", SERVICE_NAME, SERVICE_VERSION)

    if not context.settings.is_development and not context.settings.WEATHER_SERVICE_API_KEY:
        context.logger.warning("WEATHER_SERVICE_API_KEY not set - every API key will be rejected")

    yield

    context.logger.info("Shutting down application...")
    if app.state.http_client is not None:
        await app.state.http_client.aclose()
        context.logger.info("HTTP client closed")


async def auth_error_handler(request: Request, exc: AuthError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    context: AppContext = request.app.state.context
    context.logger.exception("Error while processing %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": ERRORS.INTERNAL})


def create_app(
    settings: Settings,
    logger: Optional[logging.Logger] = None,
    weather_service: Optional[WeatherService] = None,
) -> FastAPI:
    """Create FastAPI application, wire the provider and include routers.

    Args:
        settings: Loaded application settings
        logger: Logger for the application (defaults to the service logger)
        weather_service: Provider to use instead of OpenWeatherMap

    Returns:
        Configured FastAPI application
    """
    context = AppContext(settings=settings, logger=logger or logging.getLogger(LOGGER_NAME))
    http_client: Optional[httpx.AsyncClient] = None
    if weather_service is None:
        http_client = httpx.AsyncClient()
        weather_service = OpenWeatherMapClient(context, http_client)

    app = FastAPI(
        title=SERVICE_NAME,
        version=SERVICE_VERSION,
        description=SERVICE_DESCRIPTION,
        lifespan=lifespan,
    )
    app.state.context = context
    app.state.http_client = http_client
    app.state.weather_service = weather_service

    app.add_exception_handler(AuthError, auth_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    gate = [Depends(verify_api_key)]
    app.include_router(weather_router, dependencies=gate)
    app.include_router(info_router, dependencies=gate)
    return app


def run() -> None:
    """Load configuration, configure logging and serve the API with uvicorn.

    Exits with status 1 when required configuration is missing.
    """
    load_dotenv()
    try:
        settings = Settings()
    except ValidationError as exc:
        missing = ", ".join(str(error["loc"][0]) for error in exc.errors() if error.get("loc"))
        logging.basicConfig(level=logging.ERROR)
        logging.getLogger(LOGGER_NAME).error("Invalid or missing configuration: %s", missing or exc)
        sys.exit(1)

    logger = configure_logging(settings)
    app = create_app(settings, logger=logger)

    logger.info("Server is running on http://%s:%s", settings.HOST, settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
