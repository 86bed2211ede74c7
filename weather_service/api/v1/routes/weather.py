"""Weather API routes - thin layer delegating to the validator and provider.
Only handles HTTP concerns."""
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import JSONResponse

from weather_service.api.v1.schemas.weather_schemas import ErrorResponseSchema, WeatherResponseSchema
from weather_service.application.ports.fetchers import WeatherService
from weather_service.constants import ERRORS
from weather_service.core.context import AppContext
from weather_service.core.dependencies import get_context, get_weather_service
from weather_service.core.logging import log_http_request
from weather_service.domain.errors import CoordinateValidationError, FetchError
from weather_service.domain.services.coordinate_validator import validate_coordinates

router = APIRouter(tags=["weather"])


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@router.get(
    "/coordinates",
    response_model=WeatherResponseSchema,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponseSchema},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponseSchema},
    },
)
async def get_weather_by_coordinates(
    request: Request,
    lat: Optional[str] = Query(None, description="Latitude between -90 and 90"),
    lon: Optional[str] = Query(None, description="Longitude between -180 and 180"),
    context: AppContext = Depends(get_context),
    weather_service: WeatherService = Depends(get_weather_service),
):
    """
    Get normalized weather for a pair of coordinates.

    Returns the current condition, a temperature description and the
    active alerts. Invalid input yields 400, provider failure yields 500.
    """
    client_ip = request.client.host if request.client else None
    log_http_request(context.logger, client_ip, request.method, request.url.path, request.query_params)

    try:
        coordinates = validate_coordinates(lat, lon)
    except CoordinateValidationError as exc:
        context.logger.error(exc.message)
        return _error(status.HTTP_400_BAD_REQUEST, exc.message)

    try:
        weather = await weather_service.fetch(coordinates)
    except FetchError as exc:
        cause = exc.cause
        context.logger.error(
            "%s: %s (cause=%s, lat=%s, lon=%s)",
            ERRORS.FETCH_FAILED,
            exc,
            type(cause).__name__ if cause else None,
            coordinates.latitude,
            coordinates.longitude,
        )
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, ERRORS.FETCH_FAILED)

    return WeatherResponseSchema.from_weather(weather)
