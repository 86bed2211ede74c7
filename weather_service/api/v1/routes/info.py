"""Service metadata endpoint."""
from fastapi import APIRouter, Depends, Request

from weather_service.api.v1.schemas.weather_schemas import VersionResponseSchema
from weather_service.constants import SERVICE_DESCRIPTION, SERVICE_NAME, SERVICE_VERSION
from weather_service.core.context import AppContext
from weather_service.core.dependencies import get_context
from weather_service.core.logging import log_http_request

router = APIRouter(tags=["info"])


@router.get("/version", response_model=VersionResponseSchema)
async def get_version(request: Request, context: AppContext = Depends(get_context)):
    """Return static metadata about the service."""
    client_ip = request.client.host if request.client else None
    log_http_request(context.logger, client_ip, request.method, request.url.path, request.query_params)

    return VersionResponseSchema(
        service=SERVICE_NAME,
        version=SERVICE_VERSION,
        description=SERVICE_DESCRIPTION,
    )
