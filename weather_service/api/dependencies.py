"""Shared dependencies for API endpoints."""
import secrets
from typing import Optional

from fastapi import Depends, Header, Query

from weather_service.core.context import AppContext
from weather_service.core.dependencies import get_context
from weather_service.domain.errors import InvalidApiKey, MissingApiKey


async def verify_api_key(
    x_api_key: Optional[str] = Header(None, alias="x-api-key"),
    apikey: Optional[str] = Query(None, include_in_schema=False),
    context: AppContext = Depends(get_context),
) -> bool:
    """Verify the inbound API key for protected endpoints.

    The key is read from the ``x-api-key`` header, falling back to the
    ``apikey`` query parameter. Development mode skips the check.

    Args:
        x_api_key: API key from x-api-key header
        apikey: API key from query string
        context: Application context

    Raises:
        MissingApiKey: 401 if no key was presented
        InvalidApiKey: 403 if the key does not match

    Returns:
        bool: True if the request may proceed
    """
    if context.settings.is_development:
        return True

    presented = x_api_key or apikey
    if not presented:
        raise MissingApiKey()

    expected = context.settings.WEATHER_SERVICE_API_KEY
    if not expected or not secrets.compare_digest(presented.encode(), expected.encode()):
        raise InvalidApiKey()

    return True
