"""Error taxonomy for the weather service.

Validation errors are client input defects (HTTP 400), auth errors come from
the API key gate (HTTP 401/403) and fetch errors mean the provider could not
deliver data (HTTP 500, cause logged but never exposed).
"""
from typing import Optional

from weather_service.constants import ERRORS


class WeatherServiceError(Exception):
    """Base class for all weather service errors."""


# ===== Validation =====

class CoordinateValidationError(WeatherServiceError, ValueError):
    """Raised when latitude/longitude input cannot be turned into Coordinates."""

    message: str = ERRORS.INVALID_COORDINATES

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class MissingCoordinates(CoordinateValidationError):
    message = ERRORS.MISSING_COORDINATES


class NotANumber(CoordinateValidationError):
    message = ERRORS.INVALID_COORDINATES_TYPE


class LatitudeOutOfRange(CoordinateValidationError):
    message = ERRORS.INVALID_LATITUDE


class LongitudeOutOfRange(CoordinateValidationError):
    message = ERRORS.INVALID_LONGITUDE


# ===== Auth =====

class AuthError(WeatherServiceError):
    """Raised by the API key gate."""

    status_code: int = 401
    message: str = ERRORS.UNAUTHORIZED

    def __init__(self):
        super().__init__(self.message)


class MissingApiKey(AuthError):
    status_code = 401
    message = ERRORS.UNAUTHORIZED


class InvalidApiKey(AuthError):
    status_code = 403
    message = ERRORS.FORBIDDEN


# ===== Fetch =====

class FetchError(WeatherServiceError):
    """Raised when weather data could not be fetched from a provider.

    The underlying exception is kept on ``cause`` and chained as
    ``__cause__`` whether or not the raiser used ``raise ... from``. It is
    for logging only and never reaches the client.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause


class ProviderUnavailable(FetchError):
    """The provider was unreachable, answered with an error, or sent garbage."""

    def __init__(self, provider: str, cause: Optional[BaseException] = None):
        self.provider = provider
        super().__init__(f"Weather provider '{provider}' unavailable", cause=cause)
