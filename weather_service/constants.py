"""Application constants that never change across environments.

These are fixed values of the public API contract: service metadata and the
error messages clients see. Environment-dependent values live in config.py.
"""
from types import SimpleNamespace

from weather_service import __version__

# ===== Service Metadata =====
SERVICE_NAME = "WeatherService API"
SERVICE_VERSION = __version__
SERVICE_DESCRIPTION = "This API provides weather information based on coordinates."

# ===== Environment Names =====
ENV_DEVELOPMENT = "development"
ENV_PRODUCTION = "production"

# ===== Geographic Limits =====
MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0
MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0

# ===== Normalization Fallback =====
UNKNOWN_VALUE = "Unknown"

# ===== Client-facing Error Messages =====
ERRORS = SimpleNamespace(
    MISSING_COORDINATES="Latitude and Longitude are required",
    INVALID_LATITUDE="Latitude must be between -90 and 90",
    INVALID_LONGITUDE="Longitude must be between -180 and 180",
    INVALID_COORDINATES="Invalid coordinates provided",
    INVALID_COORDINATES_TYPE="Coordinates must be numbers",
    FETCH_FAILED="Failed to fetch weather data",
    UNAUTHORIZED="Unauthorized",
    FORBIDDEN="Forbidden",
    INTERNAL="Internal Server Error",
)
