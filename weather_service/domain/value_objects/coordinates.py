"""Coordinate value object - immutable and validated."""
from dataclasses import dataclass

from weather_service.constants import MAX_LATITUDE, MAX_LONGITUDE, MIN_LATITUDE, MIN_LONGITUDE
from weather_service.domain.errors import LatitudeOutOfRange, LongitudeOutOfRange


@dataclass(frozen=True)
class Coordinates:
    """Immutable coordinate value object.

    Out-of-range values are rejected, never clamped. Latitude is checked
    before longitude.
    """
    latitude: float
    longitude: float

    def __post_init__(self):
        """Validate coordinates."""
        if not MIN_LATITUDE <= self.latitude <= MAX_LATITUDE:
            raise LatitudeOutOfRange()
        if not MIN_LONGITUDE <= self.longitude <= MAX_LONGITUDE:
            raise LongitudeOutOfRange()
