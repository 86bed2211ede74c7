"""Parsing and range checking of raw latitude/longitude query values."""
from typing import Optional

from weather_service.domain.errors import MissingCoordinates, NotANumber
from weather_service.domain.services.numeric_parsing import parse_leading_float
from weather_service.domain.value_objects.coordinates import Coordinates


def _parse_float(raw: str) -> float:
    value = parse_leading_float(raw)
    if value is None:
        raise NotANumber()
    return value


def validate_coordinates(lat_raw: Optional[str], lon_raw: Optional[str]) -> Coordinates:
    """Turn raw query strings into validated Coordinates.

    Checks run in a fixed order and the first failure wins: presence of both
    values, numeric parsing of both values, latitude range, longitude range.
    Only the leading number of each value is read, so "40.7128N" is 40.7128.

    Args:
        lat_raw: Latitude as received, or None when absent
        lon_raw: Longitude as received, or None when absent

    Returns:
        Coordinates with the parsed values

    Raises:
        MissingCoordinates: either value is absent or empty
        NotANumber: either value does not start with a number
        LatitudeOutOfRange: latitude outside [-90, 90]
        LongitudeOutOfRange: longitude outside [-180, 180]
    """
    if not lat_raw or not lon_raw:
        raise MissingCoordinates()

    latitude = _parse_float(lat_raw)
    longitude = _parse_float(lon_raw)

    return Coordinates(latitude=latitude, longitude=longitude)
