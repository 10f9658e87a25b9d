"""Validation and sanitization of raw request fields before they reach the geodesy core."""

from __future__ import annotations

import math

from journey_geo.geo import normalize_latitude, normalize_longitude
from journey_geo.models import Coordinate

MAX_DURATION_HOURS = 720.0      # 30 days
MAX_SPEED_KMH = 1000.0


class ValidationError(Exception):
    """Raised when input fails validation."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__(f"Validation failed: {'; '.join(errors)}")


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and not math.isnan(value)


def _parse_float(value) -> float | None:
    """Parse a raw field into a finite float. Returns None when that isn't possible."""
    if value is None or isinstance(value, bool):
        return None
    try:
        parsed = float(value.strip() if isinstance(value, str) else value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(parsed):
        return None
    return parsed


def validate_coordinates(latitude, longitude) -> list[str]:
    """Validate a lat/lon pair. Returns list of error messages (empty = valid)."""
    errors: list[str] = []

    if not _is_number(latitude):
        errors.append("Latitude must be a valid number")
    elif not -90 <= latitude <= 90:
        errors.append("Latitude must be between -90 and 90 degrees")

    if not _is_number(longitude):
        errors.append("Longitude must be a valid number")
    elif not -180 <= longitude <= 180:
        errors.append("Longitude must be between -180 and 180 degrees")

    return errors


def require_coordinate(latitude, longitude) -> Coordinate:
    """Build a Coordinate from already-numeric values, raising ValidationError if out of range."""
    errors = validate_coordinates(latitude, longitude)
    if errors:
        raise ValidationError(errors)
    return Coordinate(latitude=float(latitude), longitude=float(longitude))


def sanitize_coordinates(latitude, longitude) -> Coordinate | None:
    """Coerce raw lat/lon fields into a valid Coordinate.

    Latitude is clamped to [-90, 90] and longitude wrapped into [-180, 180].
    Returns None if either field can't be read as a finite number.
    """
    lat = _parse_float(latitude)
    lon = _parse_float(longitude)
    if lat is None or lon is None:
        return None

    return Coordinate(latitude=normalize_latitude(lat), longitude=normalize_longitude(lon))


def sanitize_duration(value) -> float | None:
    """Positive travel duration in hours, capped at 30 days."""
    parsed = _parse_float(value)
    if parsed is None or parsed <= 0:
        return None
    return min(parsed, MAX_DURATION_HOURS)


def sanitize_speed(value) -> float | None:
    """Positive travel speed in km/h, capped at 1000 km/h."""
    parsed = _parse_float(value)
    if parsed is None or parsed <= 0:
        return None
    return min(parsed, MAX_SPEED_KMH)
