"""Spherical-Earth geodesy for route planning and weather sampling."""

from journey_geo.geo import (
    EARTH_RADIUS_KM,
    calculate_bearing,
    calculate_destination,
    calculate_distance,
    calculate_midpoint,
    generate_waypoints,
    is_within_bounds,
    normalize_latitude,
    normalize_longitude,
    to_degrees,
    to_radians,
)
from journey_geo.models import Bounds, Coordinate

__all__ = [
    "EARTH_RADIUS_KM",
    "Bounds",
    "Coordinate",
    "calculate_bearing",
    "calculate_destination",
    "calculate_distance",
    "calculate_midpoint",
    "generate_waypoints",
    "is_within_bounds",
    "normalize_latitude",
    "normalize_longitude",
    "to_degrees",
    "to_radians",
]
