"""Spherical-Earth geodesy: pure Python, no external deps.

All angles are decimal degrees and all distances kilometers. Inputs are assumed
to be in range already; nothing here validates or raises. Out-of-range input
propagates through the trigonometry and may come back as NaN.
"""

from __future__ import annotations

import math

from journey_geo.models import Bounds, Coordinate

EARTH_RADIUS_KM = 6371.0

# Rounding slack allowed before a sine/haversine term is treated as out of domain
_DOMAIN_EPS = 1e-12


def to_radians(degrees: float) -> float:
    return degrees * (math.pi / 180)


def to_degrees(radians: float) -> float:
    return radians * (180 / math.pi)


def _clamp_domain(value: float, low: float, high: float) -> float:
    """Snap rounding drift back into [low, high]; anything further out becomes NaN."""
    if low <= value <= high:
        return value
    if low - _DOMAIN_EPS <= value < low:
        return low
    if high < value <= high + _DOMAIN_EPS:
        return high
    return math.nan


def normalize_longitude(longitude: float) -> float:
    """Wrap a longitude into [-180, 180] by whole turns of 360.

    180 stays 180 and -180 stays -180. Values above 180 land in (-180, 180],
    values below -180 land in [-180, 180). Non-finite input gives NaN.
    """
    if not math.isfinite(longitude):
        return math.nan
    if longitude > 180:
        return longitude - 360 * math.ceil((longitude - 180) / 360)
    if longitude < -180:
        return longitude + 360 * math.ceil((-180 - longitude) / 360)
    return longitude


def normalize_latitude(latitude: float) -> float:
    """Clamp (not wrap) a latitude into [-90, 90]. NaN passes through."""
    if math.isnan(latitude):
        return latitude
    return max(-90.0, min(90.0, latitude))


def calculate_distance(a: Coordinate, b: Coordinate) -> float:
    """Great-circle distance between two points in kilometers (Haversine)."""
    rlat1 = to_radians(a.latitude)
    rlat2 = to_radians(b.latitude)
    dlat = to_radians(b.latitude - a.latitude)
    dlon = to_radians(b.longitude - a.longitude)

    h = math.sin(dlat / 2) ** 2 + math.cos(rlat1) * math.cos(rlat2) * math.sin(dlon / 2) ** 2
    h = _clamp_domain(h, 0.0, 1.0)
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))

    return EARTH_RADIUS_KM * c


def calculate_bearing(a: Coordinate, b: Coordinate) -> float:
    """Initial great-circle bearing from ``a`` to ``b`` in degrees, [0, 360).

    Coincident or antipodal points have no defined bearing; the result is then
    whatever atan2 gives for the degenerate terms (0 for coincident points).
    """
    rlat1 = to_radians(a.latitude)
    rlat2 = to_radians(b.latitude)
    dlon = to_radians(b.longitude - a.longitude)

    y = math.sin(dlon) * math.cos(rlat2)
    x = math.cos(rlat1) * math.sin(rlat2) - math.sin(rlat1) * math.cos(rlat2) * math.cos(dlon)

    bearing = to_degrees(math.atan2(y, x))
    return (math.fmod(bearing, 360.0) + 360.0) % 360.0


def calculate_destination(start: Coordinate, distance_km: float, bearing_deg: float) -> Coordinate:
    """Point reached by travelling ``distance_km`` from ``start`` on initial bearing ``bearing_deg``."""
    rlat1 = to_radians(start.latitude)
    rlon1 = to_radians(start.longitude)
    rbearing = to_radians(bearing_deg)
    angular = distance_km / EARTH_RADIUS_KM

    sin_lat2 = math.sin(rlat1) * math.cos(angular) + math.cos(rlat1) * math.sin(angular) * math.cos(rbearing)
    rlat2 = math.asin(_clamp_domain(sin_lat2, -1.0, 1.0))

    rlon2 = rlon1 + math.atan2(
        math.sin(rbearing) * math.sin(angular) * math.cos(rlat1),
        math.cos(angular) - math.sin(rlat1) * math.sin(rlat2),
    )

    return Coordinate(
        latitude=to_degrees(rlat2),
        longitude=normalize_longitude(to_degrees(rlon2)),
    )


def calculate_midpoint(a: Coordinate, b: Coordinate) -> Coordinate:
    """Great-circle midpoint of ``a`` and ``b``."""
    rlat1 = to_radians(a.latitude)
    rlat2 = to_radians(b.latitude)
    dlon = to_radians(b.longitude - a.longitude)

    bx = math.cos(rlat2) * math.cos(dlon)
    by = math.cos(rlat2) * math.sin(dlon)

    rlat3 = math.atan2(
        math.sin(rlat1) + math.sin(rlat2),
        math.sqrt((math.cos(rlat1) + bx) ** 2 + by ** 2),
    )
    rlon3 = to_radians(a.longitude) + math.atan2(by, math.cos(rlat1) + bx)

    return Coordinate(
        latitude=to_degrees(rlat3),
        longitude=normalize_longitude(to_degrees(rlon3)),
    )


def is_within_bounds(coord: Coordinate, bounds: Bounds) -> bool:
    """Inclusive four-sided box test. Boxes crossing the anti-meridian are not supported."""
    return (
        bounds.south <= coord.latitude <= bounds.north
        and bounds.west <= coord.longitude <= bounds.east
    )


def generate_waypoints(start: Coordinate, end: Coordinate, count: int) -> list[Coordinate]:
    """Evenly distance-spaced points along the great circle from ``start`` to ``end``.

    Returns ``count`` points whose first and last elements are the ``start`` and
    ``end`` objects themselves. A ``count`` below 2 falls back to ``[start, end]``.
    """
    if count < 2:
        return [start, end]

    total_distance = calculate_distance(start, end)
    bearing = calculate_bearing(start, end)

    waypoints = [start]
    for i in range(1, count - 1):
        distance = total_distance * i / (count - 1)
        waypoints.append(calculate_destination(start, distance, bearing))
    waypoints.append(end)

    return waypoints
