"""Great-circle route planning and weather-sampling waypoints.

Builds Route/RouteSegment structures from two locations without any routing
service: the path is the great circle between them, split into equal-length
segments, and timed from the travel mode's speed.
"""

from __future__ import annotations

import dataclasses
import hashlib
import logging

from journey_geo.geo import (
    calculate_bearing,
    calculate_destination,
    calculate_distance,
    generate_waypoints,
)
from journey_geo.models import Location, Route, RouteSegment, TravelMode, Waypoint
from journey_geo.modes import get_mode
from journey_geo.sanitization import ValidationError, validate_coordinates

logger = logging.getLogger(__name__)

SECONDS_PER_HOUR = 3600.0

# Advice thresholds
LONG_DRIVE_KM = 100.0
LONG_WALK_KM = 20.0
LONG_WALK_SEC = 8 * SECONDS_PER_HOUR
LONG_RIDE_KM = 100.0


def _validate_location(location: Location) -> None:
    coords = location.coordinates
    errors = validate_coordinates(coords.latitude, coords.longitude)
    if errors:
        raise ValidationError(
            [f"Invalid coordinates for location {location.name}: {e}" for e in errors]
        )


def _compute_route_id(source: Location, destination: Location,
                      mode: TravelMode, custom_speed: float | None) -> str:
    """Stable route ID from rounded endpoints and travel settings."""
    src = source.coordinates
    dst = destination.coordinates
    content = (
        f"{src.latitude:.4f},{src.longitude:.4f}"
        f"-{dst.latitude:.4f},{dst.longitude:.4f}"
        f"-{mode.value}-{custom_speed or 'default'}"
    )
    return "RT-" + hashlib.sha256(content.encode()).hexdigest()[:16]


def _duration_sec(distance_km: float, speed_kmh: float) -> float:
    return distance_km / speed_kmh * SECONDS_PER_HOUR


def plan_route(
    source: Location,
    destination: Location,
    mode: TravelMode | str = TravelMode.DRIVING,
    custom_speed: float | None = None,
    segment_count: int = 1,
) -> Route:
    """Plan a great-circle route from ``source`` to ``destination``.

    Args:
        source: Start location (coordinates must be in range).
        destination: End location (coordinates must be in range).
        mode: Travel mode; sets the default speed and sampling interval.
        custom_speed: Speed in km/h overriding the mode default.
        segment_count: Number of equal-length great-circle segments.

    Returns:
        Route with segments and weather-sampling waypoints filled in.

    Raises:
        ValidationError: Either location has out-of-range coordinates.
        ValueError: Unknown mode, non-positive speed, or segment_count < 1.
    """
    config = get_mode(mode)
    travel_mode = TravelMode(mode)
    _validate_location(source)
    _validate_location(destination)

    if segment_count < 1:
        raise ValueError(f"segment_count must be at least 1, got {segment_count}")
    if custom_speed is not None and custom_speed <= 0:
        raise ValueError(f"custom_speed must be positive, got {custom_speed}")
    speed = custom_speed if custom_speed is not None else config.default_speed_kmh

    points = generate_waypoints(source.coordinates, destination.coordinates, segment_count + 1)

    segments: list[RouteSegment] = []
    cumulative_distance = 0.0
    cumulative_time = 0.0
    for start, end in zip(points, points[1:]):
        distance = calculate_distance(start, end)
        duration = _duration_sec(distance, speed)
        segments.append(RouteSegment(
            start_point=Waypoint(start, cumulative_distance, cumulative_time),
            end_point=Waypoint(end, cumulative_distance + distance, cumulative_time + duration),
            distance=distance,
            estimated_duration=duration,
            travel_mode=travel_mode,
        ))
        cumulative_distance += distance
        cumulative_time += duration

    route = Route(
        id=_compute_route_id(source, destination, travel_mode, custom_speed),
        source=source,
        destination=destination,
        travel_mode=travel_mode,
        total_distance=cumulative_distance,
        estimated_duration=cumulative_time,
        segments=segments,
    )
    route.waypoints = sample_waypoints(route)

    logger.debug("Planned %s route %s: %.1f km, %d segments, %d waypoints",
                 travel_mode.value, route.id, route.total_distance,
                 len(segments), len(route.waypoints))
    return route


def sample_waypoints(route: Route, interval_km: float | None = None) -> list[Waypoint]:
    """Sample waypoints every ``interval_km`` along the route for weather lookups.

    The source is always first (0 km, 0 s) and the destination always last
    (total distance and duration). Intermediate points are placed on each
    segment's great circle; their times are interpolated linearly within the
    segment. ``interval_km`` defaults to the travel mode's sampling interval.
    """
    if interval_km is None:
        interval_km = get_mode(route.travel_mode).waypoint_interval_km
    if interval_km <= 0:
        raise ValueError(f"interval_km must be positive, got {interval_km}")

    waypoints = [Waypoint(route.source.coordinates, 0.0, 0.0)]

    cumulative_distance = 0.0
    cumulative_time = 0.0
    next_distance = interval_km

    for segment in route.segments:
        segment_end_distance = cumulative_distance + segment.distance

        if segment.distance > 0:
            origin = segment.start_point.coordinates
            bearing = calculate_bearing(origin, segment.end_point.coordinates)
            while next_distance <= segment_end_distance and next_distance < route.total_distance:
                along = next_distance - cumulative_distance
                progress = along / segment.distance
                waypoints.append(Waypoint(
                    coordinates=calculate_destination(origin, along, bearing),
                    distance_from_start=next_distance,
                    estimated_time_from_start=cumulative_time + segment.estimated_duration * progress,
                ))
                next_distance += interval_km

        cumulative_distance = segment_end_distance
        cumulative_time += segment.estimated_duration

    if waypoints[-1].distance_from_start < route.total_distance:
        waypoints.append(Waypoint(
            route.destination.coordinates,
            route.total_distance,
            route.estimated_duration,
        ))

    logger.debug("Sampled %d waypoints every %.1f km on route %s",
                 len(waypoints), interval_km, route.id)
    return waypoints


def rescale_route(route: Route, speed_kmh: float) -> Route:
    """Return a copy of ``route`` re-timed for a new speed, with waypoints resampled."""
    if speed_kmh <= 0:
        raise ValueError(f"speed_kmh must be positive, got {speed_kmh}")

    segments: list[RouteSegment] = []
    cumulative_time = 0.0
    for segment in route.segments:
        duration = _duration_sec(segment.distance, speed_kmh)
        segments.append(dataclasses.replace(
            segment,
            start_point=dataclasses.replace(segment.start_point, estimated_time_from_start=cumulative_time),
            end_point=dataclasses.replace(segment.end_point,
                                          estimated_time_from_start=cumulative_time + duration),
            estimated_duration=duration,
        ))
        cumulative_time += duration

    rescaled = dataclasses.replace(
        route,
        id=_compute_route_id(route.source, route.destination, route.travel_mode, speed_kmh),
        estimated_duration=cumulative_time,
        segments=segments,
        waypoints=[],
    )
    rescaled.waypoints = sample_waypoints(rescaled)
    return rescaled


def route_warnings(route: Route) -> list[str]:
    """Travel advice for long routes, by mode."""
    warnings: list[str] = []

    if route.travel_mode == TravelMode.DRIVING:
        if route.total_distance > LONG_DRIVE_KM:
            warnings.append("Long driving route detected. Consider rest stops every 2-3 hours.")
    elif route.travel_mode == TravelMode.WALKING:
        if route.total_distance > LONG_WALK_KM:
            warnings.append("Long walking route detected. Plan for multiple days "
                            "or consider alternative transport.")
        if route.estimated_duration > LONG_WALK_SEC:
            warnings.append("Walking time exceeds 8 hours. Consider breaking into multiple days.")
    elif route.travel_mode == TravelMode.CYCLING:
        if route.total_distance > LONG_RIDE_KM:
            warnings.append("Long cycling route detected. Plan for rest stops "
                            "and consider elevation changes.")

    return warnings
