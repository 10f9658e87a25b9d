"""Tests for great-circle route planning and waypoint sampling."""

from __future__ import annotations

import logging

import pytest

from journey_geo.geo import calculate_distance
from journey_geo.models import Coordinate, Location, Route, TravelMode
from journey_geo.modes import MODES, get_mode, resolve_log_level
from journey_geo.routing import (
    plan_route,
    rescale_route,
    route_warnings,
    sample_waypoints,
)
from journey_geo.sanitization import ValidationError

NYC = Location(name="New York", coordinates=Coordinate(40.7128, -74.0060))
LA = Location(name="Los Angeles", coordinates=Coordinate(34.0522, -118.2437))


def _loc(lat, lon, name="point"):
    return Location(name=name, coordinates=Coordinate(lat, lon))


# ── Mode registry ────────────────────────────────────────────────────────


class TestModes:
    def test_every_mode_registered(self):
        assert set(MODES) == set(TravelMode)

    def test_lookup_by_string(self):
        assert get_mode("flying").default_speed_kmh == 800
        assert get_mode(TravelMode.WALKING).waypoint_interval_km == 5

    def test_unknown_mode(self):
        with pytest.raises(ValueError, match="unknown travel mode"):
            get_mode("teleport")

    def test_log_level_names(self):
        assert resolve_log_level("debug") == logging.DEBUG
        assert resolve_log_level(" Info ") == logging.INFO

    def test_unknown_log_level_falls_back_to_warning(self):
        for name in ("verbose", "", None):
            assert resolve_log_level(name) == logging.WARNING


# ── plan_route ───────────────────────────────────────────────────────────


class TestPlanRoute:
    def test_single_segment(self):
        route = plan_route(NYC, LA, TravelMode.DRIVING)
        assert route.total_distance == pytest.approx(calculate_distance(NYC.coordinates, LA.coordinates))
        assert route.estimated_duration == pytest.approx(route.total_distance / 60 * 3600)
        assert len(route.segments) == 1
        assert route.segments[0].start_point.coordinates is NYC.coordinates
        assert route.segments[0].end_point.coordinates is LA.coordinates

    def test_waypoints_sampled_at_mode_interval(self):
        route = plan_route(NYC, LA, "driving")
        # 50 km interval over ~3936 km: 78 interior samples plus both ends
        assert len(route.waypoints) == 80
        assert route.waypoints[0].coordinates == NYC.coordinates
        assert route.waypoints[-1].coordinates == LA.coordinates
        assert route.waypoints[1].distance_from_start == pytest.approx(50)

    def test_multiple_segments(self):
        route = plan_route(NYC, LA, TravelMode.FLYING, segment_count=4)
        assert len(route.segments) == 4
        first = route.segments[0].distance
        for segment in route.segments:
            assert segment.distance == pytest.approx(first, rel=1e-9)
        assert route.total_distance == pytest.approx(
            calculate_distance(NYC.coordinates, LA.coordinates), abs=1e-6)
        for prev, nxt in zip(route.segments, route.segments[1:]):
            assert prev.end_point.coordinates == nxt.start_point.coordinates
            assert prev.end_point.estimated_time_from_start == pytest.approx(
                nxt.start_point.estimated_time_from_start)

    def test_custom_speed(self):
        route = plan_route(NYC, LA, TravelMode.DRIVING, custom_speed=100)
        assert route.estimated_duration == pytest.approx(route.total_distance / 100 * 3600)

    def test_stable_id(self):
        a = plan_route(NYC, LA, TravelMode.DRIVING)
        b = plan_route(NYC, LA, TravelMode.DRIVING)
        c = plan_route(NYC, LA, TravelMode.CYCLING)
        assert a.id == b.id
        assert a.id != c.id
        assert a.id.startswith("RT-")
        assert len(a.id) == 19

    def test_invalid_coordinates(self):
        bad = _loc(95, 0, name="Nowhere")
        with pytest.raises(ValidationError) as exc_info:
            plan_route(bad, LA)
        assert any("Nowhere" in e for e in exc_info.value.errors)
        assert any("Latitude" in e for e in exc_info.value.errors)

    def test_invalid_arguments(self):
        with pytest.raises(ValueError):
            plan_route(NYC, LA, "teleport")
        with pytest.raises(ValueError):
            plan_route(NYC, LA, custom_speed=0)
        with pytest.raises(ValueError):
            plan_route(NYC, LA, segment_count=0)

    def test_json_roundtrip(self):
        route = plan_route(NYC, LA, TravelMode.SAILING, segment_count=2)
        restored = Route.from_json(route.to_json())
        assert restored == route


# ── sample_waypoints ─────────────────────────────────────────────────────


class TestSampleWaypoints:
    def test_custom_interval(self):
        route = plan_route(_loc(0, 0), _loc(10, 0), TravelMode.FLYING)
        waypoints = sample_waypoints(route, interval_km=500)
        # ~1112 km: samples at 500 and 1000 plus both ends
        assert [round(w.distance_from_start) for w in waypoints[:-1]] == [0, 500, 1000]
        assert waypoints[-1].distance_from_start == route.total_distance
        assert waypoints[-1].estimated_time_from_start == route.estimated_duration

    def test_samples_lie_on_route(self):
        route = plan_route(NYC, LA, TravelMode.FLYING, segment_count=3)
        for wp in route.waypoints:
            along = calculate_distance(NYC.coordinates, wp.coordinates)
            assert along == pytest.approx(wp.distance_from_start, abs=1e-6)

    def test_times_increase(self):
        route = plan_route(NYC, LA, TravelMode.CRUISE, segment_count=5)
        times = [w.estimated_time_from_start for w in route.waypoints]
        distances = [w.distance_from_start for w in route.waypoints]
        assert times == sorted(times)
        assert distances == sorted(distances)
        for wp in route.waypoints:
            assert wp.estimated_time_from_start == pytest.approx(wp.distance_from_start / 25 * 3600)

    def test_short_route_keeps_both_ends(self):
        route = plan_route(_loc(0, 0), _loc(0, 0.01), TravelMode.FLYING)
        assert len(route.waypoints) == 2

    def test_zero_length_route(self):
        route = plan_route(NYC, NYC, TravelMode.WALKING)
        assert route.total_distance == 0
        assert len(route.waypoints) == 1
        assert route.waypoints[0].coordinates == NYC.coordinates

    def test_interval_must_be_positive(self):
        route = plan_route(NYC, LA)
        with pytest.raises(ValueError):
            sample_waypoints(route, interval_km=0)


# ── rescale_route / warnings ─────────────────────────────────────────────


class TestRescale:
    def test_rescale_halves_speed(self):
        route = plan_route(NYC, LA, TravelMode.DRIVING, segment_count=2)
        slower = rescale_route(route, 30)
        assert slower.total_distance == route.total_distance
        assert slower.estimated_duration == pytest.approx(route.estimated_duration * 2)
        assert slower.segments[1].start_point.estimated_time_from_start == pytest.approx(
            slower.segments[0].estimated_duration)
        assert len(slower.waypoints) == len(route.waypoints)
        assert slower.id != route.id
        # Original is untouched
        assert route.estimated_duration == pytest.approx(route.total_distance / 60 * 3600)

    def test_rescale_rejects_non_positive(self):
        with pytest.raises(ValueError):
            rescale_route(plan_route(NYC, LA), -1)


class TestWarnings:
    def test_short_drive(self):
        assert route_warnings(plan_route(_loc(0, 0), _loc(0, 0.5), TravelMode.DRIVING)) == []

    def test_long_drive(self):
        warnings = route_warnings(plan_route(NYC, LA, TravelMode.DRIVING))
        assert len(warnings) == 1
        assert "rest stops" in warnings[0]

    def test_long_walk(self):
        # ~55.6 km at 5 km/h: over 20 km and over 8 hours
        warnings = route_warnings(plan_route(_loc(0, 0), _loc(0, 0.5), TravelMode.WALKING))
        assert len(warnings) == 2

    def test_long_ride(self):
        warnings = route_warnings(plan_route(_loc(0, 0), _loc(0, 1), TravelMode.CYCLING))
        assert len(warnings) == 1

    def test_flying_has_no_advice(self):
        assert route_warnings(plan_route(NYC, LA, TravelMode.FLYING)) == []
