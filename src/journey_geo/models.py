"""Data models for coordinates, locations and great-circle routes."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class Coordinate:
    """Immutable (lat, lon) pair in decimal degrees. Not normalized on construction."""

    latitude: float             # [-90, 90]
    longitude: float            # [-180, 180]

    def as_tuple(self) -> tuple[float, float]:
        return self.latitude, self.longitude

    def to_dict(self) -> dict:
        return {"latitude": self.latitude, "longitude": self.longitude}

    @classmethod
    def from_dict(cls, d: dict) -> Coordinate:
        return cls(latitude=float(d["latitude"]), longitude=float(d["longitude"]))


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned lat/lon box in degrees. The caller owns north > south, east > west."""

    north: float
    south: float
    east: float
    west: float


class TravelMode(str, Enum):
    DRIVING = "driving"
    WALKING = "walking"
    CYCLING = "cycling"
    FLYING = "flying"
    SAILING = "sailing"
    CRUISE = "cruise"


@dataclass
class Location:
    name: str
    coordinates: Coordinate
    address: Optional[str] = None

    def to_dict(self) -> dict:
        d = {"name": self.name, "coordinates": self.coordinates.to_dict()}
        if self.address is not None:
            d["address"] = self.address
        return d

    @classmethod
    def from_dict(cls, d: dict) -> Location:
        return cls(
            name=d["name"],
            coordinates=Coordinate.from_dict(d["coordinates"]),
            address=d.get("address"),
        )


@dataclass
class Waypoint:
    """Sample point along a route, used for weather lookups."""

    coordinates: Coordinate
    distance_from_start: float          # km
    estimated_time_from_start: float    # seconds

    def to_dict(self) -> dict:
        return {
            "coordinates": self.coordinates.to_dict(),
            "distanceFromStart": self.distance_from_start,
            "estimatedTimeFromStart": self.estimated_time_from_start,
        }

    @classmethod
    def from_dict(cls, d: dict) -> Waypoint:
        return cls(
            coordinates=Coordinate.from_dict(d["coordinates"]),
            distance_from_start=d["distanceFromStart"],
            estimated_time_from_start=d["estimatedTimeFromStart"],
        )


@dataclass
class RouteSegment:
    start_point: Waypoint
    end_point: Waypoint
    distance: float                     # km
    estimated_duration: float           # seconds
    travel_mode: TravelMode

    def to_dict(self) -> dict:
        return {
            "startPoint": self.start_point.to_dict(),
            "endPoint": self.end_point.to_dict(),
            "distance": self.distance,
            "estimatedDuration": self.estimated_duration,
            "travelMode": self.travel_mode.value,
        }

    @classmethod
    def from_dict(cls, d: dict) -> RouteSegment:
        return cls(
            start_point=Waypoint.from_dict(d["startPoint"]),
            end_point=Waypoint.from_dict(d["endPoint"]),
            distance=d["distance"],
            estimated_duration=d["estimatedDuration"],
            travel_mode=TravelMode(d["travelMode"]),
        )


@dataclass
class Route:
    """Great-circle route between two locations, split into segments."""

    id: str
    source: Location
    destination: Location
    travel_mode: TravelMode
    total_distance: float               # km
    estimated_duration: float           # seconds
    segments: list[RouteSegment] = field(default_factory=list)
    waypoints: list[Waypoint] = field(default_factory=list)

    def to_json(self) -> str:
        return json.dumps({
            "id": self.id,
            "source": self.source.to_dict(),
            "destination": self.destination.to_dict(),
            "travelMode": self.travel_mode.value,
            "waypoints": [w.to_dict() for w in self.waypoints],
            "totalDistance": self.total_distance,
            "estimatedDuration": self.estimated_duration,
            "segments": [s.to_dict() for s in self.segments],
        })

    @classmethod
    def from_json(cls, raw: str) -> Route:
        d = json.loads(raw)
        return cls(
            id=d["id"],
            source=Location.from_dict(d["source"]),
            destination=Location.from_dict(d["destination"]),
            travel_mode=TravelMode(d["travelMode"]),
            total_distance=d["totalDistance"],
            estimated_duration=d["estimatedDuration"],
            segments=[RouteSegment.from_dict(s) for s in d.get("segments", [])],
            waypoints=[Waypoint.from_dict(w) for w in d.get("waypoints", [])],
        )
