"""Travel mode registry and environment settings."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from journey_geo.models import TravelMode


@dataclass
class ModeConfig:
    """Speed and weather-sampling interval for one travel mode."""

    name: str
    default_speed_kmh: float
    waypoint_interval_km: float


MODES: dict[TravelMode, ModeConfig] = {
    TravelMode.DRIVING: ModeConfig(name="driving", default_speed_kmh=60, waypoint_interval_km=50),
    TravelMode.WALKING: ModeConfig(name="walking", default_speed_kmh=5, waypoint_interval_km=5),
    TravelMode.CYCLING: ModeConfig(name="cycling", default_speed_kmh=20, waypoint_interval_km=20),
    TravelMode.FLYING: ModeConfig(name="flying", default_speed_kmh=800, waypoint_interval_km=200),
    TravelMode.SAILING: ModeConfig(name="sailing", default_speed_kmh=15, waypoint_interval_km=100),
    TravelMode.CRUISE: ModeConfig(name="cruise", default_speed_kmh=25, waypoint_interval_km=100),
}

DEFAULT_WAYPOINT_COUNT = int(os.getenv("JOURNEY_GEO_DEFAULT_WAYPOINTS", "10"))


def resolve_log_level(name: str | None) -> int:
    """Map a level name such as "debug" to its logging constant, WARNING if unknown."""
    level = logging.getLevelName((name or "").strip().upper())
    return level if isinstance(level, int) else logging.WARNING


LOG_LEVEL = resolve_log_level(os.getenv("JOURNEY_GEO_LOG_LEVEL", "WARNING"))


def get_mode(mode: TravelMode | str) -> ModeConfig:
    """Look up a mode by enum member or its string value."""
    try:
        return MODES[TravelMode(mode)]
    except ValueError:
        raise ValueError(f"unknown travel mode '{mode}' (expected one of: "
                         f"{', '.join(m.value for m in TravelMode)})") from None
