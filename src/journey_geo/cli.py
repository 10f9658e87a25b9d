"""CLI entrypoint for journey-geo."""

from __future__ import annotations

import logging

import click
from rich.console import Console
from rich.table import Table

from journey_geo.geo import (
    calculate_bearing,
    calculate_destination,
    calculate_distance,
    calculate_midpoint,
    generate_waypoints,
    is_within_bounds,
    normalize_latitude,
    normalize_longitude,
)
from journey_geo.models import Bounds, Location, TravelMode
from journey_geo.modes import DEFAULT_WAYPOINT_COUNT, LOG_LEVEL
from journey_geo.routing import plan_route, route_warnings, sample_waypoints
from journey_geo.sanitization import ValidationError, require_coordinate

console = Console()
logger = logging.getLogger(__name__)


class CoordinateParam(click.ParamType):
    """``LAT,LON`` in decimal degrees."""

    name = "lat,lon"

    def convert(self, value, param, ctx):
        parts = value.split(",") if isinstance(value, str) else []
        if len(parts) != 2:
            self.fail(f"expected LAT,LON but got '{value}'", param, ctx)
        try:
            lat, lon = float(parts[0]), float(parts[1])
        except ValueError:
            self.fail(f"'{value}' is not a pair of numbers", param, ctx)
        try:
            return require_coordinate(lat, lon)
        except ValidationError as exc:
            self.fail("; ".join(exc.errors), param, ctx)


COORDINATE = CoordinateParam()


def _fmt(coord) -> str:
    return f"{coord.latitude:.6f}, {coord.longitude:.6f}"


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool):
    """Journey Geo: great-circle geodesy for route weather sampling."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else LOG_LEVEL,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


@cli.command()
@click.option("--start", "-a", required=True, type=COORDINATE, help="Start point LAT,LON.")
@click.option("--end", "-b", required=True, type=COORDINATE, help="End point LAT,LON.")
def distance(start, end):
    """Great-circle distance in kilometers."""
    click.echo(f"{calculate_distance(start, end):.3f} km")


@cli.command()
@click.option("--start", "-a", required=True, type=COORDINATE, help="Start point LAT,LON.")
@click.option("--end", "-b", required=True, type=COORDINATE, help="End point LAT,LON.")
def bearing(start, end):
    """Initial bearing from start to end in degrees."""
    click.echo(f"{calculate_bearing(start, end):.3f}°")


@cli.command()
@click.option("--start", "-a", required=True, type=COORDINATE, help="Start point LAT,LON.")
@click.option("--distance", "distance_km", required=True, type=float, help="Distance in km.")
@click.option("--bearing", "bearing_deg", required=True, type=float, help="Bearing in degrees.")
def destination(start, distance_km: float, bearing_deg: float):
    """Point reached from start after a distance on a bearing."""
    click.echo(_fmt(calculate_destination(start, distance_km, bearing_deg)))


@cli.command()
@click.option("--start", "-a", required=True, type=COORDINATE, help="Start point LAT,LON.")
@click.option("--end", "-b", required=True, type=COORDINATE, help="End point LAT,LON.")
def midpoint(start, end):
    """Great-circle midpoint of two points."""
    click.echo(_fmt(calculate_midpoint(start, end)))


@cli.command()
@click.option("--start", "-a", required=True, type=COORDINATE, help="Start point LAT,LON.")
@click.option("--end", "-b", required=True, type=COORDINATE, help="End point LAT,LON.")
@click.option("--count", "-n", default=DEFAULT_WAYPOINT_COUNT, show_default=True,
              help="Number of points including both ends.")
def waypoints(start, end, count: int):
    """Evenly spaced points along the great circle."""
    points = generate_waypoints(start, end, count)

    table = Table(title=f"Waypoints ({len(points)})")
    table.add_column("#", justify="right")
    table.add_column("Latitude", justify="right")
    table.add_column("Longitude", justify="right")
    table.add_column("From start (km)", justify="right")

    for i, point in enumerate(points):
        table.add_row(
            str(i),
            f"{point.latitude:.5f}",
            f"{point.longitude:.5f}",
            f"{calculate_distance(start, point):.1f}",
        )

    console.print(table)


@cli.command()
@click.option("--point", "-p", required=True, type=COORDINATE, help="Point LAT,LON.")
@click.option("--north", required=True, type=float)
@click.option("--south", required=True, type=float)
@click.option("--east", required=True, type=float)
@click.option("--west", required=True, type=float)
def bounds(point, north: float, south: float, east: float, west: float):
    """Check whether a point lies inside a lat/lon box."""
    if west > east:
        logger.warning("west > east: boxes crossing the anti-meridian are not supported")
    inside = is_within_bounds(point, Bounds(north=north, south=south, east=east, west=west))
    click.echo("inside" if inside else "outside")


@cli.command()
@click.option("--lat", type=float, default=None, help="Latitude to clamp.")
@click.option("--lon", type=float, default=None, help="Longitude to wrap.")
def normalize(lat: float | None, lon: float | None):
    """Clamp a latitude and/or wrap a longitude into range."""
    if lat is None and lon is None:
        raise click.UsageError("give --lat and/or --lon")
    if lat is not None:
        click.echo(f"latitude: {normalize_latitude(lat)}")
    if lon is not None:
        click.echo(f"longitude: {normalize_longitude(lon)}")


@cli.command()
@click.option("--start", "-a", required=True, type=COORDINATE, help="Start point LAT,LON.")
@click.option("--end", "-b", required=True, type=COORDINATE, help="End point LAT,LON.")
@click.option("--mode", default=TravelMode.DRIVING.value,
              type=click.Choice([m.value for m in TravelMode]))
@click.option("--speed", default=None, type=float, help="Custom speed in km/h.")
@click.option("--segments", default=1, type=click.IntRange(min=1), help="Great-circle segments.")
@click.option("--interval", default=None, type=float, help="Sampling interval in km.")
@click.option("--json", "as_json", is_flag=True, help="Print the route as JSON.")
def route(start, end, mode: str, speed: float | None, segments: int,
          interval: float | None, as_json: bool):
    """Plan a great-circle route and list its weather-sampling waypoints."""
    try:
        planned = plan_route(
            Location(name="start", coordinates=start),
            Location(name="end", coordinates=end),
            mode=mode,
            custom_speed=speed,
            segment_count=segments,
        )
        if interval is not None:
            planned.waypoints = sample_waypoints(planned, interval)
    except (ValidationError, ValueError) as exc:
        raise click.ClickException(str(exc)) from exc

    if as_json:
        click.echo(planned.to_json())
        return

    table = Table(title=f"{mode.title()} route {planned.total_distance:.1f} km, "
                        f"{planned.estimated_duration / 3600:.1f} h")
    table.add_column("Latitude", justify="right")
    table.add_column("Longitude", justify="right")
    table.add_column("Distance (km)", justify="right")
    table.add_column("ETA (h)", justify="right")

    for wp in planned.waypoints:
        table.add_row(
            f"{wp.coordinates.latitude:.4f}",
            f"{wp.coordinates.longitude:.4f}",
            f"{wp.distance_from_start:.1f}",
            f"{wp.estimated_time_from_start / 3600:.2f}",
        )

    console.print(table)
    for warning in route_warnings(planned):
        console.print(f"[yellow]{warning}[/]")
