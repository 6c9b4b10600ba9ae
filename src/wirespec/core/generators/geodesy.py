"""
Great-circle geometry for the Globe primitive.

Coordinates are degrees; cartesian positions are on the unit sphere with
``y`` pointing at the north pole. Trajectory points carry an ``elevation``
radius multiplier that traces a parabolic flight arc when ``altitude`` is
non-zero.
"""

from __future__ import annotations

import math
import random
from collections.abc import Sequence
from typing import NamedTuple

from ..ir import GlobePoint, GlobeProps, GlobeTrajectoryData, GlobeTrajectoryFn

# Angular distance (radians) below which slerp degrades to linear interpolation
SLERP_EPSILON = 1e-4
MAX_ARC_HEIGHT = 0.4
SAMPLES_PER_SEGMENT = 15

GREAT_CIRCLE_START = (40.7, -74.0)  # New York
GREAT_CIRCLE_END = (51.5, -0.1)  # London
GREAT_CIRCLE_SAMPLES = 30
EQUATORIAL_SAMPLES = 36

POLAR_WAYPOINTS: tuple[tuple[float, float], ...] = (
    (34.0, -118.2),
    (60.0, -140.0),
    (80.0, -180.0),
    (75.0, 100.0),
    (55.8, 37.6),
)


class LatLon(NamedTuple):
    lat: float
    lon: float


def lat_lon_to_cartesian(lat: float, lon: float) -> tuple[float, float, float]:
    """
    Project a latitude/longitude onto the unit sphere.

    Examples:
        >>> lat_lon_to_cartesian(90, 0)[1]
        1.0
    """
    lat_rad = math.radians(lat)
    lon_rad = math.radians(lon)
    return (
        math.cos(lat_rad) * math.cos(lon_rad),
        math.sin(lat_rad),
        math.cos(lat_rad) * math.sin(lon_rad),
    )


def slerp(start: LatLon, end: LatLon, t: float) -> LatLon:
    """
    Interpolate along the great circle between two points.

    ``t`` runs from 0 (``start``) to 1 (``end``). Nearly coincident points
    are interpolated linearly in lat/lon space.
    """
    x1, y1, z1 = lat_lon_to_cartesian(start.lat, start.lon)
    x2, y2, z2 = lat_lon_to_cartesian(end.lat, end.lon)

    dot = x1 * x2 + y1 * y2 + z1 * z2
    omega = math.acos(max(-1.0, min(1.0, dot)))

    if abs(omega) < SLERP_EPSILON:
        return LatLon(
            start.lat + (end.lat - start.lat) * t,
            start.lon + (end.lon - start.lon) * t,
        )

    sin_omega = math.sin(omega)
    a = math.sin((1 - t) * omega) / sin_omega
    b = math.sin(t * omega) / sin_omega

    x = a * x1 + b * x2
    y = a * y1 + b * y2
    z = a * z1 + b * z2

    return LatLon(
        math.degrees(math.asin(max(-1.0, min(1.0, y)))),
        math.degrees(math.atan2(z, x)),
    )


def flight_elevation(t: float, altitude: float) -> float:
    """Parabolic arc: 1.0 at both ends, peaking at ``t == 0.5``."""
    parabola = 1 - 4 * (t - 0.5) ** 2
    return 1.0 + altitude * MAX_ARC_HEIGHT * parabola


def _point(lat: float, lon: float, t: float, altitude: float) -> GlobePoint:
    x, y, z = lat_lon_to_cartesian(lat, lon)
    return GlobePoint(lat=lat, lon=lon, x=x, y=y, z=z, elevation=flight_elevation(t, altitude))


def generate_globe_trajectory(
    fn: GlobeTrajectoryFn | None,
    waypoints: Sequence[Sequence[float]] | None = None,
    altitude: float = 0.0,
    rng: random.Random | None = None,
) -> list[GlobePoint]:
    """
    Generate a named globe trajectory.

    Args:
        fn: Trajectory shape
        waypoints: ``[lat, lon]`` pairs for ``custom``
        altitude: Arc height factor; 0 keeps the path on the surface
        rng: Random source for ``random`` and ``circuit``

    Returns:
        Ordered list of globe points
    """
    source = rng or random

    if fn == GlobeTrajectoryFn.GREAT_CIRCLE:
        start, end = LatLon(*GREAT_CIRCLE_START), LatLon(*GREAT_CIRCLE_END)
        points = []
        for i in range(GREAT_CIRCLE_SAMPLES + 1):
            t = i / GREAT_CIRCLE_SAMPLES
            lat, lon = slerp(start, end, t)
            points.append(_point(lat, lon, t, altitude))
        return points

    if fn == GlobeTrajectoryFn.POLAR:
        return generate_globe_trajectory(
            GlobeTrajectoryFn.CUSTOM, POLAR_WAYPOINTS, altitude, rng
        )

    if fn == GlobeTrajectoryFn.EQUATORIAL:
        points = []
        for i in range(EQUATORIAL_SAMPLES + 1):
            t = i / EQUATORIAL_SAMPLES
            lat = 5 * math.sin(t * math.pi * 2)
            lon = -180 + 360 * t
            points.append(_point(lat, lon, t, altitude))
        return points

    if fn == GlobeTrajectoryFn.RANDOM:
        count = 5 + int(source.random() * 4)
        random_waypoints = [
            (source.random() * 140 - 70, source.random() * 360 - 180) for _ in range(count)
        ]
        return generate_globe_trajectory(
            GlobeTrajectoryFn.CUSTOM, random_waypoints, altitude, rng
        )

    if fn == GlobeTrajectoryFn.CIRCUIT:
        return generate_globe_trajectory(
            GlobeTrajectoryFn.CUSTOM, _circuit_waypoints(source), altitude, rng
        )

    if fn == GlobeTrajectoryFn.CUSTOM:
        if not waypoints or len(waypoints) < 2:
            return generate_globe_trajectory(GlobeTrajectoryFn.GREAT_CIRCLE, None, altitude, rng)
        return _interpolate_waypoints(waypoints, altitude)

    return []


def _circuit_waypoints(source) -> list[tuple[float, float]]:
    """Closed organic loop of 5-7 waypoints around a random center."""
    count = 5 + int(source.random() * 3)
    center_lat = source.random() * 60 - 30
    center_lon = source.random() * 300 - 150
    base_radius = 25 + source.random() * 20

    waypoints: list[tuple[float, float]] = []
    for i in range(count):
        angle = (i / count) * math.pi * 2
        radius = base_radius * (0.6 + source.random() * 0.8)
        angle_offset = (source.random() - 0.5) * 0.4
        lat = center_lat + radius * math.sin(angle + angle_offset) * 0.7
        lon = center_lon + radius * math.cos(angle + angle_offset)
        waypoints.append((max(-70.0, min(70.0, lat)), lon))

    waypoints.append(waypoints[0])
    return waypoints


def _interpolate_waypoints(
    waypoints: Sequence[Sequence[float]], altitude: float
) -> list[GlobePoint]:
    # Shared segment endpoints are emitted once; elevation follows the whole path
    total_points = (len(waypoints) - 1) * SAMPLES_PER_SEGMENT + 1
    points: list[GlobePoint] = []

    for w in range(len(waypoints) - 1):
        start = LatLon(float(waypoints[w][0]), float(waypoints[w][1]))
        end = LatLon(float(waypoints[w + 1][0]), float(waypoints[w + 1][1]))
        for i in range(SAMPLES_PER_SEGMENT + 1):
            if i == 0 and w > 0:
                continue
            lat, lon = slerp(start, end, i / SAMPLES_PER_SEGMENT)
            global_t = len(points) / (total_points - 1)
            points.append(_point(lat, lon, global_t, altitude))

    return points


def build_globe_trajectories(
    props: GlobeProps, rng: random.Random | None = None
) -> list[GlobeTrajectoryData]:
    """
    Resolve the trajectories of a Globe node.

    Each trajectory uses its ``waypoints`` if given, otherwise its ``fn``,
    otherwise the default great circle.
    """
    if props.trajectories:
        return [
            GlobeTrajectoryData(
                points=_trajectory_points(traj.waypoints, traj.fn, traj.altitude or 0, rng),
                vehicle=traj.vehicle,
                markers=traj.markers,
                label=traj.label,
            )
            for traj in props.trajectories
        ]

    single = props.trajectory
    if single is None:
        points = generate_globe_trajectory(GlobeTrajectoryFn.GREAT_CIRCLE, rng=rng)
    else:
        points = _trajectory_points(single.waypoints, single.fn, single.altitude or 0, rng)
    return [GlobeTrajectoryData(points=points, vehicle=props.vehicle, markers=props.markers)]


def _trajectory_points(
    waypoints: list[tuple[float, float]] | None,
    fn: GlobeTrajectoryFn | None,
    altitude: float,
    rng: random.Random | None,
) -> list[GlobePoint]:
    if waypoints is not None:
        return generate_globe_trajectory(GlobeTrajectoryFn.CUSTOM, waypoints, altitude, rng)
    return generate_globe_trajectory(fn or GlobeTrajectoryFn.GREAT_CIRCLE, None, altitude, rng)


__all__ = [
    "LatLon",
    "SLERP_EPSILON",
    "MAX_ARC_HEIGHT",
    "SAMPLES_PER_SEGMENT",
    "POLAR_WAYPOINTS",
    "lat_lon_to_cartesian",
    "slerp",
    "flight_elevation",
    "generate_globe_trajectory",
    "build_globe_trajectories",
]
