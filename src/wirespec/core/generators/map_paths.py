"""
2D trajectory generators for the Map primitive.

Each named shape produces a polyline inside a ``width`` x ``height`` box,
inset by ``PATH_PADDING`` on every side.
"""

from __future__ import annotations

import math
import random

from ..ir import MapProps, MapTrajectoryData, MapTrajectoryFn

PATH_PADDING = 40
DEFAULT_MAP_WIDTH = 400
DEFAULT_MAP_HEIGHT = 300

Point2D = tuple[float, float]


def generate_path(
    fn: MapTrajectoryFn | None,
    width: float,
    height: float,
    rng: random.Random | None = None,
) -> list[Point2D]:
    """
    Generate a named 2D path.

    Args:
        fn: Shape name; ``None`` gives a straight line across the middle
        width: Map width in px
        height: Map height in px
        rng: Random source for ``wander`` (module-level source if omitted)

    Returns:
        Ordered list of ``(x, y)`` points

    Examples:
        >>> len(generate_path(MapTrajectoryFn.ZIGZAG, 400, 300))
        9
    """
    source = rng or random
    pad = PATH_PADDING
    w = width - pad * 2
    h = height - pad * 2
    points: list[Point2D] = []

    if fn == MapTrajectoryFn.LOOP:
        samples = 24
        for i in range(samples + 1):
            t = (i / samples) * math.pi * 2
            points.append(
                (pad + w / 2 + (w / 2.5) * math.cos(t), pad + h / 2 + (h / 2.5) * math.sin(t))
            )
    elif fn == MapTrajectoryFn.LINEAR:
        samples = 10
        for i in range(samples + 1):
            t = i / samples
            points.append((pad + t * w, pad + h / 2 + math.sin(t * math.pi) * (h / 8)))
    elif fn == MapTrajectoryFn.CURVED:
        samples = 20
        for i in range(samples + 1):
            t = i / samples
            points.append((pad + t * w, pad + h / 2 + math.sin(t * math.pi * 2) * (h / 4)))
    elif fn == MapTrajectoryFn.WANDER:
        samples = 16
        x = pad + w * 0.1
        y = pad + h / 2
        points.append((x, y))
        low, high = pad, height - pad
        for i in range(1, samples + 1):
            t = i / samples
            x = pad + t * w * 0.9 + w * 0.1
            y = y + (source.random() - 0.5) * (h / 4)
            # Degenerate boxes (height < 2 * pad) clamp to the low bound
            y = max(low, min(high, y)) if high >= low else low
            points.append((x, y))
    elif fn == MapTrajectoryFn.ZIGZAG:
        samples = 8
        for i in range(samples + 1):
            t = i / samples
            y = pad + h * 0.2 if i % 2 == 0 else pad + h * 0.8
            points.append((pad + t * w, y))
    else:
        points = [(pad, pad + h / 2), (width - pad, pad + h / 2)]

    return points


def build_map_trajectories(
    props: MapProps, rng: random.Random | None = None
) -> list[MapTrajectoryData]:
    """
    Resolve the trajectories of a Map node.

    ``trajectories`` (when non-empty) wins over the single ``trajectory``
    form. Explicit ``points``, even an empty list, win over ``fn``; with
    neither, the trajectory is empty.
    """
    width = props.width or DEFAULT_MAP_WIDTH
    height = props.height or DEFAULT_MAP_HEIGHT

    if props.trajectories:
        return [
            MapTrajectoryData(
                points=_trajectory_points(traj.points, traj.fn, width, height, rng),
                vehicle=traj.vehicle,
                markers=traj.markers,
            )
            for traj in props.trajectories
        ]

    single = props.trajectory
    points = (
        _trajectory_points(single.points, single.fn, width, height, rng) if single else []
    )
    return [MapTrajectoryData(points=points, vehicle=props.vehicle, markers=props.markers)]


def _trajectory_points(
    explicit: list[tuple[float, float]] | None,
    fn: MapTrajectoryFn | None,
    width: float,
    height: float,
    rng: random.Random | None,
) -> list[Point2D]:
    if explicit is not None:
        return [(float(x), float(y)) for x, y in explicit]
    if fn is not None:
        return generate_path(fn, width, height, rng)
    return []


__all__ = [
    "PATH_PADDING",
    "DEFAULT_MAP_WIDTH",
    "DEFAULT_MAP_HEIGHT",
    "generate_path",
    "build_map_trajectories",
]
