"""
3D point distributions for the Scatter3D primitive.

All shapes live roughly inside the ``[-1, 1]`` cube so the presentation
layer can use a fixed camera.
"""

from __future__ import annotations

import math
import random

from ..ir import ChartColor, Point3D, PointCloudFn, PointCloudProps, PointCloudSeries
from .charts import DEFAULT_COLORS

DEFAULT_POINT_SAMPLES = 50
HELIX_TURNS = 3
HELIX_RADIUS = 0.8
CLUSTER_SPREAD = 0.3

_CUBE_EDGES: tuple[tuple[tuple[int, int, int], tuple[int, int, int]], ...] = (
    # Bottom face
    ((-1, -1, -1), (1, -1, -1)),
    ((1, -1, -1), (1, -1, 1)),
    ((1, -1, 1), (-1, -1, 1)),
    ((-1, -1, 1), (-1, -1, -1)),
    # Top face
    ((-1, 1, -1), (1, 1, -1)),
    ((1, 1, -1), (1, 1, 1)),
    ((1, 1, 1), (-1, 1, 1)),
    ((-1, 1, 1), (-1, 1, -1)),
    # Verticals
    ((-1, -1, -1), (-1, 1, -1)),
    ((1, -1, -1), (1, 1, -1)),
    ((1, -1, 1), (1, 1, 1)),
    ((-1, -1, 1), (-1, 1, 1)),
)


def generate_point_cloud(
    fn: PointCloudFn | None,
    samples: int = DEFAULT_POINT_SAMPLES,
    noise: float = 0.0,
    rng: random.Random | None = None,
) -> list[Point3D]:
    """
    Generate a named 3D point distribution.

    Args:
        fn: Distribution name; ``None`` yields no points
        samples: Target point count (``cube`` and ``plane`` round up)
        noise: Amplitude of per-axis uniform jitter
        rng: Random source (module-level source if omitted)

    Examples:
        >>> len(generate_point_cloud(PointCloudFn.CUBE, 12))
        24
    """
    source = rng or random
    samples = max(0, int(samples))
    points: list[list[float]] = []

    if fn == PointCloudFn.RANDOM:
        for _ in range(samples):
            points.append(
                [source.random() * 2 - 1, source.random() * 2 - 1, source.random() * 2 - 1]
            )

    elif fn == PointCloudFn.SPHERE:
        # Fibonacci spiral
        golden_ratio = (1 + math.sqrt(5)) / 2
        for i in range(samples):
            theta = 2 * math.pi * i / golden_ratio
            phi = math.acos(1 - 2 * (i + 0.5) / samples)
            points.append(
                [math.sin(phi) * math.cos(theta), math.cos(phi), math.sin(phi) * math.sin(theta)]
            )

    elif fn == PointCloudFn.HELIX:
        for i in range(samples):
            t = i / (samples - 1) if samples > 1 else 0.0
            angle = t * HELIX_TURNS * 2 * math.pi
            points.append([math.cos(angle) * HELIX_RADIUS, t * 2 - 1, math.sin(angle) * HELIX_RADIUS])

    elif fn == PointCloudFn.CUBE:
        steps = math.ceil(samples / 12)
        if steps > 0:
            for start, end in _CUBE_EDGES:
                for i in range(steps + 1):
                    t = i / steps
                    points.append([s + (e - s) * t for s, e in zip(start, end, strict=True)])

    elif fn == PointCloudFn.CLUSTER:
        cx = source.random() * 1.2 - 0.6
        cy = source.random() * 1.2 - 0.6
        cz = source.random() * 1.2 - 0.6
        for _ in range(samples):
            u1 = source.random() or 0.001
            u2 = source.random()
            u3 = source.random() or 0.001
            u4 = source.random()
            r1 = CLUSTER_SPREAD * math.sqrt(-2 * math.log(u1))
            r2 = CLUSTER_SPREAD * math.sqrt(-2 * math.log(u3))
            points.append(
                [
                    cx + r1 * math.cos(2 * math.pi * u2),
                    cy + r1 * math.sin(2 * math.pi * u2),
                    cz + r2 * math.cos(2 * math.pi * u4),
                ]
            )

    elif fn == PointCloudFn.PLANE:
        grid = math.ceil(math.sqrt(samples))
        for i in range(grid):
            for j in range(grid):
                x = (i / (grid - 1)) * 2 - 1 if grid > 1 else 0.0
                y = (j / (grid - 1)) * 2 - 1 if grid > 1 else 0.0
                points.append([x, y, math.sin(x * math.pi) * math.cos(y * math.pi) * 0.5])

    if noise > 0:
        for point in points:
            for axis in range(3):
                point[axis] += (source.random() - 0.5) * noise * 2

    return [Point3D(x=x, y=y, z=z) for x, y, z in points]


def build_point_cloud_series(
    props: PointCloudProps, rng: random.Random | None = None
) -> list[PointCloudSeries]:
    """
    Resolve the series of a Scatter3D node.

    Colors cycle like chart lines; single-series mode is always blue.
    """
    samples = props.samples or DEFAULT_POINT_SAMPLES

    if props.series:
        return [
            PointCloudSeries(
                points=generate_point_cloud(series.fn, samples, series.noise or 0, rng),
                label=series.label,
                color=series.color or DEFAULT_COLORS[index % len(DEFAULT_COLORS)],
            )
            for index, series in enumerate(props.series)
        ]

    if props.fn is not None:
        return [
            PointCloudSeries(
                points=generate_point_cloud(props.fn, samples, props.noise or 0, rng),
                color=ChartColor.BLUE,
            )
        ]

    return []


__all__ = [
    "DEFAULT_POINT_SAMPLES",
    "generate_point_cloud",
    "build_point_cloud_series",
]
