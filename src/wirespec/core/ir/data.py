"""
Pre-computed procedural data attached to resolved nodes.

These are the concrete point lists produced by ``wirespec.core.generators``;
the presentation layer draws them without knowing which named function
generated them.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from .enums import ChartColor
from .props import GlobeMarker, MapMarker


class ChartPoint(BaseModel):
    x: float
    y: float


class ChartSeries(BaseModel):
    """One sampled line of a chart."""

    data: list[ChartPoint] = Field(default_factory=list)
    label: str | None = None
    color: ChartColor = ChartColor.BLUE
    scatter: bool | None = None


class MapTrajectoryData(BaseModel):
    """Resolved 2D polyline with optional vehicle position and markers."""

    points: list[tuple[float, float]] = Field(default_factory=list)
    vehicle: float | None = None
    markers: list[MapMarker] | None = None


class GlobePoint(BaseModel):
    """
    A point on a globe trajectory.

    Attributes:
        lat: Latitude in degrees
        lon: Longitude in degrees
        x, y, z: Position on the unit sphere (y is up)
        elevation: Radius multiplier; 1.0 is the surface
    """

    lat: float
    lon: float
    x: float
    y: float
    z: float
    elevation: float = 1.0


class GlobeTrajectoryData(BaseModel):
    points: list[GlobePoint] = Field(default_factory=list)
    vehicle: float | None = None
    markers: list[GlobeMarker] | None = None
    label: str | None = None


class Point3D(BaseModel):
    x: float
    y: float
    z: float


class PointCloudSeries(BaseModel):
    points: list[Point3D] = Field(default_factory=list)
    label: str | None = None
    color: ChartColor = ChartColor.BLUE


__all__ = [
    "ChartPoint",
    "ChartSeries",
    "MapTrajectoryData",
    "GlobePoint",
    "GlobeTrajectoryData",
    "Point3D",
    "PointCloudSeries",
]
