"""
Procedural data generators.

Visualization primitives (Map, Chart, Globe3D, Scatter3D) describe their
data by name; these functions turn the names into concrete points during
resolution. Every generator accepts an optional ``random.Random`` so a
render can be reproduced from a seed.
"""

from .charts import DEFAULT_COLORS, build_chart_series, sample_function
from .geodesy import (
    LatLon,
    build_globe_trajectories,
    flight_elevation,
    generate_globe_trajectory,
    lat_lon_to_cartesian,
    slerp,
)
from .map_paths import build_map_trajectories, generate_path
from .point_cloud import build_point_cloud_series, generate_point_cloud

__all__ = [
    "DEFAULT_COLORS",
    "sample_function",
    "build_chart_series",
    "generate_path",
    "build_map_trajectories",
    "LatLon",
    "lat_lon_to_cartesian",
    "slerp",
    "flight_elevation",
    "generate_globe_trajectory",
    "build_globe_trajectories",
    "generate_point_cloud",
    "build_point_cloud_series",
]
