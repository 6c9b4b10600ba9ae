"""
Resolved node tree.

A resolved node mirrors a primitive spec node with every component
reference expanded, every template substituted and all procedural data
computed. Nodes are discriminated on ``type`` so a serialized tree can be
validated back into the same classes.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field

from .data import ChartSeries, GlobeTrajectoryData, MapTrajectoryData, PointCloudSeries
from .enums import Outline, TextStyle
from .props import (
    BoxProps,
    ChartProps,
    CursorProps,
    FrameProps,
    GlobeProps,
    IconProps,
    MapProps,
    PointCloudProps,
    TextProps,
)


class ResolvedFrame(BaseModel):
    type: Literal["frame"] = "frame"
    props: FrameProps = Field(default_factory=FrameProps)
    children: list[ResolvedNode] = Field(default_factory=list)


class ResolvedBox(BaseModel):
    type: Literal["box"] = "box"
    props: BoxProps = Field(default_factory=BoxProps)
    children: list[ResolvedNode] = Field(default_factory=list)


class ResolvedText(BaseModel):
    type: Literal["text"] = "text"
    props: TextProps = Field(default_factory=TextProps)


class ResolvedIcon(BaseModel):
    type: Literal["icon"] = "icon"
    props: IconProps = Field(default_factory=IconProps)


class ResolvedCursor(BaseModel):
    type: Literal["cursor"] = "cursor"
    props: CursorProps = Field(default_factory=CursorProps)


class ResolvedMap(BaseModel):
    type: Literal["map"] = "map"
    props: MapProps = Field(default_factory=MapProps)
    trajectories: list[MapTrajectoryData] = Field(default_factory=list)


class ResolvedChart(BaseModel):
    type: Literal["chart"] = "chart"
    props: ChartProps = Field(default_factory=ChartProps)
    series: list[ChartSeries] = Field(default_factory=list)


class ResolvedGlobe(BaseModel):
    type: Literal["globe3d"] = "globe3d"
    props: GlobeProps = Field(default_factory=GlobeProps)
    trajectories: list[GlobeTrajectoryData] = Field(default_factory=list)


class ResolvedPointCloud(BaseModel):
    type: Literal["scatter3d"] = "scatter3d"
    props: PointCloudProps = Field(default_factory=PointCloudProps)
    series: list[PointCloudSeries] = Field(default_factory=list)


ResolvedNode = Annotated[
    ResolvedFrame
    | ResolvedBox
    | ResolvedText
    | ResolvedIcon
    | ResolvedCursor
    | ResolvedMap
    | ResolvedChart
    | ResolvedGlobe
    | ResolvedPointCloud,
    Field(discriminator="type"),
]

ResolvedFrame.model_rebuild()
ResolvedBox.model_rebuild()

CONTAINER_TYPES = (ResolvedFrame, ResolvedBox)


def placeholder_box(label: str) -> ResolvedBox:
    """Dashed box with a caption, drawn where a component could not be found."""
    return ResolvedBox(
        props=BoxProps(outline=Outline.DASHED),
        children=[ResolvedText(props=TextProps(content=label, style=TextStyle.CAPTION))],
    )


def dump_node(node: BaseModel) -> dict[str, Any]:
    """Serialize a resolved node for the presentation layer."""
    return node.model_dump(mode="json", by_alias=True, exclude_none=True)


__all__ = [
    "ResolvedFrame",
    "ResolvedBox",
    "ResolvedText",
    "ResolvedIcon",
    "ResolvedCursor",
    "ResolvedMap",
    "ResolvedChart",
    "ResolvedGlobe",
    "ResolvedPointCloud",
    "ResolvedNode",
    "CONTAINER_TYPES",
    "placeholder_box",
    "dump_node",
]
