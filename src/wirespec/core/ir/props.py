"""
Props models for primitive spec nodes.

Props arrive after template substitution, so any field may still hold an
unresolved ``{{placeholder}}`` string or a number written as text. The
models are deliberately lenient:

- numbers written as strings coerce (pydantic lax mode)
- unknown enum strings coerce to ``None`` (treated as unset)
- extra keys are kept and passed through to the presentation layer

Fields that still fail validation are dropped by the resolver, which
records a ``malformed_props`` diagnostic.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from enum import Enum
from typing import Annotated, Any, Literal, TypeVar

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from .enums import (
    Align,
    ChartColor,
    ChartFn,
    CursorAnchor,
    CursorType,
    GlobeCameraPreset,
    GlobeTrajectoryFn,
    Justify,
    Layout,
    MapTrajectoryFn,
    Outline,
    PointCloudFn,
    TextAlign,
    TextStyle,
)

E = TypeVar("E", bound=Enum)


def _lenient_enum(enum_cls: type[E]) -> Callable[[Any], E | None]:
    """Build a before-validator mapping unknown values to ``None``."""

    def coerce(value: Any) -> E | None:
        if value is None or isinstance(value, enum_cls):
            return value
        try:
            return enum_cls(str(value).strip())
        except ValueError:
            return None

    return coerce


def _as_text(value: Any) -> Any:
    """Render scalars the way YAML authors wrote them."""
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return format_number(value)
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


def _as_link(value: Any) -> Any:
    # ``link: checkout`` is shorthand for ``link: {target: checkout}``
    if isinstance(value, str):
        return {"target": value} if value.strip() else None
    return value


def format_number(value: int | float) -> str:
    """Format a number without a trailing ``.0`` for integral floats."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


Number = int | float
Padding = Number | tuple[Number, Number]
LenientLayout = Annotated[Layout | None, BeforeValidator(_lenient_enum(Layout))]
LenientAlign = Annotated[Align | None, BeforeValidator(_lenient_enum(Align))]
LenientJustify = Annotated[Justify | None, BeforeValidator(_lenient_enum(Justify))]
LenientOutline = Annotated[Outline | None, BeforeValidator(_lenient_enum(Outline))]
LenientTextStyle = Annotated[TextStyle | None, BeforeValidator(_lenient_enum(TextStyle))]
LenientTextAlign = Annotated[TextAlign | None, BeforeValidator(_lenient_enum(TextAlign))]
LenientCursorType = Annotated[CursorType | None, BeforeValidator(_lenient_enum(CursorType))]
LenientCursorAnchor = Annotated[
    CursorAnchor | None, BeforeValidator(_lenient_enum(CursorAnchor))
]
LenientMapFn = Annotated[MapTrajectoryFn | None, BeforeValidator(_lenient_enum(MapTrajectoryFn))]
LenientChartFn = Annotated[ChartFn | None, BeforeValidator(_lenient_enum(ChartFn))]
LenientChartColor = Annotated[ChartColor | None, BeforeValidator(_lenient_enum(ChartColor))]
LenientGlobeFn = Annotated[
    GlobeTrajectoryFn | None, BeforeValidator(_lenient_enum(GlobeTrajectoryFn))
]
LenientCamera = Annotated[
    GlobeCameraPreset | None, BeforeValidator(_lenient_enum(GlobeCameraPreset))
]
LenientPointCloudFn = Annotated[PointCloudFn | None, BeforeValidator(_lenient_enum(PointCloudFn))]
Text = Annotated[str, BeforeValidator(_as_text)]


class NodeProps(BaseModel):
    """Base for all props models: extra keys pass through untouched."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class Link(BaseModel):
    """Navigation link to another frame."""

    model_config = ConfigDict(frozen=True)

    target: Text

    @classmethod
    def from_value(cls, value: Any) -> Link | None:
        """Coerce an instance ``link`` prop, returning ``None`` when unusable."""
        if isinstance(value, Link):
            return value
        value = _as_link(value)
        if isinstance(value, dict) and value.get("target") not in (None, ""):
            return cls(target=value["target"])
        return None


OptionalLink = Annotated[Link | None, BeforeValidator(_as_link)]


class Position(BaseModel):
    """Absolute position inside the parent box."""

    x: Number = 0
    y: Number = 0
    w: Number | Literal["auto"] | None = None
    h: Number | Literal["auto"] | None = None


class Offset(BaseModel):
    x: Number = 0
    y: Number = 0


class FrameProps(NodeProps):
    """
    A screen/canvas.

    Attributes:
        id: Frame identifier, also its label
        size: ``[width, height]``; height may be ``"hug"`` to fit content
        layout: Flow of the frame's content wrapper (default column)
        gap: Space between children
        padding: Number or ``[vertical, horizontal]``
    """

    id: Text | None = None
    size: tuple[Number, Number | Literal["hug"]] | None = None
    layout: LenientLayout = None
    gap: Number | None = None
    padding: Padding | None = None


class BoxProps(NodeProps):
    """Container with flex-style layout and an optional border."""

    id: Text | None = None
    layout: LenientLayout = None
    gap: Number | None = None
    padding: Padding | None = None
    align: LenientAlign = None
    justify: LenientJustify = None
    wrap: bool | None = None
    grow: int | None = None
    outline: LenientOutline = None
    background: Text | None = None
    shadow: bool | None = None
    position: Position | None = None
    link: OptionalLink = None


class TextProps(NodeProps):
    content: Text = ""
    style: LenientTextStyle = None
    align: LenientTextAlign = None


class IconProps(NodeProps):
    """Icon reference; the name is resolved by the presentation layer."""

    name: Text = ""


class CursorProps(NodeProps):
    type: LenientCursorType = None
    anchor: LenientCursorAnchor = None
    position: Offset | None = None
    offset: Offset | None = None
    tooltip: Text | None = None
    from_: Text | None = Field(default=None, alias="from")


class MapMarker(BaseModel):
    """Waypoint flag: a fraction along the path or ``start``/``end``."""

    position: Number | Literal["start", "end"]
    label: Text | None = None


class MapTrajectoryDef(BaseModel):
    fn: LenientMapFn = None
    points: list[tuple[Number, Number]] | None = None
    vehicle: Number | None = None
    markers: list[MapMarker] | None = None


class MapProps(NodeProps):
    width: Number = 400
    height: Number = 300
    trajectory: MapTrajectoryDef | None = None
    vehicle: Number | None = None
    markers: list[MapMarker] | None = None
    trajectories: list[MapTrajectoryDef] | None = None


class ChartLine(BaseModel):
    fn: LenientChartFn = None
    label: Text | None = None
    color: LenientChartColor = None
    noise: Number = 0
    scatter: bool | None = None


class ChartProps(NodeProps):
    fn: LenientChartFn = None
    noise: Number = 0
    scatter: bool | None = None
    lines: list[ChartLine] | None = None
    range: tuple[Number, Number] = (0, 10)
    samples: int = 20
    width: Number | None = None
    height: Number | None = None


class GlobeMarker(BaseModel):
    position: Number | Literal["start", "end"]
    label: Text | None = None


class GlobeTrajectoryDef(BaseModel):
    fn: LenientGlobeFn = None
    waypoints: list[tuple[Number, Number]] | None = None
    altitude: Number = 0
    vehicle: Number | None = None
    markers: list[GlobeMarker] | None = None
    label: Text | None = None


class GlobeProps(NodeProps):
    width: Number = 400
    height: Number = 300
    camera: LenientCamera = None
    trajectory: GlobeTrajectoryDef | None = None
    vehicle: Number | None = None
    markers: list[GlobeMarker] | None = None
    trajectories: list[GlobeTrajectoryDef] | None = None


class PointCloudSeriesDef(BaseModel):
    fn: LenientPointCloudFn = None
    label: Text | None = None
    color: LenientChartColor = None
    noise: Number = 0


class PointCloudProps(NodeProps):
    fn: LenientPointCloudFn = None
    noise: Number = 0
    samples: int = 50
    series: list[PointCloudSeriesDef] | None = None
    width: Number = 400
    height: Number = 300


__all__ = [
    "NodeProps",
    "Padding",
    "Link",
    "Position",
    "Offset",
    "FrameProps",
    "BoxProps",
    "TextProps",
    "IconProps",
    "CursorProps",
    "MapMarker",
    "MapTrajectoryDef",
    "MapProps",
    "ChartLine",
    "ChartProps",
    "GlobeMarker",
    "GlobeTrajectoryDef",
    "GlobeProps",
    "PointCloudSeriesDef",
    "PointCloudProps",
    "format_number",
]
