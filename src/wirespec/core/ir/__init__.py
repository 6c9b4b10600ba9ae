"""
wirespec intermediate representation (IR) types.

Types are organized into submodules and re-exported here:

- enums: node kinds and the literal vocabularies of spec props
- nodes: decoding of raw spec nodes into tagged ``SpecNode`` values
- props: lenient props models for primitive nodes
- data: pre-computed procedural data (series, trajectories, clouds)
- resolved: the resolved node tree handed to the presentation layer
- library: component library and wireframe documents
- diagnostics: non-fatal resolution problems
"""

from .data import (
    ChartPoint,
    ChartSeries,
    GlobePoint,
    GlobeTrajectoryData,
    MapTrajectoryData,
    Point3D,
    PointCloudSeries,
)
from .diagnostics import Diagnostic, DiagnosticKind
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
    NodeKind,
    Outline,
    PointCloudFn,
    TextAlign,
    TextStyle,
)
from .library import DEFAULT_VARIANT, ComponentDefinition, ComponentLibrary, Wireframe
from .nodes import (
    CHILDREN_SLOT,
    EACH_KEY,
    PRIMITIVE_TAGS,
    TEMPLATE_KEY,
    SpecNode,
    is_children_slot,
    is_component_name,
    is_each_block,
)
from .props import (
    BoxProps,
    ChartLine,
    ChartProps,
    CursorProps,
    FrameProps,
    GlobeMarker,
    GlobeProps,
    GlobeTrajectoryDef,
    IconProps,
    Link,
    MapMarker,
    MapProps,
    MapTrajectoryDef,
    NodeProps,
    Offset,
    Padding,
    PointCloudProps,
    PointCloudSeriesDef,
    Position,
    TextProps,
    format_number,
)
from .resolved import (
    CONTAINER_TYPES,
    ResolvedBox,
    ResolvedChart,
    ResolvedCursor,
    ResolvedFrame,
    ResolvedGlobe,
    ResolvedIcon,
    ResolvedMap,
    ResolvedNode,
    ResolvedPointCloud,
    ResolvedText,
    dump_node,
    placeholder_box,
)

__all__ = [
    # Enums
    "NodeKind",
    "Layout",
    "Align",
    "Justify",
    "Outline",
    "TextStyle",
    "TextAlign",
    "CursorType",
    "CursorAnchor",
    "MapTrajectoryFn",
    "ChartFn",
    "ChartColor",
    "GlobeTrajectoryFn",
    "GlobeCameraPreset",
    "PointCloudFn",
    # Spec nodes
    "SpecNode",
    "PRIMITIVE_TAGS",
    "EACH_KEY",
    "TEMPLATE_KEY",
    "CHILDREN_SLOT",
    "is_component_name",
    "is_each_block",
    "is_children_slot",
    # Props
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
    # Procedural data
    "ChartPoint",
    "ChartSeries",
    "MapTrajectoryData",
    "GlobePoint",
    "GlobeTrajectoryData",
    "Point3D",
    "PointCloudSeries",
    # Resolved tree
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
    # Documents
    "DEFAULT_VARIANT",
    "ComponentDefinition",
    "ComponentLibrary",
    "Wireframe",
    # Diagnostics
    "Diagnostic",
    "DiagnosticKind",
]
