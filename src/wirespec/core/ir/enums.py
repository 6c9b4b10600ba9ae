"""
Enumerations shared by spec nodes, resolved nodes and generators.

Values match the literal strings authors write in wireframe YAML.
"""

from __future__ import annotations

from enum import Enum


class NodeKind(str, Enum):
    """Kind of a decoded spec node."""

    FRAME = "frame"
    BOX = "box"
    TEXT = "text"
    ICON = "icon"
    CURSOR = "cursor"
    MAP = "map"
    CHART = "chart"
    GLOBE3D = "globe3d"
    SCATTER3D = "scatter3d"
    COMPONENT = "component"  # Reference into the component library
    UNKNOWN = "unknown"  # Nothing recognisable


class Layout(str, Enum):
    """Flow direction of a container."""

    ROW = "row"
    COLUMN = "column"
    ABSOLUTE = "absolute"


class Align(str, Enum):
    START = "start"
    CENTER = "center"
    END = "end"
    STRETCH = "stretch"


class Justify(str, Enum):
    START = "start"
    CENTER = "center"
    END = "end"
    BETWEEN = "between"


class Outline(str, Enum):
    """Border style of a box. ``none`` draws no border."""

    NONE = "none"
    THIN = "thin"
    DASHED = "dashed"
    THICK = "thick"


class TextStyle(str, Enum):
    H1 = "h1"
    H2 = "h2"
    BODY = "body"
    CAPTION = "caption"
    MONO = "mono"


class TextAlign(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class CursorType(str, Enum):
    POINTER = "pointer"
    HAND = "hand"
    GRAB = "grab"
    GRABBING = "grabbing"
    TEXT = "text"
    CROSSHAIR = "crosshair"
    MOVE = "move"
    NOT_ALLOWED = "not-allowed"
    CLICK = "click"


class CursorAnchor(str, Enum):
    TOP_LEFT = "top-left"
    TOP_RIGHT = "top-right"
    CENTER = "center"
    BOTTOM_LEFT = "bottom-left"
    BOTTOM_RIGHT = "bottom-right"


class MapTrajectoryFn(str, Enum):
    """Named 2D path shapes for the Map primitive."""

    LOOP = "loop"
    LINEAR = "linear"
    CURVED = "curved"
    WANDER = "wander"
    ZIGZAG = "zigzag"


class ChartFn(str, Enum):
    """Named functions sampled by the Chart primitive."""

    SIN = "sin"
    COS = "cos"
    TAN = "tan"
    SQUARE = "square"
    LINEAR = "linear"
    RANDOM = "random"
    SQRT = "sqrt"
    BINARY = "binary"


class ChartColor(str, Enum):
    """Muted series palette."""

    BLUE = "blue"
    GREEN = "green"
    ORANGE = "orange"
    PURPLE = "purple"
    RED = "red"
    TEAL = "teal"


class GlobeTrajectoryFn(str, Enum):
    """Named great-circle trajectory shapes for the Globe3D primitive."""

    GREAT_CIRCLE = "greatCircle"
    POLAR = "polar"
    EQUATORIAL = "equatorial"
    RANDOM = "random"
    CIRCUIT = "circuit"
    CUSTOM = "custom"


class GlobeCameraPreset(str, Enum):
    OVERVIEW = "overview"
    FOLLOW = "follow"
    SIDE = "side"
    TRACK = "track"


class PointCloudFn(str, Enum):
    """Named 3D point distributions for the Scatter3D primitive."""

    RANDOM = "random"
    SPHERE = "sphere"
    HELIX = "helix"
    CUBE = "cube"
    CLUSTER = "cluster"
    PLANE = "plane"


__all__ = [
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
]
