"""
Border-collapse types.

A ``CollapseContext`` holds four independent flags, one per edge, telling
the presentation layer to draw that edge as a line shared with a
neighbouring border instead of a second, doubled line. Flags never affect
geometry.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import asdict, dataclass, replace
from enum import Enum

from wirespec.core.ir import Layout


class Edge(str, Enum):
    TOP = "top"
    LEFT = "left"
    BOTTOM = "bottom"
    RIGHT = "right"


LEADING_EDGES = (Edge.TOP, Edge.LEFT)
TRAILING_EDGES = (Edge.BOTTOM, Edge.RIGHT)


@dataclass(frozen=True)
class CollapseContext:
    """Per-edge collapse flags for one box."""

    top: bool = False
    left: bool = False
    bottom: bool = False
    right: bool = False

    def get(self, edge: Edge) -> bool:
        return getattr(self, edge.value)

    def with_edge(self, edge: Edge, value: bool = True) -> CollapseContext:
        return replace(self, **{edge.value: value})

    @property
    def any(self) -> bool:
        return self.top or self.left or self.bottom or self.right

    def to_dict(self) -> dict[str, bool]:
        return asdict(self)


DEFAULT_CONTEXT = CollapseContext()


@dataclass(frozen=True)
class EdgeInsets:
    top: float = 0
    right: float = 0
    bottom: float = 0
    left: float = 0

    def get(self, edge: Edge) -> float:
        return getattr(self, edge.value)


@dataclass(frozen=True)
class ContainerInfo:
    """
    The parts of a container that decide how its children collapse.

    Attributes:
        layout: Flow direction; anything but ``row`` flows as a column
        gap: Space between children
        padding: Inner padding per edge
        outlined: Whether the container draws its own border
        grows: Whether the container stretches to fill its parent
    """

    layout: Layout | None = None
    gap: float = 0
    padding: EdgeInsets = EdgeInsets()
    outlined: bool = False
    grows: bool = False

    @property
    def is_row(self) -> bool:
        return self.layout == Layout.ROW

    @property
    def main_axis(self) -> tuple[Edge, Edge]:
        """(leading, trailing) edges along the flow direction."""
        return (Edge.LEFT, Edge.RIGHT) if self.is_row else (Edge.TOP, Edge.BOTTOM)

    @property
    def cross_axis(self) -> tuple[Edge, Edge]:
        """(leading, trailing) edges perpendicular to the flow direction."""
        return (Edge.TOP, Edge.BOTTOM) if self.is_row else (Edge.LEFT, Edge.RIGHT)


# Child indexes from the top-level frame index down, e.g. (0, 1, 2)
NodePath = tuple[int, ...]


def format_path(path: NodePath) -> str:
    """
    Render a node path as a dotted key.

    Examples:
        >>> format_path((0, 1, 2))
        '0.1.2'
    """
    return ".".join(str(index) for index in path)


def parse_path(key: str) -> NodePath:
    return tuple(int(part) for part in key.split(".")) if key else ()


class CollapseTable(Mapping[NodePath, CollapseContext]):
    """
    Side table of collapse flags for every frame and box in a render.

    Keys are node paths; string keys in dotted form are accepted too.
    """

    def __init__(self) -> None:
        self._entries: dict[NodePath, CollapseContext] = {}

    def __getitem__(self, key: NodePath | str) -> CollapseContext:
        if isinstance(key, str):
            key = parse_path(key)
        return self._entries[key]

    def __setitem__(self, key: NodePath, value: CollapseContext) -> None:
        self._entries[key] = value

    def __iter__(self) -> Iterator[NodePath]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        if isinstance(key, str):
            key = parse_path(key)
        return key in self._entries

    def collapsed(self) -> dict[NodePath, CollapseContext]:
        """Only the entries with at least one collapsed edge."""
        return {path: ctx for path, ctx in self._entries.items() if ctx.any}

    def to_dict(self) -> dict[str, dict[str, bool]]:
        return {format_path(path): ctx.to_dict() for path, ctx in self._entries.items()}


__all__ = [
    "Edge",
    "LEADING_EDGES",
    "TRAILING_EDGES",
    "CollapseContext",
    "DEFAULT_CONTEXT",
    "EdgeInsets",
    "ContainerInfo",
    "NodePath",
    "format_path",
    "parse_path",
    "CollapseTable",
]
