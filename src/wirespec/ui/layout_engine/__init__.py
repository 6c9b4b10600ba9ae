"""
wirespec Border-Collapse Engine.

Decides, per edge, whether a box border should fuse with an adjacent
border. Pixel geometry is left to the host layout system.

Key components:
- Border reachability (reach.py)
- Child context computation and tree walk (collapse.py)
- Context and table types (types.py)
"""

from wirespec.ui.layout_engine.collapse import (
    analyze_collapse,
    collapses_with_previous,
    compute_child_context,
    container_for,
)
from wirespec.ui.layout_engine.reach import (
    get_padding,
    has_grow,
    has_leading_outline,
    has_outline,
    has_trailing_outline,
)
from wirespec.ui.layout_engine.types import (
    DEFAULT_CONTEXT,
    CollapseContext,
    CollapseTable,
    ContainerInfo,
    Edge,
    EdgeInsets,
    NodePath,
    format_path,
    parse_path,
)

__all__ = [
    # Core functions
    "analyze_collapse",
    "compute_child_context",
    "collapses_with_previous",
    "container_for",
    # Reachability
    "get_padding",
    "has_outline",
    "has_grow",
    "has_leading_outline",
    "has_trailing_outline",
    # Types
    "Edge",
    "CollapseContext",
    "DEFAULT_CONTEXT",
    "CollapseTable",
    "ContainerInfo",
    "EdgeInsets",
    "NodePath",
    "format_path",
    "parse_path",
]
