"""
Border reachability.

A node "has a leading border" on an edge when it draws a border itself, or
when it is an unbordered container whose children reach that edge with a
border of their own and no padding sits in between. Along the main axis
only the first (leading) or last (trailing) child touches the edge; along
the cross axis every child does.
"""

from __future__ import annotations

from collections.abc import Sequence

from wirespec.core.ir import CONTAINER_TYPES, Layout, Outline, Padding, ResolvedBox, ResolvedNode

from .types import LEADING_EDGES, TRAILING_EDGES, Edge, EdgeInsets


def get_padding(padding: Padding | Sequence[float] | None) -> EdgeInsets:
    """
    Expand a padding prop into per-edge insets.

    A number pads every edge; ``[vertical, horizontal]`` pads top/bottom
    and left/right respectively.

    Examples:
        >>> get_padding([8, 16]).left
        16
    """
    if not padding:
        return EdgeInsets()
    if isinstance(padding, (int, float)):
        return EdgeInsets(top=padding, right=padding, bottom=padding, left=padding)
    vertical, horizontal = padding[0], padding[1]
    return EdgeInsets(top=vertical, right=horizontal, bottom=vertical, left=horizontal)


def has_outline(node: ResolvedNode) -> bool:
    """Only boxes draw borders; ``outline: none`` counts as no border."""
    if isinstance(node, ResolvedBox):
        return node.props.outline is not None and node.props.outline != Outline.NONE
    return False


def has_grow(node: ResolvedNode) -> bool:
    if isinstance(node, ResolvedBox):
        return node.props.grow == 1
    return False


def has_leading_outline(node: ResolvedNode, edge: Edge) -> bool:
    """Whether a border reaches ``node``'s top or left edge."""
    if edge not in LEADING_EDGES:
        raise ValueError(f"Not a leading edge: {edge.value}")
    return _reaches(node, edge, leading=True)


def has_trailing_outline(node: ResolvedNode, edge: Edge) -> bool:
    """Whether a border reaches ``node``'s bottom or right edge."""
    if edge not in TRAILING_EDGES:
        raise ValueError(f"Not a trailing edge: {edge.value}")
    return _reaches(node, edge, leading=False)


def _reaches(node: ResolvedNode, edge: Edge, leading: bool) -> bool:
    if has_outline(node):
        return True

    if not isinstance(node, CONTAINER_TYPES):
        return False

    children = node.children
    if not children:
        return False

    if get_padding(node.props.padding).get(edge) > 0:
        return False

    is_row = node.props.layout == Layout.ROW
    on_main_axis = (edge in (Edge.LEFT, Edge.RIGHT)) == is_row

    if on_main_axis:
        child = children[0] if leading else children[-1]
        return _reaches(child, edge, leading)
    return any(_reaches(child, edge, leading) for child in children)


__all__ = [
    "get_padding",
    "has_outline",
    "has_grow",
    "has_leading_outline",
    "has_trailing_outline",
]
