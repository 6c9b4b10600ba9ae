"""
Border-collapse analysis.

Walks a resolved tree top-down and decides, for every frame and box, which
of its four edges should be drawn as a single line shared with an adjacent
border. Three rules feed a child's flags:

1. Sibling collapse: with no gap, the shared edge between two neighbours
   collapses when a border reaches it from both sides.
2. Parent collapse: inside a bordered, unpadded parent, the first child
   collapses the leading main-axis edge, the last child the trailing one
   (only if it actually reaches it), and every child the cross-axis edges.
3. Inheritance: an unbordered parent hands its own flags to the children
   touching the same edges, so fusion passes through layout-only wrappers.

Padding on an edge blocks collapse on that edge.

A frame is drawn as a bordered, growing content wrapper, so its children
collapse against that wrapper. The frame's own flags are always false.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from wirespec.core.ir import CONTAINER_TYPES, ResolvedFrame, ResolvedNode

from .reach import get_padding, has_grow, has_leading_outline, has_outline, has_trailing_outline
from .types import (
    DEFAULT_CONTEXT,
    CollapseContext,
    CollapseTable,
    ContainerInfo,
    Edge,
    NodePath,
)

logger = logging.getLogger(__name__)


def container_for(node: ResolvedNode) -> ContainerInfo:
    """Describe ``node`` as the parent of its children."""
    if not isinstance(node, CONTAINER_TYPES):
        raise TypeError(f"{type(node).__name__} has no children")

    props = node.props
    if isinstance(node, ResolvedFrame):
        return ContainerInfo(
            layout=props.layout,
            gap=props.gap or 0,
            padding=get_padding(props.padding),
            outlined=True,
            grows=True,
        )

    return ContainerInfo(
        layout=props.layout,
        gap=props.gap or 0,
        padding=get_padding(props.padding),
        outlined=has_outline(node),
        grows=bool(props.grow),
    )


def collapses_with_previous(
    child: ResolvedNode, prev_child: ResolvedNode | None, container: ContainerInfo
) -> bool:
    """Whether ``child`` shares a collapsed main-axis edge with ``prev_child``."""
    if prev_child is None or container.gap > 0:
        return False
    leading, trailing = container.main_axis
    return has_trailing_outline(prev_child, trailing) and has_leading_outline(child, leading)


def compute_child_context(
    child: ResolvedNode,
    index: int,
    total: int,
    container: ContainerInfo,
    prev_child: ResolvedNode | None,
    parent_context: CollapseContext,
) -> CollapseContext:
    """
    Compute the collapse flags of one child.

    Args:
        child: The child being placed
        index: Its position among its siblings
        total: Number of siblings
        container: The parent, as seen by its children
        prev_child: The preceding sibling, if any
        parent_context: The flags handed down by the parent (all false
            when the parent draws its own border)

    Returns:
        The child's flags; the preceding sibling's trailing flag is the
        caller's concern (see ``analyze_collapse``)
    """
    pad = container.padding
    main_leading, main_trailing = container.main_axis
    cross_leading, cross_trailing = container.cross_axis
    is_first = index == 0
    is_last = index == total - 1
    # The last child reaches the trailing edge unless a stretched parent leaves a gap
    touches_trailing = not container.grows or has_grow(child)

    ctx = DEFAULT_CONTEXT

    if collapses_with_previous(child, prev_child, container):
        ctx = ctx.with_edge(main_leading)

    if container.outlined:
        if is_first and pad.get(main_leading) == 0 and has_leading_outline(child, main_leading):
            ctx = ctx.with_edge(main_leading)
        if (
            is_last
            and touches_trailing
            and pad.get(main_trailing) == 0
            and has_trailing_outline(child, main_trailing)
        ):
            ctx = ctx.with_edge(main_trailing)
        if pad.get(cross_leading) == 0 and has_leading_outline(child, cross_leading):
            ctx = ctx.with_edge(cross_leading)
        if pad.get(cross_trailing) == 0 and has_trailing_outline(child, cross_trailing):
            ctx = ctx.with_edge(cross_trailing)
    else:
        if is_first and pad.get(main_leading) == 0 and parent_context.get(main_leading):
            ctx = ctx.with_edge(main_leading)
        if (
            is_last
            and touches_trailing
            and pad.get(main_trailing) == 0
            and parent_context.get(main_trailing)
        ):
            ctx = ctx.with_edge(main_trailing)
        for edge in (cross_leading, cross_trailing):
            if pad.get(edge) == 0 and parent_context.get(edge):
                ctx = ctx.with_edge(edge)

    return ctx


def _walk(
    node: ResolvedNode,
    path: NodePath,
    context: CollapseContext,
    table: CollapseTable,
) -> None:
    table[path] = context

    if not isinstance(node, CONTAINER_TYPES) or not node.children:
        return

    container = container_for(node)
    inherited = DEFAULT_CONTEXT if container.outlined else context
    children = node.children
    total = len(children)

    contexts = [
        compute_child_context(
            child,
            index,
            total,
            container,
            children[index - 1] if index > 0 else None,
            inherited,
        )
        for index, child in enumerate(children)
    ]

    # A collapsed shared edge is marked on both neighbours, before either
    # hands its flags down to its own children
    _, main_trailing = container.main_axis
    for index in range(1, total):
        if collapses_with_previous(children[index], children[index - 1], container):
            contexts[index - 1] = contexts[index - 1].with_edge(main_trailing)

    for index, child in enumerate(children):
        if isinstance(child, CONTAINER_TYPES):
            _walk(child, (*path, index), contexts[index], table)


def analyze_collapse(frames: Sequence[ResolvedNode]) -> CollapseTable:
    """
    Compute collapse flags for every frame and box in a render.

    Args:
        frames: Resolved top-level nodes, in document order

    Returns:
        CollapseTable keyed by node path (frame index first)
    """
    table = CollapseTable()
    for index, frame in enumerate(frames):
        _walk(frame, (index,), DEFAULT_CONTEXT, table)

    logger.debug(f"Collapse analysis: {len(table.collapsed())} of {len(table)} node(s) collapsed")
    return table


__all__ = [
    "container_for",
    "collapses_with_previous",
    "compute_child_context",
    "analyze_collapse",
]
