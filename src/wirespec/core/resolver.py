"""
Component resolver for wirespec.

Expands component instances into primitive nodes:

1. Look up the component and pick the variant named by the instance's
   ``variant`` prop (``default`` when absent).
2. Substitute each top-level node of a deep copy of that variant with the
   instance's props.
3. Resolve the substituted nodes with the instance's props as scope so
   nested ``$each`` blocks and ``$children`` slots see the caller's data.

Resolution never raises on bad spec content. Every local degradation
produces a fallback node and a ``Diagnostic``.
"""

from __future__ import annotations

import copy
import logging
import random
from collections.abc import Callable, Mapping
from typing import Any

from pydantic import BaseModel, ValidationError

from .generators import (
    build_chart_series,
    build_globe_trajectories,
    build_map_trajectories,
    build_point_cloud_series,
)
from .ir import (
    DEFAULT_VARIANT,
    EACH_KEY,
    TEMPLATE_KEY,
    BoxProps,
    ChartProps,
    ComponentLibrary,
    CursorProps,
    Diagnostic,
    DiagnosticKind,
    FrameProps,
    GlobeProps,
    IconProps,
    Link,
    MapProps,
    NodeKind,
    PointCloudProps,
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
    SpecNode,
    TextProps,
    Wireframe,
    is_children_slot,
    is_each_block,
    placeholder_box,
)
from .templating import MissingHook, substitute

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 32

Scope = Mapping[str, Any]
NodeHandler = Callable[[SpecNode, Scope], list[ResolvedNode]]


class ComponentResolver:
    """
    Resolves spec nodes against a component library.

    A resolver instance is cheap and holds per-render state (diagnostics,
    nesting depth). Create one per render.

    Attributes:
        library: Component definitions; never mutated
        rng: Random source handed to the procedural generators
        max_depth: Maximum component nesting depth
        default_variant: Variant used when an instance names none
        missing: Optional hook for placeholders absent from scope
        diagnostics: Problems recorded so far, in encounter order
    """

    def __init__(
        self,
        library: ComponentLibrary,
        *,
        rng: random.Random | None = None,
        max_depth: int = DEFAULT_MAX_DEPTH,
        default_variant: str = DEFAULT_VARIANT,
        missing: MissingHook | None = None,
    ):
        self.library = library
        self.rng = rng
        self.max_depth = max_depth
        self.default_variant = default_variant
        self.missing = missing
        self.diagnostics: list[Diagnostic] = []
        self._depth = 0

        self._handlers: dict[NodeKind, NodeHandler] = {
            NodeKind.FRAME: self._resolve_frame,
            NodeKind.BOX: self._resolve_box,
            NodeKind.TEXT: self._resolve_text,
            NodeKind.ICON: self._resolve_icon,
            NodeKind.CURSOR: self._resolve_cursor,
            NodeKind.MAP: self._resolve_map,
            NodeKind.CHART: self._resolve_chart,
            NodeKind.GLOBE3D: self._resolve_globe,
            NodeKind.SCATTER3D: self._resolve_point_cloud,
            NodeKind.COMPONENT: self._resolve_component,
            NodeKind.UNKNOWN: self._resolve_unknown,
        }

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def resolve(self, raw: Any, scope: Scope | None = None) -> list[ResolvedNode]:
        """
        Resolve one raw spec node.

        Args:
            raw: Raw node mapping (e.g. ``{"Box": {...}}``)
            scope: Instance props visible to ``$each`` and ``$children``

        Returns:
            Resolved nodes; components may expand to zero or more
        """
        node = SpecNode.decode(raw)
        return self._handlers[node.kind](node, scope or {})

    def resolve_children(self, children: Any, scope: Scope) -> list[ResolvedNode]:
        """Resolve a ``children`` field: a list, an ``$each`` block or the ``$children`` slot."""
        if is_children_slot(children):
            return self._resolve_children_slot(scope)

        if is_each_block(children):
            return self._resolve_each_block(children, scope)

        if not isinstance(children, list):
            return []

        resolved: list[ResolvedNode] = []
        for child in children:
            resolved.extend(self.resolve(child, scope))
        return resolved

    def resolve_frames(self, wireframe: Wireframe) -> list[ResolvedNode]:
        """
        Resolve every top-level entry of a wireframe document.

        An entry expanding to several nodes keeps the first; an entry
        expanding to nothing is skipped.
        """
        frames: list[ResolvedNode] = []
        for index, entry in enumerate(wireframe.frames):
            resolved = self.resolve(entry)
            if not resolved:
                self._report(
                    DiagnosticKind.EMPTY_FRAME,
                    f"Wireframe entry {index} resolved to no nodes",
                )
                continue
            frames.append(resolved[0])
        return frames

    # ------------------------------------------------------------------
    # Children
    # ------------------------------------------------------------------

    def _resolve_children_slot(self, scope: Scope) -> list[ResolvedNode]:
        slot_children = scope.get("children")
        if not isinstance(slot_children, list):
            return []

        # Slot content belongs to the caller's document, not this component
        resolved: list[ResolvedNode] = []
        for child in slot_children:
            resolved.extend(self.resolve(child, {}))
        return resolved

    def _resolve_each_block(self, block: Mapping[str, Any], scope: Scope) -> list[ResolvedNode]:
        source_name = block[EACH_KEY]
        items = scope.get(source_name) if isinstance(source_name, str) else None
        if not isinstance(items, list):
            self._report(
                DiagnosticKind.EACH_NOT_ARRAY,
                f'$each: "{source_name}" is not an array in props',
            )
            return []

        template = block[TEMPLATE_KEY]
        if not isinstance(template, list):
            template = [template]

        resolved: list[ResolvedNode] = []
        for raw_item in items:
            item = {"label": raw_item} if isinstance(raw_item, str) else raw_item
            item_scope = {**scope, "item": item}
            for child in substitute(template, item_scope, self.missing):
                resolved.extend(self.resolve(child, {}))
        return resolved

    # ------------------------------------------------------------------
    # Primitives
    # ------------------------------------------------------------------

    def _resolve_frame(self, node: SpecNode, scope: Scope) -> list[ResolvedNode]:
        props = self._coerce_props(FrameProps, node)
        children = self.resolve_children(node.props.get("children", []), scope)
        return [ResolvedFrame(props=props, children=children)]

    def _resolve_box(self, node: SpecNode, scope: Scope) -> list[ResolvedNode]:
        props = self._coerce_props(BoxProps, node)
        children = self.resolve_children(node.props.get("children", []), scope)
        return [ResolvedBox(props=props, children=children)]

    def _resolve_text(self, node: SpecNode, scope: Scope) -> list[ResolvedNode]:
        return [ResolvedText(props=self._coerce_props(TextProps, node))]

    def _resolve_icon(self, node: SpecNode, scope: Scope) -> list[ResolvedNode]:
        return [ResolvedIcon(props=self._coerce_props(IconProps, node))]

    def _resolve_cursor(self, node: SpecNode, scope: Scope) -> list[ResolvedNode]:
        return [ResolvedCursor(props=self._coerce_props(CursorProps, node))]

    def _resolve_map(self, node: SpecNode, scope: Scope) -> list[ResolvedNode]:
        props = self._coerce_props(MapProps, node)
        return [ResolvedMap(props=props, trajectories=build_map_trajectories(props, self.rng))]

    def _resolve_chart(self, node: SpecNode, scope: Scope) -> list[ResolvedNode]:
        props = self._coerce_props(ChartProps, node)
        return [ResolvedChart(props=props, series=build_chart_series(props, self.rng))]

    def _resolve_globe(self, node: SpecNode, scope: Scope) -> list[ResolvedNode]:
        props = self._coerce_props(GlobeProps, node)
        return [
            ResolvedGlobe(props=props, trajectories=build_globe_trajectories(props, self.rng))
        ]

    def _resolve_point_cloud(self, node: SpecNode, scope: Scope) -> list[ResolvedNode]:
        props = self._coerce_props(PointCloudProps, node)
        return [
            ResolvedPointCloud(props=props, series=build_point_cloud_series(props, self.rng))
        ]

    def _resolve_unknown(self, node: SpecNode, scope: Scope) -> list[ResolvedNode]:
        self._report(DiagnosticKind.UNKNOWN_NODE, "Unknown node type")
        return [ResolvedBox()]

    # ------------------------------------------------------------------
    # Components
    # ------------------------------------------------------------------

    def _resolve_component(self, node: SpecNode, scope: Scope) -> list[ResolvedNode]:
        name = node.tag or ""
        instance_props = node.props

        definition = self.library.get(name)
        if definition is None:
            self._report(
                DiagnosticKind.UNKNOWN_COMPONENT,
                f"Component not found: {name}",
                component=name,
            )
            return [placeholder_box(f"[{name}]")]

        variant_name = self._variant_name(instance_props)
        template = self._select_variant(name, variant_name)
        if template is None:
            self._report(
                DiagnosticKind.UNKNOWN_VARIANT,
                f"Variant not found: {name}.{variant_name}",
                component=name,
                variant=variant_name,
            )
            return [ResolvedBox()]

        if self._depth >= self.max_depth:
            self._report(
                DiagnosticKind.RECURSION_LIMIT,
                f"Component nesting deeper than {self.max_depth} at {name}.{variant_name}",
                component=name,
                variant=variant_name,
            )
            return [ResolvedBox()]

        resolved: list[ResolvedNode] = []
        self._depth += 1
        try:
            for child in copy.deepcopy(template):
                substituted = substitute(child, instance_props, self.missing)
                resolved.extend(self.resolve(substituted, instance_props))
        finally:
            self._depth -= 1

        link = Link.from_value(instance_props.get("link"))
        if link is not None and resolved and isinstance(resolved[0], ResolvedBox):
            resolved[0].props.link = link

        return resolved

    def _variant_name(self, instance_props: Scope) -> str:
        variant = instance_props.get("variant")
        if variant is None:
            return self.default_variant
        return str(variant).strip() or self.default_variant

    def _select_variant(self, component: str, variant: str) -> list[Any] | None:
        """Return the template nodes of ``component.variant`` or ``None``."""
        definition = self.library.get(component)
        return definition.variant(variant) if definition else None

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _coerce_props(self, model: type[BaseModel], node: SpecNode) -> Any:
        """
        Validate primitive props, dropping fields that cannot be coerced.

        ``children`` is resolved separately and never kept in props.
        """
        if node.malformed:
            self._report(DiagnosticKind.MALFORMED_PROPS, f"{node.tag} props must be a mapping")
            return model()

        data = {key: value for key, value in node.props.items() if key != "children"}
        try:
            return model.model_validate(data)
        except ValidationError as e:
            bad_fields = sorted({str(err["loc"][0]) for err in e.errors() if err["loc"]})
            self._report(
                DiagnosticKind.MALFORMED_PROPS,
                f"{node.tag}: dropped invalid field(s) {', '.join(bad_fields)}",
            )
            data = {key: value for key, value in data.items() if key not in bad_fields}

        try:
            return model.model_validate(data)
        except ValidationError:
            return model()

    def _report(
        self,
        kind: DiagnosticKind,
        message: str,
        component: str | None = None,
        variant: str | None = None,
    ) -> None:
        logger.warning(message)
        self.diagnostics.append(
            Diagnostic(kind=kind, message=message, component=component, variant=variant)
        )


def resolve_wireframe(
    wireframe: Wireframe,
    library: ComponentLibrary,
    *,
    rng: random.Random | None = None,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> tuple[list[ResolvedNode], list[Diagnostic]]:
    """Convenience wrapper: resolve a document and return frames plus diagnostics."""
    resolver = ComponentResolver(library, rng=rng, max_depth=max_depth)
    frames = resolver.resolve_frames(wireframe)
    return frames, resolver.diagnostics


__all__ = ["DEFAULT_MAX_DEPTH", "ComponentResolver", "resolve_wireframe"]
