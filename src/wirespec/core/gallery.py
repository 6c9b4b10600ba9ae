"""
Component gallery.

Renders every variant of every component in isolation, without a calling
instance. Data a caller would normally supply is replaced with stand-ins:

- ``$each`` blocks repeat over three sample items
- ``$children`` slots show a ``[children]`` caption
- unresolved ``{{prop}}`` placeholders show as ``[prop]``
"""

from __future__ import annotations

import random
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field

from .ir import (
    TEMPLATE_KEY,
    BoxProps,
    ComponentLibrary,
    Layout,
    ResolvedBox,
    ResolvedNode,
    ResolvedText,
    TextProps,
    TextStyle,
)
from .resolver import ComponentResolver
from .templating import MissingHook, find_placeholders, substitute

SAMPLE_ITEMS: tuple[dict[str, str], ...] = (
    {"label": "Item 1"},
    {"label": "Item 2", "variant": "hover"},
    {"label": "Item 3"},
)

CHILDREN_CAPTION = "[children]"


def _bracket_missing(name: str, field: str | None) -> str | None:
    # ``item`` is bound later by $each; dotted lookups stay for the same reason
    if field is None and name != "item":
        return f"[{name}]"
    return None


def _sample_item_hook(item: Mapping[str, str], fallback: MissingHook | None) -> MissingHook:
    # A bare {{item}} shows the sample label rather than the whole mapping
    def hook(name: str, field: str | None) -> str | None:
        if name == "item":
            return item["label"] if field is None else item.get(field, "")
        return fallback(name, field) if fallback is not None else None

    return hook


class GalleryResolver(ComponentResolver):
    """Resolver variant used for gallery previews."""

    def __init__(self, library: ComponentLibrary, **kwargs: Any):
        kwargs.setdefault("missing", _bracket_missing)
        super().__init__(library, **kwargs)

    def _resolve_each_block(
        self, block: Mapping[str, Any], scope: Mapping[str, Any]
    ) -> list[ResolvedNode]:
        template = block[TEMPLATE_KEY]
        if not isinstance(template, list):
            template = [template]

        resolved: list[ResolvedNode] = []
        outer = {key: value for key, value in scope.items() if key != "item"}
        for item in SAMPLE_ITEMS:
            hook = _sample_item_hook(item, self.missing)
            for child in substitute(template, outer, hook):
                resolved.extend(self.resolve(child, {}))
        return resolved

    def _resolve_children_slot(self, scope: Mapping[str, Any]) -> list[ResolvedNode]:
        return [ResolvedText(props=TextProps(content=CHILDREN_CAPTION, style=TextStyle.CAPTION))]

    def _select_variant(self, component: str, variant: str) -> list[Any] | None:
        definition = self.library.get(component)
        if definition is None:
            return None
        return definition.variant(variant) or definition.variant(self.default_variant)


class VariantPreview(BaseModel):
    """
    One previewed variant.

    Attributes:
        variant: Variant name
        node: Resolved preview (``None`` when the variant renders nothing)
        props: Placeholder names the variant expects from its caller
    """

    variant: str
    node: ResolvedNode | None = None
    props: list[str] = Field(default_factory=list)


class GallerySection(BaseModel):
    component: str
    variants: list[VariantPreview] = Field(default_factory=list)


def preview_variant(resolver: GalleryResolver, component: str, variant: str) -> ResolvedNode | None:
    """Resolve one variant; several nodes are wrapped in a column box."""
    nodes = resolver.resolve({component: {"variant": variant}})
    if not nodes:
        return None
    if len(nodes) == 1:
        return nodes[0]
    return ResolvedBox(props=BoxProps(layout=Layout.COLUMN), children=nodes)


def build_gallery(
    library: ComponentLibrary, rng: random.Random | None = None
) -> list[GallerySection]:
    """Build preview sections for every component, in library order."""
    resolver = GalleryResolver(library, rng=rng)
    sections: list[GallerySection] = []

    for name in library.names:
        definition = library.get(name)
        if definition is None:
            continue

        previews = [
            VariantPreview(
                variant=variant,
                node=preview_variant(resolver, name, variant),
                props=sorted(find_placeholders(nodes) - {"item"}),
            )
            for variant, nodes in definition.variants.items()
        ]
        sections.append(GallerySection(component=name, variants=previews))

    return sections


__all__ = [
    "SAMPLE_ITEMS",
    "GalleryResolver",
    "VariantPreview",
    "GallerySection",
    "preview_variant",
    "build_gallery",
]
