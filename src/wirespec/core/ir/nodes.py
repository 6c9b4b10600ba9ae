"""
Spec node decoding.

A raw spec node is a one-key mapping such as ``{"Box": {...}}`` or
``{"Button": {"label": "Save"}}``. ``SpecNode.decode`` inspects the mapping
once and yields a tagged value; the resolver dispatches on ``kind`` and
never probes keys itself.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .enums import NodeKind

# Primitive tags in lookup order; aliases share a kind
PRIMITIVE_TAGS: dict[str, NodeKind] = {
    "Frame": NodeKind.FRAME,
    "Box": NodeKind.BOX,
    "Text": NodeKind.TEXT,
    "Icon": NodeKind.ICON,
    "Cursor": NodeKind.CURSOR,
    "Map": NodeKind.MAP,
    "Chart": NodeKind.CHART,
    "Globe3D": NodeKind.GLOBE3D,
    "GlobeTrajectory": NodeKind.GLOBE3D,
    "Scatter3D": NodeKind.SCATTER3D,
    "PointCloud": NodeKind.SCATTER3D,
}

EACH_KEY = "$each"
TEMPLATE_KEY = "$template"
CHILDREN_SLOT = "$children"


def is_component_name(key: Any) -> bool:
    """Component references are capitalised keys that are not primitive tags."""
    return isinstance(key, str) and key[:1].isupper() and key not in PRIMITIVE_TAGS


def is_each_block(value: Any) -> bool:
    """True for ``{"$each": "<prop>", "$template": [...]}`` children blocks."""
    return isinstance(value, dict) and EACH_KEY in value and TEMPLATE_KEY in value


def is_children_slot(value: Any) -> bool:
    """True for the ``$children`` content-projection sentinel."""
    return value == CHILDREN_SLOT


class SpecNode(BaseModel):
    """
    Decoded input node.

    Attributes:
        kind: Primitive kind, ``component`` or ``unknown``
        tag: The key the node was written with (e.g. ``Box``, ``Button``)
        props: The mapping under that key; ``None`` decodes to ``{}``
        malformed: True when the value under the tag was not a mapping
    """

    model_config = ConfigDict(frozen=True)

    kind: NodeKind
    tag: str | None = None
    props: dict[str, Any] = Field(default_factory=dict)
    malformed: bool = False

    @property
    def is_component(self) -> bool:
        return self.kind == NodeKind.COMPONENT

    @classmethod
    def decode(cls, raw: Any) -> SpecNode:
        """
        Decode a raw mapping into a tagged node.

        Examples:
            >>> SpecNode.decode({"Box": {"outline": "thin"}}).kind.value
            'box'
            >>> SpecNode.decode({"Button": {"label": "Save"}}).tag
            'Button'
            >>> SpecNode.decode("oops").kind.value
            'unknown'
        """
        if not isinstance(raw, dict):
            return cls(kind=NodeKind.UNKNOWN)

        for tag, kind in PRIMITIVE_TAGS.items():
            if tag in raw:
                return cls._with_props(kind, tag, raw[tag])

        for key in raw:
            if is_component_name(key):
                return cls._with_props(NodeKind.COMPONENT, key, raw[key])

        return cls(kind=NodeKind.UNKNOWN)

    @classmethod
    def _with_props(cls, kind: NodeKind, tag: str, value: Any) -> SpecNode:
        if value is None:
            return cls(kind=kind, tag=tag)
        if isinstance(value, dict):
            return cls(kind=kind, tag=tag, props=value)
        return cls(kind=kind, tag=tag, malformed=True)


__all__ = [
    "PRIMITIVE_TAGS",
    "EACH_KEY",
    "TEMPLATE_KEY",
    "CHILDREN_SLOT",
    "SpecNode",
    "is_component_name",
    "is_each_block",
    "is_children_slot",
]
