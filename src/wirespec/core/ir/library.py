"""
Component library and wireframe document types.

Both are loaded once per render request and are read-only afterwards.
Variant templates are kept as raw spec nodes because placeholders may sit
anywhere inside them; they are decoded only after substitution.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_VARIANT = "default"


class ComponentDefinition(BaseModel):
    """
    A named, reusable template of spec nodes.

    Attributes:
        variants: Variant name -> ordered list of raw spec nodes
    """

    model_config = ConfigDict(frozen=True)

    variants: dict[str, list[Any]] = Field(default_factory=dict)

    def variant(self, name: str) -> list[Any] | None:
        return self.variants.get(name)


class ComponentLibrary(BaseModel):
    """Mapping of component name to definition."""

    model_config = ConfigDict(frozen=True)

    components: dict[str, ComponentDefinition] = Field(default_factory=dict)

    def get(self, name: str) -> ComponentDefinition | None:
        return self.components.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self.components

    def __len__(self) -> int:
        return len(self.components)

    @property
    def names(self) -> list[str]:
        return list(self.components)


class Wireframe(BaseModel):
    """A wireframe document: an ordered list of top-level frame nodes."""

    model_config = ConfigDict(frozen=True)

    frames: list[Any] = Field(default_factory=list)


__all__ = ["DEFAULT_VARIANT", "ComponentDefinition", "ComponentLibrary", "Wireframe"]
