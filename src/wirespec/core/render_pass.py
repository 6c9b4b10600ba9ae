"""
Render pass.

One call takes the two source documents through the whole engine:

    YAML text -> ComponentLibrary + Wireframe -> ComponentResolver
              -> resolved frames -> analyze_collapse -> RenderResult

The result is handed to the presentation layer as a JSON-ready payload.
"""

from __future__ import annotations

import hashlib
import json
import logging
import random
from dataclasses import dataclass, field
from typing import Any

from wirespec._version import get_version
from wirespec.ui.layout_engine import CollapseTable, NodePath, analyze_collapse, format_path

from .cache import RenderCache
from .icons import IconElement, IconLookup, resolve_icon
from .ir import (
    CONTAINER_TYPES,
    ComponentLibrary,
    Diagnostic,
    ResolvedIcon,
    ResolvedNode,
    dump_node,
)
from .manifest import ProjectManifest
from .resolver import DEFAULT_MAX_DEPTH, ComponentResolver
from .spec_loader import parse_components, parse_wireframe

logger = logging.getLogger(__name__)

ENGINE_VERSION = get_version()


@dataclass
class RenderResult:
    """Everything the presentation layer needs to draw one wireframe."""

    frames: list[ResolvedNode]
    collapse: CollapseTable
    diagnostics: list[Diagnostic] = field(default_factory=list)
    icons: dict[NodePath, list[IconElement] | None] | None = None

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "frames": [dump_node(frame) for frame in self.frames],
            "collapse": self.collapse.to_dict(),
            "diagnostics": [d.model_dump(mode="json", exclude_none=True) for d in self.diagnostics],
        }
        if self.icons is not None:
            payload["icons"] = {
                format_path(path): [list(element) for element in elements]
                if elements is not None
                else None
                for path, elements in self.icons.items()
            }
        return payload


def fingerprint(
    wireframe_text: str,
    components_text: str | None,
    seed: int | None,
    max_depth: int = DEFAULT_MAX_DEPTH,
    default_variant: str = "default",
) -> str:
    """
    Cache key for a render.

    Every render setting that changes the resolved tree is part of the key.

    Returns:
        SHA-256 hex digest
    """
    key = {
        "wireframe": wireframe_text,
        "components": components_text or "",
        "seed": seed,
        "max_depth": max_depth,
        "default_variant": default_variant,
        "engine_version": ENGINE_VERSION,
    }
    json_str = json.dumps(key, sort_keys=True)
    return hashlib.sha256(json_str.encode()).hexdigest()


def collect_icons(
    frames: list[ResolvedNode], lookup: IconLookup
) -> dict[NodePath, list[IconElement] | None]:
    """Resolve every icon node in the tree, keyed by node path."""
    found: dict[NodePath, list[IconElement] | None] = {}

    def visit(node: ResolvedNode, path: NodePath) -> None:
        if isinstance(node, ResolvedIcon):
            found[path] = resolve_icon(lookup, node.props.name)
        elif isinstance(node, CONTAINER_TYPES):
            for index, child in enumerate(node.children):
                visit(child, (*path, index))

    for index, frame in enumerate(frames):
        visit(frame, (index,))
    return found


def render_documents(
    wireframe_text: str,
    components_text: str | None = None,
    *,
    settings: ProjectManifest | None = None,
    rng: random.Random | None = None,
    icons: IconLookup | None = None,
) -> RenderResult:
    """
    Parse, resolve and analyse a wireframe.

    Args:
        wireframe_text: Wireframe YAML
        components_text: Components YAML (no components if omitted)
        settings: Project settings; ``render.seed`` seeds ``rng`` when
            no explicit ``rng`` is given
        rng: Random source for procedural data
        icons: Icon lookup; when given, icon nodes are resolved too

    Raises:
        SpecLoadError: If either document cannot be parsed
    """
    library = parse_components(components_text) if components_text else ComponentLibrary()
    wireframe = parse_wireframe(wireframe_text)

    max_depth = DEFAULT_MAX_DEPTH
    default_variant = "default"
    if settings is not None:
        max_depth = settings.render.max_depth
        default_variant = settings.render.default_variant
        if rng is None and settings.render.seed is not None:
            rng = random.Random(settings.render.seed)

    resolver = ComponentResolver(
        library, rng=rng, max_depth=max_depth, default_variant=default_variant
    )
    frames = resolver.resolve_frames(wireframe)
    collapse = analyze_collapse(frames)

    logger.info(
        f"Resolved {len(frames)} frame(s) with {len(resolver.diagnostics)} diagnostic(s)"
    )

    return RenderResult(
        frames=frames,
        collapse=collapse,
        diagnostics=list(resolver.diagnostics),
        icons=collect_icons(frames, icons) if icons is not None else None,
    )


def render_payload(
    wireframe_text: str,
    components_text: str | None = None,
    *,
    settings: ProjectManifest | None = None,
    icons: IconLookup | None = None,
    cache: RenderCache | None = None,
) -> dict[str, Any]:
    """
    Render to a JSON-ready payload, going through ``cache`` when possible.

    Only seeded renders are cached; unseeded output differs run to run.
    """
    seed = settings.render.seed if settings is not None else None
    key = None
    if cache is not None and settings is not None and seed is not None:
        key = fingerprint(
            wireframe_text,
            components_text,
            seed,
            max_depth=settings.render.max_depth,
            default_variant=settings.render.default_variant,
        )
        cached = cache.get(key)
        if cached is not None:
            logger.debug(f"Render cache hit {key[:12]}")
            return cached

    payload = render_documents(
        wireframe_text, components_text, settings=settings, icons=icons
    ).to_payload()

    if cache is not None and key is not None:
        cache.set(key, payload)
    return payload


__all__ = [
    "ENGINE_VERSION",
    "RenderResult",
    "fingerprint",
    "collect_icons",
    "render_documents",
    "render_payload",
]
