"""
YAML loader for wirespec documents.

Two documents feed a render:

- the components document: a mapping of component name to
  ``{variants: {<variant>: [<node>, ...]}}``
- the wireframe document: ``{frames: [<node>, ...]}``

Loading is the only place wirespec fails hard. Everything past this point
degrades locally and records diagnostics.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from .errors import SpecLoadError, make_load_error
from .ir import ComponentDefinition, ComponentLibrary, Wireframe

logger = logging.getLogger(__name__)

COMPONENTS_DOCUMENT = "components"
WIREFRAME_DOCUMENT = "wireframe"


def _parse_yaml(text: str, file: Path | None, document: str) -> Any:
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        mark = getattr(e, "problem_mark", None)
        problem = getattr(e, "problem", None) or str(e)
        if mark is not None:
            raise make_load_error(
                f"Invalid YAML: {problem}",
                text,
                line=mark.line + 1,
                column=mark.column + 1,
                file=file,
                document=document,
            ) from e
        raise make_load_error(
            f"Invalid YAML: {problem}", text, file=file, document=document
        ) from e


def parse_components(text: str, file: Path | None = None) -> ComponentLibrary:
    """
    Parse a components document.

    Args:
        text: YAML source
        file: Source path, used in error messages only

    Returns:
        ComponentLibrary (empty for an empty document)

    Raises:
        SpecLoadError: On invalid YAML or an unexpected document shape
    """
    data = _parse_yaml(text, file, COMPONENTS_DOCUMENT)
    if data is None:
        return ComponentLibrary()

    if not isinstance(data, dict):
        raise make_load_error(
            "Components document must be a mapping of component names",
            text,
            file=file,
            document=COMPONENTS_DOCUMENT,
        )

    components: dict[str, ComponentDefinition] = {}
    for name, definition in data.items():
        variants = definition.get("variants") if isinstance(definition, dict) else None
        if not isinstance(variants, dict):
            raise make_load_error(
                f"Component '{name}' must define a 'variants' mapping",
                text,
                file=file,
                document=COMPONENTS_DOCUMENT,
            )

        normalized: dict[str, list[Any]] = {}
        for variant_name, nodes in variants.items():
            if nodes is None:
                nodes = []
            elif not isinstance(nodes, list):
                nodes = [nodes]
            normalized[str(variant_name)] = nodes

        components[str(name)] = ComponentDefinition(variants=normalized)

    logger.debug(f"Loaded {len(components)} component(s)")
    return ComponentLibrary(components=components)


def parse_wireframe(text: str, file: Path | None = None) -> Wireframe:
    """
    Parse a wireframe document.

    Raises:
        SpecLoadError: On invalid YAML, a non-mapping document or a missing
            ``frames`` list
    """
    data = _parse_yaml(text, file, WIREFRAME_DOCUMENT)

    if not isinstance(data, dict):
        raise make_load_error(
            "Wireframe document must be a mapping with a 'frames' list",
            text,
            file=file,
            document=WIREFRAME_DOCUMENT,
        )

    frames = data.get("frames")
    if not isinstance(frames, list):
        raise make_load_error(
            "Wireframe document must contain a 'frames' list",
            text,
            file=file,
            document=WIREFRAME_DOCUMENT,
        )

    logger.debug(f"Loaded wireframe with {len(frames)} frame(s)")
    return Wireframe(frames=frames)


def _read(path: Path, document: str) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SpecLoadError(f"Cannot read {document} document {path}: {e}") from e


def load_components(path: Path) -> ComponentLibrary:
    """Load a components document from disk."""
    return parse_components(_read(path, COMPONENTS_DOCUMENT), file=path)


def load_wireframe(path: Path) -> Wireframe:
    """Load a wireframe document from disk."""
    return parse_wireframe(_read(path, WIREFRAME_DOCUMENT), file=path)


__all__ = [
    "parse_components",
    "parse_wireframe",
    "load_components",
    "load_wireframe",
]
