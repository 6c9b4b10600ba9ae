"""
Icon name lookup.

Icon nodes carry a free-form name (``arrow-right``, ``Settings``). The
resolver passes names through untouched; turning a name into drawing
instructions is delegated to an injected ``IconLookup`` so the icon set
can be swapped in tests or by the host application.

Drawing instructions use the ``[tag, attrs]`` element form, e.g.
``("circle", {"cx": 12, "cy": 12, "r": 10})`` on a 24x24 viewbox.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

logger = logging.getLogger(__name__)

IconElement = tuple[str, dict[str, Any]]

DEFAULT_FALLBACK_ICON = "Circle"

DEFAULT_ICONS: dict[str, list[IconElement]] = {
    "Circle": [("circle", {"cx": 12, "cy": 12, "r": 10})],
}


def canonical_icon_name(name: str) -> str:
    """
    Canonicalize an icon name to PascalCase.

    Examples:
        >>> canonical_icon_name("arrow-right")
        'ArrowRight'
        >>> canonical_icon_name("  settings ")
        'Settings'
    """
    return "".join(part[:1].upper() + part[1:] for part in name.strip().split("-"))


@runtime_checkable
class IconLookup(Protocol):
    """Anything that maps a canonical icon name to drawing instructions."""

    fallback: str

    def lookup(self, name: str) -> list[IconElement] | None: ...


class StaticIconLookup:
    """Case-insensitive lookup over an in-memory icon mapping."""

    def __init__(
        self,
        icons: Mapping[str, list[IconElement]] | None = None,
        fallback: str = DEFAULT_FALLBACK_ICON,
    ):
        source = DEFAULT_ICONS if icons is None else icons
        self._icons = {name.casefold(): list(elements) for name, elements in source.items()}
        self.fallback = fallback

    def lookup(self, name: str) -> list[IconElement] | None:
        return self._icons.get(name.casefold())

    def __len__(self) -> int:
        return len(self._icons)

    @classmethod
    def from_json(cls, path: Path, fallback: str = DEFAULT_FALLBACK_ICON) -> StaticIconLookup:
        """
        Load an icon set from a JSON file of ``{name: [[tag, attrs], ...]}``.

        Built-in defaults are kept for names the file does not define.
        """
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)

        icons: dict[str, list[IconElement]] = dict(DEFAULT_ICONS)
        for name, elements in data.items():
            icons[name] = [(tag, dict(attrs)) for tag, attrs in elements]

        logger.debug(f"Loaded {len(data)} icon(s) from {path}")
        return cls(icons, fallback=fallback)


def resolve_icon(lookup: IconLookup, name: str | None) -> list[IconElement] | None:
    """
    Resolve an icon node's name to drawing instructions.

    Returns ``None`` for a blank name (the icon is hidden). Unknown names
    resolve to the lookup's fallback shape, or an empty list when even
    that is missing.
    """
    if not name or not name.strip():
        return None

    elements = lookup.lookup(canonical_icon_name(name))
    if elements is not None:
        return elements

    logger.debug(f"Unknown icon '{name}', using {lookup.fallback}")
    return lookup.lookup(lookup.fallback) or []


__all__ = [
    "IconElement",
    "IconLookup",
    "StaticIconLookup",
    "DEFAULT_ICONS",
    "DEFAULT_FALLBACK_ICON",
    "canonical_icon_name",
    "resolve_icon",
]
