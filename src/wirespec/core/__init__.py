"""Core wirespec functionality: IR, loading, templating, generators, resolution, render pass."""

from . import ir
from .errors import ConfigError, ErrorContext, SpecLoadError, WirespecError
from .gallery import build_gallery
from .icons import IconLookup, StaticIconLookup, canonical_icon_name, resolve_icon
from .manifest import ProjectManifest, load_manifest, load_settings
from .render_pass import RenderResult, fingerprint, render_documents, render_payload
from .resolver import ComponentResolver, resolve_wireframe
from .spec_loader import load_components, load_wireframe, parse_components, parse_wireframe
from .templating import find_placeholders, substitute

__all__ = [
    "ir",
    "WirespecError",
    "SpecLoadError",
    "ConfigError",
    "ErrorContext",
    "parse_components",
    "parse_wireframe",
    "load_components",
    "load_wireframe",
    "substitute",
    "find_placeholders",
    "ComponentResolver",
    "resolve_wireframe",
    "build_gallery",
    "IconLookup",
    "StaticIconLookup",
    "canonical_icon_name",
    "resolve_icon",
    "ProjectManifest",
    "load_manifest",
    "load_settings",
    "RenderResult",
    "fingerprint",
    "render_documents",
    "render_payload",
]
