"""
wirespec - Wireframe spec resolution engine.

Turns declarative, component-based wireframe documents into a concrete
tree of drawing primitives plus the border-collapse flags a presentation
layer needs to draw them.
"""

from __future__ import annotations

# Re-export commonly used types for convenience
from ._version import get_version
from .core import ir
from .core.errors import ConfigError, SpecLoadError, WirespecError

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "WirespecError",
    "SpecLoadError",
    "ConfigError",
]
