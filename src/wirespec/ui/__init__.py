"""
wirespec UI Module.

This module provides the analysis handed to the presentation layer:
- Border-collapse engine
"""

from wirespec.ui.layout_engine import CollapseContext, CollapseTable, analyze_collapse

__all__ = [
    "CollapseContext",
    "CollapseTable",
    "analyze_collapse",
]
