"""
Diagnostics recorded while resolving a wireframe.

Resolution degrades locally instead of raising; every degradation leaves a
``Diagnostic`` behind so a caller can decide whether the result is good
enough to show.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class DiagnosticKind(str, Enum):
    UNKNOWN_NODE = "unknown_node"  # No primitive tag, no component key
    UNKNOWN_COMPONENT = "unknown_component"
    UNKNOWN_VARIANT = "unknown_variant"
    EACH_NOT_ARRAY = "each_not_array"  # $each source missing or not a list
    MALFORMED_PROPS = "malformed_props"  # Invalid field dropped
    RECURSION_LIMIT = "recursion_limit"  # Component nesting too deep
    EMPTY_FRAME = "empty_frame"  # Top-level entry resolved to nothing


class Diagnostic(BaseModel):
    """
    A single non-fatal problem found during resolution.

    Attributes:
        kind: Category of the problem
        message: Human-readable description
        component: Component involved, if any
        variant: Variant involved, if any
    """

    model_config = {"frozen": True}

    kind: DiagnosticKind
    message: str
    component: str | None = None
    variant: str | None = None


__all__ = ["DiagnosticKind", "Diagnostic"]
