"""
Error types for wirespec document loading and configuration.

Resolution and border-collapse analysis never raise for content problems;
they record diagnostics instead (see ``wirespec.core.ir.diagnostics``).
Only loading a document or a manifest can fail hard.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


class WirespecError(Exception):
    """Base exception for all wirespec errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class SpecLoadError(WirespecError):
    """
    Raised when a wireframe or components document cannot be loaded.

    Examples:
    - Invalid YAML syntax
    - Top-level document is not a mapping
    - ``frames`` missing or not a list
    - Component entry without a ``variants`` mapping
    """

    pass


class ConfigError(WirespecError):
    """
    Raised when ``wirespec.toml`` cannot be read.

    Examples:
    - Invalid TOML syntax
    - Wrong value types (e.g. a string ``max_depth``)
    """

    pass


@dataclass
class ErrorContext:
    """
    Context information for an error, including source location.

    Attributes:
        file: Path to the source document, if it came from a file
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        snippet: Optional source snippet around the error location
        document: Optional document role ("wireframe" or "components")
    """

    file: Path | None
    line: int
    column: int
    snippet: str | None = None
    document: str | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "specs/home.yaml:10:5 in wireframe"
        """
        source = str(self.file) if self.file else "<string>"
        location = f"{source}:{self.line}:{self.column}"
        if self.document:
            location += f" in {self.document}"

        if self.snippet:
            return f"{location}\n{self._format_snippet()}"
        return location

    def _format_snippet(self) -> str:
        """Format source snippet with line numbers and error marker."""
        if not self.snippet:
            return ""

        lines = self.snippet.split("\n")
        formatted = []

        # Snippet starts 2 lines before the error line
        start_line = max(1, self.line - 2)

        for i, line in enumerate(lines):
            line_num = start_line + i
            prefix = f"{line_num:4d} | "
            formatted.append(prefix + line)

            if line_num == self.line:
                marker_pos = len(prefix) + self.column - 1
                formatted.append(" " * marker_pos + "^^^")

        return "\n".join(formatted)


def make_load_error(
    message: str,
    text: str,
    line: int | None = None,
    column: int | None = None,
    file: Path | None = None,
    document: str | None = None,
) -> SpecLoadError:
    """
    Helper to create a SpecLoadError with context.

    Args:
        message: Error description
        text: Full document text (used to cut a snippet)
        line: Optional line number (1-indexed)
        column: Optional column number (1-indexed)
        file: Optional source file path
        document: Optional document role

    Returns:
        SpecLoadError with context attached when a location is known
    """
    if line is None:
        if file is None and document is None:
            return SpecLoadError(message)
        return SpecLoadError(
            message, ErrorContext(file=file, line=1, column=1, document=document)
        )

    source_lines = text.split("\n")
    start = max(0, line - 3)
    snippet = "\n".join(source_lines[start : line + 2])
    context = ErrorContext(
        file=file,
        line=line,
        column=column or 1,
        snippet=snippet,
        document=document,
    )
    return SpecLoadError(message, context)
