"""
Rich UI components for the wirespec CLI.

Provides styled status lines and tables for diagnostics and collapse
summaries.
"""

from collections import Counter

from rich import box
from rich.console import Console
from rich.style import Style
from rich.table import Table
from rich.text import Text

from wirespec.core.ir import Diagnostic
from wirespec.ui.layout_engine import CollapseTable, format_path

console = Console()
err_console = Console(stderr=True)

# Style definitions
STYLES = {
    "title": Style(color="bright_cyan", bold=True),
    "subtitle": Style(color="bright_black"),
    "success": Style(color="green", bold=True),
    "error": Style(color="red", bold=True),
    "warning": Style(color="yellow"),
    "info": Style(color="cyan"),
    "muted": Style(color="bright_black"),
    "highlight": Style(color="bright_cyan"),
}


def print_header(title: str, subtitle: str = "") -> None:
    """Print a styled header."""
    console.print()
    console.print(Text(title, style=STYLES["title"]))
    if subtitle:
        console.print(Text(subtitle, style=STYLES["subtitle"]))
    console.print()


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(Text(f"✓ {message}", style=STYLES["success"]))


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    err_console.print(Text(f"✗ {message}", style=STYLES["error"]))


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(Text(f"⚠ {message}", style=STYLES["warning"]))


def diagnostics_table(diagnostics: list[Diagnostic]) -> Table:
    """Table of resolution diagnostics, one row each."""
    table = Table(box=box.SIMPLE_HEAD, show_edge=False, pad_edge=False)
    table.add_column("Kind", style="yellow", no_wrap=True)
    table.add_column("Component", style="cyan")
    table.add_column("Message")

    for diagnostic in diagnostics:
        component = diagnostic.component or ""
        if diagnostic.variant:
            component = f"{component}.{diagnostic.variant}"
        table.add_row(diagnostic.kind.value, component, diagnostic.message)

    return table


def collapse_table(collapse: CollapseTable) -> Table:
    """Table of the nodes with at least one collapsed edge."""
    table = Table(box=box.SIMPLE_HEAD, show_edge=False, pad_edge=False)
    table.add_column("Path", style="cyan", no_wrap=True)
    for edge in ("top", "left", "bottom", "right"):
        table.add_column(edge.capitalize(), justify="center")

    for path, ctx in collapse.collapsed().items():
        flags = ["●" if value else "·" for value in ctx.to_dict().values()]
        table.add_row(format_path(path), *flags)

    return table


def print_diagnostics_summary(diagnostics: list[Diagnostic]) -> None:
    """Print a one-line count of diagnostics per kind."""
    if not diagnostics:
        print_success("No diagnostics")
        return

    counts = Counter(d.kind.value for d in diagnostics)
    summary = ", ".join(f"{count} {kind}" for kind, count in sorted(counts.items()))
    print_warning(f"{len(diagnostics)} diagnostic(s): {summary}")
