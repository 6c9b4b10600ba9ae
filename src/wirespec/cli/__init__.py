"""
wirespec CLI Package.

This package contains the CLI components:

- render.py: resolve and check commands
- gallery.py: component gallery command
- utils.py: Shared utilities
"""

import sys

import typer

from wirespec._version import get_version
from wirespec.cli.gallery import gallery_command
from wirespec.cli.render import check_command, resolve_command
from wirespec.cli.utils import configure_logging, version_callback

__version__ = get_version()

app = typer.Typer(
    help="""wirespec – wireframe spec resolution engine

Commands:
  • resolve: wireframe (+ components) → render payload JSON
  • check:   report diagnostics and collapsed borders
  • gallery: preview every component variant
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """wirespec CLI main callback for global options."""
    configure_logging(verbose)


app.command(name="resolve")(resolve_command)
app.command(name="check")(check_command)
app.command(name="gallery")(gallery_command)


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


__all__ = [
    "__version__",
    "app",
    "main",
    "get_version",
    "version_callback",
]


if __name__ == "__main__":
    main(sys.argv[1:])
