"""
Render commands: resolve and check.
"""

import json
from pathlib import Path

import typer

from wirespec.cli.utils import components_text, load_cli_settings, read_document
from wirespec.cli_ui import (
    collapse_table,
    console,
    diagnostics_table,
    print_diagnostics_summary,
    print_error,
    print_header,
)
from wirespec.core.cache import get_render_cache
from wirespec.core.errors import SpecLoadError
from wirespec.core.icons import StaticIconLookup
from wirespec.core.render_pass import render_documents, render_payload


def resolve_command(
    wireframe: Path = typer.Argument(..., help="Wireframe YAML document"),  # noqa: B008
    components: Path | None = typer.Option(  # noqa: B008
        None, "--components", "-c", help="Components YAML document"
    ),
    output: Path | None = typer.Option(  # noqa: B008
        None, "--output", "-o", help="Write the payload here instead of stdout"
    ),
    seed: int | None = typer.Option(None, "--seed", help="Seed for procedural data"),
    icons: Path | None = typer.Option(  # noqa: B008
        None, "--icons", help="JSON icon set to resolve icon nodes against"
    ),
    no_cache: bool = typer.Option(False, "--no-cache", help="Bypass the render cache"),
    manifest: Path | None = typer.Option(  # noqa: B008
        None, "--manifest", "-m", help="Path to wirespec.toml"
    ),
) -> None:
    """
    Resolve a wireframe and write the render payload as JSON.

    The payload holds the resolved frames, the border-collapse table and
    any diagnostics.
    """
    settings = load_cli_settings(manifest, seed)
    wireframe_text = read_document(wireframe, "wireframe")
    library_text = components_text(components, settings)

    cache = None
    # Only seeded renders without an icon set are cacheable
    cacheable = settings.render.seed is not None and icons is None
    if settings.cache.enabled and not no_cache and cacheable:
        cache = get_render_cache(settings.root, settings.cache.dir)

    try:
        icon_lookup = StaticIconLookup.from_json(icons) if icons else None
    except (OSError, ValueError) as e:
        print_error(f"Cannot load icons from {icons}: {e}")
        raise typer.Exit(code=1)

    try:
        payload = render_payload(
            wireframe_text,
            library_text,
            settings=settings,
            icons=icon_lookup,
            cache=cache,
        )
    except SpecLoadError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    text = json.dumps(payload, indent=2)
    if output:
        output.write_text(text + "\n", encoding="utf-8")
    else:
        typer.echo(text)


def check_command(
    wireframe: Path = typer.Argument(..., help="Wireframe YAML document"),  # noqa: B008
    components: Path | None = typer.Option(  # noqa: B008
        None, "--components", "-c", help="Components YAML document"
    ),
    strict: bool = typer.Option(False, "--strict", help="Fail when any diagnostic is reported"),
    manifest: Path | None = typer.Option(  # noqa: B008
        None, "--manifest", "-m", help="Path to wirespec.toml"
    ),
) -> None:
    """
    Resolve a wireframe and report diagnostics and collapsed borders.

    Exits with code 1 on load errors, and with --strict also when
    resolution reported diagnostics.
    """
    settings = load_cli_settings(manifest)
    wireframe_text = read_document(wireframe, "wireframe")
    library_text = components_text(components, settings)

    try:
        result = render_documents(wireframe_text, library_text, settings=settings)
    except SpecLoadError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    print_header(f"{wireframe.name}", f"{len(result.frames)} frame(s)")

    if result.diagnostics:
        console.print(diagnostics_table(result.diagnostics))
    print_diagnostics_summary(result.diagnostics)

    collapsed = result.collapse.collapsed()
    if collapsed:
        console.print()
        console.print(collapse_table(result.collapse))
    console.print(f"{len(collapsed)} of {len(result.collapse)} box(es) with collapsed edges")

    if strict and result.diagnostics:
        raise typer.Exit(code=1)
