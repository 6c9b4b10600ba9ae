"""
Gallery command: preview every component variant.
"""

import json
import random
from pathlib import Path

import typer

from wirespec.cli.utils import load_cli_settings, read_document
from wirespec.cli_ui import print_error, print_success
from wirespec.core.errors import SpecLoadError
from wirespec.core.gallery import build_gallery
from wirespec.core.spec_loader import parse_components


def gallery_command(
    components: Path = typer.Argument(..., help="Components YAML document"),  # noqa: B008
    output: Path | None = typer.Option(  # noqa: B008
        None, "--output", "-o", help="Write the gallery here instead of stdout"
    ),
    seed: int | None = typer.Option(None, "--seed", help="Seed for procedural data"),
    manifest: Path | None = typer.Option(  # noqa: B008
        None, "--manifest", "-m", help="Path to wirespec.toml"
    ),
) -> None:
    """
    Resolve every variant of every component in isolation.

    Loops render three sample items and slots render a [children]
    caption, so each variant can be previewed without a caller.
    """
    settings = load_cli_settings(manifest, seed)
    text = read_document(components, "components")

    try:
        library = parse_components(text, file=components)
    except SpecLoadError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    rng = random.Random(settings.render.seed) if settings.render.seed is not None else None
    sections = build_gallery(library, rng=rng)
    payload = [section.model_dump(mode="json", by_alias=True, exclude_none=True) for section in sections]
    rendered = json.dumps(payload, indent=2)

    if output:
        output.write_text(rendered + "\n", encoding="utf-8")
        variant_count = sum(len(section.variants) for section in sections)
        print_success(f"Wrote {variant_count} preview(s) for {len(sections)} component(s) to {output}")
    else:
        typer.echo(rendered)
