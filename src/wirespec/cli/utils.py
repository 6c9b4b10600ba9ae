"""
wirespec CLI Utilities.

Shared utility functions used across CLI modules.
"""

import logging
import os
import platform
from pathlib import Path

import typer

from wirespec._version import get_version
from wirespec.core.errors import ConfigError
from wirespec.core.manifest import (
    LOG_LEVEL_ENV,
    ProjectManifest,
    apply_env_overrides,
    load_manifest,
    load_settings,
)

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        wirespec_version = get_version()

        python_version = platform.python_version()
        python_impl = platform.python_implementation()

        # Get installation location
        try:
            import wirespec

            install_location = Path(wirespec.__file__).parent.parent.parent
        except Exception:
            install_location = Path.cwd()

        # Check if installed via pip (editable or not)
        install_method = "unknown"
        try:
            from importlib.metadata import distribution

            dist = distribution("wirespec")
            if dist.read_text("direct_url.json"):
                install_method = "pip (editable)"
            else:
                install_method = "pip"
        except Exception:
            # Check if we're in development directory
            if (install_location / "pyproject.toml").exists():
                install_method = "development"

        typer.echo(f"wirespec version {wirespec_version}")
        typer.echo("")
        typer.echo("Environment:")
        typer.echo(f"  Python:        {python_impl} {python_version}")
        typer.echo(f"  Platform:      {platform.system()} {platform.release()}")
        typer.echo("")
        typer.echo("Installation:")
        typer.echo(f"  Method:        {install_method}")
        typer.echo(f"  Location:      {install_location}")

        raise typer.Exit()


def configure_logging(verbose: bool = False) -> None:
    """
    Configure root logging for a CLI run.

    ``--verbose`` wins over ``WIRESPEC_LOG_LEVEL``; the default is WARNING
    so resolution diagnostics still reach stderr.
    """
    if verbose:
        level = logging.DEBUG
    else:
        name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            level = logging.WARNING

    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("wirespec").setLevel(level)


def load_cli_settings(manifest: Path | None, seed: int | None = None) -> ProjectManifest:
    """
    Load settings for a command.

    An explicit ``--manifest`` must exist; otherwise the nearest
    ``wirespec.toml`` is used, or defaults. ``--seed`` overrides both the
    manifest and ``WIRESPEC_SEED``.
    """
    try:
        if manifest is not None:
            if not manifest.is_file():
                raise ConfigError(f"Manifest not found: {manifest}")
            settings = apply_env_overrides(load_manifest(manifest.resolve()))
        else:
            settings = load_settings()
    except ConfigError as e:
        typer.echo(f"Config error: {e}", err=True)
        raise typer.Exit(code=1)

    if seed is not None:
        settings.render.seed = seed
    return settings


def read_document(path: Path, role: str) -> str:
    """Read a source document, exiting with code 1 when it is unreadable."""
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        typer.echo(f"Cannot read {role} document {path}: {e}", err=True)
        raise typer.Exit(code=1)


def components_text(components: Path | None, settings: ProjectManifest) -> str | None:
    """Components document from ``--components`` or the manifest, if any."""
    path = components or settings.components_path
    if path is None:
        return None
    return read_document(path, "components")
