import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from .errors import ConfigError

MANIFEST_FILE = "wirespec.toml"

SEED_ENV = "WIRESPEC_SEED"
LOG_LEVEL_ENV = "WIRESPEC_LOG_LEVEL"


@dataclass
class RenderConfig:
    """Resolution settings."""

    seed: int | None = None  # None: unseeded procedural data
    max_depth: int = 32
    default_variant: str = "default"


@dataclass
class CacheConfig:
    """Render cache settings."""

    enabled: bool = True
    dir: str = ".wirespec/cache/renders"


@dataclass
class ProjectManifest:
    name: str = "wirespec-project"
    specs_dir: str = "specs"
    components: str | None = None  # Path to the components document
    render: RenderConfig = field(default_factory=RenderConfig)
    cache: CacheConfig = field(default_factory=CacheConfig)
    root: Path = field(default_factory=Path.cwd)

    @property
    def components_path(self) -> Path | None:
        return self.root / self.components if self.components else None

    @property
    def specs_path(self) -> Path:
        return self.root / self.specs_dir

    @property
    def cache_path(self) -> Path:
        return self.root / self.cache.dir


def _expect(value: object, kind: type | tuple[type, ...], key: str, path: Path) -> None:
    # bool is an int subclass; reject it where a number is expected
    if isinstance(value, bool) and kind is int:
        raise ConfigError(f"{path}: '{key}' must be an integer")
    if not isinstance(value, kind):
        raise ConfigError(f"{path}: '{key}' has the wrong type ({type(value).__name__})")


def load_manifest(path: Path) -> ProjectManifest:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ConfigError(f"Manifest {path} is not UTF-8: {e}") from e

    project = data.get("project", {})
    render_data = data.get("render", {})
    cache_data = data.get("cache", {})

    seed = render_data.get("seed")
    if seed is not None:
        _expect(seed, int, "render.seed", path)
    max_depth = render_data.get("max_depth", 32)
    _expect(max_depth, int, "render.max_depth", path)
    default_variant = render_data.get("default_variant", "default")
    _expect(default_variant, str, "render.default_variant", path)

    enabled = cache_data.get("enabled", True)
    _expect(enabled, bool, "cache.enabled", path)

    render_config = RenderConfig(
        seed=seed,
        max_depth=max_depth,
        default_variant=default_variant,
    )

    cache_config = CacheConfig(
        enabled=enabled,
        dir=cache_data.get("dir", ".wirespec/cache/renders"),
    )

    return ProjectManifest(
        name=project.get("name", "wirespec-project"),
        specs_dir=project.get("specs_dir", "specs"),
        components=project.get("components"),
        render=render_config,
        cache=cache_config,
        root=path.parent,
    )


def apply_env_overrides(manifest: ProjectManifest) -> ProjectManifest:
    """Apply ``WIRESPEC_SEED`` on top of a manifest."""
    seed = os.environ.get(SEED_ENV)
    if seed:
        try:
            manifest.render.seed = int(seed)
        except ValueError as e:
            raise ConfigError(f"{SEED_ENV} must be an integer, got {seed!r}") from e

    return manifest


def find_manifest(start: Path) -> Path | None:
    """Walk up from ``start`` looking for ``wirespec.toml``."""
    current = start.resolve()
    for directory in (current, *current.parents):
        candidate = directory / MANIFEST_FILE
        if candidate.is_file():
            return candidate
    return None


def load_settings(project_root: Path | None = None) -> ProjectManifest:
    """
    Load project settings.

    Uses the nearest ``wirespec.toml`` at or above ``project_root`` (the
    current directory by default), falling back to defaults when none
    exists. Environment overrides are always applied.
    """
    root = project_root or Path.cwd()
    manifest_path = find_manifest(root)
    manifest = load_manifest(manifest_path) if manifest_path else ProjectManifest(root=root)
    return apply_env_overrides(manifest)
