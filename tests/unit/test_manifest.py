"""Tests for wirespec.toml loading and environment overrides."""

from pathlib import Path

import pytest

from wirespec.core.errors import ConfigError
from wirespec.core.manifest import (
    LOG_LEVEL_ENV,
    SEED_ENV,
    ProjectManifest,
    apply_env_overrides,
    find_manifest,
    load_manifest,
    load_settings,
)

MANIFEST = """
[project]
name = "checkout-flows"
specs_dir = "specs"
components = "specs/components.yaml"

[render]
seed = 7
max_depth = 10
default_variant = "base"

[cache]
enabled = false
dir = "tmp/renders"
"""


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv(SEED_ENV, raising=False)
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)


def write_manifest(directory: Path, text: str = MANIFEST) -> Path:
    path = directory / "wirespec.toml"
    path.write_text(text)
    return path


class TestLoadManifest:
    """Tests for manifest parsing."""

    def test_full_manifest(self, tmp_path: Path):
        manifest = load_manifest(write_manifest(tmp_path))

        assert manifest.name == "checkout-flows"
        assert manifest.render.seed == 7
        assert manifest.render.max_depth == 10
        assert manifest.render.default_variant == "base"
        assert manifest.cache.enabled is False
        assert manifest.root == tmp_path
        assert manifest.components_path == tmp_path / "specs" / "components.yaml"
        assert manifest.specs_path == tmp_path / "specs"
        assert manifest.cache_path == tmp_path / "tmp" / "renders"

    def test_empty_manifest_defaults(self, tmp_path: Path):
        manifest = load_manifest(write_manifest(tmp_path, ""))

        assert manifest.render.seed is None
        assert manifest.render.max_depth == 32
        assert manifest.cache.enabled is True
        assert manifest.components_path is None

    def test_invalid_toml(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_manifest(write_manifest(tmp_path, "[render\nseed ="))

    def test_non_utf8_manifest(self, tmp_path: Path):
        path = tmp_path / "wirespec.toml"
        path.write_bytes(b'[project]\nname = "\xff"\n')
        with pytest.raises(ConfigError, match="not UTF-8"):
            load_manifest(path)

    def test_wrong_seed_type(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="render.seed"):
            load_manifest(write_manifest(tmp_path, '[render]\nseed = "seven"\n'))

    def test_bool_is_not_an_integer(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="render.max_depth"):
            load_manifest(write_manifest(tmp_path, "[render]\nmax_depth = true\n"))


class TestEnvOverrides:
    """Tests for environment variable overrides."""

    def test_seed_override(self, monkeypatch):
        monkeypatch.setenv(SEED_ENV, "99")
        assert apply_env_overrides(ProjectManifest()).render.seed == 99

    def test_invalid_seed(self, monkeypatch):
        monkeypatch.setenv(SEED_ENV, "abc")
        with pytest.raises(ConfigError, match=SEED_ENV):
            apply_env_overrides(ProjectManifest())


class TestLoadSettings:
    """Tests for settings discovery."""

    def test_find_in_parent(self, tmp_path: Path):
        path = write_manifest(tmp_path)
        nested = tmp_path / "specs" / "flows"
        nested.mkdir(parents=True)
        assert find_manifest(nested) == path.resolve()

    def test_defaults_without_manifest(self, tmp_path: Path):
        settings = load_settings(tmp_path)
        assert settings.root == tmp_path
        assert settings.render.seed is None

    def test_env_applied_over_manifest(self, tmp_path: Path, monkeypatch):
        write_manifest(tmp_path)
        monkeypatch.setenv(SEED_ENV, "3")
        assert load_settings(tmp_path).render.seed == 3
