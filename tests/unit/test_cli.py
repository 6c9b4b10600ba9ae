"""Tests for CLI commands."""

import json
import logging
from pathlib import Path

import pytest
from typer.testing import CliRunner

from wirespec.cli import app
from wirespec.cli.utils import configure_logging
from wirespec.core.manifest import LOG_LEVEL_ENV, SEED_ENV


@pytest.fixture
def cli_runner():
    """Return a CLI test runner."""
    return CliRunner()


@pytest.fixture
def test_project(tmp_path: Path, spec_files: tuple[Path, Path], monkeypatch) -> Path:
    """Create a temporary wirespec project and make it the working directory."""
    manifest = tmp_path / "wirespec.toml"
    manifest.write_text(
        """
[project]
name = "test_project"
components = "components.yaml"

[render]
seed = 11
"""
    )
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(SEED_ENV, raising=False)
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    return tmp_path


def test_version(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert "wirespec version" in result.stdout


class TestConfigureLogging:
    """Tests for CLI log level selection."""

    @pytest.fixture(autouse=True)
    def restore_level(self):
        logger = logging.getLogger("wirespec")
        level = logger.level
        yield
        logger.setLevel(level)

    def test_level_from_environment(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV, "info")
        configure_logging()
        assert logging.getLogger("wirespec").level == logging.INFO

    def test_verbose_wins_over_environment(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV, "error")
        configure_logging(verbose=True)
        assert logging.getLogger("wirespec").level == logging.DEBUG

    def test_unknown_level_falls_back_to_warning(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV, "chatty")
        configure_logging()
        assert logging.getLogger("wirespec").level == logging.WARNING


class TestResolveCommand:
    """Tests for the resolve command."""

    def test_writes_payload_to_stdout(self, cli_runner: CliRunner, test_project: Path):
        """Test resolve prints the render payload as JSON."""
        result = cli_runner.invoke(app, ["resolve", "home.yaml", "--no-cache"])

        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["frames"][0]["type"] == "frame"
        assert payload["collapse"]["0.0"]["bottom"] is True
        assert payload["collapse"]["0.1"]["bottom"] is False

    def test_output_file(self, cli_runner: CliRunner, test_project: Path):
        out = test_project / "out.json"
        result = cli_runner.invoke(
            app, ["resolve", "home.yaml", "-c", "components.yaml", "-o", str(out), "--no-cache"]
        )

        assert result.exit_code == 0
        assert json.loads(out.read_text())["diagnostics"] == []

    def test_seeded_render_cached(self, cli_runner: CliRunner, test_project: Path):
        """Test that a seeded render lands in the project cache."""
        first = cli_runner.invoke(app, ["resolve", "home.yaml"])
        second = cli_runner.invoke(app, ["resolve", "home.yaml"])

        assert first.exit_code == 0
        assert first.stdout == second.stdout
        cache_dir = test_project / ".wirespec" / "cache" / "renders"
        assert len(list(cache_dir.glob("*.json"))) == 1

    def test_no_cache_flag(self, cli_runner: CliRunner, test_project: Path):
        result = cli_runner.invoke(app, ["resolve", "home.yaml", "--seed", "3", "--no-cache"])
        assert result.exit_code == 0
        assert not (test_project / ".wirespec").exists()

    def test_icons(self, cli_runner: CliRunner, test_project: Path):
        (test_project / "page.yaml").write_text(
            "frames:\n  - Frame:\n      children:\n        - Icon: {name: star}\n"
        )
        icons = test_project / "icons.json"
        icons.write_text(json.dumps({"Star": [["polygon", {"points": "12 2 15 9"}]]}))

        result = cli_runner.invoke(app, ["resolve", "page.yaml", "--icons", str(icons)])

        assert result.exit_code == 0
        assert json.loads(result.stdout)["icons"] == {"0.0": [["polygon", {"points": "12 2 15 9"}]]}

    def test_invalid_yaml(self, cli_runner: CliRunner, test_project: Path):
        """Test that a load error exits 1 with the message on stderr."""
        (test_project / "broken.yaml").write_text("frames: [\n")

        result = cli_runner.invoke(app, ["resolve", "broken.yaml", "--no-cache"])

        assert result.exit_code == 1
        assert "Invalid YAML" in result.stderr

    def test_missing_wireframe(self, cli_runner: CliRunner, test_project: Path):
        result = cli_runner.invoke(app, ["resolve", "nope.yaml"])
        assert result.exit_code == 1
        assert "Cannot read wireframe document" in result.stderr

    def test_non_utf8_wireframe(self, cli_runner: CliRunner, test_project: Path):
        (test_project / "latin.yaml").write_bytes(b"\xff\xfeframes: []\n")

        result = cli_runner.invoke(app, ["resolve", "latin.yaml", "--no-cache"])

        assert result.exit_code == 1
        assert "Cannot read wireframe document" in result.stderr

    def test_non_utf8_components(self, cli_runner: CliRunner, test_project: Path):
        (test_project / "components.yaml").write_bytes(b"\xff\xfeButton: {}\n")

        result = cli_runner.invoke(app, ["resolve", "home.yaml", "--no-cache"])

        assert result.exit_code == 1
        assert "Cannot read components document" in result.stderr

    def test_missing_manifest(self, cli_runner: CliRunner, test_project: Path):
        result = cli_runner.invoke(app, ["resolve", "home.yaml", "-m", "missing.toml"])
        assert result.exit_code == 1
        assert "Manifest not found" in result.stderr


class TestCheckCommand:
    """Tests for the check command."""

    def test_clean_document(self, cli_runner: CliRunner, test_project: Path):
        result = cli_runner.invoke(app, ["check", "home.yaml"])

        assert result.exit_code == 0
        assert "No diagnostics" in result.stdout
        assert "2 of 3 box(es) with collapsed edges" in result.stdout

    def test_diagnostics_reported(self, cli_runner: CliRunner, test_project: Path):
        (test_project / "ghost.yaml").write_text("frames:\n  - Frame:\n      children:\n        - Ghost: {}\n")

        result = cli_runner.invoke(app, ["check", "ghost.yaml"])

        assert result.exit_code == 0
        assert "unknown_component" in result.stdout

    def test_strict_fails_on_diagnostics(self, cli_runner: CliRunner, test_project: Path):
        (test_project / "ghost.yaml").write_text("frames:\n  - Ghost: {}\n")

        result = cli_runner.invoke(app, ["check", "ghost.yaml", "--strict"])

        assert result.exit_code == 1

    def test_non_utf8_document(self, cli_runner: CliRunner, test_project: Path):
        """Test that undecodable bytes exit cleanly instead of raising."""
        (test_project / "latin.yaml").write_bytes(b"\xff\xfe")

        result = cli_runner.invoke(app, ["check", "latin.yaml"])

        assert result.exit_code == 1
        assert not isinstance(result.exception, UnicodeDecodeError)
        assert "latin.yaml" in result.stderr

    def test_non_utf8_manifest(self, cli_runner: CliRunner, test_project: Path):
        (test_project / "wirespec.toml").write_bytes(b"[render]\nseed = \xff\n")

        result = cli_runner.invoke(app, ["check", "home.yaml"])

        assert result.exit_code == 1
        assert "Config error" in result.stderr

    def test_load_error(self, cli_runner: CliRunner, test_project: Path):
        (test_project / "empty.yaml").write_text("title: nothing\n")

        result = cli_runner.invoke(app, ["check", "empty.yaml"])

        assert result.exit_code == 1
        assert "frames" in result.stderr


class TestGalleryCommand:
    """Tests for the gallery command."""

    def test_gallery_output(self, cli_runner: CliRunner, test_project: Path):
        out = test_project / "gallery.json"
        result = cli_runner.invoke(app, ["gallery", "components.yaml", "-o", str(out)])

        assert result.exit_code == 0
        sections = json.loads(out.read_text())
        assert [s["component"] for s in sections] == ["Button", "NavList", "NavItem", "Card", "Pair"]
        assert sections[0]["variants"][0]["props"] == ["label"]

    def test_gallery_stdout(self, cli_runner: CliRunner, test_project: Path):
        result = cli_runner.invoke(app, ["gallery", "components.yaml"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)[3]["component"] == "Card"

    def test_gallery_invalid(self, cli_runner: CliRunner, test_project: Path):
        (test_project / "bad.yaml").write_text("- not a mapping\n")
        result = cli_runner.invoke(app, ["gallery", "bad.yaml"])
        assert result.exit_code == 1
