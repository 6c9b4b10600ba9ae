"""Version lookup for wirespec.

A source checkout reports the version in its pyproject.toml so editable
installs never go stale; an installed wheel reports its dist metadata.
"""

import tomllib
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as dist_version
from pathlib import Path

DIST_NAME = "wirespec"
UNKNOWN_VERSION = "0.0.0"

_CHECKOUT_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def _checkout_version(pyproject: Path) -> str | None:
    if not pyproject.is_file():
        return None
    try:
        project = tomllib.loads(pyproject.read_text(encoding="utf-8")).get("project", {})
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError):
        return None
    if project.get("name") != DIST_NAME:
        return None
    return project.get("version")


def get_version() -> str:
    """wirespec version string, ``0.0.0`` when neither source knows it."""
    checkout = _checkout_version(_CHECKOUT_PYPROJECT)
    if checkout:
        return checkout
    try:
        return dist_version(DIST_NAME)
    except PackageNotFoundError:
        return UNKNOWN_VERSION
