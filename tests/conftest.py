"""Shared pytest fixtures for wirespec tests."""

import random
from pathlib import Path

import pytest

from wirespec.core.ir import ComponentLibrary
from wirespec.core.spec_loader import parse_components

COMPONENTS_YAML = """
Button:
  variants:
    default:
      - Box:
          outline: thin
          padding: [8, 16]
          children:
            - Text:
                content: "{{label}}"
    primary:
      - Box:
          outline: thick
          background: grey
          children:
            - Text:
                content: "{{label}}"
                style: h2

NavList:
  variants:
    default:
      - Box:
          layout: column
          children:
            $each: items
            $template:
              - NavItem:
                  label: "{{item.label}}"
                  variant: "{{item.variant}}"

NavItem:
  variants:
    default:
      - Box:
          outline: thin
          children:
            - Text:
                content: "{{label}}"
    hover:
      - Box:
          outline: thin
          background: grey
          children:
            - Text:
                content: "{{label}}"

Card:
  variants:
    default:
      - Box:
          outline: thin
          children:
            - Text:
                content: "{{title}}"
                style: h2
            - Box:
                children: $children

Pair:
  variants:
    default:
      - Text:
          content: "{{first}}"
      - Text:
          content: "{{second}}"
"""

WIREFRAME_YAML = """
frames:
  - Frame:
      id: home
      size: [400, hug]
      children:
        - Box:
            outline: thin
        - Box:
            outline: thin
"""


@pytest.fixture
def components_yaml() -> str:
    """Return the shared components document."""
    return COMPONENTS_YAML


@pytest.fixture
def wireframe_yaml() -> str:
    """Return a one-frame wireframe with two stacked bordered boxes."""
    return WIREFRAME_YAML


@pytest.fixture
def library(components_yaml: str) -> ComponentLibrary:
    """Return the parsed shared component library."""
    return parse_components(components_yaml)


@pytest.fixture
def rng() -> random.Random:
    """Return a seeded random source."""
    return random.Random(1234)


@pytest.fixture
def spec_files(tmp_path: Path, components_yaml: str, wireframe_yaml: str) -> tuple[Path, Path]:
    """Write both documents to disk and return (wireframe, components) paths."""
    wireframe = tmp_path / "home.yaml"
    components = tmp_path / "components.yaml"
    wireframe.write_text(wireframe_yaml)
    components.write_text(components_yaml)
    return wireframe, components
