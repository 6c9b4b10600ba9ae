"""Tests for the component resolver."""

import random

import pytest

from wirespec.core.ir import (
    ChartColor,
    ComponentLibrary,
    DiagnosticKind,
    Outline,
    ResolvedBox,
    ResolvedChart,
    ResolvedFrame,
    ResolvedGlobe,
    ResolvedIcon,
    ResolvedMap,
    ResolvedPointCloud,
    ResolvedText,
    TextStyle,
    Wireframe,
    dump_node,
)
from wirespec.core.resolver import ComponentResolver, resolve_wireframe
from wirespec.core.spec_loader import parse_components


@pytest.fixture
def resolver(library):
    return ComponentResolver(library, rng=random.Random(0))


def kinds(resolver):
    return [d.kind for d in resolver.diagnostics]


class TestPrimitives:
    """Tests for primitive node resolution."""

    def test_box_with_children(self, resolver):
        [box] = resolver.resolve(
            {"Box": {"outline": "thin", "gap": 8, "children": [{"Text": {"content": "Hi"}}]}}
        )
        assert isinstance(box, ResolvedBox)
        assert box.props.outline == Outline.THIN
        assert box.props.gap == 8
        assert isinstance(box.children[0], ResolvedText)
        assert box.children[0].props.content == "Hi"

    def test_children_not_kept_in_props(self, resolver):
        [box] = resolver.resolve({"Box": {"children": [{"Text": {}}]}})
        assert "children" not in dump_node(box)["props"]

    def test_null_props(self, resolver):
        """Test that a tag with a null value resolves with default props."""
        [text] = resolver.resolve({"Text": None})
        assert text.props.content == ""
        assert resolver.diagnostics == []

    def test_numeric_strings_coerce(self, resolver):
        [box] = resolver.resolve({"Box": {"gap": "12", "grow": "1"}})
        assert box.props.gap == 12
        assert box.props.grow == 1

    def test_unknown_enum_value_is_unset(self, resolver):
        """Test that an unrecognised enum string is treated as unset."""
        [box] = resolver.resolve({"Box": {"outline": "sparkly", "layout": "row"}})
        assert box.props.outline is None
        assert box.props.layout.value == "row"
        assert resolver.diagnostics == []

    def test_numeric_content_renders_as_text(self, resolver):
        [text] = resolver.resolve({"Text": {"content": 42}})
        assert text.props.content == "42"

    def test_extra_props_pass_through(self, resolver):
        [box] = resolver.resolve({"Box": {"testid": "hero"}})
        assert dump_node(box)["props"]["testid"] == "hero"

    def test_icon_name_passes_through(self, resolver):
        [icon] = resolver.resolve({"Icon": {"name": "arrow-right"}})
        assert isinstance(icon, ResolvedIcon)
        assert icon.props.name == "arrow-right"

    def test_cursor_from_alias(self, resolver):
        [cursor] = resolver.resolve({"Cursor": {"type": "hand", "from": "Save"}})
        assert dump_node(cursor)["props"]["from"] == "Save"

    def test_frame(self, resolver):
        [frame] = resolver.resolve(
            {"Frame": {"id": "home", "size": [400, "hug"], "children": [{"Box": {}}]}}
        )
        assert isinstance(frame, ResolvedFrame)
        assert frame.props.size == (400, "hug")
        assert len(frame.children) == 1


class TestVisualizations:
    """Tests for procedural data attached during resolution."""

    def test_chart_series(self, resolver):
        [chart] = resolver.resolve({"Chart": {"fn": "sin", "samples": 12}})
        assert isinstance(chart, ResolvedChart)
        assert len(chart.series[0].data) == 12
        assert chart.series[0].color == ChartColor.BLUE

    def test_map_trajectory(self, resolver):
        [map_node] = resolver.resolve({"Map": {"trajectory": {"fn": "zigzag"}}})
        assert isinstance(map_node, ResolvedMap)
        assert len(map_node.trajectories[0].points) == 9

    @pytest.mark.parametrize("tag", ["Globe3D", "GlobeTrajectory"])
    def test_globe_aliases(self, resolver, tag):
        [globe] = resolver.resolve({tag: {"trajectory": {"fn": "equatorial"}}})
        assert isinstance(globe, ResolvedGlobe)
        assert len(globe.trajectories[0].points) == 37

    @pytest.mark.parametrize("tag", ["Scatter3D", "PointCloud"])
    def test_point_cloud_aliases(self, resolver, tag):
        [cloud] = resolver.resolve({tag: {"fn": "cube", "samples": 12}})
        assert isinstance(cloud, ResolvedPointCloud)
        assert len(cloud.series[0].points) == 24

    def test_seeded_resolution_reproducible(self, library):
        """Test that two resolvers with the same seed produce identical data."""
        node = {"Chart": {"fn": "random", "noise": 0.3}}
        first = ComponentResolver(library, rng=random.Random(99)).resolve(node)
        second = ComponentResolver(library, rng=random.Random(99)).resolve(node)
        assert dump_node(first[0]) == dump_node(second[0])

    def test_chart_props_from_placeholders(self):
        lib = parse_components(
            """
Sparkline:
  variants:
    default:
      - Chart:
          fn: "{{fn}}"
          samples: "{{n}}"
"""
        )
        resolver = ComponentResolver(lib)
        [chart] = resolver.resolve({"Sparkline": {"fn": "linear", "n": 5}})
        assert [p.y for p in chart.series[0].data] == [0.0, 2.5, 5.0, 7.5, 10.0]


class TestComponents:
    """Tests for component expansion."""

    def test_button_label(self, resolver):
        """Test that a Button instance expands to a bordered box with its label."""
        [box] = resolver.resolve({"Button": {"label": "Save"}})
        assert isinstance(box, ResolvedBox)
        assert box.props.outline == Outline.THIN
        assert box.props.padding == (8, 16)
        assert box.children[0].props.content == "Save"
        assert resolver.diagnostics == []

    def test_variant_selection(self, resolver):
        [box] = resolver.resolve({"Button": {"label": "Go", "variant": "primary"}})
        assert box.props.outline == Outline.THICK
        assert box.props.background == "grey"
        assert box.children[0].props.style == TextStyle.H2

    def test_blank_variant_uses_default(self, resolver):
        [box] = resolver.resolve({"Button": {"label": "Go", "variant": "  "}})
        assert box.props.outline == Outline.THIN

    def test_unknown_component_placeholder(self, resolver):
        """Test that an unknown component yields one dashed placeholder box."""
        nodes = resolver.resolve({"Ghost": {"label": "x"}})
        assert len(nodes) == 1
        [placeholder] = nodes
        assert placeholder.props.outline == Outline.DASHED
        assert placeholder.children[0].props.content == "[Ghost]"
        assert placeholder.children[0].props.style == TextStyle.CAPTION
        assert kinds(resolver) == [DiagnosticKind.UNKNOWN_COMPONENT]
        assert resolver.diagnostics[0].component == "Ghost"

    def test_unknown_variant_empty_box(self, resolver):
        [box] = resolver.resolve({"Button": {"label": "x", "variant": "ghost"}})
        assert isinstance(box, ResolvedBox)
        assert box.children == []
        assert kinds(resolver) == [DiagnosticKind.UNKNOWN_VARIANT]
        assert resolver.diagnostics[0].variant == "ghost"

    def test_multi_node_variant(self, resolver):
        nodes = resolver.resolve({"Pair": {"first": "A", "second": "B"}})
        assert [n.props.content for n in nodes] == ["A", "B"]

    def test_missing_prop_left_verbatim(self, resolver):
        [box] = resolver.resolve({"Button": {}})
        assert box.children[0].props.content == "{{label}}"

    def test_library_not_mutated(self, library, resolver):
        resolver.resolve({"Button": {"label": "Save"}})
        resolver.resolve({"NavList": {"items": ["A"]}})
        default = library.get("Button").variant("default")
        assert default[0]["Box"]["children"][0]["Text"]["content"] == "{{label}}"

    def test_instance_props_not_mutated(self, resolver):
        raw = {"Card": {"title": "T", "children": [{"Text": {"content": "body"}}]}}
        resolver.resolve(raw)
        assert raw == {"Card": {"title": "T", "children": [{"Text": {"content": "body"}}]}}


class TestLinks:
    """Tests for instance links."""

    def test_link_string_applied_to_root_box(self, resolver):
        [box] = resolver.resolve({"Button": {"label": "Pay", "link": "checkout"}})
        assert box.props.link.target == "checkout"

    def test_link_mapping(self, resolver):
        [box] = resolver.resolve({"Button": {"label": "Pay", "link": {"target": "done"}}})
        assert box.props.link.target == "done"

    def test_link_ignored_when_root_is_not_box(self, resolver):
        """Test that a link is dropped when the first node is not a box."""
        nodes = resolver.resolve({"Pair": {"first": "A", "second": "B", "link": "next"}})
        assert all(isinstance(n, ResolvedText) for n in nodes)
        assert resolver.diagnostics == []

    def test_blank_link_ignored(self, resolver):
        [box] = resolver.resolve({"Button": {"label": "Pay", "link": ""}})
        assert box.props.link is None


class TestEach:
    """Tests for $each repetition."""

    def test_one_node_per_item(self, resolver):
        [nav] = resolver.resolve(
            {"NavList": {"items": [{"label": "Home"}, {"label": "Settings"}, {"label": "Help"}]}}
        )
        assert len(nav.children) == 3
        labels = [item.children[0].props.content for item in nav.children]
        assert labels == ["Home", "Settings", "Help"]

    def test_empty_items(self, resolver):
        """Test that an empty array produces no children and no diagnostic."""
        [nav] = resolver.resolve({"NavList": {"items": []}})
        assert nav.children == []
        assert resolver.diagnostics == []

    def test_string_items_become_labels(self, resolver):
        [nav] = resolver.resolve({"NavList": {"items": ["Inbox", "Sent"]}})
        assert [i.children[0].props.content for i in nav.children] == ["Inbox", "Sent"]

    def test_item_variant(self, resolver):
        [nav] = resolver.resolve(
            {"NavList": {"items": [{"label": "A"}, {"label": "B", "variant": "hover"}]}}
        )
        assert nav.children[0].props.background is None
        assert nav.children[1].props.background == "grey"

    def test_missing_source(self, resolver):
        """Test that a missing $each source yields nothing and a diagnostic."""
        [nav] = resolver.resolve({"NavList": {}})
        assert nav.children == []
        assert kinds(resolver) == [DiagnosticKind.EACH_NOT_ARRAY]

    def test_non_array_source(self, resolver):
        [nav] = resolver.resolve({"NavList": {"items": "nope"}})
        assert nav.children == []
        assert kinds(resolver) == [DiagnosticKind.EACH_NOT_ARRAY]

    def test_single_template_node(self):
        lib = ComponentLibrary.model_validate(
            {
                "components": {
                    "Tags": {
                        "variants": {
                            "default": [
                                {
                                    "Box": {
                                        "children": {
                                            "$each": "tags",
                                            "$template": {"Text": {"content": "#{{item.label}}"}},
                                        }
                                    }
                                }
                            ]
                        }
                    }
                }
            }
        )
        [box] = ComponentResolver(lib).resolve({"Tags": {"tags": ["a", "b"]}})
        assert [t.props.content for t in box.children] == ["#a", "#b"]


class TestChildrenSlot:
    """Tests for $children projection."""

    def test_slot_receives_caller_children(self, resolver):
        [card] = resolver.resolve(
            {"Card": {"title": "Profile", "children": [{"Text": {"content": "Body"}}]}}
        )
        title, slot = card.children
        assert title.props.content == "Profile"
        assert [c.props.content for c in slot.children] == ["Body"]

    def test_slot_children_may_use_components(self, resolver):
        [card] = resolver.resolve({"Card": {"title": "T", "children": [{"Button": {"label": "OK"}}]}})
        [button] = card.children[1].children
        assert button.children[0].props.content == "OK"

    def test_slot_children_not_substituted(self, resolver):
        """Test that slot content does not see the component's own props."""
        [card] = resolver.resolve(
            {"Card": {"title": "T", "children": [{"Text": {"content": "{{title}}"}}]}}
        )
        assert card.children[1].children[0].props.content == "{{title}}"

    def test_empty_slot(self, resolver):
        [card] = resolver.resolve({"Card": {"title": "T"}})
        assert card.children[1].children == []


class TestDegradation:
    """Tests for local fallbacks on bad input."""

    def test_unknown_node(self, resolver):
        [box] = resolver.resolve({"widget": {"a": 1}})
        assert isinstance(box, ResolvedBox)
        assert box.children == []
        assert kinds(resolver) == [DiagnosticKind.UNKNOWN_NODE]

    def test_non_mapping_node(self, resolver):
        [box] = resolver.resolve("just text")
        assert isinstance(box, ResolvedBox)
        assert kinds(resolver) == [DiagnosticKind.UNKNOWN_NODE]

    def test_non_list_children_ignored(self, resolver):
        [box] = resolver.resolve({"Box": {"children": "oops"}})
        assert box.children == []

    def test_malformed_field_dropped(self, resolver):
        """Test that an invalid field is dropped and valid fields are kept."""
        [box] = resolver.resolve({"Box": {"gap": "wide", "outline": "thin"}})
        assert box.props.gap is None
        assert box.props.outline == Outline.THIN
        assert kinds(resolver) == [DiagnosticKind.MALFORMED_PROPS]
        assert "gap" in resolver.diagnostics[0].message

    def test_props_not_a_mapping(self, resolver):
        [box] = resolver.resolve({"Box": ["not", "props"]})
        assert box.props.outline is None
        assert kinds(resolver) == [DiagnosticKind.MALFORMED_PROPS]

    def test_diagnostics_logged(self, resolver, caplog):
        with caplog.at_level("WARNING", logger="wirespec.core.resolver"):
            resolver.resolve({"Ghost": {}})
        assert "Component not found: Ghost" in caplog.text


class TestRecursionLimit:
    """Tests for the component nesting guard."""

    def test_self_reference_terminates(self):
        lib = parse_components(
            """
Loop:
  variants:
    default:
      - Box:
          children:
            - Loop: {}
"""
        )
        resolver = ComponentResolver(lib, max_depth=3)
        [outer] = resolver.resolve({"Loop": {}})

        depth = 0
        node = outer
        while node.children:
            node = node.children[0]
            depth += 1
        assert depth == 3
        assert kinds(resolver) == [DiagnosticKind.RECURSION_LIMIT]

    def test_mutual_recursion_terminates(self):
        lib = parse_components(
            """
Ping:
  variants:
    default:
      - Pong: {}
Pong:
  variants:
    default:
      - Ping: {}
"""
        )
        resolver = ComponentResolver(lib)
        [box] = resolver.resolve({"Ping": {}})
        assert isinstance(box, ResolvedBox)
        assert kinds(resolver) == [DiagnosticKind.RECURSION_LIMIT]

    def test_sibling_instances_do_not_accumulate_depth(self, library):
        resolver = ComponentResolver(library, max_depth=2)
        nodes = resolver.resolve_children([{"Button": {"label": str(i)}} for i in range(10)], {})
        assert len(nodes) == 10
        assert resolver.diagnostics == []


class TestResolveFrames:
    """Tests for whole-document resolution."""

    def test_frames_in_order(self, library):
        wireframe = Wireframe(frames=[{"Frame": {"id": "a"}}, {"Frame": {"id": "b"}}])
        frames, diagnostics = resolve_wireframe(wireframe, library)
        assert [f.props.id for f in frames] == ["a", "b"]
        assert diagnostics == []

    def test_multi_node_entry_keeps_first(self, library):
        wireframe = Wireframe(frames=[{"Pair": {"first": "A", "second": "B"}}])
        frames, _ = resolve_wireframe(wireframe, library)
        assert len(frames) == 1
        assert frames[0].props.content == "A"

    def test_empty_entry_skipped(self):
        lib = parse_components("Nothing:\n  variants:\n    default: []\n")
        wireframe = Wireframe(frames=[{"Nothing": {}}, {"Frame": {"id": "kept"}}])
        frames, diagnostics = resolve_wireframe(wireframe, lib)
        assert [f.props.id for f in frames] == ["kept"]
        assert [d.kind for d in diagnostics] == [DiagnosticKind.EMPTY_FRAME]
