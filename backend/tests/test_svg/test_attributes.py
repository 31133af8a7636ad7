"""Tests for presentation attribute mapping."""

from __future__ import annotations

import pytest

from svg2vector.models.svg_document import Diagnostics, LeafNode
from svg2vector.svg.attributes import (
    PresentationProperty,
    apply_attribute,
    apply_style,
    parse_style,
    style_value,
)


@pytest.mark.parametrize(
    "name, target",
    [
        ("stroke", "android:strokeColor"),
        ("stroke-opacity", "android:strokeAlpha"),
        ("stroke-width", "android:strokeWidth"),
        ("stroke-linejoin", "android:strokeLineJoin"),
        ("stroke-linecap", "android:strokeLineCap"),
        ("fill", "android:fillColor"),
        ("fill-opacity", "android:fillAlpha"),
        ("fill-rule", "android:fillType"),
        ("clip", "android:clip"),
        ("opacity", "android:fillAlpha"),
    ],
)
def test_lookup_targets(name, target):
    prop = PresentationProperty.lookup(name)
    assert prop is not None
    assert prop.target == target


@pytest.mark.parametrize("name", ["transform", "id", "d", "font-size", "Fill"])
def test_lookup_unrecognized(name):
    assert PresentationProperty.lookup(name) is None


def test_unrecognized_attribute_ignored():
    leaf = LeafNode(name="p")
    assert apply_attribute(leaf, "transform", "rotate(45)") is False
    assert leaf.attributes == {}


def test_colors_resolved():
    leaf = LeafNode(name="p")
    apply_attribute(leaf, "fill", "red")
    apply_attribute(leaf, "stroke", "var(--stroke-0, #d1d1d6)")
    assert leaf.attributes == {
        "android:fillColor": "#FF0000",
        "android:strokeColor": "#D1D1D6",
    }


def test_fill_rule_spelling():
    leaf = LeafNode(name="p")
    apply_attribute(leaf, "fill-rule", "evenodd")
    assert leaf.attributes["android:fillType"] == "evenOdd"
    apply_attribute(leaf, "fill-rule", "nonzero")
    assert leaf.attributes["android:fillType"] == "nonZero"
    apply_attribute(leaf, "fill-rule", "inherit")
    assert leaf.attributes["android:fillType"] == "inherit"


def test_opacity_and_fill_opacity_share_slot_last_wins():
    leaf = LeafNode(name="p")
    apply_attribute(leaf, "fill-opacity", "0.5")
    apply_attribute(leaf, "opacity", "0.25")
    assert leaf.attributes == {"android:fillAlpha": "0.25"}


def test_overwrite_keeps_first_write_position():
    leaf = LeafNode(name="p")
    apply_attribute(leaf, "fill", "#000000")
    apply_attribute(leaf, "stroke", "#FFFFFF")
    apply_attribute(leaf, "fill", "#123456")
    assert list(leaf.attributes) == ["android:fillColor", "android:strokeColor"]
    assert leaf.attributes["android:fillColor"] == "#123456"


def test_parse_style():
    assert parse_style("fill: red; stroke-width:2;;bogus; :x; y:") == [
        ("fill", "red"),
        ("stroke-width", "2"),
    ]
    assert parse_style(None) == []


def test_apply_style_maps_only_known_properties():
    leaf = LeafNode(name="p")
    apply_style(leaf, "fill:#abc; display:none; stroke-linecap: round")
    assert leaf.attributes == {
        "android:fillColor": "#AABBCC",
        "android:strokeLineCap": "round",
    }


def test_style_value_last_declaration():
    assert style_value("opacity:1; opacity:0", "opacity") == "0"
    assert style_value("fill:red", "opacity") is None


def test_unresolved_color_records_warning():
    leaf = LeafNode(name="p")
    diagnostics = Diagnostics()
    apply_attribute(leaf, "fill", "currentColor", diagnostics)
    assert leaf.attributes["android:fillColor"] == "currentColor"
    assert diagnostics.warnings == ['Unsupported color value "currentColor" for fill']
    assert diagnostics.errors == []
