"""Presentation property → VectorDrawable attribute mapping.

The same mapping serves plain presentation attributes (``fill="red"``) and
``style`` declarations (``style="fill: red"``). Callers apply plain attributes
first and style declarations second, so style wins for the same property.
"""

from __future__ import annotations

import enum
import logging
from types import MappingProxyType

from svg2vector.models.svg_document import Diagnostics, LeafNode
from svg2vector.svg.colors import color_to_hex, is_valid_android_color

logger = logging.getLogger(__name__)


class PresentationProperty(str, enum.Enum):
    STROKE = "stroke"
    STROKE_OPACITY = "stroke-opacity"
    STROKE_WIDTH = "stroke-width"
    STROKE_LINEJOIN = "stroke-linejoin"
    STROKE_LINECAP = "stroke-linecap"
    FILL = "fill"
    FILL_OPACITY = "fill-opacity"
    FILL_RULE = "fill-rule"
    CLIP = "clip"
    OPACITY = "opacity"

    @classmethod
    def lookup(cls, name: str) -> PresentationProperty | None:
        """Return the property for a source name, or None when unrecognized."""
        try:
            return cls(name)
        except ValueError:
            return None

    @property
    def target(self) -> str:
        return _TARGET_ATTRIBUTES[self]

    @property
    def is_color(self) -> bool:
        return self in (PresentationProperty.STROKE, PresentationProperty.FILL)


_TARGET_ATTRIBUTES = MappingProxyType({
    PresentationProperty.STROKE: "android:strokeColor",
    PresentationProperty.STROKE_OPACITY: "android:strokeAlpha",
    PresentationProperty.STROKE_WIDTH: "android:strokeWidth",
    PresentationProperty.STROKE_LINEJOIN: "android:strokeLineJoin",
    PresentationProperty.STROKE_LINECAP: "android:strokeLineCap",
    PresentationProperty.FILL: "android:fillColor",
    PresentationProperty.FILL_OPACITY: "android:fillAlpha",
    PresentationProperty.FILL_RULE: "android:fillType",
    PresentationProperty.CLIP: "android:clip",
    # Shares the fillAlpha slot with fill-opacity; last write wins.
    PresentationProperty.OPACITY: "android:fillAlpha",
})

FILL_RULE_MAP = MappingProxyType({
    "nonzero": "nonZero",
    "evenodd": "evenOdd",
})


def map_value(prop: PresentationProperty, value: str) -> str:
    """Transform a source value into its target spelling."""
    if prop.is_color:
        return color_to_hex(value)
    if prop is PresentationProperty.FILL_RULE:
        return FILL_RULE_MAP.get(value, value)
    return value


def apply_attribute(
    leaf: LeafNode,
    name: str,
    value: str,
    diagnostics: Diagnostics | None = None,
) -> bool:
    """Store one presentation property on the leaf. Returns False if ``name`` is not mapped."""
    prop = PresentationProperty.lookup(name)
    if prop is None:
        return False

    mapped = map_value(prop, value)
    if prop.is_color and not is_valid_android_color(mapped):
        logger.debug("Unresolved color %r for %s on %s", value, name, leaf.name)
        message = f'Unsupported color value "{value}" for {name}'
        # Inherited group styles reach every leaf; report each value once
        if diagnostics is not None and message not in diagnostics.warnings:
            diagnostics.warning(message)
    leaf.set_attribute(prop.target, mapped)
    return True


def parse_style(style: str | None) -> list[tuple[str, str]]:
    """Split ``"prop: value; prop2: value2"`` into trimmed (name, value) pairs."""
    if not style:
        return []

    declarations: list[tuple[str, str]] = []
    for part in style.split(";"):
        name, sep, value = part.partition(":")
        name = name.strip()
        value = value.strip()
        if sep and name and value:
            declarations.append((name, value))
    return declarations


def apply_style(
    leaf: LeafNode,
    style: str | None,
    diagnostics: Diagnostics | None = None,
) -> None:
    for name, value in parse_style(style):
        apply_attribute(leaf, name, value, diagnostics)


def style_value(style: str | None, name: str) -> str | None:
    """Return the last value declared for ``name`` in a style string."""
    found = None
    for prop, value in parse_style(style):
        if prop == name:
            found = value
    return found
