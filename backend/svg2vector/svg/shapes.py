"""Shape normalizer — turns SVG primitives into pathData on a LeafNode.

Each ``extract_*`` function walks the element's attributes in source order,
mapping presentation attributes onto the leaf and collecting geometry. A
shape whose geometry cannot be extracted is left with empty path data, which
the tree builder treats as "drop this node". No diagnostics are recorded for
dropped shapes.
"""

from __future__ import annotations

import math
import re
import xml.etree.ElementTree as ET
from typing import Callable

from svg2vector.models.svg_document import Diagnostics, LeafNode
from svg2vector.svg.attributes import apply_attribute, apply_style, style_value
from svg2vector.svg.path_builder import PathBuilder

# Leading number, like a lenient float parse: "10px" → 10, "abc" → NaN
_LEADING_NUMBER_RE = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_POINT_SPLIT_RE = re.compile(r"[\s,]+")
# A digit glued to a minus sign: "10-5" must read as "10,-5"
_DIGIT_MINUS_RE = re.compile(r"(\d)-")


def parse_number(value: str | None) -> float:
    if value is None:
        return math.nan
    match = _LEADING_NUMBER_RE.match(value)
    if not match:
        return math.nan
    return float(match.group(1))


def _finite(*values: float) -> bool:
    return all(math.isfinite(v) for v in values)


def is_fully_transparent(style: str | None) -> bool:
    """True when the element's own style declares ``opacity`` of exactly 0."""
    value = style_value(style, "opacity")
    return value is not None and parse_number(value) == 0


def fix_path_data(d: str) -> str:
    return _DIGIT_MINUS_RE.sub(r"\1,-", d)


def local_name(tag: object) -> str:
    """Strip an ElementTree ``{namespace}`` prefix. Comments and PIs yield ""."""
    if not isinstance(tag, str):
        return ""
    return tag.split("}")[-1] if "}" in tag else tag


def _visit_attributes(
    leaf: LeafNode,
    element: ET.Element,
    geometry: dict[str, str],
    diagnostics: Diagnostics | None,
) -> bool:
    """Map presentation attributes, collect geometry attributes named in ``geometry``.

    Returns False when the element is fully transparent. ``style`` is applied
    after every plain attribute so its declarations take precedence.
    """
    style = None
    for raw_name, value in element.attrib.items():
        name = local_name(raw_name)
        if name == "style":
            style = value
        elif name in geometry:
            geometry[name] = value
        else:
            apply_attribute(leaf, name, value, diagnostics)

    apply_style(leaf, style, diagnostics)
    return not is_fully_transparent(style)


def extract_path(leaf: LeafNode, element: ET.Element, diagnostics: Diagnostics | None = None) -> None:
    geometry = {"d": ""}
    if not _visit_attributes(leaf, element, geometry, diagnostics):
        return
    leaf.path_data = fix_path_data(geometry["d"])


def extract_rect(leaf: LeafNode, element: ET.Element, diagnostics: Diagnostics | None = None) -> None:
    geometry = {"x": "0", "y": "0", "width": "", "height": ""}
    if not _visit_attributes(leaf, element, geometry, diagnostics):
        return

    x, y = parse_number(geometry["x"]), parse_number(geometry["y"])
    width, height = parse_number(geometry["width"]), parse_number(geometry["height"])
    if not _finite(x, y, width, height):
        return

    leaf.path_data = (
        PathBuilder()
        .absolute_move_to(x, y)
        .relative_horizontal_to(width)
        .relative_vertical_to(height)
        .relative_horizontal_to(-width)
        .relative_close()
        .render()
    )


def extract_circle(leaf: LeafNode, element: ET.Element, diagnostics: Diagnostics | None = None) -> None:
    geometry = {"cx": "0", "cy": "0", "r": "0"}
    if not _visit_attributes(leaf, element, geometry, diagnostics):
        return

    cx, cy, r = (parse_number(geometry[k]) for k in ("cx", "cy", "r"))
    if not _finite(cx, cy, r) or r <= 0:
        return

    # Two half-arcs: left edge → right edge → back.
    leaf.path_data = (
        PathBuilder()
        .absolute_move_to(cx, cy)
        .relative_move_to(-r, 0)
        .relative_arc_to(r, r, False, True, True, 2 * r, 0)
        .relative_arc_to(r, r, False, True, True, -2 * r, 0)
        .render()
    )


def parse_points(points: str) -> list[tuple[float, float]]:
    """Parse a ``points`` list into (x, y) pairs; a trailing odd coordinate is ignored."""
    values = [parse_number(p) for p in _POINT_SPLIT_RE.split(points.strip()) if p]
    return [(values[i], values[i + 1]) for i in range(0, len(values) - 1, 2)]


def extract_polygon(leaf: LeafNode, element: ET.Element, diagnostics: Diagnostics | None = None) -> None:
    geometry = {"points": ""}
    if not _visit_attributes(leaf, element, geometry, diagnostics):
        return

    points = parse_points(geometry["points"])
    if not points or not all(_finite(x, y) for x, y in points):
        return

    base_x, base_y = points[0]
    builder = PathBuilder().absolute_move_to(base_x, base_y)
    for x, y in points[1:]:
        builder.relative_line_to(x - base_x, y - base_y)
        base_x, base_y = x, y
    leaf.path_data = builder.relative_close().render()


def extract_line(leaf: LeafNode, element: ET.Element, diagnostics: Diagnostics | None = None) -> None:
    geometry = {"x1": "0", "y1": "0", "x2": "0", "y2": "0"}
    if not _visit_attributes(leaf, element, geometry, diagnostics):
        return

    x1, y1, x2, y2 = (parse_number(geometry[k]) for k in ("x1", "y1", "x2", "y2"))
    if not _finite(x1, y1, x2, y2):
        return

    leaf.path_data = PathBuilder().absolute_move_to(x1, y1).absolute_line_to(x2, y2).render()


SHAPE_EXTRACTORS: dict[str, Callable[[LeafNode, ET.Element, Diagnostics | None], None]] = {
    "path": extract_path,
    "rect": extract_rect,
    "circle": extract_circle,
    "polygon": extract_polygon,
    "line": extract_line,
}


def extract_shape(
    tag: str,
    leaf: LeafNode,
    element: ET.Element,
    diagnostics: Diagnostics | None = None,
) -> None:
    extractor = SHAPE_EXTRACTORS.get(tag)
    if extractor is not None:
        extractor(leaf, element, diagnostics)
