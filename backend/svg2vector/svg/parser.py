"""SVG parser — builds an SvgDocument (group/leaf tree) from raw SVG text.

Uses ``xml.etree.ElementTree`` for the DOM. Elements are classified as
convertible shapes, groups, unsupported constructs (warned about, children
still walked) or unknown elements (walked silently).
"""

from __future__ import annotations

import logging
import math
import re
import xml.etree.ElementTree as ET

from svg2vector.models.svg_document import Diagnostics, GroupNode, LeafNode, SvgDocument
from svg2vector.svg.attributes import apply_style, style_value
from svg2vector.svg.constants import (
    CONVERTIBLE_ELEMENTS,
    GROUP_ELEMENT,
    ROOT_ELEMENT,
    UNIT_SUFFIXES,
    UNSUPPORTED_ELEMENTS,
)
from svg2vector.svg.shapes import extract_shape, local_name, parse_number

logger = logging.getLogger(__name__)

_VIEWBOX_SPLIT_RE = re.compile(r"[\s,]+")

ParentMap = dict[ET.Element, ET.Element]


def parse_svg(svg_text: str, scale_factor: float = 1.0) -> SvgDocument:
    """Parse raw SVG text. Never raises; problems land in ``document.diagnostics``."""
    document = SvgDocument(scale_factor=scale_factor)
    diagnostics = document.diagnostics

    try:
        dom_root = ET.fromstring(svg_text)
    except Exception as e:
        diagnostics.error(f"Parsing error: {e}")
        logger.info("SVG rejected: %s", e)
        return document

    svg_elements = [el for el in dom_root.iter() if local_name(el.tag) == ROOT_ELEMENT]
    if len(svg_elements) != 1:
        diagnostics.error("Not a valid SVG file: missing or multiple <svg> elements")
        return document

    svg_element = svg_elements[0]
    parse_dimensions(document, svg_element)
    if document.viewbox is None:
        diagnostics.error('Missing "viewBox" attribute in <svg> element')
        return document

    parents: ParentMap = {child: parent for parent in svg_element.iter() for child in parent}
    root = GroupNode(name="root")
    document.root = root
    parse_children(root, svg_element, svg_element, parents, diagnostics)

    logger.info(
        "Parsed SVG: %d paths, %d warnings, size %sx%s, viewBox %s",
        len(document.leaves()),
        len(diagnostics.warnings),
        document.effective_width,
        document.effective_height,
        document.viewbox,
    )
    return document


def strip_units(value: str) -> str:
    value = value.strip()
    for suffix in UNIT_SUFFIXES:
        if value.endswith(suffix):
            return value[: -len(suffix)]
    return value


def parse_dimensions(document: SvgDocument, svg_element: ET.Element) -> None:
    """Read width/height/viewBox off the root element.

    Percentages and non-finite numbers count as unset. A missing viewBox is
    synthesized from a positive width and height.
    """
    for raw_name, raw_value in svg_element.attrib.items():
        name = local_name(raw_name)
        if raw_value.strip().endswith("%"):
            continue
        value = strip_units(raw_value)

        if name == "width":
            parsed = parse_number(value)
            if math.isfinite(parsed):
                document.width = parsed
        elif name == "height":
            parsed = parse_number(value)
            if math.isfinite(parsed):
                document.height = parsed
        elif name == "viewBox":
            parts = [parse_number(p) for p in _VIEWBOX_SPLIT_RE.split(value.strip())]
            if len(parts) == 4 and all(math.isfinite(p) for p in parts):
                document.viewbox = (parts[0], parts[1], parts[2], parts[3])

    if document.viewbox is None and document.width > 0 and document.height > 0:
        document.viewbox = (0.0, 0.0, document.width, document.height)


def parse_children(
    group: GroupNode,
    element: ET.Element,
    svg_root: ET.Element,
    parents: ParentMap,
    diagnostics: Diagnostics,
) -> None:
    for index, child in enumerate(element):
        tag = local_name(child.tag)
        if not tag:
            continue

        if tag in CONVERTIBLE_ELEMENTS:
            leaf = LeafNode(name=f"{tag}_{index}")
            extract_element(leaf, child, tag, svg_root, parents, diagnostics)
            if leaf.has_content():
                group.add_child(leaf)
        elif tag == GROUP_ELEMENT:
            child_group = GroupNode(name=f"group_{index}")
            group.add_child(child_group)
            parse_children(child_group, child, svg_root, parents, diagnostics)
        elif tag in UNSUPPORTED_ELEMENTS:
            logger.warning("Unsupported element <%s> skipped", tag)
            diagnostics.warning(f"<{tag}> element is not supported")
            parse_children(group, child, svg_root, parents, diagnostics)
        else:
            parse_children(group, child, svg_root, parents, diagnostics)


def extract_element(
    leaf: LeafNode,
    element: ET.Element,
    tag: str,
    svg_root: ET.Element,
    parents: ParentMap,
    diagnostics: Diagnostics,
) -> None:
    if is_hidden(element, svg_root, parents):
        return

    for style in inherited_styles(element, svg_root, parents):
        apply_style(leaf, style, diagnostics)

    extract_shape(tag, leaf, element, diagnostics)


def _is_display_none(element: ET.Element) -> bool:
    if element.get("display") == "none":
        return True
    return style_value(element.get("style"), "display") == "none"


def _ancestors(element: ET.Element, svg_root: ET.Element, parents: ParentMap):
    """Yield parents nearest-first, stopping before the <svg> root."""
    current = parents.get(element)
    while current is not None and current is not svg_root:
        yield current
        current = parents.get(current)


def is_hidden(element: ET.Element, svg_root: ET.Element, parents: ParentMap) -> bool:
    """True if the element or any ancestor below the root has display none."""
    if _is_display_none(element):
        return True
    return any(_is_display_none(a) for a in _ancestors(element, svg_root, parents))


def inherited_styles(element: ET.Element, svg_root: ET.Element, parents: ParentMap) -> list[str]:
    """Style strings of ancestor groups, oldest ancestor first."""
    styles = [
        a.get("style")
        for a in _ancestors(element, svg_root, parents)
        if local_name(a.tag) == GROUP_ELEMENT and a.get("style")
    ]
    styles.reverse()
    return styles
