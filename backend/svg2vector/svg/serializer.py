"""Write Android VectorDrawable XML from a parsed SvgDocument."""

from __future__ import annotations

import math
from xml.sax.saxutils import quoteattr

from svg2vector.models.svg_document import GroupNode, LeafNode, Node, SvgDocument
from svg2vector.svg.constants import ANDROID_NAMESPACE, INDENT_UNIT
from svg2vector.svg.path_builder import format_number

# Header attribute lines line up under ``xmlns:android``.
_HEADER_INDENT = INDENT_UNIT * 2


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _attr(name: str, value: str) -> str:
    return f"{name}={quoteattr(value)}"


def serialize_leaf(leaf: LeafNode, level: int) -> list[str]:
    """Render one leaf as a self-closing <path>; pathData always comes first."""
    indent = INDENT_UNIT * level
    attr_indent = INDENT_UNIT * (level + 1)

    attrs = [_attr("android:pathData", leaf.path_data)]
    for key, value in leaf.attributes.items():
        if value and value != "none":
            attrs.append(_attr(key, value))

    lines = [f"{indent}<path"]
    lines.extend(f"{attr_indent}{a}" for a in attrs)
    lines[-1] += "/>"
    return lines


def _serialize_node(node: Node, level: int, preserve_group_indent: bool) -> list[str]:
    if isinstance(node, LeafNode):
        return serialize_leaf(node, level) if node.has_content() else []

    # Groups have no VectorDrawable markup; only their children render.
    child_level = level + 1 if preserve_group_indent and node.parent is not None else level
    lines: list[str] = []
    for child in node.children:
        lines.extend(_serialize_node(child, child_level, preserve_group_indent))
    return lines


def serialize_vector_drawable(document: SvgDocument, preserve_group_indent: bool = True) -> str:
    """Generate VectorDrawable XML.

    With ``preserve_group_indent`` every enclosing source <g> adds one
    indentation level to its leaves; otherwise all leaves sit at level 1.
    """
    if document.viewbox is None:
        raise ValueError("Cannot serialize a document without a viewBox")

    scale = document.scale_factor or 1
    width = round_half_up(document.effective_width * scale)
    height = round_half_up(document.effective_height * scale)
    viewport_width = document.viewbox[2]
    viewport_height = document.viewbox[3]

    lines = [
        f'<vector xmlns:android="{ANDROID_NAMESPACE}"',
        f'{_HEADER_INDENT}android:width="{width}dp"',
        f'{_HEADER_INDENT}android:height="{height}dp"',
        f'{_HEADER_INDENT}android:viewportWidth="{format_number(viewport_width)}"',
        f'{_HEADER_INDENT}android:viewportHeight="{format_number(viewport_height)}">',
    ]

    root: GroupNode | None = document.root
    if root is not None:
        lines.extend(_serialize_node(root, 1, preserve_group_indent))

    lines.append("</vector>")
    return "\n".join(lines) + "\n"
