"""SVG → VectorDrawable conversion entry point.

``convert()`` is the boundary the API layer talks to: text in, a
ConversionResult out. It never raises.
"""

from __future__ import annotations

import logging

from svg2vector.models.responses import ConversionResult
from svg2vector.svg.parser import parse_svg
from svg2vector.svg.path_builder import format_number
from svg2vector.svg.serializer import serialize_vector_drawable

logger = logging.getLogger(__name__)


def convert(
    svg_text: str,
    scale_factor: float = 1.0,
    preserve_group_indent: bool = True,
) -> ConversionResult:
    try:
        document = parse_svg(svg_text, scale_factor=scale_factor)
        if not document.can_convert():
            return ConversionResult(
                success=False,
                errors=document.errors,
                warnings=document.warnings,
            )
        xml = serialize_vector_drawable(document, preserve_group_indent=preserve_group_indent)
    except Exception as e:
        logger.exception("Unexpected failure converting SVG")
        return ConversionResult(success=False, errors=[f"Conversion error: {e}"])

    return ConversionResult(
        success=True,
        warnings=document.warnings,
        xml=xml,
        width=document.effective_width,
        height=document.effective_height,
        viewbox=document.viewbox,
    )


def format_result_message(result: ConversionResult, output_path: str | None = None) -> str:
    """Human-readable summary of a conversion, as reported back to callers."""
    if not result.success:
        return "Failed to convert SVG to Vector Drawable.\n\nErrors:\n" + "\n".join(result.errors)

    lines = ["Successfully converted SVG to Vector Drawable!", ""]
    if output_path:
        lines.append(f"Output saved to: {output_path}")
    if result.warnings:
        lines += ["", "Warnings:", *result.warnings]

    viewbox = ", ".join(format_number(v) for v in result.viewbox or ())
    lines += [
        "",
        "Vector Drawable details:",
        f"- Width: {format_number(result.width)}",
        f"- Height: {format_number(result.height)}",
        f"- ViewBox: [{viewbox}]",
    ]
    return "\n".join(lines)
