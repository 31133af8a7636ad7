"""POST /api/convert — SVG → VectorDrawable conversion."""

from __future__ import annotations

import asyncio
import logging

from fastapi import APIRouter, Depends, HTTPException

from svg2vector.config import Settings
from svg2vector.dependencies import get_settings
from svg2vector.models.requests import ConvertFileRequest, ConvertRequest
from svg2vector.models.responses import ConversionResult, ConvertFileResponse
from svg2vector.svg.converter import convert, format_result_message
from svg2vector.svg.source import (
    SourceError,
    confine_path,
    fetch_svg_content,
    is_remote,
    write_vector_drawable_file,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/convert", response_model=ConversionResult)
async def convert_svg(
    req: ConvertRequest,
    settings: Settings = Depends(get_settings),
) -> ConversionResult:
    if len(req.svg.encode("utf-8")) > settings.max_svg_bytes:
        raise HTTPException(status_code=413, detail=f"SVG exceeds {settings.max_svg_bytes} bytes")

    return convert(
        req.svg,
        scale_factor=req.scale_factor or settings.default_scale_factor,
        preserve_group_indent=settings.preserve_group_indent,
    )


def _convert_file(req: ConvertFileRequest, settings: Settings) -> ConvertFileResponse:
    """Blocking fetch → convert → write; run off the event loop."""
    if is_remote(req.svg_path):
        if not settings.allow_remote_sources:
            raise SourceError(f"Remote sources are disabled: {req.svg_path}")
        source = req.svg_path
    else:
        source = str(confine_path(req.svg_path, settings.input_root))
    target = confine_path(req.output_path, settings.output_root)

    svg = fetch_svg_content(
        source,
        timeout=settings.fetch_timeout_seconds,
        max_bytes=settings.max_svg_bytes,
    )
    result = convert(
        svg,
        scale_factor=req.scale_factor or settings.default_scale_factor,
        preserve_group_indent=settings.preserve_group_indent,
    )

    output_path = None
    if result.success and result.xml is not None:
        output_path = str(write_vector_drawable_file(target, result.xml))

    return ConvertFileResponse(
        **result.model_dump(),
        output_path=output_path,
        message=format_result_message(result, output_path),
    )


@router.post("/convert/file", response_model=ConvertFileResponse)
async def convert_file(
    req: ConvertFileRequest,
    settings: Settings = Depends(get_settings),
) -> ConvertFileResponse:
    try:
        return await asyncio.to_thread(_convert_file, req, settings)
    except SourceError as e:
        logger.warning("convert/file failed for %s: %s", req.svg_path, e)
        raise HTTPException(status_code=400, detail=str(e)) from e
