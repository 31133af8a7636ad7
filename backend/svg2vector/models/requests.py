"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ConvertRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")
    scale_factor: float | None = Field(
        default=None,
        gt=0,
        description="Multiplier for the output dp size (defaults to settings.default_scale_factor)",
    )


class ConvertFileRequest(BaseModel):
    svg_path: str = Field(..., min_length=1, description="Local SVG path or http(s) URL")
    output_path: str = Field(..., min_length=1, description="Where to write the VectorDrawable XML")
    scale_factor: float | None = Field(default=None, gt=0)
