"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    supported_elements: list[str] = Field(default_factory=list)


class ConversionResult(BaseModel):
    """Outcome of one SVG → VectorDrawable conversion."""

    success: bool
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    xml: str | None = None
    width: float = 0.0
    height: float = 0.0
    viewbox: tuple[float, float, float, float] | None = None


class ConvertFileResponse(ConversionResult):
    output_path: str | None = None
    message: str = ""
