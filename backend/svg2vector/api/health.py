"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from svg2vector.models.responses import HealthResponse
from svg2vector.svg.constants import CONVERTIBLE_ELEMENTS, GROUP_ELEMENT

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version="0.1.0",
        supported_elements=sorted(CONVERTIBLE_ELEMENTS | {GROUP_ELEMENT}),
    )
