"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from curvecut import __version__
from curvecut.engine.registry import get_registry
from curvecut.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        transforms_registered=len(get_registry()),
    )
