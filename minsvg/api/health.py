"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from minsvg import __version__
from minsvg.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)
