"""POST /api/render — build an SVG document from a JSON description."""

from __future__ import annotations

import logging

from fastapi import APIRouter

from minsvg.models.requests import RenderRequest
from minsvg.models.responses import RenderResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/render", response_model=RenderResponse)
async def render(req: RenderRequest) -> RenderResponse:
    doc = req.build()
    logger.info("Rendering %d paths into viewBox %s", len(req.paths), doc.viewbox)
    return RenderResponse(svg=doc.serialize(), path_count=len(doc.paths))


@router.post("/render/raw", response_model=RenderResponse)
async def render_raw(req: RenderRequest) -> RenderResponse:
    """Same as /render but without the opening <svg> tag."""
    doc = req.build()
    return RenderResponse(svg=doc.serialize_raw(), path_count=len(doc.paths))
