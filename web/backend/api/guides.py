"""
Guide API endpoints

Trim, safety, gutter and spine regions for the canvas overlays.
"""

from dataclasses import asdict

from fastapi import APIRouter, HTTPException

from book_builder.config.settings import get_profile
from book_builder.renderer.guides import compute_guides, fit_scale
from web.backend.models.requests import GuidesRequest, GuidesResponse

router = APIRouter()


@router.post("", response_model=GuidesResponse)
@router.post("/", response_model=GuidesResponse, include_in_schema=False)
async def guides(request: GuidesRequest):
    """
    Compute guide regions in device units.

    Recomputed from scratch on every call; the editor requests new guides
    after any format or toggle change. A guide is only returned when both the
    request and the active profile show it. With a container size the
    response also carries the zoom that fits the bled page in it.
    """
    profile = get_profile()
    scale = request.scale or profile.dpi
    layout = compute_guides(
        request.format,
        scale=scale,
        show_gutter=request.show_gutter and profile.show_gutter,
        show_bleed=request.show_bleed and profile.show_bleed,
        show_safety=request.show_safety and profile.show_safety,
    )

    zoom = None
    if request.container_width is not None or request.container_height is not None:
        if request.container_width is None or request.container_height is None:
            raise HTTPException(status_code=422, detail="container_width and container_height must be given together")
        zoom = fit_scale(request.format, request.container_width, request.container_height, dpi=scale, margin=profile.fit_margin)

    return GuidesResponse(success=True, fit_scale=zoom, **asdict(layout))
