"""
Format API endpoints

Catalog listing and format resolution for the editor controls.
"""

from fastapi import APIRouter, HTTPException

from book_builder.config.settings import get_profile
from book_builder.config.sizes import DEFAULT_CATALOG
from book_builder.errors import InvalidDimension, UnknownFormatId
from book_builder.formats.resolver import FormatResolver, validate_custom_dimensions
from book_builder.models.template import BookFormat
from web.backend.models.requests import (
    CustomFormatRequest,
    FormatListResponse,
    FormatResponse,
    ResolveFormatRequest,
    ToggleSpreadRequest
)

router = APIRouter()

resolver = FormatResolver(DEFAULT_CATALOG)


def _document(fmt: BookFormat) -> dict:
    return fmt.model_dump(mode="json", by_alias=True, exclude_none=True)


@router.get("/", response_model=FormatListResponse)
async def list_formats():
    """List all catalog formats."""
    formats = [_document(f) for f in resolver.catalog.formats()]
    return FormatListResponse(success=True, formats=formats, total=len(formats))


@router.get("/{format_id}", response_model=FormatResponse)
async def get_format(format_id: str):
    """
    Get a catalog entry as authored (no page count applied).

    Args:
        format_id: Catalog format id
    """
    try:
        fmt = resolver.catalog.get(format_id)
    except UnknownFormatId as e:
        raise HTTPException(status_code=404, detail=str(e))
    return FormatResponse(success=True, message="Format retrieved successfully", format=_document(fmt))


@router.post("/resolve", response_model=FormatResponse)
async def resolve_format(request: ResolveFormatRequest):
    """Resolve a catalog format for a page count and binding."""
    try:
        fmt = resolver.from_catalog(request.format_id, request.page_count, request.binding)
    except UnknownFormatId as e:
        raise HTTPException(status_code=404, detail=str(e))
    return FormatResponse(success=True, message="Format resolved successfully", format=_document(fmt))


@router.post("/custom", response_model=FormatResponse)
async def custom_format(request: CustomFormatRequest):
    """Build a format from custom trim dimensions (bounded by the editor profile)."""
    profile = get_profile()
    try:
        validate_custom_dimensions(request.width, request.height, profile.min_custom_in, profile.max_custom_in)
    except InvalidDimension as e:
        raise HTTPException(status_code=422, detail=str(e))
    fmt = resolver.custom(request.width, request.height, request.is_spread, request.page_count, request.binding)
    return FormatResponse(success=True, message="Custom format created successfully", format=_document(fmt))


@router.post("/toggle-spread", response_model=FormatResponse)
async def toggle_spread(request: ToggleSpreadRequest):
    """
    Switch between single page and cover spread.

    When the catalog has no companion entry the format comes back unchanged
    with changed=false so the editor can disable its toggle.
    """
    try:
        result = resolver.toggle_spread(request.format, request.is_spread, request.page_count, request.binding)
    except UnknownFormatId as e:
        raise HTTPException(status_code=404, detail=str(e))
    if result.reason is not None:
        message = str(result.reason)
    elif result.changed:
        message = "Format switched successfully"
    else:
        message = "Format already in requested mode"
    return FormatResponse(success=True, message=message, format=_document(result.format), changed=result.changed)
