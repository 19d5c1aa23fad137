"""
Request and response models for the book template editor API
"""

from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional

from book_builder.cover.spine import Binding
from book_builder.models.template import BookFormat


class ResolveFormatRequest(BaseModel):
    """Resolve a catalog format for a page count and binding"""
    format_id: str = Field(..., description="Catalog format id")
    page_count: int = Field(default=60, ge=0, description="Interior page count")
    binding: Binding = Field(default=Binding.PAPERBACK, description="Binding used for spine width")

    class Config:
        json_schema_extra = {
            "example": {
                "format_id": "digestSpread",
                "page_count": 300,
                "binding": "hardcover"
            }
        }


class CustomFormatRequest(BaseModel):
    """Build a format from user-entered trim dimensions"""
    width: float = Field(..., description="Trim width in inches")
    height: float = Field(..., description="Trim height in inches")
    is_spread: bool = Field(default=False, description="Cover spread")
    page_count: int = Field(default=60, ge=0, description="Interior page count")
    binding: Binding = Field(default=Binding.PAPERBACK, description="Binding used for spine width")


class ToggleSpreadRequest(BaseModel):
    """Switch the current format between single page and spread"""
    format: BookFormat = Field(..., description="Currently resolved format")
    is_spread: bool = Field(..., description="Desired spread state")
    page_count: int = Field(default=60, ge=0)
    binding: Binding = Field(default=Binding.PAPERBACK)


class FormatResponse(BaseModel):
    """Resolved format response"""
    success: bool
    message: str
    format: Optional[Dict[str, Any]] = None
    changed: bool = True


class FormatListResponse(BaseModel):
    success: bool
    formats: List[Dict[str, Any]]
    total: int


class GuidesRequest(BaseModel):
    """Compute guide regions for a resolved format"""
    format: BookFormat
    scale: Optional[float] = Field(default=None, gt=0, description="Device units per inch (defaults to the profile dpi)")
    show_gutter: bool = Field(default=True)
    show_bleed: bool = Field(default=True, description="Trim guide (bleed edge)")
    show_safety: bool = Field(default=True, description="Safety margin guide")
    container_width: Optional[float] = Field(default=None, gt=0, description="Viewport width for the fit-to-viewport zoom")
    container_height: Optional[float] = Field(default=None, gt=0, description="Viewport height for the fit-to-viewport zoom")


class RectModel(BaseModel):
    left: float
    top: float
    width: float
    height: float


class GuidesResponse(BaseModel):
    success: bool
    scale: float
    page: RectModel
    trim: Optional[RectModel] = None
    safety: Optional[RectModel] = None
    center_x: Optional[float] = None
    gutter: Optional[RectModel] = None
    spine: Optional[RectModel] = None
    fit_scale: Optional[float] = None


class AssembleTemplateRequest(BaseModel):
    """Join a resolved format with the element placements from the canvas"""
    format: BookFormat
    elements: List[Dict[str, Any]] = Field(default_factory=list)
    name: Optional[str] = None
    id: Optional[str] = None


class TemplateResponse(BaseModel):
    success: bool
    message: str
    template: Optional[Dict[str, Any]] = None
    filename: str = ""
