"""
Template data models for the book template editor

Defines book formats, placed elements and the exportable template document.
Attribute names are snake_case; the JSON document uses the camelCase aliases.
"""

from pydantic import BaseModel, Field, StrictBool, StrictStr, model_validator
from typing import List, Optional
from enum import Enum


class ElementType(str, Enum):
    """Types of placed elements"""
    IMAGE = "image"
    TEXT = "text"
    PLACEHOLDER = "placeholder"


class Dimensions(BaseModel):
    """Width and height in inches"""
    width: float = Field(..., gt=0, strict=True, description="Width in inches")
    height: float = Field(..., gt=0, strict=True, description="Height in inches")

    class Config:
        frozen = True


class BookFormat(BaseModel):
    """A trim size with its derived printing geometry"""
    id: StrictStr = Field(..., description="Stable format identifier")
    name: StrictStr = Field(..., description="Display label")
    no_bleed: Dimensions = Field(..., alias="noBleed", description="Trim size (final cut)")
    with_bleed: Dimensions = Field(..., alias="withBleed", description="Trim size plus bleed on every edge")
    is_spread: StrictBool = Field(..., alias="isSpread", description="Cover spread (back, spine, front)")
    gutter_width: float = Field(..., ge=0, strict=True, alias="gutterWidth", description="Gutter in inches")
    spine_width: Optional[float] = Field(None, strict=True, alias="spineWidth", description="Spine in inches, spreads only")
    page_count: Optional[int] = Field(None, strict=True, alias="pageCount", description="Interior page count")

    class Config:
        frozen = True
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "id": "digestSpread",
                "name": "Digest Cover",
                "noBleed": {"width": 11, "height": 8.5},
                "withBleed": {"width": 11.5, "height": 8.75},
                "isSpread": True,
                "gutterWidth": 0.5,
                "spineWidth": 0.7357,
                "pageCount": 300
            }
        }

    @model_validator(mode="after")
    def _spine_only_on_spreads(self) -> "BookFormat":
        if not self.is_spread and self.spine_width is not None:
            raise ValueError("spineWidth is only valid on spread formats")
        return self


class TemplateElement(BaseModel):
    """Single placed element (image, text or placeholder slot)"""
    id: StrictStr = Field(..., description="Unique element ID within the template")
    type: ElementType = Field(..., description="Element type")
    name: StrictStr = Field(..., description="Display and export label")
    x: float = Field(..., strict=True, description="Left edge in device pixels")
    y: float = Field(..., strict=True, description="Top edge in device pixels")
    width: float = Field(..., strict=True, description="Scaled width in device pixels")
    height: float = Field(..., strict=True, description="Scaled height in device pixels")
    rotation: float = Field(..., strict=True, description="Clockwise rotation in degrees")
    is_placeholder: StrictBool = Field(..., alias="isPlaceholder", description="Named slot to fill later")
    content: Optional[StrictStr] = Field(None, description="Text content")
    src: Optional[StrictStr] = Field(None, description="Image reference")

    class Config:
        frozen = True
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "id": "element-0",
                "type": "placeholder",
                "name": "Author photo",
                "x": 36,
                "y": 36,
                "width": 200,
                "height": 150,
                "rotation": 0,
                "isPlaceholder": True
            }
        }

    @model_validator(mode="after")
    def _placeholder_consistency(self) -> "TemplateElement":
        if self.is_placeholder != (self.type == ElementType.PLACEHOLDER):
            raise ValueError("isPlaceholder must be true exactly when type is 'placeholder'")
        if self.is_placeholder and self.src is not None:
            raise ValueError("placeholders carry no image source")
        return self


class Template(BaseModel):
    """Complete template document: one format plus its elements"""
    id: StrictStr = Field(..., description="Template ID")
    name: StrictStr = Field(..., description="Template name")
    format: BookFormat = Field(..., description="Resolved book format")
    elements: List[TemplateElement] = Field(
        ...,
        description="Placed elements in z-order"
    )

    class Config:
        frozen = True
        populate_by_name = True

    @model_validator(mode="after")
    def _unique_element_ids(self) -> "Template":
        seen = set()
        for element in self.elements:
            if element.id in seen:
                raise ValueError(f"duplicate element id '{element.id}'")
            seen.add(element.id)
        return self

    def to_document(self) -> dict:
        """JSON-ready dict using the camelCase field names, optional fields omitted"""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
