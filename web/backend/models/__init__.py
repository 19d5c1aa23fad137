"""Data models for the book template editor API"""

from web.backend.models.requests import (
    AssembleTemplateRequest,
    CustomFormatRequest,
    FormatListResponse,
    FormatResponse,
    GuidesRequest,
    GuidesResponse,
    RectModel,
    ResolveFormatRequest,
    TemplateResponse,
    ToggleSpreadRequest
)

__all__ = [
    "AssembleTemplateRequest",
    "CustomFormatRequest",
    "FormatListResponse",
    "FormatResponse",
    "GuidesRequest",
    "GuidesResponse",
    "RectModel",
    "ResolveFormatRequest",
    "TemplateResponse",
    "ToggleSpreadRequest"
]
