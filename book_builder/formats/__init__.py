"""Format resolution: catalog or custom trim sizes to concrete BookFormats"""

from book_builder.formats.resolver import (
    CUSTOM_FORMAT_ID,
    FormatResolver,
    SpreadToggleResult,
    validate_custom_dimensions
)

__all__ = [
    "CUSTOM_FORMAT_ID",
    "FormatResolver",
    "SpreadToggleResult",
    "validate_custom_dimensions"
]
