"""Data models for the book template editor"""

from book_builder.models.template import (
    BookFormat,
    Dimensions,
    ElementType,
    Template,
    TemplateElement
)

__all__ = [
    "BookFormat",
    "Dimensions",
    "ElementType",
    "Template",
    "TemplateElement"
]
