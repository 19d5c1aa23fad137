"""API routes for the book template editor"""

from web.backend.api import formats, guides, templates

__all__ = ["formats", "guides", "templates"]
