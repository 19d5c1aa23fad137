"""
Template API endpoints

Assemble the exportable template document and import saved ones.
"""

from typing import Any, Dict

from fastapi import APIRouter, Body, HTTPException
from pydantic import ValidationError

from book_builder.config.settings import get_profile
from book_builder.errors import MalformedImportDocument
from book_builder.templates.builder import assemble_template
from book_builder.templates.io import export_template, import_template, template_filename
from web.backend.models.requests import AssembleTemplateRequest, TemplateResponse

router = APIRouter()


@router.post("/assemble", response_model=TemplateResponse)
async def assemble(request: AssembleTemplateRequest):
    """
    Join the resolved format with the current element placements.

    Elements without an id (or with a repeated one) get "element-<index>".
    """
    profile = get_profile()
    try:
        template = assemble_template(
            request.format,
            request.elements,
            name=request.name or profile.template_name,
            template_id=request.id or profile.template_id,
        )
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.errors(include_url=False, include_context=False, include_input=False))
    return TemplateResponse(
        success=True,
        message="Template assembled successfully",
        template=export_template(template),
        filename=template_filename(template.name),
    )


@router.post("/import", response_model=TemplateResponse)
async def import_document(document: Dict[str, Any] = Body(...)):
    """
    Import a template document exported earlier.

    The whole document is rejected on any missing field or wrong type.
    """
    try:
        template = import_template(document)
    except MalformedImportDocument as e:
        raise HTTPException(status_code=422, detail={"message": str(e), "errors": e.errors})
    return TemplateResponse(
        success=True,
        message="Template imported successfully",
        template=export_template(template),
        filename=template_filename(template.name),
    )
