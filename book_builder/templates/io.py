"""
Template import/export

Serializes templates to the JSON document exchanged with the editor and
reads them back. Import is all-or-nothing: any problem rejects the document.
"""

import json
import logging
import re
from pathlib import Path
from typing import Any, Mapping, Union

from pydantic import ValidationError

from book_builder.errors import MalformedImportDocument
from book_builder.models.template import Template

logger = logging.getLogger(__name__)


def export_template(template: Template) -> dict:
    """Template as a JSON-ready dict (camelCase keys, absent optionals omitted)"""
    return template.to_document()


def dumps(template: Template, indent: int = 2) -> str:
    return json.dumps(export_template(template), indent=indent)


def import_template(document: Mapping[str, Any]) -> Template:
    """
    Validate a parsed document into a Template.

    Raises:
        MalformedImportDocument: missing fields, wrong types or broken invariants
    """
    if not isinstance(document, Mapping):
        raise MalformedImportDocument(f"Template document must be a JSON object, got {type(document).__name__}")
    try:
        return Template.model_validate(dict(document))
    except ValidationError as e:
        errors = e.errors(include_url=False, include_context=False, include_input=False)
        locations = ", ".join(".".join(str(p) for p in err["loc"]) or "<root>" for err in errors)
        raise MalformedImportDocument(f"Invalid template document ({locations})", errors=errors) from e


def loads(text: Union[str, bytes]) -> Template:
    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedImportDocument(f"Template document is not valid JSON: {e}") from e
    return import_template(document)


def save_template(template: Template, path: Union[str, Path]) -> Path:
    """Write the template JSON, creating parent directories as needed"""
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    with open(file_path, "w", encoding="utf-8") as f:
        f.write(dumps(template))
    logger.info("Exported template %r to %s", template.name, file_path)
    return file_path


def load_template(path: Union[str, Path]) -> Template:
    file_path = Path(path)
    with open(file_path, "r", encoding="utf-8") as f:
        template = loads(f.read())
    logger.info("Imported template %r from %s (%d elements)", template.name, file_path, len(template.elements))
    return template


def template_filename(name: str, extension: str = "json") -> str:
    """Download name for a template, e.g. 'My Book Template' -> 'my-book-template.json'"""
    slug = re.sub(r"\s+", "-", name.strip().lower()) or "template"
    return f"{slug}.{extension}"
