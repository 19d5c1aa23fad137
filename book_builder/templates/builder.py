"""
Template assembly

Joins a resolved BookFormat with the element placements reported by the
canvas into a Template. Templates are immutable; every edit helper returns a
new Template with the change applied.
"""

import logging
import uuid
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from book_builder.models.template import BookFormat, ElementType, Template, TemplateElement

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE_ID = "template-1"
DEFAULT_TEMPLATE_NAME = "My Book Template"

ElementInput = Union[TemplateElement, Mapping[str, Any]]


def _element_id(index: int, taken: set) -> str:
    candidate = f"element-{index}"
    while candidate in taken:
        candidate = f"element-{index}-{uuid.uuid4().hex[:6]}"
    return candidate


def _as_fields(element: ElementInput) -> Dict[str, Any]:
    if isinstance(element, TemplateElement):
        return element.model_dump()
    fields = dict(element)
    # Canvas placements may leave out rotation and the placeholder flag
    fields.setdefault("rotation", 0.0)
    if "is_placeholder" not in fields and "isPlaceholder" not in fields:
        kind = fields.get("type")
        fields["is_placeholder"] = getattr(kind, "value", kind) == ElementType.PLACEHOLDER.value
    return fields


def assemble_template(
    book_format: BookFormat,
    elements: Iterable[ElementInput] = (),
    name: Optional[str] = None,
    template_id: Optional[str] = None,
) -> Template:
    """
    Build a Template from a format and element placements.

    Element order is kept as given. Ids are preserved; elements without an id,
    or repeating one already used, get "element-<index>". Dict placements
    without rotation default to 0 and without isPlaceholder follow their type.

    Args:
        book_format: Resolved format
        elements: TemplateElement instances or dicts (snake_case or camelCase keys)
        name: Template name (defaults to DEFAULT_TEMPLATE_NAME)
        template_id: Template id (defaults to DEFAULT_TEMPLATE_ID)
    """
    items: List[Dict[str, Any]] = [_as_fields(e) for e in elements]

    taken = {f["id"] for f in items if f.get("id")}
    seen = set()
    placed: List[TemplateElement] = []
    for index, fields in enumerate(items):
        element_id = fields.get("id")
        if not element_id or element_id in seen:
            element_id = _element_id(index, taken)
            taken.add(element_id)
        seen.add(element_id)
        fields["id"] = element_id
        placed.append(TemplateElement.model_validate(fields))

    template = Template(
        id=template_id or DEFAULT_TEMPLATE_ID,
        name=name or DEFAULT_TEMPLATE_NAME,
        format=book_format,
        elements=placed,
    )
    logger.debug("Assembled template %r with %d element(s) on %s", template.name, len(placed), book_format.id)
    return template


def make_placeholder(name: str, x: float, y: float, width: float, height: float, rotation: float = 0.0, element_id: Optional[str] = None) -> TemplateElement:
    """Named empty slot to be filled later"""
    return TemplateElement(
        id=element_id or f"element-{uuid.uuid4().hex[:12]}",
        type=ElementType.PLACEHOLDER,
        name=name,
        x=x,
        y=y,
        width=width,
        height=height,
        rotation=rotation,
        is_placeholder=True,
    )


def make_image(name: str, src: str, x: float, y: float, width: float, height: float, rotation: float = 0.0, element_id: Optional[str] = None) -> TemplateElement:
    return TemplateElement(
        id=element_id or f"element-{uuid.uuid4().hex[:12]}",
        type=ElementType.IMAGE,
        name=name,
        x=x,
        y=y,
        width=width,
        height=height,
        rotation=rotation,
        is_placeholder=False,
        src=src,
    )


def _index_of(template: Template, element_id: str) -> int:
    for index, element in enumerate(template.elements):
        if element.id == element_id:
            return index
    raise KeyError(f"Element '{element_id}' not found in template '{template.id}'")


def add_element(template: Template, element: TemplateElement) -> Template:
    """Append an element on top of the z-order"""
    return template.model_copy(update={"elements": [*template.elements, element]})


def update_element(template: Template, element_id: str, **changes: Any) -> Template:
    """Move, resize or rotate an element (changes use snake_case field names)"""
    index = _index_of(template, element_id)
    current = template.elements[index]
    if "id" in changes and changes["id"] != element_id:
        raise ValueError("element id cannot be changed")
    updated = TemplateElement.model_validate({**current.model_dump(), **changes})
    elements = list(template.elements)
    elements[index] = updated
    return template.model_copy(update={"elements": elements})


def duplicate_element(template: Template, element_id: str, offset: float = 20.0) -> Template:
    """Copy an element, shifted by offset pixels, directly above the original"""
    index = _index_of(template, element_id)
    source = template.elements[index]
    taken = {e.id for e in template.elements}
    copy = source.model_copy(update={
        "id": _element_id(len(template.elements), taken),
        "name": f"{source.name} copy",
        "x": source.x + offset,
        "y": source.y + offset,
    })
    elements = list(template.elements)
    elements.insert(index + 1, copy)
    return template.model_copy(update={"elements": elements})


def remove_element(template: Template, element_id: str) -> Template:
    index = _index_of(template, element_id)
    elements = [e for i, e in enumerate(template.elements) if i != index]
    return template.model_copy(update={"elements": elements})


def replace_format(template: Template, book_format: BookFormat) -> Template:
    """Swap in a newly resolved format; element positions are left as they are"""
    return template.model_copy(update={"format": book_format})


def rename_template(template: Template, name: str) -> Template:
    return template.model_copy(update={"name": name or DEFAULT_TEMPLATE_NAME})
