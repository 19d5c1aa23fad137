"""Template assembly, editing and JSON import/export"""

from book_builder.templates.builder import (
    DEFAULT_TEMPLATE_ID,
    DEFAULT_TEMPLATE_NAME,
    add_element,
    assemble_template,
    duplicate_element,
    make_image,
    make_placeholder,
    remove_element,
    rename_template,
    replace_format,
    update_element
)
from book_builder.templates.io import (
    dumps,
    export_template,
    import_template,
    load_template,
    loads,
    save_template,
    template_filename
)

__all__ = [
    "DEFAULT_TEMPLATE_ID",
    "DEFAULT_TEMPLATE_NAME",
    "add_element",
    "assemble_template",
    "duplicate_element",
    "make_image",
    "make_placeholder",
    "remove_element",
    "rename_template",
    "replace_format",
    "update_element",
    "dumps",
    "export_template",
    "import_template",
    "load_template",
    "loads",
    "save_template",
    "template_filename"
]
