from __future__ import annotations

import sys
from pathlib import Path

import pytest


def _ensure_project_root_on_path() -> None:
    """Guarantee the repository root is discoverable for absolute imports."""

    root = Path(__file__).resolve().parent.parent
    root_str = str(root)
    if root_str not in sys.path:
        sys.path.insert(0, root_str)


_ensure_project_root_on_path()

from book_builder.config.sizes import FormatCatalog  # noqa: E402
from book_builder.cover.spine import Binding  # noqa: E402
from book_builder.formats.resolver import FormatResolver  # noqa: E402
from book_builder.templates.builder import make_image, make_placeholder  # noqa: E402


@pytest.fixture
def resolver() -> FormatResolver:
    return FormatResolver(FormatCatalog())


@pytest.fixture
def us_trade_120(resolver: FormatResolver):
    return resolver.from_catalog("usTrade", 120, Binding.PAPERBACK)


@pytest.fixture
def two_elements():
    return [
        make_image("Cover photo", "images/cover.jpg", 10, 20, 300, 200, rotation=15, element_id="element-0"),
        make_placeholder("Author photo", 36, 400, 120.5, 150, element_id="element-1"),
    ]
