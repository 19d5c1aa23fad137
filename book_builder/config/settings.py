import os
from pydantic import BaseModel
from typing import Dict, Literal

from book_builder.config.sizes import INCH

BindingName = Literal["paperback", "hardcover"]

PROFILE_ENV = "BOOK_BUILDER_PROFILE"


class EditorProfile(BaseModel):
    dpi: float = INCH
    page_count: int = 60
    binding: BindingName = "paperback"
    template_name: str = "My Book Template"
    template_id: str = "template-1"
    min_custom_in: float = 3.0
    max_custom_in: float = 12.0
    show_bleed: bool = True
    show_safety: bool = True
    show_gutter: bool = True
    fit_margin: float = 0.9

    class Config:
        frozen = True


SCREEN = EditorProfile()
PRINT = EditorProfile(dpi=300.0)

PROFILES: Dict[str, EditorProfile] = {
    "screen": SCREEN,
    "print": PRINT,
}


def get_profile(name: str | None = None) -> EditorProfile:
    """Profile by name; falls back to $BOOK_BUILDER_PROFILE, then 'screen'."""
    key = name or os.getenv(PROFILE_ENV) or "screen"
    if key not in PROFILES:
        raise ValueError(f"Unknown profile '{key}'. Available: {list(PROFILES.keys())}")
    return PROFILES[key]
