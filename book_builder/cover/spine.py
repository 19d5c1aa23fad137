from enum import Enum

# Print specification rules after the Lulu book creation guide.
# All measurements are in inches.

PAPERBACK_PAGES_PER_INCH = 444
PAPERBACK_COVER_ALLOWANCE_IN = 0.06

# Hardcover spine schedule: (max page count, spine inches). Paper stock
# thickness table, not a formula.
HARDCOVER_SPINE_TABLE = (
    (84, 0.25),
    (140, 0.5),
    (168, 0.625),
    (194, 0.688),
    (222, 0.75),
    (250, 0.813),
    (278, 0.875),
    (306, 0.938),
    (334, 1.0),
    (360, 1.063),
    (388, 1.125),
    (416, 1.188),
    (444, 1.25),
    (472, 1.313),
    (500, 1.375),
    (528, 1.438),
    (556, 1.5),
    (582, 1.563),
)
HARDCOVER_MIN_PAGES = 24
HARDCOVER_MAX_SPINE_IN = 1.625


class Binding(str, Enum):
    PAPERBACK = "paperback"
    HARDCOVER = "hardcover"


def gutter_width(page_count: int) -> float:
    """Gutter allowance for the binding edge, from page count."""
    if page_count < 60:
        return 0.0
    if page_count <= 150:
        return 0.125
    if page_count <= 400:
        return 0.5
    if page_count <= 600:
        return 0.625
    return 0.75


def paperback_spine_width(page_count: int) -> float:
    # No clamping; negative counts are out of contract
    return page_count / PAPERBACK_PAGES_PER_INCH + PAPERBACK_COVER_ALLOWANCE_IN


def hardcover_spine_width(page_count: int) -> float:
    if page_count < HARDCOVER_MIN_PAGES:
        return 0.0
    for max_pages, width in HARDCOVER_SPINE_TABLE:
        if page_count <= max_pages:
            return width
    return HARDCOVER_MAX_SPINE_IN


def spine_width(page_count: int, binding: Binding) -> float:
    if Binding(binding) is Binding.HARDCOVER:
        return hardcover_spine_width(page_count)
    return paperback_spine_width(page_count)
