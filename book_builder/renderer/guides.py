from dataclasses import dataclass
from typing import Optional

from book_builder.config.sizes import BLEED_IN, INCH, SAFETY_IN
from book_builder.models.template import BookFormat

# Guide regions in device units (same units as element x/y/width/height).
# Origin is the top-left corner of the bled page.


@dataclass(frozen=True)
class Rect:
    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height


@dataclass(frozen=True)
class GuideLayout:
    scale: float
    page: Rect
    trim: Optional[Rect] = None
    safety: Optional[Rect] = None
    center_x: Optional[float] = None  # spreads only
    gutter: Optional[Rect] = None
    spine: Optional[Rect] = None


def _inset(r: Rect, d: float) -> Rect:
    return Rect(r.left + d, r.top + d, r.width - 2 * d, r.height - 2 * d)


def _center_band(page: Rect, band_width: float) -> Rect:
    return Rect(page.width / 2.0 - band_width / 2.0, 0.0, band_width, page.height)


def compute_guides(
    book_format: BookFormat,
    scale: float = INCH,
    show_gutter: bool = True,
    show_bleed: bool = True,
    show_safety: bool = True,
) -> GuideLayout:
    """
    Trim, safety, gutter and spine regions for a resolved format.

    scale is device units per inch (72 for the screen canvas). The gutter
    band is kept even at zero width; the spine band only exists when the
    spine width is positive. Both are centred on the page midpoint and may
    overlap. Turning a guide off leaves its region as None; the safety
    rectangle keeps its position when the trim guide is hidden.
    """
    width = book_format.with_bleed.width * scale
    height = book_format.with_bleed.height * scale

    page = Rect(0.0, 0.0, width, height)
    trim_rect = _inset(page, BLEED_IN * scale)
    trim = trim_rect if show_bleed else None
    safety = _inset(trim_rect, SAFETY_IN * scale) if show_safety else None

    if not book_format.is_spread:
        return GuideLayout(scale=scale, page=page, trim=trim, safety=safety)

    gutter = _center_band(page, book_format.gutter_width * scale) if show_gutter else None
    spine = None
    if book_format.spine_width and book_format.spine_width > 0:
        spine = _center_band(page, book_format.spine_width * scale)

    return GuideLayout(
        scale=scale,
        page=page,
        trim=trim,
        safety=safety,
        center_x=width / 2.0,
        gutter=gutter,
        spine=spine,
    )


def fit_scale(book_format: BookFormat, container_width: float, container_height: float, dpi: float = INCH, margin: float = 0.9) -> float:
    """Zoom that fits the bled page inside a viewport, leaving (1 - margin) free"""
    width = book_format.with_bleed.width * dpi
    height = book_format.with_bleed.height * dpi
    return min(container_width / width, container_height / height) * margin
