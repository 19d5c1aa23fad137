"""
Format resolver

Turns a catalog entry or custom trim size, plus page count and binding, into
a concrete BookFormat. Every operation returns a new value; neither the
catalog nor the input format is modified.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from book_builder.config.sizes import BLEED_IN, DEFAULT_CATALOG, FormatCatalog
from book_builder.cover.spine import Binding, gutter_width, spine_width
from book_builder.errors import InvalidDimension, MissingCompanionFormat
from book_builder.models.template import BookFormat, Dimensions

logger = logging.getLogger(__name__)

CUSTOM_FORMAT_ID = "custom"
CUSTOM_FORMAT_NAME = "Custom"


@dataclass(frozen=True)
class SpreadToggleResult:
    format: BookFormat
    changed: bool
    reason: Optional[MissingCompanionFormat] = None

    @property
    def is_noop(self) -> bool:
        return not self.changed


def validate_custom_dimensions(width: float, height: float, minimum: float = 3.0, maximum: float = 12.0) -> None:
    """
    Boundary check for user-entered trim sizes. The resolver itself assumes
    width and height already passed this. Sizes must be positive even when a
    caller passes a non-positive minimum.

    Raises:
        InvalidDimension: a value is <= 0, not a number, or outside
            [minimum, maximum]
    """
    for field, value in (("width", width), ("height", height)):
        if value <= 0 or not minimum <= value <= maximum:
            raise InvalidDimension(field, value, minimum, maximum)


class FormatResolver:
    """Builds BookFormat values from an injected catalog"""

    def __init__(self, catalog: FormatCatalog = DEFAULT_CATALOG):
        self.catalog = catalog

    def _derive(self, base: BookFormat, page_count: int, binding: Binding) -> BookFormat:
        spine = spine_width(page_count, binding) if base.is_spread else None
        return base.model_copy(update={
            "gutter_width": gutter_width(page_count),
            "page_count": page_count,
            "spine_width": spine,
        })

    def from_catalog(self, format_id: str, page_count: int, binding: Binding = Binding.PAPERBACK) -> BookFormat:
        """
        Resolve a catalog entry for the given page count and binding.

        Raises:
            UnknownFormatId: format_id is not in the catalog
        """
        base = self.catalog.get(format_id)
        fmt = self._derive(base, page_count, Binding(binding))
        logger.debug(
            "Resolved %s at %d pages (%s): gutter=%s spine=%s",
            format_id, page_count, Binding(binding).value, fmt.gutter_width, fmt.spine_width,
        )
        return fmt

    def custom(
        self,
        width: float,
        height: float,
        is_spread: bool = False,
        page_count: int = 0,
        binding: Binding = Binding.PAPERBACK,
    ) -> BookFormat:
        """Custom trim size. Bleed is added on every edge."""
        base = BookFormat(
            id=CUSTOM_FORMAT_ID,
            name=CUSTOM_FORMAT_NAME,
            no_bleed=Dimensions(width=width, height=height),
            with_bleed=Dimensions(width=width + 2 * BLEED_IN, height=height + 2 * BLEED_IN),
            is_spread=is_spread,
            gutter_width=0.0,
        )
        return self._derive(base, page_count, Binding(binding))

    def reapply(self, current: BookFormat, page_count: int, binding: Binding = Binding.PAPERBACK) -> BookFormat:
        """Re-derive gutter and spine after a page count or binding change"""
        return self._derive(current, page_count, Binding(binding))

    def toggle_spread(
        self,
        current: BookFormat,
        is_spread: bool,
        page_count: int,
        binding: Binding = Binding.PAPERBACK,
    ) -> SpreadToggleResult:
        """
        Switch between a single-page format and its cover spread.

        Custom formats flip their spread flag. Catalog formats move to their
        companion entry; when none exists the current format comes back
        unchanged with changed=False and the reason attached.
        """
        if current.is_spread == is_spread:
            return SpreadToggleResult(format=current, changed=False)

        if current.id == CUSTOM_FORMAT_ID:
            flipped = current.model_copy(update={"is_spread": is_spread})
            return SpreadToggleResult(format=self._derive(flipped, page_count, Binding(binding)), changed=True)

        try:
            companion = self.catalog.companion_id(current.id)
        except MissingCompanionFormat as exc:
            logger.info("Spread toggle ignored: %s", exc)
            return SpreadToggleResult(format=current, changed=False, reason=exc)

        return SpreadToggleResult(format=self.from_catalog(companion, page_count, binding), changed=True)
