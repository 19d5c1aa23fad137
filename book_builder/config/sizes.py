# Book trim sizes (in inches), after the Lulu book creation guide.
# Catalog withBleed values are curated per entry; custom sizes add 2 * BLEED_IN.

import logging
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional

from book_builder.errors import MissingCompanionFormat, UnknownFormatId
from book_builder.models.template import BookFormat, Dimensions

logger = logging.getLogger(__name__)

INCH = 72.0  # points per inch, also the default screen scale

BLEED_IN = 0.125  # per edge
SAFETY_IN = 0.25  # inside the trim line

SPREAD_SUFFIX = "Spread"


def _fmt(format_id: str, name: str, trim: tuple, bled: tuple, is_spread: bool = False) -> BookFormat:
    return BookFormat(
        id=format_id,
        name=name,
        no_bleed=Dimensions(width=trim[0], height=trim[1]),
        with_bleed=Dimensions(width=bled[0], height=bled[1]),
        is_spread=is_spread,
        gutter_width=0.125 if is_spread else 0.0,
        spine_width=0.0 if is_spread else None,
    )


BOOK_FORMATS: Dict[str, BookFormat] = {
    "pocketbook": _fmt("pocketbook", "Pocketbook", (4.25, 6.875), (4.5, 7.125)),
    "digest": _fmt("digest", "Digest", (5.5, 8.5), (5.75, 8.75)),
    "a5": _fmt("a5", "A5", (5.83, 8.27), (6.08, 8.52)),
    "royal": _fmt("royal", "Royal", (6.14, 9.21), (6.39, 9.46)),
    "usTrade": _fmt("usTrade", "US Trade", (6.0, 9.0), (6.25, 9.25)),
    "comicBook": _fmt("comicBook", "Comic Book", (6.63, 10.25), (6.88, 10.5)),
    # Spreads (for covers)
    "pocketbookSpread": _fmt("pocketbookSpread", "Pocketbook Cover", (8.5, 6.875), (9.0, 7.125), is_spread=True),
    "digestSpread": _fmt("digestSpread", "Digest Cover", (11.0, 8.5), (11.5, 8.75), is_spread=True),
}

# Explicit single <-> spread links; entries missing here fall back to the suffix convention
COMPANIONS: Dict[str, str] = {
    "pocketbook": "pocketbookSpread",
    "pocketbookSpread": "pocketbook",
    "digest": "digestSpread",
    "digestSpread": "digest",
}


class FormatCatalog:
    """Read-only table of named book formats"""

    def __init__(
        self,
        formats: Optional[Mapping[str, BookFormat]] = None,
        companions: Optional[Mapping[str, str]] = None,
    ):
        """
        Args:
            formats: id -> BookFormat table (defaults to BOOK_FORMATS)
            companions: explicit single <-> spread links (defaults to COMPANIONS)
        """
        if formats is None:
            formats = BOOK_FORMATS
            if companions is None:
                companions = COMPANIONS
        self._formats = MappingProxyType(dict(formats))
        self._companions = MappingProxyType(dict(companions or {}))

    def __contains__(self, format_id: object) -> bool:
        return format_id in self._formats

    def __iter__(self) -> Iterator[str]:
        return iter(self._formats)

    def __len__(self) -> int:
        return len(self._formats)

    def ids(self) -> List[str]:
        return list(self._formats)

    def formats(self) -> List[BookFormat]:
        return list(self._formats.values())

    def get(self, format_id: str) -> BookFormat:
        """Exact-match lookup. Raises UnknownFormatId for ids not in the table."""
        try:
            return self._formats[format_id]
        except KeyError:
            logger.debug("Lookup of unknown format id %r", format_id)
            raise UnknownFormatId(format_id, self._formats.keys()) from None

    def companion_id(self, format_id: str) -> str:
        """
        Id of the spread entry for a single-page format, or the single-page
        entry for a spread.

        Raises:
            UnknownFormatId: format_id is not in the catalog
            MissingCompanionFormat: no companion entry exists
        """
        fmt = self.get(format_id)
        want_spread = not fmt.is_spread

        candidate = self._companions.get(format_id)
        if candidate is None:
            if want_spread:
                candidate = f"{format_id}{SPREAD_SUFFIX}"
            elif format_id.endswith(SPREAD_SUFFIX):
                candidate = format_id[: -len(SPREAD_SUFFIX)]

        if candidate is None or candidate not in self._formats:
            raise MissingCompanionFormat(format_id, want_spread)
        if self._formats[candidate].is_spread != want_spread:
            raise MissingCompanionFormat(format_id, want_spread)
        return candidate


DEFAULT_CATALOG = FormatCatalog()
