"""
Error types raised by the book geometry engine.

All errors are local and deterministic: a call either succeeds or its input
was invalid. None of them are retryable.
"""

from typing import Iterable, Optional


class BookBuilderError(ValueError):
    """Base class for engine errors"""


class UnknownFormatId(BookBuilderError):
    """Catalog lookup with an id that is not in the table"""

    def __init__(self, format_id: str, available: Iterable[str] = ()):
        self.format_id = format_id
        self.available = list(available)
        super().__init__(f"Unknown format id '{format_id}'. Available: {self.available}")


class MissingCompanionFormat(BookBuilderError):
    """No single-page/spread companion exists for a catalog entry"""

    def __init__(self, format_id: str, want_spread: bool):
        self.format_id = format_id
        self.want_spread = want_spread
        kind = "spread" if want_spread else "single-page"
        super().__init__(f"Format '{format_id}' has no {kind} companion in the catalog")


class InvalidDimension(BookBuilderError):
    """Custom width/height outside the printable range"""

    def __init__(self, field: str, value: float, minimum: float, maximum: float):
        self.field = field
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            f"Custom {field} {value} in is outside the printable range {minimum}-{maximum} in"
        )


class MalformedImportDocument(BookBuilderError):
    """Template JSON that cannot be imported as a whole"""

    def __init__(self, message: str, errors: Optional[list] = None):
        self.errors = errors or []
        super().__init__(message)
