"""ARB exception hierarchy with structured diagnostics.

All exceptions optionally store Diagnostic objects for rich error information.
Most of the library reports problems as returned values; exceptions are raised
only at explicit boundaries (document decoding, strict aggregation).

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .codes import Diagnostic

if TYPE_CHECKING:
    from arblexengine.localization.models import AggregationIssue


class ArbError(Exception):
    """Base exception for all ARB processing errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize ArbError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class ArbDocumentError(ArbError):
    """ARB document is not valid structured data.

    Raised by parse_document() for invalid JSON, a non-object root or an
    oversized source. The aggregator and loader convert it into a reported
    issue; it never aborts a whole run.
    """


class ArbSchemaError(ArbError):
    """Value inside an ARB document has an unexpected shape.

    Examples:
    - Translation value is a number or array
    - "@key" metadata is not an object
    - "placeholders" is not an object
    """


class ArbAggregationError(ArbError):
    """Aggregation collected issues while running in strict mode.

    Raised only after the whole module has been processed, so the error
    carries every issue rather than the first one.

    Attributes:
        issues: All issues collected for the module
    """

    def __init__(
        self,
        message: str | Diagnostic,
        issues: tuple[AggregationIssue, ...] = (),
    ) -> None:
        """Initialize ArbAggregationError.

        Args:
            message: Error message string OR Diagnostic object
            issues: Issues collected during aggregation
        """
        super().__init__(message)
        self.issues = issues
