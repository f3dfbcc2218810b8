"""Diagnostic codes and data structures.

Defines issue codes and structured diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Issue codes with unique identifiers.

    Organized by category:
        1000-1999: Document errors (malformed input, unreadable files)
        2000-2999: Schema errors (unexpected value shapes inside a document)
        3000-3999: ICU structural errors (brace balance, mandatory cases)
        4000-4999: Module warnings (locale completeness, placeholder usage)
    """

    # Document errors (1000-1999)
    DOCUMENT_INVALID_JSON = 1001
    DOCUMENT_NOT_OBJECT = 1002
    DOCUMENT_TOO_LARGE = 1003
    DOCUMENT_MISSING_LOCALE = 1004
    DOCUMENT_MISSING_CONTEXT = 1005
    DOCUMENT_UNKNOWN_LOCALE = 1006
    DOCUMENT_INVALID_MODULE_NAME = 1007
    DOCUMENT_READ_FAILED = 1008
    DOCUMENT_INVALID_DECLARATION = 1009

    # Schema errors (2000-2999)
    TRANSLATION_NOT_STRING = 2001
    METADATA_NOT_OBJECT = 2002
    DESCRIPTION_NOT_STRING = 2003
    PLACEHOLDERS_NOT_OBJECT = 2004
    PLACEHOLDER_INFO_NOT_OBJECT = 2005
    PLACEHOLDER_FIELD_INVALID = 2006

    # ICU structural errors (3000-3999)
    ICU_UNMATCHED_CLOSING_BRACE = 3001
    ICU_UNMATCHED_OPENING_BRACE = 3002
    ICU_MISSING_OTHER_CASE = 3003

    # Module warnings (4000-4999)
    MISSING_TRANSLATION = 4001
    UNDECLARED_PLACEHOLDER = 4002
    EMPTY_TRANSLATION = 4003

    @property
    def slug(self) -> str:
        """Kebab-case form used in validation output (e.g. 'missing-translation')."""
        return self.name.lower().replace("_", "-")


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools (IDE extensions, CI reporters).

    Attributes:
        code: Unique issue code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        source_path: ARB file the issue originates from
        locale: Locale of the offending document
        key: Translation key the issue is attached to
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    source_path: str | None = None
    locale: str | None = None
    key: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[TRANSLATION_NOT_STRING]: Value of 'title' must be a string, got int
              --> lib/auth/l10n/auth_en.arb
              = locale: en
              = key: title
              = help: Quote the value in the ARB file

        Returns:
            Formatted error message
        """
        lines = [f"{self.severity}[{self.code.name}]: {self.message}"]
        if self.source_path is not None:
            lines.append(f"  --> {self.source_path}")
        if self.locale is not None:
            lines.append(f"  = locale: {self.locale}")
        if self.key is not None:
            lines.append(f"  = key: {self.key}")
        if self.hint is not None:
            lines.append(f"  = help: {self.hint}")
        return "\n".join(lines)
