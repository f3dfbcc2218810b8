"""Validation result types for ICU messages and parsed modules.

Two levels of feedback:
- Message-level: IcuValidationResult for a single translation string
- Module-level: ValidationResult aggregating errors and warnings across
  every key and locale of a ParsedModule

All results are values, never exceptions, so callers can batch-report
every issue in a module before deciding whether to fail a build.

Python 3.13+.
"""

from dataclasses import dataclass

from .codes import DiagnosticCode

__all__ = [
    "IcuValidationResult",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
]


# Maximum content length before truncation when sanitizing
_SANITIZE_MAX_CONTENT_LENGTH: int = 100


# ============================================================================
# MESSAGE-LEVEL RESULT
# ============================================================================


@dataclass(frozen=True, slots=True)
class IcuValidationResult:
    """Outcome of validating the ICU structure of one message.

    Attributes:
        valid: True when the message passed every check
        error: Human-readable reason when invalid, otherwise None
        code: Diagnostic code when invalid, otherwise None

    Example:
        >>> validate_icu_syntax("{count, plural, other{x}}").valid
        True
        >>> validate_icu_syntax("{count, plural, =0{x}}").error
        "plural message is missing required 'other' case"
    """

    valid: bool
    error: str | None = None
    code: DiagnosticCode | None = None

    def __bool__(self) -> bool:
        return self.valid

    @staticmethod
    def ok() -> "IcuValidationResult":
        """Create a passing result."""
        return IcuValidationResult(valid=True)

    @staticmethod
    def fail(code: DiagnosticCode, error: str) -> "IcuValidationResult":
        """Create a failing result.

        Args:
            code: Diagnostic code identifying the failed check
            error: Human-readable reason

        Returns:
            IcuValidationResult with valid=False
        """
        return IcuValidationResult(valid=False, error=error, code=code)


# ============================================================================
# MODULE-LEVEL ERROR & WARNING TYPES
# ============================================================================


@dataclass(frozen=True, slots=True)
class ValidationError:
    """Structured error found while validating a module.

    Attributes:
        code: Error code (e.g., "icu-missing-other-case")
        message: Human-readable error message
        key: Translation key the error belongs to
        locale: Locale of the offending translation
        content: The offending translation text

    Security Note:
        The `content` field holds translation text. Use format(sanitize=True)
        to truncate or redact it before logging in shared CI output.
    """

    code: str
    message: str
    key: str
    locale: str
    content: str

    def format(
        self,
        *,
        sanitize: bool = False,
        redact_content: bool = False,
    ) -> str:
        """Format error as human-readable string.

        Args:
            sanitize: If True, truncate content to a bounded length.
            redact_content: If True (and sanitize=True), completely redact
                           content instead of truncating.

        Returns:
            Formatted error string with optional content sanitization.
        """
        if sanitize:
            if redact_content:
                content_display = "[content redacted]"
            elif len(self.content) > _SANITIZE_MAX_CONTENT_LENGTH:
                content_display = self.content[:_SANITIZE_MAX_CONTENT_LENGTH] + "..."
            else:
                content_display = self.content
        else:
            content_display = self.content

        return (
            f"[{self.code}] {self.key} ({self.locale}): {self.message} "
            f"(content: {content_display!r})"
        )


@dataclass(frozen=True, slots=True)
class ValidationWarning:
    """Structured warning found while validating a module.

    Attributes:
        code: Warning code (e.g., "missing-translation")
        message: Human-readable warning message
        key: Translation key the warning belongs to
        locale: Locale concerned, if any
    """

    code: str
    message: str
    key: str
    locale: str | None = None


# ============================================================================
# UNIFIED VALIDATION RESULT
# ============================================================================


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Validation result for a whole module.

    Attributes:
        errors: ICU structural errors (build-blocking at the caller's discretion)
        warnings: Informational findings (incomplete locales, undeclared names)

    Example:
        >>> result = validate_module(module)
        >>> result.is_valid
        True
        >>> result.warning_count
        2
    """

    errors: tuple[ValidationError, ...]
    warnings: tuple[ValidationWarning, ...]

    @property
    def is_valid(self) -> bool:
        """Check if validation passed.

        Warnings do not affect validity - they're informational.
        """
        return len(self.errors) == 0

    @property
    def error_count(self) -> int:
        """Get number of errors."""
        return len(self.errors)

    @property
    def warning_count(self) -> int:
        """Get number of warnings."""
        return len(self.warnings)

    @staticmethod
    def valid() -> "ValidationResult":
        """Create a valid result with no errors or warnings."""
        return ValidationResult(errors=(), warnings=())

    def format(
        self,
        *,
        sanitize: bool = False,
        redact_content: bool = False,
        include_warnings: bool = True,
    ) -> str:
        """Format validation result as human-readable string.

        Args:
            sanitize: If True, truncate error content.
            redact_content: If True (and sanitize=True), completely redact
                           error content instead of truncating.
            include_warnings: If True (default), include warnings in output.

        Returns:
            Formatted string with errors and optionally warnings.
        """
        lines: list[str] = []

        if self.errors:
            lines.append(f"Errors ({len(self.errors)}):")
            for error in self.errors:
                lines.append(f"  {error.format(sanitize=sanitize, redact_content=redact_content)}")

        if include_warnings and self.warnings:
            lines.append(f"Warnings ({len(self.warnings)}):")
            for warning in self.warnings:
                locale = f" ({warning.locale})" if warning.locale else ""
                lines.append(f"  [{warning.code}] {warning.key}{locale}: {warning.message}")

        if not lines:
            return "Validation passed: no errors or warnings"

        return "\n".join(lines)
