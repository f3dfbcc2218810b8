"""Module-level validation of parsed translation keys.

Runs every translation of a ParsedModule through the ICU validator and
collects locale-completeness and placeholder findings, so a build can
report all problems in one pass before deciding whether to fail.

Architecture:
    - validate_module(): Main entry point, orchestrates validation passes
    - _check_icu_structure(): Pass 1 - Brace balance and mandatory cases
    - _check_completeness(): Pass 2 - Missing and empty translations
    - _check_placeholders(): Pass 3 - Names used but not declared

Python 3.13+.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from arblexengine.diagnostics import (
    DiagnosticCode,
    ValidationError,
    ValidationResult,
    ValidationWarning,
)
from arblexengine.introspection import extract_placeholders
from arblexengine.syntax import validate_icu_syntax

if TYPE_CHECKING:
    from collections.abc import Sequence

    from arblexengine.localization import LocaleCode, ParsedModule, TranslationKey

__all__ = ["validate_module"]

logger = logging.getLogger(__name__)


def _check_icu_structure(key: TranslationKey) -> list[ValidationError]:
    errors: list[ValidationError] = []
    for locale, text in key.translations.items():
        result = validate_icu_syntax(text)
        if result.valid:
            continue
        assert result.code is not None and result.error is not None  # Failing results carry both
        errors.append(
            ValidationError(
                code=result.code.slug,
                message=result.error,
                key=key.key,
                locale=locale,
                content=text,
            )
        )
    return errors


def _check_completeness(
    key: TranslationKey,
    locales: Sequence[LocaleCode],
) -> list[ValidationWarning]:
    warnings = [
        ValidationWarning(
            code=DiagnosticCode.MISSING_TRANSLATION.slug,
            message=f"No translation for locale '{locale}'",
            key=key.key,
            locale=locale,
        )
        for locale in key.missing_locales(locales)
    ]
    warnings.extend(
        ValidationWarning(
            code=DiagnosticCode.EMPTY_TRANSLATION.slug,
            message="Translation is empty",
            key=key.key,
            locale=locale,
        )
        for locale, text in key.translations.items()
        if not text.strip()
    )
    return warnings


def _check_placeholders(key: TranslationKey) -> list[ValidationWarning]:
    # Without declared placeholders there is nothing to compare against.
    if not key.placeholders:
        return []

    warnings: list[ValidationWarning] = []
    for locale, text in key.translations.items():
        undeclared = extract_placeholders(text) - set(key.placeholders)
        warnings.extend(
            ValidationWarning(
                code=DiagnosticCode.UNDECLARED_PLACEHOLDER.slug,
                message=f"Placeholder '{name}' is not declared in '@{key.key}'",
                key=key.key,
                locale=locale,
            )
            for name in sorted(undeclared)
        )
    return warnings


def validate_module(
    module: ParsedModule,
    *,
    locales: Sequence[LocaleCode] | None = None,
) -> ValidationResult:
    """Validate every translation of a parsed module.

    Args:
        module: Aggregated module
        locales: Locales every key is expected to cover. Defaults to the
            locales contributing at least one translation to the module.

    Returns:
        ValidationResult with ICU errors and completeness/placeholder warnings

    Example:
        >>> result = validate_module(module, locales=["en", "de"])
        >>> if not result.is_valid:
        ...     print(result.format(sanitize=True))
    """
    expected = tuple(locales) if locales is not None else module.locales
    errors: list[ValidationError] = []
    warnings: list[ValidationWarning] = []

    for key in module.keys:
        errors.extend(_check_icu_structure(key))
        warnings.extend(_check_completeness(key, expected))
        warnings.extend(_check_placeholders(key))

    logger.debug(
        "Validated module '%s': %d errors, %d warnings",
        module.name,
        len(errors),
        len(warnings),
    )

    if not errors and not warnings:
        return ValidationResult.valid()
    return ValidationResult(errors=tuple(errors), warnings=tuple(warnings))
