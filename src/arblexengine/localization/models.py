"""Data model for ARB documents and aggregated translation keys.

Components:
    LocaleDocument - One decoded ARB document tagged with locale and module
    PlaceholderInfo - Declared metadata for one placeholder
    TranslationKey - One key merged across every locale of a module
    ParsedModule - All keys of one feature module
    AggregationIssue - A per-document or per-key problem found while merging

All records are immutable. TranslationKey and ParsedModule are rebuilt in
full on every aggregation pass; nothing here is mutated incrementally.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from arblexengine.diagnostics import ArbSchemaError, Diagnostic, DiagnosticCode
from arblexengine.introspection.placeholders import get_ordered_placeholders

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from arblexengine.localization.types import KeyName, LocaleCode, ModuleName

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Input
    "LocaleDocument",
    # Output
    "PlaceholderInfo",
    "TranslationKey",
    "ParsedModule",
    # Reporting
    "AggregationIssue",
]

# ARB camelCase field -> PlaceholderInfo attribute
_STRING_FIELDS = {"type": "type", "format": "format"}


@dataclass(frozen=True, slots=True)
class LocaleDocument:
    """A decoded ARB document scoped to one locale of one module.

    ``entries`` is kept exactly as decoded. The aggregator checks its shape
    and reports anything that is not a string-keyed object, so a document
    built from a JSON array is a reportable data error rather than a crash.

    Attributes:
        locale: Declared locale code
        module: Declared feature module name
        entries: Decoded document (translations, "@key" metadata, "@@" entries)
        source_path: File the document came from, when known
    """

    locale: LocaleCode
    module: ModuleName
    entries: object
    source_path: str | None = None

    @property
    def label(self) -> str:
        """Human-readable identity for log and issue messages."""
        return self.source_path or f"{self.module}/{self.locale}"


@dataclass(frozen=True, slots=True)
class PlaceholderInfo:
    """Declared metadata for one placeholder.

    Every field is optional and carried through as declared; only its
    position in the enclosing ``placeholders`` mapping is meaningful to
    this library (it fixes argument order for code generation).

    Attributes:
        type: Declared type, e.g. 'String', 'int', 'DateTime'
        example: Example value shown to translators
        format: Number or date format name, e.g. 'compact', 'yMd'
        is_custom_date_format: Whether ``format`` is a custom date pattern
        optional_parameters: Extra formatter arguments, values kept verbatim
        extra: Any other declared fields, kept verbatim
    """

    type: str | None = None
    example: object = None
    format: str | None = None
    is_custom_date_format: bool | None = None
    optional_parameters: dict[str, object] | None = None
    extra: dict[str, object] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, name: str, data: Mapping[str, object]) -> PlaceholderInfo:
        """Build from a decoded ARB placeholder object.

        Args:
            name: Placeholder name (for error messages)
            data: Decoded placeholder object, e.g. {"type": "int", "example": "3"}

        Returns:
            PlaceholderInfo with ARB camelCase fields mapped to attributes

        Raises:
            ArbSchemaError: If a known field has an unexpected type
        """
        values: dict[str, object] = {}
        extra: dict[str, object] = {}

        for field_name, value in data.items():
            if field_name in _STRING_FIELDS:
                if not isinstance(value, str):
                    raise _field_error(name, field_name, "a string", value)
                values[_STRING_FIELDS[field_name]] = value
            elif field_name == "example":
                values["example"] = value
            elif field_name == "isCustomDateFormat":
                values["is_custom_date_format"] = _coerce_flag(name, field_name, value)
            elif field_name == "optionalParameters":
                if not isinstance(value, dict):
                    raise _field_error(name, field_name, "an object", value)
                values["optional_parameters"] = dict(value)
            else:
                extra[field_name] = value

        return cls(extra=extra, **values)  # type: ignore[arg-type]


def _coerce_flag(name: str, field_name: str, value: object) -> bool:
    # ARB tooling writes the flag both as a JSON boolean and as "true"/"false".
    if isinstance(value, bool):
        return value
    if value in ("true", "false"):
        return value == "true"
    raise _field_error(name, field_name, "a boolean", value)


def _field_error(name: str, field_name: str, expected: str, value: object) -> ArbSchemaError:
    diagnostic = Diagnostic(
        code=DiagnosticCode.PLACEHOLDER_FIELD_INVALID,
        message=(
            f"Placeholder '{name}' field '{field_name}' must be {expected}, "
            f"got {type(value).__name__}"
        ),
    )
    return ArbSchemaError(diagnostic)


@dataclass(frozen=True, slots=True)
class TranslationKey:
    """One translation key merged across every locale of a module.

    ``translations`` may cover only some of the module's locales: a missing
    entry means "not yet translated for that locale". ``description`` and
    ``placeholders`` come from the metadata of exactly one locale document,
    the first one in merge order that defined the key.

    Attributes:
        key: Key name, unique within its module
        translations: Locale code -> translation text
        description: Declared description, if any
        placeholders: Declared placeholders in declaration order, if any
    """

    key: KeyName
    translations: dict[LocaleCode, str]
    description: str | None = None
    placeholders: dict[str, PlaceholderInfo] | None = None

    def has_translation(self, locale: LocaleCode) -> bool:
        """Check if the key is translated for ``locale``."""
        return locale in self.translations

    def missing_locales(self, locales: Iterable[LocaleCode]) -> tuple[LocaleCode, ...]:
        """Return the locales from ``locales`` (in that order) lacking a translation."""
        return tuple(locale for locale in locales if locale not in self.translations)

    def ordered_placeholders(self, locale: LocaleCode) -> tuple[str, ...]:
        """Return argument-order placeholder names for one translation.

        Args:
            locale: Locale whose translation text is inspected

        Returns:
            Declared order when placeholders are declared, else order of
            first occurrence in the translation text

        Raises:
            KeyError: If the key has no translation for ``locale``
        """
        return get_ordered_placeholders(self.translations[locale], self.placeholders)


@dataclass(frozen=True, slots=True)
class ParsedModule:
    """All translation keys of one feature module.

    Attributes:
        name: Module name (from @@context)
        path: Module directory, when known
        keys: Keys in merge order (first appearance across documents)
    """

    name: ModuleName
    path: str | None
    keys: tuple[TranslationKey, ...]

    @property
    def locales(self) -> tuple[LocaleCode, ...]:
        """Sorted locales contributing at least one translation."""
        return tuple(sorted({locale for key in self.keys for locale in key.translations}))

    def get_key(self, name: KeyName) -> TranslationKey | None:
        """Look up a key by name."""
        for key in self.keys:
            if key.key == name:
                return key
        return None


@dataclass(frozen=True, slots=True)
class AggregationIssue:
    """A problem found while merging documents.

    Issues are collected and returned alongside results; one bad document
    or key never aborts the rest of the module.

    Attributes:
        code: Diagnostic code
        message: Human-readable description
        module: Module being aggregated, None for files that never loaded
        locale: Locale of the offending document, if known
        key: Offending key for per-key issues, None for per-document issues
        source_path: Offending file, if known
    """

    code: DiagnosticCode
    message: str
    module: ModuleName | None
    locale: LocaleCode | None = None
    key: KeyName | None = None
    source_path: str | None = None

    def to_diagnostic(self) -> Diagnostic:
        """Convert to a Diagnostic for rich formatting."""
        return Diagnostic(
            code=self.code,
            message=self.message,
            source_path=self.source_path,
            locale=self.locale,
            key=self.key,
        )

    def format(self) -> str:
        """Format as a single line: [CODE] module/locale key: message."""
        where = self.module or self.source_path or "?"
        if self.module and self.locale is not None:
            where = f"{self.module}/{self.locale}"
        key = f" {self.key}" if self.key is not None else ""
        return f"[{self.code.name}] {where}{key}: {self.message}"
