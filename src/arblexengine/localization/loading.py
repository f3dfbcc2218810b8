"""ARB document loading.

Decodes ARB sources into LocaleDocument records and tracks the outcome of
each load attempt. Discovery (which files exist, which are ignored) is the
caller's concern: this module only reads the paths it is given.

Components:
    parse_document - Decode ARB JSON text into a LocaleDocument
    ArbFileLoader - Disk-based loader with locale and module-name checks
    DocumentLoadResult - Immutable result of a single load attempt
    LoadSummary - Immutable aggregate of load results

Python 3.13+.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from arblexengine.constants import (
    CONTEXT_METADATA_KEY,
    LOCALE_METADATA_KEY,
    MAX_DOCUMENT_SIZE,
    MODULE_NAME_PATTERN,
)
from arblexengine.diagnostics import ArbDocumentError, ArbError, Diagnostic, DiagnosticCode
from arblexengine.enums import LoadStatus
from arblexengine.locale_utils import is_known_locale
from arblexengine.localization.models import LocaleDocument

if TYPE_CHECKING:
    from collections.abc import Iterable

    from arblexengine.localization.types import LocaleCode, ModuleName

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Decoding
    "parse_document",
    "module_path_for",
    # Concrete loader
    "ArbFileLoader",
    # Load result types
    "DocumentLoadResult",
    "LoadSummary",
]

logger = logging.getLogger(__name__)

_MODULE_NAME_RE = re.compile(MODULE_NAME_PATTERN)

# Documents failing these checks are skipped rather than counted as errors
_SKIP_CODES = frozenset({
    DiagnosticCode.DOCUMENT_MISSING_LOCALE,
    DiagnosticCode.DOCUMENT_MISSING_CONTEXT,
    DiagnosticCode.DOCUMENT_INVALID_DECLARATION,
    DiagnosticCode.DOCUMENT_UNKNOWN_LOCALE,
    DiagnosticCode.DOCUMENT_INVALID_MODULE_NAME,
})


def _document_error(
    code: DiagnosticCode,
    message: str,
    source_path: str | None,
    hint: str | None = None,
) -> ArbDocumentError:
    return ArbDocumentError(
        Diagnostic(code=code, message=message, hint=hint, source_path=source_path)
    )


def _declared_string(
    entries: dict[str, object],
    name: str,
    source_path: str | None,
) -> str | None:
    """Read a "@@" declaration; absent or empty is None, any other non-string is an error."""
    value = entries.get(name)
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise _document_error(
            DiagnosticCode.DOCUMENT_INVALID_DECLARATION,
            f'"{name}" must be a string, got {type(value).__name__}',
            source_path,
        )
    return value


def parse_document(
    source: str,
    *,
    locale: LocaleCode | None = None,
    module: ModuleName | None = None,
    source_path: str | None = None,
    max_size: int = MAX_DOCUMENT_SIZE,
) -> LocaleDocument:
    """Decode ARB JSON text into a LocaleDocument.

    Locale and module default to the document's own ``@@locale`` and
    ``@@context`` entries. Entry order is preserved as written.

    Args:
        source: ARB file content
        locale: Locale to tag the document with (overrides @@locale)
        module: Module to tag the document with (overrides @@context)
        source_path: File the source came from, for diagnostics
        max_size: Maximum accepted source size in characters

    Returns:
        LocaleDocument with the decoded entries

    Raises:
        ArbDocumentError: If the source is oversized, not valid JSON (nesting
            beyond the interpreter's recursion limit included), not a JSON
            object, or declares no locale or module

    Example:
        >>> doc = parse_document('{"@@locale": "en", "@@context": "auth", "title": "Sign in"}')
        >>> doc.locale, doc.module
        ('en', 'auth')
    """
    if len(source) > max_size:
        raise _document_error(
            DiagnosticCode.DOCUMENT_TOO_LARGE,
            f"Document exceeds maximum size ({len(source)} > {max_size} characters)",
            source_path,
        )

    try:
        entries = json.loads(source)
    except json.JSONDecodeError as e:
        raise _document_error(
            DiagnosticCode.DOCUMENT_INVALID_JSON,
            f"Invalid JSON syntax at line {e.lineno}, column {e.colno}: {e.msg}",
            source_path,
        ) from e
    except RecursionError as e:
        raise _document_error(
            DiagnosticCode.DOCUMENT_INVALID_JSON,
            "Document nesting too deep",
            source_path,
        ) from e

    if not isinstance(entries, dict):
        raise _document_error(
            DiagnosticCode.DOCUMENT_NOT_OBJECT,
            f"Document root must be a JSON object, got {type(entries).__name__}",
            source_path,
        )

    locale = locale or _declared_string(entries, LOCALE_METADATA_KEY, source_path)
    if locale is None:
        raise _document_error(
            DiagnosticCode.DOCUMENT_MISSING_LOCALE,
            f'Missing "{LOCALE_METADATA_KEY}" property',
            source_path,
            hint='Add e.g. "@@locale": "en" to the document',
        )

    module = module or _declared_string(entries, CONTEXT_METADATA_KEY, source_path)
    if module is None:
        raise _document_error(
            DiagnosticCode.DOCUMENT_MISSING_CONTEXT,
            f'Missing "{CONTEXT_METADATA_KEY}" property',
            source_path,
            hint='Add e.g. "@@context": "auth" to the document',
        )

    return LocaleDocument(locale=locale, module=module, entries=entries, source_path=source_path)


def module_path_for(source_path: str) -> str:
    """Return the module directory for an ARB file.

    ARB files live in a ``l10n`` folder directly under their module:
    ``lib/features/auth/l10n/auth_en.arb`` belongs to ``lib/features/auth``.
    """
    return str(Path(source_path).parent.parent)


@dataclass(frozen=True, slots=True)
class DocumentLoadResult:
    """Result of loading a single ARB file.

    Attributes:
        source_path: Path that was loaded
        status: Load status (success, not_found, skipped, error)
        document: Decoded document if status is SUCCESS, None otherwise
        error: Reason if status is SKIPPED or ERROR, None otherwise
    """

    source_path: str
    status: LoadStatus
    document: LocaleDocument | None = None
    error: Exception | None = None

    @property
    def is_success(self) -> bool:
        """Check if the document loaded successfully."""
        return self.status == LoadStatus.SUCCESS

    @property
    def is_not_found(self) -> bool:
        """Check if the file was not found."""
        return self.status == LoadStatus.NOT_FOUND

    @property
    def is_skipped(self) -> bool:
        """Check if the document was skipped for missing or invalid metadata."""
        return self.status == LoadStatus.SKIPPED

    @property
    def is_error(self) -> bool:
        """Check if the load failed with an error."""
        return self.status == LoadStatus.ERROR


@dataclass(frozen=True, slots=True)
class ArbFileLoader:
    """File system loader for ARB documents.

    Reads one file per call, decodes it and checks its declarations:
    ``@@locale`` must be known to CLDR (via Babel) and ``@@context`` must be
    a snake_case module name. Failures are returned as results, never
    raised.

    Attributes:
        max_size: Maximum accepted source size in characters
        validate_locales: Check @@locale against CLDR (default: True)

    Example:
        >>> loader = ArbFileLoader()
        >>> summary = loader.load_all(["lib/auth/l10n/auth_en.arb", "lib/auth/l10n/auth_de.arb"])
        >>> summary.all_successful
        True
    """

    max_size: int = MAX_DOCUMENT_SIZE
    validate_locales: bool = True

    def __post_init__(self) -> None:
        """Validate configuration.

        Raises:
            ValueError: If max_size is not positive
        """
        if self.max_size <= 0:
            msg = "max_size must be positive"
            raise ValueError(msg)

    def load(self, path: str | Path) -> DocumentLoadResult:
        """Load and decode one ARB file.

        Args:
            path: ARB file path

        Returns:
            DocumentLoadResult describing the outcome
        """
        source_path = str(path)

        try:
            source = Path(path).read_text(encoding="utf-8")
        except FileNotFoundError as e:
            logger.warning("ARB file not found: %s", source_path)
            return DocumentLoadResult(source_path, LoadStatus.NOT_FOUND, error=e)
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Failed to read ARB file %s: %s", source_path, e)
            error = _document_error(
                DiagnosticCode.DOCUMENT_READ_FAILED, f"Cannot read file: {e}", source_path
            )
            return DocumentLoadResult(source_path, LoadStatus.ERROR, error=error)

        try:
            document = parse_document(source, source_path=source_path, max_size=self.max_size)
            self._check_declarations(document)
        except ArbDocumentError as e:
            return self._failed(source_path, e)

        logger.debug(
            "Loaded %s (module=%s, locale=%s)", source_path, document.module, document.locale
        )
        return DocumentLoadResult(source_path, LoadStatus.SUCCESS, document=document)

    def load_all(self, paths: Iterable[str | Path]) -> LoadSummary:
        """Load every path in order.

        Args:
            paths: ARB file paths

        Returns:
            LoadSummary holding one result per path
        """
        return LoadSummary(tuple(self.load(path) for path in paths))

    def _check_declarations(self, document: LocaleDocument) -> None:
        if self.validate_locales and not is_known_locale(document.locale):
            raise _document_error(
                DiagnosticCode.DOCUMENT_UNKNOWN_LOCALE,
                f'Unknown locale "{document.locale}"',
                document.source_path,
                hint="Examples of valid locales: en, en_US, ar, ar_EG, de, fr, es, zh, ja, ko",
            )
        if _MODULE_NAME_RE.fullmatch(document.module) is None:
            raise _document_error(
                DiagnosticCode.DOCUMENT_INVALID_MODULE_NAME,
                f'Invalid module name "{document.module}"',
                document.source_path,
                hint="Module name must be snake_case (e.g., auth, user_profile, home_screen)",
            )

    @staticmethod
    def _failed(source_path: str, error: ArbError) -> DocumentLoadResult:
        if error.diagnostic is not None and error.diagnostic.code in _SKIP_CODES:
            logger.warning("Skipping %s: %s", source_path, error.diagnostic.message)
            return DocumentLoadResult(source_path, LoadStatus.SKIPPED, error=error)
        logger.error("Failed to load %s: %s", source_path, error)
        return DocumentLoadResult(source_path, LoadStatus.ERROR, error=error)


@dataclass(frozen=True, slots=True)
class LoadSummary:
    """Immutable aggregate of document load results.

    All statistics are computed properties derived from the ``results`` tuple.

    Attributes:
        results: All individual load results, in load order

    Example:
        >>> summary = ArbFileLoader().load_all(paths)
        >>> for result in summary.get_errors():
        ...     print(f"Failed: {result.source_path}: {result.error}")
    """

    results: tuple[DocumentLoadResult, ...]

    @property
    def total_attempted(self) -> int:
        """Total number of load attempts."""
        return len(self.results)

    @property
    def successful(self) -> int:
        """Number of successful loads."""
        return sum(1 for r in self.results if r.is_success)

    @property
    def not_found(self) -> int:
        """Number of missing files."""
        return sum(1 for r in self.results if r.is_not_found)

    @property
    def skipped(self) -> int:
        """Number of skipped documents."""
        return sum(1 for r in self.results if r.is_skipped)

    @property
    def errors(self) -> int:
        """Number of load errors."""
        return sum(1 for r in self.results if r.is_error)

    @property
    def all_successful(self) -> bool:
        """Check if every attempted load succeeded."""
        return self.successful == self.total_attempted

    @property
    def locales(self) -> tuple[LocaleCode, ...]:
        """Sorted locales declared by successfully loaded documents."""
        return tuple(sorted({doc.locale for doc in self.get_documents()}))

    def get_documents(self) -> tuple[LocaleDocument, ...]:
        """Get the decoded documents of all successful loads."""
        return tuple(r.document for r in self.results if r.document is not None)

    def get_errors(self) -> tuple[DocumentLoadResult, ...]:
        """Get all results with errors."""
        return tuple(r for r in self.results if r.is_error)

    def get_skipped(self) -> tuple[DocumentLoadResult, ...]:
        """Get all skipped results."""
        return tuple(r for r in self.results if r.is_skipped)

    def get_failures(self) -> tuple[DocumentLoadResult, ...]:
        """Get every result that produced no document."""
        return tuple(r for r in self.results if not r.is_success)
