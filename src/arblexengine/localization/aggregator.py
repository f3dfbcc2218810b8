"""Cross-locale key aggregation.

Merges the per-locale ARB documents of a feature module into one
TranslationKey per key name.

Merge rules:
    - Documents are merged in a fixed order independent of input order:
      the configured default locale first, then by normalized locale code,
      then by source path. Re-running on the same documents yields equal
      output.
    - The first document in that order that defines a key creates it and
      fixes its description and placeholders from its own "@key" entry.
      Later documents only add translations.
    - A key receives a translation for a locale iff a document of that
      locale defines it. Nothing is fabricated or dropped.
    - Keys starting with "@" (per-key metadata) or "@@" (document
      metadata) are never translation keys.

Error policy:
    Malformed documents and schema violations are collected as
    AggregationIssue values and returned with the results. One bad
    document or key never aborts the module; strict mode raises only after
    the whole module has been processed.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from arblexengine.constants import METADATA_PREFIX
from arblexengine.diagnostics import (
    ArbAggregationError,
    ArbError,
    ArbSchemaError,
    DiagnosticCode,
)
from arblexengine.locale_utils import normalize_locale
from arblexengine.localization.config import AggregatorConfig
from arblexengine.localization.loading import module_path_for
from arblexengine.localization.models import (
    AggregationIssue,
    LocaleDocument,
    ParsedModule,
    PlaceholderInfo,
    TranslationKey,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from arblexengine.localization.loading import LoadSummary
    from arblexengine.localization.types import KeyName, LocaleCode, ModuleName

__all__ = [
    "AggregationResult",
    "KeyAggregator",
    "aggregate_module",
    "aggregate_modules",
]

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _KeyDraft:
    """Mutable key record used only while a module is being merged."""

    key: KeyName
    description: str | None
    placeholders: dict[str, PlaceholderInfo] | None
    translations: dict[LocaleCode, str] = field(default_factory=dict)

    def freeze(self) -> TranslationKey:
        return TranslationKey(
            key=self.key,
            translations=dict(self.translations),
            description=self.description,
            placeholders=self.placeholders,
        )


@dataclass(frozen=True, slots=True)
class AggregationResult:
    """Modules and issues from one aggregation pass over many modules.

    Attributes:
        modules: One ParsedModule per module, sorted by module name
        issues: Every issue collected, in module then merge order
    """

    modules: tuple[ParsedModule, ...]
    issues: tuple[AggregationIssue, ...]

    @property
    def has_issues(self) -> bool:
        """Check if any issue was collected."""
        return len(self.issues) > 0

    def get_module(self, name: ModuleName) -> ParsedModule | None:
        """Look up a parsed module by name."""
        for module in self.modules:
            if module.name == name:
                return module
        return None

    def get_issues(self, module: ModuleName) -> tuple[AggregationIssue, ...]:
        """Get the issues collected for one module."""
        return tuple(issue for issue in self.issues if issue.module == module)


class KeyAggregator:
    """Merges locale documents into cross-locale translation keys.

    Stateless apart from its configuration: every call rebuilds its result
    from the documents passed in, so one instance can be shared freely.

    Example:
        >>> aggregator = KeyAggregator(AggregatorConfig(default_locale="en"))
        >>> module, issues = aggregator.aggregate_module("auth", documents)
        >>> module.get_key("title").translations
        {'en': 'Sign in', 'de': 'Anmelden'}
    """

    __slots__ = ("_config",)

    def __init__(self, config: AggregatorConfig | None = None) -> None:
        """Initialize aggregator.

        Args:
            config: Aggregation configuration (default: AggregatorConfig())
        """
        self._config = config if config is not None else AggregatorConfig()

    @property
    def config(self) -> AggregatorConfig:
        """Active configuration."""
        return self._config

    def merge_order(self, documents: Iterable[LocaleDocument]) -> list[LocaleDocument]:
        """Return documents in the order they are merged.

        Default locale first, then normalized locale code, then source path.
        Documents tied on all three keep their input order.
        """
        default = (
            normalize_locale(self._config.default_locale)
            if self._config.default_locale is not None
            else None
        )

        def sort_key(document: LocaleDocument) -> tuple[bool, str, str]:
            locale = normalize_locale(document.locale)
            return (locale != default, locale, document.source_path or "")

        return sorted(documents, key=sort_key)

    def aggregate_module(
        self,
        name: ModuleName,
        documents: Iterable[LocaleDocument],
        *,
        path: str | None = None,
    ) -> tuple[ParsedModule, tuple[AggregationIssue, ...]]:
        """Merge all locale documents of one module.

        Args:
            name: Module name
            documents: Every locale document of the module
            path: Module directory; derived from the first document with a
                source path when omitted

        Returns:
            Tuple of (ParsedModule, issues)

        Raises:
            ArbAggregationError: In strict mode, if any issue was collected
        """
        ordered = self.merge_order(documents)
        drafts: dict[KeyName, _KeyDraft] = {}
        issues: list[AggregationIssue] = []

        for document in ordered:
            issues.extend(self._merge_document(name, document, drafts))

        if path is None:
            path = next(
                (module_path_for(d.source_path) for d in ordered if d.source_path),
                None,
            )

        module = ParsedModule(
            name=name,
            path=path,
            keys=tuple(draft.freeze() for draft in drafts.values()),
        )
        logger.info(
            "Aggregated module '%s': %d keys from %d documents (%d issues)",
            name,
            len(module.keys),
            len(ordered),
            len(issues),
        )

        if self._config.strict and issues:
            msg = f"Module '{name}' has {len(issues)} aggregation issue(s)"
            raise ArbAggregationError(msg, tuple(issues))

        return module, tuple(issues)

    def aggregate_modules(self, documents: Iterable[LocaleDocument]) -> AggregationResult:
        """Group documents by module and merge each module.

        Args:
            documents: Locale documents of any number of modules

        Returns:
            AggregationResult with modules sorted by name

        Raises:
            ArbAggregationError: In strict mode, for the first module (by
                name) with issues
        """
        by_module: defaultdict[ModuleName, list[LocaleDocument]] = defaultdict(list)
        for document in documents:
            by_module[document.module].append(document)

        modules: list[ParsedModule] = []
        issues: list[AggregationIssue] = []
        for name in sorted(by_module):
            module, module_issues = self.aggregate_module(name, by_module[name])
            modules.append(module)
            issues.extend(module_issues)

        return AggregationResult(modules=tuple(modules), issues=tuple(issues))

    def aggregate_summary(self, summary: LoadSummary) -> AggregationResult:
        """Merge the documents of a load summary, reporting failed loads.

        Every load that produced no document becomes an issue attached to
        its file; the remaining documents are merged as usual.

        Args:
            summary: Result of ArbFileLoader.load_all()

        Returns:
            AggregationResult whose issues start with the load failures
        """
        load_issues = tuple(
            AggregationIssue(
                *_describe_load_failure(result.error),
                module=None,
                source_path=result.source_path,
            )
            for result in summary.get_failures()
        )
        result = self.aggregate_modules(summary.get_documents())
        return AggregationResult(modules=result.modules, issues=load_issues + result.issues)

    def _merge_document(
        self,
        module: ModuleName,
        document: LocaleDocument,
        drafts: dict[KeyName, _KeyDraft],
    ) -> list[AggregationIssue]:
        entries = document.entries
        if not isinstance(entries, dict):
            issue = self._issue(
                DiagnosticCode.DOCUMENT_NOT_OBJECT,
                f"Document must be an object, got {type(entries).__name__}",
                module,
                document,
            )
            return [issue]

        issues: list[AggregationIssue] = []
        merged = 0

        for key, value in entries.items():
            if not isinstance(key, str) or key.startswith(METADATA_PREFIX):
                continue
            if not isinstance(value, str):
                issues.append(
                    self._issue(
                        DiagnosticCode.TRANSLATION_NOT_STRING,
                        f"Value of '{key}' must be a string, got {type(value).__name__}",
                        module,
                        document,
                        key,
                    )
                )
                continue

            if key not in drafts:
                description, placeholders = self._read_metadata(
                    module, document, entries, key, issues
                )
                drafts[key] = _KeyDraft(key, description, placeholders)
            drafts[key].translations[document.locale] = value
            merged += 1

        logger.debug(
            "Merged %d translations from %s (locale=%s)", merged, document.label, document.locale
        )
        return issues

    def _read_metadata(
        self,
        module: ModuleName,
        document: LocaleDocument,
        entries: Mapping[str, object],
        key: KeyName,
        issues: list[AggregationIssue],
    ) -> tuple[str | None, dict[str, PlaceholderInfo] | None]:
        """Read description and placeholders from this document's "@key" entry."""
        metadata = entries.get(METADATA_PREFIX + key)
        if metadata is None:
            return None, None
        if not isinstance(metadata, dict):
            issues.append(
                self._issue(
                    DiagnosticCode.METADATA_NOT_OBJECT,
                    f"Metadata '@{key}' must be an object, got {type(metadata).__name__}",
                    module,
                    document,
                    key,
                )
            )
            return None, None

        description = metadata.get("description")
        if description is not None and not isinstance(description, str):
            issues.append(
                self._issue(
                    DiagnosticCode.DESCRIPTION_NOT_STRING,
                    f"Description of '{key}' must be a string, got {type(description).__name__}",
                    module,
                    document,
                    key,
                )
            )
            description = None

        raw_placeholders = metadata.get("placeholders")
        if raw_placeholders is None:
            return description, None
        if not isinstance(raw_placeholders, dict):
            issues.append(
                self._issue(
                    DiagnosticCode.PLACEHOLDERS_NOT_OBJECT,
                    f"Placeholders of '{key}' must be an object, "
                    f"got {type(raw_placeholders).__name__}",
                    module,
                    document,
                    key,
                )
            )
            return description, None

        placeholders: dict[str, PlaceholderInfo] = {}
        for name, info in raw_placeholders.items():
            if not isinstance(info, dict):
                issues.append(
                    self._issue(
                        DiagnosticCode.PLACEHOLDER_INFO_NOT_OBJECT,
                        f"Placeholder '{name}' of '{key}' must be an object, "
                        f"got {type(info).__name__}",
                        module,
                        document,
                        key,
                    )
                )
                placeholders[name] = PlaceholderInfo()
                continue
            try:
                placeholders[name] = PlaceholderInfo.from_mapping(name, info)
            except ArbSchemaError as e:
                code = DiagnosticCode.PLACEHOLDER_FIELD_INVALID
                message = str(e)
                if e.diagnostic is not None:
                    code, message = e.diagnostic.code, e.diagnostic.message
                issues.append(self._issue(code, message, module, document, key))
                # Keep the name so declared argument order survives.
                placeholders[name] = PlaceholderInfo()

        return description, placeholders

    @staticmethod
    def _issue(
        code: DiagnosticCode,
        message: str,
        module: ModuleName,
        document: LocaleDocument,
        key: KeyName | None = None,
    ) -> AggregationIssue:
        logger.warning("%s [%s]: %s", document.label, code.name, message)
        return AggregationIssue(
            code=code,
            message=message,
            module=module,
            locale=document.locale,
            key=key,
            source_path=document.source_path,
        )


def _describe_load_failure(error: Exception | None) -> tuple[DiagnosticCode, str]:
    if isinstance(error, ArbError) and error.diagnostic is not None:
        return error.diagnostic.code, error.diagnostic.message
    if isinstance(error, FileNotFoundError):
        return DiagnosticCode.DOCUMENT_READ_FAILED, "File not found"
    return DiagnosticCode.DOCUMENT_READ_FAILED, str(error)


def aggregate_module(
    name: ModuleName,
    documents: Iterable[LocaleDocument],
    *,
    path: str | None = None,
    config: AggregatorConfig | None = None,
) -> tuple[ParsedModule, tuple[AggregationIssue, ...]]:
    """Merge all locale documents of one module.

    Convenience wrapper around KeyAggregator(config).aggregate_module().
    """
    return KeyAggregator(config).aggregate_module(name, documents, path=path)


def aggregate_modules(
    documents: Iterable[LocaleDocument],
    *,
    config: AggregatorConfig | None = None,
) -> AggregationResult:
    """Group documents by module and merge each module.

    Convenience wrapper around KeyAggregator(config).aggregate_modules().
    """
    return KeyAggregator(config).aggregate_modules(documents)
