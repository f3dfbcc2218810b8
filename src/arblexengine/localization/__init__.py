"""ARB localization package: documents, loading and key aggregation.

Provides the full ingestion stack: type aliases, the data model, ARB
document loading, and the cross-locale key aggregator.

Submodules:
    types      - PEP 695 type aliases (KeyName, LocaleCode, ModuleName, ArbEntries)
    models     - LocaleDocument, PlaceholderInfo, TranslationKey, ParsedModule,
                 AggregationIssue
    config     - AggregatorConfig
    loading    - parse_document, ArbFileLoader, DocumentLoadResult, LoadSummary
    aggregator - KeyAggregator, AggregationResult, aggregate_module(s)

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from arblexengine.enums import LoadStatus
from arblexengine.localization.aggregator import (
    AggregationResult,
    KeyAggregator,
    aggregate_module,
    aggregate_modules,
)
from arblexengine.localization.config import AggregatorConfig
from arblexengine.localization.loading import (
    ArbFileLoader,
    DocumentLoadResult,
    LoadSummary,
    module_path_for,
    parse_document,
)
from arblexengine.localization.models import (
    AggregationIssue,
    LocaleDocument,
    ParsedModule,
    PlaceholderInfo,
    TranslationKey,
)
from arblexengine.localization.types import ArbEntries, KeyName, LocaleCode, ModuleName

__all__ = [
    # Aggregation
    "KeyAggregator",
    "AggregatorConfig",
    "AggregationResult",
    "AggregationIssue",
    "aggregate_module",
    "aggregate_modules",
    # Data model
    "LocaleDocument",
    "PlaceholderInfo",
    "TranslationKey",
    "ParsedModule",
    # Loading
    "parse_document",
    "module_path_for",
    "ArbFileLoader",
    "DocumentLoadResult",
    "LoadStatus",
    "LoadSummary",
    # Type aliases for user code type annotations
    "ArbEntries",
    "KeyName",
    "LocaleCode",
    "ModuleName",
]
