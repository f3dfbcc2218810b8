"""ARBLexEngine - ICU-aware parsing and aggregation of ARB localization files.

Ingests ARB documents written per locale and per feature module and
produces a normalized, locale-complete, order-stable model of every
translation key, with structural analysis of embedded ICU message syntax
(plural/select/selectordinal, nested placeholders, compound messages).

Public API:
    KeyAggregator - Merge locale documents into cross-locale translation keys
    AggregatorConfig - Merge order and strictness configuration
    parse_document - Decode ARB JSON into a LocaleDocument
    ArbFileLoader - Load ARB files from disk with declaration checks
    extract_placeholders - Names referenced by a message
    get_ordered_placeholders - Argument order for code generation
    get_icu_segments - Top-level ICU expressions with offsets
    validate_icu_syntax - Brace balance and mandatory case checks
    validate_module - Batch validation of a parsed module

Exceptions:
    ArbError - Base exception class
    ArbDocumentError - Malformed ARB documents
    ArbSchemaError - Unexpected value shapes inside a document
    ArbAggregationError - Issues collected in strict mode

Submodules:
    arblexengine.syntax - Scanner, ICU detection, segmentation, validation
    arblexengine.introspection - Placeholder extraction and key naming
    arblexengine.localization - Data model, loading and aggregation
    arblexengine.validation - Module-level validation
    arblexengine.diagnostics - Error types and validation results
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

# Essential Public API - Minimal exports for clean namespace
from .diagnostics import (
    ArbAggregationError,
    ArbDocumentError,
    ArbError,
    ArbSchemaError,
)
from .introspection import extract_placeholders, get_ordered_placeholders
from .localization import (
    AggregatorConfig,
    ArbFileLoader,
    KeyAggregator,
    ParsedModule,
    TranslationKey,
    parse_document,
)
from .syntax import get_icu_segments, validate_icu_syntax
from .validation import validate_module

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("arblexengine")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "AggregatorConfig",
    "ArbAggregationError",
    "ArbDocumentError",
    "ArbError",
    "ArbFileLoader",
    "ArbSchemaError",
    "KeyAggregator",
    "ParsedModule",
    "TranslationKey",
    "__version__",
    "extract_placeholders",
    "get_icu_segments",
    "get_ordered_placeholders",
    "parse_document",
    "validate_icu_syntax",
    "validate_module",
]
