"""Diagnostic system for ARB processing.

Provides structured error diagnostics with codes, locations and hints,
plus value types for message-level and module-level validation results.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    ArbAggregationError,
    ArbDocumentError,
    ArbError,
    ArbSchemaError,
)
from .validation import (
    IcuValidationResult,
    ValidationError,
    ValidationResult,
    ValidationWarning,
)

__all__ = [
    "ArbAggregationError",
    "ArbDocumentError",
    "ArbError",
    "ArbSchemaError",
    "Diagnostic",
    "DiagnosticCode",
    "IcuValidationResult",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
]
