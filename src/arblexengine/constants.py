"""Shared constants for ARBLexEngine.

This module provides centralized constants used across the syntax,
introspection and localization packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- ARB document keys: Reserved prefixes and document-level metadata names
- Naming rules: Module and key naming patterns
- Input limits: DoS prevention via size constraints

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # ARB document keys
    "METADATA_PREFIX",
    "DOCUMENT_METADATA_PREFIX",
    "LOCALE_METADATA_KEY",
    "CONTEXT_METADATA_KEY",
    # Naming rules
    "MODULE_NAME_PATTERN",
    "KEY_NAME_PATTERN",
    "DEFAULT_KEY_NAME",
    "MAX_SUGGESTED_KEY_WORDS",
    # Input limits
    "MAX_DOCUMENT_SIZE",
    # Validation
    "REQUIRED_FALLBACK_CASE",
]

# ============================================================================
# ARB DOCUMENT KEYS
# ============================================================================

# "@key" holds metadata for the sibling "key" entry.
METADATA_PREFIX: str = "@"

# "@@name" holds document-level metadata and is never a translation key.
DOCUMENT_METADATA_PREFIX: str = "@@"

# Declared locale of an ARB document.
LOCALE_METADATA_KEY: str = "@@locale"

# Declared feature module of an ARB document.
CONTEXT_METADATA_KEY: str = "@@context"

# ============================================================================
# NAMING RULES
# ============================================================================

# Module names are snake_case: auth, user_profile, home_screen
MODULE_NAME_PATTERN: str = r"^[a-z][a-z0-9_]*$"

# Translation keys are camelCase starting with a lowercase letter
KEY_NAME_PATTERN: str = r"^[a-z][a-zA-Z0-9]*$"

# Fallback returned by suggest_key_name() when the text has no usable words
DEFAULT_KEY_NAME: str = "newKey"

# Number of leading words used when suggesting a key name
MAX_SUGGESTED_KEY_WORDS: int = 4

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Maximum ARB source size in characters (10 MiB worth of ASCII).
# Real-world ARB files are far below this; larger inputs are rejected as
# malformed documents before JSON decoding.
MAX_DOCUMENT_SIZE: int = 10 * 1024 * 1024

# ============================================================================
# VALIDATION
# ============================================================================

# Case selector that plural and selectordinal messages must declare
REQUIRED_FALLBACK_CASE: str = "other"
