"""Message introspection: placeholder names and key naming.

Exports:
    extract_placeholders - Every name a message references
    extract_icu_variables - ICU control variables only
    get_ordered_placeholders - Argument order for code generation
    suggest_key_name / is_valid_key_name - Key naming helpers

Python 3.13+.
"""

from .keys import is_valid_key_name, suggest_key_name
from .placeholders import (
    extract_icu_variables,
    extract_placeholders,
    get_ordered_placeholders,
)

__all__ = [
    "extract_icu_variables",
    "extract_placeholders",
    "get_ordered_placeholders",
    "is_valid_key_name",
    "suggest_key_name",
]
