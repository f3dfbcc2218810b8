"""Validation of aggregated modules.

Exports:
    validate_module - ICU structure, locale completeness and placeholder checks

Python 3.13+.
"""

from .module import validate_module

__all__ = ["validate_module"]
