"""Type aliases for the localization domain.

Provides semantic type aliases used throughout the localization package
and by user code when annotating aggregation call sites.

Python 3.13+. Zero external dependencies.
"""

from typing import TypeAlias

__all__ = [
    "ArbEntries",
    "KeyName",
    "LocaleCode",
    "ModuleName",
]

KeyName: TypeAlias = str
"""Translation key (e.g., 'welcomeMessage', 'itemCount')."""

LocaleCode: TypeAlias = str
"""Locale declared by an ARB document (e.g., 'en', 'en_US', 'pt-BR')."""

ModuleName: TypeAlias = str
"""Feature module declared by an ARB document's @@context (e.g., 'auth')."""

ArbEntries: TypeAlias = dict[str, object]
"""Decoded ARB document: translations, "@key" metadata and "@@" entries."""
