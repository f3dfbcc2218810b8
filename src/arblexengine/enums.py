"""Enumerations for ARBLexEngine type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class IcuType(StrEnum):
    """Kind of ICU expression named in a `{var, type, ...}` header.

    StrEnum provides automatic string conversion: str(IcuType.PLURAL) == "plural"
    """

    PLURAL = "plural"
    """Cardinal plural: {count, plural, one{...} other{...}}"""

    SELECT = "select"
    """Enumerated select: {gender, select, male{...} other{...}}"""

    SELECTORDINAL = "selectordinal"
    """Ordinal plural: {place, selectordinal, one{#st} other{#th}}"""


class TokenKind(StrEnum):
    """Kind of brace event produced by the message scanner.

    StrEnum provides automatic string conversion: str(TokenKind.CLOSE) == "close"
    """

    ICU_OPEN = "icu_open"
    """Opening brace of an ICU header: {count, plural,"""

    CASE_OPEN = "case_open"
    """Opening brace of a case body inside an ICU block: other{"""

    PLACEHOLDER = "placeholder"
    """Simple interpolation placeholder: {name}"""

    GROUP_OPEN = "group_open"
    """Any other opening brace: {name, number}"""

    CLOSE = "close"
    """Closing brace matching an open block"""

    STRAY_CLOSE = "stray_close"
    """Closing brace with no open block"""


class LoadStatus(StrEnum):
    """Outcome of loading a single ARB document.

    StrEnum provides automatic string conversion: str(LoadStatus.SUCCESS) == "success"
    """

    SUCCESS = "success"
    """Document decoded and tagged with locale and module"""

    NOT_FOUND = "not_found"
    """File does not exist"""

    SKIPPED = "skipped"
    """Decoded, but missing or invalid @@locale / @@context"""

    ERROR = "error"
    """I/O failure or malformed document"""


__all__ = [
    "IcuType",
    "LoadStatus",
    "TokenKind",
]
