"""Placeholder extraction for ICU messages.

Answers "which runtime arguments does this message reference?" for code
generation. A message references a name either as the control variable of
an ICU header (`{count, plural, ...}`) or as a simple interpolation
placeholder (`{name}`) in any text context: top level, inside an ICU case
body at any nesting depth, or inside an unrecognized brace group.

Case bodies that are a bare word (`male{He}`) and literal selectors
(`=0{none}`) are never names. A control variable repeated inside its own
case body (`other{{count} items}`) is the same name, not a new one.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from arblexengine.enums import TokenKind
from arblexengine.syntax.scanner import iter_brace_tokens

if TYPE_CHECKING:
    from collections.abc import Mapping

    from arblexengine.localization.models import PlaceholderInfo

__all__ = [
    "extract_icu_variables",
    "extract_placeholders",
    "get_ordered_placeholders",
]

_NAMED_KINDS = frozenset({TokenKind.ICU_OPEN, TokenKind.PLACEHOLDER})


def _iter_referenced_names(text: str) -> list[str]:
    """Names referenced by the message, in order of first occurrence."""
    seen: dict[str, None] = {}
    for token in iter_brace_tokens(text):
        if token.kind in _NAMED_KINDS and token.name is not None:
            seen.setdefault(token.name, None)
    return list(seen)


def extract_icu_variables(text: str) -> frozenset[str]:
    """Return the control variables of every ICU header, nested ones included.

    Example:
        >>> sorted(extract_icu_variables("{a, select, x{{b, plural, other{#}}} other{}}"))
        ['a', 'b']
    """
    return frozenset(
        token.name
        for token in iter_brace_tokens(text)
        if token.kind is TokenKind.ICU_OPEN and token.name is not None
    )


def extract_placeholders(text: str) -> frozenset[str]:
    """Return every placeholder name referenced anywhere in a message.

    The result is the union of ICU control variables and simple `{name}`
    placeholders found in text contexts.

    Args:
        text: Message text

    Returns:
        Deduplicated names; empty for plain text

    Example:
        >>> extract_placeholders("Hello {name}")
        frozenset({'name'})
        >>> extract_placeholders("{count, plural, =0{none} other{{count} items}}")
        frozenset({'count'})
    """
    return frozenset(_iter_referenced_names(text))


def get_ordered_placeholders(
    text: str,
    placeholders: Mapping[str, PlaceholderInfo] | None = None,
) -> tuple[str, ...]:
    """Return placeholder names in code-generation argument order.

    Declared metadata is the source of truth: when ``placeholders`` has at
    least one entry its insertion order is returned verbatim, even if it
    disagrees with what the text references. Otherwise the names found in
    the text are returned in order of first occurrence.

    Args:
        text: Message text
        placeholders: Declared placeholder metadata for the key, if any

    Returns:
        Tuple of placeholder names

    Example:
        >>> get_ordered_placeholders("{a} and {b}", {"b": info, "a": info})
        ('b', 'a')
        >>> get_ordered_placeholders("{a} and {b}")
        ('a', 'b')
    """
    if placeholders:
        return tuple(placeholders)
    return tuple(_iter_referenced_names(text))
