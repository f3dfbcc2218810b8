"""Translation key naming helpers.

Used by editor integrations that extract a string literal into ARB files:
suggest a key from the literal, then check a user-supplied key.

Python 3.13+. Zero external dependencies.
"""

import re

from arblexengine.constants import DEFAULT_KEY_NAME, KEY_NAME_PATTERN, MAX_SUGGESTED_KEY_WORDS

__all__ = ["is_valid_key_name", "suggest_key_name"]

_KEY_NAME_RE = re.compile(KEY_NAME_PATTERN)
_NON_WORD_RE = re.compile(r"[^a-zA-Z0-9\s]")


def suggest_key_name(text: str) -> str:
    """Suggest a camelCase key from the first few words of a string.

    Punctuation is dropped, then up to four words are joined in camelCase.

    Example:
        >>> suggest_key_name("Welcome back, friend!")
        'welcomeBackFriend'
        >>> suggest_key_name("!!!")
        'newKey'
    """
    words = _NON_WORD_RE.sub("", text).split()[:MAX_SUGGESTED_KEY_WORDS]
    if not words:
        return DEFAULT_KEY_NAME

    first, *rest = (word.lower() for word in words)
    return first + "".join(word[0].upper() + word[1:] for word in rest)


def is_valid_key_name(name: str) -> bool:
    """Check if a key is camelCase starting with a lowercase letter."""
    return _KEY_NAME_RE.fullmatch(name) is not None
