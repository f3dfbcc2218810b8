"""Compiled regular expressions for ICU message recognition.

All patterns are fixed-width lookahead matches applied at a single
position (or a forward search), so callers that advance monotonically
through a message stay linear in its length.

Names use ASCII word characters only: literal selectors such as ``=0``
can never be mistaken for a placeholder name.

Python 3.13+. Zero external dependencies.
"""

import re

from arblexengine.constants import REQUIRED_FALLBACK_CASE

__all__ = [
    "FALLBACK_CASE_PATTERN",
    "ICU_HEADER_PATTERN",
    "SIMPLE_PLACEHOLDER_PATTERN",
]

# {count, plural,   {gender, select,   {place, selectordinal,
# Group 1: control variable. Group 2: ICU type.
# "selectordinal" is listed before "select" so the longer keyword wins.
ICU_HEADER_PATTERN: re.Pattern[str] = re.compile(
    r"\{\s*(\w+)\s*,\s*(plural|selectordinal|select)\s*,",
    re.ASCII,
)

# {name}  - no comma, no whitespace, word characters only
SIMPLE_PLACEHOLDER_PATTERN: re.Pattern[str] = re.compile(r"\{(\w+)\}", re.ASCII)

# other{   other {
FALLBACK_CASE_PATTERN: re.Pattern[str] = re.compile(
    rf"\b{REQUIRED_FALLBACK_CASE}\s*\{{",
    re.ASCII,
)
