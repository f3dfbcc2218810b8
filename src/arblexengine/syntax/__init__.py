"""ICU message syntax layer.

Scanning, detection, segmentation and structural validation of ICU
message strings. Everything here is pure: functions take a string and
return new values, with no caching or shared state.

Exports:
    skip_block / is_inside_block / iter_brace_tokens - brace scanner primitives
    has_icu_syntax / get_icu_type - header detection and classification
    get_icu_segments / is_compound_message - top-level expression segmentation
    validate_icu_syntax - brace balance and mandatory case checks

Python 3.13+.
"""

from .icu import (
    IcuSegment,
    get_icu_segments,
    get_icu_type,
    has_icu_syntax,
    is_compound_message,
)
from .scanner import BraceToken, is_inside_block, iter_brace_tokens, skip_block
from .validator import validate_icu_syntax

__all__ = [
    "BraceToken",
    "IcuSegment",
    "get_icu_segments",
    "get_icu_type",
    "has_icu_syntax",
    "is_compound_message",
    "is_inside_block",
    "iter_brace_tokens",
    "skip_block",
    "validate_icu_syntax",
]
