"""ICU expression detection and segmentation.

Detection answers "is this an ICU message, and of which type?".
Segmentation splits a message into its top-level ICU expressions with
exact character offsets, which is what code generators need to emit
formatting logic for compound messages.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from arblexengine.enums import IcuType
from arblexengine.syntax.patterns import ICU_HEADER_PATTERN
from arblexengine.syntax.scanner import skip_block

__all__ = [
    "IcuSegment",
    "get_icu_segments",
    "get_icu_type",
    "has_icu_syntax",
    "is_compound_message",
]


@dataclass(frozen=True, slots=True)
class IcuSegment:
    """One top-level ICU expression inside a message.

    ``[start, end)`` are half-open character offsets into the original
    message, so ``raw == message[start:end]``. For balanced input ``raw``
    runs from the header's `{` through its matching `}`.
    """

    variable: str
    """Control variable named in the header."""

    type: IcuType
    """plural, select or selectordinal."""

    start: int
    """Offset of the opening brace."""

    end: int
    """Offset just past the matching closing brace."""

    raw: str
    """Exact source text of the expression."""


def has_icu_syntax(text: str) -> bool:
    """Check if text contains a `{var, plural|select|selectordinal,` header.

    No escaping is recognized.

    Example:
        >>> has_icu_syntax("{count, plural, other{items}}")
        True
        >>> has_icu_syntax("Hello {name}")
        False
    """
    return ICU_HEADER_PATTERN.search(text) is not None


def get_icu_type(text: str) -> IcuType | None:
    """Return the type of the first ICU header in left-to-right order.

    Later segments of a compound message do not affect the result.

    Args:
        text: Message text

    Returns:
        IcuType of the first header, or None for plain messages

    Example:
        >>> get_icu_type("{g, select, a{A} other{B}} {n, plural, other{#}}")
        <IcuType.SELECT: 'select'>
    """
    match = ICU_HEADER_PATTERN.search(text)
    if match is None:
        return None
    return IcuType(match.group(2))


def get_icu_segments(text: str) -> list[IcuSegment]:
    """Split a message into its top-level ICU expressions.

    Searches for a header, resolves its closing brace by depth counting,
    then resumes the search after that block. Headers nested inside a
    resolved block are therefore part of its segment, and segments never
    overlap.

    Args:
        text: Message text

    Returns:
        Segments in left-to-right discovery order (empty for plain text)

    Example:
        >>> text = "{g, select, male{He} other{They}} has {n, plural, other{{n} items}}"
        >>> [(s.variable, s.type.value) for s in get_icu_segments(text)]
        [('g', 'select'), ('n', 'plural')]
    """
    segments: list[IcuSegment] = []
    pos = 0

    while (match := ICU_HEADER_PATTERN.search(text, pos)) is not None:
        start = match.start()
        end = skip_block(text, start)
        segments.append(
            IcuSegment(
                variable=match.group(1),
                type=IcuType(match.group(2)),
                start=start,
                end=end,
                raw=text[start:end],
            )
        )
        pos = end

    return segments


def is_compound_message(text: str) -> bool:
    """Check if a message holds two or more independent top-level ICU expressions.

    One ICU expression with nested placeholders or nested ICU blocks is not
    compound.
    """
    return len(get_icu_segments(text)) > 1
