"""Brace-depth-aware scanner for ICU message strings.

Every higher-level operation (placeholder extraction, segmentation,
validation) builds on the primitives here.

Design:
    The scanner is a single left-to-right state machine over the brace
    characters of a message. It keeps a stack of open block kinds, so it
    knows at every `{` whether it stands in a text context (top level or a
    case body) or in the selector region of an ICU block. That distinction
    is what separates a placeholder `{name}` from a case body `male{He}`,
    and it holds for ICU blocks nested to any depth.

    Unbalanced input is a data-quality condition, not a scanner fault:
    nothing here raises on unmatched braces.

Complexity:
    iter_brace_tokens() is O(n): the non-brace stretches are skipped with a
    forward regex search and each `{` is tested with anchored, fixed-shape
    matches only.

Python 3.13+. Zero external dependencies.
"""

import re
from collections.abc import Iterator
from dataclasses import dataclass

from arblexengine.enums import IcuType, TokenKind
from arblexengine.syntax.patterns import ICU_HEADER_PATTERN, SIMPLE_PLACEHOLDER_PATTERN

__all__ = [
    "BraceToken",
    "is_inside_block",
    "iter_brace_tokens",
    "skip_block",
]

_BRACE_PATTERN = re.compile(r"[{}]")

# Token kinds that push a block onto the scanner stack
_OPENING_KINDS = frozenset({TokenKind.ICU_OPEN, TokenKind.CASE_OPEN, TokenKind.GROUP_OPEN})


@dataclass(frozen=True, slots=True)
class BraceToken:
    """One brace event in a message.

    Attributes:
        kind: What the brace means in its context
        start: Offset of the brace character
        end: Offset just past the token (past the header for ICU_OPEN,
             past the closing brace for PLACEHOLDER)
        depth: Number of blocks open before this token. For CLOSE tokens,
               the depth after the block has been closed.
        name: Control variable (ICU_OPEN) or placeholder name (PLACEHOLDER)
        icu_type: ICU type for ICU_OPEN tokens
        in_icu: True when at least one enclosing block is an ICU block
    """

    kind: TokenKind
    start: int
    end: int
    depth: int
    name: str | None = None
    icu_type: IcuType | None = None
    in_icu: bool = False

    @property
    def opens_block(self) -> bool:
        """Check if this token pushes a new block."""
        return self.kind in _OPENING_KINDS


def skip_block(text: str, start: int) -> int:
    """Return the index just past the brace matching the one at ``start``.

    Counts `{` as +1 and `}` as -1 from ``start``. Quoting and escaping are
    not recognized.

    Args:
        text: Message text
        start: Index of an opening brace

    Returns:
        Index immediately after the matching closing brace, or len(text)
        when the string ends before the depth returns to zero.

    Raises:
        ValueError: If text[start] is not an opening brace

    Example:
        >>> skip_block("a {b {c}} d", 2)
        9
        >>> skip_block("{never closed", 0)
        13
    """
    if not 0 <= start < len(text) or text[start] != "{":
        msg = f"skip_block() must start at an opening brace, got index {start}"
        raise ValueError(msg)

    depth = 0
    for match in _BRACE_PATTERN.finditer(text, start):
        if match.group() == "{":
            depth += 1
        else:
            depth -= 1
            if depth == 0:
                return match.end()
    return len(text)


def iter_brace_tokens(text: str) -> Iterator[BraceToken]:
    """Scan a message and yield one token per brace event, left to right.

    Context rules at an opening brace:
        - Directly inside an ICU block (its selector region): CASE_OPEN.
          The body is literal text, so `male{He}` never reads as a
          placeholder named "He".
        - Anywhere else: ICU_OPEN if an ICU header starts here, otherwise
          PLACEHOLDER for `{name}`, otherwise GROUP_OPEN.

    Args:
        text: Message text

    Yields:
        BraceToken for every brace event

    Example:
        >>> [t.kind.value for t in iter_brace_tokens("{n, plural, other{{n}}}")]
        ['icu_open', 'case_open', 'placeholder', 'close', 'close']
    """
    stack: list[TokenKind] = []
    icu_open = 0
    pos = 0

    while (match := _BRACE_PATTERN.search(text, pos)) is not None:
        pos = match.start()
        depth = len(stack)

        if match.group() == "}":
            if not stack:
                yield BraceToken(TokenKind.STRAY_CLOSE, pos, pos + 1, 0, in_icu=False)
            else:
                if stack.pop() is TokenKind.ICU_OPEN:
                    icu_open -= 1
                yield BraceToken(TokenKind.CLOSE, pos, pos + 1, depth - 1, in_icu=icu_open > 0)
            pos += 1
            continue

        in_icu = icu_open > 0

        if stack and stack[-1] is TokenKind.ICU_OPEN:
            yield BraceToken(TokenKind.CASE_OPEN, pos, pos + 1, depth, in_icu=in_icu)
            stack.append(TokenKind.CASE_OPEN)
            pos += 1
            continue

        if (header := ICU_HEADER_PATTERN.match(text, pos)) is not None:
            yield BraceToken(
                TokenKind.ICU_OPEN,
                pos,
                header.end(),
                depth,
                name=header.group(1),
                icu_type=IcuType(header.group(2)),
                in_icu=in_icu,
            )
            stack.append(TokenKind.ICU_OPEN)
            icu_open += 1
            pos = header.end()
            continue

        if (placeholder := SIMPLE_PLACEHOLDER_PATTERN.match(text, pos)) is not None:
            yield BraceToken(
                TokenKind.PLACEHOLDER,
                pos,
                placeholder.end(),
                depth,
                name=placeholder.group(1),
                in_icu=in_icu,
            )
            pos = placeholder.end()
            continue

        yield BraceToken(TokenKind.GROUP_OPEN, pos, pos + 1, depth, in_icu=in_icu)
        stack.append(TokenKind.GROUP_OPEN)
        pos += 1


def is_inside_block(text: str, position: int) -> bool:
    """Check if ``position`` lies inside a top-level ICU block.

    Replays the scan from index 0 up to ``position``, tracking depth and
    whether the most recent block opened at depth 1 started with an ICU
    header.

    Args:
        text: Message text
        position: Offset to test

    Returns:
        True only while depth > 0 inside a block whose top-level opener
        was an ICU header.

    Example:
        >>> text = "{n, plural, other{{n} items}} {x}"
        >>> is_inside_block(text, text.index("{n}"))
        True
        >>> is_inside_block(text, text.index("{x}"))
        False
    """
    depth = 0
    top_level_is_icu = False

    for token in iter_brace_tokens(text):
        if token.start >= position:
            break
        if token.opens_block:
            if token.depth == 0:
                top_level_is_icu = token.kind is TokenKind.ICU_OPEN
            depth = token.depth + 1
        elif token.kind is TokenKind.CLOSE:
            depth = token.depth

    return depth > 0 and top_level_is_icu
