"""ICU structural validation for single messages.

Checks brace balance and the mandatory fallback case. This is a permissive
policy check, not full ICU MessageFormat compliance:

- Plain strings (no ICU header) always validate.
- Braces must balance: a running count may never go negative and must end
  at zero.
- When the FIRST ICU expression is plural or selectordinal, an `other`
  case must appear somewhere in the text.
- select messages are not required to declare `other`; a finite
  enumerated set may be exhaustive.

Results are values (IcuValidationResult), never exceptions, so callers can
batch-report every issue in a module.

Python 3.13+. Zero external dependencies.
"""

from arblexengine.constants import REQUIRED_FALLBACK_CASE
from arblexengine.diagnostics import DiagnosticCode, IcuValidationResult
from arblexengine.enums import IcuType
from arblexengine.syntax.icu import get_icu_type, has_icu_syntax
from arblexengine.syntax.patterns import FALLBACK_CASE_PATTERN

__all__ = ["validate_icu_syntax"]

_TYPES_REQUIRING_FALLBACK = frozenset({IcuType.PLURAL, IcuType.SELECTORDINAL})


def _check_brace_balance(text: str) -> IcuValidationResult:
    balance = 0
    for char in text:
        if char == "{":
            balance += 1
        elif char == "}":
            balance -= 1
            if balance < 0:
                return IcuValidationResult.fail(
                    DiagnosticCode.ICU_UNMATCHED_CLOSING_BRACE,
                    "unmatched closing brace",
                )
    if balance != 0:
        return IcuValidationResult.fail(
            DiagnosticCode.ICU_UNMATCHED_OPENING_BRACE,
            "unmatched opening brace",
        )
    return IcuValidationResult.ok()


def validate_icu_syntax(text: str) -> IcuValidationResult:
    """Validate the ICU structure of a message.

    Args:
        text: Message text

    Returns:
        IcuValidationResult; ``error`` names the first failed check

    Example:
        >>> validate_icu_syntax("{count, plural, other{x}}").valid
        True
        >>> validate_icu_syntax("{count, plural, other{x}").error
        'unmatched opening brace'
    """
    if not has_icu_syntax(text):
        return IcuValidationResult.ok()

    balance = _check_brace_balance(text)
    if not balance.valid:
        return balance

    icu_type = get_icu_type(text)
    if icu_type in _TYPES_REQUIRING_FALLBACK and FALLBACK_CASE_PATTERN.search(text) is None:
        return IcuValidationResult.fail(
            DiagnosticCode.ICU_MISSING_OTHER_CASE,
            f"{icu_type} message is missing required '{REQUIRED_FALLBACK_CASE}' case",
        )

    return IcuValidationResult.ok()
