"""Aggregation configuration.

Provides a single frozen dataclass that encapsulates the parameters
controlling how locale documents are merged into translation keys.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["AggregatorConfig"]


@dataclass(frozen=True, slots=True)
class AggregatorConfig:
    """Immutable configuration for KeyAggregator.

    All fields have sensible defaults; constructing ``AggregatorConfig()``
    with no arguments merges documents in plain locale order and never
    raises on data errors.

    Attributes:
        default_locale: Locale whose documents are merged first, so its
            metadata (description, placeholders) owns every key it defines.
            Remaining documents follow in normalized locale order. When
            None, all documents are merged in normalized locale order.
        strict: If True, raise ArbAggregationError after a module has been
            fully processed when any issue was collected (default: False).

    Example:
        >>> config = AggregatorConfig(default_locale="en")
        >>> aggregator = KeyAggregator(config)
    """

    default_locale: str | None = None
    strict: bool = False

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If default_locale is an empty or blank string
        """
        if self.default_locale is not None and not self.default_locale.strip():
            msg = "default_locale must be a non-empty locale code or None"
            raise ValueError(msg)
