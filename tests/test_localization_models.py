"""Tests for the ARB data model.

Python 3.13+.
"""

from __future__ import annotations

import pytest

from arblexengine.diagnostics import ArbSchemaError, DiagnosticCode
from arblexengine.localization import (
    AggregationIssue,
    LocaleDocument,
    ParsedModule,
    PlaceholderInfo,
    TranslationKey,
)

# ============================================================================
# PlaceholderInfo
# ============================================================================


class TestPlaceholderInfoFromMapping:
    """PlaceholderInfo.from_mapping() maps ARB camelCase fields."""

    def test_all_known_fields(self) -> None:
        info = PlaceholderInfo.from_mapping(
            "date",
            {
                "type": "DateTime",
                "example": "2024-01-01",
                "format": "yMMMd",
                "isCustomDateFormat": True,
                "optionalParameters": {"decimalDigits": 2},
            },
        )
        assert info.type == "DateTime"
        assert info.example == "2024-01-01"
        assert info.format == "yMMMd"
        assert info.is_custom_date_format is True
        assert info.optional_parameters == {"decimalDigits": 2}
        assert info.extra == {}

    def test_empty_mapping(self) -> None:
        assert PlaceholderInfo.from_mapping("name", {}) == PlaceholderInfo()

    def test_example_kept_verbatim(self) -> None:
        assert PlaceholderInfo.from_mapping("count", {"example": 3}).example == 3

    def test_string_flag_accepted(self) -> None:
        info = PlaceholderInfo.from_mapping("date", {"isCustomDateFormat": "false"})
        assert info.is_custom_date_format is False

    def test_unknown_fields_go_to_extra(self) -> None:
        info = PlaceholderInfo.from_mapping("name", {"type": "String", "description": "Who"})
        assert info.extra == {"description": "Who"}

    def test_non_string_type_rejected(self) -> None:
        with pytest.raises(ArbSchemaError) as exc_info:
            PlaceholderInfo.from_mapping("count", {"type": 3})
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.PLACEHOLDER_FIELD_INVALID
        assert "'count'" in exc_info.value.diagnostic.message
        assert "'type'" in exc_info.value.diagnostic.message

    def test_invalid_flag_rejected(self) -> None:
        with pytest.raises(ArbSchemaError, match="isCustomDateFormat"):
            PlaceholderInfo.from_mapping("date", {"isCustomDateFormat": "yes"})

    def test_optional_parameters_must_be_object(self) -> None:
        with pytest.raises(ArbSchemaError, match="optionalParameters"):
            PlaceholderInfo.from_mapping("amount", {"optionalParameters": [2]})


# ============================================================================
# TranslationKey / ParsedModule
# ============================================================================


class TestTranslationKey:
    """TranslationKey completeness and ordering helpers."""

    def test_has_translation(self) -> None:
        key = TranslationKey(key="title", translations={"en": "Title"})
        assert key.has_translation("en")
        assert not key.has_translation("de")

    def test_missing_locales_keeps_requested_order(self) -> None:
        key = TranslationKey(key="title", translations={"de": "Titel"})
        assert key.missing_locales(["fr", "de", "en"]) == ("fr", "en")

    def test_ordered_placeholders_uses_declared_order(self) -> None:
        key = TranslationKey(
            key="greeting",
            translations={"en": "{a} {b}"},
            placeholders={"b": PlaceholderInfo(), "a": PlaceholderInfo()},
        )
        assert key.ordered_placeholders("en") == ("b", "a")

    def test_ordered_placeholders_from_text(self) -> None:
        key = TranslationKey(key="greeting", translations={"de": "{b}, {a}"})
        assert key.ordered_placeholders("de") == ("b", "a")

    def test_ordered_placeholders_unknown_locale(self) -> None:
        key = TranslationKey(key="greeting", translations={"en": "Hi"})
        with pytest.raises(KeyError):
            key.ordered_placeholders("fr")


class TestParsedModule:
    """ParsedModule lookups."""

    def test_locales_are_sorted_union(self) -> None:
        module = ParsedModule(
            name="shop",
            path=None,
            keys=(
                TranslationKey(key="a", translations={"fr": "a", "en": "a"}),
                TranslationKey(key="b", translations={"de": "b"}),
            ),
        )
        assert module.locales == ("de", "en", "fr")

    def test_get_key(self) -> None:
        title = TranslationKey(key="title", translations={"en": "Title"})
        module = ParsedModule(name="shop", path=None, keys=(title,))
        assert module.get_key("title") is title
        assert module.get_key("missing") is None


# ============================================================================
# LocaleDocument / AggregationIssue
# ============================================================================


class TestLocaleDocument:
    def test_label_prefers_source_path(self) -> None:
        doc = LocaleDocument("en", "shop", {}, source_path="lib/shop/l10n/shop_en.arb")
        assert doc.label == "lib/shop/l10n/shop_en.arb"

    def test_label_without_path(self) -> None:
        assert LocaleDocument("en", "shop", {}).label == "shop/en"


class TestAggregationIssue:
    """AggregationIssue formatting and conversion."""

    def test_format_per_key(self) -> None:
        issue = AggregationIssue(
            code=DiagnosticCode.TRANSLATION_NOT_STRING,
            message="Value of 'title' must be a string, got int",
            module="shop",
            locale="en",
            key="title",
        )
        assert issue.format() == (
            "[TRANSLATION_NOT_STRING] shop/en title: Value of 'title' must be a string, got int"
        )

    def test_format_without_module(self) -> None:
        issue = AggregationIssue(
            code=DiagnosticCode.DOCUMENT_INVALID_JSON,
            message="Invalid JSON",
            module=None,
            source_path="lib/shop/l10n/shop_en.arb",
        )
        assert issue.format() == "[DOCUMENT_INVALID_JSON] lib/shop/l10n/shop_en.arb: Invalid JSON"

    def test_to_diagnostic(self) -> None:
        issue = AggregationIssue(
            code=DiagnosticCode.METADATA_NOT_OBJECT,
            message="bad metadata",
            module="shop",
            locale="de",
            key="title",
            source_path="shop_de.arb",
        )
        diagnostic = issue.to_diagnostic()
        assert diagnostic.code is DiagnosticCode.METADATA_NOT_OBJECT
        assert (diagnostic.locale, diagnostic.key, diagnostic.source_path) == (
            "de",
            "title",
            "shop_de.arb",
        )
