"""Tests for module-level validation.

Python 3.13+.
"""

from __future__ import annotations

from arblexengine.localization import ParsedModule, PlaceholderInfo, TranslationKey
from arblexengine.validation import validate_module


def module_of(*keys: TranslationKey) -> ParsedModule:
    return ParsedModule(name="shop", path=None, keys=keys)


class TestIcuStructure:
    """Every translation runs through the ICU validator."""

    def test_missing_other_case_is_error(self) -> None:
        key = TranslationKey(
            key="itemCount",
            translations={"en": "{n, plural, other{# items}}", "de": "{n, plural, one{1 Artikel}}"},
        )
        result = validate_module(module_of(key))

        assert not result.is_valid
        (error,) = result.errors
        assert error.code == "icu-missing-other-case"
        assert error.key == "itemCount"
        assert error.locale == "de"
        assert error.content == "{n, plural, one{1 Artikel}}"
        assert error.message == "plural message is missing required 'other' case"

    def test_unbalanced_braces_is_error(self) -> None:
        key = TranslationKey(key="itemCount", translations={"en": "{n, plural, other{x}"})
        (error,) = validate_module(module_of(key)).errors
        assert error.code == "icu-unmatched-opening-brace"
        assert error.message == "unmatched opening brace"

    def test_stray_closing_brace_is_error(self) -> None:
        """The error carries the validator's own code and message."""
        key = TranslationKey(key="itemCount", translations={"en": "}{n, plural, other{x}}"})
        (error,) = validate_module(module_of(key)).errors
        assert error.code == "icu-unmatched-closing-brace"
        assert error.message == "unmatched closing brace"


class TestCompleteness:
    """Missing and empty translations are warnings."""

    def test_missing_translation_for_module_locales(self) -> None:
        module = module_of(
            TranslationKey(key="title", translations={"en": "Shop", "de": "Laden"}),
            TranslationKey(key="subtitle", translations={"en": "Welcome"}),
        )
        result = validate_module(module)

        assert result.is_valid
        (warning,) = result.warnings
        assert warning.code == "missing-translation"
        assert (warning.key, warning.locale) == ("subtitle", "de")

    def test_explicit_locales(self) -> None:
        module = module_of(TranslationKey(key="title", translations={"en": "Shop"}))
        result = validate_module(module, locales=["en", "fr", "ar"])
        assert [w.locale for w in result.warnings] == ["fr", "ar"]

    def test_empty_translation(self) -> None:
        module = module_of(TranslationKey(key="title", translations={"en": "  "}))
        (warning,) = validate_module(module).warnings
        assert warning.code == "empty-translation"


class TestPlaceholderUsage:
    """Names used but not declared in metadata are warnings."""

    def test_undeclared_placeholder(self) -> None:
        key = TranslationKey(
            key="greeting",
            translations={"en": "Hi {name}", "de": "Hallo {name}, {count}"},
            placeholders={"name": PlaceholderInfo(type="String")},
        )
        (warning,) = validate_module(module_of(key)).warnings
        assert warning.code == "undeclared-placeholder"
        assert warning.locale == "de"
        assert "'count'" in warning.message

    def test_without_declarations_nothing_is_checked(self) -> None:
        key = TranslationKey(key="greeting", translations={"en": "Hi {name}"})
        assert validate_module(module_of(key)).warning_count == 0

    def test_declared_but_unused_is_fine(self) -> None:
        key = TranslationKey(
            key="greeting",
            translations={"en": "Hi"},
            placeholders={"name": PlaceholderInfo()},
        )
        assert validate_module(module_of(key)).warnings == ()


class TestResult:
    def test_clean_module(self) -> None:
        key = TranslationKey(key="title", translations={"en": "{n, plural, other{{n} items}}"})
        result = validate_module(module_of(key))
        assert result.is_valid
        assert result.error_count == 0
        assert result.warning_count == 0
        assert result.format() == "Validation passed: no errors or warnings"

    def test_format_lists_errors_and_warnings(self) -> None:
        module = module_of(
            TranslationKey(key="a", translations={"en": "{n, plural, one{x}}"}),
            TranslationKey(key="b", translations={"de": "B"}),
        )
        text = validate_module(module).format()
        assert "Errors (1):" in text
        assert "[icu-missing-other-case] a (en)" in text
        assert "Warnings (" in text
        assert "[missing-translation] b (en)" in text
