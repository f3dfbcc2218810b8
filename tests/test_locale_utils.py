"""Tests for locale_utils.py.

Python 3.13+.
"""

from __future__ import annotations

import pytest
from babel import Locale
from babel.core import UnknownLocaleError
from hypothesis import given
from hypothesis import strategies as st

from arblexengine.locale_utils import get_babel_locale, is_known_locale, normalize_locale


class TestNormalizeLocale:
    def test_bcp47_to_posix(self) -> None:
        assert normalize_locale("pt-BR") == "pt_BR"

    def test_posix_unchanged(self) -> None:
        assert normalize_locale("zh_Hans_CN") == "zh_Hans_CN"

    def test_multiple_hyphens(self) -> None:
        assert normalize_locale("zh-Hans-CN") == "zh_Hans_CN"

    @given(st.text(alphabet="abcXYZ-_", max_size=12))
    def test_idempotent(self, code: str) -> None:
        once = normalize_locale(code)
        assert normalize_locale(once) == once
        assert "-" not in once


class TestGetBabelLocale:
    def test_returns_locale(self) -> None:
        locale = get_babel_locale("pt-BR")
        assert isinstance(locale, Locale)
        assert (locale.language, locale.territory) == ("pt", "BR")

    def test_cached(self) -> None:
        assert get_babel_locale("de_DE") is get_babel_locale("de_DE")

    def test_unknown_raises(self) -> None:
        with pytest.raises(UnknownLocaleError):
            get_babel_locale("xx_YY")


class TestIsKnownLocale:
    @pytest.mark.parametrize("code", ["en", "en_US", "ar_EG", "pt-BR", "sr_Latn", "zh_Hans"])
    def test_known(self, code: str) -> None:
        assert is_known_locale(code)

    @pytest.mark.parametrize("code", ["", "xx_YY", "not a locale"])
    def test_unknown(self, code: str) -> None:
        assert not is_known_locale(code)
