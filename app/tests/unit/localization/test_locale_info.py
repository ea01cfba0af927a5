"""Tests for localization.models module."""

import dataclasses

import pytest

from localization import LocaleError, LocaleInfo, create_locale_info
from localization.languages import get_supported_locales
from tests.factories.localization import make_locale_info


@pytest.mark.unit
class TestLocaleInfo:
    """Tests for LocaleInfo value type."""

    def test_language_and_country_codes(self):
        """Codes are split on the first underscore."""
        info = make_locale_info("es_ES", "Spanish (Spain)")
        assert info.language_code == "es"
        assert info.country_code == "ES"

    def test_codes_without_separator(self):
        """Without "_" the country code is empty."""
        info = make_locale_info("es", "Spanish")
        assert info.language_code == "es"
        assert info.country_code == ""

    def test_codes_split_on_first_separator(self):
        info = make_locale_info("sr_RS_latin", "Serbian")
        assert info.language_code == "sr"
        assert info.country_code == "RS_latin"

    def test_is_valid(self):
        assert make_locale_info("es_ES", "Spanish (Spain)").is_valid() is True

    @pytest.mark.parametrize(
        "locale,language",
        [
            ("", "Spanish (Spain)"),
            ("es_ES", ""),
            ("xx_XX", "Nowhere"),
            ("es_ES.UTF-8", "Spanish (Spain)"),
        ],
    )
    def test_is_invalid(self, locale, language):
        """Empty fields or unsupported codes are invalid."""
        assert make_locale_info(locale, language).is_valid() is False

    def test_frozen(self):
        """LocaleInfo cannot be mutated in place."""
        info = make_locale_info()
        with pytest.raises(dataclasses.FrozenInstanceError):
            info.locale = "fr_FR"

    def test_str(self):
        assert str(make_locale_info("fr_FR", "French (France)")) == "fr_FR"


@pytest.mark.unit
class TestCreateLocaleInfo:
    """Tests for create_locale_info()."""

    @pytest.mark.parametrize("code", get_supported_locales())
    def test_every_supported_code_is_valid(self, code):
        info = create_locale_info(code)
        assert info.locale == code
        assert info.is_valid()

    def test_display_name(self):
        assert create_locale_info("pt_BR").language == "Portuguese (Brazil)"

    def test_platform_code_is_canonicalized(self):
        """Platform spellings are stored as the canonical code."""
        info = create_locale_info("es_ES.UTF-8")
        assert info == LocaleInfo("es_ES", "Spanish (Spain)")

    @pytest.mark.parametrize("code", ["", "xx_XX", "ja_JP", "C"])
    def test_unsupported_raises(self, code):
        with pytest.raises(LocaleError, match="Unsupported locale"):
            create_locale_info(code)
