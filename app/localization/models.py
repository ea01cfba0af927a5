"""Locale models for the localization system.

Defines the LocaleInfo value type and its validated constructor.
"""

from dataclasses import dataclass

from localization.errors import LocaleError
from localization.languages import (
    LANGUAGE_NAMES,
    get_language_name,
    normalize_platform_locale,
)


@dataclass(frozen=True)
class LocaleInfo:
    """A locale code paired with its human readable language name.

    Frozen so it is only ever replaced, never mutated in place.

    Attributes:
        locale: POSIX locale code (e.g., "es_ES").
        language: Display name (e.g., "Spanish (Spain)").
    """

    locale: str
    language: str

    def __str__(self) -> str:
        return self.locale

    @property
    def language_code(self) -> str:
        """Language part of the locale ("es" from "es_ES").

        Returns the whole locale when there is no "_" separator.
        """
        return self.locale.split("_", 1)[0]

    @property
    def country_code(self) -> str:
        """Country part of the locale ("ES" from "es_ES"), or ""."""
        _, separator, country = self.locale.partition("_")
        return country if separator else ""

    def is_valid(self) -> bool:
        """Check both fields are set and the locale is supported."""
        return (
            bool(self.locale)
            and bool(self.language)
            and self.locale in LANGUAGE_NAMES
        )


def create_locale_info(code: str) -> LocaleInfo:
    """Create a LocaleInfo for a locale code.

    Platform spellings are accepted and stored in canonical form, so
    "es_ES.UTF-8" yields LocaleInfo("es_ES", "Spanish (Spain)").

    Args:
        code: Locale code to look up.

    Returns:
        LocaleInfo for the canonical code.

    Raises:
        LocaleError: If the code is not in the supported locale table.
    """
    language = get_language_name(code)
    if not language:
        raise LocaleError(f"Unsupported locale: {code}")

    canonical = code if code in LANGUAGE_NAMES else normalize_platform_locale(code)
    return LocaleInfo(locale=canonical, language=language)
