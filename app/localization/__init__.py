"""Localization system - locale detection, translation files and lookup.

Main components:
- models: LocaleInfo and create_locale_info
- languages: supported locale table and platform locale normalization
- codecs: JSON, properties, PO and plain text translation file formats
- resolvers: LocaleResolver for system locale detection
- store: TranslationStore for loading, reloading and saving languages
- translator: TranslationEngine with fallback lookup and formatting
"""

from localization.codecs import TranslationFormat, get_codec
from localization.errors import (
    I18nError,
    InitializationError,
    LocaleError,
    TranslationFileError,
)
from localization.languages import SupportedLocale, normalize_platform_locale
from localization.models import LocaleInfo, create_locale_info
from localization.resolvers import LocaleResolver
from localization.store import TranslationStore
from localization.translator import TranslationEngine

__all__ = [
    "I18nError",
    "InitializationError",
    "LocaleError",
    "LocaleInfo",
    "LocaleResolver",
    "SupportedLocale",
    "TranslationEngine",
    "TranslationFileError",
    "TranslationFormat",
    "TranslationStore",
    "create_locale_info",
    "get_codec",
    "normalize_platform_locale",
]
