"""Custom exceptions for the localization system.

Validation failures (unsupported locale codes, missing base folder) always
propagate to the caller. Parse and I/O failures of individual translation
files never surface as exceptions; the store logs them and moves on.
"""


class I18nError(Exception):
    """Base exception for all localization errors.

    Example:
        try:
            engine = TranslationEngine("translations", "en_US")
        except I18nError as e:
            logger.error("i18n_unavailable", error=str(e))
    """

    pass


class LocaleError(I18nError):
    """Raised when a locale or language code fails validation.

    Example:
        >>> engine.set_locale("xx_XX")
        Traceback (most recent call last):
        ...
        LocaleError: Locale error: Unsupported locale: xx_XX
    """

    def __init__(self, message: str):
        super().__init__(f"Locale error: {message}")


class TranslationFileError(I18nError):
    """Raised when the translations base folder cannot be used."""

    def __init__(self, message: str):
        super().__init__(f"Translation file error: {message}")


class InitializationError(I18nError):
    """Raised when the engine startup sequence fails unexpectedly."""

    pass

