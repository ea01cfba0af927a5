"""Translation engine: locale switching, fallback lookup and formatting.

Public surface of the localization system. UI code only needs translate(),
translate_with_params(), set_locale() and get_current_locale().
"""

from pathlib import Path
from typing import Dict, List, Mapping, Optional, Union

from core.logging import get_module_logger
from localization.errors import InitializationError, LocaleError, TranslationFileError
from localization.languages import get_supported_locales, is_language_supported
from localization.models import LocaleInfo, create_locale_info
from localization.resolvers import LocaleResolver
from localization.store import TranslationStore

logger = get_module_logger()


class TranslationEngine:
    """Translation lookup with a target -> fallback -> key chain.

    Construct one instance at startup and pass it to every consumer. The
    engine is synchronous and has no internal locking; callers on several
    threads must serialize access to one instance themselves.

    Attributes:
        resolver: LocaleResolver used to detect the system locale.
        store: TranslationStore holding every loaded language.
    """

    def __init__(
        self,
        base_folder: Union[str, Path],
        fallback_language: str = "en_US",
        resolver: Optional[LocaleResolver] = None,
        default_format: str = ".json",
    ):
        """Initialize the engine and load the fallback language.

        Args:
            base_folder: Folder with <locale>.<ext> files, relative paths
                are resolved against the current working directory.
            fallback_language: Locale consulted when a key is missing; it is
                always loaded.
            resolver: Optional pre-configured LocaleResolver.
            default_format: Extension used by save_translations() when no
                format hint is given.

        Raises:
            TranslationFileError: If base_folder does not exist.
            LocaleError: If fallback_language is not supported.
            InitializationError: If locale detection or loading fails
                unexpectedly.
        """
        self._base_folder = Path.cwd() / Path(base_folder)
        if not self._base_folder.is_dir():
            raise TranslationFileError(
                f"Translation directory does not exist: {self._base_folder}"
            )

        if not is_language_supported(fallback_language):
            raise LocaleError(f"Fallback language not supported: {fallback_language}")

        self._fallback_language = create_locale_info(fallback_language).locale
        self.resolver = resolver or LocaleResolver(self._fallback_language)
        self.store = TranslationStore(self._base_folder)
        self.default_format = default_format

        self._initialize()

    def _initialize(self) -> None:
        try:
            self._system_locale = self.resolver.resolve()
            self._current_locale = self.resolver.resolve_current(self._system_locale)
            self._default_language = self._current_locale.locale

            self.store.add_language(self._fallback_language)

            if self._current_locale.locale != self._fallback_language:
                try:
                    self.store.add_language(self._current_locale.locale)
                except LocaleError as e:
                    logger.warning(
                        "current_locale_not_loaded",
                        locale=self._current_locale.locale,
                        error=str(e),
                    )
        except Exception as e:
            raise InitializationError(f"Failed to initialize i18n system: {e}") from e

        logger.info(
            "initialized_translation_engine",
            base_folder=str(self._base_folder),
            fallback_language=self._fallback_language,
            system_locale=self._system_locale.locale,
            current_locale=self._current_locale.locale,
        )

    @property
    def base_folder(self) -> Path:
        return self._base_folder

    @property
    def fallback_language(self) -> str:
        return self._fallback_language

    @property
    def default_language(self) -> str:
        """Locale selected at startup."""
        return self._default_language

    @property
    def raw_locale(self) -> str:
        """Host locale string as read during detection."""
        return self.resolver.raw_locale

    def get_current_locale(self) -> LocaleInfo:
        return self._current_locale

    def get_system_locale(self) -> LocaleInfo:
        return self._system_locale

    def set_locale(self, locale: Union[LocaleInfo, str]) -> None:
        """Switch the current locale, loading the language if needed.

        Args:
            locale: LocaleInfo or locale code.

        Raises:
            LocaleError: If the locale is invalid or unsupported. The current
                locale is left unchanged.
        """
        if isinstance(locale, LocaleInfo):
            if not locale.is_valid():
                raise LocaleError(f"Invalid locale: {locale.locale}")
            locale_info = locale
        else:
            locale_info = create_locale_info(locale)

        if not self.store.has_language(locale_info.locale):
            self.store.add_language(locale_info.locale)

        previous = self._current_locale.locale
        self._current_locale = locale_info
        logger.info("locale_changed", previous=previous, locale=locale_info.locale)

    def add_language(self, language: str) -> Dict[str, str]:
        """Load a language (idempotent).

        Returns:
            The live translation map for the language.

        Raises:
            LocaleError: If the language is not supported.
        """
        return self.store.add_language(create_locale_info(language).locale)

    def has_language(self, language: str) -> bool:
        return self.store.has_language(language)

    def add_translation(
        self,
        key: str,
        value: str,
        language: str = "",
        fallback_value: str = "",
    ) -> None:
        """Add or replace a translation.

        Args:
            key: Translation key.
            value: Translated text for `language`.
            language: Target locale (default: current locale).
            fallback_value: Optional text stored under the same key in the
                fallback language, ignored when `language` is the fallback.

        Raises:
            LocaleError: If `language` is not supported.
        """
        if language:
            target = create_locale_info(language).locale
        else:
            target = self._current_locale.locale
        self.store.set_translation(target, key, value)

        if fallback_value and target != self._fallback_language:
            self.store.set_translation(self._fallback_language, key, fallback_value)

    def translate(self, key: str, language: str = "") -> str:
        """Translate a key.

        Lookup order: `language` (default: current locale), then the
        fallback language, then the key itself.

        Returns:
            Translated text, or the key when no language defines it.
        """
        target = language or self._current_locale.locale

        entries = self.store.get_language(target)
        if entries is not None and key in entries:
            return entries[key]

        if target != self._fallback_language:
            fallback_entries = self.store.get_language(self._fallback_language)
            if fallback_entries is not None and key in fallback_entries:
                logger.debug(
                    "used_fallback_translation",
                    key=key,
                    requested_language=target,
                    fallback_language=self._fallback_language,
                )
                return fallback_entries[key]

        logger.debug("translation_not_found", key=key, language=target)
        return key

    def t(self, text: str) -> str:
        """Shorthand for translate() in the current locale."""
        return self.translate(text)

    def translate_with_params(
        self,
        key: str,
        params: Mapping[str, object],
        language: str = "",
    ) -> str:
        """Translate a key and substitute {name} placeholders.

        Every occurrence of "{name}" is replaced by str(params[name]).
        Inserted values are never scanned again, and placeholders missing
        from params are left as they are.
        """
        message = self.translate(key, language)

        for name, value in params.items():
            placeholder = "{" + name + "}"
            replacement = str(value)
            position = message.find(placeholder)
            while position != -1:
                end = position + len(placeholder)
                message = message[:position] + replacement + message[end:]
                position = message.find(placeholder, position + len(replacement))

        return message

    def translate_plural(
        self,
        singular_key: str,
        plural_key: str,
        count: int,
        language: str = "",
    ) -> str:
        """Translate singular_key when count is 1, plural_key otherwise.

        This is a two-form rule only; languages with more plural categories
        are not modelled.
        """
        key = singular_key if count == 1 else plural_key
        return self.translate(key, language)

    def get_translations(self, language: str = "") -> Dict[str, str]:
        """Copy of a language's translations ({} if not loaded)."""
        target = language or self._current_locale.locale
        return dict(self.store.get_language(target) or {})

    def get_language(self, language: str) -> Optional[Dict[str, str]]:
        return self.store.get_language(language)

    def get_fallback_translations(self) -> Optional[Dict[str, str]]:
        return self.store.get_language(self._fallback_language)

    def get_available_languages(self) -> List[str]:
        """Loaded languages, sorted."""
        return sorted(self.store.translations)

    @staticmethod
    def get_supported_languages() -> List[str]:
        """Every supported locale code, sorted."""
        return get_supported_locales()

    def reload_translations(self) -> int:
        """Re-read every loaded language from disk.

        Returns:
            Number of languages whose file was parsed successfully.
        """
        return self.store.reload()

    def save_translations(
        self, language: str, format_hint: Optional[str] = None
    ) -> bool:
        """Write a loaded language back to disk.

        The format of an existing file is kept; format_hint (default:
        default_format) only applies when the language has no file yet.
        """
        return self.store.save(language, format_hint or self.default_format)

    def get_translation_stats(self) -> Dict[str, int]:
        """Number of entries per loaded language."""
        return self.store.stats()

    def find_missing_translations(self, language: str) -> List[str]:
        """Sorted keys defined in the fallback language but not in `language`."""
        return self.store.missing(language, self._fallback_language)
