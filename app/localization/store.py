"""In-memory translation store backed by <language>.<ext> files.

Maps each loaded language code to its flat {key: value} translations and
orchestrates loading, reloading and saving through the codecs.
"""

from pathlib import Path
from typing import Dict, List, Optional

from core.logging import get_module_logger
from localization.codecs import LOAD_PRIORITY, TranslationFormat, get_codec
from localization.errors import LocaleError
from localization.languages import LANGUAGE_NAMES

logger = get_module_logger()


class TranslationStore:
    """Container for the translations of every loaded language.

    A language present in `translations` is loaded, possibly with an empty
    map when no file existed. A language that was never requested is absent.

    Attributes:
        base_folder: Directory holding the translation files.
        translations: {language_code: {key: value}}.
    """

    def __init__(self, base_folder: Path):
        self.base_folder = Path(base_folder)
        self.translations: Dict[str, Dict[str, str]] = {}

    def file_path(self, language: str, file_format: TranslationFormat) -> Path:
        return self.base_folder / f"{language}{file_format.value}"

    def find_existing_file(self, language: str) -> Optional[Path]:
        """Return the highest priority translation file for a language, if any."""
        for file_format in LOAD_PRIORITY:
            path = self.file_path(language, file_format)
            if path.is_file():
                return path
        return None

    def load_translation_file(self, language: str) -> bool:
        """Load a language from the first file that parses successfully.

        Formats are probed in LOAD_PRIORITY order. A file that cannot be
        read, or that yields no translations, is skipped in favour of the
        next format. Nothing is raised for I/O or parse problems.

        Args:
            language: Locale code (e.g., "es_ES").

        Returns:
            True if translations were loaded into the store, False otherwise.
        """
        for file_format in LOAD_PRIORITY:
            path = self.file_path(language, file_format)
            if not path.is_file():
                continue

            try:
                with open(path, "r", encoding="utf-8-sig") as f:
                    content = f.read()
            except (OSError, UnicodeDecodeError) as e:
                logger.error(
                    "translation_file_read_failed",
                    language=language,
                    file=str(path),
                    error=str(e),
                )
                continue

            translations = get_codec(file_format).parse(content)
            if not translations:
                logger.warning(
                    "translation_file_without_entries",
                    language=language,
                    file=str(path),
                )
                continue

            self.translations[language] = translations
            logger.info(
                "loaded_translations",
                language=language,
                file=str(path),
                entry_count=len(translations),
            )
            return True

        return False

    def has_language(self, language: str) -> bool:
        return language in self.translations

    def get_language(self, language: str) -> Optional[Dict[str, str]]:
        return self.translations.get(language)

    def add_language(self, language: str) -> Dict[str, str]:
        """Load a language, or return it unchanged if already loaded.

        When no translation file can be loaded the language is registered
        with an empty map, so later lookups go straight to the fallback
        chain without touching the disk again.

        Args:
            language: Supported locale code.

        Returns:
            The live translation map for the language.

        Raises:
            LocaleError: If the language is not supported.
        """
        if language not in LANGUAGE_NAMES:
            raise LocaleError(f"Language not supported: {language}")

        if language in self.translations:
            return self.translations[language]

        if not self.load_translation_file(language):
            logger.info("registered_empty_language", language=language)
            self.translations[language] = {}

        return self.translations[language]

    def set_translation(self, language: str, key: str, value: str) -> None:
        """Set one translation, loading the language first if needed."""
        self.add_language(language)[key] = value

    def reload(self) -> int:
        """Re-read every loaded language from disk.

        A language whose file has disappeared stays loaded with an empty map.

        Returns:
            Number of languages whose file was parsed successfully.
        """
        reloaded_count = 0
        for language in sorted(self.translations):
            del self.translations[language]
            if self.load_translation_file(language):
                reloaded_count += 1
            else:
                self.translations[language] = {}

        logger.info(
            "reloaded_translations",
            language_count=len(self.translations),
            reloaded_count=reloaded_count,
        )
        return reloaded_count

    def save(self, language: str, format_hint: str = ".json") -> bool:
        """Write a language's translations to disk.

        An existing file for the language keeps its format. Otherwise a new
        file is created in the format named by format_hint; an unknown hint
        is written in properties format.

        Args:
            language: Loaded locale code.
            format_hint: Extension for a newly created file.

        Returns:
            True if the file was written, False if the language is not
            loaded or the write failed.
        """
        translations = self.translations.get(language)
        if translations is None:
            logger.warning("save_skipped_language_not_loaded", language=language)
            return False

        path = self.find_existing_file(language)
        if path is not None:
            file_format = TranslationFormat(path.suffix)
        else:
            try:
                file_format = TranslationFormat.from_extension(format_hint)
            except ValueError:
                logger.warning(
                    "unsupported_format_hint",
                    language=language,
                    format_hint=format_hint,
                    using=TranslationFormat.PROPERTIES.value,
                )
                file_format = TranslationFormat.PROPERTIES
            path = self.file_path(language, file_format)

        content = get_codec(file_format).serialize(translations, language)
        try:
            with open(path, "w", encoding="utf-8") as f:
                f.write(content)
        except OSError as e:
            logger.error(
                "translation_file_write_failed",
                language=language,
                file=str(path),
                error=str(e),
            )
            return False

        logger.info(
            "saved_translations",
            language=language,
            file=str(path),
            entry_count=len(translations),
        )
        return True

    def stats(self) -> Dict[str, int]:
        return {
            language: len(entries) for language, entries in self.translations.items()
        }

    def missing(self, language: str, fallback_language: str) -> List[str]:
        """Keys present in the fallback language but absent from `language`.

        Returns:
            Sorted list of missing keys; empty if either language is not loaded.
        """
        fallback = self.translations.get(fallback_language)
        target = self.translations.get(language)
        if fallback is None or target is None:
            return []
        return sorted(key for key in fallback if key not in target)
