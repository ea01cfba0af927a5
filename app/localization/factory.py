"""Factory functions for creating localization components.

Builds a TranslationEngine from application settings so the host can
construct one instance at startup and inject it into its consumers.
"""

from pathlib import Path
from typing import Iterable, Optional

import structlog
from core.config import I18nSettings, settings
from localization.errors import LocaleError
from localization.resolvers import LocaleResolver
from localization.translator import TranslationEngine

logger = structlog.get_logger()


def create_engine(
    base_folder: Optional[Path] = None,
    fallback_language: Optional[str] = None,
    languages: Iterable[str] = (),
    i18n_settings: Optional[I18nSettings] = None,
    resolver: Optional[LocaleResolver] = None,
) -> TranslationEngine:
    """Create and configure a TranslationEngine.

    Arguments left as None are read from settings.i18n.

    Args:
        base_folder: Folder with translation files
            (default: I18N_TRANSLATIONS_DIR)
        fallback_language: Fallback locale (default: I18N_FALLBACK_LANGUAGE)
        languages: Extra languages to load immediately, added to
            I18N_PRELOAD_LANGUAGES
        i18n_settings: Settings override, mainly for tests
        resolver: Optional LocaleResolver (default: host locale detection)

    Returns:
        TranslationEngine: Configured engine

    Raises:
        TranslationFileError: If the base folder does not exist
        LocaleError: If the fallback or a requested language is unsupported

    Usage:
        # Use defaults from the environment / .env
        engine = create_engine()

        # Custom folder with Spanish and French preloaded
        engine = create_engine(
            base_folder=Path("public/translations/core"),
            fallback_language="en_US",
            languages=["es_ES", "fr_FR"],
        )
    """
    config = i18n_settings or settings.i18n

    engine = TranslationEngine(
        base_folder=base_folder or Path(config.TRANSLATIONS_DIR),
        fallback_language=fallback_language or config.FALLBACK_LANGUAGE,
        resolver=resolver,
        default_format=config.DEFAULT_FORMAT,
    )

    for language in [*config.preload_languages, *languages]:
        try:
            engine.add_language(language)
        except LocaleError:
            logger.error("preload_language_unsupported", language=language)
            raise

    logger.info(
        "translation_engine_created",
        base_folder=str(engine.base_folder),
        fallback_language=engine.fallback_language,
        stats=engine.get_translation_stats(),
    )
    return engine
