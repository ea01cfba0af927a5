"""Locale resolution logic for determining the host's preferred language.

Detects the system locale without user input and always produces a
supported LocaleInfo, falling back to the configured fallback language.
"""

import locale
import os
from typing import Callable, Mapping, Optional, Sequence

import structlog
from localization.languages import is_language_supported, normalize_platform_locale
from localization.models import LocaleInfo, create_locale_info

logger = structlog.get_logger().bind(component="localization.resolver")

# Locale names meaning "no locale configured"
UNSET_LOCALES = ("", "C", "POSIX")

if os.name == "nt":
    LOCALE_ENV_VARS: Sequence[str] = ("LANG",)
else:
    LOCALE_ENV_VARS = ("LC_ALL", "LC_MESSAGES", "LANG")


def read_system_locale() -> str:
    """Read the host locale as "<language>[.<encoding>]".

    Returns:
        Raw locale string (e.g. "es_ES.UTF-8", "Spanish_Spain.1252"), or ""
        when the host has no locale configured.
    """
    language, encoding = locale.getlocale()
    if not language:
        return ""
    return f"{language}.{encoding}" if encoding else language


class LocaleResolver:
    """Resolves the system locale for a translation engine.

    Resolution order:
    1. Host locale (unless unset, "C" or "POSIX")
    2. Locale environment variables, in priority order
    3. Fallback language
    """

    def __init__(
        self,
        fallback_language: str,
        locale_reader: Callable[[], str] = read_system_locale,
        environ: Optional[Mapping[str, str]] = None,
        env_vars: Sequence[str] = LOCALE_ENV_VARS,
    ):
        """Initialize locale resolver.

        Args:
            fallback_language: Locale used when detection fails.
            locale_reader: Callable returning the raw host locale string.
            environ: Environment mapping to probe (default: os.environ).
            env_vars: Environment variable names, highest priority first.
        """
        self.fallback_language = fallback_language
        self.locale_reader = locale_reader
        self.environ = os.environ if environ is None else environ
        self.env_vars = tuple(env_vars)
        self.raw_locale = ""
        self.log = logger.bind(fallback_language=fallback_language)

    def resolve(self) -> LocaleInfo:
        """Detect the system locale.

        Never raises for detection problems: any failure yields the
        fallback language's LocaleInfo.

        Returns:
            LocaleInfo for the detected (or fallback) locale.
        """
        try:
            self.raw_locale = self.locale_reader() or ""

            if self.raw_locale in UNSET_LOCALES:
                self.log.info("system_locale_unset", raw_locale=self.raw_locale)
                return create_locale_info(self.fallback_language)

            normalized = normalize_platform_locale(self.raw_locale)
            if not normalized:
                normalized = self._resolve_from_environment()

            if not normalized:
                self.log.info("system_locale_unresolved", raw_locale=self.raw_locale)
                normalized = self.fallback_language

            resolved = create_locale_info(normalized)
            self.log.info(
                "resolved_system_locale",
                raw_locale=self.raw_locale,
                locale=resolved.locale,
            )
            return resolved
        except Exception as e:  # pylint: disable=broad-except
            self.log.warning(
                "system_locale_detection_failed",
                raw_locale=self.raw_locale,
                error=str(e),
            )
            return create_locale_info(self.fallback_language)

    def resolve_current(self, system_locale: LocaleInfo) -> LocaleInfo:
        """Pick the locale to start with given the detected system locale.

        Returns:
            system_locale if supported, otherwise the fallback LocaleInfo.
        """
        if is_language_supported(system_locale.locale):
            return system_locale
        return create_locale_info(self.fallback_language)

    def _resolve_from_environment(self) -> str:
        for var in self.env_vars:
            value = self.environ.get(var, "")
            if not value:
                continue
            normalized = normalize_platform_locale(value)
            if normalized:
                self.log.info("resolved_from_environment", variable=var, value=value)
                return normalized
        return ""
