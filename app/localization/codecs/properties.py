"""Properties (key=value) codec, also used for plain .txt files."""

from typing import Dict

from localization.codecs.base import (
    GENERATOR,
    TranslationCodec,
    TranslationFormat,
    unescape,
)
from localization.languages import get_language_name

COMMENT_PREFIXES = ("#", ";")
QUOTE_CHARS = ('"', "'")


def strip_quotes(value: str) -> str:
    """Remove one layer of matching surrounding quotes."""
    if len(value) >= 2 and value[0] == value[-1] and value[0] in QUOTE_CHARS:
        return value[1:-1]
    return value


def escape_value(value: str) -> str:
    escaped = (
        value.replace("\\", "\\\\")
        .replace("\n", "\\n")
        .replace("\t", "\\t")
        .replace("\r", "\\r")
    )
    # Quote values whose edges would otherwise be trimmed or unquoted on load
    if value != value.strip() or strip_quotes(value) != value:
        return '"' + escaped.replace('"', '\\"') + '"'
    return escaped


class PropertiesCodec(TranslationCodec):
    """Line oriented key=value format.

    Blank lines and lines starting with "#" or ";" are ignored. Lines
    without "=" are skipped rather than treated as errors.
    """

    format = TranslationFormat.PROPERTIES

    def parse(self, content: str) -> Dict[str, str]:
        translations: Dict[str, str] = {}

        for raw_line in content.splitlines():
            line = raw_line.strip()
            if not line or line.startswith(COMMENT_PREFIXES):
                continue

            key, separator, value = line.partition("=")
            if not separator:
                continue

            key = key.strip()
            if not key:
                continue

            translations[key] = unescape(strip_quotes(value.strip()))

        return translations

    def serialize(self, translations: Dict[str, str], language: str) -> str:
        language_name = get_language_name(language) or language
        lines = [
            f"# Translations for {language} ({language_name})",
            f"# Generated by {GENERATOR}",
            "",
        ]
        for key in sorted(translations):
            lines.append(f"{key}={escape_value(translations[key])}")
        return "\n".join(lines) + "\n"


class TextCodec(PropertiesCodec):
    """Plain text translations, read and written as properties."""

    format = TranslationFormat.TEXT
