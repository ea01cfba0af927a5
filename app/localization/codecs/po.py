"""Minimal gettext PO codec.

Only msgid/msgstr pairs are understood. Entries are separated by blank
lines or comments, and bare quoted lines continue the field opened last.
"""

from typing import Dict, Optional

from localization.codecs.base import (
    GENERATOR,
    TranslationCodec,
    TranslationFormat,
    unescape,
)
from localization.languages import get_language_name


def extract_quoted(text: str) -> str:
    """Strip the delimiting quotes of a PO string and unescape it."""
    text = text.strip()
    if len(text) >= 2 and text.startswith('"') and text.endswith('"'):
        text = text[1:-1]
    return unescape(text)


def escape_po(value: str) -> str:
    return (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\t", "\\t")
        .replace("\r", "\\r")
    )


class _PendingEntry:
    """Parser state for the entry currently being read."""

    def __init__(self):
        self.msgid = ""
        self.msgstr = ""
        self.open_field: Optional[str] = None

    def commit(self, translations: Dict[str, str]) -> None:
        # The header entry has an empty msgid and is dropped here
        if self.msgid and self.msgstr:
            translations[self.msgid] = self.msgstr
        self.msgid = ""
        self.msgstr = ""
        self.open_field = None


class PoCodec(TranslationCodec):
    """gettext .po files (msgid/msgstr subset)."""

    format = TranslationFormat.PO

    def parse(self, content: str) -> Dict[str, str]:
        translations: Dict[str, str] = {}
        entry = _PendingEntry()

        for raw_line in content.splitlines():
            line = raw_line.strip()

            if not line or line.startswith("#"):
                entry.commit(translations)
            elif line.startswith("msgid "):
                if entry.msgid and entry.msgstr:
                    entry.commit(translations)
                entry.msgid = extract_quoted(line[len("msgid "):])
                entry.open_field = "msgid"
            elif line.startswith("msgstr "):
                entry.msgstr = extract_quoted(line[len("msgstr "):])
                entry.open_field = "msgstr"
            elif line.startswith('"'):
                if entry.open_field == "msgid":
                    entry.msgid += extract_quoted(line)
                elif entry.open_field == "msgstr":
                    entry.msgstr += extract_quoted(line)
            else:
                # msgctxt, msgid_plural, msgstr[n]: outside the supported subset
                entry.open_field = None

        entry.commit(translations)
        return translations

    def serialize(self, translations: Dict[str, str], language: str) -> str:
        language_name = get_language_name(language) or language
        lines = [
            f"# Translations for {language} ({language_name})",
            f"# Generated by {GENERATOR}",
            'msgid ""',
            'msgstr ""',
            f'"Language: {escape_po(language)}\\n"',
            '"Content-Type: text/plain; charset=UTF-8\\n"',
            '"Content-Transfer-Encoding: 8bit\\n"',
        ]
        for key in sorted(translations):
            lines.append("")
            lines.append(f'msgid "{escape_po(key)}"')
            lines.append(f'msgstr "{escape_po(translations[key])}"')
        return "\n".join(lines) + "\n"
