"""Codec interface shared by every translation file format.

A codec converts between a flat {key: value} map and the text of one
on-disk format. Codecs hold no state and never touch the filesystem.
"""

import re
from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict

GENERATOR = "studio-i18n"

_ESCAPE_SEQUENCES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "\\": "\\",
    '"': '"',
    "'": "'",
}
_ESCAPE_PATTERN = re.compile(r"\\([ntr\\\"'])")


class TranslationFormat(str, Enum):
    """Supported translation file formats, keyed by file extension."""

    JSON = ".json"
    PROPERTIES = ".properties"
    PO = ".po"
    TEXT = ".txt"

    @classmethod
    def from_extension(cls, extension: str) -> "TranslationFormat":
        """Convert an extension ("json" or ".json") to a TranslationFormat.

        Raises:
            ValueError: If the extension is not a supported format.
        """
        normalized = extension.strip().lower()
        if normalized and not normalized.startswith("."):
            normalized = f".{normalized}"
        try:
            return cls(normalized)
        except ValueError as e:
            raise ValueError(f"Unsupported translation format: {extension}") from e


# Order in which files are probed when a language is loaded
LOAD_PRIORITY = (
    TranslationFormat.JSON,
    TranslationFormat.PROPERTIES,
    TranslationFormat.PO,
    TranslationFormat.TEXT,
)


def unescape(value: str) -> str:
    """Resolve \\n \\t \\r \\\\ \\" and \\' sequences; others are kept verbatim."""
    if "\\" not in value:
        return value
    return _ESCAPE_PATTERN.sub(lambda match: _ESCAPE_SEQUENCES[match.group(1)], value)


class TranslationCodec(ABC):
    """Abstract parse/serialize pair for one translation file format."""

    format: TranslationFormat

    @property
    def extension(self) -> str:
        return self.format.value

    @abstractmethod
    def parse(self, content: str) -> Dict[str, str]:
        """Parse file content into a flat translation map.

        Args:
            content: Full text of the translation file.

        Returns:
            Dict of translation key to translated text. An empty dict means
            nothing usable was found.        """
        pass

    @abstractmethod
    def serialize(self, translations: Dict[str, str], language: str) -> str:
        """Render a flat translation map as file content.

        Args:
            translations: Dict of translation key to translated text.
            language: Locale code written into headers/metadata.

        Returns:
            Text ready to be written to disk.
        """
        pass
