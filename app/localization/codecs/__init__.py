"""Translation file codecs.

The set of formats is closed: JSON, properties, PO and plain text. A codec
is selected only by file extension through get_codec().
"""

from typing import Dict, Union

from localization.codecs.base import (
    LOAD_PRIORITY,
    TranslationCodec,
    TranslationFormat,
    unescape,
)
from localization.codecs.json_codec import JsonCodec
from localization.codecs.po import PoCodec
from localization.codecs.properties import PropertiesCodec, TextCodec

CODECS: Dict[TranslationFormat, TranslationCodec] = {
    TranslationFormat.JSON: JsonCodec(),
    TranslationFormat.PROPERTIES: PropertiesCodec(),
    TranslationFormat.PO: PoCodec(),
    TranslationFormat.TEXT: TextCodec(),
}


def get_codec(extension: Union[str, TranslationFormat]) -> TranslationCodec:
    """Return the codec for a file extension.

    Raises:
        ValueError: If the extension is not a supported format.
    """
    if not isinstance(extension, TranslationFormat):
        extension = TranslationFormat.from_extension(extension)
    return CODECS[extension]


__all__ = [
    "CODECS",
    "LOAD_PRIORITY",
    "JsonCodec",
    "PoCodec",
    "PropertiesCodec",
    "TextCodec",
    "TranslationCodec",
    "TranslationFormat",
    "get_codec",
    "unescape",
]
