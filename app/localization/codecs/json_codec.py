"""JSON codec with dot-notation flattening of nested objects."""

import json
from typing import Any, Dict

from core.logging import get_module_logger
from localization.codecs.base import GENERATOR, TranslationCodec, TranslationFormat
from localization.codecs.properties import PropertiesCodec

logger = get_module_logger()


class JsonCodec(TranslationCodec):
    """One JSON object per file.

    {"menu": {"file": "File"}} is read as {"menu.file": "File"}. Content
    that is not a JSON object is handed to the properties parser instead.
    The "_metadata" block written by serialize() is read back like any
    other nested object.
    """

    format = TranslationFormat.JSON

    def parse(self, content: str) -> Dict[str, str]:
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            logger.warning(
                "json_parse_failed_trying_properties",
                error=str(e),
                line=e.lineno,
                column=e.colno,
            )
            return PropertiesCodec().parse(content)

        if not isinstance(data, dict):
            logger.warning(
                "json_root_not_object_trying_properties",
                root_type=type(data).__name__,
            )
            return PropertiesCodec().parse(content)

        translations: Dict[str, str] = {}
        self._flatten(data, "", translations)
        return translations

    def _flatten(
        self,
        data: Dict[str, Any],
        prefix: str,
        translations: Dict[str, str],
    ) -> None:
        for key, value in data.items():
            full_key = f"{prefix}.{key}" if prefix else key
            if isinstance(value, dict):
                self._flatten(value, full_key, translations)
            elif isinstance(value, str):
                translations[full_key] = value
            else:
                logger.warning(
                    "json_non_string_value_skipped",
                    key=full_key,
                    value_type=type(value).__name__,
                )

    def serialize(self, translations: Dict[str, str], language: str) -> str:
        payload: Dict[str, Any] = {
            "_metadata": {
                "language": language,
                "generator": GENERATOR,
            }
        }
        for key in sorted(translations):
            payload[key] = translations[key]
        return json.dumps(payload, ensure_ascii=False, indent=2) + "\n"
