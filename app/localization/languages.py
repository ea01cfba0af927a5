"""Supported locale table and platform locale normalization.

Locale codes use the POSIX form (language_COUNTRY, e.g. "es_ES").
"""

from enum import Enum
from typing import Dict, List


class SupportedLocale(str, Enum):
    """Statically supported POSIX locale codes."""

    ES_AR = "es_AR"
    ES_BO = "es_BO"
    ES_CL = "es_CL"
    ES_CO = "es_CO"
    ES_CR = "es_CR"
    ES_DO = "es_DO"
    ES_EC = "es_EC"
    ES_ES = "es_ES"
    ES_GT = "es_GT"
    ES_HN = "es_HN"
    ES_MX = "es_MX"
    ES_NI = "es_NI"
    ES_PA = "es_PA"
    ES_PE = "es_PE"
    ES_PR = "es_PR"
    ES_PY = "es_PY"
    ES_SV = "es_SV"
    ES_US = "es_US"
    ES_UY = "es_UY"
    ES_VE = "es_VE"

    EN_GB = "en_GB"
    EN_US = "en_US"
    EN_CA = "en_CA"
    EN_AU = "en_AU"

    FR_BE = "fr_BE"
    FR_CA = "fr_CA"
    FR_CH = "fr_CH"
    FR_FR = "fr_FR"
    FR_LU = "fr_LU"
    FR_MC = "fr_MC"

    DE_AT = "de_AT"
    DE_CH = "de_CH"
    DE_DE = "de_DE"
    DE_LU = "de_LU"

    NL_BE = "nl_BE"
    NL_NL = "nl_NL"
    IT_IT = "it_IT"
    IT_CH = "it_CH"
    PT_BR = "pt_BR"
    PT_PT = "pt_PT"
    SV_FI = "sv_FI"
    SV_SE = "sv_SE"
    PL_PL = "pl_PL"
    RU_RU = "ru_RU"
    RO_RO = "ro_RO"

    @property
    def display_name(self) -> str:
        """Human readable language name (e.g. "Spanish (Spain)")."""
        return LANGUAGE_NAMES[self.value]


DEFAULT_FALLBACK = SupportedLocale.ES_ES.value

LANGUAGE_NAMES: Dict[str, str] = {
    "es_AR": "Spanish (Argentina)",
    "es_BO": "Spanish (Bolivia)",
    "es_CL": "Spanish (Chile)",
    "es_CO": "Spanish (Colombia)",
    "es_CR": "Spanish (Costa Rica)",
    "es_DO": "Spanish (Dominican Republic)",
    "es_EC": "Spanish (Ecuador)",
    "es_ES": "Spanish (Spain)",
    "es_GT": "Spanish (Guatemala)",
    "es_HN": "Spanish (Honduras)",
    "es_MX": "Spanish (Mexico)",
    "es_NI": "Spanish (Nicaragua)",
    "es_PA": "Spanish (Panama)",
    "es_PE": "Spanish (Peru)",
    "es_PR": "Spanish (Puerto Rico)",
    "es_PY": "Spanish (Paraguay)",
    "es_SV": "Spanish (El Salvador)",
    "es_US": "Spanish (United States)",
    "es_UY": "Spanish (Uruguay)",
    "es_VE": "Spanish (Venezuela)",
    "en_GB": "English (United Kingdom)",
    "en_US": "English (United States)",
    "en_CA": "English (Canada)",
    "en_AU": "English (Australia)",
    "fr_BE": "French (Belgium)",
    "fr_CA": "French (Canada)",
    "fr_CH": "French (Switzerland)",
    "fr_FR": "French (France)",
    "fr_LU": "French (Luxembourg)",
    "fr_MC": "French (Monaco)",
    "de_AT": "German (Austria)",
    "de_CH": "German (Switzerland)",
    "de_DE": "German (Germany)",
    "de_LU": "German (Luxembourg)",
    "nl_BE": "Dutch (Belgium)",
    "nl_NL": "Dutch (Netherlands)",
    "it_IT": "Italian (Italy)",
    "it_CH": "Italian (Switzerland)",
    "pt_BR": "Portuguese (Brazil)",
    "pt_PT": "Portuguese (Portugal)",
    "sv_FI": "Swedish (Finland)",
    "sv_SE": "Swedish (Sweden)",
    "pl_PL": "Polish (Poland)",
    "ru_RU": "Russian (Russia)",
    "ro_RO": "Romanian (Romania)",
}

# Windows reports locales as "<Language>_<Country>"
WIN32_LOCALE_ALIASES: Dict[str, str] = {
    "Spanish_Argentina": "es_AR",
    "Spanish_Bolivia": "es_BO",
    "Spanish_Chile": "es_CL",
    "Spanish_Colombia": "es_CO",
    "Spanish_Costa Rica": "es_CR",
    "Spanish_Dominican Republic": "es_DO",
    "Spanish_Ecuador": "es_EC",
    "Spanish_Spain": "es_ES",
    "Spanish_Guatemala": "es_GT",
    "Spanish_Honduras": "es_HN",
    "Spanish_Mexico": "es_MX",
    "Spanish_Nicaragua": "es_NI",
    "Spanish_Panama": "es_PA",
    "Spanish_Peru": "es_PE",
    "Spanish_Puerto Rico": "es_PR",
    "Spanish_Paraguay": "es_PY",
    "Spanish_El Salvador": "es_SV",
    "Spanish_United States": "es_US",
    "Spanish_Uruguay": "es_UY",
    "Spanish_Venezuela": "es_VE",
    "English_United Kingdom": "en_GB",
    "English_United States": "en_US",
    "English_Canada": "en_CA",
    "English_Australia": "en_AU",
    "French_Belgium": "fr_BE",
    "French_Canada": "fr_CA",
    "French_Switzerland": "fr_CH",
    "French_France": "fr_FR",
    "French_Luxembourg": "fr_LU",
    "French_Monaco": "fr_MC",
    "German_Austria": "de_AT",
    "German_Switzerland": "de_CH",
    "German_Germany": "de_DE",
    "German_Luxembourg": "de_LU",
    "Dutch_Belgium": "nl_BE",
    "Dutch_Netherlands": "nl_NL",
    "Italian_Italy": "it_IT",
    "Italian_Switzerland": "it_CH",
    "Portuguese_Brazil": "pt_BR",
    "Portuguese_Portugal": "pt_PT",
    "Swedish_Finland": "sv_FI",
    "Swedish_Sweden": "sv_SE",
    "Polish_Poland": "pl_PL",
    "Russian_Russia": "ru_RU",
    "Romanian_Romania": "ro_RO",
}

# Representative locale for a Windows language name with an unknown country
WIN32_LANGUAGE_DEFAULTS = (
    ("Spanish", "es_ES"),
    ("English", "en_US"),
    ("French", "fr_FR"),
    ("German", "de_DE"),
    ("Italian", "it_IT"),
    ("Portuguese", "pt_PT"),
    ("Dutch", "nl_NL"),
    ("Polish", "pl_PL"),
    ("Russian", "ru_RU"),
    ("Swedish", "sv_SE"),
    ("Romanian", "ro_RO"),
)

LOCALE_VARIATIONS: Dict[str, str] = {
    "en_UK": "en_GB",
}


def normalize_platform_locale(platform_locale: str) -> str:
    """Convert a platform-specific locale string to a supported POSIX code.

    Handles encoding suffixes ("es_ES.UTF-8"), variants ("de_DE@euro"),
    Windows names ("Spanish_Spain.1252") and BCP 47 tags ("es-ES").

    Args:
        platform_locale: Raw locale string as reported by the host.

    Returns:
        Supported locale code, or "" if the string cannot be mapped.
    """
    if not platform_locale:
        return ""

    base_name = platform_locale.split(".", 1)[0]
    base_name = base_name.split("@", 1)[0].strip()
    if not base_name:
        return ""

    if base_name in LANGUAGE_NAMES:
        return base_name

    if base_name in WIN32_LOCALE_ALIASES:
        return WIN32_LOCALE_ALIASES[base_name]

    for prefix, code in WIN32_LANGUAGE_DEFAULTS:
        if base_name.startswith(prefix):
            return code

    if base_name in LOCALE_VARIATIONS:
        return LOCALE_VARIATIONS[base_name]

    if "-" in base_name:
        language, _, country = base_name.partition("-")
        candidate = f"{language.lower()}_{country.upper()}"
        if candidate in LANGUAGE_NAMES:
            return candidate
        return LOCALE_VARIATIONS.get(candidate, "")

    return ""


def get_language_name(code: str) -> str:
    """Get the display name for a locale code.

    Tries a direct lookup first, then the normalized form of the code.

    Returns:
        Display name, or "" if the code is not supported.
    """
    if code in LANGUAGE_NAMES:
        return LANGUAGE_NAMES[code]

    normalized = normalize_platform_locale(code)
    if normalized:
        return LANGUAGE_NAMES.get(normalized, "")

    return ""


def is_language_supported(code: str) -> bool:
    return bool(get_language_name(code))


def get_supported_locales() -> List[str]:
    """Return every supported locale code, sorted."""
    return sorted(LANGUAGE_NAMES)
