"""Studio i18n configuration settings."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class I18nSettings(BaseSettings):
    """Translation engine configuration settings.

    Environment Variables:
        I18N_TRANSLATIONS_DIR: Folder holding <locale>.<ext> files
            (default: translations, relative to the working directory)
        I18N_FALLBACK_LANGUAGE: Locale consulted when a key is missing
            (default: en_US)
        I18N_DEFAULT_FORMAT: Extension used when saving a language that has
            no file yet (default: .json)
        I18N_PRELOAD_LANGUAGES: Comma separated locales loaded at startup
    """

    TRANSLATIONS_DIR: str = Field(
        default="translations",
        alias="I18N_TRANSLATIONS_DIR",
        description="Base folder for translation files",
    )
    FALLBACK_LANGUAGE: str = Field(
        default="en_US",
        alias="I18N_FALLBACK_LANGUAGE",
        description="Terminal language of every lookup chain",
    )
    DEFAULT_FORMAT: str = Field(
        default=".json",
        alias="I18N_DEFAULT_FORMAT",
        description="Format hint for newly created translation files",
    )
    PRELOAD_LANGUAGES: str = Field(
        default="",
        alias="I18N_PRELOAD_LANGUAGES",
        description="Languages loaded eagerly by the factory",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("DEFAULT_FORMAT")
    @classmethod
    def _dotted_format(cls, value: str) -> str:
        value = value.strip().lower()
        return value if value.startswith(".") else f".{value}"

    @property
    def preload_languages(self) -> list[str]:
        """PRELOAD_LANGUAGES split on commas."""
        return [
            part.strip() for part in self.PRELOAD_LANGUAGES.split(",") if part.strip()
        ]


class Settings(BaseSettings):
    """Root settings object."""

    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    i18n: I18nSettings = Field(default_factory=I18nSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"


settings = Settings()
