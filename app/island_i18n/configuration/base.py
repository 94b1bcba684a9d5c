"""Shared base classes for settings modules."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class I18nBaseSettings(BaseSettings):
    """Base class for island-i18n settings.

    All settings sections inherit from this class to share env file loading,
    case sensitivity and tolerance of unrelated environment variables.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )
