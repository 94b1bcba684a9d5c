"""Configuration module - public API.

Centralized configuration for island-i18n using Pydantic BaseSettings.

Exports:
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Locale negotiation settings section
    get_settings: Process-wide cached Settings instance

Example:
    ```python
    from island_i18n.configuration import get_settings

    settings = get_settings()
    cookie_name = settings.i18n.cookie_name
    ```
"""

from functools import lru_cache

from island_i18n.configuration.i18n import I18nSettings
from island_i18n.configuration.settings import Settings


@lru_cache
def get_settings() -> Settings:
    """Get the process-wide settings singleton.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


__all__ = ["Settings", "I18nSettings", "get_settings"]
