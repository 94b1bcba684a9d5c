"""Locale negotiation settings."""

import json
from pathlib import Path
from typing import Annotated, Any, List, Optional

from pydantic import Field, field_validator
from pydantic_settings import NoDecode

from island_i18n.configuration.base import I18nBaseSettings
from island_i18n.constants import DEFAULT_COOKIE_MAX_AGE, DEFAULT_COOKIE_NAME


class I18nSettings(I18nBaseSettings):
    """Locale detection and translation loading configuration.

    Environment Variables:
        I18N_LOCALES: Supported locale codes, CSV ("ja,en") or JSON list
        I18N_DEFAULT_LOCALE: Fallback locale (default: en)
        I18N_COOKIE_NAME: Cookie holding the user's preference (default: locale)
        I18N_COOKIE_MAX_AGE: Cookie lifetime in seconds (default: 1 year)
        I18N_TRANSLATIONS_DIR: Directory with <locale>.yml translation files
        I18N_STRICT: Validate the configuration eagerly (default: False)

    Example:
        ```python
        from island_i18n.configuration import get_settings

        settings = get_settings()
        locales = settings.i18n.locales
        ```
    """

    locales: Annotated[List[str], NoDecode] = Field(
        default_factory=lambda: ["en"], alias="I18N_LOCALES"
    )
    default_locale: str = Field(default="en", alias="I18N_DEFAULT_LOCALE")
    cookie_name: str = Field(default=DEFAULT_COOKIE_NAME, alias="I18N_COOKIE_NAME")
    cookie_max_age: int = Field(
        default=DEFAULT_COOKIE_MAX_AGE, alias="I18N_COOKIE_MAX_AGE"
    )
    translations_dir: Optional[Path] = Field(
        default=None, alias="I18N_TRANSLATIONS_DIR"
    )
    strict: bool = Field(default=False, alias="I18N_STRICT")

    @field_validator("locales", mode="before")
    @classmethod
    def split_locales(cls, v: Any) -> Any:
        """Accept a comma separated string as well as a JSON list."""
        if isinstance(v, str):
            value = v.strip()
            if value.startswith("["):
                return json.loads(value)
            return [x.strip() for x in value.split(",") if x.strip()]
        return v
