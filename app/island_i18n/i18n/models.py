"""Data structures for locale negotiation.

Defines the configuration bundle consumed by the instance factory and the
request-scoped state it produces.
"""

from dataclasses import dataclass, field
from typing import Any, Generic, Mapping, Optional, Protocol, Sequence, TypeVar

from island_i18n.constants import (
    DEFAULT_COOKIE_MAX_AGE,
    DEFAULT_COOKIE_NAME,
    DEFAULT_COOKIE_PATH,
)

TranslationsT = TypeVar("TranslationsT")


class HeadersLike(Protocol):
    """Read access to header values by name."""

    def get(self, key: str, default: Any = None) -> Any: ...


class RequestLike(Protocol):
    """Anything exposing ``headers`` (Starlette/FastAPI ``Request`` included)."""

    @property
    def headers(self) -> HeadersLike: ...


class I18nConfigurationError(ValueError):
    """Raised by strict validation when an i18n configuration is inconsistent."""


@dataclass(frozen=True)
class CookieOptions:
    """Cookie configuration for reading the locale preference.

    Attributes:
        name: Cookie name (default: "locale").
        max_age: Cookie max age in seconds (default: one year).
    """

    name: str = DEFAULT_COOKIE_NAME
    max_age: int = DEFAULT_COOKIE_MAX_AGE


@dataclass(frozen=True)
class SetLocaleCookieOptions:
    """Options for writing the locale preference cookie.

    Attributes:
        name: Cookie name (default: "locale").
        max_age: Cookie max age in seconds (default: one year).
        path: Cookie path (default: "/").
    """

    name: str = DEFAULT_COOKIE_NAME
    max_age: int = DEFAULT_COOKIE_MAX_AGE
    path: str = DEFAULT_COOKIE_PATH


@dataclass(frozen=True)
class LanguagePreference:
    """One parsed entry of an Accept-Language header.

    Attributes:
        code: Lowercased primary language subtag (e.g. "en" from "en-US").
        quality: Relative preference weight.
    """

    code: str
    quality: float = 1.0


@dataclass
class I18nConfig(Generic[TranslationsT]):
    """Configuration for ``define_i18n``.

    Attributes:
        locales: Supported locale codes (e.g. ["ja", "en"]).
        default_locale: Locale used when detection finds nothing.
        translations: Translation table for each locale code.
        cookie: Optional cookie configuration.
    """

    locales: Sequence[str]
    default_locale: str
    translations: Mapping[str, TranslationsT]
    cookie: Optional[CookieOptions] = field(default=None)


@dataclass(frozen=True)
class I18nState(Generic[TranslationsT]):
    """Request-scoped result of locale detection.

    Attributes:
        locale: Detected locale code.
        translations: Translation table for ``locale``.
    """

    locale: str
    translations: TranslationsT
