"""i18n - server-side locale negotiation.

Detects the locale of an incoming request (locale cookie first, then
Accept-Language) and pairs it with pre-loaded translation tables.

Main components:
- models: I18nConfig, I18nState, CookieOptions, SetLocaleCookieOptions
- resolvers: Accept-Language and cookie based detection
- factory: define_i18n / create_i18n and the I18n instance
- interpolate: {placeholder} substitution
- cookie: locale preference cookie writer
- loader: YAML translation table loader
- middleware: Starlette middleware attaching I18nState to requests
"""

from island_i18n.i18n.cookie import build_locale_cookie, set_locale_cookie
from island_i18n.i18n.factory import I18n, create_i18n, define_i18n
from island_i18n.i18n.interpolate import interpolate
from island_i18n.i18n.loader import TranslationLoader, YAMLTranslationLoader
from island_i18n.i18n.middleware import I18nMiddleware, get_i18n_state
from island_i18n.i18n.models import (
    CookieOptions,
    I18nConfig,
    I18nConfigurationError,
    I18nState,
    LanguagePreference,
    SetLocaleCookieOptions,
)
from island_i18n.i18n.resolvers import (
    detect_locale_from_header,
    get_locale_from_cookie,
    parse_accept_language,
)

__all__ = [
    "CookieOptions",
    "I18n",
    "I18nConfig",
    "I18nConfigurationError",
    "I18nMiddleware",
    "I18nState",
    "LanguagePreference",
    "SetLocaleCookieOptions",
    "TranslationLoader",
    "YAMLTranslationLoader",
    "build_locale_cookie",
    "create_i18n",
    "define_i18n",
    "detect_locale_from_header",
    "get_i18n_state",
    "get_locale_from_cookie",
    "interpolate",
    "parse_accept_language",
    "set_locale_cookie",
]
