"""island-i18n

Server-side locale detection and translation state for request/response web
frameworks (Starlette, FastAPI).

Example:
    ```python
    from island_i18n import I18nMiddleware, define_i18n

    i18n = define_i18n(
        locales=["ja", "en"],
        default_locale="ja",
        translations={"ja": ja, "en": en},
    )

    app.add_middleware(I18nMiddleware, i18n=i18n)

    @app.get("/")
    def home(request: Request):
        return {"title": request.state.translations["common"]["title"]}
    ```
"""

from island_i18n.constants import DEFAULT_COOKIE_MAX_AGE, DEFAULT_COOKIE_NAME
from island_i18n.i18n import (
    CookieOptions,
    I18n,
    I18nConfig,
    I18nConfigurationError,
    I18nMiddleware,
    I18nState,
    SetLocaleCookieOptions,
    YAMLTranslationLoader,
    build_locale_cookie,
    create_i18n,
    define_i18n,
    detect_locale_from_header,
    get_i18n_state,
    get_locale_from_cookie,
    interpolate,
    set_locale_cookie,
)

__all__ = [
    "DEFAULT_COOKIE_MAX_AGE",
    "DEFAULT_COOKIE_NAME",
    "CookieOptions",
    "I18n",
    "I18nConfig",
    "I18nConfigurationError",
    "I18nMiddleware",
    "I18nState",
    "SetLocaleCookieOptions",
    "YAMLTranslationLoader",
    "build_locale_cookie",
    "create_i18n",
    "define_i18n",
    "detect_locale_from_header",
    "get_i18n_state",
    "get_locale_from_cookie",
    "interpolate",
    "set_locale_cookie",
]
