"""Locale preference cookie writing.

Serializes the chosen locale into a cookie string and sets it on an outgoing
response, typically after the user picks a language.
"""

from typing import Optional

from starlette.responses import Response

from island_i18n.i18n.models import SetLocaleCookieOptions
from island_i18n.logging import get_module_logger

logger = get_module_logger()


def build_locale_cookie(
    locale: str,
    options: Optional[SetLocaleCookieOptions] = None,
) -> str:
    """Build the locale preference cookie string.

    Args:
        locale: The locale to store.
        options: Cookie name, max age and path.

    Returns:
        Cookie string, e.g. ``locale=ja;path=/;max-age=31536000;SameSite=Lax``.
    """
    options = options or SetLocaleCookieOptions()
    return (
        f"{options.name}={locale};path={options.path};"
        f"max-age={options.max_age};SameSite=Lax"
    )


def set_locale_cookie(
    response: Response,
    locale: str,
    options: Optional[SetLocaleCookieOptions] = None,
) -> None:
    """Set the locale preference cookie on a response.

    Args:
        response: Outgoing response to add the ``set-cookie`` header to.
        locale: The locale to store.
        options: Cookie name, max age and path.

    Example:
        # Basic usage
        set_locale_cookie(response, "ja")

        # With custom options
        set_locale_cookie(
            response, "en", SetLocaleCookieOptions(name="lang", max_age=2592000)
        )
    """
    cookie = build_locale_cookie(locale, options)
    response.headers.append("set-cookie", cookie)
    logger.debug("locale_cookie_set", locale=locale)
