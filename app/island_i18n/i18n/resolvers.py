"""Locale detection from HTTP request headers.

Two independent strategies:
- Accept-Language negotiation weighted by quality values
- Locale preference cookie lookup
"""

import math
import re
from typing import List, Optional, Sequence

from island_i18n.i18n.models import LanguagePreference
from island_i18n.logging import get_module_logger

logger = get_module_logger()

QUALITY_SEPARATOR = ";q="


def _parse_quality(raw: Optional[str]) -> float:
    """Convert a q-value to a float.

    Missing or empty values count as 1.0; unparseable or non-finite values
    count as 0.0.
    """
    if raw is None or not raw.strip():
        return 1.0
    try:
        quality = float(raw)
    except ValueError:
        quality = math.nan

    if not math.isfinite(quality):
        logger.debug("invalid_quality_value", quality=raw)
        return 0.0
    return quality


def parse_accept_language(
    accept_language: Optional[str],
) -> List[LanguagePreference]:
    """Parse an Accept-Language header into ordered language preferences.

    Region and script subtags are dropped and codes are lowercased. The result
    is sorted by quality, highest first; entries with equal quality keep
    their header order.

    Args:
        accept_language: Accept-Language header value.

    Returns:
        List of LanguagePreference, empty for a missing header.

    Example:
        parse_accept_language("en-US,en;q=0.9,ja;q=0.8")
        # [("en", 1.0), ("en", 0.9), ("ja", 0.8)]
    """
    if not accept_language:
        return []

    preferences = []
    for part in accept_language.split(","):
        tag, sep, quality = part.strip().partition(QUALITY_SEPARATOR)
        preferences.append(
            LanguagePreference(
                code=tag.split("-")[0].lower(),
                quality=_parse_quality(quality.split(";")[0] if sep else None),
            )
        )

    # sorted() is stable, so ties keep header order
    return sorted(preferences, key=lambda p: p.quality, reverse=True)


def detect_locale_from_header(
    accept_language: Optional[str],
    supported_locales: Sequence[str],
    default_locale: str,
) -> str:
    """Detect the best supported locale from an Accept-Language header.

    Args:
        accept_language: Accept-Language header value.
        supported_locales: Supported locale codes.
        default_locale: Fallback locale, returned verbatim.

    Returns:
        The first supported locale in quality order, or default_locale.

    Example:
        detect_locale_from_header("en-US,en;q=0.9,ja;q=0.8", ["en", "ja"], "en")
        # "en"
    """
    if not accept_language:
        return default_locale

    by_code = {}
    for locale in supported_locales:
        by_code.setdefault(locale.lower(), locale)

    for preference in parse_accept_language(accept_language):
        if preference.code in by_code:
            locale = by_code[preference.code]
            logger.debug("locale_resolved_from_header", locale=locale)
            return locale

    logger.debug("no_matching_locale_in_header", default=default_locale)
    return default_locale


def get_locale_from_cookie(
    cookie_header: Optional[str],
    cookie_name: str,
    supported_locales: Sequence[str],
) -> Optional[str]:
    """Read the locale preference from a Cookie header.

    The cookie value is taken as a run of ASCII word characters and must be
    one of supported_locales exactly (no case normalization).

    Args:
        cookie_header: Raw Cookie header value.
        cookie_name: Name of the locale cookie.
        supported_locales: Supported locale codes.

    Returns:
        The locale from the cookie, or None if absent or unsupported.
    """
    if not cookie_header:
        return None

    pattern = rf"(?:^|;)\s*{re.escape(cookie_name)}=(\w+)"
    match = re.search(pattern, cookie_header, re.ASCII)
    if match is None:
        return None

    value = match.group(1)
    if value in supported_locales:
        logger.debug("locale_resolved_from_cookie", locale=value)
        return value

    logger.debug("unsupported_cookie_locale", cookie_name=cookie_name, value=value)
    return None
