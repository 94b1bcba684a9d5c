"""Factory functions for creating i18n instances.

``define_i18n`` binds a locale set, a default locale, translation tables and
cookie options into an immutable ``I18n`` instance, created once at startup
and shared by every request.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Generic, Mapping, Optional, Sequence, Tuple

from island_i18n.configuration import Settings, get_settings
from island_i18n.constants import DEFAULT_COOKIE_MAX_AGE, DEFAULT_COOKIE_NAME
from island_i18n.i18n.loader import YAMLTranslationLoader
from island_i18n.i18n.models import (
    CookieOptions,
    I18nConfig,
    I18nConfigurationError,
    I18nState,
    RequestLike,
    TranslationsT,
)
from island_i18n.i18n.resolvers import (
    detect_locale_from_header,
    get_locale_from_cookie,
)
from island_i18n.logging import get_module_logger

logger = get_module_logger()


def _get_header(request: RequestLike, name: str) -> Optional[str]:
    headers = request.headers
    value = headers.get(name)
    if value is None:
        value = headers.get(name.lower())
    return value


@dataclass(frozen=True)
class I18n(Generic[TranslationsT]):
    """Configured locale detector and translation lookup.

    Holds no per-request state and is safe to share across concurrently
    handled requests.

    Attributes:
        locales: Supported locale codes, in configuration order.
        default_locale: Locale used when detection finds nothing.
        cookie_name: Name of the locale preference cookie.
        cookie_max_age: Max age of the locale preference cookie in seconds.
        translations: Read-only mapping of locale code to translation table.
    """

    locales: Tuple[str, ...]
    default_locale: str
    cookie_name: str = DEFAULT_COOKIE_NAME
    cookie_max_age: int = DEFAULT_COOKIE_MAX_AGE
    translations: Mapping[str, TranslationsT] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def detect_locale(self, request: RequestLike) -> str:
        """Detect the locale for a request.

        The locale cookie wins over Accept-Language: an explicit user choice
        always beats the browser default.

        Args:
            request: Object exposing ``headers.get(name)``.

        Returns:
            A supported locale code, or the default locale.
        """
        cookie_locale = get_locale_from_cookie(
            _get_header(request, "Cookie"), self.cookie_name, self.locales
        )
        if cookie_locale:
            return cookie_locale

        return detect_locale_from_header(
            _get_header(request, "Accept-Language"),
            self.locales,
            self.default_locale,
        )

    def get_translations(self, locale: str) -> TranslationsT:
        """Get the translation table for a locale.

        Raises:
            KeyError: If locale has no translation table.
        """
        return self.translations[locale]

    def create_state(self, request: RequestLike) -> I18nState[TranslationsT]:
        """Detect the locale and pair it with its translations."""
        locale = self.detect_locale(request)
        return I18nState(locale=locale, translations=self.get_translations(locale))

    def validate(self) -> None:
        """Check that the configuration is consistent.

        Raises:
            I18nConfigurationError: If the locale set is empty, the default
                locale is not supported, or a locale has no translations.
        """
        problems = _find_problems(
            self.locales, self.default_locale, self.translations
        )
        if problems:
            raise I18nConfigurationError("; ".join(problems))


def _find_problems(
    locales: Sequence[str],
    default_locale: str,
    translations: Mapping[str, Any],
) -> list:
    problems = []
    if not locales:
        problems.append("no locales configured")
    if default_locale not in locales:
        problems.append(f"default locale {default_locale!r} is not in locales")
    missing = [locale for locale in locales if locale not in translations]
    if missing:
        problems.append(f"missing translations for: {', '.join(missing)}")
    return problems


def define_i18n(
    config: Optional[I18nConfig[TranslationsT]] = None,
    *,
    locales: Optional[Sequence[str]] = None,
    default_locale: Optional[str] = None,
    translations: Optional[Mapping[str, TranslationsT]] = None,
    cookie: Optional[CookieOptions] = None,
    strict: bool = False,
) -> I18n[TranslationsT]:
    """Create an i18n instance with the given configuration.

    Accepts either an ``I18nConfig`` or the same fields as keyword arguments.
    Misconfiguration is logged and tolerated unless ``strict`` is set.

    Args:
        config: Complete configuration.
        locales: Supported locale codes (e.g. ["ja", "en"]).
        default_locale: Fallback locale.
        translations: Translation table for each locale.
        cookie: Cookie name and max age (defaults: "locale", one year).
        strict: Raise instead of warning when the configuration is inconsistent.

    Returns:
        I18n instance with detection and translation methods.

    Raises:
        I18nConfigurationError: In strict mode, if the configuration is
            inconsistent.

    Usage:
        i18n = define_i18n(
            locales=["ja", "en"],
            default_locale="ja",
            translations={"ja": ja, "en": en},
        )

        # In middleware
        state = i18n.create_state(request)
        request.state.locale = state.locale
        request.state.translations = state.translations
    """
    if config is None:
        if locales is None or default_locale is None or translations is None:
            raise TypeError(
                "define_i18n() needs a config or locales, default_locale "
                "and translations"
            )
        config = I18nConfig(
            locales=locales,
            default_locale=default_locale,
            translations=translations,
            cookie=cookie,
        )

    cookie_options = config.cookie or CookieOptions()
    instance = I18n(
        locales=tuple(config.locales),
        default_locale=config.default_locale,
        cookie_name=cookie_options.name,
        cookie_max_age=cookie_options.max_age,
        translations=MappingProxyType(dict(config.translations)),
    )

    problems = _find_problems(
        instance.locales, instance.default_locale, instance.translations
    )
    if problems:
        if strict:
            raise I18nConfigurationError("; ".join(problems))
        logger.warning("inconsistent_i18n_configuration", problems=problems)

    logger.info(
        "i18n_instance_created",
        locales=list(instance.locales),
        default_locale=instance.default_locale,
        cookie_name=instance.cookie_name,
    )
    return instance


def create_i18n(
    settings: Optional[Settings] = None,
    translations: Optional[Mapping[str, Any]] = None,
) -> I18n:
    """Create an i18n instance from application settings.

    When no translations are given they are loaded from
    ``settings.i18n.translations_dir`` with the YAML loader.

    Args:
        settings: Settings to read (default: cached application settings).
        translations: Pre-loaded translation tables.

    Returns:
        Configured I18n instance.

    Raises:
        I18nConfigurationError: If no translations are given and no
            translations directory is configured, or in strict mode when the
            configuration is inconsistent.
    """
    settings = settings or get_settings()
    i18n_settings = settings.i18n

    if translations is None:
        if i18n_settings.translations_dir is None:
            raise I18nConfigurationError(
                "I18N_TRANSLATIONS_DIR is not set and no translations were given"
            )
        loader = YAMLTranslationLoader(i18n_settings.translations_dir)
        translations = loader.load_all(i18n_settings.locales)

    return define_i18n(
        locales=i18n_settings.locales,
        default_locale=i18n_settings.default_locale,
        translations=translations,
        cookie=CookieOptions(
            name=i18n_settings.cookie_name,
            max_age=i18n_settings.cookie_max_age,
        ),
        strict=i18n_settings.strict,
    )
