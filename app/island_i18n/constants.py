"""Defaults shared by the instance factory, the cookie writer and settings."""

# Cookie holding the user's locale preference
DEFAULT_COOKIE_NAME = "locale"

# One year, in seconds
DEFAULT_COOKIE_MAX_AGE = 60 * 60 * 24 * 365

DEFAULT_COOKIE_PATH = "/"
