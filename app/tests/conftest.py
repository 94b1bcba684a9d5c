"""Shared fixtures for island-i18n tests."""

import pytest
from starlette.requests import Request

from island_i18n.logging import configure_logging


@pytest.fixture(autouse=True, scope="session")
def silence_logging():
    """Install the bundled logging setup, which is silent under pytest."""
    configure_logging()


@pytest.fixture
def make_request():
    """Build Starlette requests carrying the given headers."""

    def _make_request(headers=None):
        raw_headers = [
            (name.lower().encode("latin-1"), value.encode("latin-1"))
            for name, value in (headers or {}).items()
        ]
        scope = {
            "type": "http",
            "method": "GET",
            "path": "/",
            "query_string": b"",
            "headers": raw_headers,
        }
        return Request(scope)

    return _make_request
