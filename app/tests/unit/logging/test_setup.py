"""Unit tests for island_i18n.logging.setup module."""

import logging
import os
import subprocess
import sys
import textwrap
from pathlib import Path
from unittest.mock import Mock

import pytest
import structlog

from island_i18n.configuration import Settings
from island_i18n.logging import setup
from island_i18n.logging.setup import (
    _is_test_environment,
    configure_logging,
    get_module_logger,
)

APP_ROOT = Path(__file__).resolve().parents[3]

HOST_SCRIPT = textwrap.dedent(
    """
    import logging
    {preamble}
    import structlog

    events = []

    def host_processor(logger, method_name, event_dict):
        events.append(event_dict["event"])
        raise structlog.DropEvent

    structlog.configure(processors=[host_processor])
    handler = logging.NullHandler()
    root = logging.getLogger()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    import island_i18n
    from island_i18n.i18n import detect_locale_from_header

    detect_locale_from_header("en", ["en"], "ja")

    assert structlog.get_config()["processors"] == [host_processor]
    assert handler in root.handlers
    assert root.level == logging.WARNING
    assert "locale_resolved_from_header" in events
    print("HOST_LOGGING_KEPT")
    """
)


def _run_host(preamble="", extra_env=None):
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(
        filter(None, [str(APP_ROOT), env.get("PYTHONPATH")])
    )
    env.update(extra_env or {})
    return subprocess.run(
        [sys.executable, "-c", HOST_SCRIPT.format(preamble=preamble)],
        env=env,
        capture_output=True,
        text=True,
        timeout=60,
    )


@pytest.fixture
def mock_settings():
    """Mock Settings instance for testing."""
    settings = Mock(spec=Settings)
    settings.LOG_LEVEL = "INFO"
    settings.is_production = False
    return settings


@pytest.fixture
def restore_logging_state():
    """Restore structlog and root logger configuration after the test."""
    saved_config = structlog.get_config()
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    yield root
    structlog.configure(**saved_config)
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


@pytest.mark.unit
class TestIsTestEnvironment:
    """Test suite for _is_test_environment helper."""

    def test_detects_pytest_in_sys_modules(self):
        assert _is_test_environment() is True


@pytest.mark.unit
class TestImportSideEffects:
    """Importing the package leaves the host's logging setup alone."""

    def test_import_keeps_host_logging(self):
        result = _run_host()
        assert result.returncode == 0, result.stderr
        assert "HOST_LOGGING_KEPT" in result.stdout

    def test_import_keeps_host_logging_when_pytest_loaded(self):
        result = _run_host(preamble="import pytest")
        assert result.returncode == 0, result.stderr
        assert "HOST_LOGGING_KEPT" in result.stdout

    def test_import_does_not_read_settings(self):
        result = _run_host(extra_env={"I18N_COOKIE_MAX_AGE": "one year"})
        assert result.returncode == 0, result.stderr
        assert "HOST_LOGGING_KEPT" in result.stdout


@pytest.mark.unit
class TestConfigureLogging:
    """Test suite for configure_logging function."""

    def test_returns_bound_logger(self, mock_settings, restore_logging_state):
        result = configure_logging(settings=mock_settings)

        assert result is not None
        assert hasattr(result, "info")
        assert hasattr(result, "warning")

    def test_production_uses_json_renderer(
        self, monkeypatch, mock_settings, restore_logging_state
    ):
        monkeypatch.setattr(setup, "_is_test_environment", lambda: False)
        restore_logging_state.handlers[:] = []

        configure_logging(
            settings=mock_settings, log_level="DEBUG", is_production=True
        )

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)
        assert restore_logging_state.level == logging.DEBUG

    def test_development_uses_console_renderer(
        self, monkeypatch, mock_settings, restore_logging_state
    ):
        monkeypatch.setattr(setup, "_is_test_environment", lambda: False)
        restore_logging_state.handlers[:] = []
        mock_settings.LOG_LEVEL = "WARNING"

        configure_logging(settings=mock_settings)

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
        assert restore_logging_state.level == logging.WARNING

    def test_is_production_override_wins(
        self, monkeypatch, mock_settings, restore_logging_state
    ):
        monkeypatch.setattr(setup, "_is_test_environment", lambda: False)
        mock_settings.is_production = True

        configure_logging(settings=mock_settings, is_production=False)

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)


@pytest.mark.unit
class TestGetModuleLogger:
    """Test suite for get_module_logger function."""

    def test_returns_logger(self):
        logger = get_module_logger()
        assert hasattr(logger, "info")

    def test_logging_does_not_raise(self):
        logger = get_module_logger()
        logger.info("test_event", locale="en")
