"""Structured logging for island-i18n using structlog.

Public API:
    - configure_logging(): Initialize logging for the application
    - get_module_logger(): Get a logger for the calling module
    - logger: Module-level logger instance
"""

from island_i18n.logging.setup import configure_logging, get_module_logger, logger

__all__ = ["configure_logging", "get_module_logger", "logger"]
