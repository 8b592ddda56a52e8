"""Structured logging built on structlog.

Public API:
    - configure_logging(): Initialize logging for the application
    - get_module_logger(): Get a logger for the calling module
    - truncate_large_values(): Processor to limit string lengths
"""

from serde_gettext.logging.formatters import truncate_large_values
from serde_gettext.logging.setup import configure_logging, get_module_logger

__all__ = [
    "configure_logging",
    "get_module_logger",
    "truncate_large_values",
]
