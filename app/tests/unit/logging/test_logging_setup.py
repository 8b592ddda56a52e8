"""Unit tests for structured logging setup.

Tests cover:
- Test environment suppression
- Module logger context binding
- Value truncation processor
"""

import logging
import sys
from unittest.mock import patch

import pytest
import structlog

from serde_gettext.i18n import catalog
from serde_gettext.logging import (
    configure_logging,
    get_module_logger,
    truncate_large_values,
)
from serde_gettext.logging.setup import _is_test_environment


@pytest.mark.unit
class TestLoggingConfiguration:
    """Tests for logging configuration."""

    def test_is_test_environment_detects_pytest(self):
        """_is_test_environment returns True when pytest is in sys.modules."""
        assert _is_test_environment() is True

    def test_is_test_environment_without_pytest(self):
        """_is_test_environment returns False when pytest is not loaded."""
        with patch.dict(sys.modules):
            del sys.modules["pytest"]
            assert _is_test_environment() is False

    def test_configure_logging_returns_logger(self):
        """configure_logging returns a logger instance."""
        logger = configure_logging()
        assert logger is not None
        assert hasattr(logger, "bind")

    def test_configure_logging_in_test_environment(self):
        """configure_logging suppresses logs in test environment."""
        configure_logging()
        assert logging.root.level == logging.CRITICAL + 1

    def test_configure_logging_with_overrides(self):
        """configure_logging accepts level and renderer overrides."""
        logger = configure_logging(log_level="DEBUG", json_output=True)
        assert hasattr(logger, "bind")


@pytest.mark.unit
class TestModuleLogger:
    """Tests for get_module_logger."""

    def test_get_module_logger_returns_logger(self):
        """get_module_logger returns a bindable logger."""
        logger = get_module_logger()
        assert hasattr(logger, "info")
        assert hasattr(logger, "bind")

    def test_get_module_logger_binds_module_context(self):
        """get_module_logger binds component and module_path of the caller."""
        context = structlog.get_context(catalog.logger)
        assert context["module_path"] == "serde_gettext.i18n.catalog"
        assert context["component"] == "catalog"


@pytest.mark.unit
class TestTruncateLargeValues:
    """Tests for the truncate_large_values processor."""

    def test_short_values_unchanged(self):
        """Values under the limit are left alone."""
        processor = truncate_large_values(max_length=10)
        event = {"event": "resolved", "text": "short"}
        assert processor(None, "info", event) == {"event": "resolved", "text": "short"}

    def test_long_values_truncated(self):
        """Values over the limit are truncated with a marker."""
        processor = truncate_large_values(max_length=5)
        event = processor(None, "info", {"text": "x" * 12})
        assert event["text"] == "xxxxx...[truncated, 12 chars total]"

    def test_non_string_values_unchanged(self):
        """Non-string values are never truncated."""
        processor = truncate_large_values(max_length=1)
        event = processor(None, "info", {"count": 123456})
        assert event["count"] == 123456
