"""
Tests for wellbeing_core/logging_utils.py - Standardized logging configuration.
"""

import logging

from wellbeing_core.logging_utils import configure_logging, get_logger


class TestGetLogger:

    def test_returns_logger(self):
        assert isinstance(get_logger("test_module"), logging.Logger)

    def test_logger_name(self):
        assert get_logger("wellbeing_core.desire").name == "wellbeing_core.desire"

    def test_same_name_same_logger(self):
        assert get_logger("same_name") is get_logger("same_name")


class TestConfigureLogging:

    def test_idempotent(self):
        """Calling configure_logging multiple times adds a single handler."""
        configure_logging()
        configure_logging()
        handlers = logging.getLogger("wellbeing_core").handlers
        assert len(handlers) == 1

    def test_sets_level(self):
        configure_logging(level=logging.DEBUG)
        assert logging.getLogger("wellbeing_core").level == logging.DEBUG
        configure_logging(level=logging.INFO)
