"""
Tests for the logging setup.
"""
import logging

from bed_allocation.utils.logger import configure_logging, get_logger


class TestLogger:
    """Tests for configure_logging and get_logger."""

    def test_area_loggers_live_under_the_service_tree(self):
        assert get_logger("beds").name == "bed_allocation.beds"
        assert get_logger("bed_allocation.search").name == "bed_allocation.search"
        assert get_logger("bed_allocation").name == "bed_allocation"

    def test_configure_is_repeatable(self):
        """A second call changes the level without adding a handler."""
        logger = configure_logging("INFO")
        handlers = len(logger.handlers)

        logger = configure_logging("debug")

        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == handlers
        configure_logging("INFO")
