"""Unit tests for logging setup."""

import logging

from plantuml_doc_plugin.core.logging_config import configure_logging


def test_configure_logging_installs_single_handler():
    """Test that configuring twice does not duplicate handlers."""
    logger = logging.getLogger("plantuml_doc_plugin")
    saved_handlers, saved_level = list(logger.handlers), logger.level
    logger.handlers.clear()
    try:
        configure_logging(logging.DEBUG)
        returned = configure_logging(logging.WARNING)

        assert returned is logger

        assert len(logger.handlers) == 1
        assert logger.level == logging.WARNING
    finally:
        logger.handlers[:] = saved_handlers
        logger.setLevel(saved_level)
