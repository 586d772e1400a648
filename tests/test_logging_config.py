"""Tests for logging configuration."""

import io
import logging

from semanticlink.logging_config import setup_logging


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_configures_package_logger(self) -> None:
        logger = setup_logging(logging.DEBUG, io.StringIO())
        assert logger.name == "semanticlink"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    def test_repeated_setup_replaces_handler(self) -> None:
        setup_logging(logging.INFO, io.StringIO())
        logger = setup_logging(logging.WARNING, io.StringIO())
        assert len(logger.handlers) == 1
        assert logger.level == logging.WARNING

    def test_format(self) -> None:
        stream = io.StringIO()
        setup_logging(logging.INFO, stream)
        logging.getLogger("semanticlink.filter").info("resolved")
        assert stream.getvalue() == "    INFO semanticlink.filter resolved\n"
