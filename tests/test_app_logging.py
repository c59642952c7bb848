"""Tests for logging configuration."""

import logging

from nutritrack.app_logging import configure_logging


def test_configure_logging_attaches_single_handler() -> None:
    logger = logging.getLogger("nutritrack")
    logger.handlers.clear()

    configure_logging()
    configure_logging("debug")

    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
    assert logger.propagate is False


def test_service_loggers_inherit_package_level() -> None:
    configure_logging("INFO")
    logger = logging.getLogger("nutritrack.services.meal_logs")

    assert logger.getEffectiveLevel() == logging.INFO
    assert logging.getLogger("nutritrack").handlers
