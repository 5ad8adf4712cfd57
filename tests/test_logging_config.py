"""Tests for the package logger setup."""

import logging

import pytest

from fractionfoods.logging_config import LOGGER_NAME, setup_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger(LOGGER_NAME)
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


class TestSetupLogging:
    def test_repeat_calls_do_not_stack_handlers(self, package_logger):
        setup_logging(logging.DEBUG)
        setup_logging(logging.DEBUG)
        assert len(package_logger.handlers) == 1
        assert package_logger.level == logging.DEBUG

    def test_log_file(self, package_logger, tmp_path):
        path = tmp_path / "run.log"
        setup_logging(logging.INFO, log_file=str(path))
        logging.getLogger("fractionfoods.session").info("round %d", 3)
        for handler in package_logger.handlers:
            handler.flush()
        assert "fractionfoods.session: round 3" in path.read_text(encoding="utf-8")
