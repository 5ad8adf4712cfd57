"""Package logger setup for the ``demo`` and ``viz`` command-line tools."""

import logging
import sys

LOGGER_NAME = "fractionfoods"
LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"


def setup_logging(level=logging.INFO, log_file=None):
    """Send ``fractionfoods.*`` records to stderr (and *log_file* if given).

    Safe to call repeatedly: handlers from an earlier call are replaced.
    Returns the package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger
