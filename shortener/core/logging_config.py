"""Logging configuration for the URL shortener."""

import logging
import sys

LOGGER_NAME = "url_shortener"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Setup logging configuration.

    Configures the ``url_shortener`` logger and the ``shortener`` package
    loggers to write to stdout.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        Configured ``url_shortener`` logger
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)

    for name in (LOGGER_NAME, "shortener"):
        logger = logging.getLogger(name)
        logger.setLevel(numeric_level)
        logger.handlers.clear()
        logger.addHandler(console_handler)

    return logging.getLogger(LOGGER_NAME)
