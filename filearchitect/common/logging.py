"""Centralized logging setup."""

import logging
import sys

LOGGER_NAME = "filearchitect"


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Setup centralized logging configuration."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)

    # Formatter
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    console_handler.setFormatter(formatter)

    # Add handler if not already added
    if not logger.handlers:
        logger.addHandler(console_handler)
    else:
        for handler in logger.handlers:
            handler.setLevel(level)

    return logger
