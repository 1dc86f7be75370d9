# MIT License (see LICENSE)
"""
Logging setup for applications embedding fall_sim.

Library modules only create loggers (logging.getLogger(__name__)); nothing is
configured on import. Call setup_logging() from a script or application to
see controller transitions and rejected parameters.
"""
from __future__ import annotations
import logging
import sys

LOGGER_NAME = "fall_sim"


def setup_logging(level: int = logging.INFO, log_file: str | None = None) -> logging.Logger:
    """
    Configure the 'fall_sim' namespace logger.

    Existing handlers on that logger are removed first, so calling this twice
    does not duplicate output.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO).
        log_file: Optional path; when given, logs are also written there.

    Returns:
        The configured logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
    return logger
