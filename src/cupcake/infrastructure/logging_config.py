"""Logging setup for the cupcake application."""

from __future__ import annotations

import logging

LOGGER_NAME = "cupcake"


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Configure the ``cupcake`` logger.

    - Console output on stderr
    - Unified format with timestamp and level
    - Safe to call more than once; handlers are only installed once
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    if logger.handlers:
        return logger

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    logger.debug("Logger initialized")
    return logger
