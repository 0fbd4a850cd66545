"""
Logging configuration for gql-sdlgen.

Library modules only create loggers (``logging.getLogger(__name__)``); the
CLI calls :func:`setup_logging` once to attach a handler.
"""

import logging
import os
from typing import Optional

LOGGER_NAME = "gql_sdlgen"
LOG_LEVEL_ENV = "GQL_SDLGEN_LOG_LEVEL"


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """
    Configure logging for the gql_sdlgen package.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Falls
            back to the GQL_SDLGEN_LOG_LEVEL environment variable, then WARNING.
        log_file: Optional file path for log output
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "WARNING")

    log_level = getattr(logging, level.upper(), logging.WARNING)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger under the gql_sdlgen namespace.

    Args:
        name: Logger name relative to the package (e.g. "cli")
    """
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
