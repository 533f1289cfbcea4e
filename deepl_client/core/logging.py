"""
Logging helpers

The package never configures logging on import. Applications (and the
verification script) call setup_logging() once at startup.
"""

import logging
import sys
from typing import Optional, Union

from deepl_client.core.config import get_settings

PACKAGE_LOGGER = "deepl_client"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return a module logger"""
    return logging.getLogger(name)


def setup_logging(level: Optional[Union[str, int]] = None) -> logging.Logger:
    """
    Attach a stream handler to the package logger.

    Falls back to the configured DEEPL_LOG_LEVEL when no level is given.
    Calling it again replaces the previous handler instead of stacking.
    """
    if level is None:
        level = get_settings().log_level
    if isinstance(level, str):
        level = level.upper()

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if getattr(handler, "_deepl_client_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._deepl_client_handler = True
    logger.addHandler(handler)

    return logger
