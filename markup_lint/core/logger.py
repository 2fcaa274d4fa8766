"""
Logger - Package-wide logging setup.

Every module logs through `logging.getLogger(__name__)`; this module
attaches a single console handler to the package logger so those records
are visible, at the level chosen in settings.
"""

import logging
import sys

from .config import Settings, settings


LOG_FORMAT = "[%(asctime)s] %(levelname)s [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(config: Settings = settings) -> logging.Logger:
    """
    Configure the package logger.

    Safe to call more than once: the handler is only added the first time,
    later calls just update the level.

    Args:
        config: Settings providing the logger name and level

    Returns:
        The configured package logger
    """
    package_logger = logging.getLogger(config.APP_NAME)
    level = getattr(logging, config.effective_log_level)
    package_logger.setLevel(level)

    if not package_logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        package_logger.addHandler(handler)

    return package_logger


logger = configure_logging()
