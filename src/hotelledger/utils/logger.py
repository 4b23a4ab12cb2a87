"""Application logger helpers."""

import logging
import sys
from typing import Optional

APP_LOGGER_NAME = "hotelledger"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def get_app_logger(level: Optional[int | str] = None) -> logging.Logger:
    """Return the shared application logger.

    The logger gets a single stderr handler on first use; later calls reuse
    it and only adjust the level when one is given.

    Args:
        level: Optional logging level (int or name such as "INFO")

    Returns:
        Configured logging.Logger
    """
    logger = logging.getLogger(APP_LOGGER_NAME)
    if not any(getattr(h, "_hotelledger", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._hotelledger = True
        logger.addHandler(handler)
        if logger.level == logging.NOTSET:
            logger.setLevel(logging.WARNING)
    if level is not None:
        logger.setLevel(level.upper() if isinstance(level, str) else level)
    return logger
