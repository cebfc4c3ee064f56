from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s:%(lineno)d] - %(message)s"


def init_logging(level: str = "INFO") -> logging.Logger:
    """Configure process-wide logging and return the package logger."""
    numeric_level = getattr(logging, str(level).upper(), logging.INFO)
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT)

    logger = logging.getLogger(__name__.rsplit(".common.", 1)[0])
    logger.setLevel(numeric_level)
    logger.info("Logging initialized at %s level", logging.getLevelName(numeric_level))
    return logger
