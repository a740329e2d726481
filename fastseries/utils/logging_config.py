# fastseries/utils/logging_config.py
"""
Logging setup for command line use.

The library itself only creates module loggers; applications decide how
records are emitted.
"""

import logging
from typing import Optional

from .config import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """Configure the root handler and return the package logger."""
    if level is None:
        numeric_level = get_settings().log_level_number
    else:
        numeric_level = getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT)

    logger = logging.getLogger("fastseries")
    logger.setLevel(numeric_level)
    return logger
