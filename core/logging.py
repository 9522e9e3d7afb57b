"""
Logging configuration
"""

import logging
import sys
from typing import Optional

from core.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

# Library loggers that drown out request logs at INFO
QUIET_LOGGERS = {
    "sqlalchemy.engine": logging.WARNING,
    "sqlalchemy.pool": logging.WARNING,
    "httpx": logging.WARNING,
    "httpcore": logging.WARNING,
    # api.access already writes one line per request
    "uvicorn.access": logging.WARNING,
    # logs a traceback while probing the bcrypt version
    "passlib": logging.ERROR,
}


def setup_logging(settings: Optional[Settings] = None):
    """Configure root logging; a root logger that already has handlers is left alone"""
    settings = settings or get_settings()
    level = logging.getLevelName(settings.LOG_LEVEL.upper())
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    for name, quiet_level in QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(quiet_level)

    logging.getLogger(__name__).debug(f"Logging configured at {logging.getLevelName(level)}")
