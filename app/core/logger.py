"""
Logging setup.

Every module logs through loggers created here so format and level stay uniform.
"""

import logging
import sys

from app.core.config import get_settings

_FORMAT = "%(asctime)s %(levelname)-7s [%(name)s] %(message)s"


def setup_logger(name: str) -> logging.Logger:
    """Create (or fetch) a named logger writing to stdout."""
    log = logging.getLogger(name)
    if not log.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(_FORMAT))
        log.addHandler(handler)
        log.propagate = False
    log.setLevel(get_settings().LOG_LEVEL.upper())
    return log


logger = setup_logger("scriptdesk")
