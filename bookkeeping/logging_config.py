"""
Logging configuration.

Services log through module-level loggers obtained with
logging.getLogger(__name__). This module wires those loggers
to a console handler once, at application startup.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False


def configure_logging(level: str = "INFO") -> None:
    """
    Attach a stdout handler to the package logger.

    Safe to call more than once; only the level is updated
    on subsequent calls.
    """
    global _configured

    logger = logging.getLogger("bookkeeping")
    logger.setLevel(level)

    if _configured:
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    _configured = True
