"""Logging setup for the command line."""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]

_handler: logging.Handler | None = None


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """Send ``billable`` log records at ``level`` and above to stderr.

    Calling it again replaces the previous handler, so the handler always
    writes to the current ``sys.stderr``.
    """
    global _handler

    logger = logging.getLogger("billable")
    if _handler is not None:
        logger.removeHandler(_handler)

    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(_handler)
    logger.setLevel(level.upper())
    return logger
