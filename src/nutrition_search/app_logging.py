"""Logging configuration helpers."""

import logging

PACKAGE_LOGGER = "nutrition_search"
# Upstream clients log every request at INFO; one search fans out to four.
QUIET_LOGGERS = ("httpx", "httpcore")


def configure_logging(level: str = "INFO") -> None:
    """Configure package logging with a single stream handler.

    Calling again only updates the level, so the app factory and tests
    can both call it safely.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level.upper())
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
