"""Logging setup for the fincalc logger hierarchy."""

from __future__ import annotations

import logging

from fincalc.config import Settings

LOGGER_NAME = "fincalc"


def configure_logging(settings: Settings) -> logging.Logger:
    """Attach one stream handler to the `fincalc` logger.

    Calling it again replaces the handler's level and format instead of
    stacking another handler.
    """
    logger = logging.getLogger(LOGGER_NAME)
    level = getattr(logging, settings.log_level, logging.INFO)
    logger.setLevel(level)

    handler = next((h for h in logger.handlers if h.get_name() == LOGGER_NAME), None)
    if handler is None:
        handler = logging.StreamHandler()
        handler.set_name(LOGGER_NAME)
        logger.addHandler(handler)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(settings.log_format))
    return logger
