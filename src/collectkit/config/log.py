"""Logging setup for applications that want collectkit's debug output."""

from __future__ import annotations

import logging

from collectkit.config.settings import LoggingSettings

_HANDLER_NAME = "collectkit"


def configure_logging(settings: LoggingSettings | None = None) -> logging.Logger:
    """Attach a stream handler to the `collectkit` logger.

    Calling it again replaces the handler installed by the previous call
    instead of adding another one.

    Args:
        settings: Level and format to use. Loaded from the environment when
            omitted.

    Returns:
        The configured `collectkit` logger.
    """
    settings = settings or LoggingSettings()
    logger = logging.getLogger("collectkit")
    for handler in list(logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(settings.format))
    logger.addHandler(handler)
    logger.setLevel(settings.level.upper())
    logger.debug("collectkit logging configured (level=%s)", settings.level)
    return logger
