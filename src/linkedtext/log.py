"""Apply the configured log level to the package logger."""

from __future__ import annotations

import logging

from linkedtext.config.models import LinkedTextConfig

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


def configure_logging(config: LinkedTextConfig) -> logging.Logger:
    """Set the ``linkedtext`` logger level. Handlers are left to the host application."""
    logger = logging.getLogger("linkedtext")
    logger.setLevel(_LEVELS[config.log_level])
    return logger
