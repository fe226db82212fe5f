"""Logging setup for applications built on the client."""

from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler

LOGGER_NAME = "zulip_api"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"

# Library default: stay silent until the application configures logging.
logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


def configure_logging(
    level: int = logging.INFO,
    *,
    log_file: str | None = None,
    max_bytes: int = 1_000_000,
    backup_count: int = 5,
) -> logging.Logger:
    """Attach console (and optionally rotating file) handlers to the package logger."""

    formatter = logging.Formatter(LOG_FORMAT)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Avoid duplicate logs if called more than once
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if log_file is not None:
        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)

        file_handler = RotatingFileHandler(log_file, maxBytes=max_bytes, backupCount=backup_count)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    logger.propagate = False
    return logger
