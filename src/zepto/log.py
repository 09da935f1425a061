"""Logging setup.

The editor owns the terminal while it runs, so log records are never sent
to stdout/stderr: they go to a file when one is configured and are
discarded otherwise.
"""

from __future__ import annotations

import logging

from zepto.config import EditorConfig

LOGGER_NAME = "zepto"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(config: EditorConfig) -> logging.Logger:
    """Attach a handler to the package logger according to ``config``."""
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if config.log_file is not None:
        handler: logging.Handler = logging.FileHandler(config.log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.setLevel(config.log_level.upper())
    else:
        handler = logging.NullHandler()
    logger.addHandler(handler)
    # Keep records away from any root handler writing to the terminal
    logger.propagate = False
    return logger
