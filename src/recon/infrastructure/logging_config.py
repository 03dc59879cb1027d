"""Logging setup for the CLI.

Library modules only call ``logging.getLogger(__name__)``; a handler is
installed here, once, on the package logger.
"""

from __future__ import annotations

import logging

LOGGER_NAME = "recon"
_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach a stderr handler to the ``recon`` logger. Safe to call twice."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
    return logger
