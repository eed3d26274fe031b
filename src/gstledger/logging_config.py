"""Logging setup for gstledger."""

__all__ = ["get_logger", "configure_logging"]

import logging
import sys
from typing import Optional, TextIO

_LOGGER_PREFIX = "gstledger"
_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the gstledger namespace."""
    return logging.getLogger(f"{_LOGGER_PREFIX}.{name}")


def configure_logging(level: int = logging.WARNING, stream: Optional[TextIO] = None) -> logging.Logger:
    """Install a single stream handler on the gstledger logger.

    Calling this again replaces the previously installed handler rather than
    stacking a second one.
    """
    root = logging.getLogger(_LOGGER_PREFIX)
    for handler in list(root.handlers):
        if getattr(handler, "_gstledger_handler", False):
            root.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))
    handler._gstledger_handler = True
    root.addHandler(handler)
    root.setLevel(level)
    return root
