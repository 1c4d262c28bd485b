"""Logging setup for the server process."""
from typing import Optional
import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_handler: Optional[logging.Handler] = None


def configure_logging(level: str = "INFO") -> logging.Handler:
    """
    Send all log records to stderr

    stdout carries the JSON-RPC stream when the stdio transport is used, so
    nothing may be logged there. Repeated calls reuse the same handler.
    """
    global _handler

    root = logging.getLogger()
    root.setLevel(level)

    if _handler is None:
        _handler = logging.StreamHandler(sys.stderr)
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    if _handler not in root.handlers:
        root.addHandler(_handler)

    return _handler
