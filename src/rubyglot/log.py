"""Logging setup shared by the CLI and the HTTP API."""

from __future__ import annotations

import logging

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_HANDLER_NAME = "rubyglot"


def configure_logging(level: str) -> None:
    """Attach a single stream handler to the package logger."""
    logger = logging.getLogger("rubyglot")
    logger.setLevel(level.upper())
    if any(handler.get_name() == _HANDLER_NAME for handler in logger.handlers):
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_FORMAT))
    handler.set_name(_HANDLER_NAME)
    logger.addHandler(handler)
