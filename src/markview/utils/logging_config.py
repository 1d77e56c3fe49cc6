"""Logging setup shared by the server and command-line entry points."""

from __future__ import annotations

import logging

from markview.config import MARKVIEW_LOG_LEVEL

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_configured = False


def configure_logging(level: str | int | None = None) -> None:
    """Attach a single stream handler to the root logger.

    Later calls only change the level, and only when one is given.
    """
    global _configured
    root = logging.getLogger()
    if level is not None:
        root.setLevel(level)
    if _configured:
        return
    if level is None:
        root.setLevel(MARKVIEW_LOG_LEVEL)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    root.addHandler(handler)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger, configuring output on first use."""
    configure_logging()
    return logging.getLogger(name)
