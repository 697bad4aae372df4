"""
mime_description/core/logger.py

Centralised logging configuration.
Every module should obtain its logger via:

    from mime_description.core.logger import get_logger
    logger = get_logger(__name__)

Importing the library never touches the root logger: the package logger only
gets a NullHandler. The HTTP app (``main.py``) calls ``configure_logging()``
to send records to stdout.
"""

import logging
import sys
from typing import Optional

from mime_description.core.config import settings

PACKAGE_LOGGER = "mime_description"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def _default_level() -> int:
    return logging.DEBUG if settings.debug else logging.INFO


def _build_handler(level: int) -> logging.StreamHandler:
    """Return a stdout handler with a structured, readable format."""
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def configure_logging(level: Optional[int] = None) -> None:
    """
    Attach a stdout handler to the root logger, once.

    Does nothing when the root logger already has handlers (pytest, uvicorn
    with ``--log-config``, or a host application).

    Args:
        level: Root log level. Defaults to DEBUG when ``settings.debug`` is
               set, INFO otherwise.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    level = _default_level() if level is None else level
    root.setLevel(level)
    root.addHandler(_build_handler(level))

    # Silence noisy third-party loggers.
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """
    Return a named logger.

    Usage
    -----
    >>> logger = get_logger(__name__)
    >>> logger.info("Dataset loaded")
    """
    return logging.getLogger(name)
