"""Logging setup for the poketype CLI."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

_HTTPX_LOGGERS = ("httpx", "httpcore")


def configure_logging(
    *,
    level: int = logging.INFO,
    force: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Send log records to stderr so stdout carries only the JSON response.

    httpx logs every request at INFO; those records are kept at WARNING unless
    ``level`` is DEBUG, where the lookup logger already reports each request.
    """

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        stream=stream or sys.stderr,
        force=force,
    )
    transport_level = level if level <= logging.DEBUG else max(level, logging.WARNING)
    for name in _HTTPX_LOGGERS:
        logging.getLogger(name).setLevel(transport_level)
