# === FILE: site_harvest/logger.py ===
"""Logging setup for **SiteHarvest**.

Every module logs through a child of the ``SiteHarvest`` logger::

    from site_harvest.logger import get_logger
    log = get_logger("crawler")        # -> "SiteHarvest.crawler"

Records go to stdout and, when the CLI asks for it, to a rotating log file
next to the crawl (``site_harvest.log`` by default). The handlers live on the
project logger only; it does not propagate to the root logger.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, List, Optional, Union

DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DEFAULT_LOG_FILE: Final[str] = "site_harvest.log"
LOGGER_NAME: Final[str] = "SiteHarvest"

_MAX_LOG_BYTES: Final[int] = 5 * 1024 * 1024
_LOG_BACKUPS: Final[int] = 3


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Project logger, or its child ``SiteHarvest.<name>``."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}" if name else LOGGER_NAME)


def _handlers(log_file: Union[str, Path, None]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file is not None:
        handlers.append(
            RotatingFileHandler(
                str(log_file), maxBytes=_MAX_LOG_BYTES, backupCount=_LOG_BACKUPS, encoding="utf-8"
            )
        )
    return handlers


def _drop_handlers(lg: logging.Logger) -> None:
    for handler in list(lg.handlers):
        lg.removeHandler(handler)
        handler.close()


def init_logging(
    level: Union[int, str] = "INFO",
    log_file: Union[str, Path, None] = None,
    log_format: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """Replace the handlers of the project logger and set its level.

    ``log_file=None`` keeps output on stdout only.
    """
    lg = get_logger()
    _drop_handlers(lg)
    formatter = logging.Formatter(log_format)
    for handler in _handlers(log_file):
        handler.setFormatter(formatter)
        lg.addHandler(handler)
    lg.setLevel(level)
    lg.propagate = False
    return lg


# console-only until the CLI reconfigures it
logger: logging.Logger = init_logging()

__all__ = [
    "DEFAULT_FORMAT",
    "DEFAULT_LOG_FILE",
    "LOGGER_NAME",
    "logger",
    "get_logger",
    "init_logging",
]
