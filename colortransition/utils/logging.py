"""
Logging helpers for colortransition.

Library modules only ever call ``get_logger(__name__)``; handlers are left to
the application. Scripts and examples that want output call
``configure_logging()``, which touches the ``colortransition`` logger only.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional, Union

LOGGER_NAME = "colortransition"
LEVEL_ENV_VAR = "COLORTRANSITION_LOG_LEVEL"
DEFAULT_FMT = "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d: %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"


def configure_logging(
    level: Optional[Union[str, int]] = None,
    *,
    fmt: Optional[str] = None,
    datefmt: Optional[str] = None,
    force: bool = False,
) -> logging.Logger:
    """
    Attach a stderr handler to the package logger.

    Args:
        level: Logging level name or number. Defaults to the
            COLORTRANSITION_LOG_LEVEL environment variable, then "INFO".
        fmt: Record format, DEFAULT_FMT if omitted
        datefmt: Date format, DEFAULT_DATEFMT if omitted
        force: Replace existing handlers instead of keeping the first one

    Returns:
        The configured package logger
    """
    if level is None:
        level = os.environ.get(LEVEL_ENV_VAR, "INFO")
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if force:
        for h in logger.handlers[:]:
            h.close()
            logger.removeHandler(h)
    else:
        for h in logger.handlers:
            if isinstance(h, logging.StreamHandler) and h.stream is sys.stderr:
                h.setLevel(level)
                return logger

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(logging.Formatter(fmt=fmt or DEFAULT_FMT, datefmt=datefmt or DEFAULT_DATEFMT))
    logger.addHandler(console)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return ``logging.getLogger(name)``, or the package logger when name is None."""
    return logging.getLogger(name or LOGGER_NAME)
