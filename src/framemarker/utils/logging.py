"""
Logging helpers for framemarker.

Library modules only call ``get_logger(__name__)``. Demos and applications may
call ``configure_logging()`` to get console output on the ``framemarker``
logger; the root logger and log files are never touched.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional, Union

ROOT_LOGGER_NAME = "framemarker"
LOG_LEVEL_ENV_VAR = "FRAMEMARKER_LOG_LEVEL"

DEFAULT_FMT = "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d:%(funcName)s: %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"


def configure_logging(
    level: Optional[Union[str, int]] = None,
    *,
    fmt: Optional[str] = None,
    datefmt: Optional[str] = None,
    force: bool = False,
) -> None:
    """Attach a stderr handler to the framemarker logger.

    ``level`` defaults to $FRAMEMARKER_LOG_LEVEL, then INFO. Without ``force``
    this is a no-op once a stderr handler is installed.
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV_VAR, "INFO")
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    formatter = logging.Formatter(
        fmt=fmt if fmt is not None else DEFAULT_FMT,
        datefmt=datefmt if datefmt is not None else DEFAULT_DATEFMT,
    )

    if force:
        for h in logger.handlers[:]:
            h.close()
            logger.removeHandler(h)
    else:
        for h in logger.handlers:
            if isinstance(h, logging.StreamHandler) and h.stream is sys.stderr:
                return

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(formatter)
    logger.addHandler(console)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the named logger, or the framemarker logger for None."""
    if name is None:
        name = ROOT_LOGGER_NAME
    return logging.getLogger(name)
