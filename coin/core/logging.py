"""
Coin — Package logger setup.

Everything the package logs goes through the ``coin`` logger hierarchy.
Modules obtain their logger with ``get_logger(__name__)``; an embedding
application (or a fault-injection campaign) may call ``configure_logging()``
once to set the package level and attach a handler.  The root logger is
never touched.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from coin import config


PACKAGE_LOGGER = "coin"

_CONFIGURED = False


def _resolve_level(level: Optional[str]) -> int:
    wanted = (level or config.LOG_LEVEL).upper()
    resolved = logging.getLevelName(wanted)
    # getLevelName() hands back "Level X" for names it does not know
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(
    level: Optional[str] = None,
    fmt: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt: str = "%Y-%m-%d %H:%M:%S",
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Configure the ``coin`` logger exactly once and return it.

    ``level`` falls back to ``config.LOG_LEVEL`` (env ``LOG_LEVEL``), and an
    unknown name means INFO.  A stream handler (stdout by default) is only
    attached when neither the package logger nor the root logger has one,
    so records are never emitted twice.
    """
    global _CONFIGURED
    package = logging.getLogger(PACKAGE_LOGGER)
    if _CONFIGURED:
        return package

    package.setLevel(_resolve_level(level))

    if not package.handlers and not logging.getLogger().handlers:
        handler = logging.StreamHandler(stream or sys.stdout)
        handler.setFormatter(logging.Formatter(fmt=fmt, datefmt=datefmt))
        package.addHandler(handler)

    _CONFIGURED = True
    return package


def get_logger(name: str) -> logging.Logger:
    """Return a logger inside the ``coin`` hierarchy.

    Names already under ``coin`` are used as-is; anything else is nested,
    so ``get_logger("campaign")`` gives ``coin.campaign``.
    """
    if name == PACKAGE_LOGGER or name.startswith(PACKAGE_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")
