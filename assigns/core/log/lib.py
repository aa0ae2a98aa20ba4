"""Logging helpers for component-assigns.

All loggers live under the ``assigns`` namespace so a single call to
`setup_logging` controls the whole package without touching the root logger.
"""

import logging
import sys
from typing import Optional, TextIO

__all__ = ["ROOT_LOGGER", "get_logger", "setup_logging"]

ROOT_LOGGER = "assigns"

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _resolve_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(level: int | str = logging.INFO, stream: TextIO = sys.stderr) -> None:
    """Route package logs to a stream.

    Calling it again replaces the previous handler instead of stacking a new
    one.

    Args:
        level: Numeric level or a level name such as "DEBUG". Unknown names
            fall back to INFO.
        stream: Output stream.
    """
    package = logging.getLogger(ROOT_LOGGER)
    for handler in list(package.handlers):
        if getattr(handler, "_assigns_handler", False):
            package.removeHandler(handler)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(_FORMAT))
    handler._assigns_handler = True  # type: ignore[attr-defined]
    package.addHandler(handler)
    package.setLevel(_resolve_level(level))


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger under the package namespace.

    Module names (``assigns.registry.lib``) are used as-is; short names such
    as ``"cli"`` are nested under ``assigns``.
    """
    if not name or name == ROOT_LOGGER:
        return logging.getLogger(ROOT_LOGGER)
    if name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
