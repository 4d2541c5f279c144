"""Logging utilities for the Tango solver."""

from __future__ import annotations

import logging
from typing import Optional, Union

ROOT_LOGGER_NAME = "tango"
LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"


def resolve_level(level: Union[int, str]) -> int:
    """Map ``"debug"``/``"INFO"``/``10`` style levels to a logging constant, defaulting to INFO."""

    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.strip().upper())
    return value if isinstance(value, int) else logging.INFO


def configure_logging(level: Union[int, str] = logging.INFO) -> None:
    """Configure root logging with a compact formatter.

    The search only logs at DEBUG level, so the INFO default prints one
    summary line per solve call.
    """

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(resolve_level(level))


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger under the ``tango`` namespace, configuring defaults if needed."""

    if not logging.getLogger().handlers:
        configure_logging()
    if not name:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
