# solid_principles/logging/logger.py
"""
Unified logging setup for the whole package.

All modules use:
    from solid_principles.logging.logger import get_logger
    logger = get_logger(__name__)

Configuration happens once, in configure_logging(), normally from the CLI.
"""

import logging
import sys
from typing import Union

DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def resolve_level(level: Union[int, str]) -> int:
    """Turn 'debug' / 'INFO' / 10 into a logging level number."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown logging level: {level!r}")
    return resolved


def configure_logging(
    level: Union[int, str] = logging.WARNING,
    fmt: str = DEFAULT_FORMAT,
    stream=None,
) -> None:
    """
    Configure the package's root logger.

    Safe to call multiple times; handler duplication is prevented.
    Logs go to stderr by default so they never mix with example output.
    """
    root = logging.getLogger("solid_principles")
    if not root.handlers:
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(logging.Formatter(fmt))
        root.addHandler(handler)

    root.setLevel(resolve_level(level))


def get_logger(name: str) -> logging.Logger:
    """
    Modules call this to get a logger.

    Do NOT configure logging here; configuration happens in configure_logging().
    """
    return logging.getLogger(name)
