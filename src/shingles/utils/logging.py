"""Logging helpers for the command line and library callers."""

from __future__ import annotations

import logging
from typing import Union

DEFAULT_FORMAT = "%(levelname)s:%(name)s:%(message)s"


def resolve_level(level: Union[int, str]) -> int:
    """Return the numeric level for *level*, a number or a name such as ``"debug"``.

    ``ValueError`` is raised for names the :mod:`logging` module does not know.
    """

    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.strip().upper())
    if not isinstance(value, int):
        raise ValueError(f"unknown logging level: {level!r}")
    return value


def get_logger(
    name: str = "shingles",
    level: Union[int, str] = logging.INFO,
    fmt: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """Return a :class:`logging.Logger` with a single stream handler.

    Calling this again for the same *name* only updates the level.
    """

    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt))
        logger.addHandler(handler)
    logger.setLevel(resolve_level(level))
    return logger
