import logging
import sys
from typing import Optional, TextIO


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def resolve_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"unknown log level: {level}")
    return resolved


def create_logger(name: str, level: str | int = logging.WARNING, stream: Optional[TextIO] = None) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(resolve_level(level))
    if logger.handlers:
        return logger
    handler = logging.StreamHandler(stream or sys.stderr)
    formatter = logging.Formatter(LOG_FORMAT)
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.propagate = False
    return logger
