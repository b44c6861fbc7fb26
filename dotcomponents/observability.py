"""
Logging setup for processes that host the assembler (e.g. the API server).

The library itself only creates module loggers; it never configures
handlers on import.
"""

from __future__ import annotations
import logging
import sys
from typing import Mapping, Optional, Union


LOG_FORMAT = "%(asctime)s - %(levelname)s - [%(name)s:%(lineno)d] - %(message)s"

Level = Union[str, int]


def _to_level(level: Level, default: int) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), default)
    return level


def configure_logging(
    general_level: Level = "INFO",
    module_levels: Optional[Mapping[str, Level]] = None,
) -> logging.Logger:
    """Configure the root logger with one stderr handler."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root_logger = logging.getLogger()
    root_logger.setLevel(_to_level(general_level, logging.INFO))
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    for name, level in (module_levels or {}).items():
        logging.getLogger(name).setLevel(_to_level(level, logging.INFO))

    return root_logger
