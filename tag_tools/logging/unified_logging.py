"""
Unified logging format with importance (0-10) for tag tools log output.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

# Default importance (0-10) per standard level when not set explicitly
LEVEL_TO_IMPORTANCE = {
    "DEBUG": 2,
    "INFO": 4,
    "WARNING": 6,
    "ERROR": 8,
    "CRITICAL": 10,
}

UNIFIED_DATE_FMT = "%Y-%m-%d %H:%M:%S"
UNIFIED_FORMAT_STR = "%(asctime)s | %(levelname)-8s | %(importance)s | %(message)s"

PACKAGE_LOGGER = "tag_tools"


def importance_from_level(level_name: str) -> int:
    """Return importance 0-10 for a standard log level name. Returns 4 for unknown."""
    return LEVEL_TO_IMPORTANCE.get((level_name or "").strip().upper(), 4)


def _set_importance_if_missing(record: logging.LogRecord) -> None:
    """Set record.importance from level if not already set by `extra`."""
    if getattr(record, "importance", None) is None:
        record.importance = importance_from_level(record.levelname)


class UnifiedFormatter(logging.Formatter):
    """
    Formatter that outputs: timestamp | level | importance | message.
    Importance is taken from record.importance (set via `extra`) or derived
    from the level.
    """

    def format(self, record: logging.LogRecord) -> str:
        _set_importance_if_missing(record)
        return super().format(record)


def create_unified_formatter(
    fmt: str = UNIFIED_FORMAT_STR,
    datefmt: str = UNIFIED_DATE_FMT,
) -> UnifiedFormatter:
    """Create a UnifiedFormatter with project default format and date format."""
    return UnifiedFormatter(fmt=fmt, datefmt=datefmt)


def setup_logging(
    level: Union[str, int] = "WARNING",
    log_file: Optional[Union[str, Path]] = None,
) -> logging.Logger:
    """
    Attach unified-format handlers to the package logger.

    Handlers previously installed by this function are replaced, so calling it
    twice does not duplicate output.

    Args:
        level: Level name or number
        log_file: Optional path; when given, records are also appended there

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if getattr(handler, "_tag_tools_handler", False):
            logger.removeHandler(handler)
            handler.close()

    formatter = create_unified_formatter()
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file is not None:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(path, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        handler._tag_tools_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    logger.setLevel(level.upper() if isinstance(level, str) else level)
    return logger
