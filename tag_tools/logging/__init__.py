"""
Unified logging package: format with importance (0-10) for tag tools output.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from tag_tools.logging.unified_logging import (
    LEVEL_TO_IMPORTANCE,
    UNIFIED_DATE_FMT,
    UNIFIED_FORMAT_STR,
    UnifiedFormatter,
    create_unified_formatter,
    importance_from_level,
    setup_logging,
)

__all__ = [
    "LEVEL_TO_IMPORTANCE",
    "UNIFIED_DATE_FMT",
    "UNIFIED_FORMAT_STR",
    "UnifiedFormatter",
    "create_unified_formatter",
    "importance_from_level",
    "setup_logging",
]
