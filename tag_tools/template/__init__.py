"""
Template text splitting for `{{ code }}` templates.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from .lexer import (
    LexerState,
    Segment,
    SegmentKind,
    iter_segments,
    split_template,
    transition,
)

__all__ = [
    "LexerState",
    "Segment",
    "SegmentKind",
    "iter_segments",
    "split_template",
    "transition",
]
