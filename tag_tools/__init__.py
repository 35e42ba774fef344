"""
Tag Tools

Parsing helpers for an HTML tag-building library: a CSS selector subset
for querying tag trees and a lexer for `{{ code }}` templates.

Can be used as a library or via CLI commands.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

__version__ = "1.0.0"
__author__ = "Vasiliy Zdanovskiy"
__email__ = "vasilyvz@gmail.com"

from .core.exceptions import (
    DanglingCombinatorError,
    SelectorParseError,
    SelectorTypeError,
    TagToolsError,
    TemplateError,
    TemplateTypeError,
    UnsupportedTokenError,
    UnterminatedCodeBlockError,
)
from .selector import (
    Selector,
    SelectorKind,
    SelectorList,
    Traversal,
    as_selector_list,
    format_selector,
    is_selector,
    is_selector_list,
    parse_selector,
)
from .template import Segment, SegmentKind, iter_segments, split_template

__all__ = [
    # Selectors
    "Selector",
    "SelectorKind",
    "SelectorList",
    "Traversal",
    "as_selector_list",
    "format_selector",
    "is_selector",
    "is_selector_list",
    "parse_selector",
    # Templates
    "Segment",
    "SegmentKind",
    "iter_segments",
    "split_template",
    # Errors
    "TagToolsError",
    "SelectorParseError",
    "UnsupportedTokenError",
    "DanglingCombinatorError",
    "SelectorTypeError",
    "TemplateError",
    "UnterminatedCodeBlockError",
    "TemplateTypeError",
]
