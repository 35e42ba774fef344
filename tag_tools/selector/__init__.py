"""
CSS selector subset for querying tag trees.

Public API:
  - parse_selector(selector) -> Selector | SelectorList
  - format_selector(selector) -> str
  - as_selector_list(value) -> SelectorList
  - is_selector(value) / is_selector_list(value)

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from .ast import (
    Selector,
    SelectorKind,
    SelectorList,
    Traversal,
    as_selector_list,
    is_selector,
    is_selector_list,
)
from .formatter import describe_selector, format_selector
from .parser import parse_selector

__all__ = [
    "Selector",
    "SelectorKind",
    "SelectorList",
    "Traversal",
    "as_selector_list",
    "is_selector",
    "is_selector_list",
    "describe_selector",
    "format_selector",
    "parse_selector",
]
