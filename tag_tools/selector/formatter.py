"""
Canonical text form for parsed selectors.

The output is stable for a given AST and parses back to an equivalent AST,
but it is not necessarily the text the selector was parsed from: id always
comes before classes, and child combinators are surrounded by spaces.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

from typing import Union

from ..core.exceptions import SelectorTypeError
from .ast import Selector, SelectorKind, SelectorList, Traversal


def _format_single(selector: Selector) -> str:
    parts: list[str] = []
    if selector.traversal == Traversal.CHILD:
        parts.append("> ")
    if selector.kind == SelectorKind.EVERYTHING:
        parts.append("*")
    else:
        if selector.element is not None:
            parts.append(selector.element)
        if selector.id is not None:
            parts.append(f"#{selector.id}")
        parts.extend(f".{name}" for name in selector.classes)
    return "".join(parts)


def format_selector(selector: Union[Selector, SelectorList]) -> str:
    """Render a Selector or SelectorList in canonical form."""
    if isinstance(selector, Selector):
        return _format_single(selector)
    if isinstance(selector, SelectorList):
        return " ".join(_format_single(item) for item in selector)
    raise SelectorTypeError(
        f"Cannot format {type(selector).__name__} as a selector",
        value_type=type(selector).__name__,
    )


def describe_selector(selector: Union[Selector, SelectorList]) -> str:
    """Two-line diagnostic display: a kind header and the canonical form."""
    if isinstance(selector, SelectorList):
        header = "// css selector list"
    else:
        header = "// css selector"
    return f"{header}\n{format_selector(selector)}"
