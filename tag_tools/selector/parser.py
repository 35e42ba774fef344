"""
CSS selector parser (Lark + regex).

Supported features (intentionally minimal):
- Compound selectors: `*`, `element`, `#id`, `.class` and combinations such
  as `div#main.note.wide` (id and classes in any order)
- Combinators: descendant (whitespace) and direct child (`>`)

Rejected with UnsupportedTokenError: selector groups (`,`), attribute
selectors (`[`), sibling combinators (`~`, `+`) and pseudo selectors (`:`).

Notes:
- Repeated child combinators get an implicit `*` between them, so `a >> b`
  reads as `a > * > b`.
- A single compound selector parses to a Selector; anything with a
  combinator parses to a flat SelectorList.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Sequence, Union

from lark import Lark, Token, Transformer, UnexpectedInput
from lark.exceptions import VisitError

from ..core import text_scan
from ..core.exceptions import (
    DanglingCombinatorError,
    SelectorParseError,
    SelectorTypeError,
    UnsupportedTokenError,
)
from .ast import Selector, SelectorKind, SelectorList, Traversal

logger = logging.getLogger(__name__)

# (character, message) in the order they are checked
_UNSUPPORTED_TOKENS: tuple[tuple[str, str], ...] = (
    (",", "CSS selectors that contain `,` aren't (yet) implemented."),
    ("[", "CSS selectors that contain `[` aren't (yet) implemented."),
    ("~", "CSS selectors that contain `~` aren't (yet) implemented."),
    ("+", "CSS selectors that contain `+` aren't (yet) implemented."),
    (
        ":",
        "Pseudo CSS selectors (e.g., `:first-child`, `:not()`, etc)"
        " aren't (yet) implemented.",
    ),
)

_REPEATED_CHILD = r">\s*>"
_WHITESPACE = r"\s+"
_ELEMENT = r"^[a-zA-Z0-9]+"
_ID = r"#[^.:\[]+"
_CLASS = r"\.[^.:\[]+"

_GRAMMAR = r"""
?start: chain

chain: COMPOUND (CHILD? COMPOUND)*
CHILD: ">"
COMPOUND: /[^\s>]+/

WS: /\s+/
%ignore WS
"""


_parser = Lark(_GRAMMAR, parser="lalr", start="start")


class _ToAst(Transformer):
    def COMPOUND(self, t: Token) -> Selector:  # noqa: N802
        return _parse_compound(str(t))

    def chain(self, items: list[Any]) -> SelectorList:
        selectors: list[Selector] = []
        child_next = False
        for it in items:
            if isinstance(it, Token) and it.type == "CHILD":
                child_next = True
                continue
            if not isinstance(it, Selector):
                raise SelectorParseError(f"Unexpected chain item: {it!r}")
            if child_next:
                it = replace(it, traversal=Traversal.CHILD)
                child_next = False
            selectors.append(it)
        return SelectorList(tuple(selectors))


def _parse_compound(text: str) -> Selector:
    """Parse a compound selector that contains no combinators."""
    if text == "*":
        return Selector(kind=SelectorKind.EVERYTHING)

    element = text_scan.match_first(text, _ELEMENT)
    if element is not None:
        text = text_scan.remove(text, _ELEMENT)

    selector_id = None
    raw_id = text_scan.match_first(text, _ID)
    if raw_id is not None:
        selector_id = text_scan.remove(raw_id, r"^#")
        text = text_scan.remove(text, raw_id, fixed=True)

    classes = tuple(
        text_scan.remove(raw, r"^\.") for raw in text_scan.match_all(text, _CLASS)
    )
    return Selector(
        kind=SelectorKind.REGULAR,
        element=element,
        id=selector_id,
        classes=classes,
    )


def _check_supported(text: str) -> None:
    for character, message in _UNSUPPORTED_TOKENS:
        if text_scan.detect(text, character, fixed=True):
            raise UnsupportedTokenError(
                message, character=character, details={"selector": text}
            )


def _parse_child_chain(text: str) -> SelectorList:
    if text_scan.detect(text, r"^>"):
        raise DanglingCombinatorError(
            "Direct children selector, `>`, must not be the first element"
            " in a css selector. Please add more selector information, such as `*`.",
            position="first",
            details={"selector": text},
        )
    if text_scan.detect(text, r">$"):
        raise DanglingCombinatorError(
            "Direct children selector, `>`, must not be the last element"
            " in a css selector. Please add more selector information, such as `*`.",
            position="last",
            details={"selector": text},
        )

    while text_scan.detect(text, _REPEATED_CHILD):
        text = text_scan.replace_all(text, _REPEATED_CHILD, "> * >")

    try:
        tree = _parser.parse(text)
        return _ToAst().transform(tree)
    except UnexpectedInput as e:
        raise SelectorParseError(
            f"Invalid selector: {e}", details={"selector": text}
        ) from e
    except VisitError as e:
        # Lark wraps errors raised inside transformer callbacks.
        if isinstance(e.orig_exc, SelectorParseError):
            raise e.orig_exc from None
        raise


def _coerce_text(selector: Union[str, Sequence[str]]) -> str:
    if isinstance(selector, str):
        return selector
    if isinstance(selector, (list, tuple)) and all(
        isinstance(part, str) for part in selector
    ):
        return " ".join(selector)
    raise SelectorTypeError(
        f"Cannot parse a selector from {type(selector).__name__}",
        value_type=type(selector).__name__,
    )


def parse_selector(
    selector: Union[str, Sequence[str], Selector, SelectorList],
) -> Union[Selector, SelectorList]:
    """
    Parse a CSS selector into a Selector or SelectorList.

    Already parsed values are returned unchanged; a sequence of strings is
    joined with spaces before parsing.

    Raises:
        UnsupportedTokenError: For `,`, `[`, `~`, `+` or `:`
        DanglingCombinatorError: For a leading or trailing `>`
        SelectorTypeError: For values that are not selector text
    """
    if isinstance(selector, (Selector, SelectorList)):
        return selector

    text = text_scan.trim(_coerce_text(selector))
    _check_supported(text)

    result: Union[Selector, SelectorList]
    if text_scan.detect(text, ">", fixed=True):
        result = _parse_child_chain(text)
    elif text_scan.detect(text, _WHITESPACE):
        result = SelectorList(
            tuple(_parse_compound(part) for part in text_scan.split(text, _WHITESPACE))
        )
    else:
        result = _parse_compound(text)

    logger.debug("Parsed selector %r into %s", text, type(result).__name__)
    return result
