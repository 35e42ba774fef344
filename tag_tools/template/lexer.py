"""
Template lexer: split template text into literal and code segments.

Code blocks are delimited by double braces, `{{ ... }}`. The lexer is a
single-pass finite-state machine over characters. Inside a code block it
tracks just enough of the embedded language (quoted strings, backtick
names, `%op%` operators and `#` comments) to avoid closing the block on a
`}}` that belongs to one of them.

The result alternates literal, code, literal, ... and always starts and ends
with a (possibly empty) literal segment, so its length is odd.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional

from ..core.exceptions import TemplateTypeError, UnterminatedCodeBlockError

logger = logging.getLogger(__name__)


class LexerState(str, Enum):
    """States of the template lexer."""

    LITERAL = "literal"
    LITERAL_SAW_BRACE = "literal_saw_brace"
    CODE = "code"
    CODE_SAW_BRACE = "code_saw_brace"
    CODE_STRING_SINGLE = "code_string_single"
    CODE_STRING_SINGLE_ESCAPE = "code_string_single_escape"
    CODE_STRING_DOUBLE = "code_string_double"
    CODE_STRING_DOUBLE_ESCAPE = "code_string_double_escape"
    CODE_BACKTICK = "code_backtick"
    CODE_BACKTICK_ESCAPE = "code_backtick_escape"
    CODE_PERCENT_OPERATOR = "code_percent_operator"
    CODE_COMMENT = "code_comment"
    CODE_COMMENT_SAW_BRACE = "code_comment_saw_brace"


class SegmentKind(str, Enum):
    """Kind of a template segment."""

    LITERAL = "literal"
    CODE = "code"


@dataclass(frozen=True)
class Segment:
    """One literal or code piece of a template."""

    kind: SegmentKind
    text: str
    index: int


_S = LexerState

# state -> (explicit transitions by character, fallback state)
_TRANSITIONS: dict[LexerState, tuple[dict[str, LexerState], LexerState]] = {
    _S.LITERAL: ({"{": _S.LITERAL_SAW_BRACE}, _S.LITERAL),
    _S.LITERAL_SAW_BRACE: ({"{": _S.CODE}, _S.LITERAL),
    _S.CODE: (
        {
            "}": _S.CODE_SAW_BRACE,
            "'": _S.CODE_STRING_SINGLE,
            '"': _S.CODE_STRING_DOUBLE,
            "`": _S.CODE_BACKTICK,
            "%": _S.CODE_PERCENT_OPERATOR,
            "#": _S.CODE_COMMENT,
        },
        _S.CODE,
    ),
    _S.CODE_SAW_BRACE: ({"}": _S.LITERAL}, _S.CODE),
    _S.CODE_STRING_SINGLE: (
        {"\\": _S.CODE_STRING_SINGLE_ESCAPE, "'": _S.CODE},
        _S.CODE_STRING_SINGLE,
    ),
    _S.CODE_STRING_SINGLE_ESCAPE: ({}, _S.CODE_STRING_SINGLE),
    _S.CODE_STRING_DOUBLE: (
        {"\\": _S.CODE_STRING_DOUBLE_ESCAPE, '"': _S.CODE},
        _S.CODE_STRING_DOUBLE,
    ),
    _S.CODE_STRING_DOUBLE_ESCAPE: ({}, _S.CODE_STRING_DOUBLE),
    _S.CODE_BACKTICK: (
        {"\\": _S.CODE_BACKTICK_ESCAPE, "`": _S.CODE},
        _S.CODE_BACKTICK,
    ),
    _S.CODE_BACKTICK_ESCAPE: ({}, _S.CODE_BACKTICK),
    # Anything up to the next `%` is inert, valid operator name or not.
    _S.CODE_PERCENT_OPERATOR: ({"%": _S.CODE}, _S.CODE_PERCENT_OPERATOR),
    _S.CODE_COMMENT: ({"}": _S.CODE_COMMENT_SAW_BRACE, "\n": _S.CODE}, _S.CODE_COMMENT),
    _S.CODE_COMMENT_SAW_BRACE: ({"}": _S.LITERAL}, _S.CODE_COMMENT),
}

# Transitions that complete a segment; the two delimiter characters are not
# part of either neighbouring segment.
_CUTS = frozenset(
    {
        (_S.LITERAL_SAW_BRACE, "{"),
        (_S.CODE_SAW_BRACE, "}"),
        (_S.CODE_COMMENT_SAW_BRACE, "}"),
    }
)

_FINAL_STATES = frozenset({_S.LITERAL, _S.LITERAL_SAW_BRACE})


def transition(state: LexerState, char: str) -> tuple[LexerState, bool]:
    """
    Advance the lexer by one character.

    Returns:
        Tuple of (next_state, cut) where `cut` is True when `char` closes the
        current segment.
    """
    explicit, fallback = _TRANSITIONS[state]
    return explicit.get(char, fallback), (state, char) in _CUTS


def split_template(text: str) -> list[str]:
    """
    Split template text into alternating literal and code segments.

    Even indexes are literal text, odd indexes are code.

    Raises:
        TemplateTypeError: If `text` is not a string
        UnterminatedCodeBlockError: If the text ends inside a code block
    """
    if not isinstance(text, str):
        raise TemplateTypeError(
            f"Template text must be a single string, got {type(text).__name__}",
            value_type=type(text).__name__,
        )

    segments: list[str] = []
    state = LexerState.LITERAL
    start = 0
    opened_at: Optional[int] = None
    for i, char in enumerate(text):
        state, cut = transition(state, char)
        if cut:
            segments.append(text[start : i - 1])
            start = i + 1
            if state == LexerState.CODE:
                opened_at = i - 1

    if state not in _FINAL_STATES:
        raise UnterminatedCodeBlockError(
            'Template did not end in literal state (missing closing "}}").',
            state=state.value,
            position=opened_at,
        )

    segments.append(text[start:])
    logger.debug(
        "Split template of %d chars into %d segments", len(text), len(segments)
    )
    return segments


def iter_segments(text: str) -> Iterator[Segment]:
    """Yield typed Segment records for `text`."""
    for index, piece in enumerate(split_template(text)):
        kind = SegmentKind.CODE if index % 2 else SegmentKind.LITERAL
        yield Segment(kind=kind, text=piece, index=index)
