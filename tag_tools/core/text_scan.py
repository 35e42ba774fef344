"""
Small regex helpers for scanning selector text.

`fixed=True` treats the pattern as a literal string, which skips the regex
engine entirely for plain substring checks.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Optional

_LEADING_WS = r"^\s+"
_TRAILING_WS = r"\s+$"


@lru_cache(maxsize=256)
def _compile(pattern: str) -> re.Pattern[str]:
    return re.compile(pattern)


def detect(text: str, pattern: str, fixed: bool = False) -> bool:
    """Return True if `pattern` occurs anywhere in `text`."""
    if fixed:
        return pattern in text
    return _compile(pattern).search(text) is not None


def match_first(text: str, pattern: str, fixed: bool = False) -> Optional[str]:
    """Return the first match of `pattern` in `text`, or None."""
    if fixed:
        return pattern if pattern in text else None
    match = _compile(pattern).search(text)
    if match is None:
        return None
    return match.group(0)


def match_all(text: str, pattern: str, fixed: bool = False) -> list[str]:
    """Return all non-overlapping matches of `pattern` in `text`."""
    if fixed:
        return [pattern] * text.count(pattern) if pattern else []
    return [m.group(0) for m in _compile(pattern).finditer(text)]


def replace(text: str, pattern: str, replacement: str, fixed: bool = False) -> str:
    """Replace the first occurrence of `pattern`."""
    if fixed:
        return text.replace(pattern, replacement, 1)
    return _compile(pattern).sub(replacement, text, count=1)


def replace_all(
    text: str, pattern: str, replacement: str, fixed: bool = False
) -> str:
    """Replace every occurrence of `pattern`."""
    if fixed:
        return text.replace(pattern, replacement)
    return _compile(pattern).sub(replacement, text)


def remove(text: str, pattern: str, fixed: bool = False) -> str:
    return replace(text, pattern, "", fixed=fixed)


def remove_all(text: str, pattern: str, fixed: bool = False) -> str:
    return replace_all(text, pattern, "", fixed=fixed)


def trim(text: str, side: str = "both") -> str:
    """
    Strip whitespace runs from one or both ends of `text`.

    Args:
        text: Text to trim
        side: "both", "left" or "right"

    Raises:
        ValueError: If `side` is not recognised
    """
    if side not in ("both", "left", "right"):
        raise ValueError(f"side must be 'both', 'left' or 'right', got: {side!r}")
    if side in ("both", "left"):
        text = remove_all(text, _LEADING_WS)
    if side in ("both", "right"):
        text = remove_all(text, _TRAILING_WS)
    return text


def split(text: str, pattern: str, fixed: bool = False) -> list[str]:
    """Split `text` on every occurrence of `pattern`."""
    if fixed:
        return text.split(pattern)
    return _compile(pattern).split(text)
