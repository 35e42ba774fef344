"""
Tests for text scanning helpers.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

import pytest

from tag_tools.core import text_scan


def test_trim_both_sides() -> None:
    assert text_scan.trim("  \t div span \n") == "div span"


def test_trim_one_side() -> None:
    assert text_scan.trim("  a  ", side="left") == "a  "
    assert text_scan.trim("  a  ", side="right") == "  a"


def test_trim_rejects_unknown_side() -> None:
    with pytest.raises(ValueError):
        text_scan.trim("a", side="middle")


def test_detect_regex_and_fixed() -> None:
    assert text_scan.detect("a > b", r">\s*b")
    assert not text_scan.detect("a b", r">")
    # `*` is a literal when fixed
    assert text_scan.detect("a * b", "*", fixed=True)
    assert not text_scan.detect("a b", "*", fixed=True)


def test_match_first() -> None:
    assert text_scan.match_first("h1#x.y", r"#[^.]+") == "#x"
    assert text_scan.match_first("h1", r"#[^.]+") is None
    assert text_scan.match_first("a.b", ".", fixed=True) == "."


def test_match_all() -> None:
    assert text_scan.match_all(".a.b-c.d", r"\.[^.]+") == [".a", ".b-c", ".d"]
    assert text_scan.match_all("div", r"\.[^.]+") == []
    assert text_scan.match_all("a.b.c", ".", fixed=True) == [".", "."]


def test_replace_first_only() -> None:
    assert text_scan.replace("a-b-c", r"-", "+") == "a+b-c"
    assert text_scan.replace("a.b.c", ".", "#", fixed=True) == "a#b.c"


def test_replace_all() -> None:
    assert text_scan.replace_all("a>>b", r">\s*>", "> * >") == "a> * >b"
    assert text_scan.replace_all("a.b.c", ".", "", fixed=True) == "abc"


def test_remove() -> None:
    assert text_scan.remove("#id", r"^#") == "id"
    assert text_scan.remove_all("  a  b ", r"\s") == "ab"


def test_split() -> None:
    assert text_scan.split("a  b\tc", r"\s+") == ["a", "b", "c"]
    assert text_scan.split("a>b", ">", fixed=True) == ["a", "b"]
