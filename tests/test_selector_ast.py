"""
Tests for selector AST models, coercion helpers and formatting.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

import dataclasses

import pytest

from tag_tools.core.exceptions import SelectorTypeError
from tag_tools.selector import (
    Selector,
    SelectorKind,
    SelectorList,
    Traversal,
    as_selector_list,
    describe_selector,
    format_selector,
    is_selector,
    is_selector_list,
    parse_selector,
)


class TestSelector:
    def test_defaults(self):
        s = Selector()
        assert s.kind == SelectorKind.REGULAR
        assert s.element is None
        assert s.id is None
        assert s.classes == ()
        assert s.traversal == Traversal.DESCENDANT

    def test_is_frozen(self):
        s = Selector(element="div")
        with pytest.raises(dataclasses.FrozenInstanceError):
            s.element = "span"  # type: ignore[misc]

    def test_classes_become_tuple(self):
        s = Selector(classes=["a", "b"])
        assert s.classes == ("a", "b")

    def test_everything_cannot_carry_parts(self):
        with pytest.raises(SelectorTypeError):
            Selector(kind=SelectorKind.EVERYTHING, element="div")

    def test_properties(self):
        s = Selector(kind=SelectorKind.EVERYTHING, traversal=Traversal.CHILD)
        assert s.is_everything
        assert s.is_child

    def test_to_dict(self):
        s = Selector(element="p", id="x", classes=("a",), traversal=Traversal.CHILD)
        assert s.to_dict() == {
            "kind": "regular",
            "element": "p",
            "id": "x",
            "classes": ["a"],
            "traversal": "child",
        }

    def test_str_is_canonical_form(self):
        assert str(Selector(element="p", classes=("a",))) == "p.a"


class TestSelectorList:
    def test_flattens_nested_lists(self):
        a, b, c = Selector(element="a"), Selector(element="b"), Selector(element="c")
        nested = SelectorList((a, SelectorList((b, c))))
        assert nested.items == (a, b, c)
        assert len(nested) == 3
        assert list(nested) == [a, b, c]
        assert nested[1] is b

    def test_empty_list_is_rejected(self):
        with pytest.raises(SelectorTypeError, match="cannot be empty"):
            SelectorList(())

    def test_non_selector_member_is_rejected(self):
        with pytest.raises(SelectorTypeError):
            SelectorList((Selector(), "div"))

    def test_equality(self):
        assert parse_selector("a > b") == SelectorList(
            (Selector(element="a"), Selector(element="b", traversal=Traversal.CHILD))
        )

    def test_to_dict(self):
        data = parse_selector("a b").to_dict()
        assert [s["element"] for s in data["selectors"]] == ["a", "b"]

    def test_str_is_canonical_form(self):
        assert str(parse_selector("a>b")) == "a > b"


class TestPredicates:
    def test_is_selector(self):
        assert is_selector(parse_selector("div"))
        assert not is_selector(parse_selector("a b"))
        assert not is_selector("div")

    def test_is_selector_list(self):
        assert is_selector_list(parse_selector("a b"))
        assert not is_selector_list(parse_selector("div"))
        assert not is_selector_list(["a"])


class TestAsSelectorList:
    def test_list_passes_through(self):
        chain = parse_selector("a b")
        assert as_selector_list(chain) is chain

    def test_string_is_parsed(self):
        result = as_selector_list("div")
        assert isinstance(result, SelectorList)
        assert result.items == (Selector(element="div"),)

    def test_string_chain_is_parsed(self):
        assert format_selector(as_selector_list("a>b")) == "a > b"

    def test_selector_is_wrapped(self):
        s = Selector(element="p")
        assert as_selector_list(s).items == (s,)

    def test_sequence_is_flattened(self):
        result = as_selector_list([Selector(element="p"), parse_selector("a > b")])
        assert format_selector(result) == "p a > b"

    def test_string_errors_propagate(self):
        from tag_tools.core.exceptions import DanglingCombinatorError

        with pytest.raises(DanglingCombinatorError, match="first element"):
            as_selector_list("> div")
        with pytest.raises(DanglingCombinatorError, match="last element"):
            as_selector_list("div >")

    def test_unknown_type(self):
        with pytest.raises(SelectorTypeError, match="Do not know how to convert"):
            as_selector_list(3.5)

    def test_sequence_with_non_selectors(self):
        with pytest.raises(SelectorTypeError):
            as_selector_list([Selector(), 1])


class TestFormatter:
    def test_child_prefix(self):
        s = Selector(element="span", traversal=Traversal.CHILD)
        assert format_selector(s) == "> span"

    def test_everything(self):
        assert format_selector(Selector(kind=SelectorKind.EVERYTHING)) == "*"

    def test_order_is_element_id_classes(self):
        s = Selector(element="div", id="main", classes=("b", "a"))
        assert format_selector(s) == "div#main.b.a"

    def test_list_joined_with_space(self):
        assert format_selector(parse_selector("a  b\tc")) == "a b c"

    def test_rejects_other_values(self):
        with pytest.raises(SelectorTypeError):
            format_selector("div")

    def test_describe_selector(self):
        assert describe_selector(parse_selector("div")) == "// css selector\ndiv"
        assert (
            describe_selector(parse_selector("a>b"))
            == "// css selector list\na > b"
        )
