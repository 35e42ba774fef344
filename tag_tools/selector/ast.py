"""
Selector AST models.

These data structures represent a parsed CSS selector. A tag-query engine
walks tags by `element`, `id` and `classes`, and uses `traversal` to decide
whether a selector applies to any descendant or only to direct children of
the tag matched by the previous selector in a list.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, Optional, Sequence, Union

from ..core.exceptions import SelectorTypeError


class SelectorKind(str, Enum):
    """What a single selector matches."""

    EVERYTHING = "everything"
    REGULAR = "regular"


class Traversal(str, Enum):
    """Relation of a selector to the previous selector in a list."""

    DESCENDANT = "descendant"
    CHILD = "child"


@dataclass(frozen=True)
class Selector:
    """
    A single compound selector such as `div#main.note.wide` or `*`.

    Only the bare `*` selector has kind EVERYTHING; `*.note` is a REGULAR
    selector without an element.
    """

    kind: SelectorKind = SelectorKind.REGULAR
    element: Optional[str] = None
    id: Optional[str] = None
    classes: tuple[str, ...] = ()
    traversal: Traversal = Traversal.DESCENDANT

    def __post_init__(self) -> None:
        if not isinstance(self.classes, tuple):
            object.__setattr__(self, "classes", tuple(self.classes))
        if self.kind == SelectorKind.EVERYTHING and (
            self.element is not None or self.id is not None or self.classes
        ):
            raise SelectorTypeError(
                "An `everything` selector cannot carry element, id or classes"
            )

    @property
    def is_everything(self) -> bool:
        return self.kind == SelectorKind.EVERYTHING

    @property
    def is_child(self) -> bool:
        return self.traversal == Traversal.CHILD

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "element": self.element,
            "id": self.id,
            "classes": list(self.classes),
            "traversal": self.traversal.value,
        }

    def __str__(self) -> str:
        from .formatter import format_selector

        return format_selector(self)


@dataclass(frozen=True)
class SelectorList:
    """
    An ordered chain of selectors, e.g. `div > span.x`.

    Nested lists are flattened on construction; the chain is never empty.
    """

    items: tuple[Selector, ...] = field(default=())

    def __post_init__(self) -> None:
        flat: list[Selector] = []
        for item in self.items:
            if isinstance(item, SelectorList):
                flat.extend(item.items)
            elif isinstance(item, Selector):
                flat.append(item)
            else:
                raise SelectorTypeError(
                    "Can only build a selector list from selectors",
                    value_type=type(item).__name__,
                )
        if not flat:
            raise SelectorTypeError("A selector list cannot be empty")
        object.__setattr__(self, "items", tuple(flat))

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Selector]:
        return iter(self.items)

    def __getitem__(self, index: int) -> Selector:
        return self.items[index]

    def to_dict(self) -> dict[str, Any]:
        return {"selectors": [s.to_dict() for s in self.items]}

    def __str__(self) -> str:
        from .formatter import format_selector

        return format_selector(self)


SelectorLike = Union[Selector, SelectorList]


def is_selector(value: object) -> bool:
    """Return True if `value` is a single Selector."""
    return isinstance(value, Selector)


def is_selector_list(value: object) -> bool:
    """Return True if `value` is a SelectorList."""
    return isinstance(value, SelectorList)


def as_selector_list(
    value: Union[str, SelectorLike, Sequence[SelectorLike]],
) -> SelectorList:
    """
    Coerce `value` into a SelectorList.

    Strings are parsed first, single selectors are wrapped, and sequences of
    selectors (or selector lists) are flattened in order.

    Raises:
        SelectorTypeError: If `value` (or one of its members) is not a selector
        SelectorParseError: If a string value fails to parse
    """
    if isinstance(value, SelectorList):
        return value
    if isinstance(value, str):
        from .parser import parse_selector

        value = parse_selector(value)
        if isinstance(value, SelectorList):
            return value
    if isinstance(value, Selector):
        return SelectorList((value,))
    if isinstance(value, (list, tuple)):
        return SelectorList(tuple(value))
    raise SelectorTypeError(
        f"Do not know how to convert {type(value).__name__} into a selector list",
        value_type=type(value).__name__,
    )
