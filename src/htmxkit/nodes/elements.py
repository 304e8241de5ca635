"""Element, text and raw-markup nodes, plus the argument partitioning builders.

Builders take a heterogeneous argument list and sort each argument into
either the attribute set or the child list:

=====================  ===============================================
Argument               Becomes
=====================  ===============================================
``Attribute``          attribute (last occurrence of a key wins)
``Node``               child, in the position it was passed
``__html__`` objects   ``Raw`` child (``Markup``, other template output)
``str``                ``Text`` child (escaped on render)
list/tuple/generator   flattened in order, then sorted as above
anything else          ``UnsupportedArgumentError``
=====================  ===============================================

Duplicate keys keep the position of their first occurrence and the value of
their last, so ``div(class_("a"), id_("x"), class_("b"))`` renders as
``<div class="b" id="x"></div>``.

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from types import GeneratorType
from typing import Any

from htmxkit.exceptions import UnsupportedArgumentError
from htmxkit.nodes.attributes import Attribute
from htmxkit.nodes.base import Node
from htmxkit.utils.html import HasHTML, is_void_element, validate_tag_name

_SEQUENCE_TYPES = (list, tuple, GeneratorType)


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Text content, HTML-escaped when rendered."""

    content: str

    def __post_init__(self) -> None:
        if not isinstance(self.content, str):
            raise TypeError(f"Text content must be str, got {type(self.content).__name__}")


@dataclass(frozen=True, slots=True)
class Raw(Node):
    """Trusted markup emitted verbatim. Never wrap user input in Raw."""

    html: str

    def __post_init__(self) -> None:
        if not isinstance(self.html, str):
            raise TypeError(f"Raw html must be str, got {type(self.html).__name__}")


@dataclass(frozen=True, slots=True)
class Element(Node):
    """An HTML element with unique-keyed attributes and ordered children.

    Constructing an Element directly normalizes its fields the same way the
    builders do: sequences become tuples and duplicate attribute keys collapse
    to the last value. Prefer :func:`element` or a tag builder for mixed
    argument lists.

    Raises:
        InvalidNameError: If ``tag`` is not a valid tag name.
        UnsupportedArgumentError: If ``attributes`` holds a non-Attribute or
            ``children`` holds a non-Node.
    """

    tag: str
    attributes: tuple[Attribute, ...] = ()
    children: tuple[Node, ...] = ()

    def __post_init__(self) -> None:
        validate_tag_name(self.tag)
        merged: dict[str, Attribute] = {}
        for position, item in enumerate(self.attributes, start=1):
            if not isinstance(item, Attribute):
                raise UnsupportedArgumentError(self.tag, position, item)
            merged[item.key] = item
        children = tuple(self.children)
        for position, child in enumerate(children, start=1):
            if not isinstance(child, Node):
                raise UnsupportedArgumentError(self.tag, position, child)
        object.__setattr__(self, "attributes", tuple(merged.values()))
        object.__setattr__(self, "children", children)

    @property
    def is_void(self) -> bool:
        return is_void_element(self.tag)

    def get(self, key: str, default: str | None = None) -> str | None:
        """Value of attribute *key*, or *default* if absent or boolean."""
        for item in self.attributes:
            if item.key == key:
                return item.value if item.value is not None else default
        return default

    def has(self, key: str) -> bool:
        return any(item.key == key for item in self.attributes)

    def with_children(self, *args: Any) -> Element:
        """Return a copy with *args* appended (attributes in *args* merge in)."""
        return element(self.tag, *self.attributes, *self.children, *args)

    def with_attributes(self, *attrs: Attribute) -> Element:
        """Return a copy with *attrs* merged over the existing attributes."""
        for position, item in enumerate(attrs, start=1):
            if not isinstance(item, Attribute):
                raise UnsupportedArgumentError(self.tag, position, item)
        return Element(self.tag, (*self.attributes, *attrs), self.children)

    def __html__(self) -> str:
        from htmxkit.render import render

        return render(self)


def _flatten(arg: Any) -> Iterator[Any]:
    if isinstance(arg, _SEQUENCE_TYPES):
        for item in arg:
            yield from _flatten(item)
    else:
        yield arg


def partition(tag: str, args: Iterable[Any]) -> tuple[tuple[Attribute, ...], tuple[Node, ...]]:
    """Split builder arguments into (attributes, children).

    Positions in error messages are 1-based and refer to the top-level
    argument, even when the offending value sat inside a nested list.
    """
    attrs: dict[str, Attribute] = {}
    children: list[Node] = []
    for position, arg in enumerate(args, start=1):
        for item in _flatten(arg):
            if isinstance(item, Attribute):
                attrs[item.key] = item
            elif isinstance(item, Node):
                children.append(item)
            elif isinstance(item, HasHTML):
                children.append(Raw(item.__html__()))
            elif isinstance(item, str):
                children.append(Text(item))
            else:
                raise UnsupportedArgumentError(tag, position, item)
    return tuple(attrs.values()), tuple(children)


def element(tag: str, *args: Any) -> Element:
    """Build an Element from a tag name and a mixed argument list.

    Example:
        >>> from htmxkit import hx_get, hx_trigger, render
        >>> render(element("div", hx_get("/api/todos"), hx_trigger("load"), "Loading..."))
        '<div hx-get="/api/todos" hx-trigger="load">Loading...</div>'
    """
    validate_tag_name(tag)
    attributes, children = partition(tag, args)
    return Element(tag, attributes, children)


def text(content: str) -> Text:
    return Text(content)


def raw(html: str) -> Raw:
    return Raw(html)


class TagBuilder:
    """Callable that builds Elements of one fixed tag.

    All builders in :mod:`htmxkit.nodes.tags` are TagBuilder instances; make
    more for custom elements with ``TagBuilder("my-widget")``.
    """

    __slots__ = ("tag",)

    def __init__(self, tag: str):
        self.tag = validate_tag_name(tag)

    def __call__(self, *args: Any) -> Element:
        attributes, children = partition(self.tag, args)
        return Element(self.tag, attributes, children)

    @property
    def is_void(self) -> bool:
        return is_void_element(self.tag)

    def __repr__(self) -> str:
        return f"TagBuilder({self.tag!r})"


__all__ = [
    "Element",
    "Raw",
    "TagBuilder",
    "Text",
    "element",
    "partition",
    "raw",
    "text",
]
