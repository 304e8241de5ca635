"""Tree-to-string renderer.

Walks a finished tree depth-first, pre-order, appending fragments to a
single list and joining once at the end (StringBuilder pattern: O(n) output
instead of O(n²) string concatenation).

Rules:
- Attributes are emitted in insertion order as `` key="escaped-value"``;
  boolean attributes (value None) as the bare `` key``.
- Void elements (``br``, ``input``, ``meta``, ...) get no closing tag, and any
  children attached to them are skipped rather than rejected.
- ``Text`` is escaped, ``Raw`` is emitted verbatim.
- No nesting validation: a ``div`` inside a ``span`` renders as written.

Thread-Safety:
Rendering reads the tree and writes only to a local buffer, so the same
tree may be rendered concurrently from many threads.

"""

from __future__ import annotations

from collections.abc import Callable

from htmxkit.nodes.base import Node
from htmxkit.nodes.elements import Element, Raw, Text
from htmxkit.utils.html import escape, is_void_element

DOCTYPE = "<!DOCTYPE html>\n"


def render(node: Node) -> str:
    """Render *node* and its descendants to an HTML string.

    Example:
        >>> from htmxkit import div, hx_get, hx_trigger
        >>> render(div(hx_get("/api/todos"), hx_trigger("load"), "Loading..."))
        '<div hx-get="/api/todos" hx-trigger="load">Loading...</div>'
    """
    buf: list[str] = []
    _render_into(node, buf.append)
    return "".join(buf)


def render_document(node: Node) -> str:
    """Render a full page, prefixed with the HTML5 doctype line."""
    return DOCTYPE + render(node)


def _render_into(node: Node, append: Callable[[str], None]) -> None:
    if isinstance(node, Text):
        append(escape(node.content))
    elif isinstance(node, Element):
        _render_element(node, append)
    elif isinstance(node, Raw):
        append(node.html)
    else:
        raise TypeError(f"Cannot render {type(node).__name__}")


def _render_element(node: Element, append: Callable[[str], None]) -> None:
    tag = node.tag
    append("<")
    append(tag)
    for item in node.attributes:
        append(" ")
        append(item.key)
        if item.value is not None:
            append('="')
            append(escape(item.value))
            append('"')
    append(">")

    if is_void_element(tag):
        return

    for child in node.children:
        _render_into(child, append)
    append("</")
    append(tag)
    append(">")


__all__ = ["DOCTYPE", "render", "render_document"]
