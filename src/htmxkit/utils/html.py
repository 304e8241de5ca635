"""HTML escaping and name rules shared by the node model and the renderer.

Escaping uses a single ``str.translate()`` pass with a precomputed table,
which is the fastest pure-Python approach for short strings and avoids the
chained ``str.replace()`` calls of ``html.escape``.

Thread-Safety:
All tables are built at import time and never mutated.

"""

from __future__ import annotations

import re
from typing import Any, Protocol, runtime_checkable

from htmxkit.exceptions import InvalidNameError

# Text and attribute values share one table: escaping quotes in text is
# harmless and lets a single helper serve both contexts.
_ESCAPE_TABLE = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&#39;",
    }
)

# Elements that never have content or a closing tag (WHATWG "void elements").
VOID_ELEMENTS: frozenset[str] = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)

# WHATWG: attribute names exclude whitespace, controls, quotes, '>', '/', '='.
_INVALID_ATTRIBUTE_NAME_RE = re.compile(r"[\s\x00-\x1f\x7f\"'>/=<]")
# Tag names additionally must start with an ASCII letter.
_TAG_NAME_RE = re.compile(r"[A-Za-z][A-Za-z0-9\-_.:]*")


@runtime_checkable
class HasHTML(Protocol):
    """Objects that render themselves as trusted markup (``__html__`` protocol)."""

    def __html__(self) -> str: ...


class Markup(str):
    """A string that is already safe HTML and must not be escaped again.

    Compatible with the ``__html__`` protocol used by markupsafe and Jinja2,
    so markup produced elsewhere can be dropped into a node tree.

    Example:
        >>> div(Markup("<b>bold</b>"))  # emitted verbatim
    """

    __slots__ = ()

    def __new__(cls, value: Any = "") -> Markup:
        if isinstance(value, HasHTML) and not isinstance(value, str):
            value = value.__html__()
        return super().__new__(cls, value)

    def __html__(self) -> str:
        return str(self)

    def __repr__(self) -> str:
        return f"Markup({super().__repr__()})"


def html_escape(value: Any) -> str:
    """Escape text for use in HTML element content.

    Values implementing ``__html__`` are returned as their markup unchanged.

    Example:
        >>> html_escape('<a href="x">')
        '&lt;a href=&quot;x&quot;&gt;'
    """
    if isinstance(value, HasHTML):
        return value.__html__()
    return str(value).translate(_ESCAPE_TABLE)


def escape(value: str) -> str:
    """Escape text content or a double-quoted attribute value.

    Unlike html_escape(), ``__html__`` is not honoured: the argument is always
    treated as plain text.
    """
    return str(value).translate(_ESCAPE_TABLE)


def is_void_element(tag: str) -> bool:
    """Return True if *tag* is an HTML void element (case-insensitive)."""
    return tag.lower() in VOID_ELEMENTS


def validate_tag_name(tag: str) -> str:
    """Return *tag* unchanged, or raise InvalidNameError."""
    if not isinstance(tag, str) or not _TAG_NAME_RE.fullmatch(tag):
        raise InvalidNameError("tag", str(tag))
    return tag


def validate_attribute_name(key: str) -> str:
    """Return *key* unchanged, or raise InvalidNameError."""
    if not isinstance(key, str) or not key or _INVALID_ATTRIBUTE_NAME_RE.search(key):
        raise InvalidNameError("attribute", str(key))
    return key


__all__ = [
    "HasHTML",
    "Markup",
    "VOID_ELEMENTS",
    "escape",
    "html_escape",
    "is_void_element",
    "validate_attribute_name",
    "validate_tag_name",
]
