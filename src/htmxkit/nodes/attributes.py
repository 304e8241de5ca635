"""Attribute value object and generic HTML attribute helpers.

The htmx-specific helpers live in :mod:`htmxkit.attributes`; this module
holds the plain HTML ones (``id``, ``class``, ``style``, boolean flags, ...)
that any page needs alongside them.

"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from htmxkit.utils.html import validate_attribute_name


@dataclass(frozen=True, slots=True)
class Attribute:
    """One attribute name/value pair.

    ``value=None`` marks a boolean attribute: it is rendered as the bare key
    (``required``, ``defer``) and its presence alone means true.

    Raises:
        InvalidNameError: If ``key`` is empty or not a valid HTML attribute name.
        TypeError: If ``value`` is neither a string nor None.
    """

    key: str
    value: str | None = None

    def __post_init__(self) -> None:
        validate_attribute_name(self.key)
        if self.value is not None and not isinstance(self.value, str):
            raise TypeError(
                f"Attribute {self.key!r} value must be str or None, "
                f"got {type(self.value).__name__}"
            )

    @property
    def is_boolean(self) -> bool:
        return self.value is None


def attr(key: str, value: str) -> Attribute:
    """Arbitrary attribute (``data-*``, ``aria-*``, anything without a helper)."""
    return Attribute(key, value)


def flag(key: str) -> Attribute:
    """Boolean attribute rendered without a value."""
    return Attribute(key, None)


def id_(value: str) -> Attribute:
    return Attribute("id", value)


def class_(*names: str) -> Attribute:
    """``class`` attribute from one or more class names; empty names are skipped.

    Example:
        >>> class_("btn", "btn-danger").value
        'btn btn-danger'
    """
    return Attribute("class", " ".join(n for n in names if n))


def style(css: str | Mapping[str, str]) -> Attribute:
    """Inline ``style`` attribute.

    Accepts a ready-made declaration string, or a mapping of property to value
    which is joined in insertion order.

    Example:
        >>> style({"display": "inline-flex", "align-items": "center"}).value
        'display: inline-flex; align-items: center'
    """
    if isinstance(css, Mapping):
        css = "; ".join(f"{prop}: {value}" for prop, value in css.items())
    return Attribute("style", css)


def lang(value: str) -> Attribute:
    return Attribute("lang", value)


def charset(value: str) -> Attribute:
    return Attribute("charset", value)


def name(value: str) -> Attribute:
    return Attribute("name", value)


def content(value: str) -> Attribute:
    return Attribute("content", value)


def type_(value: str) -> Attribute:
    return Attribute("type", value)


def value(value: str) -> Attribute:
    return Attribute("value", value)


def placeholder(value: str) -> Attribute:
    return Attribute("placeholder", value)


def href(url: str) -> Attribute:
    return Attribute("href", url)


def src(url: str) -> Attribute:
    return Attribute("src", url)


def rel(value: str) -> Attribute:
    return Attribute("rel", value)


def method(value: str) -> Attribute:
    return Attribute("method", value)


def action(url: str) -> Attribute:
    return Attribute("action", url)


def for_(element_id: str) -> Attribute:
    return Attribute("for", element_id)


def required() -> Attribute:
    return flag("required")


def defer() -> Attribute:
    return flag("defer")


def disabled() -> Attribute:
    return flag("disabled")


def checked() -> Attribute:
    return flag("checked")


def autofocus() -> Attribute:
    return flag("autofocus")


__all__ = [
    "Attribute",
    "action",
    "attr",
    "autofocus",
    "charset",
    "checked",
    "class_",
    "content",
    "defer",
    "disabled",
    "flag",
    "for_",
    "href",
    "id_",
    "lang",
    "method",
    "name",
    "placeholder",
    "rel",
    "required",
    "src",
    "style",
    "type_",
    "value",
]
