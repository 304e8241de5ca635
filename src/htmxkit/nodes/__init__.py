"""htmxkit node model: attributes, elements, text and the tag builders.

A tree is built by calling builders with a mix of attributes, child nodes
and text, then handed to :func:`htmxkit.render.render`. Every node is a
frozen dataclass, so finished trees can be shared across threads.

"""

from htmxkit.nodes.attributes import (
    Attribute,
    action,
    attr,
    autofocus,
    charset,
    checked,
    class_,
    content,
    defer,
    disabled,
    flag,
    for_,
    href,
    id_,
    lang,
    method,
    name,
    placeholder,
    rel,
    required,
    src,
    style,
    type_,
    value,
)
from htmxkit.nodes.base import Node
from htmxkit.nodes.elements import (
    Element,
    Raw,
    TagBuilder,
    Text,
    element,
    partition,
    raw,
    text,
)

__all__ = [
    "Attribute",
    "Element",
    "Node",
    "Raw",
    "TagBuilder",
    "Text",
    "action",
    "attr",
    "autofocus",
    "charset",
    "checked",
    "class_",
    "content",
    "defer",
    "disabled",
    "element",
    "flag",
    "for_",
    "href",
    "id_",
    "lang",
    "method",
    "name",
    "partition",
    "placeholder",
    "raw",
    "rel",
    "required",
    "src",
    "style",
    "text",
    "type_",
    "value",
]
