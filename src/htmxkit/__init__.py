"""htmxkit: typed htmx attributes and a small immutable HTML tree for Python.

Build pages and fragments from plain function calls, with htmx behaviour
attached through typed helpers instead of hand-written attribute strings.

Quickstart:
    >>> from htmxkit import div, hx_get, hx_trigger, render
    >>> render(div(hx_get("/api/todos"), hx_trigger("load"), "Loading..."))
    '<div hx-get="/api/todos" hx-trigger="load">Loading...</div>'

Architecture:
Attribute helpers → Tag builders → immutable Element tree → render() → str

Pieces:
1. **Attribute registry** (``htmxkit.attributes``): one helper per htmx
   behaviour, all backed by a single catalogue of wire keys and value rules
2. **Node model** (``htmxkit.nodes``): frozen Element/Text/Raw nodes; builders
   accept attributes, nodes and text in any order
3. **Renderer** (``htmxkit.render``): escaping, void elements, boolean
   attributes; never mutates the tree
4. **Assets** (``htmxkit.assets``): the minified htmx build, bundled so apps
   can serve it without a CDN

Thread-Safety:
Attributes, nodes and the bundled asset are immutable once built, and
rendering writes only to a local buffer. Trees may be built and rendered
from any number of threads without locking.

Argument rules:
- Duplicate attribute keys: the last value wins (at the first key's position)
- Unrecognized argument types raise ``UnsupportedArgumentError`` at build time
- Attribute values are never validated; selectors and URLs pass through as-is

"""

from htmxkit.assets import Asset, htmx_asset, javascript
from htmxkit.attributes import (
    HTMX_ATTRIBUTES,
    AttributeSpec,
    ValueRule,
    hx_boost,
    hx_confirm,
    hx_delete,
    hx_disabled_elt,
    hx_disinherit,
    hx_encoding,
    hx_ext,
    hx_get,
    hx_headers,
    hx_include,
    hx_indicator,
    hx_params,
    hx_patch,
    hx_post,
    hx_preserve,
    hx_prompt,
    hx_push_url,
    hx_put,
    hx_replace_url,
    hx_select,
    hx_select_oob,
    hx_sse,
    hx_swap,
    hx_swap_oob,
    hx_sync,
    hx_target,
    hx_trigger,
    hx_validate,
    hx_vals,
    hx_ws,
    make,
)
from htmxkit.exceptions import (
    AssetNotFoundError,
    BuildError,
    ErrorCode,
    HtmxKitError,
    InvalidNameError,
    UnknownAttributeError,
    UnsupportedArgumentError,
)
from htmxkit.nodes import (
    Attribute,
    Element,
    Node,
    Raw,
    TagBuilder,
    Text,
    attr,
    charset,
    class_,
    content,
    defer,
    disabled,
    element,
    flag,
    href,
    id_,
    lang,
    name,
    placeholder,
    raw,
    required,
    src,
    style,
    text,
    type_,
    value,
)
from htmxkit.nodes.tags import (
    a,
    article,
    aside,
    audio,
    b,
    base,
    blockquote,
    body,
    br,
    button,
    caption,
    code,
    dd,
    div,
    dl,
    dt,
    em,
    fieldset,
    footer,
    form,
    h1,
    h2,
    h3,
    h4,
    h5,
    h6,
    head,
    header,
    hr,
    html,
    i,
    iframe,
    img,
    input_,
    label,
    legend,
    li,
    link,
    main,
    meta,
    nav,
    noscript,
    ol,
    option,
    p,
    pre,
    script,
    section,
    select,
    small,
    source,
    span,
    strong,
    style_tag,
    table,
    tbody,
    td,
    template,
    textarea,
    tfoot,
    th,
    thead,
    title,
    tr,
    ul,
    video,
)
from htmxkit.render import render, render_document
from htmxkit.request import HtmxDetails
from htmxkit.utils.html import Markup, html_escape

__version__ = "0.1.0"

__all__ = [
    "Asset",
    "AssetNotFoundError",
    "Attribute",
    "AttributeSpec",
    "BuildError",
    "Element",
    "ErrorCode",
    "HTMX_ATTRIBUTES",
    "HtmxDetails",
    "HtmxKitError",
    "InvalidNameError",
    "Markup",
    "Node",
    "Raw",
    "TagBuilder",
    "Text",
    "UnknownAttributeError",
    "UnsupportedArgumentError",
    "ValueRule",
    "__version__",
    "a",
    "article",
    "aside",
    "attr",
    "audio",
    "b",
    "base",
    "blockquote",
    "body",
    "br",
    "button",
    "caption",
    "charset",
    "class_",
    "code",
    "content",
    "dd",
    "defer",
    "disabled",
    "div",
    "dl",
    "dt",
    "element",
    "em",
    "fieldset",
    "flag",
    "footer",
    "form",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    "head",
    "header",
    "hr",
    "href",
    "html",
    "html_escape",
    "htmx_asset",
    "hx_boost",
    "hx_confirm",
    "hx_delete",
    "hx_disabled_elt",
    "hx_disinherit",
    "hx_encoding",
    "hx_ext",
    "hx_get",
    "hx_headers",
    "hx_include",
    "hx_indicator",
    "hx_params",
    "hx_patch",
    "hx_post",
    "hx_preserve",
    "hx_prompt",
    "hx_push_url",
    "hx_put",
    "hx_replace_url",
    "hx_select",
    "hx_select_oob",
    "hx_sse",
    "hx_swap",
    "hx_swap_oob",
    "hx_sync",
    "hx_target",
    "hx_trigger",
    "hx_validate",
    "hx_vals",
    "hx_ws",
    "i",
    "id_",
    "iframe",
    "img",
    "input_",
    "javascript",
    "label",
    "lang",
    "legend",
    "li",
    "link",
    "main",
    "make",
    "meta",
    "name",
    "nav",
    "noscript",
    "ol",
    "option",
    "p",
    "placeholder",
    "pre",
    "raw",
    "render",
    "render_document",
    "required",
    "script",
    "section",
    "select",
    "small",
    "source",
    "span",
    "src",
    "strong",
    "style",
    "style_tag",
    "table",
    "tbody",
    "td",
    "template",
    "text",
    "textarea",
    "tfoot",
    "th",
    "thead",
    "title",
    "tr",
    "type_",
    "ul",
    "value",
    "video",
]
