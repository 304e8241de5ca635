"""Builders for the HTML elements pages commonly need.

Each name is a :class:`~htmxkit.nodes.elements.TagBuilder`. Names that clash
with Python builtins carry a trailing underscore (``input_``), and the
``<style>`` builder is ``style_tag`` so ``style`` stays the attribute helper.

Example:
    >>> from htmxkit.nodes.tags import button, div
    >>> from htmxkit.attributes import hx_get, hx_target
    >>> div(button("Load", hx_get("/api/content"), hx_target("#content")))

"""

from __future__ import annotations

from htmxkit.nodes.elements import TagBuilder

# Document structure
html = TagBuilder("html")
head = TagBuilder("head")
body = TagBuilder("body")
title = TagBuilder("title")
meta = TagBuilder("meta")
link = TagBuilder("link")
style_tag = TagBuilder("style")
script = TagBuilder("script")
noscript = TagBuilder("noscript")
base = TagBuilder("base")

# Sectioning
main = TagBuilder("main")
header = TagBuilder("header")
footer = TagBuilder("footer")
nav = TagBuilder("nav")
section = TagBuilder("section")
article = TagBuilder("article")
aside = TagBuilder("aside")
div = TagBuilder("div")
span = TagBuilder("span")

# Text
p = TagBuilder("p")
h1 = TagBuilder("h1")
h2 = TagBuilder("h2")
h3 = TagBuilder("h3")
h4 = TagBuilder("h4")
h5 = TagBuilder("h5")
h6 = TagBuilder("h6")
hr = TagBuilder("hr")
br = TagBuilder("br")
pre = TagBuilder("pre")
code = TagBuilder("code")
blockquote = TagBuilder("blockquote")
strong = TagBuilder("strong")
em = TagBuilder("em")
b = TagBuilder("b")
i = TagBuilder("i")
small = TagBuilder("small")
a = TagBuilder("a")
img = TagBuilder("img")

# Lists and tables
ul = TagBuilder("ul")
ol = TagBuilder("ol")
li = TagBuilder("li")
dl = TagBuilder("dl")
dt = TagBuilder("dt")
dd = TagBuilder("dd")
table = TagBuilder("table")
thead = TagBuilder("thead")
tbody = TagBuilder("tbody")
tfoot = TagBuilder("tfoot")
tr = TagBuilder("tr")
th = TagBuilder("th")
td = TagBuilder("td")
caption = TagBuilder("caption")

# Forms
form = TagBuilder("form")
label = TagBuilder("label")
button = TagBuilder("button")
select = TagBuilder("select")
option = TagBuilder("option")
textarea = TagBuilder("textarea")
fieldset = TagBuilder("fieldset")
legend = TagBuilder("legend")
input_ = TagBuilder("input")

# Embedded content
template = TagBuilder("template")
iframe = TagBuilder("iframe")
video = TagBuilder("video")
audio = TagBuilder("audio")
source = TagBuilder("source")

__all__ = [
    "a",
    "article",
    "aside",
    "audio",
    "b",
    "base",
    "blockquote",
    "body",
    "br",
    "button",
    "caption",
    "code",
    "dd",
    "div",
    "dl",
    "dt",
    "em",
    "fieldset",
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
    "html",
    "i",
    "iframe",
    "img",
    "input_",
    "label",
    "legend",
    "li",
    "link",
    "main",
    "meta",
    "nav",
    "noscript",
    "ol",
    "option",
    "p",
    "pre",
    "script",
    "section",
    "select",
    "small",
    "source",
    "span",
    "strong",
    "style_tag",
    "table",
    "tbody",
    "td",
    "template",
    "textarea",
    "tfoot",
    "th",
    "thead",
    "title",
    "tr",
    "ul",
    "video",
]
