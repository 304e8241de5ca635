"""Tests for the renderer."""

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from htmxkit import Markup, make, render, render_document
from htmxkit.attributes import hx_boost, hx_get, hx_trigger
from htmxkit.nodes import Element, Node, Raw, Text, attr, charset, class_, defer, flag, id_, src
from htmxkit.nodes.tags import br, div, hr, html, input_, li, meta, p, script, span, ul

from .conftest import assert_contains


class TestScenarios:
    """Exact output for representative trees."""

    def test_loading_div(self):
        node = Element(
            "div",
            (hx_get("/api/todos"), hx_trigger("load")),
            (Text("Loading..."),),
        )
        assert render(node) == '<div hx-get="/api/todos" hx-trigger="load">Loading...</div>'

    def test_loading_div_via_builder(self):
        node = div(hx_get("/api/todos"), hx_trigger("load"), "Loading...")
        assert render(node) == '<div hx-get="/api/todos" hx-trigger="load">Loading...</div>'

    def test_boost_true(self):
        assert render(div(make("boost", True))) == '<div hx-boost="true"></div>'

    def test_boost_false(self):
        assert render(div(hx_boost(False))) == '<div hx-boost="false"></div>'

    def test_nested(self):
        node = ul(li("a"), li(span("b"), "c"))
        assert render(node) == "<ul><li>a</li><li><span>b</span>c</li></ul>"

    def test_empty_element(self):
        assert render(div()) == "<div></div>"

    def test_script_with_boolean_attribute(self):
        node = script(src("/js/htmx.min.js"), defer())
        assert render(node) == '<script src="/js/htmx.min.js" defer></script>'


class TestEscaping:
    """Text and attribute values are escaped, Raw is not."""

    def test_text_escaped(self):
        assert render(p('<script>alert("x") & \'y\'</script>')) == (
            "<p>&lt;script&gt;alert(&quot;x&quot;) &amp; &#39;y&#39;&lt;/script&gt;</p>"
        )

    def test_attribute_value_escaped(self):
        node = div(attr("title", 'a "quoted" <value> & more'))
        assert render(node) == '<div title="a &quot;quoted&quot; &lt;value&gt; &amp; more"></div>'

    def test_htmx_json_value_escaped(self):
        node = div(make("vals", '{"key": "value"}'))
        assert render(node) == '<div hx-vals="{&quot;key&quot;: &quot;value&quot;}"></div>'

    def test_raw_verbatim(self):
        assert render(div(Raw("<b>bold</b>"))) == "<div><b>bold</b></div>"

    def test_markup_argument_verbatim(self):
        assert render(div(Markup("<em>x</em>"))) == "<div><em>x</em></div>"

    def test_text_node_never_trusts_markup(self):
        """A Markup wrapped explicitly in Text is still escaped."""
        assert render(div(Text(Markup("<b>")))) == "<div>&lt;b&gt;</div>"

    def test_already_escaped_text_is_escaped_again(self):
        assert render(p("&amp;")) == "<p>&amp;amp;</p>"


class TestVoidElements:
    """Void elements have no closing tag and ignore children."""

    def test_br(self):
        assert render(br()) == "<br>"

    def test_children_ignored(self):
        node = br("should not appear", span("nor this"))
        assert render(node) == "<br>"

    def test_input_with_attributes(self):
        node = input_(attr("type", "text"), attr("name", "todo"), flag("required"))
        assert render(node) == '<input type="text" name="todo" required>'

    def test_void_inside_container(self):
        assert render(p("a", br(), "b", hr())) == "<p>a<br>b<hr></p>"

    def test_meta(self):
        assert render(meta(charset("UTF-8"))) == '<meta charset="UTF-8">'

    def test_case_insensitive(self):
        assert render(Element("BR")) == "<BR>"


class TestAttributes:
    """Attribute ordering and boolean attributes."""

    def test_insertion_order(self):
        node = div(id_("a"), class_("b"), attr("data-x", "c"))
        assert render(node) == '<div id="a" class="b" data-x="c"></div>'

    def test_duplicate_rendered_once_with_last_value(self):
        node = div(class_("first"), id_("x"), class_("last"))
        assert render(node) == '<div class="last" id="x"></div>'

    def test_boolean_attribute_bare(self):
        assert render(div(flag("hidden"))) == "<div hidden></div>"

    def test_empty_string_value_not_boolean(self):
        assert render(div(attr("data-x", ""))) == '<div data-x=""></div>'


class TestPermissive:
    """The renderer does not validate HTML nesting."""

    def test_block_inside_inline(self):
        assert render(span(div("x"))) == "<span><div>x</div></span>"

    def test_text_node_alone(self):
        assert render(Text("a < b")) == "a &lt; b"


class TestDocument:
    def test_doctype_prefix(self):
        out = render_document(html(attr("lang", "en")))
        assert out == '<!DOCTYPE html>\n<html lang="en"></html>'


class TestPurity:
    """Rendering never mutates the tree."""

    def test_idempotent(self):
        node = div(id_("a"), ul(li("1"), li("2")), br("x"))
        assert render(node) == render(node)

    def test_tree_unchanged(self):
        node = div(id_("a"), "x", br("ignored"))
        before = repr(node)
        render(node)
        assert repr(node) == before

    def test_concurrent_rendering(self):
        node = div([li(str(i), class_("row")) for i in range(200)])
        expected = render(node)
        barrier = threading.Barrier(8)

        def worker(_: int) -> str:
            barrier.wait()
            return render(node)

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(worker, range(8)))
        assert results == [expected] * 8


class TestHtmlProtocol:
    """Elements interoperate with __html__-aware code."""

    def test_element_dunder_html(self):
        node = div(id_("x"), "y")
        assert node.__html__() == render(node)

    def test_element_inside_markup(self):
        assert Markup(div("x")) == "<div>x</div>"

    def test_element_embedded_as_child_stays_node(self):
        inner = span("i")
        outer = div(inner)
        assert outer.children == (inner,)
        assert_contains(render(outer), "<div><span>i</span></div>")

    def test_unknown_node_subclass(self):
        class Custom(Node):
            pass

        with pytest.raises(TypeError, match="Cannot render Custom"):
            render(Custom())


class TestEscapeHelpers:
    def test_html_escape_honours_markup(self):
        from htmxkit import html_escape

        assert html_escape("<b>") == "&lt;b&gt;"
        assert html_escape(Markup("<b>")) == "<b>"
        assert html_escape(42) == "42"

    def test_text_and_raw_helpers(self):
        from htmxkit import raw, text

        assert render(div(text("<"), raw("<hr>"))) == "<div>&lt;<hr></div>"
