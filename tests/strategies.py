"""Shared hypothesis strategies for htmxkit property-based testing.

Provides building blocks for three kinds of input:

- **Text**: arbitrary printable strings, including markup-significant characters
- **Attributes**: valid attribute names and arbitrary values
- **Trees**: finite element trees mixing text, void and non-void elements

Individual test modules compose them into property-specific strategies.
"""

from __future__ import annotations

from hypothesis import strategies as st

from htmxkit.nodes import Attribute, Element, Node, Text

# ---------------------------------------------------------------------------
# Text strategies
# ---------------------------------------------------------------------------

# Printable text (no surrogates, no control characters) so an HTML parser
# hands it back unchanged.
printable_text = st.text(
    alphabet=st.characters(blacklist_categories=("Cs", "Cc")),
    min_size=0,
    max_size=200,
)

# Text made mostly of characters that must be escaped.
markup_heavy_text = st.text(alphabet=st.sampled_from('<>&"\'abc /='), min_size=1, max_size=50)

# ---------------------------------------------------------------------------
# Attribute strategies
# ---------------------------------------------------------------------------

attribute_name = st.from_regex(r"[a-z][a-z0-9\-]{0,15}", fullmatch=True)

attribute = st.builds(Attribute, key=attribute_name, value=st.one_of(st.none(), printable_text))

# ---------------------------------------------------------------------------
# Tree strategies
# ---------------------------------------------------------------------------

container_tag = st.sampled_from(["div", "span", "p", "ul", "li", "section", "button"])
void_tag = st.sampled_from(["br", "hr", "img", "input", "meta"])

text_node: st.SearchStrategy[Node] = st.builds(Text, printable_text)


def _extend(children: st.SearchStrategy[Node]) -> st.SearchStrategy[Node]:
    return st.one_of(
        st.builds(
            Element,
            container_tag,
            st.lists(attribute, max_size=3).map(tuple),
            st.lists(children, max_size=4).map(tuple),
        ),
        st.builds(Element, void_tag, st.lists(attribute, max_size=3).map(tuple)),
    )


# Finite trees: recursion depth and breadth are bounded by max_leaves.
node_tree: st.SearchStrategy[Node] = st.recursive(text_node, _extend, max_leaves=20)
