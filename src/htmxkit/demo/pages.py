"""Page and fragment builders for the demo server.

Every function returns a fresh node tree; the routes render it once per
request and throw it away.

"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from htmxkit.attributes import (
    hx_confirm,
    hx_delete,
    hx_get,
    hx_post,
    hx_swap,
    hx_target,
    hx_trigger,
)
from htmxkit.demo.store import Todo
from htmxkit.nodes import (
    Element,
    charset,
    class_,
    content,
    defer,
    href,
    id_,
    lang,
    name,
    placeholder,
    raw,
    required,
    src,
    style,
    type_,
)
from htmxkit.nodes.tags import (
    a,
    body,
    button,
    div,
    form,
    h1,
    h2,
    head,
    html,
    input_,
    li,
    main,
    meta,
    p,
    script,
    span,
    strong,
    style_tag,
    title,
    ul,
)

HTMX_SCRIPT_PATH = "/js/htmx.min.js"
TIME_FORMAT = "%Y-%m-%d %H:%M:%S"

DESCRIPTION = (
    "Interactive demo showcasing htmx attributes with htmxkit's typed HTML "
    "generation in Python. Features embedded JavaScript, a todo list, and "
    "live updates."
)

STYLESHEET = """
body { font-family: system-ui, sans-serif; max-width: 800px; margin: 0 auto; padding: 20px; }
.container { background: #f5f5f5; padding: 20px; border-radius: 8px; margin: 20px 0; }
.btn { background: #0056b3; color: white; border: none; padding: 8px 16px; border-radius: 4px; cursor: pointer; margin: 5px; display: inline-flex; align-items: center; }
.btn:hover { background: #004085; }
.btn-success { background: #1e7e34; color: white; }
.btn-success:hover { background: #155724; }
.btn-danger { background: #c82333; color: white; }
.btn-danger:hover { background: #a71e2a; }
.form-input { border: 1px solid #ccc; padding: 8px; border-radius: 4px; margin: 5px; }
.todo-container { min-height: 100px; background: white; border: 1px solid #ddd; padding: 10px; margin: 10px 0; border-radius: 4px; }
.todo-item { padding: 10px; border-bottom: 1px solid #eee; display: flex; justify-content: space-between; align-items: center; }
.htmx-indicator { display: none; }
.htmx-request .htmx-indicator { display: inline; }
"""


def _head(page_title: str) -> Element:
    return head(
        title(page_title),
        meta(charset("UTF-8")),
        meta(name("viewport"), content("width=device-width, initial-scale=1")),
        meta(name("description"), content(DESCRIPTION)),
        style_tag(raw(STYLESHEET)),
    )


def standalone_page(page_title: str, fragment: Element) -> Element:
    """Wrap a fragment in a full page, for direct (non-htmx) visits."""
    return html(
        lang("en"),
        _head(page_title),
        body(
            main(div(id_("content"), class_("container"), fragment)),
            p(a(href("/"), "Back to the demo")),
            script(src(HTMX_SCRIPT_PATH), defer()),
        ),
    )


def index_page(page_title: str = "HTMX + htmxkit Demo") -> Element:
    """The full demo page."""
    return html(
        lang("en"),
        _head(page_title),
        body(
            h1("HTMX + htmxkit Integration Demo"),
            p(
                "This demo showcases htmx attributes working with htmxkit's typed HTML "
                "generation, using embedded JavaScript (no CDN required)."
            ),
            main(
                div(
                    id_("content"),
                    class_("container"),
                    h2("Dynamic Content Area"),
                    p("Click the button below to load content dynamically."),
                ),
                button(
                    "Load Content",
                    hx_get("/api/content"),
                    hx_target("#content"),
                    hx_swap("innerHTML"),
                    class_("btn"),
                ),
                h2("Todo List Demo"),
                div(
                    id_("todo-list"),
                    class_("todo-container"),
                    hx_get("/api/todos"),
                    hx_trigger("load"),
                    hx_swap("innerHTML"),
                ),
                form(
                    hx_post("/api/todos"),
                    hx_target("#todo-list"),
                    hx_swap("beforeend"),
                    style({"display": "flex", "gap": "10px", "margin": "10px 0"}),
                    input_(
                        type_("text"),
                        name("todo"),
                        placeholder("Add a todo..."),
                        required(),
                        class_("form-input"),
                        style({"flex": "1"}),
                    ),
                    button(type_("submit"), "Add Todo", class_("btn", "btn-success")),
                ),
                button(
                    "Clear All",
                    hx_delete("/api/todos"),
                    hx_target("#todo-list"),
                    hx_confirm("Delete all todos?"),
                    hx_swap("innerHTML"),
                    class_("btn", "btn-danger"),
                    style({"margin-top": "10px"}),
                ),
                h2("Auto-refresh Demo"),
                div(
                    id_("live-time"),
                    hx_get("/api/time"),
                    hx_trigger("every 2s"),
                    hx_swap("innerHTML"),
                    class_("container"),
                    "Loading time...",
                ),
            ),
            script(src(HTMX_SCRIPT_PATH), defer()),
        ),
    )


def content_fragment() -> Element:
    return div(
        h2("Content Loaded Successfully!"),
        p("This content was loaded dynamically using htmx and rendered with htmxkit."),
        p("The htmx JavaScript is served directly from the Python application as a bundled asset."),
        button(
            "Load More Content",
            hx_get("/api/more"),
            hx_target("#content"),
            hx_swap("innerHTML"),
            class_("btn"),
        ),
    )


def more_fragment() -> Element:
    return div(
        h2("Even More Content!"),
        p("This demonstrates nested htmx requests working seamlessly."),
        ul(
            li("Typed attribute helpers with a single source of wire keys"),
            li("Immutable trees, safe to render from any thread"),
            li("Embedded JavaScript assets"),
            li("Perfect integration with htmx"),
        ),
    )


def todo_item(todo: Todo) -> Element:
    """One todo row; its delete button removes the row itself."""
    return div(
        class_("todo-item"),
        span(f"{todo.id}. {todo.text}"),
        button(
            "Delete",
            hx_delete(f"/api/todos/{todo.id}"),
            hx_target("closest .todo-item"),
            hx_swap("outerHTML"),
            class_("btn", "btn-danger"),
            style({"font-size": "12px", "padding": "4px 8px"}),
        ),
    )


def todo_list(todos: Iterable[Todo]) -> Element:
    return div([todo_item(todo) for todo in todos])


def time_fragment(now: datetime) -> Element:
    return div(
        p(strong("Current Time: "), now.strftime(TIME_FORMAT)),
        p("This updates every 2 seconds automatically!"),
    )


__all__ = [
    "DESCRIPTION",
    "HTMX_SCRIPT_PATH",
    "STYLESHEET",
    "TIME_FORMAT",
    "content_fragment",
    "index_page",
    "more_fragment",
    "standalone_page",
    "time_fragment",
    "todo_item",
    "todo_list",
]
