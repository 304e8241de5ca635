"""HTTP-level tests for the demo application."""

import pytest

pytest.importorskip("fastapi")

from htmxkit.demo.pages import HTMX_SCRIPT_PATH  # noqa: E402

from ..conftest import assert_contains  # noqa: E402

HTMX_HEADERS = {"HX-Request": "true"}


class TestIndex:
    def test_full_document(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert response.text.startswith('<!DOCTYPE html>\n<html lang="en">')

    def test_page_wiring(self, client):
        html = client.get("/").text
        assert_contains(
            html,
            "<title>HTMX + htmxkit Demo</title>",
            '<meta charset="UTF-8">',
            '<button hx-get="/api/content" hx-target="#content" hx-swap="innerHTML" class="btn">'
            "Load Content</button>",
            '<div id="todo-list" class="todo-container" hx-get="/api/todos" '
            'hx-trigger="load" hx-swap="innerHTML"></div>',
            '<input type="text" name="todo" placeholder="Add a todo..." required '
            'class="form-input" style="flex: 1">',
            'hx-confirm="Delete all todos?"',
            'hx-trigger="every 2s"',
            f'<script src="{HTMX_SCRIPT_PATH}" defer></script>',
        )

    def test_stylesheet_not_escaped(self, client):
        html = client.get("/").text
        assert ".htmx-request .htmx-indicator { display: inline; }" in html

    def test_unknown_path(self, client):
        assert client.get("/nope").status_code == 404


class TestJavaScript:
    def test_serves_bundle(self, client, fake_asset):
        response = client.get(HTMX_SCRIPT_PATH)
        assert response.status_code == 200
        assert response.content == fake_asset.data
        assert response.headers["content-type"].startswith("application/javascript")
        assert response.headers["cache-control"] == fake_asset.cache_control
        assert response.headers["etag"] == fake_asset.etag

    def test_conditional_request(self, client, fake_asset):
        response = client.get(HTMX_SCRIPT_PATH, headers={"If-None-Match": fake_asset.etag})
        assert response.status_code == 304
        assert response.content == b""

    def test_stale_etag(self, client):
        response = client.get(HTMX_SCRIPT_PATH, headers={"If-None-Match": '"stale"'})
        assert response.status_code == 200


class TestRobots:
    def test_allows_all(self, client):
        response = client.get("/robots.txt")
        assert response.status_code == 200
        assert response.text == "User-agent: *\nAllow: /\n"
        assert response.headers["content-type"].startswith("text/plain")


class TestFragments:
    def test_content(self, client):
        response = client.get("/api/content", headers=HTMX_HEADERS)
        assert response.status_code == 200
        assert response.headers["vary"] == "HX-Request"
        assert "<!DOCTYPE" not in response.text
        assert_contains(response.text, "Content Loaded Successfully!", 'hx-get="/api/more"')

    def test_more(self, client):
        response = client.get("/api/more")
        assert_contains(response.text, "Even More Content!", "<ul><li>")

    def test_time_uses_clock(self, client):
        response = client.get("/api/time")
        assert_contains(response.text, "<p><strong>Current Time: </strong>2026-01-02 03:04:05</p>")


class TestFullPageFallback:
    """Fragment routes answer direct visits with a whole page."""

    def test_htmx_request_gets_fragment(self, client):
        response = client.get("/api/todos", headers=HTMX_HEADERS)
        assert not response.text.startswith("<!DOCTYPE")

    def test_direct_visit_gets_document(self, client):
        client.post("/api/todos", data={"todo": "a"})
        response = client.get("/api/todos")
        assert response.status_code == 200
        assert response.headers["vary"] == "HX-Request"
        assert response.text.startswith('<!DOCTYPE html>\n<html lang="en">')
        assert_contains(
            response.text,
            '<div id="content" class="container"><div><div class="todo-item">',
            '<a href="/">Back to the demo</a>',
            f'<script src="{HTMX_SCRIPT_PATH}" defer></script>',
        )

    def test_time_direct_visit(self, client):
        response = client.get("/api/time")
        assert response.text.startswith("<!DOCTYPE html>")
        assert "2026-01-02 03:04:05" in response.text


class TestTodos:
    def test_empty_list(self, client):
        assert client.get("/api/todos", headers=HTMX_HEADERS).text == "<div></div>"

    def test_add_returns_row(self, client, store):
        response = client.post("/api/todos", data={"todo": "Buy milk"}, headers=HTMX_HEADERS)
        assert response.status_code == 200
        assert response.text == (
            '<div class="todo-item"><span>1. Buy milk</span>'
            '<button hx-delete="/api/todos/1" hx-target="closest .todo-item" '
            'hx-swap="outerHTML" class="btn btn-danger" style="font-size: 12px; padding: 4px 8px">'
            "Delete</button></div>"
        )
        assert len(store) == 1

    def test_add_empty_is_ignored(self, client, store):
        response = client.post("/api/todos", data={"todo": ""})
        assert response.status_code == 200
        assert response.text == ""
        assert len(store) == 0

    def test_add_escapes_text(self, client):
        response = client.post("/api/todos", data={"todo": "<script>x</script>"})
        assert "<script>" not in response.text
        assert "1. &lt;script&gt;x&lt;/script&gt;" in response.text

    def test_list_in_order(self, client):
        for text in ("a", "b", "c"):
            client.post("/api/todos", data={"todo": text})
        html = client.get("/api/todos").text
        assert html.index("1. a") < html.index("2. b") < html.index("3. c")

    def test_delete_one(self, client, store):
        client.post("/api/todos", data={"todo": "a"})
        client.post("/api/todos", data={"todo": "b"})
        response = client.delete("/api/todos/1")
        assert response.status_code == 200
        assert response.text == ""
        assert [todo.text for todo in store.list()] == ["b"]

    def test_delete_missing_is_ok(self, client):
        assert client.delete("/api/todos/99").status_code == 200

    def test_delete_non_numeric_is_ok(self, client, store):
        client.post("/api/todos", data={"todo": "a"})
        response = client.delete("/api/todos/abc")
        assert response.status_code == 200
        assert response.text == ""
        assert len(store) == 1

    def test_delete_leading_integer(self, client, store):
        client.post("/api/todos", data={"todo": "a"})
        client.delete("/api/todos/1abc")
        assert len(store) == 0

    def test_delete_empty_id_keeps_list(self, client, store):
        client.post("/api/todos", data={"todo": "a"})
        client.post("/api/todos", data={"todo": "b"})
        response = client.delete("/api/todos/")
        assert response.status_code == 200
        assert response.history == []
        assert response.text == ""
        assert len(store) == 2

    def test_clear(self, client, store):
        for text in ("a", "b"):
            client.post("/api/todos", data={"todo": text})
        response = client.delete("/api/todos")
        assert response.status_code == 200
        assert response.text == ""
        assert client.get("/api/todos", headers=HTMX_HEADERS).text == "<div></div>"

    def test_ids_not_reused_after_clear(self, client):
        client.post("/api/todos", data={"todo": "a"})
        client.delete("/api/todos")
        response = client.post("/api/todos", data={"todo": "b"})
        assert "2. b" in response.text


class TestParseTodoId:
    def test_values(self):
        from htmxkit.demo.app import parse_todo_id

        assert parse_todo_id("12") == 12
        assert parse_todo_id("12abc") == 12
        assert parse_todo_id("-3") == -3
        assert parse_todo_id("abc") is None
        assert parse_todo_id("") is None
