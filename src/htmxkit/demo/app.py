"""FastAPI demo application.

Serves one page plus the fragment endpoints its htmx attributes call, and
the bundled htmx build itself (no CDN).

Requires: fastapi, uvicorn, python-multipart (``pip install htmxkit[demo]``)

Run:
    htmxkit-demo --port 8080
    # or
    uvicorn --factory htmxkit.demo.app:create_app

"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from datetime import datetime
from typing import Annotated

from fastapi import Depends, FastAPI, Form, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, Response

from htmxkit.assets import Asset, htmx_asset
from htmxkit.demo import pages
from htmxkit.demo.config import DemoConfig
from htmxkit.demo.store import TodoStore
from htmxkit.nodes import Element
from htmxkit.render import render, render_document
from htmxkit.request import HtmxDetails

logger = logging.getLogger(__name__)

ROBOTS_TXT = "User-agent: *\nAllow: /\n"
_LEADING_INT_RE = re.compile(r"[+-]?\d+")


def htmx_details(request: Request) -> HtmxDetails:
    """Dependency: parsed ``HX-*`` headers of the current request."""
    details = HtmxDetails.from_headers(request.headers)
    if details:
        logger.debug(
            "htmx request %s %s (target=%s, trigger=%s)",
            request.method,
            request.url.path,
            details.target,
            details.trigger,
        )
    return details


HtmxDep = Annotated[HtmxDetails, Depends(htmx_details)]


def fragment(html_text: str) -> HTMLResponse:
    """HTML fragment response; cached copies must vary on HX-Request."""
    return HTMLResponse(html_text, headers={"Vary": "HX-Request"})


def parse_todo_id(raw_id: str) -> int | None:
    """Leading integer of *raw_id* (``"12abc"`` -> 12), or None."""
    match = _LEADING_INT_RE.match(raw_id)
    return int(match.group()) if match else None


def create_app(
    store: TodoStore | None = None,
    asset: Asset | None = None,
    config: DemoConfig | None = None,
    clock: Callable[[], datetime] = datetime.now,
) -> FastAPI:
    """Build the demo application.

    Args:
        store: Todo storage; a fresh TodoStore when omitted.
        asset: JavaScript bundle to serve; loaded from the package when
            omitted, so a missing payload fails here rather than on the
            first request.
        config: Server settings; defaults when omitted.
        clock: Source of the time shown by ``/api/time``.

    Raises:
        AssetNotFoundError: If no asset is given and the package lacks one.
    """
    store = store if store is not None else TodoStore()
    asset = asset if asset is not None else htmx_asset()
    config = config if config is not None else DemoConfig()

    app = FastAPI(
        title=config.title,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        dependencies=[Depends(htmx_details)],
    )
    app.state.store = store
    app.state.asset = asset
    app.state.config = config

    logger.info("Serving embedded %s (%d bytes)", asset.name, asset.size)

    def partial(details: HtmxDetails, node: Element) -> HTMLResponse:
        # htmx swaps the bare fragment; a direct visit gets a whole page.
        if details:
            return fragment(render(node))
        return fragment(render_document(pages.standalone_page(config.title, node)))

    @app.get(pages.HTMX_SCRIPT_PATH)
    def htmx_js(request: Request) -> Response:
        headers = {"Cache-Control": asset.cache_control, "ETag": asset.etag}
        if request.headers.get("if-none-match") == asset.etag:
            return Response(status_code=304, headers=headers)
        return Response(asset.data, media_type=asset.mime_type, headers=headers)

    @app.get("/robots.txt")
    def robots() -> PlainTextResponse:
        return PlainTextResponse(ROBOTS_TXT)

    @app.get("/")
    def index() -> HTMLResponse:
        return HTMLResponse(render_document(pages.index_page(config.title)))

    @app.get("/api/content")
    def api_content(details: HtmxDep) -> HTMLResponse:
        return partial(details, pages.content_fragment())

    @app.get("/api/more")
    def api_more(details: HtmxDep) -> HTMLResponse:
        return partial(details, pages.more_fragment())

    @app.get("/api/todos")
    def list_todos(details: HtmxDep) -> HTMLResponse:
        return partial(details, pages.todo_list(store.list()))

    @app.post("/api/todos")
    def add_todo(todo: Annotated[str, Form()] = "") -> HTMLResponse:
        if not todo:
            return fragment("")
        return fragment(render(pages.todo_item(store.add(todo))))

    @app.delete("/api/todos")
    def clear_todos() -> HTMLResponse:
        store.clear()
        return fragment("")

    # An empty id is a no-op; without this route the trailing-slash redirect
    # would resend the DELETE to /api/todos.
    @app.delete("/api/todos/")
    def delete_todo_without_id() -> HTMLResponse:
        return fragment("")

    @app.delete("/api/todos/{todo_id}")
    def delete_todo(todo_id: str) -> HTMLResponse:
        # An empty 200 tells htmx to swap the row out, whether or not it existed.
        parsed = parse_todo_id(todo_id)
        if parsed is not None:
            store.remove(parsed)
        return fragment("")

    @app.get("/api/time")
    def api_time(details: HtmxDep) -> HTMLResponse:
        return partial(details, pages.time_fragment(clock()))

    return app


__all__ = ["ROBOTS_TXT", "create_app", "fragment", "htmx_details", "parse_todo_id"]
