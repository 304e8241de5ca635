"""Typed helpers, one per htmx behaviour.

Each helper returns an :class:`~htmxkit.nodes.attributes.Attribute` that can
be passed straight to any tag builder. Values are never validated: URLs,
selectors, trigger expressions and swap strategies go out exactly as given.

Example:
    >>> from htmxkit import button, render
    >>> render(button("Load", hx_get("/api/content"), hx_target("#content"), hx_swap("innerHTML")))
    '<button hx-get="/api/content" hx-target="#content" hx-swap="innerHTML">Load</button>'

"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from htmxkit.attributes.registry import HTMX_ATTRIBUTES
from htmxkit.nodes.attributes import Attribute


def _build(name: str, value: object = None) -> Attribute:
    return HTMX_ATTRIBUTES[name].build(value)


def _json_value(payload: str | Mapping[str, Any]) -> str:
    if isinstance(payload, Mapping):
        return json.dumps(payload, separators=(",", ":"))
    return payload


# Core HTTP methods


def hx_get(url: str) -> Attribute:
    """``hx-get``: issue a GET to *url*."""
    return _build("get", url)


def hx_post(url: str) -> Attribute:
    """``hx-post``: issue a POST to *url*."""
    return _build("post", url)


def hx_put(url: str) -> Attribute:
    """``hx-put``: issue a PUT to *url*."""
    return _build("put", url)


def hx_delete(url: str) -> Attribute:
    """``hx-delete``: issue a DELETE to *url*."""
    return _build("delete", url)


def hx_patch(url: str) -> Attribute:
    """``hx-patch``: issue a PATCH to *url*."""
    return _build("patch", url)


# Targeting and content manipulation


def hx_target(selector: str) -> Attribute:
    """``hx-target``: element that receives the response (``"#content"``, ``"closest tr"``)."""
    return _build("target", selector)


def hx_swap(strategy: str) -> Attribute:
    """``hx-swap``: how the response is swapped in.

    Common values: ``innerHTML``, ``outerHTML``, ``beforebegin``, ``afterbegin``,
    ``beforeend``, ``afterend``, ``delete``, ``none``; modifiers such as
    ``"innerHTML swap:1s"`` pass through unchanged.
    """
    return _build("swap", strategy)


def hx_swap_oob(value: str) -> Attribute:
    """``hx-swap-oob``: mark a response element for an out-of-band swap."""
    return _build("swap_oob", value)


# Event handling


def hx_trigger(event: str) -> Attribute:
    """``hx-trigger``: what fires the request (``"click"``, ``"load"``, ``"every 2s"``)."""
    return _build("trigger", event)


# Loading states


def hx_indicator(selector: str) -> Attribute:
    return _build("indicator", selector)


def hx_disabled_elt(selector: str) -> Attribute:
    return _build("disabled_elt", selector)


# Request configuration


def hx_headers(headers: str | Mapping[str, Any]) -> Attribute:
    """``hx-headers``: extra request headers as a JSON object.

    Strings are passed through verbatim; mappings are encoded as compact JSON.
    """
    return _build("headers", _json_value(headers))


def hx_vals(vals: str | Mapping[str, Any]) -> Attribute:
    """``hx-vals``: extra request values as a JSON object (string or mapping)."""
    return _build("vals", _json_value(vals))


def hx_include(selector: str) -> Attribute:
    return _build("include", selector)


def hx_params(params: str) -> Attribute:
    """``hx-params``: ``"*"``, ``"none"``, ``"not a,b"`` or a comma-separated list."""
    return _build("params", params)


# Navigation and history


def hx_boost(enabled: bool) -> Attribute:
    """``hx-boost``: ``"true"`` or ``"false"``, never the input's own text."""
    return _build("boost", enabled)


def hx_push_url(url: str) -> Attribute:
    """``hx-push-url``: ``"true"``, ``"false"`` or a URL to push into history."""
    return _build("push_url", url)


def hx_replace_url(url: str) -> Attribute:
    return _build("replace_url", url)


# User interaction


def hx_confirm(message: str) -> Attribute:
    """``hx-confirm``: ask the user to confirm before sending the request."""
    return _build("confirm", message)


def hx_prompt(message: str) -> Attribute:
    return _build("prompt", message)


# Advanced features


def hx_ext(extensions: str) -> Attribute:
    """``hx-ext``: comma-separated extension names (``"json-enc, morphdom-swap"``)."""
    return _build("ext", extensions)


def hx_select(selector: str) -> Attribute:
    return _build("select", selector)


def hx_select_oob(selector: str) -> Attribute:
    return _build("select_oob", selector)


def hx_sync(strategy: str) -> Attribute:
    """``hx-sync``: e.g. ``"closest form:abort"``, ``"this:drop"``."""
    return _build("sync", strategy)


def hx_encoding(encoding: str) -> Attribute:
    """``hx-encoding``: usually ``"multipart/form-data"`` for file uploads."""
    return _build("encoding", encoding)


def hx_validate() -> Attribute:
    """``hx-validate="true"``: force form validation before the request."""
    return _build("validate")


def hx_sse(value: str) -> Attribute:
    """``hx-sse``: server-sent events source, e.g. ``"connect:/events"``."""
    return _build("sse", value)


def hx_ws(value: str) -> Attribute:
    """``hx-ws``: WebSocket source, e.g. ``"connect:/ws"``."""
    return _build("ws", value)


def hx_preserve() -> Attribute:
    """``hx-preserve="true"``: keep this element untouched across swaps."""
    return _build("preserve")


def hx_disinherit(attrs: str) -> Attribute:
    """``hx-disinherit``: ``"*"`` or space-separated attributes children must not inherit."""
    return _build("disinherit", attrs)


__all__ = [
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
]
