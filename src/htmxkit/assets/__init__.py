"""Static assets bundled with htmxkit (the minified htmx build)."""

from htmxkit.assets.provider import (
    HTMX_PREFIX,
    HTMX_RESOURCE,
    HTMX_VERSION,
    IMMUTABLE_CACHE_CONTROL,
    JAVASCRIPT_MIME_TYPE,
    MAX_LINES,
    MAX_SIZE,
    MIN_SIZE,
    Asset,
    check_payload,
    htmx_asset,
    javascript,
    load,
    read_resource,
)

__all__ = [
    "HTMX_PREFIX",
    "HTMX_RESOURCE",
    "HTMX_VERSION",
    "IMMUTABLE_CACHE_CONTROL",
    "JAVASCRIPT_MIME_TYPE",
    "MAX_LINES",
    "MAX_SIZE",
    "MIN_SIZE",
    "Asset",
    "check_payload",
    "htmx_asset",
    "javascript",
    "load",
    "read_resource",
]
