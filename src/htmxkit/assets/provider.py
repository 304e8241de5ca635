"""Bundled htmx JavaScript.

The minified htmx build ships inside this package as ``htmx.min.js`` so
applications can serve it themselves instead of pointing at a CDN. The file
is opaque and version-pinned: it is fetched once at build time by
``scripts/fetch_htmx.py`` and never transformed.

Serving it:

    from htmxkit.assets import htmx_asset

    asset = htmx_asset()  # at startup: fails fast if the payload is missing

    @app.get("/js/htmx.min.js")
    def htmx_js() -> Response:
        return Response(
            asset.data,
            media_type=asset.mime_type,
            headers={"Cache-Control": asset.cache_control, "ETag": asset.etag},
        )

Thread-Safety:
The payload is read once per process and cached; the returned Asset and its
bytes are immutable and safe to share.

"""

from __future__ import annotations

import hashlib
import logging
from dataclasses import dataclass
from functools import cache
from importlib import resources

from htmxkit.exceptions import AssetNotFoundError

logger = logging.getLogger(__name__)

HTMX_VERSION = "2.0.4"
HTMX_RESOURCE = "htmx.min.js"
JAVASCRIPT_MIME_TYPE = "application/javascript"
# First bytes of every htmx 2.x minified build.
HTMX_PREFIX = b"var htmx=function()"

# Content never changes for a given build, so clients may cache forever.
IMMUTABLE_CACHE_CONTROL = "public, max-age=31536000, immutable"

# Sanity bounds for a minified htmx build.
MIN_SIZE = 30_000
MAX_SIZE = 100_000
MAX_LINES = 10


def check_payload(data: bytes) -> list[str]:
    """Return the problems with an htmx build (empty if it looks right).

    Checks the ``var htmx=function()`` prefix, a size strictly between
    MIN_SIZE and MAX_SIZE bytes, and at most MAX_LINES newlines.
    """
    problems: list[str] = []
    if not data.startswith(HTMX_PREFIX):
        problems.append(f"does not start with {HTMX_PREFIX!r}")
    if not MIN_SIZE < len(data) < MAX_SIZE:
        problems.append(f"size {len(data)} outside ({MIN_SIZE}, {MAX_SIZE})")
    if data.count(b"\n") > MAX_LINES:
        problems.append(f"does not look minified (more than {MAX_LINES} lines)")
    return problems


@dataclass(frozen=True, slots=True)
class Asset:
    """A static payload plus the metadata needed to serve it."""

    name: str
    data: bytes
    mime_type: str
    version: str

    @property
    def size(self) -> int:
        return len(self.data)

    @property
    def etag(self) -> str:
        """Strong ETag derived from the content (quoted SHA-256 prefix)."""
        return '"' + hashlib.sha256(self.data).hexdigest()[:32] + '"'

    @property
    def cache_control(self) -> str:
        return IMMUTABLE_CACHE_CONTROL


def read_resource(resource: str = HTMX_RESOURCE) -> bytes:
    """Read a bundled resource from this package.

    Raises:
        AssetNotFoundError: If the resource was not packaged.
    """
    path = resources.files(__package__).joinpath(resource)
    try:
        return path.read_bytes()
    except FileNotFoundError as e:
        raise AssetNotFoundError(resource) from e


@cache
def htmx_asset() -> Asset:
    """Return the bundled htmx build, loading it on first call.

    Raises:
        AssetNotFoundError: If ``htmx.min.js`` was not provisioned before the
            package was built.
    """
    data = read_resource(HTMX_RESOURCE)
    logger.debug("Loaded %s (%d bytes, htmx %s)", HTMX_RESOURCE, len(data), HTMX_VERSION)
    return Asset(
        name=HTMX_RESOURCE,
        data=data,
        mime_type=JAVASCRIPT_MIME_TYPE,
        version=HTMX_VERSION,
    )


def javascript() -> bytes:
    """The bundled htmx JavaScript; identical bytes on every call."""
    return htmx_asset().data


def load() -> bytes:
    """Alias of javascript()."""
    return htmx_asset().data


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
