"""Pytest configuration and fixtures for htmxkit tests."""

import pytest

from htmxkit.assets import HTMX_PREFIX, JAVASCRIPT_MIME_TYPE, Asset, htmx_asset
from htmxkit.exceptions import AssetNotFoundError


@pytest.fixture
def fake_asset() -> Asset:
    """A small stand-in for the htmx bundle (no provisioning needed)."""
    return Asset(
        name="htmx.min.js",
        data=HTMX_PREFIX + b'{"use strict";return{version:"test"}}();',
        mime_type=JAVASCRIPT_MIME_TYPE,
        version="test",
    )


@pytest.fixture
def bundled_asset() -> Asset:
    """The real bundled htmx build; skips when it has not been provisioned."""
    try:
        return htmx_asset()
    except AssetNotFoundError:
        pytest.skip("htmx.min.js not provisioned (run scripts/fetch_htmx.py)")


def assert_contains(rendered: str, *expected_parts: str) -> None:
    """Assert rendered output contains all expected parts.

    Args:
        rendered: The actual rendering result.
        expected_parts: Strings that should all be present in the result.
    """
    for part in expected_parts:
        assert part in rendered, (
            f"Rendered output missing expected content:\n"
            f"  Missing: {part!r}\n"
            f"  Actual: {rendered!r}"
        )
