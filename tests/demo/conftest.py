"""Fixtures for the demo application tests."""

from datetime import datetime

import pytest

from htmxkit.demo.store import TodoStore

FIXED_NOW = datetime(2026, 1, 2, 3, 4, 5)


@pytest.fixture
def store() -> TodoStore:
    return TodoStore()


@pytest.fixture
def client(store, fake_asset):
    """TestClient over a fresh app with a fake bundle and a frozen clock."""
    pytest.importorskip("httpx")
    from fastapi.testclient import TestClient

    from htmxkit.demo.app import create_app

    app = create_app(store=store, asset=fake_asset, clock=lambda: FIXED_NOW)
    return TestClient(app)
