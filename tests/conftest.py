"""Pytest configuration and shared fixtures."""

from datetime import datetime, timezone

import pytest

from hello_page.main import create_app

FIXED_NOW = datetime(2026, 10, 17, 22, 45, 0, tzinfo=timezone.utc)
FIXED_SERVER = "TestServer/1.0"


@pytest.fixture
def app():
    return create_app(
        {"TESTING": True},
        server_info=lambda: FIXED_SERVER,
        clock=lambda: FIXED_NOW,
    )


@pytest.fixture
def client(app):
    return app.test_client()
