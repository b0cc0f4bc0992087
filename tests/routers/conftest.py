"""Fixtures for HTTP API tests."""

import pytest
from fastapi.testclient import TestClient

from device_gateway.config import Config, get_config
from device_gateway.main import app
from device_gateway.routers.dependencies import (
    get_catalog,
    get_irrigation,
    get_relay,
    get_tv,
)

API_KEY = "test-key"


@pytest.fixture
def client(catalog, mock_irrigation, mock_tv, mock_relay):
    """Test client with all backends replaced by fakes and an API key set."""
    app.dependency_overrides[get_config] = lambda: Config(api_key=API_KEY)
    app.dependency_overrides[get_catalog] = lambda: catalog
    app.dependency_overrides[get_irrigation] = lambda: mock_irrigation
    app.dependency_overrides[get_tv] = lambda: mock_tv
    app.dependency_overrides[get_relay] = lambda: mock_relay

    yield TestClient(app)

    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    """Headers of an authenticated caller owning the sample devices."""
    return {"x-api-key": API_KEY, "x-auth-id": "user-1"}
