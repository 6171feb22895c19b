"""
pytest configuration and fixtures.

Each test gets its own application built by ``create_app`` so the
in‑memory stores start empty.
"""

import sys
from pathlib import Path
from typing import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

# Add project root to Python path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from products_api.app.core.config import Settings  # noqa: E402
from products_api.app.main import create_app  # noqa: E402


@pytest.fixture
def settings() -> Settings:
    """Test configuration with a fixed time zone and quiet logging."""
    return Settings(log_level="WARNING", log_file=None, time_zone="America/Toronto")


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    return create_app(settings)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_product(client: TestClient):
    """Create a product through the API and return the response body."""

    def _make(name: str = "Widget", price: int = 10) -> dict:
        response = client.post("/products", json={"name": name, "price": price})
        assert response.status_code == 201
        return response.json()

    return _make
