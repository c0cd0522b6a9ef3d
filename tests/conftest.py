"""Pytest fixtures for pricing API tests."""

import pytest
from fastapi.testclient import TestClient

from pricing_api.api.endpoints.pricing import get_pricing_source
from pricing_api.api.main import app


class StubPricingSource:
    """Pricing source double: returns ``payload`` or raises ``error``."""

    def __init__(self, payload=None, error=None):
        self.payload = payload if payload is not None else {}
        self.error = error
        self.timeouts = []

    async def fetch_pricing(self, timeout_seconds):
        self.timeouts.append(timeout_seconds)
        if self.error is not None:
            raise self.error
        return self.payload


@pytest.fixture
def pricing_source():
    return StubPricingSource()


@pytest.fixture
def client(pricing_source):
    app.dependency_overrides[get_pricing_source] = lambda: pricing_source
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
    app.dependency_overrides.clear()
