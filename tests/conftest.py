"""Shared fixtures for all test modules."""
import os

import pytest
from fastapi.testclient import TestClient

os.environ.setdefault("APP_ENV", "development")
os.environ.pop("LEMONSQUEEZY_API_KEY", None)

from app.main import app
from app.routes.refunds import get_refund_orchestrator
from app.services.refund_service import RefundOrchestrator
from tests.fakes import FakeBillingClient, TEST_API_KEY


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def billing():
    return FakeBillingClient()


@pytest.fixture
def orchestrator(billing):
    return RefundOrchestrator(api_key=TEST_API_KEY, client=billing)


@pytest.fixture(autouse=True)
def reset_overrides():
    """Clear dependency overrides so each test picks its own upstream."""
    app.dependency_overrides.clear()
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def use_orchestrator():
    """Route the refund endpoint through the given orchestrator."""

    def _use(orchestrator: RefundOrchestrator) -> None:
        app.dependency_overrides[get_refund_orchestrator] = lambda: orchestrator

    return _use
