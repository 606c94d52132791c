"""Service test fixtures — FastAPI test client with a fake provider behind httpx.

Invariants:
    - Every test gets fresh Settings with fake keys for all four providers
    - get_settings and get_provider_gateway overridden; no network access
    - fake_upstream records every outbound request

Design Decisions:
    - httpx.MockTransport at the gateway boundary: the anthropic SDK and raw
      httpx calls both run for real, only the socket is faked
    - settings fixture is the same object the app sees: tests mutate it
      (e.g. blank a key) before issuing the request
"""

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from llm_relay.api.dependencies import get_provider_gateway
from llm_relay.config import get_settings
from llm_relay.infrastructure.provider_gateway import ProviderGateway
from llm_relay.main import app
from tests.services.fake_upstream import FakeUpstream, make_settings


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def fake_upstream():
    return FakeUpstream()


@pytest.fixture
def gateway(fake_upstream):
    return ProviderGateway(
        timeout_seconds=5, transport=httpx.MockTransport(fake_upstream.handler),
    )


@pytest.fixture
async def client(settings, gateway):
    """FastAPI test client with settings and gateway overridden."""
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_provider_gateway] = lambda: gateway

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
