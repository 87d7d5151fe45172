"""
Test configuration and fixtures for the Amber API client tests.
Contains canned API payloads and a client factory backed by httpx.MockTransport.
"""

import time
from typing import Any, Callable, Dict, List

import httpx
import pytest
import pytest_asyncio

from amber_api.models import Site
from amber_api.services.amber_client import AmberClient

TEST_BASE_URL = "https://api.test/v1"
TEST_API_KEY = "psk_test_key"


def make_price_payload(**overrides: Any) -> Dict[str, Any]:
    """
    Build a price interval as the API returns it (camelCase keys).
    """
    payload = {
        "type": "ForecastInterval",
        "date": "2026-10-18",
        "duration": 30,
        "startTime": "2026-10-18T02:00:01Z",
        "endTime": "2026-10-18T02:30:00Z",
        "nemTime": "2026-10-18T12:30:00+10:00",
        "perKwh": 24.31,
        "renewables": 41.2,
        "spotPerKwh": 8.72,
        "channelType": "general",
        "spikeStatus": "none",
        "estimate": True,
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def sample_sites_payload() -> List[Dict[str, Any]]:
    """
    Sites as returned by GET /sites, including fields the client ignores.
    """
    return [
        {"id": "01F5A5CRKMZ5BCX9P1S4V990AM", "nmi": "3052282872", "status": "active"},
        {"id": "01G7B2ZQ8N3V4X5Y6Z7A8B9C0D", "nmi": "4102817731", "status": "pending"},
    ]


@pytest.fixture
def sample_site() -> Site:
    """A single site to query prices for."""
    return Site(id="01F5A5CRKMZ5BCX9P1S4V990AM", nmi="3052282872")


@pytest_asyncio.fixture
async def make_client():
    """
    Create a factory for AmberClient instances wired to a request handler.

    The factory returns (client, requests) where requests collects every
    httpx.Request the handler saw, in order. Transports created by the
    factory are closed on teardown.
    """
    http_clients: List[httpx.AsyncClient] = []

    def _make(handler: Callable, **client_kwargs: Any):
        requests: List[httpx.Request] = []

        def _record(request: httpx.Request):
            requests.append(request)
            return handler(request)

        http_client = httpx.AsyncClient(transport=httpx.MockTransport(_record))
        http_clients.append(http_client)
        client = AmberClient(
            TEST_API_KEY,
            base_url=TEST_BASE_URL,
            http_client=http_client,
            **client_kwargs,
        )
        return client, requests

    yield _make

    for http_client in http_clients:
        await http_client.aclose()


def json_handler(payload: Any, status_code: int = 200) -> Callable:
    """Return a handler that always answers with the given JSON payload."""
    def _handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json=payload)
    return _handler


@pytest.fixture
def price_payload() -> Callable:
    """Factory for API price payloads with per-test overrides."""
    return make_price_payload


@pytest.fixture
def json_response() -> Callable:
    """Factory for handlers answering with a fixed JSON payload."""
    return json_handler


@pytest.fixture
def sydney_local_time(monkeypatch):
    """
    Switch the process local timezone to Australia/Sydney for one test.
    """
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    monkeypatch.setenv("TZ", "Australia/Sydney")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()
