"""
Shared test fixtures.

Shopify is replaced by an httpx.MockTransport backed by ShopifyStub,
so services run their real HTTP code path without network access.
"""

import sys
from pathlib import Path

# Add project root to Python path
project_dir = Path(__file__).parent.parent
sys.path.insert(0, str(project_dir))

import asyncio
from typing import Any, Callable, Optional, Union

import httpx
import pytest

from config import Settings
from integrations.shopify import ShopifyClient

API_PREFIX = "/admin/api/2024-01"


# ===================
# MOCK SHOPIFY API
# ===================

class ShopifyStub:
    """
    In-memory Shopify Admin API.

    Unconfigured metafield endpoints answer with an empty list.
    """

    def __init__(self):
        self.orders_response: tuple[int, Union[dict, str]] = (200, {"orders": []})
        self.metafield_responses: dict[str, tuple[int, Union[dict, str]]] = {}
        self.unreachable: set[str] = set()
        self.requests: list[httpx.Request] = []

    def set_orders(self, orders: list[dict]):
        """Serve these orders from GET /orders.json."""
        self.orders_response = (200, {"orders": orders})

    def set_orders_response(self, status: int, body: Union[dict, str]):
        """Serve a raw response from GET /orders.json."""
        self.orders_response = (status, body)

    def set_metafields(self, owner_id: int, metafields: list[dict], owner: str = "variant"):
        """Serve these metafields for one variant/product."""
        self.metafield_responses[f"/{owner}s/{owner_id}/metafields.json"] = (200, {"metafields": metafields})

    def set_metafields_response(
        self,
        owner_id: int,
        status: int,
        body: Union[dict, str],
        owner: str = "variant"
    ):
        """Serve a raw response for one variant/product metafields call."""
        self.metafield_responses[f"/{owner}s/{owner_id}/metafields.json"] = (status, body)

    def make_unreachable(self, path: str):
        """Raise a connection error for this path (e.g. "/orders.json")."""
        self.unreachable.add(path)

    def paths(self) -> list[str]:
        """Paths requested so far, without the API prefix."""
        return [r.url.path[len(API_PREFIX):] for r in self.requests]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path[len(API_PREFIX):]

        if path in self.unreachable:
            raise httpx.ConnectError("Connection refused", request=request)

        if path == "/orders.json":
            return self._respond(*self.orders_response)

        if path in self.metafield_responses:
            return self._respond(*self.metafield_responses[path])

        return httpx.Response(200, json={"metafields": []})

    @staticmethod
    def _respond(status: int, body: Union[dict, str]) -> httpx.Response:
        if isinstance(body, str):
            return httpx.Response(status, text=body)
        return httpx.Response(status, json=body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


# ===================
# FIXTURES
# ===================

@pytest.fixture
def test_settings() -> Settings:
    """Settings that ignore the local .env file."""
    return Settings(
        _env_file=None,
        shopify_shop_url="test-shop.myshopify.com",
        shopify_access_token="shpat_test_token",
        shopify_api_version="2024-01",
        metafield_owner="variant",
    )


@pytest.fixture
def shopify_stub() -> ShopifyStub:
    """
    Create a mock Shopify API.

    Usage:
        def test_something(shopify_stub):
            shopify_stub.set_orders([OrderFactory.create()])
    """
    return ShopifyStub()


@pytest.fixture
def call_shopify(test_settings, shopify_stub) -> Callable:
    """
    Run an async callable against a ShopifyClient wired to the stub.

    Usage:
        def test_fetch(call_shopify):
            orders = call_shopify(lambda client: OrderService(client).fetch_orders())
    """
    def _call(fn: Callable[[ShopifyClient], Any], settings: Optional[Settings] = None) -> Any:
        async def _run():
            async with ShopifyClient(settings or test_settings, transport=shopify_stub.transport) as client:
                return await fn(client)
        return asyncio.run(_run())

    return _call


# ===================
# API TEST CLIENT
# ===================

@pytest.fixture
def test_client(test_settings, shopify_stub):
    """
    Create FastAPI test client talking to the Shopify stub.

    Usage:
        def test_endpoint(test_client, shopify_stub):
            shopify_stub.set_orders([...])
            response = test_client.get("/orders-feed")
    """
    from fastapi.testclient import TestClient
    from config import get_settings
    from main import app
    from routes.feed import get_shopify_client

    async def override_shopify_client():
        async with ShopifyClient(test_settings, transport=shopify_stub.transport) as client:
            yield client

    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_shopify_client] = override_shopify_client

    yield TestClient(app)

    app.dependency_overrides.clear()
