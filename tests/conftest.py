"""
Shared fixtures: a stub Shopify upstream behind httpx.MockTransport
"""
from typing import Any, Callable, List, Optional

import httpx
import pytest
import pytest_asyncio

from shopify_mcp.config import ShopifyClientConfig
from shopify_mcp.server.registry import ToolRegistry
from shopify_mcp.services.shopify import ShopifyService, ShopifyTools, register_shopify_tools

BASE_URL = "https://test-shop.myshopify.com/admin/api/2024-04"
ACCESS_TOKEN = "shpat_test_token"


class StubUpstream:
    """Records requests and answers from a queue, falling back to a 200"""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self._queue: List[Callable[[httpx.Request], httpx.Response]] = []
        self.default_body: Any = {}

    def respond(self, status_code: int = 200, json: Any = None, content: Optional[bytes] = None):
        def build(request: httpx.Request) -> httpx.Response:
            if content is not None:
                return httpx.Response(status_code, content=content)
            return httpx.Response(status_code, json=json if json is not None else {})

        self._queue.append(build)

    def fail(self, error_class=httpx.ConnectError, message: str = "connection refused"):
        def build(request: httpx.Request) -> httpx.Response:
            raise error_class(message, request=request)

        self._queue.append(build)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._queue:
            return self._queue.pop(0)(request)
        return httpx.Response(200, json=self.default_body)


@pytest.fixture
def client_config():
    return ShopifyClientConfig(base_url=BASE_URL, access_token=ACCESS_TOKEN)


@pytest.fixture
def upstream():
    return StubUpstream()


@pytest_asyncio.fixture
async def service(client_config, upstream):
    client = httpx.AsyncClient(transport=httpx.MockTransport(upstream))
    async with ShopifyService(client_config, client=client) as service:
        yield service


@pytest.fixture
def shopify_tools(service):
    return ShopifyTools(service)


@pytest.fixture
def registry(shopify_tools):
    return register_shopify_tools(ToolRegistry(), shopify_tools)
