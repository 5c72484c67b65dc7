"""
Shopify Tools
Store read operations exposed as MCP tools. Each handler issues one GET
against the Admin REST API and wraps the JSON field it needs in a ToolResult.
"""
import json
import logging
from typing import Optional, Union
from urllib.parse import quote

import httpx

from shopify_mcp.server.models import ParamSpec, ToolDefinition, ToolResult
from shopify_mcp.server.registry import ToolRegistry
from shopify_mcp.services.shopify.shopify_service import (
    ShopifyService,
    describe_http_error,
    describe_request_error,
)

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 50

Number = Union[int, float]


def _limit_param(noun: str) -> ParamSpec:
    return ParamSpec(
        name="limit",
        type="number",
        description=f"Maximum number of {noun} to return (default: {DEFAULT_LIMIT})",
        default=DEFAULT_LIMIT,
    )


GET_PRODUCTS = ToolDefinition(
    name="get_products",
    description="Get a list of products from the Shopify store",
    params=(_limit_param("products"),),
)

GET_PRODUCT_DETAILS = ToolDefinition(
    name="get_product_details",
    description="Get detailed information about a specific product",
    params=(
        ParamSpec(
            name="product_id",
            type="string",
            description="ID of the product to fetch",
            required=True,
        ),
    ),
)

GET_ORDERS = ToolDefinition(
    name="get_orders",
    description="Get a list of orders from the Shopify store",
    params=(
        _limit_param("orders"),
        ParamSpec(
            name="status",
            type="string",
            description="Filter orders by status (open, closed, cancelled, any)",
        ),
    ),
)

GET_CUSTOMERS = ToolDefinition(
    name="get_customers",
    description="Get a list of customers from the Shopify store",
    params=(_limit_param("customers"),),
)

SEARCH_PRODUCTS = ToolDefinition(
    name="search_products",
    description="Search for products by title, vendor, or tags",
    params=(
        ParamSpec(
            name="query",
            type="string",
            description="Search query to find products",
            required=True,
        ),
        _limit_param("products"),
    ),
)


def format_limit(limit: Optional[Number]) -> str:
    # 0 and None both fall back to the default
    value = limit or DEFAULT_LIMIT
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value)


def encode_query_value(value: str) -> str:
    """Percent-encode free text the way encodeURIComponent does"""
    return quote(value, safe="!*'()")


class ShopifyTools:
    """Handlers for the five Shopify tools, bound to one ShopifyService"""

    def __init__(self, service: ShopifyService):
        self.service = service

    async def _fetch(self, endpoint: str, field: str, error_prefix: str) -> ToolResult:
        try:
            data = await self.service.get_json(endpoint)
            payload = data.get(field)
        except httpx.HTTPStatusError as e:
            logger.error(f"{error_prefix}: {e}")
            return ToolResult.error(f"{error_prefix}: {describe_http_error(e)}")
        except httpx.RequestError as e:
            logger.error(f"{error_prefix}: {e!r}")
            return ToolResult.error(f"{error_prefix}: {describe_request_error(e)}")
        except Exception as e:
            logger.error(f"Error details: {e!r}")
            return ToolResult.error(f"Unknown error occurred: {e}")

        return ToolResult.text(json.dumps(payload, indent=2, ensure_ascii=False))

    async def get_products(self, limit: Optional[Number] = None) -> ToolResult:
        endpoint = f"products.json?limit={format_limit(limit)}"
        return await self._fetch(endpoint, "products", "Error fetching products")

    async def get_product_details(self, product_id: str) -> ToolResult:
        endpoint = f"products/{product_id}.json"
        return await self._fetch(endpoint, "product", "Error fetching product")

    async def get_orders(self, limit: Optional[Number] = None, status: Optional[str] = None) -> ToolResult:
        endpoint = f"orders.json?limit={format_limit(limit)}"
        if status:
            endpoint += f"&status={status}"
        return await self._fetch(endpoint, "orders", "Error fetching orders")

    async def get_customers(self, limit: Optional[Number] = None) -> ToolResult:
        endpoint = f"customers.json?limit={format_limit(limit)}"
        return await self._fetch(endpoint, "customers", "Error fetching customers")

    async def search_products(self, query: str, limit: Optional[Number] = None) -> ToolResult:
        # passthrough to the upstream title filter, no local ranking
        endpoint = f"products.json?limit={format_limit(limit)}&title={encode_query_value(query)}"
        return await self._fetch(endpoint, "products", "Error searching products")


def register_shopify_tools(registry: ToolRegistry, tools: ShopifyTools) -> ToolRegistry:
    registry.register(GET_PRODUCTS, tools.get_products)
    registry.register(GET_PRODUCT_DETAILS, tools.get_product_details)
    registry.register(GET_ORDERS, tools.get_orders)
    registry.register(GET_CUSTOMERS, tools.get_customers)
    registry.register(SEARCH_PRODUCTS, tools.search_products)
    return registry
