"""
Tests for the MCP transport bridge
"""
import json
import logging

import mcp.types as types
import pytest
from mcp.shared.memory import create_connected_server_and_client_session

from shopify_mcp.config import Settings
from shopify_mcp.server.mcp_server import (
    ToolCallFailed,
    build_server,
    call_registered_tool,
    log_startup,
    to_mcp_tool,
)
from shopify_mcp.services.shopify import SEARCH_PRODUCTS


class TestToolListing:
    def test_to_mcp_tool(self):
        tool = to_mcp_tool(SEARCH_PRODUCTS)

        assert isinstance(tool, types.Tool)
        assert tool.name == "search_products"
        assert tool.description == "Search for products by title, vendor, or tags"
        assert tool.inputSchema["required"] == ["query"]
        assert set(tool.inputSchema["properties"]) == {"query", "limit"}

    @pytest.mark.asyncio
    async def test_build_server_registers_handlers(self, registry):
        server = build_server(registry, Settings(_env_file=None))

        assert server.name == "shopify-mcp-server"
        assert types.ListToolsRequest in server.request_handlers
        assert types.CallToolRequest in server.request_handlers


class TestToolCalls:
    @pytest.mark.asyncio
    async def test_success_returns_text_content(self, registry, upstream):
        upstream.respond(200, json={"customers": [{"id": 1}]})

        content = await call_registered_tool(registry, "get_customers", None)

        assert len(content) == 1
        assert content[0].type == "text"
        assert json.loads(content[0].text) == [{"id": 1}]

    @pytest.mark.asyncio
    async def test_error_result_raised_for_sdk(self, registry, upstream):
        upstream.respond(404, json={"errors": "Not Found"})

        with pytest.raises(ToolCallFailed) as excinfo:
            await call_registered_tool(registry, "get_product_details", {"product_id": "1"})

        assert str(excinfo.value) == "Error fetching product: Request failed with status code 404 (Not Found)"

    @pytest.mark.asyncio
    async def test_unknown_tool_raised_for_sdk(self, registry):
        with pytest.raises(ToolCallFailed, match="Unknown tool: delete_everything"):
            await call_registered_tool(registry, "delete_everything", {})


class TestClientSessionRoundTrip:
    """Calls made through an in-memory MCP client session"""

    @pytest.mark.asyncio
    async def test_error_then_success(self, registry, upstream):
        upstream.respond(404, json={"errors": "Not Found"})
        upstream.respond(200, json={"products": [{"id": 1, "title": "Blue Shirt"}]})
        server = build_server(registry, Settings(_env_file=None))

        async with create_connected_server_and_client_session(server) as client:
            failed = await client.call_tool("get_product_details", {"product_id": "999"})
            succeeded = await client.call_tool("get_products", {"limit": 5})

        assert failed.isError is True
        assert failed.content[0].text == "Error fetching product: Request failed with status code 404 (Not Found)"
        assert succeeded.isError is False
        assert json.loads(succeeded.content[0].text) == [{"id": 1, "title": "Blue Shirt"}]
        assert upstream.last_request.url.params["limit"] == "5"

    @pytest.mark.asyncio
    async def test_unknown_tool_and_listing(self, registry):
        server = build_server(registry, Settings(_env_file=None))

        async with create_connected_server_and_client_session(server) as client:
            listed = await client.list_tools()
            result = await client.call_tool("delete_everything", {})

        assert [tool.name for tool in listed.tools][0] == "get_products"
        assert len(listed.tools) == 5
        assert result.isError is True


class TestStartupLogging:
    def test_access_token_is_masked(self, monkeypatch, caplog):
        monkeypatch.setenv("SHOPIFY_STORE_URL", "my-shop.myshopify.com")
        monkeypatch.setenv("SHOPIFY_ACCESS_TOKEN", "shpat_secret_value")
        caplog.set_level(logging.INFO)

        log_startup(Settings(_env_file=None))

        assert "shpat..." in caplog.text
        assert "shpat_secret_value" not in caplog.text
        assert "https://my-shop.myshopify.com/admin/api/" in caplog.text
