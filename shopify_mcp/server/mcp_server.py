#!/usr/bin/env python3
"""
Shopify MCP Server
Serves the registered Shopify tools over the MCP stdio transport
"""
import asyncio
import logging
from typing import Any, Dict, List, Optional

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from shopify_mcp.config import Settings, configure_logging, get_settings
from shopify_mcp.errors import ShopifyMCPError
from shopify_mcp.server.models import ToolDefinition, ToolInvocation
from shopify_mcp.server.registry import ToolRegistry
from shopify_mcp.services.shopify import ShopifyService, ShopifyTools, register_shopify_tools

logger = logging.getLogger(__name__)


class ToolCallFailed(ShopifyMCPError):
    """Carries an error result's text to the SDK, which reports it with isError set"""


def to_mcp_tool(definition: ToolDefinition) -> types.Tool:
    return types.Tool(
        name=definition.name,
        description=definition.description,
        inputSchema=definition.input_schema(),
    )


async def call_registered_tool(
    registry: ToolRegistry, name: str, arguments: Optional[Dict[str, Any]]
) -> List[types.TextContent]:
    result = await registry.handle(ToolInvocation(name=name, arguments=arguments or {}))
    text = "\n".join(item.text for item in result.content)
    if result.is_error:
        raise ToolCallFailed(text)
    return [types.TextContent(type="text", text=item.text) for item in result.content]


def build_server(registry: ToolRegistry, settings: Settings) -> Server:
    server = Server(settings.APP_NAME, version=settings.APP_VERSION)

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return [to_mcp_tool(definition) for definition in registry.definitions()]

    @server.call_tool()
    async def call_tool(name: str, arguments: Dict[str, Any]) -> List[types.TextContent]:
        return await call_registered_tool(registry, name, arguments)

    return server


def log_startup(settings: Settings):
    logger.info("Environment variables:")
    logger.info(f'SHOPIFY_STORE_URL: "{settings.SHOPIFY_STORE_URL}"')
    logger.info(f'SHOPIFY_API_VERSION: "{settings.SHOPIFY_API_VERSION}"')
    logger.info(f'SHOPIFY_ACCESS_TOKEN: "{settings.masked_access_token}"')
    logger.info(f'Base URL: "{settings.base_url}"')


async def serve(settings: Settings):
    async with ShopifyService(settings.client_config()) as service:
        registry = register_shopify_tools(ToolRegistry(), ShopifyTools(service))
        server = build_server(registry, settings)

        async with stdio_server() as (read_stream, write_stream):
            logger.info("Shopify MCP Server started")
            await server.run(read_stream, write_stream, server.create_initialization_options())

    logger.info("Shopify MCP Server stopped")


def main():
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
    log_startup(settings)
    try:
        asyncio.run(serve(settings))
    except KeyboardInterrupt:
        logger.info("Shopify MCP Server interrupted")


# Main entry point
if __name__ == "__main__":
    main()
