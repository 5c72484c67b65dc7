class ShopifyMCPError(Exception):
    """Base error for the Shopify MCP server"""


class ToolAlreadyRegisteredError(ShopifyMCPError):
    def __init__(self, name: str):
        super().__init__(f"Tool already registered: {name}")
        self.name = name


class ToolArgumentError(ShopifyMCPError):
    """Raised when invocation arguments do not match a tool's parameters"""
