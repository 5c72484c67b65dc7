"""
Shopify MCP Server
Exposes Shopify Admin API read operations as Model Context Protocol tools
"""

__version__ = "1.0.0"
