"""
MCP server layer: tool registry, data model and stdio transport
"""

from .models import ParamSpec, TextContent, ToolDefinition, ToolInvocation, ToolResult
from .registry import ToolRegistry, validate_arguments

__all__ = [
    'ParamSpec',
    'TextContent',
    'ToolDefinition',
    'ToolInvocation',
    'ToolResult',
    'ToolRegistry',
    'validate_arguments',
]
