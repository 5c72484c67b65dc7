"""
Tool registry data model
Definitions, invocations and the {content, isError} result envelope
"""
from typing import Any, Callable, Awaitable, Dict, List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class ParamSpec(BaseModel):
    """Declared parameter of a tool"""

    model_config = ConfigDict(frozen=True)

    name: str
    type: Literal["number", "string"]
    description: str
    required: bool = False
    default: Optional[Any] = None

    def json_schema(self) -> Dict[str, Any]:
        schema: Dict[str, Any] = {"type": self.type, "description": self.description}
        if self.default is not None:
            schema["default"] = self.default
        return schema


class ToolDefinition(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    params: Tuple[ParamSpec, ...] = ()

    def input_schema(self) -> Dict[str, Any]:
        """Render the parameters as an MCP inputSchema object"""
        return {
            "type": "object",
            "properties": {p.name: p.json_schema() for p in self.params},
            "required": [p.name for p in self.params if p.required],
        }


class ToolInvocation(BaseModel):
    name: str
    arguments: Dict[str, Any] = Field(default_factory=dict)


class TextContent(BaseModel):
    type: Literal["text"] = "text"
    text: str


class ToolResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    content: List[TextContent]
    is_error: bool = Field(default=False, alias="isError")

    @classmethod
    def text(cls, text: str) -> "ToolResult":
        return cls(content=[TextContent(text=text)])

    @classmethod
    def error(cls, message: str) -> "ToolResult":
        return cls(content=[TextContent(text=message)], is_error=True)


ToolHandler = Callable[..., Awaitable[ToolResult]]
