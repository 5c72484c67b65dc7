"""
Tool registry and dispatcher
Resolves tool names, validates arguments against the declared parameters
and forwards the handler's result envelope
"""
import logging
from typing import Any, Dict, List, Tuple

from shopify_mcp.errors import ToolAlreadyRegisteredError, ToolArgumentError
from shopify_mcp.server.models import (
    ParamSpec,
    ToolDefinition,
    ToolHandler,
    ToolInvocation,
    ToolResult,
)

logger = logging.getLogger(__name__)


def _check_type(param: ParamSpec, value: Any):
    if param.type == "number":
        valid = isinstance(value, (int, float)) and not isinstance(value, bool)
    else:
        valid = isinstance(value, str)
    if not valid:
        raise ToolArgumentError(
            f"Invalid type for parameter '{param.name}': expected {param.type}"
        )


def validate_arguments(definition: ToolDefinition, arguments: Dict[str, Any]) -> Dict[str, Any]:
    """Check arguments against the tool's ParamSpecs and fill in defaults.

    Unknown keys are dropped. Raises ToolArgumentError on the first
    missing or mistyped parameter.
    """
    known = {p.name for p in definition.params}
    extra = set(arguments) - known
    if extra:
        logger.debug(f"Ignoring unknown arguments for {definition.name}: {sorted(extra)}")

    validated: Dict[str, Any] = {}
    for param in definition.params:
        value = arguments.get(param.name)
        if value is None:
            if param.required and param.name not in arguments:
                raise ToolArgumentError(f"Missing required parameter: {param.name}")
            if param.required:
                # explicit null for a required parameter is a type error
                _check_type(param, value)
            if param.default is not None:
                validated[param.name] = param.default
            continue
        _check_type(param, value)
        validated[param.name] = value
    return validated


class ToolRegistry:
    def __init__(self):
        self._tools: Dict[str, Tuple[ToolDefinition, ToolHandler]] = {}

    def register(self, definition: ToolDefinition, handler: ToolHandler):
        if definition.name in self._tools:
            raise ToolAlreadyRegisteredError(definition.name)
        self._tools[definition.name] = (definition, handler)
        logger.debug(f"Registered tool: {definition.name}")

    def definitions(self) -> List[ToolDefinition]:
        return [definition for definition, _ in self._tools.values()]

    def __contains__(self, name: str) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)

    async def handle(self, invocation: ToolInvocation) -> ToolResult:
        """Dispatch one invocation. Never raises."""
        logger.info(f"Tool call: {invocation.name} args={invocation.arguments}")

        entry = self._tools.get(invocation.name)
        if entry is None:
            logger.warning(f"Unknown tool requested: {invocation.name}")
            return ToolResult.error(f"Unknown tool: {invocation.name}")

        definition, handler = entry
        try:
            arguments = validate_arguments(definition, invocation.arguments)
        except ToolArgumentError as e:
            logger.warning(f"Rejected arguments for {definition.name}: {e}")
            return ToolResult.error(f"Invalid arguments for {definition.name}: {e}")

        try:
            result = await handler(**arguments)
        except Exception as e:
            logger.error(f"Tool {definition.name} raised: {e}", exc_info=True)
            return ToolResult.error(f"Unknown error occurred: {e}")

        if result.is_error:
            logger.warning(f"Tool {definition.name} returned an error result")
        else:
            logger.info(f"Tool {definition.name} completed")
        return result
