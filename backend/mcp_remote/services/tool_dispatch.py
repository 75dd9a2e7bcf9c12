"""Tool Dispatch — tools/call routing from tool name to validated handler.

Invariants:
    - Missing params or tool name → -32602, unknown tool → -32601 (never raises)
    - Arguments validated exhaustively before the handler runs (no partial execution)
    - ToolFailure from a handler → -32603 carrying the handler's reason
    - Exceptions from handlers propagate to the method dispatcher's catch-all

Design Decisions:
    - Lookup in ToolRegistry over branching: adding a tool never touches this file
"""

import logging
from typing import Any

from mcp_remote.core.errors import InternalError, InvalidParamsError, MethodNotFoundError
from mcp_remote.core.outcome import Failure, Outcome, Success, ToolFailure, ToolText
from mcp_remote.core.validate_arguments import validate_arguments
from mcp_remote.schemas.jsonrpc import TextContent, ToolCallResult
from mcp_remote.services.tools_registry import ToolRegistry

logger = logging.getLogger(__name__)


class ToolDispatch:
    """Validates a tools/call request and executes the named tool."""

    def __init__(self, registry: ToolRegistry):
        self._registry = registry

    async def call_tool(self, params: Any) -> Outcome:
        """Route params.name → handler. Returns Success or Failure."""
        if not isinstance(params, dict) or not params.get("name"):
            return Failure.from_error(
                InvalidParamsError("Invalid params - missing tool name"),
            )

        name = params["name"]
        tool = self._registry.get(name) if isinstance(name, str) else None
        if tool is None:
            logger.info(f"Unknown tool requested: {name}", extra={"tool_name": str(name)})
            return Failure.from_error(MethodNotFoundError(f"Unknown tool: {name}"))

        arguments = params.get("arguments")
        problems = validate_arguments(tool.input_schema, arguments)
        if problems:
            return Failure.from_error(
                InvalidParamsError(f"Invalid params - {'; '.join(problems)}"),
            )

        result = await tool.handler(arguments or {})
        logger.info(f"Tool call '{name}' completed", extra={"tool_name": name})
        return self._to_outcome(result)

    @staticmethod
    def _to_outcome(result: ToolText | ToolFailure) -> Outcome:
        if isinstance(result, ToolFailure):
            return Failure.from_error(InternalError(result.reason))
        return Success(
            ToolCallResult(content=[TextContent(text=result.text)]).model_dump(),
        )
