"""Method Dispatch — classifies one JSON-RPC envelope and routes it to a method handler.

Invariants:
    - Notification (method present, id key absent) → NoContent, always, even if
      its handler raises
    - Call missing jsonrpc, method or id → -32600
    - Routing is a dict lookup: initialize, tools/list, tools/call; else -32601
    - Exceptions while producing a result → -32603 with the exception text
      (the only catch-all)
    - Stateless: the Dispatcher holds only its registry and server metadata

Design Decisions:
    - Explicit method table instead of a switch: the table is testable on its own
    - Dispatcher constructed by create_app() and passed to the route, no module
      singleton
"""

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Mapping

from mcp_remote.core.domain_types import NotificationMethod, RpcMethod
from mcp_remote.core.errors import InternalError, InvalidRequestError, MethodNotFoundError
from mcp_remote.core.outcome import Failure, NoContent, Outcome, Success
from mcp_remote.schemas.jsonrpc import InitializeResult, RequestEnvelope, ServerInfo
from mcp_remote.services.tool_dispatch import ToolDispatch
from mcp_remote.services.tools_registry import ToolRegistry

logger = logging.getLogger(__name__)

MethodHandler = Callable[[Any], Awaitable[Outcome]]


@dataclass(frozen=True)
class ServerMetadata:
    """Static answer to initialize."""
    protocol_version: str = "2025-06-18"
    name: str = "Remote MCP Server"
    version: str = "0.1.0"

    def initialize_result(self) -> dict:
        return InitializeResult(
            protocolVersion=self.protocol_version,
            capabilities={"tools": {}},
            serverInfo=ServerInfo(name=self.name, version=self.version),
        ).model_dump()


_NOTIFICATION_MESSAGES = {
    NotificationMethod.INITIALIZED.value: "Client initialized",
    NotificationMethod.CANCELLED.value: "Request cancelled",
}


class Dispatcher:
    """Routes envelopes → outcomes. One instance per app."""

    def __init__(self, registry: ToolRegistry, metadata: ServerMetadata | None = None):
        self.registry = registry
        self.metadata = metadata or ServerMetadata()
        self._tools = ToolDispatch(registry)
        # Every method → handler mapping lives here
        self._methods: dict[str, MethodHandler] = {
            RpcMethod.INITIALIZE.value: self._initialize,
            RpcMethod.TOOLS_LIST.value: self._tools_list,
            RpcMethod.TOOLS_CALL.value: self._tools.call_tool,
        }

    @property
    def methods(self) -> list[str]:
        return list(self._methods)

    async def dispatch(self, envelope: Mapping[str, Any] | RequestEnvelope) -> Outcome:
        """Classify and route one envelope. Never raises."""
        request = (
            envelope if isinstance(envelope, RequestEnvelope)
            else RequestEnvelope.from_payload(envelope)
        )

        if request.is_notification:
            try:
                self._handle_notification(request.method)
            except Exception:
                logger.exception(
                    f"Failed to handle notification {request.method!r}",
                    extra={"method": str(request.method)},
                )
            return NoContent()

        if not request.is_well_formed_call:
            return Failure.from_error(InvalidRequestError())

        try:
            return await self._route(request)
        except Exception as e:
            logger.error(
                f"Error processing request: {e}",
                exc_info=True,
                extra={"rpc_id": request.id, "method": str(request.method)},
            )
            return Failure.from_error(InternalError(str(e)))

    async def _route(self, request: RequestEnvelope) -> Outcome:
        method = request.method
        handler = self._methods.get(method) if isinstance(method, str) else None
        if handler is None:
            logger.info(
                f"Method not found: {method}",
                extra={"rpc_id": request.id, "method": str(method)},
            )
            return Failure.from_error(MethodNotFoundError(f"Method not found: {method}"))
        return await handler(request.params)

    async def _initialize(self, params: Any) -> Outcome:
        return Success(self.metadata.initialize_result())

    async def _tools_list(self, params: Any) -> Outcome:
        return Success({"tools": self.registry.descriptors()})

    def _handle_notification(self, method: Any) -> None:
        """Log-only side effects. Recognized and unrecognized methods alike."""
        message = _NOTIFICATION_MESSAGES.get(method) if isinstance(method, str) else None
        if message:
            logger.info(message, extra={"method": method})
        else:
            logger.info(f"Unknown notification: {method}", extra={"method": str(method)})
