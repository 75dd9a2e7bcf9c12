"""MCP Endpoint — POST /mcp carries JSON-RPC envelopes, GET /mcp is informational.

Invariants:
    - NoContent → 204 with an empty body (notifications)
    - Success → 200 with a result envelope
    - Failure → error envelope; 500 for -32603, 400 for every other code
    - Body that is not JSON → -32700, NaN / Infinity constants included
    - JSON that is not an object → -32600
    - Route never inspects method names: classification happens in Dispatcher
"""

import json
import logging

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse

from mcp_remote.core.errors import InvalidRequestError, ParseError, http_status_for
from mcp_remote.core.outcome import Failure, NoContent, Outcome, Success
from mcp_remote.schemas.jsonrpc import (
    ErrorEnvelope, ErrorObject, RequestEnvelope, ResultEnvelope,
)
from mcp_remote.services.method_dispatch import Dispatcher

logger = logging.getLogger(__name__)
router = APIRouter(tags=["mcp"])


def get_dispatcher(request: Request) -> Dispatcher:
    """Dispatcher built by create_app() and stored on app.state."""
    return request.app.state.dispatcher


def _reject_constant(name: str) -> None:
    """NaN and Infinity are not JSON."""
    raise ValueError(f"Invalid JSON constant: {name}")


async def _read_envelope(request: Request) -> RequestEnvelope:
    """Parse the body into a RequestEnvelope or raise a protocol error."""
    raw = await request.body()
    try:
        payload = json.loads(raw, parse_constant=_reject_constant)
    except (ValueError, UnicodeDecodeError):
        raise ParseError()
    if not isinstance(payload, dict):
        raise InvalidRequestError("Invalid Request - expected a JSON object")
    return RequestEnvelope.from_payload(payload)


def to_http_response(outcome: Outcome, rpc_id: object) -> Response:
    """Map a dispatch outcome onto the HTTP response."""
    match outcome:
        case NoContent():
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        case Success(result=result):
            return JSONResponse(
                content=ResultEnvelope(id=rpc_id, result=result).model_dump(),
            )
        case Failure(code=code, message=message):
            return JSONResponse(
                status_code=http_status_for(code),
                content=ErrorEnvelope(
                    id=rpc_id, error=ErrorObject(code=code, message=message),
                ).model_dump(),
            )
    raise TypeError(f"Unsupported outcome: {outcome!r}")


@router.post("/mcp")
async def handle_mcp(
    request: Request, dispatcher: Dispatcher = Depends(get_dispatcher),
):
    """Single JSON-RPC endpoint."""
    envelope = await _read_envelope(request)
    logger.info(
        f"Received MCP request: {envelope.method}",
        extra={"rpc_id": envelope.id, "method": str(envelope.method)},
    )
    outcome = await dispatcher.dispatch(envelope)
    rpc_id = envelope.id if envelope.has_id else None
    response = to_http_response(outcome, rpc_id)
    if isinstance(outcome, Failure):
        logger.warning(
            f"MCP request failed: {outcome.message}",
            extra={
                "rpc_id": rpc_id, "error_code": outcome.code,
                "status_code": response.status_code,
            },
        )
    return response


@router.get("/mcp")
async def describe_mcp():
    """Informational — clients must POST."""
    return {
        "message": "MCP Server is running",
        "note": "Use POST requests for MCP protocol communication",
    }
