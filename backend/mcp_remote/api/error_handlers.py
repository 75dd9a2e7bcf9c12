"""Error Handlers — global exception handlers producing JSON-RPC error envelopes.

Invariants:
    - McpError → its own code and HTTP status, id null (request id unknown)
    - Exception (catch-all) → 500 / -32603, never leaks internal details
    - Dispatch failures never reach these handlers: the route maps them itself
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from mcp_remote.core.errors import InternalError, McpError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_mcp_error_handler(app)
    _register_generic_error_handler(app)


def _register_mcp_error_handler(app: FastAPI) -> None:

    @app.exception_handler(McpError)
    async def mcp_error_handler(request: Request, exc: McpError):
        """Protocol errors raised before dispatch (unparseable body, wrong shape)."""
        logger.warning(
            f"McpError on {request.url.path}: {exc.message}",
            extra={"error_code": int(exc.code), "status_code": exc.http_status},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=InternalError().to_response(None),
        )
