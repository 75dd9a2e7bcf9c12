"""Error Hierarchy — JSON-RPC error codes and typed exceptions for transport failures.

Invariants:
    - Every error carries a JSON-RPC code (JsonRpcErrorCode) and an HTTP status
    - INTERNAL_ERROR maps to 500, every other code maps to 400
    - to_response() produces a complete JSON-RPC error envelope

Design Decisions:
    - Dispatch returns Failure outcomes instead of raising these; exceptions are
      reserved for the HTTP boundary (body parsing, unexpected crashes)
"""

from enum import IntEnum

JSONRPC_VERSION = "2.0"


class JsonRpcErrorCode(IntEnum):
    """Standard JSON-RPC 2.0 error codes used by the server."""
    PARSE_ERROR = -32700
    INVALID_REQUEST = -32600
    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603


def http_status_for(code: int) -> int:
    """Transport status for an error code: 500 for internal, 400 otherwise."""
    if code == JsonRpcErrorCode.INTERNAL_ERROR:
        return 500
    return 400


def error_envelope(rpc_id: object, code: int, message: str) -> dict:
    return {
        "jsonrpc": JSONRPC_VERSION,
        "id": rpc_id,
        "error": {"code": int(code), "message": message},
    }


class McpError(Exception):
    """Base exception for all protocol errors surfaced to the client."""

    def __init__(self, message: str, code: JsonRpcErrorCode):
        super().__init__(message)
        self.message = message
        self.code = code
        self.http_status = http_status_for(code)

    def to_response(self, rpc_id: object = None) -> dict:
        """Convert to a JSON-RPC error envelope."""
        return error_envelope(rpc_id, self.code, self.message)


class ParseError(McpError):
    """Request body is not valid JSON."""
    def __init__(self, message: str = "Parse error"):
        super().__init__(message, JsonRpcErrorCode.PARSE_ERROR)


class InvalidRequestError(McpError):
    """Envelope shape is wrong (missing fields, not an object)."""
    def __init__(self, message: str = "Invalid Request - missing required fields"):
        super().__init__(message, JsonRpcErrorCode.INVALID_REQUEST)


class MethodNotFoundError(McpError):
    """Unknown method or unknown tool name."""
    def __init__(self, message: str):
        super().__init__(message, JsonRpcErrorCode.METHOD_NOT_FOUND)


class InvalidParamsError(McpError):
    """Tool name missing or arguments fail their schema."""
    def __init__(self, message: str):
        super().__init__(message, JsonRpcErrorCode.INVALID_PARAMS)


class InternalError(McpError):
    """Failure while producing a result."""
    def __init__(self, message: str = "Internal error"):
        super().__init__(message, JsonRpcErrorCode.INTERNAL_ERROR)
