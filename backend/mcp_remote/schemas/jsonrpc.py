"""JSON-RPC Schemas — Pydantic models for request and response envelopes.

Invariants:
    - RequestEnvelope is lenient: any field type accepted, unknown keys ignored
    - "id absent" (key missing) differs from "id null" (key present, value null)
    - A response envelope carries exactly one of result / error

Design Decisions:
    - Presence tracked via model_fields_set instead of sentinel defaults
    - Field names match the MCP wire format (camelCase) so model_dump() is the
      response body with no aliasing
"""

from typing import Any, Literal, Mapping

from pydantic import BaseModel, ConfigDict, Field

from mcp_remote.core.errors import JSONRPC_VERSION


# ─── Requests ───────────────────────────────────────────────────

class RequestEnvelope(BaseModel):
    """One incoming JSON-RPC message, already parsed from JSON."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    jsonrpc: Any = None
    method: Any = None
    id: Any = None
    params: Any = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "RequestEnvelope":
        return cls.model_validate(dict(payload))

    @property
    def has_id(self) -> bool:
        return "id" in self.model_fields_set

    @property
    def is_notification(self) -> bool:
        return bool(self.method) and not self.has_id

    @property
    def is_well_formed_call(self) -> bool:
        return bool(self.jsonrpc) and bool(self.method) and self.has_id


# ─── Results ────────────────────────────────────────────────────

class ServerInfo(BaseModel):
    name: str
    version: str


class InitializeResult(BaseModel):
    protocolVersion: str
    capabilities: dict[str, Any] = Field(default_factory=lambda: {"tools": {}})
    serverInfo: ServerInfo


class ToolDescriptor(BaseModel):
    """Entry in the tools/list result."""
    name: str
    description: str
    inputSchema: dict[str, Any]


class TextContent(BaseModel):
    type: Literal["text"] = "text"
    text: str


class ToolCallResult(BaseModel):
    content: list[TextContent]


# ─── Envelopes ──────────────────────────────────────────────────

class ErrorObject(BaseModel):
    code: int
    message: str


class ResultEnvelope(BaseModel):
    jsonrpc: Literal["2.0"] = JSONRPC_VERSION
    id: Any = None
    result: dict[str, Any]


class ErrorEnvelope(BaseModel):
    jsonrpc: Literal["2.0"] = JSONRPC_VERSION
    id: Any = None
    error: ErrorObject
