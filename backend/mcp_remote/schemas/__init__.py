"""Pydantic Schemas — JSON-RPC envelope and MCP result shapes.

Invariants:
    - Schemas describe the wire format at the HTTP boundary
    - Field names match the wire (camelCase where MCP uses it)
"""
