"""Tools Registry tests — registration order, lookup, immutability.

Tests cover:
    - Default registry has add, reverse, save_conversation in order
    - descriptors() is idempotent and returns copies
    - Duplicate names and malformed descriptors rejected
"""

import pytest
from pydantic import ValidationError

from mcp_remote.services.tools_registry import RegisteredTool, ToolRegistry


async def _noop(arguments):
    return None


def test_default_tools_in_registration_order(registry):
    assert registry.names() == ["add", "reverse", "save_conversation"]
    assert len(registry) == 3


def test_descriptors_have_mcp_shape(registry):
    for descriptor in registry.descriptors():
        assert set(descriptor) == {"name", "description", "inputSchema"}
        assert descriptor["inputSchema"]["type"] == "object"


def test_descriptors_idempotent(registry):
    assert registry.descriptors() == registry.descriptors()


def test_descriptors_are_copies(registry):
    registry.descriptors()[0]["inputSchema"]["required"].append("c")
    assert registry.get("add").input_schema["required"] == ["a", "b"]


def test_lookup(registry):
    assert "reverse" in registry
    assert registry.get("reverse").name == "reverse"
    assert registry.get("missing") is None


def test_save_conversation_model_enum(registry):
    schema = registry.get("save_conversation").input_schema
    assert "claude" in schema["properties"]["model"]["enum"]
    assert schema["required"] == ["content", "model"]


def test_duplicate_names_rejected():
    tool = RegisteredTool({"name": "x", "description": "", "inputSchema": {}}, _noop)
    with pytest.raises(ValueError, match="Duplicate tool name: x"):
        ToolRegistry([tool, tool])


def test_malformed_descriptor_rejected():
    with pytest.raises(ValidationError):
        ToolRegistry([RegisteredTool({"name": "x"}, _noop)])
