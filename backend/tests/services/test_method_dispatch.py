"""Method Dispatch — classification, envelope validation and method routing.

Tests cover:
    - Notifications (no id key) → NoContent for any method, even when handling fails
    - Missing jsonrpc / method / id → -32600
    - initialize static, tools/list idempotent, unknown method → -32601
    - Exceptions from handlers → -32603 with the exception text
    - A failing request does not affect the next one
"""

import logging

import pytest

from mcp_remote.core.outcome import Failure, NoContent, Success
from mcp_remote.schemas.jsonrpc import RequestEnvelope
from mcp_remote.services.method_dispatch import Dispatcher, ServerMetadata
from mcp_remote.services.tools_registry import build_default_registry
from tests.services.mock_archive import MockArchiveClient


def _call(method, params=None, id_=1):
    envelope = {"jsonrpc": "2.0", "id": id_, "method": method}
    if params is not None:
        envelope["params"] = params
    return envelope


# ─── Notifications ──────────────────────────────────────────────

@pytest.mark.parametrize("method", [
    "notifications/initialized", "notifications/cancelled",
    "notifications/whatever", "tools/call", "initialize",
])
async def test_notification_returns_no_content(dispatcher, method):
    outcome = await dispatcher.dispatch({"jsonrpc": "2.0", "method": method})
    assert outcome == NoContent()


async def test_notification_without_jsonrpc_still_no_content(dispatcher):
    assert await dispatcher.dispatch({"method": "notifications/initialized"}) == NoContent()


async def test_notification_logs_recognized_method(dispatcher, caplog):
    with caplog.at_level(logging.INFO):
        await dispatcher.dispatch({"jsonrpc": "2.0", "method": "notifications/initialized"})
    assert "Client initialized" in caplog.text


async def test_notification_logs_unknown_method(dispatcher, caplog):
    with caplog.at_level(logging.INFO):
        await dispatcher.dispatch({"jsonrpc": "2.0", "method": "notifications/odd"})
    assert "Unknown notification: notifications/odd" in caplog.text


async def test_notification_handler_failure_still_no_content(dispatcher, monkeypatch):
    def explode(method):
        raise RuntimeError("logging backend down")

    monkeypatch.setattr(dispatcher, "_handle_notification", explode)
    outcome = await dispatcher.dispatch({"jsonrpc": "2.0", "method": "notifications/cancelled"})
    assert outcome == NoContent()


# ─── Envelope validation ────────────────────────────────────────

@pytest.mark.parametrize("envelope", [
    {"id": 1, "method": "initialize"},
    {"jsonrpc": "", "id": 1, "method": "initialize"},
    {"jsonrpc": "2.0", "id": 1},
    {"jsonrpc": "2.0", "id": 1, "method": ""},
    {"jsonrpc": "2.0"},
    {},
])
async def test_missing_required_fields(dispatcher, envelope):
    outcome = await dispatcher.dispatch(envelope)
    assert outcome == Failure(-32600, "Invalid Request - missing required fields")


async def test_null_id_is_a_call_not_a_notification(dispatcher):
    outcome = await dispatcher.dispatch({"jsonrpc": "2.0", "id": None, "method": "initialize"})
    assert isinstance(outcome, Success)


def test_envelope_presence_tracking():
    assert RequestEnvelope.from_payload({"method": "x"}).is_notification
    assert not RequestEnvelope.from_payload({"method": "x", "id": None}).is_notification
    assert RequestEnvelope.from_payload({"jsonrpc": "2.0", "method": "x", "id": 0}).is_well_formed_call


# ─── Routing ────────────────────────────────────────────────────

async def test_initialize_static_metadata(dispatcher):
    first = await dispatcher.dispatch(_call("initialize"))
    second = await dispatcher.dispatch(_call("initialize", {"protocolVersion": "1999-01-01"}, 2))
    assert first == second
    assert first.result == {
        "protocolVersion": "2025-06-18",
        "capabilities": {"tools": {}},
        "serverInfo": {"name": "Remote MCP Server", "version": "0.1.0"},
    }


async def test_initialize_uses_configured_metadata(registry):
    dispatcher = Dispatcher(registry, ServerMetadata("2024-11-05", "Test Server", "9.9.9"))
    outcome = await dispatcher.dispatch(_call("initialize"))
    assert outcome.result["protocolVersion"] == "2024-11-05"
    assert outcome.result["serverInfo"] == {"name": "Test Server", "version": "9.9.9"}


async def test_tools_list_idempotent(dispatcher, registry):
    first = await dispatcher.dispatch(_call("tools/list"))
    await dispatcher.dispatch(_call("tools/call", {"name": "add", "arguments": {"a": 1, "b": 1}}))
    second = await dispatcher.dispatch(_call("tools/list"))
    assert first == second
    assert [t["name"] for t in first.result["tools"]] == registry.names()


async def test_unknown_method(dispatcher):
    outcome = await dispatcher.dispatch(_call("resources/list"))
    assert outcome == Failure(-32601, "Method not found: resources/list")


async def test_method_table(dispatcher):
    assert dispatcher.methods == ["initialize", "tools/list", "tools/call"]


async def test_tools_call_end_to_end(dispatcher):
    outcome = await dispatcher.dispatch(_call("tools/call", {"name": "add", "arguments": {"a": 2, "b": 3}}))
    assert outcome == Success({"content": [{"type": "text", "text": "Result: 5"}]})


# ─── Internal errors ────────────────────────────────────────────

async def test_handler_exception_becomes_internal_error():
    client = MockArchiveClient(error=ConnectionError("archive socket closed"))
    dispatcher = Dispatcher(build_default_registry(client))
    outcome = await dispatcher.dispatch(_call("tools/call", {
        "name": "save_conversation",
        "arguments": {"content": "c", "model": "claude"},
    }))
    assert outcome == Failure(-32603, "archive socket closed")


async def test_failure_does_not_affect_next_request():
    client = MockArchiveClient(error=RuntimeError("boom"))
    dispatcher = Dispatcher(build_default_registry(client))
    failed = await dispatcher.dispatch(_call("tools/call", {
        "name": "save_conversation",
        "arguments": {"content": "c", "model": "claude"},
    }))
    ok = await dispatcher.dispatch(_call("tools/call", {"name": "reverse", "arguments": {"text": "ab"}}, 2))
    assert failed.code == -32603
    assert ok.result["content"][0]["text"] == "Result: ba"
