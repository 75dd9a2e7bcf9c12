"""Service test fixtures — tool registry and dispatcher wired to a mock archive.

Invariants:
    - Every test gets a fresh MockArchiveClient (no shared call log)
    - dispatcher uses the default registry: add, reverse, save_conversation
"""

import pytest

from mcp_remote.services.method_dispatch import Dispatcher, ServerMetadata
from mcp_remote.services.tool_dispatch import ToolDispatch
from mcp_remote.services.tools_registry import build_default_registry
from tests.services.mock_archive import MockArchiveClient


@pytest.fixture
def archive_client():
    return MockArchiveClient()


@pytest.fixture
def registry(archive_client):
    return build_default_registry(archive_client)


@pytest.fixture
def tool_dispatch(registry):
    return ToolDispatch(registry)


@pytest.fixture
def dispatcher(registry):
    return Dispatcher(registry, ServerMetadata())
