"""API test fixtures — FastAPI app with an injected dispatcher + httpx test client.

Invariants:
    - Every test gets a fresh app and MockArchiveClient
    - Settings built with _env_file=None: no .env leaks into tests
"""

import pytest
from httpx import ASGITransport, AsyncClient

from mcp_remote.config import Settings
from mcp_remote.main import create_app
from mcp_remote.services.method_dispatch import Dispatcher
from mcp_remote.services.tools_registry import build_default_registry
from tests.services.mock_archive import MockArchiveClient


@pytest.fixture
def archive_client():
    return MockArchiveClient()


@pytest.fixture
def app(archive_client):
    settings = Settings(_env_file=None, log_format="text", server_name="Test MCP Server")
    return create_app(settings, Dispatcher(build_default_registry(archive_client)))


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
