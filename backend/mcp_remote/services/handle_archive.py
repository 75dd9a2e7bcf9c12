"""Archive Handlers — save_conversation delegates to the archive client.

Invariants:
    - The archive call is the only suspension point in request handling
    - ArchiveFailed becomes ToolFailure with the client's reason verbatim
    - No retries: one archive call per tools/call

Design Decisions:
    - Client injected via constructor: tests swap in a fake without patching
"""

import logging
from typing import Protocol

from mcp_remote.core.domain_types import ToolArguments
from mcp_remote.core.outcome import (
    ArchiveFailed, ArchiveResult, ArchiveSaved, ToolFailure, ToolResult, ToolText,
)

logger = logging.getLogger(__name__)


class ArchiveClientLike(Protocol):
    async def archive(self, content: str, model: str) -> ArchiveResult: ...


class ArchiveHandlers:
    """save_conversation — persist content remotely, return its URL."""

    def __init__(self, client: ArchiveClientLike):
        self.client = client

    async def save_conversation(self, arguments: ToolArguments) -> ToolResult:
        result = await self.client.archive(arguments["content"], arguments["model"])
        match result:
            case ArchiveSaved(url=url):
                return ToolText(f"Conversation saved: {url}")
            case ArchiveFailed(reason=reason):
                logger.warning(
                    f"save_conversation failed: {reason}",
                    extra={"tool_name": "save_conversation"},
                )
                return ToolFailure(reason)
        return ToolFailure(f"Unexpected archive result: {result!r}")
