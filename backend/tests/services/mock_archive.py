"""Mock Archive Client — stands in for ArchiveClient in dispatch and route tests.

Invariants:
    - Records every archive() call as {"content", "model"}
    - Returns the configured ArchiveResult, or raises the configured exception
"""

from mcp_remote.core.outcome import ArchiveFailed, ArchiveResult, ArchiveSaved


class MockArchiveClient:
    """Sequenced fake: result (or error) configurable per test."""

    def __init__(
        self,
        result: ArchiveResult | None = None,
        error: Exception | None = None,
    ):
        self.result = result or ArchiveSaved("https://archive.test/c/abc123")
        self.error = error
        self.calls: list[dict] = []

    async def archive(self, content: str, model: str) -> ArchiveResult:
        self.calls.append({"content": content, "model": model})
        if self.error:
            raise self.error
        return self.result


def failing_archive(reason: str = "Archive service returned HTTP 503: down") -> MockArchiveClient:
    return MockArchiveClient(result=ArchiveFailed(reason))
