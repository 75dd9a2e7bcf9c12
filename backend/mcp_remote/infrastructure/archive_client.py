"""Archive Client — persists conversations to the remote archive service over HTTP.

Invariants:
    - Never raises for remote failures: every failure path returns ArchiveFailed
    - Missing base URL is reported at call time, not at construction
    - Non-2xx, any non-null "error" field, or a missing "url" all count as failure
    - No retries: one POST per archive() call

Design Decisions:
    - httpx.AsyncClient per call: no connection state shared across requests
    - transport parameter accepts httpx.MockTransport in tests
"""

import logging
from typing import Any

import httpx

from mcp_remote.core.outcome import ArchiveFailed, ArchiveResult, ArchiveSaved

logger = logging.getLogger(__name__)

ARCHIVE_PATH = "/api/conversations"


def _error_detail(response: httpx.Response) -> str:
    """Best-effort detail from an error response body."""
    try:
        payload = response.json()
    except ValueError:
        return response.text.strip() or response.reason_phrase
    if isinstance(payload, dict):
        for key in ("error", "detail", "message"):
            if payload.get(key):
                return str(payload[key])
    return str(payload)


class ArchiveClient:
    """POSTs {content, model} to <base_url>/api/conversations and returns the URL."""

    def __init__(
        self,
        base_url: str | None,
        timeout_seconds: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/") if base_url else None
        self.timeout_seconds = timeout_seconds
        self._transport = transport

    async def archive(self, content: str, model: str) -> ArchiveResult:
        """Save content remotely. Returns ArchiveSaved(url) or ArchiveFailed(reason)."""
        if not self.base_url:
            return ArchiveFailed("ARCHIVE_BASE_URL is not configured")

        url = f"{self.base_url}{ARCHIVE_PATH}"
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout_seconds, transport=self._transport,
            ) as client:
                response = await client.post(
                    url, json={"content": content, "model": model},
                )
        except httpx.HTTPError as e:
            logger.warning(f"Archive request to {url} failed: {e}")
            return ArchiveFailed(f"Archive service unreachable: {e}")

        return self._unwrap(response)

    def _unwrap(self, response: httpx.Response) -> ArchiveResult:
        if not response.is_success:
            return ArchiveFailed(
                f"Archive service returned HTTP {response.status_code}: "
                f"{_error_detail(response)}",
            )
        try:
            payload: Any = response.json()
        except ValueError:
            return ArchiveFailed("Archive service returned a non-JSON response")
        if not isinstance(payload, dict):
            return ArchiveFailed("Archive service returned an unexpected payload")
        if payload.get("error") is not None:
            return ArchiveFailed(f"Archive service error: {payload['error']}")
        url = payload.get("url")
        if not isinstance(url, str) or not url:
            return ArchiveFailed("Archive service response missing url")
        logger.info(f"Conversation archived at {url}")
        return ArchiveSaved(url)
