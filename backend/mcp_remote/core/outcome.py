"""Outcomes — tagged result variants returned by dispatch, tools and the archive client.

Invariants:
    - Dispatch produces exactly one of NoContent, Success, Failure
    - Tool handlers return ToolText or ToolFailure, never a bare string
    - The archive client returns ArchiveSaved or ArchiveFailed, never raises for
      remote failures

Design Decisions:
    - Frozen dataclasses + match-friendly unions instead of exceptions as control
      flow; the dispatcher still catches unexpected exceptions as a last resort
"""

from dataclasses import dataclass, field
from typing import Any, Union

from mcp_remote.core.errors import McpError


# ─── Dispatch outcomes ───────────────────────────────────────────

@dataclass(frozen=True)
class NoContent:
    """Notification handled. The transport sends no body."""


@dataclass(frozen=True)
class Success:
    result: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Failure:
    code: int
    message: str

    @classmethod
    def from_error(cls, error: McpError) -> "Failure":
        return cls(code=int(error.code), message=error.message)


Outcome = Union[NoContent, Success, Failure]


# ─── Tool handler results ────────────────────────────────────────

@dataclass(frozen=True)
class ToolText:
    text: str


@dataclass(frozen=True)
class ToolFailure:
    reason: str


ToolResult = Union[ToolText, ToolFailure]


# ─── Archive client results ──────────────────────────────────────

@dataclass(frozen=True)
class ArchiveSaved:
    url: str


@dataclass(frozen=True)
class ArchiveFailed:
    reason: str


ArchiveResult = Union[ArchiveSaved, ArchiveFailed]
