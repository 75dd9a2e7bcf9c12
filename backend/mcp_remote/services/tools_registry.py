"""Tools Registry — immutable mapping from tool name to {descriptor, handler}.

Invariants:
    - descriptors() returns tools in registration order, same list every call
    - Duplicate tool names and malformed descriptors rejected at construction
    - Registry never mutated after construction (tuple + MappingProxyType)

Design Decisions:
    - Explicit build_default_registry(): every tool → handler pairing visible in
      one place, no auto-discovery
    - Descriptor schemas live in define_*_tools.py, handlers in handle_*.py
"""

import copy
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Awaitable, Callable, Iterable

from mcp_remote.core.domain_types import ToolArguments
from mcp_remote.core.outcome import ToolResult
from mcp_remote.schemas.jsonrpc import ToolDescriptor
from mcp_remote.services.define_archive_tools import TOOLS_ARCHIVE
from mcp_remote.services.define_math_tools import TOOLS_MATH
from mcp_remote.services.define_text_tools import TOOLS_TEXT
from mcp_remote.services.handle_archive import ArchiveClientLike, ArchiveHandlers
from mcp_remote.services.handle_math import MathHandlers
from mcp_remote.services.handle_text import TextHandlers

ToolHandler = Callable[[ToolArguments], Awaitable[ToolResult]]


@dataclass(frozen=True)
class RegisteredTool:
    descriptor: dict[str, Any]
    handler: ToolHandler

    @property
    def name(self) -> str:
        return self.descriptor["name"]

    @property
    def input_schema(self) -> dict[str, Any]:
        return self.descriptor.get("inputSchema", {})


class ToolRegistry:
    """Lookup table for tools/list and tools/call."""

    def __init__(self, tools: Iterable[RegisteredTool]):
        ordered = tuple(tools)
        by_name: dict[str, RegisteredTool] = {}
        for tool in ordered:
            ToolDescriptor.model_validate(tool.descriptor)
            if tool.name in by_name:
                raise ValueError(f"Duplicate tool name: {tool.name}")
            by_name[tool.name] = tool
        self._ordered = ordered
        self._by_name = MappingProxyType(by_name)

    def get(self, name: str) -> RegisteredTool | None:
        return self._by_name.get(name)

    def names(self) -> list[str]:
        return [t.name for t in self._ordered]

    def descriptors(self) -> list[dict[str, Any]]:
        """Tool descriptors for tools/list, in registration order."""
        return [copy.deepcopy(t.descriptor) for t in self._ordered]

    def __len__(self) -> int:
        return len(self._ordered)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name


def _descriptor(tools: list[dict], name: str) -> dict:
    return next(t for t in tools if t["name"] == name)


def build_default_registry(archive_client: ArchiveClientLike) -> ToolRegistry:
    """add, reverse, save_conversation — in that order."""
    math = MathHandlers()
    text = TextHandlers()
    archive = ArchiveHandlers(archive_client)

    return ToolRegistry([
        RegisteredTool(_descriptor(TOOLS_MATH, "add"), math.add),
        RegisteredTool(_descriptor(TOOLS_TEXT, "reverse"), text.reverse),
        RegisteredTool(
            _descriptor(TOOLS_ARCHIVE, "save_conversation"),
            archive.save_conversation,
        ),
    ])
