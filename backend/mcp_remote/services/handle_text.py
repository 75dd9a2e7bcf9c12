"""Text Handlers — string tool implementations."""

from mcp_remote.core.domain_types import ToolArguments
from mcp_remote.core.outcome import ToolResult, ToolText


def reverse_text(text: str) -> str:
    """Reverse by Unicode code point. reverse_text(reverse_text(s)) == s."""
    return text[::-1]


class TextHandlers:
    """reverse — text reversed."""

    async def reverse(self, arguments: ToolArguments) -> ToolResult:
        return ToolText(f"Result: {reverse_text(arguments['text'])}")
