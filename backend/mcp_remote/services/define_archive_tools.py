"""Define Archive Tools — MCP tool descriptors for conversation archiving.

Invariants:
    - model enum mirrors ModelProvider exactly
    - Descriptor is static: ARCHIVE_BASE_URL is checked at call time, not here
"""

from mcp_remote.core.domain_types import ModelProvider

TOOLS_ARCHIVE = [
    {
        "name": "save_conversation",
        "description": """Save a conversation to the archive service and return a shareable URL.

Pass the full conversation transcript as content and the assistant it was held with as model.
The returned URL can be opened later to read the saved conversation.""",
        "inputSchema": {
            "type": "object",
            "properties": {
                "content": {
                    "type": "string",
                    "description": "The conversation transcript to save",
                },
                "model": {
                    "type": "string",
                    "enum": [p.value for p in ModelProvider],
                    "description": "The assistant the conversation was held with",
                },
            },
            "required": ["content", "model"],
        },
    },
]
