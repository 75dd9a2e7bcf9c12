"""Define Text Tools — MCP tool descriptors for string tools."""

TOOLS_TEXT = [
    {
        "name": "reverse",
        "description": "Return the input text reversed",
        "inputSchema": {
            "type": "object",
            "properties": {
                "text": {"type": "string"},
            },
            "required": ["text"],
        },
    },
]
