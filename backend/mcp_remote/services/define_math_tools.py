"""Define Math Tools — MCP tool descriptors for arithmetic tools.

Invariants:
    - All schemas follow MCP tools/list format (name, description, inputSchema)
    - Required fields enforced by schema validation, not handler code
"""

TOOLS_MATH = [
    {
        "name": "add",
        "description": "Return the sum of a and b",
        "inputSchema": {
            "type": "object",
            "properties": {
                "a": {"type": "number"},
                "b": {"type": "number"},
            },
            "required": ["a", "b"],
        },
    },
]
