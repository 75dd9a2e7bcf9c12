"""Math Handlers — arithmetic tool implementations.

Invariants:
    - Arguments already validated against the tool schema before the call
    - Integral results render without a fractional part ("Result: 5", not "5.0")
    - Overflowing sums render as Infinity / -Infinity, the JSON-client spelling
"""

import math

from mcp_remote.core.domain_types import ToolArguments
from mcp_remote.core.outcome import ToolResult, ToolText

_NON_FINITE = {math.inf: "Infinity", -math.inf: "-Infinity"}

# Floats beyond this lose integer precision; keep their repr as-is
_MAX_EXACT_FLOAT = 2 ** 53


def format_number(value: float) -> str:
    """Render a number the way a JSON client would print it."""
    if isinstance(value, float) and math.isinf(value):
        return _NON_FINITE[value]
    if isinstance(value, float) and value.is_integer() and abs(value) < _MAX_EXACT_FLOAT:
        return str(int(value))
    return str(value)


class MathHandlers:
    """add — sum of two numbers."""

    async def add(self, arguments: ToolArguments) -> ToolResult:
        total = arguments["a"] + arguments["b"]
        return ToolText(f"Result: {format_number(total)}")
